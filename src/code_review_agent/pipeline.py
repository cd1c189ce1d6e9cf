"""Review pipeline: collect, analyze, score, suggest, fix, aggregate."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

from .analyzer import analyze, normalize_newlines
from .collector import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS, collect
from .fixer import fix
from .models import FileResult, ReviewReport, ReviewSummary, SkippedFile
from .scorer import grade_for, overall_score, score, verdict_for
from .suggestions import suggest

logger = logging.getLogger(__name__)


def review_text(text: str, file_name: str, relative_path: str | None = None) -> FileResult:
    """Review in-memory source text and build its FileResult.

    The fixer only runs when at least one issue was found; a clean file's
    fixed text is its original text.
    """
    text = normalize_newlines(text)
    issues = analyze(text)
    file_score, grade = score(issues)

    return FileResult(
        file_name=file_name,
        relative_path=relative_path if relative_path is not None else file_name,
        line_count=len(text.split("\n")),
        issues=issues,
        score=file_score,
        grade=grade,
        suggestions=suggest(issues),
        fixed_text=fix(text) if issues else text,
    )


def _display_path(file_path: Path, base_path: Path) -> str:
    try:
        return file_path.relative_to(base_path).as_posix()
    except ValueError:
        return file_path.as_posix()


def review_file(file_path: str | Path, base_path: str | Path | None = None) -> FileResult:
    """
    Read and review a single file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    file_path = Path(file_path)
    base_path = Path(base_path) if base_path is not None else Path.cwd()

    text = file_path.read_text(encoding="utf-8-sig")
    return review_text(text, file_path.name, _display_path(file_path, base_path))


def _review_or_skip(file_path: Path, base_path: Path) -> FileResult | SkippedFile:
    try:
        return review_file(file_path, base_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping unreadable file {file_path}: {e}")
        return SkippedFile(path=_display_path(file_path, base_path), error=str(e))


def summarize(files: list[FileResult]) -> ReviewSummary:
    """Fold per-file results into the project summary."""
    summary = ReviewSummary(total_files=len(files))

    for result in files:
        summary.total_issues += len(result.issues)
        if result.issues:
            summary.files_with_issues += 1
        else:
            summary.clean_files += 1

    summary.overall_score = overall_score([result.score for result in files])
    summary.overall_grade = grade_for(summary.overall_score)
    summary.verdict = verdict_for(summary.overall_score)
    return summary


def run_review(
    roots: Iterable[str | Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    excluded_dir_names: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
    base_path: str | Path | None = None,
    max_workers: int = 1,
) -> ReviewReport:
    """
    Review every source file beneath the given roots.

    Files that cannot be read are logged and listed in ``report.skipped``;
    they are not counted in the summary. Collection errors propagate.

    Args:
        roots: Directories to scan, in order
        extensions: File suffixes to include
        excluded_dir_names: Directory names to skip at any depth
        base_path: Base for relative paths in the report (defaults to cwd)
        max_workers: Files reviewed concurrently; results keep collection order

    Returns:
        ReviewReport with per-file results and the aggregate summary
    """
    base_path = Path(base_path) if base_path is not None else Path.cwd()
    file_paths = collect(roots, extensions, excluded_dir_names)
    logger.info(f"Reviewing {len(file_paths)} file(s) (workers: {max_workers})")

    if max_workers > 1 and len(file_paths) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(lambda p: _review_or_skip(p, base_path), file_paths))
    else:
        outcomes = [_review_or_skip(p, base_path) for p in file_paths]

    files = [o for o in outcomes if isinstance(o, FileResult)]
    skipped = [o for o in outcomes if isinstance(o, SkippedFile)]

    return ReviewReport(files=files, summary=summarize(files), skipped=skipped)
