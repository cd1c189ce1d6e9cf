"""Runtime configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

from .collector import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS


DEFAULT_ROOTS = ("server/src", "client/src")


def _split_list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """Parse a comma-separated environment value, falling back to a default."""
    if not value:
        return default
    items = tuple(item.strip() for item in value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class ReviewSettings:
    """Settings for a review run.

    Roots are resolved against ``project_root``; relative paths in the report
    are computed from it as well.
    """

    project_root: Path
    roots: tuple[str, ...] = DEFAULT_ROOTS
    extensions: tuple[str, ...] = tuple(sorted(DEFAULT_EXTENSIONS))
    excluded_dirs: tuple[str, ...] = tuple(sorted(DEFAULT_EXCLUDED_DIRS))
    api_token: str | None = None
    max_workers: int = 1

    def resolved_roots(self) -> list[Path]:
        return [self.project_root / root for root in self.roots]


def load_settings() -> ReviewSettings:
    """Build settings from CODE_REVIEW_* environment variables.

    Raises:
        ValueError: If CODE_REVIEW_MAX_WORKERS is not a positive integer.
    """
    project_root = Path(os.environ.get("CODE_REVIEW_PROJECT_ROOT") or os.getcwd()).resolve()

    raw_workers = os.environ.get("CODE_REVIEW_MAX_WORKERS", "1")
    try:
        max_workers = int(raw_workers)
    except ValueError as e:
        raise ValueError(f"CODE_REVIEW_MAX_WORKERS must be an integer, got {raw_workers!r}") from e
    if max_workers < 1:
        raise ValueError(f"CODE_REVIEW_MAX_WORKERS must be at least 1, got {max_workers}")

    return ReviewSettings(
        project_root=project_root,
        roots=_split_list(os.environ.get("CODE_REVIEW_ROOTS"), DEFAULT_ROOTS),
        extensions=_split_list(
            os.environ.get("CODE_REVIEW_EXTENSIONS"), tuple(sorted(DEFAULT_EXTENSIONS))
        ),
        excluded_dirs=_split_list(
            os.environ.get("CODE_REVIEW_EXCLUDE_DIRS"), tuple(sorted(DEFAULT_EXCLUDED_DIRS))
        ),
        api_token=os.environ.get("CODE_REVIEW_API_TOKEN") or None,
        max_workers=max_workers,
    )
