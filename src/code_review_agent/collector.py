"""Utility for collecting source files from project directories."""

import os
from pathlib import Path
from typing import Generator, Iterable


# ECMAScript-family sources reviewed by default
DEFAULT_EXTENSIONS: frozenset[str] = frozenset({".js", ".ts", ".tsx", ".jsx"})

# Dependency caches, VCS metadata, schema definitions and build output
DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset({
    "node_modules",
    ".git",
    "prisma",
    "dist",
})


def _walk(
    directory: Path,
    extensions: frozenset[str] | set[str],
    excluded_dir_names: frozenset[str] | set[str],
) -> Generator[Path, None, None]:
    """Depth-first walk yielding matching files in directory listing order.

    Entries are not sorted: files and sub-directories are visited in the
    order ``os.scandir`` returns them. Errors from unreadable directories
    propagate.
    """
    with os.scandir(directory) as it:
        entries = list(it)

    for entry in entries:
        if entry.name in excluded_dir_names:
            continue

        path = directory / entry.name
        if entry.is_dir():
            yield from _walk(path, extensions, excluded_dir_names)
        elif path.suffix in extensions:
            yield path


def collect(
    roots: Iterable[str | Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    excluded_dir_names: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> list[Path]:
    """
    Collect source files beneath each root.

    Args:
        roots: Directories to scan, in order. Missing roots contribute nothing.
        extensions: File suffixes to include (case-sensitive, with the dot)
        excluded_dir_names: Bare entry names to skip at any depth

    Returns:
        List of file paths, concatenated in root order (not deduplicated)

    Raises:
        OSError: If an existing root or one of its sub-directories cannot be read.
    """
    extensions = frozenset(extensions)
    excluded_dir_names = frozenset(excluded_dir_names)

    files: list[Path] = []
    for root in roots:
        root_path = Path(root)
        if not root_path.exists():
            continue
        files.extend(_walk(root_path, extensions, excluded_dir_names))

    return files
