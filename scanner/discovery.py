"""File discovery utilities for scanning source trees."""

import logging
import os
import re
from pathlib import Path
from typing import Iterator, List, Pattern, Union

from .config import DEFAULT_EXCLUDE_PATTERN, DEFAULT_INCLUDE_PATTERN
from .errors import FileSystemError

logger = logging.getLogger(__name__)

PatternLike = Union[str, Pattern[str]]


def _compile(pattern: PatternLike) -> Pattern[str]:
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern


def iter_files(
    root: Union[str, Path],
    include_pattern: PatternLike = DEFAULT_INCLUDE_PATTERN,
    exclude_pattern: PatternLike = DEFAULT_EXCLUDE_PATTERN,
) -> Iterator[str]:
    """
    Iterate over source files in a directory tree.

    Every subdirectory is descended, without a depth limit. Within a
    directory, entries are visited in name order: first the directory's own
    files, then each subdirectory in turn. Symbolic links are skipped, so
    every file is reported once and link cycles are never followed.

    Args:
        root: Root directory to scan.
        include_pattern: Regex a file name must match (searched, not anchored).
        exclude_pattern: Regex a file name must not match.

    Yields:
        Absolute, normalized file paths using '/' separators.

    Raises:
        FileSystemError: If root or any directory below it cannot be listed.
    """
    include = _compile(include_pattern)
    exclude = _compile(exclude_pattern)

    root_path = Path(os.path.abspath(root))
    if not root_path.is_dir():
        raise FileSystemError(str(root_path), "not a directory")

    def _walk(current: Path) -> Iterator[str]:
        try:
            entries = sorted(current.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise FileSystemError(str(current), e.strerror or str(e)) from e

        subdirs: List[Path] = []
        for entry in entries:
            # Symlinks are neither regular files nor directories here
            if entry.is_symlink():
                continue
            if entry.is_dir():
                subdirs.append(entry)
            elif entry.is_file():
                if include.search(entry.name) and not exclude.search(entry.name):
                    yield os.path.normpath(str(entry)).replace("\\", "/")

        for subdir in subdirs:
            yield from _walk(subdir)

    yield from _walk(root_path)


def collect_files(
    root: Union[str, Path],
    include_pattern: PatternLike = DEFAULT_INCLUDE_PATTERN,
    exclude_pattern: PatternLike = DEFAULT_EXCLUDE_PATTERN,
) -> List[str]:
    """
    Collect all matching files under root.

    Unlike iter_files, nothing is returned unless the whole tree could be
    listed.
    """
    files = list(iter_files(root, include_pattern, exclude_pattern))
    logger.debug("Collected %d source files under %s", len(files), root)
    return files
