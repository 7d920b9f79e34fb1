"""Path resolution utilities for mapping import specifiers to files."""

import os
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .aliases import resolve_alias
from .config import DEFAULT_EXTENSION


@dataclass(frozen=True)
class Resolved:
    """An import specifier that was mapped to a file on disk."""

    path: str

    @property
    def value(self) -> str:
        return self.path

    @property
    def is_resolved(self) -> bool:
        return True


@dataclass(frozen=True)
class Unresolved:
    """An import specifier left as written (package name, missing file...)."""

    specifier: str

    @property
    def value(self) -> str:
        return self.specifier

    @property
    def is_resolved(self) -> bool:
        return False


Resolution = Union[Resolved, Unresolved]


def to_posix(path: str) -> str:
    """Use '/' as the only path separator."""
    return path.replace("\\", "/")


def normalize_import_path(
    specifier: str,
    owning_file: str,
    project_root: str,
    aliases: Optional[Dict[str, str]] = None,
    default_extension: str = DEFAULT_EXTENSION,
) -> Resolution:
    """
    Resolve an import specifier to an absolute file path.

    Resolution order:
    1. If an alias rewrites the specifier, the result is taken relative to
       the project root.
    2. Otherwise the specifier is taken relative to the importing file's
       directory.
    3. The candidate is accepted if it exists as-is or with the default
       extension appended.

    Args:
        specifier: The import source as written, quotes removed.
        owning_file: Path of the file containing the import.
        project_root: Root that aliased specifiers are relative to.
        aliases: Alias prefix mapping (see load_aliases).
        default_extension: Extension tried when the bare path is missing.

    Returns:
        Resolved(path) with the normalized absolute path, or
        Unresolved(specifier) when no file matches.
    """
    rewritten = resolve_alias(specifier, aliases or {})

    if rewritten != specifier:
        candidate = os.path.join(project_root, rewritten)
    else:
        candidate = os.path.join(os.path.dirname(owning_file), specifier)
    candidate = os.path.normpath(candidate)

    if _exists(candidate) or _exists(candidate + default_extension):
        return Resolved(to_posix(candidate))

    return Unresolved(specifier)


def _exists(path: str) -> bool:
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        return False


def is_within(path: str, root: str) -> bool:
    """Check if path lies strictly below root (string prefix on '/' paths)."""
    prefix = to_posix(root).rstrip("/") + "/"
    return to_posix(path).startswith(prefix)
