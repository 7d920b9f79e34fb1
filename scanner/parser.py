"""Extraction of static import statements from source text."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .config import DEFAULT_EXTENSION
from .errors import ParseError
from .resolver import Resolution, normalize_import_path, to_posix

logger = logging.getLogger(__name__)


LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

# import <names> from <source>;   (dynamic import() calls never match)
IMPORT_STATEMENT_RE = re.compile(r"import\s+.*?\s+from\s+.*?;", re.IGNORECASE)

IMPORT_CLAUSES_RE = re.compile(r"import\b(.*?)\bfrom\b['\" ]*(.*?)['\" ]*;", re.IGNORECASE)


@dataclass
class ImportRecord:
    """
    One import statement of a scanned file.

    Attributes:
        importer: Normalized path of the file containing the statement.
        names: Imported binding names, as written.
        target: Where the import source resolved to.
    """

    importer: str
    names: List[str]
    target: Resolution


def read_source(file_path: Union[str, Path]) -> Optional[str]:
    """
    Read a source file as UTF-8.

    Returns:
        The file text, or None if the file cannot be read.
    """
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping unreadable file %s: %s", file_path, e)
        return None


def iter_imports(text: str) -> Iterator[str]:
    """Lazily yield raw import statements in file order."""
    flattened = LINE_BREAK_RE.sub(" ", text)
    for match in IMPORT_STATEMENT_RE.finditer(flattened):
        yield match.group(0)


def extract_imports(text: str) -> List[str]:
    """
    Extract the raw `import ... from ...;` statements of a file.

    Statements may span several lines. Side-effect-only imports
    (`import './x';`) and dynamic `import()` calls are not matched.

    Args:
        text: Source file content.

    Returns:
        List of matched statements, possibly empty.
    """
    return list(iter_imports(text))


def split_import_statement(statement: str, file_path: str = "") -> Tuple[List[str], str]:
    """
    Split a raw statement into its imported names and its source specifier.

    Args:
        statement: A statement returned by extract_imports.
        file_path: File the statement came from, for error messages.

    Returns:
        (names, specifier) where names are brace-stripped, comma-separated
        and trimmed, and specifier has its quotes removed.

    Raises:
        ParseError: If the statement has no names or source clause.
    """
    match = IMPORT_CLAUSES_RE.search(statement)
    if match is None:
        raise ParseError(statement, file_path)

    names_clause, specifier = match.group(1), match.group(2)
    names = [name.strip() for name in re.sub(r"[{}]", "", names_clause).split(",")]
    return names, specifier.strip()


def parse_import_statement(
    statement: str,
    owning_file: str,
    project_root: str,
    aliases: Optional[Dict[str, str]] = None,
    default_extension: str = DEFAULT_EXTENSION,
) -> ImportRecord:
    """
    Turn a raw statement into an ImportRecord with a resolved target.

    Raises:
        ParseError: If the statement cannot be split.
    """
    names, specifier = split_import_statement(statement, owning_file)
    target = normalize_import_path(
        specifier,
        owning_file,
        project_root,
        aliases,
        default_extension,
    )
    return ImportRecord(
        importer=to_posix(os.path.normpath(owning_file)),
        names=names,
        target=target,
    )
