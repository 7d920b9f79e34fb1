"""Scanner module for file discovery, import extraction and graph building."""

from .aliases import load_aliases, resolve_alias
from .builder import build_dependency_graph, build_graph, scan_records
from .config import DepGraphConfig, load_config
from .discovery import collect_files, iter_files
from .errors import ConfigLoadError, DepGraphError, FileSystemError, ParseError
from .parser import ImportRecord, extract_imports, parse_import_statement, split_import_statement
from .resolver import Resolved, Unresolved, normalize_import_path

__all__ = [
    "load_aliases",
    "resolve_alias",
    "build_dependency_graph",
    "build_graph",
    "scan_records",
    "DepGraphConfig",
    "load_config",
    "collect_files",
    "iter_files",
    "ConfigLoadError",
    "DepGraphError",
    "FileSystemError",
    "ParseError",
    "ImportRecord",
    "extract_imports",
    "parse_import_statement",
    "split_import_statement",
    "Resolved",
    "Unresolved",
    "normalize_import_path",
]
