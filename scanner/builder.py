"""Graph builder that orchestrates scanning and graph construction."""

import logging
import os
from typing import Dict, Iterable, Iterator, List, Optional

from graph.model import DependencyGraph
from .aliases import load_aliases
from .config import DEFAULT_EXTENSION, DepGraphConfig
from .discovery import collect_files
from .errors import ParseError
from .parser import ImportRecord, iter_imports, parse_import_statement, read_source
from .resolver import is_within, to_posix

logger = logging.getLogger(__name__)


def clean_path(path: str, scan_root: str, default_extension: str = DEFAULT_EXTENSION) -> str:
    """
    Turn a resolved path into a display identifier.

    The default extension is removed from the end and the scan root prefix
    from the start; paths outside the scan root keep their prefix.
    """
    if default_extension and path.endswith(default_extension):
        path = path[: -len(default_extension)]
    prefix = to_posix(scan_root).rstrip("/") + "/"
    if path.startswith(prefix):
        path = path[len(prefix):]
    return path


def scan_records(
    files: Iterable[str],
    project_root: str,
    aliases: Optional[Dict[str, str]] = None,
    default_extension: str = DEFAULT_EXTENSION,
) -> Iterator[ImportRecord]:
    """
    Yield the import records of each file, in file order.

    Statements that cannot be parsed are logged and skipped, so one bad
    statement never aborts the scan.
    """
    for file_path in files:
        text = read_source(file_path)
        if text is None:
            continue

        for statement in iter_imports(text):
            try:
                yield parse_import_statement(
                    statement,
                    file_path,
                    project_root,
                    aliases,
                    default_extension,
                )
            except ParseError as e:
                logger.warning("Skipping statement: %s", e)


def build_graph(
    records: Iterable[ImportRecord],
    scan_root: str,
    default_extension: str = DEFAULT_EXTENSION,
    include_external: bool = True,
) -> DependencyGraph:
    """
    Assemble a dependency graph from import records.

    Args:
        records: Import records in discovery order.
        scan_root: Only records whose importer lies under this directory are
            kept; it is also stripped from the node identifiers.
        default_extension: Extension stripped from the node identifiers.
        include_external: If False, drop imports whose target was not
            resolved to a file.

    Returns:
        DependencyGraph with one node per identifier and one edge per
        import statement.
    """
    graph = DependencyGraph()
    scan_root = to_posix(scan_root)

    for record in records:
        importer = to_posix(record.importer)
        if not is_within(importer, scan_root):
            logger.debug("Dropping import from %s outside %s", importer, scan_root)
            continue
        if not include_external and not record.target.is_resolved:
            continue

        graph.add_edge(
            importer=clean_path(importer, scan_root, default_extension),
            dependency=clean_path(to_posix(record.target.value), scan_root, default_extension),
            names=record.names,
        )

    return graph


def build_dependency_graph(
    source_root: str,
    source_subdir: str,
    config: DepGraphConfig,
    include_external: bool = True,
) -> DependencyGraph:
    """
    Scan a project and build its module dependency graph.

    Args:
        source_root: Project directory; aliases and the tsconfig path are
            relative to it.
        source_subdir: Sub-directory of source_root that is scanned.
        config: File filters, tsconfig location and default extension.
        include_external: If False, leave unresolved imports out of the graph.

    Returns:
        The dependency graph.

    Raises:
        FileSystemError: If the scanned directory cannot be listed.
    """
    project_root = to_posix(os.path.abspath(source_root))
    scan_root = to_posix(os.path.normpath(os.path.join(project_root, source_subdir)))

    aliases = load_aliases(project_root, config.tsconfig)
    files = collect_files(scan_root, config.include_regex, config.exclude_regex)
    logger.info("Scanning %d files under %s", len(files), scan_root)

    records: List[ImportRecord] = list(
        scan_records(files, project_root, aliases, config.default_extension)
    )
    graph = build_graph(
        records,
        scan_root,
        default_extension=config.default_extension,
        include_external=include_external,
    )
    logger.info("Built %r", graph)
    return graph
