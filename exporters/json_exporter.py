"""JSON exporter for dependency graphs (machine-friendly format)."""

import json

from graph.model import DependencyGraph


def to_json(graph: DependencyGraph, indent: int = 2) -> str:
    """
    Convert a dependency graph to JSON format.

    Args:
        graph: The dependency graph to export.
        indent: JSON indentation level.

    Returns:
        JSON document with top-level "nodes" and "edges" lists.
    """
    return json.dumps(graph.to_dict(), indent=indent)
