"""Mermaid flowchart exporter for dependency graphs."""

import re
from typing import Dict

from graph.model import DependencyGraph

# Flowchart keywords that cannot be used as node IDs
RESERVED_IDS = {"end", "graph", "flowchart", "subgraph", "style", "class", "classdef", "click", "linkstyle", "direction"}


def to_mermaid(graph: DependencyGraph, orientation: str = "LR") -> str:
    """
    Convert a dependency graph to Mermaid flowchart syntax.

    Args:
        graph: The dependency graph to export.
        orientation: Flowchart orientation (LR, TD, TB, RL, BT).

    Returns:
        Mermaid flowchart string. Arrows point from the importing module
        to the imported one and carry the imported names.
    """
    lines = [f"flowchart {orientation}"]

    node_ids = _assign_ids(graph)

    # Node definitions with labels and role colors
    for node in graph.nodes:
        node_id = node_ids[node.id]
        lines.append(f'    {node_id}["{_escape(node.id)}"]')
        if node.color:
            lines.append(f"    style {node_id} fill:{node.color}")

    # Edges, one per import statement
    if graph.edges:
        lines.append("")
    for edge in graph.iter_edges():
        source_id = node_ids[edge.importer]
        target_id = node_ids[edge.dependency]
        names = ", ".join(name for name in edge.names if name)
        if names:
            lines.append(f'    {source_id} -->|"{_escape(names)}"| {target_id}')
        else:
            lines.append(f"    {source_id} --> {target_id}")

    return "\n".join(lines)


def _assign_ids(graph: DependencyGraph) -> Dict[str, str]:
    """Map node identifiers to unique Mermaid IDs."""
    node_ids: Dict[str, str] = {}
    used: Dict[str, int] = {}
    for node in graph.nodes:
        base = _sanitize_id(node.id)
        count = used.get(base, 0)
        used[base] = count + 1
        node_ids[node.id] = base if count == 0 else f"{base}_{count}"
    return node_ids


def _sanitize_id(value: str) -> str:
    """
    Sanitize a string to be a valid Mermaid ID.

    Mermaid IDs can only contain letters, digits, and underscores.
    """
    # Replace path separators, dots and dashes with underscores
    sanitized = re.sub(r"[/\\.\-@]", "_", value)
    # Remove any remaining invalid characters
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "", sanitized)
    # Ensure it starts with a letter
    if sanitized and not sanitized[0].isalpha():
        sanitized = "n_" + sanitized
    sanitized = sanitized or "unknown"
    if sanitized.lower() in RESERVED_IDS:
        sanitized += "_node"
    return sanitized


def _escape(text: str) -> str:
    return text.replace('"', "#quot;")
