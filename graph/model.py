"""Graph data model for module dependency relationships."""

import posixpath
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .styles import color_for

NODE_SHAPE = "box"


@dataclass
class Node:
    """A module in the dependency graph, keyed by its display identifier."""

    id: str
    label: str
    color: Optional[str] = None
    shape: str = NODE_SHAPE

    @classmethod
    def for_id(cls, node_id: str) -> "Node":
        """Build a node whose label and color are derived from its id."""
        label = f"*{posixpath.basename(node_id)}*\n{posixpath.dirname(node_id) or '.'}"
        return cls(id=node_id, label=label, color=color_for(node_id))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "shape": self.shape,
            "font": {"multi": "md", "size": 14},
        }
        if self.color is not None:
            data["color"] = self.color
        return data


@dataclass
class Edge:
    """
    One import statement: `importer` imports `names` from `dependency`.

    Serialized in vis-network form, where "from" is the dependency, "to"
    the importer and the arrow head sits on the dependency.
    """

    importer: str
    dependency: str
    names: List[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return "\n".join(self.names)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.dependency,
            "to": self.importer,
            "imports": list(self.names),
            "arrows": "from",
            "label": self.label,
            "font": {"align": "horizontal"},
        }


class DependencyGraph:
    """
    A directed graph of module imports.

    Nodes are unique per identifier and kept in the order they were first
    seen. Edges are never merged: two statements importing the same
    module produce two edges.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._edges: List[Edge] = []

    @property
    def nodes(self) -> List[Node]:
        """Return all nodes in first-seen order."""
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        """Return all edges in insertion order."""
        return list(self._edges)

    def add_node(self, node_id: str) -> Node:
        """
        Add (or recompute) the node for an identifier.

        Node attributes depend only on the id, so re-adding leaves the
        graph unchanged apart from position, which is kept.
        """
        node = Node.for_id(node_id)
        self._nodes[node_id] = node
        return node

    def add_edge(self, importer: str, dependency: str, names: Optional[List[str]] = None) -> Edge:
        """
        Add an edge for one import statement.

        Automatically adds both nodes to the graph, the importer first.
        """
        self.add_node(importer)
        self.add_node(dependency)

        edge = Edge(importer=importer, dependency=dependency, names=list(names or []))
        self._edges.append(edge)
        return edge

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def get_dependencies(self, node_id: str) -> List[str]:
        """Get the modules imported by node_id, one entry per edge."""
        return [e.dependency for e in self._edges if e.importer == node_id]

    def get_importers(self, node_id: str) -> List[str]:
        """Get the modules importing node_id, one entry per edge."""
        return [e.importer for e in self._edges if e.dependency == node_id]

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over edges in insertion order."""
        yield from self._edges

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return the graph as plain nodes/edges lists for serialization."""
        return {
            "nodes": [node.to_dict() for node in self._nodes.values()],
            "edges": [edge.to_dict() for edge in self._edges],
        }

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        """Check if a node is in the graph."""
        return node_id in self._nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyGraph):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"DependencyGraph(nodes={len(self._nodes)}, edges={len(self._edges)})"
