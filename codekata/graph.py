"""A directed weighted graph keyed by node name."""

from __future__ import annotations

from dataclasses import dataclass


class GraphError(Exception):
    """Raised for invalid graph operations."""


@dataclass(eq=False)
class Node:
    """A named graph vertex."""

    name: str
    visited: bool = False


@dataclass(eq=False)
class Edge:
    """A directed edge from start to finish with a weight."""

    start: Node
    finish: Node
    weight: float = 0.0


class Graph:
    """A directed graph whose nodes have unique names."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edges: dict[str, list[Edge]] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def nodes(self) -> list[Node]:
        """Return the nodes in the order they were added."""
        return list(self._nodes.values())

    def edges(self) -> dict[str, list[Edge]]:
        """Return the outgoing edges of each source, keyed by name in sorted order."""
        return {name: list(self._edges[name]) for name in sorted(self._edges)}

    def has_node(self, name: str) -> bool:
        """Tell whether a node of this name is in the graph."""
        return name in self._nodes

    def get_node(self, name: str) -> Node:
        """Return the node of this name; raise GraphError if there is none."""
        if not self._nodes:
            raise GraphError(f"get_node({name}): empty graph")
        try:
            return self._nodes[name]
        except KeyError:
            raise GraphError(f"get_node({name}): no node named {name}") from None

    def add_node(self, name: str) -> Node:
        """Create and add a node; raise GraphError if the name is taken."""
        if self.has_node(name):
            raise GraphError(f"add_node({name}): {name} node has already been added")
        node = Node(name)
        self._nodes[name] = node
        return node

    def add_edge(self, start: Node | None, finish: Node | None, weight: float = 0) -> Edge:
        """Add a directed edge between two nodes known to the graph by name."""
        if start is None or finish is None:
            raise GraphError("add_edge: missing node for edge")
        if not (self.has_node(start.name) and self.has_node(finish.name)):
            raise GraphError(f"add_edge({start.name},{finish.name}): invalid node(s) for edge")
        edge = Edge(start, finish, float(weight))
        self._edges.setdefault(start.name, []).append(edge)
        return edge

    def edge_set(self, node: Node) -> list[Edge]:
        """Return the edges leaving a node, empty if it has none."""
        return list(self._edges.get(node.name, ()))

    def neighbors(self, node: Node) -> list[Node]:
        """Return the distinct nodes reached by edges leaving a node."""
        seen: dict[int, Node] = {}
        for edge in self.edge_set(node):
            seen.setdefault(id(edge.finish), edge.finish)
        return list(seen.values())

    def is_neighbor(self, first: Node, second: Node) -> bool:
        """Tell whether an edge joins the two nodes in either direction."""
        return any(n.name == second.name for n in self.neighbors(first)) or any(
            n.name == first.name for n in self.neighbors(second)
        )

    def __str__(self) -> str:
        lines = []
        for name, edges in self.edges().items():
            targets = "".join(f"{edge.finish.name},{edge.weight:g} " for edge in edges)
            lines.append(f"Source:{name} -> Destinations,Weights:{targets}")
        return "\n".join(lines)