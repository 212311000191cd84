"""Directed graphs with labelled edges, and search problems over them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

Node = int

E = TypeVar("E")


@dataclass
class _Connections(Generic[E]):
    children: list[Node] = field(default_factory=list)
    outgoing: list[E] = field(default_factory=list)
    parents: list[Node] = field(default_factory=list)
    incoming: list[E] = field(default_factory=list)


class Graph(Generic[E]):
    """Directed multigraph storing an edge value for every connection.

    When ``reversible`` is true the graph also tracks incoming edges, which
    enables :meth:`parents` and :meth:`incoming_edges`.
    """

    def __init__(self, reversible: bool = True) -> None:
        self.reversible = reversible
        self._nodes: dict[Node, _Connections[E]] = {}

    def _entry(self, node: Node) -> _Connections[E]:
        return self._nodes.setdefault(node, _Connections())

    def _require_reversible(self) -> None:
        if not self.reversible:
            raise ValueError("graph is not reversible; incoming connections are not tracked")

    def nodes(self) -> list[Node]:
        """All nodes that take part in a connection, in increasing order."""
        return sorted(self._nodes)

    def connect(self, src: Node, dst: Node, edge: E) -> None:
        """Add an edge going from ``src`` to ``dst``."""
        source = self._entry(src)
        source.children.append(dst)
        source.outgoing.append(edge)
        target = self._entry(dst)
        if self.reversible:
            target.parents.append(src)
            target.incoming.append(edge)

    def children(self, node: Node) -> list[Node]:
        """Child nodes, in the same order as :meth:`outgoing_edges`."""
        entry = self._nodes.get(node)
        return list(entry.children) if entry else []

    def outgoing_edges(self, node: Node) -> list[E]:
        """Outgoing edges, in the same order as :meth:`children`."""
        entry = self._nodes.get(node)
        return list(entry.outgoing) if entry else []

    def parents(self, node: Node) -> list[Node]:
        """Parent nodes, in the same order as :meth:`incoming_edges`."""
        self._require_reversible()
        entry = self._nodes.get(node)
        return list(entry.parents) if entry else []

    def incoming_edges(self, node: Node) -> list[E]:
        """Incoming edges, in the same order as :meth:`parents`."""
        self._require_reversible()
        entry = self._nodes.get(node)
        return list(entry.incoming) if entry else []

    def edges(self) -> Iterator[tuple[Node, Node, E]]:
        """Yield every edge as ``(src, dst, edge)``."""
        for src in self.nodes():
            entry = self._nodes[src]
            for dst, edge in zip(entry.children, entry.outgoing):
                yield src, dst, edge

    @staticmethod
    def _remove_matching(
        nodes: list[Node], values: list[E], target: Node, edge: E | None, any_edge: bool
    ) -> int:
        kept = [
            (n, v)
            for n, v in zip(nodes, values)
            if not (n == target and (any_edge or v == edge))
        ]
        removed = len(nodes) - len(kept)
        nodes[:] = [n for n, _ in kept]
        values[:] = [v for _, v in kept]
        return removed

    def disconnect(self, src: Node, dst: Node, edge: E | None = None) -> bool:
        """Remove all edges from ``src`` to ``dst``, or only those equal to ``edge``.

        Returns whether at least one edge was removed.
        """
        source = self._nodes.get(src)
        if source is None:
            return False
        any_edge = edge is None
        removed = self._remove_matching(source.children, source.outgoing, dst, edge, any_edge)
        if removed and self.reversible:
            target = self._nodes[dst]
            self._remove_matching(target.parents, target.incoming, src, edge, any_edge)
        return removed > 0

    def reverse(self) -> None:
        """Flip the direction of every edge."""
        all_edges = list(self.edges())
        nodes = list(self._nodes)
        self._nodes = {node: _Connections() for node in nodes}
        for src, dst, edge in all_edges:
            self.connect(dst, src, edge)

    def clear(self) -> None:
        """Remove every node and edge."""
        self._nodes.clear()

    def __str__(self) -> str:
        lines = ["Graph:"]
        for node in self.nodes():
            entry = self._nodes[node]
            lines.append(f"  Node {node}:")
            for child, edge in zip(entry.children, entry.outgoing):
                lines.append(f"    -> {child} (edge: {edge})")
        return "\n".join(lines)


class SearchHeuristic:
    """Heuristic that maps each node to an estimated cost-to-go; zero by default."""

    def __call__(self, node: Node) -> float:
        return 0.0


@dataclass
class LookupSearchHeuristic(SearchHeuristic):
    """Heuristic whose values are looked up in a table; unknown nodes raise KeyError."""

    heuristic_values: dict[Node, float] = field(default_factory=dict)

    def __call__(self, node: Node) -> float:
        return self.heuristic_values[node]


@dataclass
class ShortestPathProblem:
    """A graph with weighted edges and two nodes to connect."""

    graph: Graph[float]
    init_node: Node
    goal_node: Node