"""Validated in-memory task graph used by the analysis pipeline."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class InputError(ValueError):
    """Raised when a node id, edge or weight falls outside the graph contract."""


@dataclass(frozen=True)
class Edge:
    """Weighted directed edge between two task ids."""

    source: int
    target: int
    weight: int = 1


def as_index(value: object, what: str) -> int:
    """Return ``value`` as a plain int; numpy integers are accepted, bools are not."""

    if isinstance(value, bool):
        raise InputError(f"{what} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InputError(f"{what} must be an integer, got {value!r}") from None


class TaskGraph:
    """Directed multigraph over nodes ``0..n-1``.

    Undirected inputs must already contain both directions of every edge;
    see :func:`expand_undirected`.
    """

    def __init__(self, n: int, edges: Iterable[Edge | Tuple[int, int, int]], directed: bool = True) -> None:
        n = as_index(n, "node count")
        if n < 0:
            raise InputError(f"node count must be non-negative, got {n}")
        self.n = n
        self.directed = bool(directed)
        checked: List[Edge] = []
        for idx, raw in enumerate(edges):
            edge = raw if isinstance(raw, Edge) else Edge(*raw)
            u = as_index(edge.source, f"edge {idx} source")
            v = as_index(edge.target, f"edge {idx} target")
            w = as_index(edge.weight, f"edge {idx} weight")
            if not 0 <= u < n or not 0 <= v < n:
                raise InputError(f"edge {idx} ({u}->{v}) references a node outside [0, {n})")
            if not INT64_MIN <= w <= INT64_MAX:
                raise InputError(f"edge {idx} ({u}->{v}) weight {w} does not fit in a signed 64-bit integer")
            checked.append(Edge(u, v, w))
        self.edges: Tuple[Edge, ...] = tuple(checked)
        adj: List[List[int]] = [[] for _ in range(n)]
        for edge in self.edges:
            adj[edge.source].append(edge.target)
        self._adj: Tuple[Tuple[int, ...], ...] = tuple(tuple(targets) for targets in adj)

    def __repr__(self) -> str:
        return f"TaskGraph(n={self.n}, edges={len(self.edges)}, directed={self.directed})"

    def adjacency(self) -> Sequence[Tuple[int, ...]]:
        """Successor ids per node, in edge order (parallel edges repeated)."""

        return self._adj

    def successors(self, node: int) -> Tuple[int, ...]:
        return self._adj[self.check_node(node, "node")]

    def check_node(self, node: object, what: str = "source") -> int:
        node = as_index(node, what)
        if not 0 <= node < self.n:
            raise InputError(f"{what} {node} is outside [0, {self.n})")
        return node


def expand_undirected(edges: Iterable[Edge | Tuple[int, int, int]]) -> List[Edge]:
    """Materialize both directions of every edge (``u->v`` then ``v->u``)."""

    expanded: List[Edge] = []
    for raw in edges:
        edge = raw if isinstance(raw, Edge) else Edge(*raw)
        expanded.append(edge)
        expanded.append(Edge(edge.target, edge.source, edge.weight))
    return expanded


def build_graph(n: int, edges: Iterable[Edge | Tuple[int, int, int]], *, directed: bool = True) -> TaskGraph:
    """Convenience helper that expands undirected edge lists before validation."""

    if not directed:
        edges = expand_undirected(edges)
    return TaskGraph(n, edges, directed=directed)
