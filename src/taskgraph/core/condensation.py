"""Collapse strongly connected components into a condensation DAG."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .graph import TaskGraph
from .invariants import validate_partition
from .scc import Component


@dataclass(frozen=True)
class CondensationEdge:
    """Edge between two components carrying the minimum crossing weight."""

    source: int
    target: int
    weight: int


@dataclass(frozen=True)
class CondensationGraph:
    components: Tuple[Component, ...]
    node_to_component: Tuple[int, ...]
    adjacency: Tuple[Tuple[CondensationEdge, ...], ...]

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency)

    def edges(self) -> List[CondensationEdge]:
        return [edge for edges in self.adjacency for edge in edges]

    def weight(self, source: int, target: int) -> int:
        for edge in self.adjacency[source]:
            if edge.target == target:
                return edge.weight
        raise KeyError(f"no condensation edge C{source} -> C{target}")

    def component_of(self, node: int) -> int:
        return self.node_to_component[node]


def build_condensation(graph: TaskGraph, components: Sequence[Component]) -> CondensationGraph:
    """Return the condensation of ``graph`` under ``components``.

    Intra-component edges are dropped. Parallel inter-component edges collapse
    into one edge per ordered pair with the minimum weight. Each adjacency list
    is sorted by target id.
    """

    validate_partition(components, graph.n)
    comp_id = np.full(graph.n, -1, dtype=np.int64)
    for cid, comp in enumerate(components):
        for node in comp:
            comp_id[node] = cid

    edge_min: Dict[Tuple[int, int], int] = {}
    for edge in graph.edges:
        cu = int(comp_id[edge.source])
        cv = int(comp_id[edge.target])
        if cu == cv:
            continue
        key = (cu, cv)
        current = edge_min.get(key)
        if current is None or edge.weight < current:
            edge_min[key] = edge.weight

    adjacency: List[List[CondensationEdge]] = [[] for _ in components]
    for (cu, cv), weight in sorted(edge_min.items()):
        adjacency[cu].append(CondensationEdge(cu, cv, weight))

    return CondensationGraph(
        components=tuple(tuple(sorted(comp)) for comp in components),
        node_to_component=tuple(int(c) for c in comp_id),
        adjacency=tuple(tuple(edges) for edges in adjacency),
    )
