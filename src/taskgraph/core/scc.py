"""Strongly connected component utilities."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter_ns
from typing import List, Tuple

import numpy as np

from .graph import TaskGraph

Component = Tuple[int, ...]


@dataclass(frozen=True)
class SccMetrics:
    """Work counters for one Tarjan run."""

    node_visits: int
    edge_explorations: int
    elapsed_ns: int


@dataclass(frozen=True)
class SccResult:
    components: Tuple[Component, ...]
    metrics: SccMetrics

    @property
    def count(self) -> int:
        return len(self.components)


def tarjan_scc(graph: TaskGraph) -> SccResult:
    """Tarjan's SCC algorithm driven by an explicit work stack.

    Each work frame is ``(node, next_edge_index)`` so the search can resume a
    node after one of its successors completes, which keeps memory bounded by
    the node count instead of the interpreter's recursion limit.

    Components come back in completion order with their nodes sorted
    ascending. Completion order is not a topological order of the
    condensation.
    """

    start = perf_counter_ns()
    adj = graph.adjacency()
    n = graph.n

    disc = np.full(n, -1, dtype=np.int64)
    low = np.zeros(n, dtype=np.int64)
    on_stack = np.zeros(n, dtype=bool)
    stack: List[int] = []
    work: List[Tuple[int, int]] = []
    components: List[Component] = []
    clock = 0
    node_visits = 0
    edge_explorations = 0

    for root in range(n):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = clock
        clock += 1
        node_visits += 1
        stack.append(root)
        on_stack[root] = True
        work.append((root, 0))

        while work:
            u, idx = work[-1]
            nbrs = adj[u]
            if idx < len(nbrs):
                work[-1] = (u, idx + 1)
                v = nbrs[idx]
                edge_explorations += 1
                if disc[v] == -1:
                    disc[v] = low[v] = clock
                    clock += 1
                    node_visits += 1
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, 0))
                elif on_stack[v] and disc[v] < low[u]:
                    low[u] = disc[v]
                continue

            work.pop()
            if low[u] == disc[u]:
                comp: List[int] = []
                while True:
                    w = stack.pop()
                    on_stack[w] = False
                    comp.append(w)
                    if w == u:
                        break
                components.append(tuple(sorted(comp)))
            if work:
                parent = work[-1][0]
                if low[u] < low[parent]:
                    low[parent] = low[u]

    metrics = SccMetrics(
        node_visits=node_visits,
        edge_explorations=edge_explorations,
        elapsed_ns=perf_counter_ns() - start,
    )
    return SccResult(components=tuple(components), metrics=metrics)
