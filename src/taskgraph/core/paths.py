"""Single-source shortest and longest paths over a condensation DAG."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter_ns
from typing import List, Optional, Sequence, Tuple

from .condensation import CondensationGraph
from .graph import InputError, as_index
from .invariants import InvariantViolation

SHORTEST = "shortest"
LONGEST = "longest"
OBJECTIVES = (SHORTEST, LONGEST)


@dataclass(frozen=True)
class PathMetrics:
    relax_attempts: int
    relax_successes: int
    elapsed_ns: int


@dataclass(frozen=True)
class DistanceResult:
    """Distances and parent pointers from one source component.

    ``dist[c]`` is ``None`` when ``c`` cannot be reached from the source.
    """

    source: int
    objective: str
    dist: Tuple[Optional[int], ...]
    parent: Tuple[Optional[int], ...]
    metrics: PathMetrics

    def is_reachable(self, target: int) -> bool:
        return self.dist[target] is not None

    def reachable(self) -> List[int]:
        return [cid for cid, d in enumerate(self.dist) if d is not None]

    def last_reachable(self) -> int:
        """Highest component id with a defined distance."""

        return self.reachable()[-1]

    def farthest(self) -> int:
        """Component with the largest defined distance; ties go to the lowest id."""

        best: Optional[int] = None
        for cid, d in enumerate(self.dist):
            if d is None:
                continue
            if best is None or d > self.dist[best]:
                best = cid
        if best is None:
            raise InvariantViolation(f"source component C{self.source} has no distance")
        return best

    def reconstruct_path(self, target: int) -> Tuple[int, ...]:
        """Component path from the source to ``target``; empty if unreachable."""

        if self.dist[target] is None:
            return ()
        path: List[int] = []
        cur: Optional[int] = target
        while cur is not None:
            path.append(cur)
            cur = self.parent[cur]
        path.reverse()
        return tuple(path)


def _relax_in_order(
    condensation: CondensationGraph,
    source: int,
    topo_order: Sequence[int],
    objective: str,
) -> DistanceResult:
    if objective not in OBJECTIVES:
        raise ValueError(f"unknown objective {objective!r}; expected one of {OBJECTIVES}")
    count = condensation.component_count
    source = as_index(source, "source component")
    if not 0 <= source < count:
        raise InputError(f"source component {source!r} is outside [0, {count})")
    if len(topo_order) != count or set(topo_order) != set(range(count)):
        raise InputError(f"topological order must list each of the {count} components exactly once")

    start = perf_counter_ns()
    longest = objective == LONGEST
    dist: List[Optional[int]] = [None] * count
    parent: List[Optional[int]] = [None] * count
    dist[source] = 0
    attempts = successes = 0

    for u in topo_order:
        du = dist[u]
        if du is None:
            continue
        for edge in condensation.adjacency[u]:
            attempts += 1
            candidate = du + edge.weight
            current = dist[edge.target]
            if current is None or (candidate > current if longest else candidate < current):
                dist[edge.target] = candidate
                parent[edge.target] = u
                successes += 1

    metrics = PathMetrics(
        relax_attempts=attempts,
        relax_successes=successes,
        elapsed_ns=perf_counter_ns() - start,
    )
    return DistanceResult(
        source=source,
        objective=objective,
        dist=tuple(dist),
        parent=tuple(parent),
        metrics=metrics,
    )


def shortest_from(condensation: CondensationGraph, source: int, topo_order: Sequence[int]) -> DistanceResult:
    return _relax_in_order(condensation, source, topo_order, SHORTEST)


def longest_from(condensation: CondensationGraph, source: int, topo_order: Sequence[int]) -> DistanceResult:
    """Longest-path DP; the result drives critical path selection."""

    return _relax_in_order(condensation, source, topo_order, LONGEST)


def solve(
    condensation: CondensationGraph,
    source: int,
    topo_order: Sequence[int],
    *,
    objective: str = SHORTEST,
) -> DistanceResult:
    return _relax_in_order(condensation, source, topo_order, objective)


def path_weight(condensation: CondensationGraph, path: Sequence[int]) -> int:
    """Sum of condensation edge weights along consecutive path components."""

    return sum(condensation.weight(a, b) for a, b in zip(path, path[1:]))
