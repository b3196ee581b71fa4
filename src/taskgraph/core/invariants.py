"""Invariant checks for condensation pipelines."""

from __future__ import annotations

from typing import Sequence, Set, Tuple, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .condensation import CondensationGraph


class InvariantViolation(RuntimeError):
    """Base error for invariant violations."""


class PartitionError(InvariantViolation):
    """Raised when components do not partition the node set exactly."""


class CondensationCycleError(InvariantViolation):
    """Raised when the condensation graph cannot be ordered topologically."""

    def __init__(self, ordered: int, expected: int) -> None:
        super().__init__(
            f"condensation graph is not acyclic: ordered {ordered} of {expected} components"
        )
        self.ordered = ordered
        self.expected = expected


class TopologicalOrderError(InvariantViolation):
    """Raised when an order is not a valid linearization of the condensation."""


def validate_partition(components: Sequence[Sequence[int]], n: int) -> None:
    """Ensure every node in ``[0, n)`` belongs to exactly one non-empty component."""

    seen: Set[int] = set()
    for cid, comp in enumerate(components):
        if not comp:
            raise PartitionError(f"component {cid} is empty")
        for node in comp:
            if not 0 <= node < n:
                raise PartitionError(f"component {cid} holds node {node} outside [0, {n})")
            if node in seen:
                raise PartitionError(f"node {node} appears in more than one component")
            seen.add(node)
    if len(seen) != n:
        missing = sorted(set(range(n)) - seen)
        raise PartitionError(f"nodes {missing[:10]} are not assigned to any component")


def validate_condensation(condensation: "CondensationGraph") -> None:
    """Check edge endpoints, absence of self edges and pair uniqueness."""

    count = condensation.component_count
    pairs: Set[Tuple[int, int]] = set()
    for cu, edges in enumerate(condensation.adjacency):
        for edge in edges:
            if edge.source != cu or not 0 <= edge.target < count:
                raise InvariantViolation(f"condensation edge {edge} is misplaced in C{cu}")
            if edge.source == edge.target:
                raise InvariantViolation(f"condensation has a self edge on C{cu}")
            key = (edge.source, edge.target)
            if key in pairs:
                raise InvariantViolation(f"duplicate condensation edge C{key[0]} -> C{key[1]}")
            pairs.add(key)


def validate_topological_order(condensation: "CondensationGraph", order: Sequence[int]) -> None:
    """Every component exactly once, every edge pointing forward."""

    count = condensation.component_count
    position = {cid: pos for pos, cid in enumerate(order)}
    if len(order) != count or len(position) != count or set(position) != set(range(count)):
        raise TopologicalOrderError(
            f"order of length {len(order)} does not list each of the {count} components once"
        )
    for edges in condensation.adjacency:
        for edge in edges:
            if position[edge.source] >= position[edge.target]:
                raise TopologicalOrderError(
                    f"edge C{edge.source} -> C{edge.target} points backwards in the order"
                )


def assert_invariants(condensation: "CondensationGraph", order: Sequence[int]) -> None:
    """Run all invariant checks."""

    validate_partition(condensation.components, len(condensation.node_to_component))
    validate_condensation(condensation)
    validate_topological_order(condensation, order)
