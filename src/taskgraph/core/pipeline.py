"""End-to-end analysis: SCC -> condensation -> topological order -> DAG paths."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..config import Settings, load_settings
from .condensation import CondensationGraph, build_condensation
from .graph import TaskGraph
from .invariants import InvariantViolation, assert_invariants
from .paths import DistanceResult, longest_from, shortest_from
from .scc import Component, SccMetrics, tarjan_scc
from .topo import TopoMetrics, kahn_order

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything a reporter needs from one pipeline run."""

    source: int
    source_component: int
    components: Tuple[Component, ...]
    condensation: CondensationGraph
    topo_order: Tuple[int, ...]
    expanded_order: Tuple[int, ...]
    shortest: DistanceResult
    shortest_target: int
    shortest_path: Tuple[int, ...]
    longest: DistanceResult
    critical_target: int
    critical_path: Tuple[int, ...]
    scc_metrics: SccMetrics
    topo_metrics: TopoMetrics

    @property
    def critical_length(self) -> int:
        length = self.longest.dist[self.critical_target]
        if length is None:
            raise InvariantViolation(f"critical target C{self.critical_target} is unreachable")
        return length

    def expand(self, component_path: Sequence[int]) -> Tuple[int, ...]:
        return expand_components(component_path, self.components)


def expand_components(component_path: Sequence[int], components: Sequence[Component]) -> Tuple[int, ...]:
    """Replace each component id by its member nodes in ascending order."""

    nodes = []
    for cid in component_path:
        nodes.extend(sorted(components[cid]))
    return tuple(nodes)


def analyze(graph: TaskGraph, source: int, *, settings: Optional[Settings] = None) -> AnalysisResult:
    """Run the full pipeline from ``source``.

    Raises ``InputError`` for an out-of-range source and ``InvariantViolation``
    if a stage produces a structurally invalid result; nothing partial is
    returned in either case.
    """

    settings = settings or load_settings()
    source = graph.check_node(source, "source")

    scc = tarjan_scc(graph)
    LOGGER.debug(
        "tarjan_scc components=%s node_visits=%s edge_explorations=%s elapsed_ns=%s",
        scc.count,
        scc.metrics.node_visits,
        scc.metrics.edge_explorations,
        scc.metrics.elapsed_ns,
    )

    condensation = build_condensation(graph, scc.components)
    LOGGER.debug(
        "build_condensation components=%s edges=%s dropped=%s",
        condensation.component_count,
        condensation.edge_count,
        len(graph.edges) - condensation.edge_count,
    )

    topo = kahn_order(condensation)
    LOGGER.debug(
        "kahn_order pushes=%s pops=%s edge_removals=%s elapsed_ns=%s",
        topo.metrics.pushes,
        topo.metrics.pops,
        topo.metrics.edge_removals,
        topo.metrics.elapsed_ns,
    )
    if settings.verify_invariants:
        assert_invariants(condensation, topo.order)

    source_component = condensation.component_of(source)
    shortest = shortest_from(condensation, source_component, topo.order)
    longest = longest_from(condensation, source_component, topo.order)
    for result in (shortest, longest):
        LOGGER.debug(
            "%s_from source=C%s reachable=%s relax_attempts=%s relax_successes=%s elapsed_ns=%s",
            result.objective,
            source_component,
            len(result.reachable()),
            result.metrics.relax_attempts,
            result.metrics.relax_successes,
            result.metrics.elapsed_ns,
        )

    shortest_target = shortest.last_reachable()
    critical_target = longest.farthest()
    return AnalysisResult(
        source=source,
        source_component=source_component,
        components=condensation.components,
        condensation=condensation,
        topo_order=topo.order,
        expanded_order=expand_components(topo.order, condensation.components),
        shortest=shortest,
        shortest_target=shortest_target,
        shortest_path=shortest.reconstruct_path(shortest_target),
        longest=longest,
        critical_target=critical_target,
        critical_path=longest.reconstruct_path(critical_target),
        scc_metrics=scc.metrics,
        topo_metrics=topo.metrics,
    )
