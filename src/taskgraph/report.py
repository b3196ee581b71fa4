"""Plain-text and JSON renderings of an analysis run."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .core.paths import DistanceResult
from .core.pipeline import AnalysisResult
from .io import GraphDocument


def _fmt_ids(ids: Sequence[int]) -> str:
    return "[" + ", ".join(str(i) for i in ids) + "]"


def _fmt_distance(value: Optional[int], unreachable: str) -> str:
    return unreachable if value is None else str(value)


def _distance_lines(result: DistanceResult, unreachable: str) -> List[str]:
    return [f"  C{cid} = {_fmt_distance(d, unreachable)}" for cid, d in enumerate(result.dist)]


def render_report(result: AnalysisResult, document: Optional[GraphDocument] = None) -> List[str]:
    """Return the console summary as a list of lines."""

    lines: List[str] = []
    if document is not None:
        lines.append(
            f"Graph n={document.n} edges={len(document.edges)} "
            f"weight_model={document.weight_model} source={result.source}"
        )

    scc = result.scc_metrics
    lines.append("")
    lines.append(f"SCCs (count={len(result.components)}) and sizes:")
    for comp in result.components:
        lines.append(f"  {_fmt_ids(comp)} size={len(comp)}")
    lines.append(
        f"SCC instrumentation: nodeVisits={scc.node_visits} "
        f"edgeExpl={scc.edge_explorations} timeNs={scc.elapsed_ns}"
    )

    lines.append("")
    lines.append(f"Condensation DAG: compCount={result.condensation.component_count}")
    for cid, edges in enumerate(result.condensation.adjacency):
        outs = ", ".join(f"C{edge.target}(w={edge.weight})" for edge in edges)
        lines.append(f"  C{cid} -> {outs}")

    topo = result.topo_metrics
    lines.append("")
    lines.append(f"Topological order (components): {_fmt_ids(result.topo_order)}")
    lines.append(
        f"Kahn instrumentation: pushes={topo.pushes} pops={topo.pops} "
        f"edgeRemovals={topo.edge_removals} timeNs={topo.elapsed_ns}"
    )
    lines.append(f"Derived order of original tasks after SCC compression: {_fmt_ids(result.expanded_order)}")

    sp = result.shortest
    lines.append("")
    lines.append(f"Source node {result.source} is in component C{result.source_component}")
    lines.append(
        f"DAG SP instrumentation: relaxAttempts={sp.metrics.relax_attempts} "
        f"relaxSuccesses={sp.metrics.relax_successes} timeNs={sp.metrics.elapsed_ns}"
    )
    lines.append("")
    lines.append("Shortest distances from source component:")
    lines.extend(_distance_lines(sp, "INF"))
    lines.append(
        f"One shortest path (component-level) to C{result.shortest_target}: {_fmt_ids(result.shortest_path)}"
    )
    lines.append(f"Expanded path to original nodes: {_fmt_ids(result.expand(result.shortest_path))}")

    lp = result.longest
    lines.append("")
    lines.append(
        f"DAG Longest instrumentation: relaxAttempts={lp.metrics.relax_attempts} "
        f"relaxSuccesses={lp.metrics.relax_successes} timeNs={lp.metrics.elapsed_ns}"
    )
    lines.append("")
    lines.append("Longest distances from source component:")
    lines.extend(_distance_lines(lp, "-INF"))
    lines.append(
        f"Critical path (component-level) ending at C{result.critical_target} "
        f"length={result.critical_length}: {_fmt_ids(result.critical_path)}"
    )
    lines.append(f"Expanded critical path (original nodes): {_fmt_ids(result.expand(result.critical_path))}")
    return lines


def _distance_payload(result: DistanceResult) -> Dict[str, Any]:
    return {
        "objective": result.objective,
        "source": result.source,
        "dist": list(result.dist),
        "parent": list(result.parent),
        "metrics": {
            "relax_attempts": result.metrics.relax_attempts,
            "relax_successes": result.metrics.relax_successes,
            "elapsed_ns": result.metrics.elapsed_ns,
        },
    }


def result_to_payload(result: AnalysisResult) -> Dict[str, Any]:
    """JSON-serializable view of ``result``; unreachable distances become ``null``."""

    return {
        "source": result.source,
        "source_component": result.source_component,
        "components": [list(comp) for comp in result.components],
        "condensation": {
            "component_count": result.condensation.component_count,
            "edges": [
                {"from": edge.source, "to": edge.target, "weight": edge.weight}
                for edge in result.condensation.edges()
            ],
        },
        "topo_order": list(result.topo_order),
        "expanded_order": list(result.expanded_order),
        "shortest": _distance_payload(result.shortest),
        "shortest_path": {
            "target": result.shortest_target,
            "components": list(result.shortest_path),
            "nodes": list(result.expand(result.shortest_path)),
        },
        "longest": _distance_payload(result.longest),
        "critical_path": {
            "target": result.critical_target,
            "length": result.critical_length,
            "components": list(result.critical_path),
            "nodes": list(result.expand(result.critical_path)),
        },
        "metrics": {
            "scc": {
                "node_visits": result.scc_metrics.node_visits,
                "edge_explorations": result.scc_metrics.edge_explorations,
                "elapsed_ns": result.scc_metrics.elapsed_ns,
            },
            "topo": {
                "pushes": result.topo_metrics.pushes,
                "pops": result.topo_metrics.pops,
                "edge_removals": result.topo_metrics.edge_removals,
                "elapsed_ns": result.topo_metrics.elapsed_ns,
            },
        },
    }
