"""networkx/GraphML export of condensation graphs."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import networkx as nx

from .core.condensation import CondensationGraph
from .core.pipeline import AnalysisResult


def condensation_to_networkx(
    condensation: CondensationGraph, result: Optional[AnalysisResult] = None
) -> nx.DiGraph:
    """Convert a condensation into a networkx DiGraph.

    Node attributes: ``members`` (comma separated task ids) and ``size``.
    When ``result`` is given, ``topo_index`` and the finite ``shortest`` /
    ``longest`` distances are attached too. GraphML has no null, so
    unreachable components simply omit the distance attributes.
    """
    graph = nx.DiGraph()
    position = {}
    if result is not None:
        position = {cid: idx for idx, cid in enumerate(result.topo_order)}
    for cid, comp in enumerate(condensation.components):
        attrs = {"members": ",".join(str(node) for node in comp), "size": len(comp)}
        if result is not None:
            attrs["topo_index"] = position[cid]
            for name, dist in (("shortest", result.shortest.dist[cid]), ("longest", result.longest.dist[cid])):
                if dist is not None:
                    attrs[name] = dist
        graph.add_node(f"C{cid}", **attrs)
    for edge in condensation.edges():
        graph.add_edge(f"C{edge.source}", f"C{edge.target}", weight=edge.weight)
    return graph


def export_graphml(
    condensation: CondensationGraph, path: Path, result: Optional[AnalysisResult] = None
) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    nx.write_graphml(condensation_to_networkx(condensation, result), out_path)
    return out_path
