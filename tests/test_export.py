from pathlib import Path

import networkx as nx

from taskgraph.core.graph import TaskGraph
from taskgraph.core.pipeline import analyze
from taskgraph.export import condensation_to_networkx, export_graphml


def test_condensation_to_networkx_attributes():
    result = analyze(TaskGraph(4, [(0, 1, 1), (1, 2, 1), (2, 0, 1), (2, 3, 5)]), 0)
    graph = condensation_to_networkx(result.condensation, result)
    assert set(graph.nodes) == {"C0", "C1"}
    assert graph.nodes["C1"]["members"] == "0,1,2"
    assert graph.nodes["C1"]["size"] == 3
    assert graph.nodes["C0"]["longest"] == 5
    assert graph.edges["C1", "C0"]["weight"] == 5
    assert nx.is_directed_acyclic_graph(graph)


def test_unreachable_components_omit_distances():
    result = analyze(TaskGraph(2, []), 0)
    graph = condensation_to_networkx(result.condensation, result)
    assert "shortest" not in graph.nodes["C1"]
    assert graph.nodes["C0"]["shortest"] == 0


def test_export_graphml_roundtrip(tmp_path: Path):
    result = analyze(TaskGraph(3, [(0, 1, 2), (1, 2, 3)]), 0)
    out = export_graphml(result.condensation, tmp_path / "nested" / "dag.graphml")
    loaded = nx.read_graphml(out)
    assert loaded.number_of_nodes() == 3
    assert loaded.number_of_edges() == 2
