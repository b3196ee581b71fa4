import pytest

from taskgraph.core.condensation import CondensationEdge, build_condensation
from taskgraph.core.graph import TaskGraph
from taskgraph.core.invariants import PartitionError, validate_condensation
from taskgraph.core.scc import tarjan_scc
from taskgraph.core.topo import kahn_order


def condense(graph: TaskGraph):
    return build_condensation(graph, tarjan_scc(graph).components)


def test_condensation_dag_shape():
    graph = TaskGraph(4, [(0, 1, 1), (1, 2, 1), (2, 0, 1), (2, 3, 5)])
    dag = condense(graph)
    assert dag.component_count == 2
    big = dag.component_of(0)
    small = dag.component_of(3)
    assert dag.components[big] == (0, 1, 2)
    assert dag.edges() == [CondensationEdge(big, small, 5)]
    assert dag.node_to_component == (big, big, big, small)


def test_parallel_edges_keep_minimum_weight():
    graph = TaskGraph(4, [(0, 2, 9), (1, 2, 4), (0, 1, 1), (1, 0, 1), (0, 2, 6), (2, 3, 3), (2, 3, -2)])
    dag = condense(graph)
    a, b, c = dag.component_of(0), dag.component_of(2), dag.component_of(3)
    assert dag.component_of(1) == a
    assert dag.weight(a, b) == 4
    assert dag.weight(b, c) == -2
    assert dag.edge_count == 2


def test_intra_component_edges_are_dropped():
    graph = TaskGraph(2, [(0, 1, 1), (1, 0, 1), (0, 0, 7)])
    dag = condense(graph)
    assert dag.component_count == 1
    assert dag.edges() == []


def test_no_inter_component_edges_is_valid():
    dag = condense(TaskGraph(3, []))
    assert dag.component_count == 3
    assert dag.edge_count == 0
    assert all(edges == () for edges in dag.adjacency)


def test_adjacency_sorted_by_target():
    graph = TaskGraph(4, [(0, 3, 1), (0, 1, 1), (0, 2, 1)])
    dag = condense(graph)
    src = dag.component_of(0)
    targets = [edge.target for edge in dag.adjacency[src]]
    assert targets == sorted(targets)


def test_missing_weight_lookup_raises():
    dag = condense(TaskGraph(2, []))
    with pytest.raises(KeyError):
        dag.weight(0, 1)


def test_rejects_components_that_are_not_a_partition():
    graph = TaskGraph(3, [(0, 1, 1)])
    with pytest.raises(PartitionError):
        build_condensation(graph, [(0, 1), (1, 2)])
    with pytest.raises(PartitionError):
        build_condensation(graph, [(0,), (1,)])


@pytest.mark.parametrize("seed", range(25))
def test_minimum_weight_collapsing_and_acyclicity(seed, random_graph):
    graph = random_graph(seed, n=12, m=40)
    dag = condense(graph)
    validate_condensation(dag)
    kahn_order(dag)

    expected = {}
    for edge in graph.edges:
        cu, cv = dag.component_of(edge.source), dag.component_of(edge.target)
        if cu != cv:
            expected[(cu, cv)] = min(expected.get((cu, cv), edge.weight), edge.weight)
    assert {(e.source, e.target): e.weight for e in dag.edges()} == expected


def test_component_members_are_stored_sorted():
    dag = build_condensation(TaskGraph(3, [(2, 1, 4), (0, 2, 1), (2, 0, 1)]), [(2, 0), (1,)])
    assert dag.components == ((0, 2), (1,))
    assert dag.node_to_component == (0, 1, 0)
    assert dag.edges() == [CondensationEdge(0, 1, 4)]
