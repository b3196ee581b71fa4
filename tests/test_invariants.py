import pytest

from taskgraph.core import invariants
from taskgraph.core.condensation import CondensationEdge, CondensationGraph, build_condensation
from taskgraph.core.graph import TaskGraph
from taskgraph.core.scc import tarjan_scc
from taskgraph.core.topo import kahn_order


def build_simple_condensation() -> CondensationGraph:
    graph = TaskGraph(3, [(0, 1, 1), (1, 0, 1), (1, 2, 4)])
    return build_condensation(graph, tarjan_scc(graph).components)


def test_partition_validation_passes():
    invariants.validate_partition([(0, 2), (1,)], 3)
    invariants.validate_partition([], 0)


@pytest.mark.parametrize(
    "components, message",
    [
        ([(0,), ()], "empty"),
        ([(0, 1), (1,)], "more than one"),
        ([(0,), (3,)], "outside"),
        ([(0,)], "not assigned"),
    ],
)
def test_partition_validation_fails(components, message):
    with pytest.raises(invariants.PartitionError, match=message):
        invariants.validate_partition(components, 2)


def test_condensation_validation():
    dag = build_simple_condensation()
    invariants.validate_condensation(dag)

    looped = CondensationGraph(
        components=((0,),),
        node_to_component=(0,),
        adjacency=((CondensationEdge(0, 0, 1),),),
    )
    with pytest.raises(invariants.InvariantViolation, match="self edge"):
        invariants.validate_condensation(looped)

    duplicated = CondensationGraph(
        components=((0,), (1,)),
        node_to_component=(0, 1),
        adjacency=((CondensationEdge(0, 1, 1), CondensationEdge(0, 1, 2)), ()),
    )
    with pytest.raises(invariants.InvariantViolation, match="duplicate"):
        invariants.validate_condensation(duplicated)


def test_assert_invariants_runs_all_checks():
    dag = build_simple_condensation()
    order = kahn_order(dag).order
    invariants.assert_invariants(dag, order)
    with pytest.raises(invariants.TopologicalOrderError):
        invariants.assert_invariants(dag, tuple(reversed(order)))


def test_error_hierarchy():
    for exc in (invariants.PartitionError, invariants.CondensationCycleError, invariants.TopologicalOrderError):
        assert issubclass(exc, invariants.InvariantViolation)
    assert issubclass(invariants.InvariantViolation, RuntimeError)
