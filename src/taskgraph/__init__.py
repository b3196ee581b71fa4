"""taskgraph: SCC condensation and critical path analysis for task dependency graphs."""

from importlib import metadata

from . import core
from .core.condensation import CondensationEdge, CondensationGraph, build_condensation
from .core.graph import Edge, InputError, TaskGraph, build_graph, expand_undirected
from .core.invariants import CondensationCycleError, InvariantViolation
from .core.paths import DistanceResult, longest_from, path_weight, shortest_from, solve
from .core.pipeline import AnalysisResult, analyze, expand_components
from .core.scc import SccResult, tarjan_scc
from .core.topo import TopoResult, kahn_order

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("taskgraph")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

__all__ = [
    "core",
    "Edge",
    "TaskGraph",
    "InputError",
    "build_graph",
    "expand_undirected",
    "SccResult",
    "tarjan_scc",
    "CondensationEdge",
    "CondensationGraph",
    "build_condensation",
    "TopoResult",
    "kahn_order",
    "DistanceResult",
    "shortest_from",
    "longest_from",
    "solve",
    "path_weight",
    "AnalysisResult",
    "analyze",
    "expand_components",
    "InvariantViolation",
    "CondensationCycleError",
    "__version__",
]
