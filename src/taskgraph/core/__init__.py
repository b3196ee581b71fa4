"""
Core analysis stages for taskgraph.

The core package includes the validated graph model, Tarjan SCC discovery,
condensation construction, Kahn ordering, DAG shortest/longest paths and the
invariant helpers that tie the stages together.
"""

from . import graph, scc, condensation, topo, paths, invariants, pipeline  # noqa: F401

__all__ = ["graph", "scc", "condensation", "topo", "paths", "invariants", "pipeline"]
