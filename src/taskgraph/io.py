"""
Graph document helpers (JSON/YAML → TaskGraph).
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

import yaml

from .core.graph import Edge, InputError, TaskGraph, build_graph

_YAML_SUFFIXES = {".yaml", ".yml"}


class GraphDocumentError(ValueError):
    """Raised when a graph document is malformed."""


@dataclass(frozen=True)
class GraphDocument:
    directed: bool
    n: int
    edges: Tuple[Edge, ...]
    source: int
    weight_model: Optional[str] = None

    def to_graph(self) -> TaskGraph:
        """Build the validated graph, materializing reverse edges when undirected."""

        return build_graph(self.n, self.edges, directed=self.directed)


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise GraphDocumentError(f"{what} must be an integer, got {value!r}.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise GraphDocumentError(f"{what} must be an integer, got {value!r}.")


def _parse_edge(idx: int, entry: Any) -> Edge:
    if isinstance(entry, Mapping):
        if "u" not in entry or "v" not in entry:
            raise GraphDocumentError(f"Edge {idx} requires 'u' and 'v'.")
        u, v, w = entry["u"], entry["v"], entry.get("w", 0)
    elif isinstance(entry, (list, tuple)) and len(entry) in (2, 3):
        u, v = entry[0], entry[1]
        w = entry[2] if len(entry) == 3 else 0
    else:
        raise GraphDocumentError(f"Edge {idx} must be a mapping with u/v/w or a [u, v, w] list.")
    return Edge(
        _as_int(u, f"Edge {idx} 'u'"),
        _as_int(v, f"Edge {idx} 'v'"),
        _as_int(w, f"Edge {idx} 'w'"),
    )


def parse_graph_document(data: Any) -> GraphDocument:
    if not isinstance(data, Mapping):
        raise GraphDocumentError("Graph document must be a mapping.")
    if "n" not in data:
        raise GraphDocumentError("Graph document requires a node count 'n'.")
    n = _as_int(data["n"], "Node count 'n'")
    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise GraphDocumentError("'edges' must be a list.")
    directed = data.get("directed", False)
    if not isinstance(directed, bool):
        raise GraphDocumentError(f"'directed' must be a boolean, got {directed!r}.")
    weight_model = data.get("weight_model")
    weight_model = str(weight_model).strip() or None if weight_model is not None else None
    return GraphDocument(
        directed=directed,
        n=n,
        edges=tuple(_parse_edge(idx, entry) for idx, entry in enumerate(raw_edges)),
        source=_as_int(data.get("source", 0), "'source'"),
        weight_model=weight_model,
    )


def load_graph_document(path: Path) -> GraphDocument:
    doc_path = Path(path)
    if not doc_path.exists():
        raise GraphDocumentError(f"Graph document '{doc_path}' not found.")
    text = doc_path.read_text(encoding="utf-8")
    try:
        if doc_path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise GraphDocumentError(f"Failed to parse {doc_path}: {exc}") from exc
    return parse_graph_document(data)


def load_graph(path: Path) -> Tuple[TaskGraph, GraphDocument]:
    """Load a document and validate it into a graph; range errors surface as InputError.

    The document's ``source`` is checked later by ``analyze`` so callers can
    override it.
    """

    document = load_graph_document(path)
    return document.to_graph(), document


__all__ = [
    "GraphDocument",
    "GraphDocumentError",
    "InputError",
    "load_graph",
    "load_graph_document",
    "parse_graph_document",
]
