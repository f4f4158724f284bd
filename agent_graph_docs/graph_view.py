from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    conditional: bool = False


@dataclass(frozen=True)
class GraphView:
    """Order-preserving snapshot of an orchestration graph.

    `nodes` keeps the iteration order of the source mapping; `edges` keeps the
    order of the source sequence. Rendering order is observable, so neither is
    ever re-sorted.
    """

    nodes: dict[str, Any]
    edges: tuple[GraphEdge, ...] = ()


def as_bool(value: Any, default: bool = False) -> bool:
    """Convert a value to bool, treating None as "not set"."""
    if value is None:
        return default
    return bool(value)


def _field(obj: Any, name: str, default: Any = None) -> Any:
    # Graph parts arrive either as plain mappings (YAML/JSON) or as objects
    # (e.g. LangGraph's Graph / Edge named tuples).
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def resolve_graph(source: Any) -> Any:
    """Return the graph structure behind `source`, calling `get_graph()` if exposed."""
    get_graph = getattr(source, "get_graph", None)
    if callable(get_graph):
        return get_graph()
    return source


def _build_nodes(raw: Any) -> dict[str, Any]:
    if raw is None:
        return {}

    if isinstance(raw, Mapping):
        return {str(node_id): meta for node_id, meta in raw.items()}

    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        raise TypeError(
            f"graph.nodes must be a mapping or a list of ids, got {type(raw).__name__}"
        )

    # A bare list of ids carries no metadata.
    return {str(node_id): None for node_id in raw}


def _build_edge(raw: Any, index: int) -> GraphEdge:
    source = _field(raw, "source")
    target = _field(raw, "target")
    if source is None or target is None:
        raise TypeError(f"graph.edges[{index}] must have a `source` and a `target`")

    return GraphEdge(
        source=str(source),
        target=str(target),
        conditional=as_bool(_field(raw, "conditional")),
    )


def _build_edges(raw: Any) -> tuple[GraphEdge, ...]:
    # An absent edge collection is the same as an empty one.
    if raw is None:
        return ()

    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        raise TypeError(f"graph.edges must be a list, got {type(raw).__name__}")

    return tuple(_build_edge(edge, i) for i, edge in enumerate(raw))


def build_graph_view(graph: Any) -> GraphView:
    """Normalize a graph (mapping, object, or `get_graph()` provider) into a GraphView.

    The input is only read, never mutated. No referential checks are made:
    edges may point at nodes that were never declared.
    """
    graph = resolve_graph(graph)
    if graph is None:
        raise TypeError("graph source returned None")

    return GraphView(
        nodes=_build_nodes(_field(graph, "nodes")),
        edges=_build_edges(_field(graph, "edges")),
    )


def graph_to_dict(view: GraphView) -> dict[str, Any]:
    """JSON-safe dump of a GraphView, for diagnostics."""
    return {
        "nodes": list(view.nodes),
        "edges": [
            {"source": e.source, "target": e.target, "conditional": e.conditional}
            for e in view.edges
        ],
    }
