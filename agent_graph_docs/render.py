from __future__ import annotations

from typing import Any

from .constants import DIAGRAM_HEADER, DIAGRAM_INDENT
from .graph_view import GraphView, build_graph_view
from .mermaid_fmt import mm_graph_edge, mm_node_label, mm_stadium_node


def render_view(view: GraphView) -> str:
    """Render a normalized graph as a top-down Mermaid flowchart.

    All node declarations come first (in node order), then all connectors (in
    edge order). Self-loops and duplicate edges are emitted as-is.
    """
    lines: list[str] = [DIAGRAM_HEADER]

    for node_id in view.nodes:
        lines.append(DIAGRAM_INDENT + mm_stadium_node(node_id, mm_node_label(node_id)))

    for edge in view.edges:
        lines.append(
            DIAGRAM_INDENT + mm_graph_edge(edge.source, edge.target, edge.conditional)
        )

    return "".join(line + "\n" for line in lines)


def render_graph(graph: Any) -> str:
    """Render a raw graph (mapping, object, or `get_graph()` provider)."""
    return render_view(build_graph_view(graph))
