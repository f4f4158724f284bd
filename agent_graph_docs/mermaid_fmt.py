from __future__ import annotations

import re

from .constants import (
    CONDITIONAL_ARROW,
    CONDITIONAL_LABEL,
    FENCE_LANGUAGE,
    NODE_LABELS,
    SOLID_ARROW,
)

# Mermaid node IDs must be alphanumeric/underscore and must not start with a
# digit.
MERMAID_ID_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def mermaid_block(code: str) -> str:
    """Wrap Mermaid source in a Markdown Mermaid code fence."""
    return f"```{FENCE_LANGUAGE}\n" + code.rstrip("\n") + "\n```\n"


def mm_node_label(node_id: str) -> str:
    """Display label for a node: reserved ids get a readable name, others pass through."""
    return NODE_LABELS.get(node_id, node_id)


def mm_stadium_node(node_id: str, label: str) -> str:
    return f"{node_id}([{label}]);"


def mm_graph_edge(source: str, target: str, conditional: bool = False) -> str:
    if conditional:
        return f"{source} {CONDITIONAL_ARROW}|{CONDITIONAL_LABEL}| {target};"
    return f"{source} {SOLID_ARROW} {target};"
