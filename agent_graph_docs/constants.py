# agent_graph_docs/constants.py
from __future__ import annotations

from pathlib import Path

# Sentinel lines delimiting the generated block inside the target document.
START_MARKER = "<!-- MERMAID_DIAGRAM_START -->"
END_MARKER = "<!-- MERMAID_DIAGRAM_END -->"

# Reserved ids for the implicit entry/exit points of an orchestration graph.
START_NODE_ID = "__start__"
END_NODE_ID = "__end__"

NODE_LABELS: dict[str, str] = {
    START_NODE_ID: "Start",
    END_NODE_ID: "End",
}

DIAGRAM_HEADER = "graph TD;"
DIAGRAM_INDENT = "    "

SOLID_ARROW = "-->"
CONDITIONAL_ARROW = "-.->"
CONDITIONAL_LABEL = "conditional"

FENCE_LANGUAGE = "mermaid"

DOC_PATH_DEFAULT = Path("docs") / "agent_graph.md"

EXIT_OK = 0
EXIT_FAILURE = 1
