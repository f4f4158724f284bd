# agent_graph_docs/validate.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from .constants import END_MARKER, NODE_LABELS, START_MARKER
from .graph_view import GraphView
from .mermaid_fmt import MERMAID_ID_RE

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class ValidationIssue:
    """Structured lint finding for callers that want more than strings."""

    severity: Severity
    code: str
    message: str
    path: str = ""
    hint: Optional[str] = None


@dataclass(frozen=True)
class ValidateConfig:
    """Lint configuration.

    Only structural checks live here; reachability and cycles are deliberately
    not inspected.
    """

    start_marker: str = START_MARKER
    end_marker: str = END_MARKER

    # Rule controls
    ignore: set[str] = field(default_factory=set)
    escalate: set[str] = field(default_factory=set)


def validate_graph_issues(
    view: GraphView, cfg: Optional[ValidateConfig] = None
) -> list[ValidationIssue]:
    """Return structured lint issues for a normalized graph."""

    cfg = cfg or ValidateConfig()
    issues: list[ValidationIssue] = []
    markers = (cfg.start_marker, cfg.end_marker)

    def emit(
        severity: Severity,
        code: str,
        message: str,
        path: str = "",
        hint: Optional[str] = None,
    ) -> None:
        if code in cfg.ignore:
            return
        final_severity: Severity = (
            "error" if (severity == "warning" and code in cfg.escalate) else severity
        )
        issues.append(
            ValidationIssue(
                severity=final_severity,
                code=code,
                message=message,
                path=path,
                hint=hint,
            )
        )

    for node_id in view.nodes:
        # Document-breaker: a sentinel inside the rendered block would make the
        # next run's marker search pick the wrong span.
        if any(marker in node_id for marker in markers):
            emit(
                "error",
                "E_NODE_CONTAINS_MARKER",
                f"node id {node_id!r} contains a diagram marker",
                path=f"/nodes/{node_id}",
            )
            continue

        if node_id not in NODE_LABELS and not MERMAID_ID_RE.match(node_id):
            emit(
                "warning",
                "W_NODE_ID_NOT_MERMAID_SAFE",
                f"node id {node_id!r} is not Mermaid-safe (use [A-Za-z0-9_] and "
                "cannot start with a digit)",
                path=f"/nodes/{node_id}",
                hint="Use snake_case or camelCase node names",
            )

    for i, edge in enumerate(view.edges):
        for end_name, value in (("source", edge.source), ("target", edge.target)):
            if any(marker in value for marker in markers):
                emit(
                    "error",
                    "E_EDGE_CONTAINS_MARKER",
                    f"edge {end_name} {value!r} contains a diagram marker",
                    path=f"/edges/{i}/{end_name}",
                )
            elif value not in view.nodes:
                emit(
                    "warning",
                    f"W_EDGE_{end_name.upper()}_UNKNOWN",
                    f"edge {end_name} references undeclared node {value!r}",
                    path=f"/edges/{i}/{end_name}",
                )

    return issues


def validate_graph(
    view: GraphView, cfg: Optional[ValidateConfig] = None
) -> Tuple[list[str], list[str]]:
    """Lint a graph and return (errors, warnings) as plain messages."""
    issues = validate_graph_issues(view, cfg)
    errors = [iss.message for iss in issues if iss.severity == "error"]
    warnings = [iss.message for iss in issues if iss.severity == "warning"]
    return errors, warnings
