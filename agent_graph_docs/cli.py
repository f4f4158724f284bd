# agent_graph_docs/cli.py
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

from .constants import (
    DOC_PATH_DEFAULT,
    END_MARKER,
    EXIT_FAILURE,
    EXIT_OK,
    START_MARKER,
)
from .graph_view import build_graph_view, graph_to_dict
from .io import load_graph_file, load_graph_object
from .render import render_view
from .validate import ValidateConfig, validate_graph
from .writer import sync_document


@dataclass(frozen=True)
class SyncConfig:
    doc_path: Path
    start_marker: str = START_MARKER
    end_marker: str = END_MARKER
    strict: bool = False
    check: bool = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agent-graph-docs",
        description=(
            "Render an orchestration graph as a Mermaid diagram and inject it "
            "between marker comments in a Markdown file."
        ),
    )
    parser.add_argument(
        "--doc",
        type=Path,
        default=DOC_PATH_DEFAULT,
        help=f"Markdown file to update (default: {DOC_PATH_DEFAULT})",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--graph",
        type=Path,
        help="YAML or JSON file describing the graph ({nodes, edges}).",
    )
    source.add_argument(
        "--app",
        type=str,
        help=(
            "Python object exposing get_graph(), as 'package.module:attribute' "
            "(e.g. a compiled LangGraph app)."
        ),
    )

    parser.add_argument(
        "--start-marker",
        type=str,
        default=START_MARKER,
        help="Line that opens the generated block",
    )
    parser.add_argument(
        "--end-marker",
        type=str,
        default=END_MARKER,
        help="Line that closes the generated block",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=(
            "Fail on graph lint warnings (e.g., edges to undeclared nodes, "
            "non Mermaid-safe ids). Errors always fail."
        ),
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit non-zero if the document is out of date.",
    )
    parser.add_argument(
        "--show-graph",
        action="store_true",
        help="Print the normalized graph structure as JSON to stderr.",
    )
    parser.add_argument(
        "--show-diagram",
        action="store_true",
        help="Print the generated Mermaid text to stdout.",
    )
    return parser


def _load_graph(args: argparse.Namespace) -> Any:
    if args.graph is not None:
        return load_graph_file(args.graph)
    return load_graph_object(args.app, search_path=Path.cwd())


def run(
    graph: Any,
    cfg: SyncConfig,
    *,
    show_graph: bool = False,
    show_diagram: bool = False,
) -> int:
    """Render `graph` and sync it into the configured document."""
    view = build_graph_view(graph)

    if show_graph:
        print(json.dumps(graph_to_dict(view), indent=2), file=sys.stderr)

    errors, warnings = validate_graph(
        view, ValidateConfig(start_marker=cfg.start_marker, end_marker=cfg.end_marker)
    )
    for warning in warnings:
        print(f"warning: {warning}", file=sys.stderr)

    if errors or (cfg.strict and warnings):
        for error in errors:
            print(f"error: {error}", file=sys.stderr)
        return EXIT_FAILURE

    diagram_code = render_view(view)
    if show_diagram:
        print(diagram_code, end="")

    result = sync_document(
        cfg.doc_path,
        diagram_code,
        start_marker=cfg.start_marker,
        end_marker=cfg.end_marker,
        check=cfg.check,
    )

    if cfg.check:
        if result.changed:
            print(f"error: {result.path} is out of date", file=sys.stderr)
            return EXIT_FAILURE
        print(f"{result.path} is up to date")
        return EXIT_OK

    print(f"updated Mermaid diagram in {result.path}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint."""
    args = _build_parser().parse_args(argv)

    cfg = SyncConfig(
        doc_path=args.doc,
        start_marker=args.start_marker,
        end_marker=args.end_marker,
        strict=args.strict,
        check=args.check,
    )

    try:
        graph = _load_graph(args)
        return run(
            graph,
            cfg,
            show_graph=args.show_graph,
            show_diagram=args.show_diagram,
        )
    except (OSError, ValueError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE
