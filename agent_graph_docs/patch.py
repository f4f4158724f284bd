# agent_graph_docs/patch.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .mermaid_fmt import mermaid_block

PathLike = Union[str, Path]


class MissingMarkerError(ValueError):
    """A sentinel marker is absent from the document, or the pair is out of order."""

    def __init__(
        self,
        start_marker: str,
        end_marker: str,
        *,
        missing: tuple[str, ...] = (),
        out_of_order: bool = False,
        path: Optional[PathLike] = None,
    ) -> None:
        self.start_marker = start_marker
        self.end_marker = end_marker
        self.missing = missing
        self.out_of_order = out_of_order
        self.path = path

        where = f" in {path}" if path is not None else ""
        if missing:
            names = " and ".join(repr(m) for m in missing)
            message = f"could not find marker {names}{where}"
        else:
            message = f"marker {end_marker!r} must come after {start_marker!r}{where}"
        super().__init__(message)


def find_marker_span(
    text: str,
    start_marker: str,
    end_marker: str,
    *,
    path: Optional[PathLike] = None,
) -> tuple[int, int]:
    """Return (end of start marker, start of end marker) for the first marker pair.

    Only the first occurrence of each marker is considered.
    """
    start_idx = text.find(start_marker)
    end_idx = text.find(end_marker)

    missing = tuple(
        marker
        for marker, idx in ((start_marker, start_idx), (end_marker, end_idx))
        if idx == -1
    )
    if missing:
        raise MissingMarkerError(start_marker, end_marker, missing=missing, path=path)

    span_start = start_idx + len(start_marker)
    if end_idx < span_start:
        raise MissingMarkerError(start_marker, end_marker, out_of_order=True, path=path)

    return span_start, end_idx


def wrap_block(body: str) -> str:
    """Fence `body` so the span stays readable and re-parseable on the next run."""
    return "\n" + mermaid_block(body)


def patch_marker_block(
    text: str,
    start_marker: str,
    end_marker: str,
    body: str,
    *,
    path: Optional[PathLike] = None,
) -> str:
    """Replace everything between the markers with a fenced copy of `body`.

    The markers themselves and everything outside them are left byte-identical,
    so applying the same body twice gives the same document as applying it once.
    """
    span_start, span_end = find_marker_span(text, start_marker, end_marker, path=path)
    return text[:span_start] + wrap_block(body) + text[span_end:]


def extract_marker_block(
    text: str,
    start_marker: str,
    end_marker: str,
    *,
    path: Optional[PathLike] = None,
) -> str:
    """Return the current contents of the marker span (markers excluded)."""
    span_start, span_end = find_marker_span(text, start_marker, end_marker, path=path)
    return text[span_start:span_end]
