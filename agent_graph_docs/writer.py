from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .constants import END_MARKER, START_MARKER
from .io import read_document, write_document
from .patch import patch_marker_block


@dataclass(frozen=True)
class SyncResult:
    path: Path
    changed: bool
    written: bool


def sync_document(
    path: Path,
    diagram_code: str,
    *,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
    check: bool = False,
) -> SyncResult:
    """Replace the marker block of a Markdown file with a Mermaid diagram block.

    The document is read once and the new content is computed in memory before
    anything is written, so a missing marker leaves the file untouched. With
    `check=True` nothing is written; `changed` tells whether the file is stale.
    """
    original = read_document(path)
    updated = patch_marker_block(
        original, start_marker, end_marker, diagram_code, path=path
    )
    changed = updated != original

    if check:
        return SyncResult(path=path, changed=changed, written=False)

    write_document(path, updated)
    return SyncResult(path=path, changed=changed, written=True)
