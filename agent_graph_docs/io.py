# agent_graph_docs/io.py
from __future__ import annotations

import importlib
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional

import yaml

from .graph_view import resolve_graph


class NotFoundError(FileNotFoundError):
    """An input file (document or graph description) does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"file not found: {path}")
        self.path = path


class WriteError(OSError):
    """The updated document could not be written back."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"failed to write {path}: {cause}")
        self.path = path
        self.cause = cause


def read_document(path: Path) -> str:
    """Read the whole target document as UTF-8 text.

    Bytes are decoded as-is: line endings are not translated, so whatever
    lies outside the marker span is written back unchanged.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise NotFoundError(path) from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"{path} is not valid UTF-8: {e}") from e


def write_document(path: Path, text: str) -> None:
    """Overwrite `path` with `text`.

    The content goes to a temporary sibling first and is moved into place with
    os.replace(), so readers never see a half-written document. Symlinks are
    followed and the existing file mode is kept.
    """
    target = path.resolve()
    tmp_name: Optional[str] = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        with os.fdopen(fd, "wb") as fh:
            fh.write(text.encode("utf-8"))
        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise WriteError(path, e) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def load_graph_file(path: Path) -> dict[str, Any]:
    """Load a graph description ({nodes, edges}) from a YAML or JSON file."""
    if not path.exists():
        raise NotFoundError(path)

    raw = path.read_text(encoding="utf-8")
    try:
        # JSON is a subset of YAML, so one loader covers both.
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse graph file {path}: {e}") from e

    if not isinstance(data, dict):
        raise TypeError(
            f"Top-level graph description must be a mapping in {path}, "
            f"got {type(data).__name__}"
        )

    return data


def load_graph_object(ref: str, *, search_path: Optional[Path] = None) -> Any:
    """Import `package.module:attribute` and return the graph it exposes.

    The attribute is typically a compiled orchestration app; its `get_graph()`
    result is returned when available, otherwise the attribute itself.
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"graph reference must look like 'module:attribute', got {ref!r}")

    if search_path is not None and str(search_path) not in sys.path:
        sys.path.insert(0, str(search_path))

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"cannot import module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ValueError(f"{module_name!r} has no attribute {attr_path!r}") from e

    return resolve_graph(obj)
