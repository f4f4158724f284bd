import os
import sys
import textwrap

import pytest

from agent_graph_docs.io import (
    NotFoundError,
    WriteError,
    load_graph_file,
    load_graph_object,
    read_document,
    write_document,
)


def test_read_missing_document_raises_not_found(tmp_path):
    path = tmp_path / "missing.md"
    with pytest.raises(NotFoundError) as exc_info:
        read_document(path)
    assert str(path) in str(exc_info.value)
    assert isinstance(exc_info.value, FileNotFoundError)


def test_write_then_read_preserves_text_exactly(tmp_path):
    path = tmp_path / "doc.md"
    text = "line one\r\nline two\nünïcode\n"
    write_document(path, text)
    assert path.read_bytes() == text.encode("utf-8")
    assert read_document(path) == text


def test_write_leaves_no_temp_files(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("old", encoding="utf-8")
    write_document(path, "new")
    assert sorted(os.listdir(tmp_path)) == ["doc.md"]


def test_write_into_missing_directory_raises_write_error(tmp_path):
    path = tmp_path / "nope" / "doc.md"
    with pytest.raises(WriteError) as exc_info:
        write_document(path, "text")
    assert str(path) in str(exc_info.value)
    assert not path.exists()


def test_load_yaml_graph_file(tmp_path):
    path = tmp_path / "graph.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            nodes:
              __start__: {}
              agent: {type: runnable}
            edges:
              - {source: __start__, target: agent}
              - {source: agent, target: __end__, conditional: true}
            """
        ),
        encoding="utf-8",
    )
    graph = load_graph_file(path)
    assert list(graph["nodes"]) == ["__start__", "agent"]
    assert graph["edges"][1]["conditional"] is True


def test_load_json_graph_file(tmp_path):
    path = tmp_path / "graph.json"
    path.write_text(
        '{"nodes": {"a": {}}, "edges": [{"source": "a", "target": "a"}]}',
        encoding="utf-8",
    )
    assert load_graph_file(path) == {
        "nodes": {"a": {}},
        "edges": [{"source": "a", "target": "a"}],
    }


def test_load_graph_file_errors(tmp_path):
    with pytest.raises(NotFoundError):
        load_graph_file(tmp_path / "absent.yaml")

    bad = tmp_path / "bad.yaml"
    bad.write_text("nodes: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to parse"):
        load_graph_file(bad)

    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(TypeError, match="must be a mapping"):
        load_graph_file(scalar)


def test_load_graph_object_calls_get_graph(tmp_path, monkeypatch):
    (tmp_path / "fake_orchestrator.py").write_text(
        textwrap.dedent(
            """\
            class _App:
                def get_graph(self):
                    return {"nodes": {"__start__": {}}, "edges": []}

            app = _App()
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.setattr(sys, "path", list(sys.path))
    monkeypatch.delitem(sys.modules, "fake_orchestrator", raising=False)

    graph = load_graph_object("fake_orchestrator:app", search_path=tmp_path)
    assert graph == {"nodes": {"__start__": {}}, "edges": []}


@pytest.mark.parametrize(
    "ref",
    ["no_colon", ":app", "module:", "definitely_not_a_module_xyz:app", "os:no_such_attr"],
)
def test_load_graph_object_bad_refs(ref):
    with pytest.raises(ValueError):
        load_graph_object(ref)


def test_read_keeps_crlf_line_endings(tmp_path):
    path = tmp_path / "doc.md"
    path.write_bytes(b"a\r\nb\r\n")
    assert read_document(path) == "a\r\nb\r\n"


def test_read_invalid_utf8_names_the_path(tmp_path):
    path = tmp_path / "latin1.md"
    path.write_bytes("café\n".encode("latin-1"))
    with pytest.raises(ValueError) as exc_info:
        read_document(path)
    assert str(path) in str(exc_info.value)
    assert "UTF-8" in str(exc_info.value)
