"""Unit tests for JSON Canvas loading and the file-backed host."""

import json

import pytest

from canvasfilter.canvas_file import FileCanvasHost, load_canvas, parse_canvas
from canvasfilter.core.exceptions import CanvasLoadError
from canvasfilter.core.types import FileNode, GroupNode, LinkNode, TextNode

CANVAS = {
    "nodes": [
        {"id": "g", "type": "group", "x": -20, "y": -20, "width": 400, "height": 300, "label": "Ideas"},
        {"id": "t", "type": "text", "x": 0, "y": 0, "width": 250, "height": 60, "text": "Plan #todo", "color": "3"},
        {"id": "f", "type": "file", "x": 0, "y": 100, "width": 250, "height": 60, "file": "notes/a.md"},
        {"id": "l", "type": "link", "x": 500, "y": 0, "width": 250, "height": 60, "url": "https://example.com"},
    ],
    "edges": [
        {"id": "e1", "fromNode": "t", "fromSide": "bottom", "toNode": "f", "toSide": "top"},
    ],
}


class TestParseCanvas:
    def test_parses_all_variants(self):
        document = parse_canvas(json.dumps(CANVAS))
        kinds = [type(n) for n in document.nodes]
        assert kinds == [GroupNode, TextNode, FileNode, LinkNode]
        assert document.edges[0].from_node == "t"

    def test_empty_document(self):
        document = parse_canvas("{}")
        assert document.nodes == [] and document.edges == []

    def test_malformed_json(self):
        with pytest.raises(CanvasLoadError):
            parse_canvas("{not json")

    def test_unknown_node_type(self):
        bad = {"nodes": [{"id": "x", "type": "widget", "x": 0, "y": 0, "width": 1, "height": 1}]}
        with pytest.raises(CanvasLoadError):
            parse_canvas(json.dumps(bad))

    def test_duplicate_ids(self):
        node = {"id": "x", "type": "text", "x": 0, "y": 0, "width": 1, "height": 1, "text": ""}
        with pytest.raises(CanvasLoadError, match="duplicate node ids: x"):
            parse_canvas(json.dumps({"nodes": [node, node]}))

    def test_dangling_edges_are_kept(self):
        data = {"nodes": [], "edges": [{"id": "e", "fromNode": "a", "toNode": "b"}]}
        assert len(parse_canvas(json.dumps(data)).edges) == 1


class TestLoadCanvas:
    def test_from_file(self, tmp_path):
        path = tmp_path / "board.canvas"
        path.write_text(json.dumps(CANVAS))
        assert len(load_canvas(path).nodes) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(CanvasLoadError):
            load_canvas(tmp_path / "missing.canvas")


class TestFileCanvasHost:
    def test_snapshot_carries_selection(self):
        host = FileCanvasHost(parse_canvas(json.dumps(CANVAS)), selection=["t"])
        snapshot = host.snapshot()
        assert snapshot.selection == {"t"}
        assert snapshot.node_ids == {"g", "t", "f", "l"}
        assert host.is_canvas_active()

    def test_presentation_covers_every_element(self):
        host = FileCanvasHost(parse_canvas(json.dumps(CANVAS)))
        assert set(host.presentation.nodes) == {"g", "t", "f", "l"}
        assert set(host.presentation.edges) == {"e1"}

    def test_deselect_all(self):
        host = FileCanvasHost(parse_canvas(json.dumps(CANVAS)), selection=["t", "e1"])
        host.deselect_all()
        assert host.snapshot().selection == frozenset()

    def test_unknown_selection(self):
        host = FileCanvasHost(parse_canvas(json.dumps(CANVAS)), selection=["t", "ghost"])
        assert host.unknown_selection() == ["ghost"]
