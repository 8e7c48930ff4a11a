"""
Unit tests for the selection-driven CLI commands.
"""

import json

import pytest
from click.testing import CliRunner

from canvasfilter.cli.main import main

CANVAS = {
    "nodes": [
        {"id": "g", "type": "group", "x": 0, "y": 0, "width": 200, "height": 200, "label": "Box"},
        {"id": "a", "type": "text", "x": 10, "y": 10, "width": 50, "height": 50, "text": "A", "color": "1"},
        {"id": "b", "type": "text", "x": 400, "y": 10, "width": 50, "height": 50, "text": "B", "color": "1"},
        {"id": "c", "type": "text", "x": 800, "y": 10, "width": 50, "height": 50, "text": "C"},
    ],
    "edges": [
        {"id": "ab", "fromNode": "a", "toNode": "b"},
        {"id": "bc", "fromNode": "b", "toNode": "c"},
    ],
}


@pytest.fixture
def canvas_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "board.canvas"
    path.write_text(json.dumps(CANVAS))
    return str(path)


def _invoke(*args):
    return CliRunner().invoke(main, list(args))


def _shown(payload):
    return {
        node_id for node_id, state in payload["nodes"].items()
        if state["display"] == "visible" and state["opacity"] == 1.0
    }


class TestConnectedCommand:
    def test_downstream_json(self, canvas_path):
        result = _invoke("connected", canvas_path, "-s", "b", "--direction", "downstream", "--json")

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert _shown(payload) == {"b", "c"}
        assert payload["nodes"]["a"]["display"] == "hidden"
        assert payload["shown"] == ["b", "c"]
        assert payload["mode"] == "hide"

    def test_both_directions_include_group(self, canvas_path):
        result = _invoke("connected", canvas_path, "-s", "c", "--json")
        payload = json.loads(result.output)
        assert _shown(payload) == {"a", "b", "c", "g"}

    def test_requires_selection(self, canvas_path):
        result = _invoke("connected", canvas_path, "--json")
        assert result.exit_code == 1
        assert "Please select at least one node" in result.output

    def test_table_output(self, canvas_path):
        result = _invoke("connected", canvas_path, "-s", "a", "--direction", "upstream")
        assert result.exit_code == 0, result.output
        assert "nodes shown" in result.output


class TestSameColorCommand:
    def test_fade_mode(self, canvas_path):
        result = _invoke("same-color", canvas_path, "-s", "a", "--mode", "fade", "--json")

        payload = json.loads(result.output)
        assert _shown(payload) == {"a", "b", "g"}
        assert payload["nodes"]["c"] == {"display": "visible", "opacity": 0.3}
        assert payload["edges"]["bc"]["opacity"] == 0.3

    def test_mode_from_settings(self, canvas_path, tmp_path):
        (tmp_path / ".canvasfilter").mkdir()
        (tmp_path / ".canvasfilter" / "config.yaml").write_text("display_mode: fade\n")
        result = _invoke("same-color", canvas_path, "-s", "a", "--json")
        assert json.loads(result.output)["mode"] == "fade"

    def test_bad_settings_exit(self, canvas_path, tmp_path):
        (tmp_path / ".canvasfilter").mkdir()
        (tmp_path / ".canvasfilter" / "config.yaml").write_text("display_mode: blur\n")
        result = _invoke("same-color", canvas_path, "-s", "a", "--json")
        assert result.exit_code == 1


class TestHideSelectedCommand:
    def test_only_selected_changes(self, canvas_path):
        result = _invoke("hide-selected", canvas_path, "-s", "b", "--json")

        payload = json.loads(result.output)
        assert payload["nodes"]["b"]["display"] == "hidden"
        assert _shown(payload) == {"a", "c", "g"}
        assert payload["edges"]["ab"]["display"] == "visible"

    def test_with_connections(self, canvas_path):
        result = _invoke("hide-selected", canvas_path, "-s", "b", "--with-connections", "--json")
        payload = json.loads(result.output)
        assert payload["edges"]["ab"]["display"] == "hidden"
        assert payload["edges"]["bc"]["display"] == "hidden"


class TestShowAllCommand:
    def test_everything_visible(self, canvas_path):
        result = _invoke("show-all", canvas_path, "--json")
        payload = json.loads(result.output)
        assert _shown(payload) == {"a", "b", "c", "g"}
        assert payload["shown"] == []


class TestLoadErrors:
    def test_invalid_canvas(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "broken.canvas"
        path.write_text("{not json")
        result = _invoke("show-all", str(path))
        assert result.exit_code == 1
        assert "Failed to load canvas" in result.output
