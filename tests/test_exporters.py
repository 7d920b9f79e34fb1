"""Tests for exporters."""

import json
import tempfile
from pathlib import Path

import pytest

from graph.model import DependencyGraph
from graph.styles import MODULE_COLOR, NEUTRAL_COLOR
from exporters.html_exporter import DATA_FILENAME, TEMPLATE_PATH, VIEWER_FILENAME, to_data_script, write_html
from exporters.json_exporter import to_json
from exporters.mermaid_exporter import to_mermaid


@pytest.fixture
def graph():
    graph = DependencyGraph()
    graph.add_edge("app/app.module", "app/app.service", ["AppService"])
    graph.add_edge("app/app.module", "@angular/core", ["NgModule"])
    return graph


class TestJSONExporter:
    """Tests for JSON exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        data = json.loads(to_json(DependencyGraph()))

        assert data["nodes"] == []
        assert data["edges"] == []

    def test_simple_graph(self, graph):
        """Test exporting simple graph."""
        data = json.loads(to_json(graph))

        assert [n["id"] for n in data["nodes"]] == ["app/app.module", "app/app.service", "@angular/core"]
        assert data["nodes"][0]["color"] == MODULE_COLOR
        assert data["edges"][0]["from"] == "app/app.service"
        assert data["edges"][0]["to"] == "app/app.module"
        assert data["edges"][0]["imports"] == ["AppService"]


class TestHTMLExporter:
    """Tests for the vis-network viewer output."""

    def test_data_script(self, graph):
        """Test that the data script declares nodes and edges."""
        script = to_data_script(graph)
        lines = script.splitlines()

        assert lines[0].startswith("const nodes = ")
        assert lines[1].startswith("const edges = ")
        nodes = json.loads(lines[0][len("const nodes = "):].rstrip(";"))
        assert len(nodes) == 3

    def test_data_script_default_color(self, graph):
        """Test that the viewer's default node color comes from the data script."""
        lines = to_data_script(graph).splitlines()

        assert lines[2] == f"const defaultColor = {json.dumps(NEUTRAL_COLOR)};"
        assert "defaultColor" in TEMPLATE_PATH.read_text(encoding="utf-8")

    def test_write_html(self, graph):
        """Test that the data file and viewer are written to a new directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_dir = Path(tmpdir) / "out" / "graph"

            viewer = write_html(graph, output_dir)

            assert viewer == output_dir / VIEWER_FILENAME
            assert viewer.is_file()
            assert DATA_FILENAME in viewer.read_text(encoding="utf-8")
            assert (output_dir / DATA_FILENAME).read_text(encoding="utf-8") == to_data_script(graph)


class TestMermaidExporter:
    """Tests for Mermaid exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        assert to_mermaid(DependencyGraph()) == "flowchart LR"

    def test_simple_graph(self, graph):
        """Test nodes, styles and labelled edges."""
        output = to_mermaid(graph)

        assert output.startswith("flowchart LR")
        assert 'app_app_module["app/app.module"]' in output
        assert f"style app_app_module fill:{MODULE_COLOR}" in output
        assert 'app_app_module -->|"AppService"| app_app_service' in output
        assert '_angular_core' in output

    def test_orientation(self, graph):
        """Test different orientations."""
        for orientation in ["LR", "TD", "TB", "RL", "BT"]:
            output = to_mermaid(graph, orientation=orientation)
            assert output.startswith(f"flowchart {orientation}")

    def test_colliding_ids(self):
        """Test that ids which sanitize to the same string stay distinct."""
        graph = DependencyGraph()
        graph.add_edge("a-b", "a.b")

        output = to_mermaid(graph)

        assert "a_b --> a_b_1" in output

    def test_reserved_keyword_ids(self):
        """Test that nodes named after flowchart keywords get a safe ID."""
        graph = DependencyGraph()
        graph.add_edge("app/main", "end")

        output = to_mermaid(graph)

        assert '    end_node["end"]' in output
        assert "app_main --> end_node" in output
        assert "--> end\n" not in output + "\n"
