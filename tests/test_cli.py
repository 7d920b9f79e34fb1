"""Tests for the command line interface."""

import json
import tempfile
from pathlib import Path

import pytest

from cli import main, parse_args


@pytest.fixture
def project():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir).resolve()
        src = root / "src"
        src.mkdir()
        (src / "app.module.ts").write_text(
            "import { Foo } from './app.service';\nimport { NgModule } from '@angular/core';\n",
            encoding="utf-8",
        )
        (src / "app.service.ts").write_text("export class Foo {}\n", encoding="utf-8")
        yield root


class TestCLI:
    """Tests for cli.main."""

    def test_defaults(self):
        """Test default argument values."""
        parsed = parse_args([])

        assert parsed.project is None
        assert parsed.format == "html"
        assert not parsed.ignore_external

    def test_json_stdout(self, project, capsys):
        """Test JSON output on stdout."""
        code = main([str(project), "-c", str(project), "-f", "json"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [n["id"] for n in data["nodes"]] == ["app.module", "app.service", "@angular/core"]

    def test_ignore_external(self, project, capsys):
        """Test hiding unresolved imports."""
        code = main([str(project), "-c", str(project), "-f", "json", "--ignore-external"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [n["id"] for n in data["nodes"]] == ["app.module", "app.service"]

    def test_mermaid_to_file(self, project):
        """Test writing Mermaid output to a file."""
        output = project / "graph.mmd"

        code = main([str(project), "-c", str(project), "-f", "mermaid", "-o", str(output)])

        assert code == 0
        assert output.read_text(encoding="utf-8").startswith("flowchart LR")

    def test_html_output(self, project, capsys):
        """Test writing the viewer into the output directory."""
        out_dir = project / "out"

        code = main([str(project), "-c", str(project), "-o", str(out_dir)])

        assert code == 0
        assert (out_dir / "depgraph.html").is_file()
        assert (out_dir / "depgraph.data.js").is_file()
        assert "to view the dependency graph" in capsys.readouterr().err

    def test_missing_project(self, project, capsys):
        """Test that a project without a source directory fails."""
        code = main([str(project / "nope"), "-c", str(project), "-f", "json"])

        assert code == 1
        assert "Error scanning project" in capsys.readouterr().err

    def test_invalid_pattern(self, project, capsys):
        """Test that an invalid include pattern is reported."""
        code = main([str(project), "-c", str(project), "--include", "(bad"])

        assert code == 1
        assert "Error in configuration" in capsys.readouterr().err
