"""Tests for configuration loading."""

import logging
import tempfile
from pathlib import Path

import pytest

from scanner.config import DepGraphConfig, load_config
from scanner.errors import ConfigLoadError


@pytest.fixture
def config_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


class TestLoadConfig:
    """Tests for depgraph.config files."""

    def test_defaults_when_missing(self, config_dir, caplog):
        """Test that a missing config warns and falls back to defaults."""
        with caplog.at_level(logging.WARNING):
            config = load_config(config_dir)

        assert config.project_directory == config_dir.as_posix()
        assert config.include_pattern == ".ts$"
        assert config.exclude_pattern == ".spec.ts$"
        assert config.tsconfig is None
        assert "depgraph.config" in caplog.text

    def test_json_config(self, config_dir):
        """Test camelCase keys from a JSON config."""
        (config_dir / "depgraph.config.json").write_text(
            '{"projectDirectory": "web", "outputDirectory": "out", '
            '"includePattern": ".tsx?$", "tsconfig": "tsconfig.app.json"}',
            encoding="utf-8",
        )

        config = load_config(config_dir)

        assert config.project_directory == (config_dir / "web").as_posix()
        assert config.output_directory == (config_dir / "out").as_posix()
        assert config.include_pattern == ".tsx?$"
        assert config.tsconfig == "tsconfig.app.json"

    def test_yaml_config(self, config_dir):
        """Test a YAML config with snake_case keys."""
        (config_dir / "depgraph.config.yaml").write_text(
            "exclude_pattern: '.(spec|test).ts$'\nsource_subdir: lib\n",
            encoding="utf-8",
        )

        config = load_config(config_dir)

        assert config.exclude_pattern == ".(spec|test).ts$"
        assert config.source_subdir == "lib"

    def test_toml_config(self, config_dir):
        """Test a TOML config."""
        (config_dir / "depgraph.config.toml").write_text(
            'tsconfig = "tsconfig.json"\ndefaultExtension = ".js"\n',
            encoding="utf-8",
        )

        config = load_config(config_dir)

        assert config.tsconfig == "tsconfig.json"
        assert config.default_extension == ".js"

    def test_malformed_config(self, config_dir, caplog):
        """Test that a malformed config falls back to defaults."""
        (config_dir / "depgraph.config.json").write_text("{oops", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_config(config_dir)

        assert config.include_pattern == ".ts$"
        assert "malformed config" in caplog.text

    def test_non_mapping_config(self, config_dir):
        """Test that a config that is not a mapping falls back to defaults."""
        (config_dir / "depgraph.config.yaml").write_text("- a\n- b\n", encoding="utf-8")

        assert load_config(config_dir).tsconfig is None

    def test_unknown_keys_ignored(self, config_dir):
        """Test that unknown keys do not break loading."""
        (config_dir / "depgraph.config.json").write_text('{"theme": "dark"}', encoding="utf-8")

        assert load_config(config_dir).include_pattern == ".ts$"


class TestDepGraphConfig:
    """Tests for the config dataclass."""

    def test_invalid_pattern(self):
        """Test that an invalid regex is rejected."""
        with pytest.raises(ConfigLoadError):
            DepGraphConfig(include_pattern="(unclosed")

    def test_with_overrides(self):
        """Test that only non-None overrides apply."""
        config = DepGraphConfig(project_directory="/p", tsconfig="a.json")

        updated = config.with_overrides(tsconfig=None, source_subdir="app")

        assert updated.tsconfig == "a.json"
        assert updated.source_subdir == "app"
        assert config.source_subdir == "src"
