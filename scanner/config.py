"""Project configuration for the dependency scanner."""

import json
import logging
import os
import re
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Pattern

import yaml

from .errors import ConfigLoadError

logger = logging.getLogger(__name__)


CONFIG_FILENAMES = (
    "depgraph.config.json",
    "depgraph.config.yaml",
    "depgraph.config.yml",
    "depgraph.config.toml",
)

DEFAULT_INCLUDE_PATTERN = ".ts$"
DEFAULT_EXCLUDE_PATTERN = ".spec.ts$"
DEFAULT_SOURCE_SUBDIR = "src"
DEFAULT_EXTENSION = ".ts"

# config file key -> DepGraphConfig field
KEY_ALIASES = {
    "projectDirectory": "project_directory",
    "outputDirectory": "output_directory",
    "includePattern": "include_pattern",
    "excludePattern": "exclude_pattern",
    "tsconfig": "tsconfig",
    "sourceSubdir": "source_subdir",
    "defaultExtension": "default_extension",
}


@dataclass(frozen=True)
class DepGraphConfig:
    """
    Settings shared by every stage of the scan.

    Built once at startup and passed explicitly to the collector, the
    alias loader and the normalizer.
    """

    project_directory: str = field(default_factory=os.getcwd)
    output_directory: str = field(default_factory=os.getcwd)
    include_pattern: str = DEFAULT_INCLUDE_PATTERN
    exclude_pattern: str = DEFAULT_EXCLUDE_PATTERN
    tsconfig: Optional[str] = None
    source_subdir: str = DEFAULT_SOURCE_SUBDIR
    default_extension: str = DEFAULT_EXTENSION

    def __post_init__(self):
        # Fail early on filters the collector could not use
        for name in ("include_pattern", "exclude_pattern"):
            try:
                re.compile(getattr(self, name))
            except (re.error, TypeError) as e:
                raise ConfigLoadError(f"invalid {name} {getattr(self, name)!r}: {e}") from e

    @property
    def include_regex(self) -> Pattern[str]:
        return re.compile(self.include_pattern)

    @property
    def exclude_regex(self) -> Pattern[str]:
        return re.compile(self.exclude_pattern)

    def with_overrides(self, **overrides: Any) -> "DepGraphConfig":
        """Return a copy with the non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)


def find_config_file(directory: Path) -> Optional[Path]:
    """Return the first depgraph config file present in directory."""
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def parse_config_file(file_path: Path) -> Dict[str, Any]:
    """
    Parse a configuration file according to its suffix.

    Args:
        file_path: JSON, YAML or TOML configuration file.

    Returns:
        The parsed mapping.

    Raises:
        ConfigLoadError: If the file cannot be read, parsed, or is not a mapping.
    """
    suffix = file_path.suffix.lower()

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"cannot read {file_path}: {e}") from e

    try:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(content)
        elif suffix == ".toml":
            data = tomllib.loads(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigLoadError(f"malformed config {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"config {file_path} must contain a mapping, got {type(data).__name__}")
    return data


def config_from_mapping(data: Dict[str, Any], base_dir: Path) -> DepGraphConfig:
    """
    Build a config from a parsed mapping.

    Both the camelCase keys used by depgraph.config files and the
    snake_case field names are accepted; anything else is ignored.
    Directories are resolved against base_dir.
    """
    values: Dict[str, Any] = {}
    field_names = set(KEY_ALIASES.values())
    for key, value in data.items():
        name = KEY_ALIASES.get(key, key)
        if name in field_names and value is not None:
            values[name] = value
        else:
            logger.debug("Ignoring unknown config key %r", key)

    for name in ("project_directory", "output_directory"):
        value = values.get(name, ".")
        values[name] = os.path.normpath(os.path.join(str(base_dir), str(value))).replace("\\", "/")

    return DepGraphConfig(**values)


def load_config(directory: Optional[Path] = None) -> DepGraphConfig:
    """
    Load the depgraph configuration from a directory.

    A missing or malformed config file is not fatal: a warning is logged
    and the defaults are used.

    Args:
        directory: Directory searched for a depgraph.config file (default: cwd).

    Returns:
        The loaded configuration.

    Raises:
        ConfigLoadError: If the file is readable but names invalid patterns.
    """
    base_dir = (directory or Path.cwd()).resolve()
    config_file = find_config_file(base_dir)

    if config_file is None:
        logger.warning(
            'No local "depgraph.config" found in %s, using defaults. '
            "You can control the behaviour with a depgraph.config.json/.yaml/.toml file.",
            base_dir,
        )
        return config_from_mapping({}, base_dir)

    try:
        data = parse_config_file(config_file)
    except ConfigLoadError as e:
        logger.warning("%s; using defaults", e)
        return config_from_mapping({}, base_dir)

    logger.debug("Loaded configuration from %s", config_file)
    return config_from_mapping(data, base_dir)
