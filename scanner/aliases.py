"""Path alias table loaded from a tsconfig-style "paths" section."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ConfigLoadError

logger = logging.getLogger(__name__)


# String literals are matched first so "//" or "/*" inside them survive.
JSONC_COMMENT_RE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
JSONC_TRAILING_COMMA_RE = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


def _strip_wildcard(value: str) -> str:
    return value[:-1] if value.endswith("*") else value


def strip_jsonc(text: str) -> str:
    """Remove // and /* */ comments and trailing commas from JSONC text."""
    text = JSONC_COMMENT_RE.sub(lambda m: m.group(1) if m.group(1) is not None else " ", text)
    return JSONC_TRAILING_COMMA_RE.sub(
        lambda m: m.group(1) if m.group(1) is not None else m.group(2), text
    )


def read_tsconfig(config_dir: Union[str, Path], tsconfig_path: Optional[str]) -> Dict[str, Any]:
    """
    Read a tsconfig file as JSON with comments (the format tsc accepts).

    Raises:
        ConfigLoadError: If no path is configured or the file is unusable.
    """
    if not tsconfig_path:
        raise ConfigLoadError("no tsconfig path configured")

    file_path = Path(config_dir) / tsconfig_path
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"cannot read {file_path}: {e}") from e

    try:
        data = json.loads(strip_jsonc(content))
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"malformed tsconfig {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(f"tsconfig {file_path} is not a JSON object")
    return data


def load_aliases(config_dir: Union[str, Path], tsconfig_path: Optional[str]) -> Dict[str, str]:
    """
    Load the alias mapping from compilerOptions.paths.

    Only the first replacement of each alias is used; a single trailing
    '*' is stripped from both the alias and that replacement. Key order
    follows the tsconfig file.

    Args:
        config_dir: Directory the tsconfig path is relative to.
        tsconfig_path: Relative path of the tsconfig file, or None.

    Returns:
        Mapping of alias prefix to replacement prefix; empty if the
        tsconfig cannot be loaded.
    """
    mapping: Dict[str, str] = {}

    try:
        tsconfig = read_tsconfig(config_dir, tsconfig_path)
    except ConfigLoadError as e:
        logger.warning("tsconfig failed to load, imports will not be alias-resolved: %s", e)
        return mapping

    compiler_options = tsconfig.get("compilerOptions") or {}
    paths = compiler_options.get("paths") if isinstance(compiler_options, dict) else None
    if not isinstance(paths, dict):
        return mapping

    for alias, replacements in paths.items():
        if not isinstance(replacements, list) or not replacements or not isinstance(replacements[0], str):
            logger.debug("Skipping alias %r without a usable replacement", alias)
            continue
        mapping[_strip_wildcard(alias)] = _strip_wildcard(replacements[0])

    logger.debug("Loaded %d path aliases", len(mapping))
    return mapping


def resolve_alias(specifier: str, mapping: Dict[str, str]) -> str:
    """
    Rewrite a specifier using the first alias that prefixes it.

    The first matching alias in mapping order wins, not the longest one.
    A specifier matching no alias is returned unchanged.
    """
    for alias, replacement in mapping.items():
        if specifier.startswith(alias):
            return replacement + specifier[len(alias):]
    return specifier
