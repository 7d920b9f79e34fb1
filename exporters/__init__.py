"""Exporters for converting a dependency graph to various output formats."""

from .html_exporter import to_data_script, write_html
from .json_exporter import to_json
from .mermaid_exporter import to_mermaid

__all__ = ["to_data_script", "write_html", "to_json", "to_mermaid"]
