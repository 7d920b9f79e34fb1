#!/usr/bin/env python3
"""
depgraph CLI

Scans a TypeScript/JavaScript source tree for import statements and
generates a module dependency graph as an interactive HTML page, JSON
or a Mermaid flowchart.
"""

import argparse
import logging
import sys
from pathlib import Path

from exporters import to_json, to_mermaid, write_html
from scanner.builder import build_dependency_graph
from scanner.config import load_config
from scanner.errors import DepGraphError


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="depgraph",
        description="Scan a source tree for imports and generate a module dependency graph.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  depgraph                             # Use ./depgraph.config.*, write depgraph.html
  depgraph ./frontend -o ./out         # Scan ./frontend/src, write the viewer to ./out
  depgraph . -f json                   # JSON graph on stdout
  depgraph . -f mermaid -o graph.mmd   # Mermaid flowchart to a file
  depgraph . --tsconfig tsconfig.json  # Resolve path aliases from tsconfig
  depgraph . --ignore-external         # Hide imports that resolve to no file
        """,
    )

    # Positional arguments
    parser.add_argument(
        "project",
        nargs="?",
        default=None,
        help="Project directory (default: projectDirectory from config, else current directory)",
    )

    parser.add_argument(
        "-c", "--config-dir",
        type=str,
        default=None,
        help="Directory containing depgraph.config.json/.yaml/.toml (default: current directory)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output directory for html, output file for json/mermaid (default: config / stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["html", "json", "mermaid"],
        default="html",
        help="Output format (default: html)",
    )

    parser.add_argument(
        "--orientation",
        choices=["LR", "TD", "TB", "RL", "BT"],
        default="LR",
        help="Mermaid flowchart orientation (default: LR)",
    )

    # Scanning options
    parser.add_argument(
        "--include",
        type=str,
        default=None,
        help="Regex file names must match (default: .ts$)",
    )

    parser.add_argument(
        "--exclude",
        type=str,
        default=None,
        help="Regex file names must not match (default: .spec.ts$)",
    )

    parser.add_argument(
        "--tsconfig",
        type=str,
        default=None,
        help="tsconfig file with path aliases, relative to the project directory",
    )

    parser.add_argument(
        "--src",
        type=str,
        default=None,
        help="Sub-directory of the project to scan (default: src)",
    )

    parser.add_argument(
        "--ignore-external",
        action="store_true",
        help="Hide imports that do not resolve to a project file",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show errors")

    return parser.parse_args(args)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(parsed.verbose, parsed.quiet)

    config_dir = Path(parsed.config_dir) if parsed.config_dir else None

    try:
        config = load_config(config_dir)
        config = config.with_overrides(
            project_directory=str(Path(parsed.project).resolve()) if parsed.project else None,
            include_pattern=parsed.include,
            exclude_pattern=parsed.exclude,
            tsconfig=parsed.tsconfig,
            source_subdir=parsed.src,
        )
    except DepGraphError as e:
        print(f"Error in configuration: {e}", file=sys.stderr)
        return 1

    # Build the graph
    try:
        graph = build_dependency_graph(
            config.project_directory,
            config.source_subdir,
            config,
            include_external=not parsed.ignore_external,
        )
    except DepGraphError as e:
        print(f"Error scanning project: {e}", file=sys.stderr)
        return 1

    # Generate output
    if parsed.format == "html":
        output_dir = Path(parsed.output) if parsed.output else Path(config.output_directory)
        try:
            viewer = write_html(graph, output_dir)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        print(f"Open {viewer.as_posix()} to view the dependency graph", file=sys.stderr)
        return 0

    if parsed.format == "mermaid":
        output = to_mermaid(graph, orientation=parsed.orientation)
    else:  # json
        output = to_json(graph)

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
