"""Interactive HTML exporter: a vis-network data script plus a static viewer page."""

import json
import logging
import shutil
from pathlib import Path
from typing import Union

from graph.model import DependencyGraph
from graph.styles import NEUTRAL_COLOR

logger = logging.getLogger(__name__)

DATA_FILENAME = "depgraph.data.js"
VIEWER_FILENAME = "depgraph.html"
TEMPLATE_PATH = Path(__file__).parent / "templates" / VIEWER_FILENAME


def to_data_script(graph: DependencyGraph) -> str:
    """
    Render the graph as the JavaScript data file loaded by the viewer.

    Returns:
        Script declaring the `nodes`, `edges` and `defaultColor` constants.
    """
    data = graph.to_dict()
    return (
        f"const nodes = {json.dumps(data['nodes'])};\n"
        f"const edges = {json.dumps(data['edges'])};\n"
        f"const defaultColor = {json.dumps(NEUTRAL_COLOR)};\n"
    )


def write_html(graph: DependencyGraph, output_directory: Union[str, Path]) -> Path:
    """
    Write the data script and copy the viewer page into output_directory.

    The directory is created if needed.

    Returns:
        Path of the viewer page.
    """
    output_dir = Path(output_directory)
    output_dir.mkdir(parents=True, exist_ok=True)

    data_path = output_dir / DATA_FILENAME
    data_path.write_text(to_data_script(graph), encoding="utf-8")
    logger.debug("Wrote graph data to %s", data_path)

    viewer_path = output_dir / VIEWER_FILENAME
    shutil.copyfile(TEMPLATE_PATH, viewer_path)
    return viewer_path
