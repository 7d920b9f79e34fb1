"""Node colors derived from architectural role suffixes."""

import re
from typing import List, Optional, Pattern, Tuple

MODULE_COLOR = "#ffcfcf"
COMPONENT_COLOR = "#cfffcf"
SERVICE_COLOR = "#ffcfff"
STATE_COLOR = "#cfcfcf"

# Renderers fall back to this for nodes without a role color
NEUTRAL_COLOR = "#97c2fc"

# Checked in order; the first matching suffix wins.
ROLE_COLORS: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"module$"), MODULE_COLOR),
    (re.compile(r"component$"), COMPONENT_COLOR),
    (re.compile(r"service$"), SERVICE_COLOR),
    (re.compile(r"(effects?|selectors?|actions?|reducers?|state|facade)$"), STATE_COLOR),
]


def color_for(node_id: str) -> Optional[str]:
    """Return the role color for a node identifier, or None if no role suffix matches."""
    for pattern, color in ROLE_COLORS:
        if pattern.search(node_id):
            return color
    return None
