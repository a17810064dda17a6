"""
Configuration for examslots.
Holds the slot palette, course-name aliases and the optional JSON overrides
read by the CLI and the Streamlit app.
"""

import json
import os
from typing import Dict, Optional

# Display colors cycled by slot number. Entries 11-15 repeat earlier hues;
# the cycle is kept as-is so slot colors stay stable across releases.
SLOT_COLORS = [
    '#3B82F6',  # Blue
    '#10B981',  # Green
    '#F59E0B',  # Amber
    '#EF4444',  # Red
    '#8B5CF6',  # Purple
    '#06B6D4',  # Cyan
    '#F97316',  # Orange
    '#84CC16',  # Lime
    '#EC4899',  # Pink
    '#6366F1',  # Indigo
    '#F59E0B',  # Gold
    '#10B981',  # Emerald
    '#8B5CF6',  # Violet
    '#06B6D4',  # Sky
    '#F97316',  # Orange
]

# lower-cased spelling -> canonical course name
COURSE_ALIASES = {
    'iot': 'IoT',
    'internet of things': 'IoT',
}

DEFAULT_OUTPUT_DIR = 'outputs'
DEFAULT_CONFIG_FILE = 'examslots.json'

DEFAULTS = {
    'output_dir': DEFAULT_OUTPUT_DIR,
    'log_level': 'WARNING',
}


def slot_color(slot: int) -> str:
    return SLOT_COLORS[(slot - 1) % len(SLOT_COLORS)]


def load_config(path: Optional[str] = None) -> Dict[str, str]:
    """Return DEFAULTS overlaid with the keys found in a JSON file.

    A missing file is not an error; unknown keys are ignored.
    """
    config = dict(DEFAULTS)
    path = path or DEFAULT_CONFIG_FILE
    if not os.path.exists(path):
        return config
    with open(path, 'r') as f:
        overrides = json.load(f)
    for key in DEFAULTS:
        if key in overrides:
            config[key] = str(overrides[key])
    return config
