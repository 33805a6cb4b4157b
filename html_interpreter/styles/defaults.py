"""
Default values for styled text rendering.

Holds the block tag set, heading sizes, list defaults and the table that maps
CSS property names onto renderer option keys.
"""

from typing import Dict, FrozenSet

BLOCK_TAGS: FrozenSet[str] = frozenset(
    ["br", "div", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "li", "p", "ul", "ol"]
)

DEFAULT_HEADING_MARGIN_TOP = 16
DEFAULT_HEADING_LINE_HEIGHT = 8
DEFAULT_LIST_MARGIN = 15
# BULLET (U+2022) followed by a space
DEFAULT_BULLET = "• "
SMALL_SIZE_RATIO = 0.66

HEADINGS: Dict[str, int] = {
    "h1": 32,
    "h2": 24,
    "h3": 20,
    "h4": 16,
    "h5": 14,
    "h6": 13,
}

RENAME: Dict[str, str] = {
    "font-family": "font",
    "font-size": "size",
    "font-style": "styles",
    "letter-spacing": "character-spacing",
    "background-color": "background",
}
