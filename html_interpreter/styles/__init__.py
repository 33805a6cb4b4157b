"""
Style normalization for HTML Interpreter.

Turns inline CSS declarations and presentational attributes into renderer
option dictionaries.
"""

from .defaults import BLOCK_TAGS, DEFAULT_BULLET, DEFAULT_LIST_MARGIN, HEADINGS, RENAME
from .value_normalizer import (
    adjust_values,
    extract_token,
    parse_color,
    parse_declarations,
    parse_size,
)

__all__ = [
    "BLOCK_TAGS",
    "DEFAULT_BULLET",
    "DEFAULT_LIST_MARGIN",
    "HEADINGS",
    "RENAME",
    "adjust_values",
    "extract_token",
    "parse_color",
    "parse_declarations",
    "parse_size",
]
