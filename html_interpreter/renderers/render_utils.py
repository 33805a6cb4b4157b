"""Utility helpers shared across renderer components."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple, Union

from reportlab.lib.colors import Color, HexColor
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.pdfbase import pdfmetrics

from ..models.geometry import Margins, Size

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    "A4": A4,
    "LETTER": LETTER,
}


def ensure_page_size(page_size: Union[str, Size, Iterable[float]]) -> Tuple[float, float]:
    if isinstance(page_size, Size):
        return float(page_size.width), float(page_size.height)

    if isinstance(page_size, str):
        preset = PAGE_SIZES.get(page_size.upper())
        if preset:
            return float(preset[0]), float(preset[1])
        raise ValueError(f"Unsupported page size preset: {page_size}")

    if isinstance(page_size, Iterable):
        values = list(page_size)
        if len(values) != 2:
            raise ValueError("Page size iterable must contain exactly two values")
        return float(values[0]), float(values[1])

    return float(A4[0]), float(A4[1])


def ensure_margins(margins: Union[Margins, Iterable[float]]) -> Margins:
    if isinstance(margins, Margins):
        return margins

    values = list(margins) if isinstance(margins, Iterable) else []
    if len(values) not in (0, 4):
        raise ValueError("Margins must be provided as four numeric values (top, right, bottom, left)")

    if not values:
        return Margins(top=50, right=50, bottom=50, left=50)

    top, right, bottom, left = [float(v) for v in values]
    return Margins(top=top, bottom=bottom, left=left, right=right)


CSS_COLOR_MAP = {
    "black": "#000000",
    "blue": "#0000FF",
    "cyan": "#00FFFF",
    "darkblue": "#00008B",
    "darkgray": "#A9A9A9",
    "darkgrey": "#A9A9A9",
    "darkgreen": "#006400",
    "darkred": "#8B0000",
    "gold": "#FFD700",
    "gray": "#808080",
    "grey": "#808080",
    "green": "#008000",
    "lightblue": "#ADD8E6",
    "lightgray": "#D3D3D3",
    "lightgrey": "#D3D3D3",
    "lightgreen": "#90EE90",
    "lightyellow": "#FFFFE0",
    "magenta": "#FF00FF",
    "orange": "#FFA500",
    "pink": "#FFC0CB",
    "purple": "#800080",
    "red": "#FF0000",
    "white": "#FFFFFF",
    "yellow": "#FFFF00",
}


def _normalize_color(value: object, fallback: str) -> str:
    token = str(value or "").strip()
    if not token:
        return fallback

    lowered = token.lower()
    if lowered in CSS_COLOR_MAP:
        return CSS_COLOR_MAP[lowered]

    if token.startswith("#"):
        candidate = token
    elif len(token) in {3, 6} and all(ch in "0123456789abcdefABCDEF" for ch in token):
        candidate = f"#{token}"
    else:
        candidate = token

    if len(candidate) == 4 and candidate.startswith("#"):
        candidate = "#" + "".join(ch * 2 for ch in candidate[1:])

    try:
        HexColor(candidate)
        return candidate
    except (ValueError, TypeError):
        logger.warning(f"Unsupported colour {token!r}, using {fallback}")
        return fallback


def to_color(value: object, fallback: str = "#000000") -> Color:
    return HexColor(_normalize_color(value, fallback))


def color_attr(value: object, fallback: str = "#000000") -> str:
    """Colour as ``#rrggbb`` for paragraph markup attributes."""
    return "#" + to_color(value, fallback).hexval()[2:]


FONT_ALIASES: Dict[str, str] = {
    "arial": "Helvetica",
    "helvetica": "Helvetica",
    "sans-serif": "Helvetica",
    "times": "Times-Roman",
    "times new roman": "Times-Roman",
    "serif": "Times-Roman",
    "courier": "Courier",
    "courier new": "Courier",
    "monospace": "Courier",
}


def resolve_font_name(font_name: str, default: str = "Helvetica") -> str:
    """Map a CSS font family onto a font ReportLab can draw."""
    if not font_name:
        return default

    registered = set(pdfmetrics.getRegisteredFontNames()) | set(pdfmetrics.standardFonts)
    if font_name in registered:
        return font_name

    alias = FONT_ALIASES.get(font_name.strip().lower())
    if alias:
        return alias

    logger.warning(f"Font {font_name!r} is not registered, falling back to {default}")
    return default
