"""
Value normalizer for inline CSS declarations.

Converts ``(property, value)`` pairs taken from ``style`` attributes or from
presentational attributes (``<font face color size>``) into renderer option
dictionaries: property names are renamed onto renderer keys, colours become
bare hex strings, sizes and lengths become numbers.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Mapping, Optional, Tuple, Union

from ..exceptions import AdjustFontSizeError
from ..models.directive import StyleOptions
from ..models.geometry import Bounds
from .defaults import RENAME

logger = logging.getLogger(__name__)

AdjustFontSize = Callable[[int], float]
Declarations = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

_DECLARATION_RE = re.compile(r"\s*([^:]+):\s*([^;]+);*")
_RGB_RE = re.compile(r"rgba?\((?P<numbers>[^)]*)\)")
_TOKEN_RE = re.compile(r"""'([^']*)'|"([^"]*)"|([^,]*)""")
_INT_RE = re.compile(r"^\s*[+-]?\d+")
_FLOAT_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_int(value: object) -> int:
    """Read the leading integer of ``value`` (``"20px"`` -> 20), 0 when absent."""
    if isinstance(value, (int, float)):
        return int(value)
    match = _INT_RE.match(str(value or ""))
    return int(match.group(0)) if match else 0


def to_float(value: object) -> float:
    """Read the leading number of ``value`` (``"1.5em"`` -> 1.5), 0.0 when absent."""
    if isinstance(value, (int, float)):
        return float(value)
    match = _FLOAT_RE.match(str(value or ""))
    return float(match.group(0)) if match else 0.0


def parse_declarations(style: Optional[str]) -> List[Tuple[str, str]]:
    """
    Split a ``style`` attribute into ``(property, value)`` pairs.

    Args:
        style: Declarations such as ``"color: red; font-size: 12px"``

    Returns:
        Pairs in declaration order, property names lower-cased
    """
    if not style:
        return []

    pairs = []
    for name, value in _DECLARATION_RE.findall(style):
        name = name.strip().lower()
        if name:
            pairs.append((name, value.strip()))
    return pairs


def extract_token(value: str) -> str:
    """Return the first quoted or bare entry of a comma separated list."""
    match = _TOKEN_RE.match(value.strip())
    single, double, bare = match.groups()
    if single is not None:
        return single
    if double is not None:
        return double
    return (bare or "").strip()


def parse_color(value: str) -> str:
    """Normalize ``rgb(r, g, b)`` or ``#rrggbb`` into a hex string without ``#``."""
    value = value.strip()
    if value.startswith("rgb"):
        match = _RGB_RE.match(value)
        if match:
            numbers = [n.strip() for n in match.group("numbers").split(",")]
            if value.startswith("rgba"):
                # Alpha is dropped.
                numbers = numbers[:3]
            # No clamping: out of range channels keep their full hex form.
            return "".join(format(to_int(n), "x").rjust(2, "0") for n in numbers)
        logger.debug(f"Malformed rgb colour kept verbatim: {value}")
    return value.replace("#", "")


def ensure_adjust_font_size(adjust_font_size: Optional[AdjustFontSize]) -> None:
    if adjust_font_size is not None and not callable(adjust_font_size):
        raise AdjustFontSizeError(f"got {type(adjust_font_size).__name__}")


def parse_size(value: str, font_size: float, adjust_font_size: Optional[AdjustFontSize] = None):
    """
    Resolve a font size declaration.

    Args:
        value: ``"14"``, ``"14px"`` or ``"1.5em"``
        font_size: Current font size used for ``em`` values
        adjust_font_size: Optional hook applied to the computed size

    Returns:
        Computed size, or the hook's result when a hook is given
    """
    ensure_adjust_font_size(adjust_font_size)

    value = value.strip()
    if value.endswith("em"):
        size = int(font_size * to_float(value))
    else:
        size = to_int(value)

    if adjust_font_size is None:
        return size
    return adjust_font_size(size)


def _percent_or_int(value: str, dimension: float):
    amount = to_int(value)
    if "%" in value:
        return amount * dimension * 0.01
    return amount


def adjust_values(
    values: Declarations,
    font_size: float,
    bounds: Bounds,
    adjust_font_size: Optional[AdjustFontSize] = None,
) -> StyleOptions:
    """
    Normalize declarations into renderer options.

    Args:
        values: Mapping or pairs of raw property names and values
        font_size: Current font size, used for ``em`` sizes
        bounds: Page bounds, used for percentage widths and heights
        adjust_font_size: Optional hook applied to every computed size

    Returns:
        Options keyed by renderer names (``font``, ``size``, ``styles``...)
    """
    if isinstance(values, Mapping):
        values = values.items()

    options: StyleOptions = {}
    for name, raw in values:
        key = RENAME.get(name, name)
        if key == "character-spacing":
            options[key] = to_float(raw)
        elif key in ("color", "background"):
            options[key] = parse_color(raw)
        elif key == "font":
            options[key] = extract_token(raw)
        elif key == "width":
            options[key] = _percent_or_int(raw, bounds.width)
        elif key == "height":
            options[key] = _percent_or_int(raw, bounds.height)
        elif key == "size":
            options[key] = parse_size(raw, font_size, adjust_font_size)
        elif key == "styles":
            options[key] = {token.strip() for token in raw.split(",") if token.strip()}
        else:
            options[key] = raw
    return options
