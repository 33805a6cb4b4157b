"""Visual effect handles attached to text runs (highlight, strikethrough)."""

from __future__ import annotations

from typing import Callable, Optional

ColorFormatter = Callable[[str], str]


def _hex(color: str) -> str:
    return f"#{color}"


class HighlightCallback:
    """Paints a background colour behind a run; no colour means no highlight."""

    def __init__(self, color: Optional[str] = None) -> None:
        self.color = color

    def set_color(self, color: Optional[str]) -> None:
        self.color = color

    def decorate(self, markup: str, format_color: ColorFormatter = _hex) -> str:
        if not self.color:
            return markup
        return f'<span backColor="{format_color(self.color)}">{markup}</span>'

    def __repr__(self) -> str:
        return f"HighlightCallback(color={self.color!r})"


class StrikeThroughCallback:
    """Draws a line through the middle of a run."""

    def decorate(self, markup: str, format_color: ColorFormatter = _hex) -> str:
        return f"<strike>{markup}</strike>"

    def __repr__(self) -> str:
        return "StrikeThroughCallback()"
