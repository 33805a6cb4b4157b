"""Geometry primitives shared by the composer and the renderers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Size:
    width: float
    height: float


@dataclass(slots=True)
class Bounds:
    """Drawable area of a page, used to resolve percentage lengths."""

    width: float
    height: float


@dataclass(slots=True)
class Margins:
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Margins":
        return cls(value, value, value, value)
