"""Base classes and interfaces for styled text renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from typing import Iterable, Sequence, Union

from reportlab.lib.pagesizes import A4

from ..models.directive import Block
from ..models.geometry import Bounds, Margins, Size
from .render_utils import ensure_margins, ensure_page_size


CanvasTarget = Union[str, BytesIO]


class IRenderer(ABC):
    """Interface for renderer implementations."""

    @abstractmethod
    def render(self, blocks: Sequence[Block], output: CanvasTarget) -> None:
        """Render layout blocks into the provided output."""


class BaseRenderer(IRenderer):
    """Page geometry and base font shared by concrete renderers."""

    def __init__(
        self,
        page_size: Union[str, Size, Iterable[float]] = A4,
        margins: Union[Margins, Iterable[float]] = (50, 50, 50, 50),
        font_name: str = "Helvetica",
        font_size: float = 12.0,
    ) -> None:
        width, height = ensure_page_size(page_size)
        self.page_size = (width, height)
        self.page_width = width
        self.page_height = height
        self.margins = ensure_margins(margins)
        self.font_name = font_name
        self.font_size = float(font_size)

    def render(self, blocks: Sequence[Block], output: CanvasTarget) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    @property
    def content_width(self) -> float:
        return max(self.page_width - self.margins.left - self.margins.right, 0.0)

    @property
    def content_height(self) -> float:
        return max(self.page_height - self.margins.top - self.margins.bottom, 0.0)

    @property
    def bounds(self) -> Bounds:
        return Bounds(width=self.content_width, height=self.content_height)
