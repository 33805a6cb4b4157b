"""
Render session: all mutable state of one document render.

A session is created per render call and threaded through the tree walker,
the tag rules and the composer. Nothing here is shared between documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from ..models.directive import StyleOptions
from ..models.geometry import Bounds
from ..models.markup import ElementNode
from ..renderers.callbacks import HighlightCallback, StrikeThroughCallback
from ..styles.value_normalizer import (
    AdjustFontSize,
    Declarations,
    adjust_values,
    ensure_adjust_font_size,
)
from .list_state import ListState

logger = logging.getLogger(__name__)


class RenderTarget(Protocol):
    """What the tag rules need to know about the rendering engine."""

    @property
    def font_size(self) -> float: ...

    @property
    def bounds(self) -> Bounds: ...


@dataclass
class StaticTarget:
    """Fixed font size and page bounds, for composing without a renderer."""

    font_size: float = 12.0
    bounds: Bounds = field(default_factory=lambda: Bounds(495.0, 742.0))


@dataclass
class ListItem:
    prefix: str
    margin: int
    # Set once the paragraph carrying the marker has been emitted.
    emitted: bool = False


class RenderSession:
    """State owned by a single traversal of a single document."""

    def __init__(self, target: RenderTarget, adjust_font_size: Optional[AdjustFontSize] = None):
        ensure_adjust_font_size(adjust_font_size)
        self.target = target
        self.adjust_font_size = adjust_font_size
        self.list_state = ListState()
        self.last_element: Optional[str] = None
        self.list_items: Dict[int, ListItem] = {}
        self._strike_through: Optional[StrikeThroughCallback] = None

    @property
    def font_size(self) -> float:
        return self.target.font_size

    @property
    def bounds(self) -> Bounds:
        return self.target.bounds

    @property
    def strike_through(self) -> StrikeThroughCallback:
        if self._strike_through is None:
            self._strike_through = StrikeThroughCallback()
        return self._strike_through

    def new_highlight(self) -> HighlightCallback:
        return HighlightCallback()

    def normalize(self, values: Declarations, font_size: Optional[float] = None) -> StyleOptions:
        """Run declarations through the value normalizer with this session's context."""
        if font_size is None:
            font_size = self.font_size
        return adjust_values(values, font_size, self.bounds, self.adjust_font_size)

    def start_list_item(self, node: ElementNode) -> ListItem:
        """Assign the marker and indent of ``node`` once, when the item opens."""
        item = ListItem(
            prefix=self.list_state.next_prefix(),
            margin=self.list_state.margin_accumulator,
        )
        self.list_items[id(node)] = item
        return item

    def list_item(self, node: ElementNode) -> ListItem:
        item = self.list_items.get(id(node))
        if item is None:
            item = self.start_list_item(node)
        return item
