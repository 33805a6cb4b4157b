"""
List numbering and indentation state.

Every open ``<ul>``/``<ol>`` pushes a level holding the cumulative left margin
and either a bullet symbol or a running counter. Closing the list pops the
level, which restores the indentation of the enclosing list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..styles.defaults import DEFAULT_BULLET

logger = logging.getLogger(__name__)


@dataclass
class ListLevel:
    tag: str
    margin: int
    symbol: str = DEFAULT_BULLET
    index: Optional[int] = None


@dataclass
class ListState:
    """Per-document list state, consulted by the tag rules for list tags."""

    levels: List[ListLevel] = field(default_factory=list)

    @property
    def margin_accumulator(self) -> int:
        return self.levels[-1].margin if self.levels else 0

    @property
    def current_ordered_index(self) -> Optional[int]:
        return self.levels[-1].index if self.levels else None

    @property
    def bullet_symbol(self) -> str:
        # Outside any list a stray <li> gets no marker.
        return self.levels[-1].symbol if self.levels else ""

    @property
    def depth(self) -> int:
        return len(self.levels)

    def open_list(self, tag: str, margin: int, symbol: Optional[str] = None) -> ListLevel:
        """Push a list level indented ``margin`` units past the enclosing one."""
        level = ListLevel(tag=tag, margin=self.margin_accumulator + margin)
        if tag == "ol":
            level.index = 1
        elif symbol is not None:
            level.symbol = symbol
        self.levels.append(level)
        logger.debug(f"Opened <{tag}> at depth {self.depth}, margin {level.margin}")
        return level

    def close_list(self) -> Optional[ListLevel]:
        if not self.levels:
            logger.debug("Closing a list that was never opened")
            return None
        return self.levels.pop()

    def next_prefix(self) -> str:
        """Return the marker of the next list item, advancing ordered counters."""
        if not self.levels:
            return ""
        level = self.levels[-1]
        if level.index is None:
            return level.symbol
        prefix = f"{level.index}. "
        level.index += 1
        return prefix
