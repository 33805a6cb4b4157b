"""
Composer: turns walk events into layout blocks.

Text runs are buffered until a block-level tag flushes them as one
paragraph. Paragraph-wide options (alignment, extra leading, indent, top
margin) are lifted out of the run options when the run is buffered.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from ..models.directive import (
    Block,
    BreakBlock,
    ImageBlock,
    RuleBlock,
    TextBlock,
    TextPart,
)
from ..models.markup import AncestorFrame, ElementNode, MarkupNode
from ..styles.value_normalizer import to_float, to_int
from .render_session import RenderSession
from .tag_rules import closing_tag, opening_tag, text_node
from .tree_walker import CLOSING_TAG, OPENING_TAG, TEXT_NODE, traverse

logger = logging.getLogger(__name__)

ALIGNMENTS = ("left", "center", "right", "justify")


class StyledTextComposer:
    """Collects the blocks of one document render."""

    def __init__(self, session: RenderSession) -> None:
        self.session = session
        self.blocks: List[Block] = []
        self.parts: List[TextPart] = []
        self.paragraph: Dict[str, Any] = {}
        self.item: Optional[ElementNode] = None

    def compose(self, nodes: Sequence[MarkupNode]) -> List[Block]:
        traverse(nodes, self.session, self.handle)
        self.flush()
        logger.debug(f"Composed {len(self.blocks)} blocks")
        return self.blocks

    def handle(self, kind: str, value: str, data: Union[AncestorFrame, List[AncestorFrame]]) -> None:
        if kind == TEXT_NODE:
            self._text(value, data)
        elif kind == OPENING_TAG:
            self._opening(data)
        elif kind == CLOSING_TAG:
            self._closing(data)

    def _text(self, text: str, ancestors: List[AncestorFrame]) -> None:
        context = text_node(self.session, ancestors)
        # Whitespace between block tags would otherwise become empty paragraphs.
        if not text.strip() and not self.parts:
            return

        items = [frame.node for frame in ancestors if frame.name == "li"]
        if items:
            self.item = items[-1]

        options = dict(context.options)
        if context.pre:
            self.paragraph["pre"] = context.pre
        if "text-align" in options:
            align = str(options.pop("text-align")).strip().lower()
            if align in ALIGNMENTS:
                self.paragraph["align"] = align
        if "line-height" in options:
            self.paragraph["leading"] = to_float(options.pop("line-height"))
        if "margin-left" in options:
            self.paragraph["margin_left"] = to_int(options.pop("margin-left"))
        if "margin-top" in options:
            self.paragraph["margin_top"] = to_int(options.pop("margin-top"))

        self.parts.append(TextPart(text=text, options=options))

    def _opening(self, frame: AncestorFrame) -> None:
        directive = opening_tag(self.session, frame)
        if directive.flush:
            self.flush()

    def _closing(self, frame: AncestorFrame) -> None:
        directive = closing_tag(self.session, frame)
        if directive.flush:
            self.flush()
        if directive.text:
            self.blocks.append(BreakBlock(text=directive.text))
        if directive.src:
            self.blocks.append(
                ImageBlock(
                    src=directive.src,
                    width=directive.options.get("width"),
                    height=directive.options.get("height"),
                )
            )
        elif frame.name == "img":
            logger.warning("Skipping <img> without src")
        if frame.name == "hr":
            self.blocks.append(RuleBlock(options=directive.options))

    def flush(self) -> None:
        """Emit buffered runs as one paragraph."""
        if not self.parts:
            return
        self.blocks.append(TextBlock(parts=self.parts, **self.paragraph))
        if self.item is not None:
            self.session.list_item(self.item).emitted = True
        self.parts = []
        self.paragraph = {}
        self.item = None


def compose_nodes(nodes: Sequence[MarkupNode], session: RenderSession) -> List[Block]:
    """Compose ``nodes`` into blocks using a fresh composer bound to ``session``."""
    return StyledTextComposer(session).compose(nodes)
