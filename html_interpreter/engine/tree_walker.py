"""
Depth-first traversal of a markup tree.

Emits ``opening_tag``, ``text_node`` and ``closing_tag`` events in document
order. Text events carry the stack of open ancestors; closing events carry
the frame of the element being closed.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence, Union

from ..models.markup import AncestorFrame, ElementNode, MarkupNode, TextNode
from .render_session import RenderSession

OPENING_TAG = "opening_tag"
TEXT_NODE = "text_node"
CLOSING_TAG = "closing_tag"


class WalkEvent(NamedTuple):
    kind: str
    value: str
    data: Union[AncestorFrame, List[AncestorFrame]]


EventCallback = Callable[[str, str, Union[AncestorFrame, List[AncestorFrame]]], None]


def iter_events(
    nodes: Sequence[MarkupNode],
    session: RenderSession,
    context: Optional[List[AncestorFrame]] = None,
) -> Iterator[WalkEvent]:
    """Yield walk events for ``nodes``, updating ``session.last_element``."""
    if context is None:
        context = []

    for node in nodes:
        if isinstance(node, TextNode):
            text = node.text.replace("\r", "").replace("\n", "")
            yield WalkEvent(TEXT_NODE, text, list(context))
            if text:
                session.last_element = None
        elif isinstance(node, ElementNode):
            frame = AncestorFrame(node.name, node)
            yield WalkEvent(OPENING_TAG, frame.name, frame)
            context.append(frame)
            if node.children:
                yield from iter_events(node.children, session, context)
            yield WalkEvent(CLOSING_TAG, frame.name, context.pop())
            session.last_element = frame.name


def traverse(
    nodes: Sequence[MarkupNode],
    session: RenderSession,
    callback: EventCallback,
    context: Optional[List[AncestorFrame]] = None,
) -> None:
    """Walk ``nodes`` and hand every event to ``callback(kind, value, data)``."""
    for event in iter_events(nodes, session, context):
        callback(event.kind, event.value, event.data)
