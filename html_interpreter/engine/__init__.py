"""
Styled text engine.

Walks a markup tree, applies per-tag rules and collects layout blocks for a
renderer.
"""

from .composer import StyledTextComposer, compose_nodes
from .list_state import ListLevel, ListState
from .render_session import RenderSession, RenderTarget, StaticTarget
from .tag_rules import closing_tag, opening_tag, text_node
from .tree_walker import iter_events, traverse

__all__ = [
    "ListLevel",
    "ListState",
    "RenderSession",
    "RenderTarget",
    "StaticTarget",
    "StyledTextComposer",
    "closing_tag",
    "compose_nodes",
    "iter_events",
    "opening_tag",
    "text_node",
    "traverse",
]
