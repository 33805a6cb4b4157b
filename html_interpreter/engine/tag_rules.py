"""
Tag rule engine.

Per-tag semantics for opening tags, closing tags and text runs. Each rule is a
plain function registered in a lookup table keyed by tag name; tags without a
rule only contribute their ``style`` attribute.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Set

from ..models.directive import Directive, StyleOptions, TextContext
from ..models.markup import AncestorFrame
from ..renderers.callbacks import HighlightCallback
from ..styles.defaults import (
    BLOCK_TAGS,
    DEFAULT_BULLET,
    DEFAULT_HEADING_LINE_HEIGHT,
    DEFAULT_HEADING_MARGIN_TOP,
    DEFAULT_LIST_MARGIN,
    HEADINGS,
    SMALL_SIZE_RATIO,
)
from ..styles.value_normalizer import extract_token, parse_declarations, to_int
from .render_session import RenderSession

logger = logging.getLogger(__name__)

TagRule = Callable[[RenderSession, AncestorFrame, Directive], None]


def _style_options(session: RenderSession, frame: AncestorFrame, font_size: Optional[float] = None) -> StyleOptions:
    style = frame.node.get("style")
    if not style:
        return {}
    return session.normalize(parse_declarations(style), font_size=font_size)


# ---------------------------------------------------------------------------
# Opening tags
# ---------------------------------------------------------------------------

def _open_list(session: RenderSession, frame: AncestorFrame, directive: Directive) -> None:
    options = directive.options
    margin = to_int(options["margin-left"]) if "margin-left" in options else DEFAULT_LIST_MARGIN
    symbol = None
    if frame.name == "ul":
        symbol = extract_token(options["list-symbol"]) if "list-symbol" in options else DEFAULT_BULLET
    session.list_state.open_list(frame.name, margin, symbol)


def _open_list_item(session: RenderSession, frame: AncestorFrame, directive: Directive) -> None:
    session.start_list_item(frame.node)


OPENING_RULES: Dict[str, TagRule] = {
    "ul": _open_list,
    "ol": _open_list,
    "li": _open_list_item,
}


def opening_tag(session: RenderSession, frame: AncestorFrame) -> Directive:
    """Build the directive for an opening tag."""
    directive = Directive(tag=frame.name, flush=frame.name in BLOCK_TAGS)
    directive.options.update(_style_options(session, frame))

    rule = OPENING_RULES.get(frame.name)
    if rule:
        rule(session, frame, directive)
    return directive


# ---------------------------------------------------------------------------
# Closing tags
# ---------------------------------------------------------------------------

def _close_break(session: RenderSession, frame: AncestorFrame, directive: Directive) -> None:
    if session.last_element == "br":
        directive.text = "\n"


def _close_image(session: RenderSession, frame: AncestorFrame, directive: Directive) -> None:
    directive.flush = True
    directive.src = frame.node.get("src")

    # Presentational width/height attributes, unless the style already sets them.
    attributes = {}
    for name in ("width", "height"):
        value = frame.node.get(name)
        if value is not None and name not in directive.options:
            attributes[name] = value
    if attributes:
        directive.options.update(session.normalize(attributes))


def _close_list(session: RenderSession, frame: AncestorFrame, directive: Directive) -> None:
    session.list_state.close_list()


CLOSING_RULES: Dict[str, TagRule] = {
    "br": _close_break,
    "img": _close_image,
    "ul": _close_list,
    "ol": _close_list,
}


def closing_tag(session: RenderSession, frame: AncestorFrame) -> Directive:
    """Build the directive for a closing tag, tearing down list state."""
    directive = Directive(tag=frame.name, flush=frame.name in BLOCK_TAGS)
    directive.options.update(_style_options(session, frame))

    rule = CLOSING_RULES.get(frame.name)
    if rule:
        rule(session, frame, directive)
    return directive


# ---------------------------------------------------------------------------
# Text runs
# ---------------------------------------------------------------------------

@dataclass
class TextFold:
    """Running state while folding the ancestors of one text run."""

    session: RenderSession
    font_size: float
    context: TextContext = field(default_factory=TextContext)
    styles: Set[str] = field(default_factory=set)
    highlight: Optional[HighlightCallback] = None

    @property
    def options(self) -> StyleOptions:
        return self.context.options


TextRule = Callable[[TextFold, AncestorFrame], None]


def _text_link(fold: TextFold, frame: AncestorFrame) -> None:
    link = frame.node.get("href")
    if link:
        fold.options["link"] = link


def _text_bold(fold: TextFold, frame: AncestorFrame) -> None:
    fold.styles.add("bold")


def _text_italic(fold: TextFold, frame: AncestorFrame) -> None:
    fold.styles.add("italic")


def _text_underline(fold: TextFold, frame: AncestorFrame) -> None:
    fold.styles.add("underline")


def _text_strike_through(fold: TextFold, frame: AncestorFrame) -> None:
    fold.options["callback"] = fold.session.strike_through


def _text_heading(fold: TextFold, frame: AncestorFrame) -> None:
    fold.options["size"] = HEADINGS[frame.name]
    fold.options["margin-top"] = DEFAULT_HEADING_MARGIN_TOP
    fold.options["line-height"] = DEFAULT_HEADING_LINE_HEIGHT


def _text_list_item(fold: TextFold, frame: AncestorFrame) -> None:
    item = fold.session.list_item(frame.node)
    fold.options["margin-left"] = item.margin
    # Text after a nested list continues the item without repeating its marker.
    fold.context.pre = "" if item.emitted else item.prefix


def _text_highlight(fold: TextFold, frame: AncestorFrame) -> None:
    fold.highlight = fold.session.new_highlight()
    fold.options["callback"] = fold.highlight


def _text_small(fold: TextFold, frame: AncestorFrame) -> None:
    fold.options["size"] = fold.font_size * SMALL_SIZE_RATIO


def _text_font(fold: TextFold, frame: AncestorFrame) -> None:
    attributes = {
        "font": frame.node.get("face"),
        "color": frame.node.get("color"),
        "size": frame.node.get("size"),
    }
    attributes = {key: value for key, value in attributes.items() if value is not None}
    fold.options.update(fold.session.normalize(attributes, font_size=fold.font_size))


TEXT_RULES: Dict[str, TextRule] = {
    "a": _text_link,
    "b": _text_bold,
    "strong": _text_bold,
    "del": _text_strike_through,
    "s": _text_strike_through,
    "i": _text_italic,
    "em": _text_italic,
    "li": _text_list_item,
    "mark": _text_highlight,
    "span": _text_highlight,
    "small": _text_small,
    "u": _text_underline,
    "ins": _text_underline,
    "font": _text_font,
}
TEXT_RULES.update({heading: _text_heading for heading in HEADINGS})


def text_node(session: RenderSession, ancestors: Sequence[AncestorFrame]) -> TextContext:
    """
    Fold the effects of every open ancestor into the options of a text run.

    Ancestors are applied outermost first, so the innermost tag wins on
    conflicting keys. Each ancestor's ``style`` attribute is applied after its
    tag rule.

    Args:
        session: Current render session
        ancestors: Open tags enclosing the run, outermost first

    Returns:
        Folded options and the list marker to print before the run
    """
    fold = TextFold(session=session, font_size=session.font_size)

    for frame in ancestors:
        rule = TEXT_RULES.get(frame.name)
        if rule:
            rule(fold, frame)
        if fold.styles:
            fold.options["styles"] = set(fold.styles)

        values = _style_options(session, frame, font_size=fold.font_size)
        if "background" in values:
            if fold.highlight is None:
                fold.highlight = session.new_highlight()
            fold.highlight.set_color(values["background"])
            fold.options["callback"] = fold.highlight
        fold.options.update(values)

        if "size" in fold.options:
            fold.font_size = fold.options["size"]

    return fold.context
