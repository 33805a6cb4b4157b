"""
High level API.

``compose`` turns HTML into layout blocks without touching the PDF backend;
``styled_text`` composes and renders into a PDF in one call.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from .engine.composer import compose_nodes
from .engine.render_session import RenderSession, RenderTarget, StaticTarget
from .models.directive import Block
from .models.geometry import Bounds
from .models.markup import MarkupNode
from .parser.html_parser import parse_html
from .renderers.base_renderer import CanvasTarget
from .renderers.pdf_renderer import StyledTextRenderer
from .styles.value_normalizer import AdjustFontSize

logger = logging.getLogger(__name__)

Markup = Union[str, Sequence[MarkupNode]]


def _nodes(markup: Markup) -> Sequence[MarkupNode]:
    if isinstance(markup, str):
        return parse_html(markup)
    return markup


def compose_for(
    markup: Markup,
    target: RenderTarget,
    adjust_font_size: Optional[AdjustFontSize] = None,
) -> List[Block]:
    """Compose ``markup`` against a render target in a fresh session."""
    session = RenderSession(target, adjust_font_size=adjust_font_size)
    return compose_nodes(_nodes(markup), session)


def compose(
    markup: Markup,
    font_size: float = 12.0,
    bounds: Optional[Bounds] = None,
    adjust_font_size: Optional[AdjustFontSize] = None,
) -> List[Block]:
    """
    Compose HTML into layout blocks.

    Args:
        markup: HTML source or an already parsed node list
        font_size: Base font size used for ``em`` and ``<small>``
        bounds: Page bounds used for percentage widths and heights
        adjust_font_size: Optional hook applied to every declared font size

    Returns:
        Text, break, image and rule blocks in document order
    """
    target = StaticTarget(font_size=font_size)
    if bounds is not None:
        target.bounds = bounds
    return compose_for(markup, target, adjust_font_size)


def styled_text(
    markup: Markup,
    output: Union[CanvasTarget, Path],
    adjust_font_size: Optional[AdjustFontSize] = None,
    **renderer_options: Any,
) -> List[Block]:
    """
    Render HTML into a PDF.

    Args:
        markup: HTML source or an already parsed node list
        output: File path or binary stream receiving the PDF
        adjust_font_size: Optional hook applied to every declared font size
        **renderer_options: ``page_size``, ``margins``, ``font_name``,
            ``font_size`` and ``leading_ratio`` for the renderer

    Returns:
        The composed blocks
    """
    renderer = StyledTextRenderer(**renderer_options)
    blocks = compose_for(markup, renderer, adjust_font_size)
    renderer.render(blocks, output)
    return blocks
