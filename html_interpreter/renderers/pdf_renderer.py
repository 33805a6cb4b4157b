"""
PDF renderer for styled text blocks.

Builds ReportLab platypus flowables from composed blocks: text blocks become
``Paragraph`` objects whose runs are written in ReportLab's paragraph markup,
line breaks become spacers, images and horizontal rules get their own
flowables.
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union
from xml.sax.saxutils import escape

from PIL import Image as PILImage
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import HRFlowable, Image, Paragraph, SimpleDocTemplate, Spacer
from reportlab.platypus.doctemplate import LayoutError

from ..exceptions import RenderingError
from ..models.directive import Block, BreakBlock, ImageBlock, RuleBlock, TextBlock, TextPart
from ..models.geometry import Margins, Size
from ..styles.value_normalizer import to_float
from .base_renderer import BaseRenderer, CanvasTarget
from .render_utils import color_attr, resolve_font_name, to_color

logger = logging.getLogger(__name__)

STYLE_TAGS = {
    "bold": "b",
    "italic": "i",
    "underline": "u",
    "strikethrough": "strike",
    "subscript": "sub",
    "superscript": "super",
}

ALIGNMENTS = {
    "left": TA_LEFT,
    "center": TA_CENTER,
    "right": TA_RIGHT,
    "justify": TA_JUSTIFY,
}


class StyledTextRenderer(BaseRenderer):
    """Render styled text blocks into a PDF with ReportLab."""

    def __init__(
        self,
        page_size: Union[str, Size, Iterable[float]] = A4,
        margins: Union[Margins, Iterable[float]] = (50, 50, 50, 50),
        font_name: str = "Helvetica",
        font_size: float = 12.0,
        leading_ratio: float = 1.2,
    ) -> None:
        super().__init__(page_size=page_size, margins=margins, font_name=font_name, font_size=font_size)
        self.font_name = resolve_font_name(font_name)
        self.leading_ratio = leading_ratio

    def render(self, blocks: Sequence[Block], output: Union[CanvasTarget, Path]) -> None:
        """
        Write ``blocks`` as a PDF.

        Args:
            blocks: Blocks produced by the composer
            output: File path or binary stream
        """
        if isinstance(output, Path):
            output = str(output)

        document = SimpleDocTemplate(
            output,
            pagesize=self.page_size,
            leftMargin=self.margins.left,
            rightMargin=self.margins.right,
            topMargin=self.margins.top,
            bottomMargin=self.margins.bottom,
        )
        story = self.build_story(blocks)
        if not story:
            story = [Spacer(1, 0)]

        try:
            document.build(story)
        except (LayoutError, ValueError) as e:
            raise RenderingError("Failed to render PDF", str(e)) from e

        logger.info(f"Rendered {len(blocks)} blocks into {len(story)} flowables")

    def render_to_bytes(self, blocks: Sequence[Block]) -> bytes:
        buffer = BytesIO()
        self.render(blocks, buffer)
        return buffer.getvalue()

    # ------------------------------------------------------------------
    # Flowables
    # ------------------------------------------------------------------
    def build_story(self, blocks: Sequence[Block]) -> List:
        story = []
        for block in blocks:
            if isinstance(block, TextBlock):
                story.append(self.paragraph(block))
            elif isinstance(block, BreakBlock):
                story.append(Spacer(1, self.font_size * self.leading_ratio))
            elif isinstance(block, ImageBlock):
                image = self.image(block)
                if image is not None:
                    story.append(image)
            elif isinstance(block, RuleBlock):
                story.append(
                    HRFlowable(
                        width="100%",
                        thickness=1,
                        color=to_color(block.options.get("color")),
                        spaceBefore=4,
                        spaceAfter=4,
                    )
                )
        return story

    def paragraph(self, block: TextBlock) -> Paragraph:
        largest = max(
            (to_float(part.options.get("size")) or self.font_size for part in block.parts),
            default=self.font_size,
        )
        style = ParagraphStyle(
            name="StyledText",
            fontName=self.font_name,
            fontSize=self.font_size,
            leading=largest * self.leading_ratio + block.leading,
            leftIndent=block.margin_left,
            spaceBefore=block.margin_top,
            alignment=ALIGNMENTS.get(block.align, TA_LEFT),
        )
        markup = escape(block.pre) + "".join(self.run_markup(part) for part in block.parts)
        return Paragraph(markup, style)

    def run_markup(self, part: TextPart) -> str:
        """Write one run in ReportLab paragraph markup."""
        options = part.options
        markup = escape(part.text)

        for style in sorted(options.get("styles") or ()):
            tag = STYLE_TAGS.get(style)
            if tag:
                markup = f"<{tag}>{markup}</{tag}>"
            else:
                logger.debug(f"Unsupported font style ignored: {style}")

        attributes = []
        if options.get("font"):
            attributes.append(f'face="{resolve_font_name(options["font"], self.font_name)}"')
        size = to_float(options.get("size"))
        if size > 0:
            attributes.append(f'size="{size:g}"')
        if options.get("color"):
            attributes.append(f'color="{color_attr(options["color"])}"')
        if attributes:
            markup = f"<font {' '.join(attributes)}>{markup}</font>"

        callback = options.get("callback")
        if callback is not None:
            markup = callback.decorate(markup, color_attr)

        link = options.get("link")
        if link:
            markup = f'<a href="{escape(link, {chr(34): "&quot;"})}">{markup}</a>'
        return markup

    def image(self, block: ImageBlock) -> Optional[Image]:
        source = Path(block.src)
        if not source.is_file():
            logger.warning(f"Image not found, skipping: {block.src}")
            return None

        try:
            with PILImage.open(source) as picture:
                natural_width, natural_height = picture.size
        except OSError as e:
            logger.warning(f"Unreadable image {block.src}: {e}")
            return None

        width = to_float(block.width)
        height = to_float(block.height)
        if width and not height:
            height = natural_height * width / natural_width
        elif height and not width:
            width = natural_width * height / natural_height
        elif not width and not height:
            width, height = float(natural_width), float(natural_height)

        if width > self.content_width:
            scale = self.content_width / width
            width, height = width * scale, height * scale

        return Image(str(source), width=width, height=height)
