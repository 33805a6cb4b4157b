"""
HTML parser adapter.

Parses an HTML fragment with lxml and converts it into the ``TextNode`` /
``ElementNode`` tree walked by the engine. lxml keeps the text that follows
an element in ``tail``; here it becomes a sibling text node.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from lxml import etree
from lxml import html as lxml_html

from ..exceptions import ParsingError
from ..models.markup import ElementNode, MarkupNode, TextNode

logger = logging.getLogger(__name__)


def _convert(element) -> ElementNode:
    node = ElementNode(
        name=element.tag.lower(),
        attributes={str(key).lower(): value for key, value in element.attrib.items()},
    )
    node.children = _children(element)
    return node


def _children(element) -> List[MarkupNode]:
    children: List[MarkupNode] = []
    if element.text:
        children.append(TextNode(element.text))
    for child in element:
        # Comments and processing instructions carry a callable tag.
        if isinstance(child.tag, str):
            children.append(_convert(child))
        if child.tail:
            children.append(TextNode(child.tail))
    return children


def parse_html(markup: str) -> List[MarkupNode]:
    """
    Parse an HTML fragment into markup nodes.

    Args:
        markup: HTML fragment

    Returns:
        Top-level nodes of the fragment
    """
    if not isinstance(markup, str):
        raise ParsingError("HTML markup must be a string", type(markup).__name__)
    if not markup.strip():
        return []

    try:
        wrapper = lxml_html.fragment_fromstring(markup, create_parent="div")
    except (etree.LxmlError, ValueError) as e:
        raise ParsingError("Failed to parse HTML", str(e)) from e

    nodes = _children(wrapper)
    logger.debug(f"Parsed {len(nodes)} top-level nodes")
    return nodes


def parse_file(html_path: Union[str, Path]) -> List[MarkupNode]:
    """Parse an HTML file (UTF-8) into markup nodes."""
    html_path = Path(html_path)
    if not html_path.exists():
        raise ParsingError("HTML file not found", str(html_path))
    return parse_html(html_path.read_text(encoding="utf-8"))
