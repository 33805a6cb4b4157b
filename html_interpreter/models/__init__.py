"""
Data models for HTML Interpreter.

Markup nodes come from the parser adapter, directives and text contexts from
the tag rule engine, and blocks from the composer.
"""

from .directive import (
    Block,
    BreakBlock,
    Directive,
    ImageBlock,
    RuleBlock,
    StyleOptions,
    TextBlock,
    TextContext,
    TextPart,
)
from .geometry import Bounds, Margins, Size
from .markup import AncestorFrame, ElementNode, MarkupNode, TextNode

__all__ = [
    "AncestorFrame",
    "Block",
    "Bounds",
    "BreakBlock",
    "Directive",
    "ElementNode",
    "ImageBlock",
    "Margins",
    "MarkupNode",
    "RuleBlock",
    "Size",
    "StyleOptions",
    "TextBlock",
    "TextContext",
    "TextNode",
    "TextPart",
]
