"""
HTML Interpreter - render a subset of HTML/CSS as styled text.

Translates markup into styled text runs and block directives for a page
layout engine:

- Parser: lxml based adapter producing a markup node tree
- Styles: CSS declaration parsing, colour and unit normalization
- Engine: tree walker, per-tag rules, list numbering, paragraph composer
- Renderers: ReportLab PDF output, highlight/strikethrough effects
- Utils: logging helpers

Quick Start:
    from html_interpreter import styled_text

    styled_text("<h1>Title</h1><p>Some <b>bold</b> text</p>", "output.pdf")
"""

__version__ = "0.1.0"

from .exceptions import (
    AdjustFontSizeError,
    HtmlInterpreterError,
    ParsingError,
    RenderingError,
    StyleError,
)
from .api import compose, compose_for, styled_text
from .engine import RenderSession, StaticTarget, StyledTextComposer
from .parser import parse_file, parse_html
from .renderers import StyledTextRenderer

__all__ = [
    "AdjustFontSizeError",
    "HtmlInterpreterError",
    "ParsingError",
    "RenderSession",
    "RenderingError",
    "StaticTarget",
    "StyleError",
    "StyledTextComposer",
    "StyledTextRenderer",
    "compose",
    "compose_for",
    "parse_file",
    "parse_html",
    "styled_text",
]
