"""Builders for markup trees used across the test suite."""

from html_interpreter.models.markup import AncestorFrame, ElementNode, TextNode


def element(name, attributes=None, *children):
    """Build an element node; strings become text nodes."""
    return ElementNode(
        name=name,
        attributes=dict(attributes or {}),
        children=[TextNode(child) if isinstance(child, str) else child for child in children],
    )


def frame(name, attributes=None, *children):
    """Build an ancestor frame around a new element node."""
    return AncestorFrame(name, element(name, attributes, *children))
