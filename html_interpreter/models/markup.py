"""Markup tree nodes consumed by the tree walker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass(slots=True)
class TextNode:
    """Raw text between tags."""

    text: str


@dataclass(slots=True)
class ElementNode:
    """Element with a lower-case tag name, attributes and ordered children."""

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["MarkupNode"] = field(default_factory=list)

    def get(self, attribute: str) -> Optional[str]:
        """Return the attribute value or ``None`` when it is not set."""
        return self.attributes.get(attribute)


MarkupNode = Union[TextNode, ElementNode]


@dataclass(slots=True)
class AncestorFrame:
    """One entry of the open-tag stack seen by a text run."""

    name: str
    node: ElementNode
