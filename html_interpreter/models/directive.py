"""Records exchanged between the tag rule engine, the composer and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

StyleOptions = Dict[str, Any]


@dataclass
class Directive:
    """Rendering instruction produced for an opening or closing tag."""

    tag: str
    options: StyleOptions = field(default_factory=dict)
    flush: bool = False
    text: Optional[str] = None
    src: Optional[str] = None


@dataclass
class TextContext:
    """Options folded from the ancestors of a text run plus its list prefix."""

    options: StyleOptions = field(default_factory=dict)
    pre: str = ""


@dataclass
class TextPart:
    text: str
    options: StyleOptions = field(default_factory=dict)


@dataclass
class TextBlock:
    """A paragraph made of styled runs."""

    parts: List[TextPart] = field(default_factory=list)
    pre: str = ""
    margin_left: int = 0
    margin_top: int = 0
    leading: float = 0.0
    align: Optional[str] = None

    @property
    def text(self) -> str:
        return self.pre + "".join(part.text for part in self.parts)


@dataclass
class BreakBlock:
    """Blank line produced by consecutive line breaks."""

    text: str = "\n"


@dataclass
class ImageBlock:
    src: str
    width: Optional[float] = None
    height: Optional[float] = None


@dataclass
class RuleBlock:
    """Horizontal rule."""

    options: StyleOptions = field(default_factory=dict)


Block = Union[TextBlock, BreakBlock, ImageBlock, RuleBlock]
