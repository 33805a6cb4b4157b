"""
Renderers for composed styled text.

Exposes the effect handles attached to text runs and the ReportLab based PDF
renderer.
"""

from .base_renderer import BaseRenderer, IRenderer
from .callbacks import HighlightCallback, StrikeThroughCallback
from .pdf_renderer import StyledTextRenderer

__all__ = [
    "BaseRenderer",
    "HighlightCallback",
    "IRenderer",
    "StrikeThroughCallback",
    "StyledTextRenderer",
]
