"""Custom exceptions for HTML Interpreter."""

from typing import Optional


class HtmlInterpreterError(Exception):
    """Base exception for HTML Interpreter errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(HtmlInterpreterError):
    """Exception raised while turning markup into a node tree."""

    pass


class StyleError(HtmlInterpreterError):
    """Exception raised during style normalization."""

    pass


class AdjustFontSizeError(StyleError):
    """Exception raised when the font size adjustment hook cannot be called."""

    def __init__(self, details: Optional[str] = None):
        super().__init__("Adjust font size method has to be callable", details)


class RenderingError(HtmlInterpreterError):
    """Exception raised during document rendering."""

    pass
