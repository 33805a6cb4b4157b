"""Markup parsing layer."""

from .html_parser import parse_file, parse_html

__all__ = ["parse_file", "parse_html"]
