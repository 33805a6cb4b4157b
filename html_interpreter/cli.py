"""
Command-line interface for HTML Interpreter.

Usage:
    html-interpreter input.html --output output.pdf
    html-interpreter input.html --blocks
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import HtmlInterpreterError
from .utils.logger import LOG_LEVELS
from .utils.rich_logger import print_blocks, setup_rich_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="html-interpreter",
        description="Render a subset of HTML/CSS as styled text in a PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  html-interpreter page.html --output page.pdf
  html-interpreter page.html --page-size LETTER --font-size 11
  html-interpreter page.html --blocks
        """,
    )
    parser.add_argument("input", help="Input HTML file")
    parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: input name with .pdf extension)"
    )
    parser.add_argument(
        "--page-size",
        choices=["A4", "LETTER"],
        default="A4",
        help="Page size (default: A4)"
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=12.0,
        help="Base font size in points (default: 12)"
    )
    parser.add_argument(
        "--font",
        default="Helvetica",
        help="Base font name (default: Helvetica)"
    )
    parser.add_argument(
        "--blocks",
        action="store_true",
        help="Print the composed blocks instead of writing a PDF"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    return parser


def cmd_blocks(args) -> int:
    from .api import compose_for
    from .renderers.pdf_renderer import StyledTextRenderer

    renderer = StyledTextRenderer(page_size=args.page_size, font_name=args.font, font_size=args.font_size)
    markup = Path(args.input).read_text(encoding="utf-8")
    print_blocks(compose_for(markup, renderer))
    return 0


def cmd_render(args) -> int:
    from .api import styled_text

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_suffix(".pdf")
    markup = input_path.read_text(encoding="utf-8")

    blocks = styled_text(
        markup,
        output_path,
        page_size=args.page_size,
        font_name=args.font,
        font_size=args.font_size,
    )
    logger.info(f"Saved {len(blocks)} blocks to {output_path}")
    print(f"Saved: {output_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_rich_logging(args.log_level)

    if not Path(args.input).exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    try:
        if args.blocks:
            return cmd_blocks(args)
        return cmd_render(args)
    except HtmlInterpreterError as e:
        logger.error(str(e))
        return 1
