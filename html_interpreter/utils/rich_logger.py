"""
Rich console output for the command line.

Colourful log records through ``RichHandler`` and a table view of composed
blocks.
"""

import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from ..models.directive import Block, BreakBlock, ImageBlock, RuleBlock, TextBlock


def setup_rich_logging(level: str = "INFO", console: Optional[Console] = None) -> None:
    """
    Route the root logger through a rich handler.

    Args:
        level: Log level
        console: Console to write to, stderr by default
    """
    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)


def _describe(block: Block):
    if isinstance(block, TextBlock):
        details = f"indent={block.margin_left} top={block.margin_top}"
        if block.align:
            details += f" align={block.align}"
        return "text", block.text, details
    if isinstance(block, BreakBlock):
        return "break", "", ""
    if isinstance(block, ImageBlock):
        return "image", block.src, f"width={block.width} height={block.height}"
    if isinstance(block, RuleBlock):
        return "rule", "", ""
    return type(block).__name__, "", ""


def print_blocks(blocks: Sequence[Block], console: Optional[Console] = None) -> None:
    """Show composed blocks as a table."""
    table = Table(title="Composed blocks")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Content", style="magenta")
    table.add_column("Layout")

    for index, block in enumerate(blocks, 1):
        kind, content, details = _describe(block)
        table.add_row(str(index), kind, Text(content), details)

    (console or Console()).print(table)
