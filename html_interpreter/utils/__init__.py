"""Helper utilities: logging setup and rich console output."""

from .logger import add_file_handler, configure_logging, get_logger
from .rich_logger import print_blocks, setup_rich_logging

__all__ = [
    "add_file_handler",
    "configure_logging",
    "get_logger",
    "print_blocks",
    "setup_rich_logging",
]
