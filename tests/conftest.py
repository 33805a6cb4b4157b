"""
Pytest configuration for HTML Interpreter
"""

import logging
import sys
import tempfile
from pathlib import Path

import pytest

from html_interpreter.engine.render_session import RenderSession, StaticTarget
from html_interpreter.models.geometry import Bounds


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def target():
    """Render target with a 12pt font on a 500x800 page area."""
    return StaticTarget(font_size=12.0, bounds=Bounds(width=500.0, height=800.0))


@pytest.fixture
def session(target):
    """Fresh render session bound to the fake target."""
    return RenderSession(target)
