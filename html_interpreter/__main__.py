"""
Entry point for running html_interpreter as a module.

Usage:
    python -m html_interpreter input.html --output output.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
