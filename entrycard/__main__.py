"""
Entry point for running entrycard as a module.

Usage:
    python -m entrycard render lines.json --output card.svg
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
