"""
Rich logging for the entrycard command line.

Provides colorful log output on stderr using the rich library, so that SVG
documents written to stdout stay clean.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .logger import configure_logging, level_value


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging; plain stream logging otherwise
    """
    if not use_rich:
        configure_logging(level)
        return

    value = level_value(level)
    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(value)
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)
