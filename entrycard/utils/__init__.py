"""
Utils module for entrycard.

Logging setup, input coercion and a small thread-safe cache.
"""

from .cache import Cache
from .logger import configure_logging, get_logger
from .rich_logger import setup_logging
from .validators import coerce_number, coerce_optional_str, coerce_text, snake_case

__all__ = [
    "Cache",
    "configure_logging",
    "get_logger",
    "setup_logging",
    "coerce_number",
    "coerce_optional_str",
    "coerce_text",
    "snake_case",
]
