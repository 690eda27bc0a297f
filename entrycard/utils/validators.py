"""Coercion helpers for loosely-typed card input."""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_case(key: str) -> str:
    """Convert ``camelCase`` option keys to ``snake_case`` (``gapBefore`` -> ``gap_before``)."""
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def coerce_number(value: Any, default: Optional[float], name: str = "value") -> Optional[float]:
    """
    Coerce ``value`` to a number, falling back to ``default``.

    ``None`` silently yields the default; anything that cannot be parsed as a
    finite number is logged and replaced by the default. Booleans are rejected
    because ``True`` would otherwise read as ``1``.

    Args:
        value: Raw value (number, numeric string or ``None``)
        default: Value used when ``value`` is missing or invalid
        name: Field name used in the warning

    Returns:
        ``int`` for integral input, ``float`` otherwise, or ``default``
    """
    if value is None:
        return default

    if isinstance(value, bool):
        logger.warning("Ignoring boolean %s=%r, using %r", name, value, default)
        return default

    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r, using %r", name, value, default)
            return default
    else:
        logger.warning("Ignoring %s of type %s, using %r", name, type(value).__name__, default)
        return default

    if isinstance(number, float):
        if not math.isfinite(number):
            logger.warning("Ignoring non-finite %s=%r, using %r", name, value, default)
            return default
        if number.is_integer():
            return int(number)
    return number


def coerce_text(value: Any) -> str:
    """Line text must be a string; anything else renders as an empty line."""
    if isinstance(value, str):
        return value
    if value is not None:
        logger.warning("Coercing non-string text of type %s to empty string", type(value).__name__)
    return ""


def coerce_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
