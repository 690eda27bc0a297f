"""Utility helpers shared across renderer components."""

from __future__ import annotations

import base64
from typing import Any, Union

# Order matters: "&" must be replaced first.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_xml(value: Any = "") -> str:
    """Escape the five reserved markup characters."""
    if value is None:
        return ""
    text = str(value)
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def format_number(value: Union[int, float]) -> str:
    """
    Format a coordinate deterministically.

    Integral values print without a fraction (``24``, not ``24.0``), other
    values with at most four decimals (the precision of ``round_metric``)
    and no trailing zeros.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if number.is_integer():
        return str(int(number))
    text = f"{number:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_attribute(value: Any) -> str:
    """Numbers through ``format_number``, anything else as text (escaped on serialization)."""
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def to_data_uri(data: Union[str, bytes], mime_type: str = "image/svg+xml") -> str:
    """
    Wrap a document as a base64 ``data:`` URI for inline embedding.

    Args:
        data: Text document (encoded as UTF-8) or raw bytes
        mime_type: Media type of the payload

    Returns:
        ``data:<mime_type>;base64,<payload>``
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
