"""
Room status shaping.

Room details are stored as loosely formatted JSON (bare keys, single
quotes, embedded newlines). They are parsed leniently and flattened into
``path.key: value`` lines before being laid out.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Mapping, Optional

from ..engine.layout_primitives import Line

logger = logging.getLogger(__name__)

ROOM_AVAILABLE_CODE = 999
ROOM_AVAILABLE_LABEL = "여유"
NOT_AVAILABLE = "N/A"

TITLE_FONT_SIZE = 34
HEADING_FONT_SIZE = 28
DETAIL_FONT_SIZE = 22
SECTION_GAP = 18

_NEWLINES = re.compile(r"\r?\n|\r")
_BARE_KEYS = re.compile(r"([{\s,])(\w+)\s*:")
_RAW_STRIP = re.compile(r'[{}"]')


@dataclass(frozen=True)
class ParsedDetail:
    """Result of lenient parsing: a decoded object, or the raw text, or neither."""

    obj: Any = None
    text: Optional[str] = None


def room_info_display(room_info: Any) -> str:
    """``999`` means rooms are available; missing info shows as N/A."""
    if room_info is None:
        return NOT_AVAILABLE
    try:
        if float(room_info) == ROOM_AVAILABLE_CODE:
            return ROOM_AVAILABLE_LABEL
    except (TypeError, ValueError):
        pass
    return str(room_info)


def safe_parse_json(raw: Any) -> ParsedDetail:
    """
    Decode a room detail value.

    Already-decoded objects pass through, bytes are decoded as UTF-8. Strict
    JSON is tried first, then a repaired variant (newlines to spaces, bare
    keys quoted, single quotes to double). If both fail the raw text is
    returned instead.
    """
    if raw is None:
        return ParsedDetail()

    if isinstance(raw, (bytes, bytearray)):
        text = bytes(raw).decode("utf-8", errors="replace")
    elif isinstance(raw, (Mapping, list)):
        return ParsedDetail(obj=raw)
    else:
        text = str(raw)

    try:
        return ParsedDetail(obj=json.loads(text))
    except ValueError:
        pass

    fixed = _NEWLINES.sub(" ", text)
    fixed = _BARE_KEYS.sub(r'\1"\2":', fixed)
    fixed = fixed.replace("'", '"')
    try:
        return ParsedDetail(obj=json.loads(fixed))
    except ValueError:
        logger.debug("Room detail is not JSON even after repair; keeping raw text")

    return ParsedDetail(text=text)


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def flatten_detail(value: Any, prefix: str = "") -> List[str]:
    """
    Flatten nested mappings/lists into ``path.key: value`` lines.

    List items use their index as the key (``rooms.0.name: A``).
    """
    lines: List[str] = []

    if value is None:
        lines.append(f"{prefix}: ")
    elif isinstance(value, list):
        for index, item in enumerate(value):
            key = f"{prefix}.{index}" if prefix else str(index)
            lines.extend(flatten_detail(item, key))
    elif isinstance(value, Mapping):
        for name, item in value.items():
            key = f"{prefix}.{name}" if prefix else str(name)
            if isinstance(item, (Mapping, list)):
                lines.extend(flatten_detail(item, key))
            else:
                lines.append(f"{key}: {_scalar(item)}")
    else:
        lines.append(f"{prefix}: {_scalar(value)}")
    return lines


def detail_lines(raw: Any) -> List[str]:
    """Text rows for the detail section; empty when there is nothing to show."""
    parsed = safe_parse_json(raw)
    if parsed.obj is not None:
        return flatten_detail(parsed.obj)
    if parsed.text:
        cleaned = _RAW_STRIP.sub("", parsed.text)
        return _NEWLINES.split(cleaned)
    return []


def format_updated_at(value: Any) -> str:
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return str(value)


def build_room_lines(
    store_name: str,
    room_info: Any = None,
    wait_info: Any = None,
    room_detail: Any = None,
    updated_at: Any = None,
) -> List[Line]:
    """
    Build the card lines of a venue's room status board.

    Args:
        store_name: Venue name shown in the title
        room_info: Room count, ``999`` for "available"
        wait_info: Waiting information
        room_detail: Detail JSON (string, bytes or decoded object)
        updated_at: Last update time (datetime or preformatted string)

    Returns:
        Lines ready for ``build_composite_svg``
    """
    lines = [
        Line(text=f"{store_name} 룸현황", font_size=TITLE_FONT_SIZE, font_weight="bold"),
        Line(text=f"룸 정보: {room_info_display(room_info)}", gap_before=SECTION_GAP),
        Line(text=f"웨이팅 정보: {NOT_AVAILABLE if wait_info is None else wait_info}"),
        Line(text="상세 정보", font_size=HEADING_FONT_SIZE, font_weight="bold", gap_before=SECTION_GAP),
    ]

    rows = detail_lines(room_detail)
    if rows:
        lines.extend(Line(text=row, font_size=DETAIL_FONT_SIZE) for row in rows)
    else:
        lines.append(Line(text="상세 정보 없음", font_size=DETAIL_FONT_SIZE))

    lines.append(Line(text=f"업데이트: {format_updated_at(updated_at)}", gap_before=SECTION_GAP))
    return lines
