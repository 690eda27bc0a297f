"""
Entry board shaping.

Turns the attendance records of one venue into card lines: title, total
attendance, the worker names ten per row and a ranked TOP 5 list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence

from ..engine.layout_primitives import Line
from ..utils.validators import coerce_number

logger = logging.getLogger(__name__)

MENTION_WEIGHT = 5
TOP_RANK_LIMIT = 5
NAMES_PER_ROW = 10

TITLE_FONT_SIZE = 34
HEADING_FONT_SIZE = 28
BODY_FONT_SIZE = 24
SECTION_GAP = 18


@dataclass(frozen=True)
class RankedEntry:
    """One attendance record with its ranking score."""

    worker_name: str
    mention_count: int
    insert_count: int
    total: int


def _count(value: Any) -> int:
    number = coerce_number(value, 0, "count")
    return int(number) if number else 0


def _field(record: Any, *names: str) -> Any:
    for name in names:
        if isinstance(record, Mapping):
            if name in record:
                return record[name]
        elif hasattr(record, name):
            return getattr(record, name)
    return None


def rank_entries(entries: Iterable[Any]) -> List[RankedEntry]:
    """
    Score attendance records.

    ``total = mention_count * 5 + insert_count``; missing or non-numeric
    counts count as 0. Input order is preserved.

    Args:
        entries: Mappings (camelCase or snake_case keys) or objects

    Returns:
        List of RankedEntry in input order
    """
    ranked = []
    for record in entries or ():
        mention = _count(_field(record, "mentionCount", "mention_count"))
        insert = _count(_field(record, "insertCount", "insert_count"))
        name = _field(record, "workerName", "worker_name")
        ranked.append(
            RankedEntry(
                worker_name="" if name is None else str(name),
                mention_count=mention,
                insert_count=insert,
                total=mention * MENTION_WEIGHT + insert,
            )
        )
    return ranked


def top_entries(ranked: Sequence[RankedEntry], limit: int = TOP_RANK_LIMIT) -> List[RankedEntry]:
    """Highest totals first; ties keep their input order."""
    return sorted(ranked, key=lambda entry: entry.total, reverse=True)[:limit]


def group_names(names: Sequence[str], per_row: int = NAMES_PER_ROW) -> List[str]:
    """Join names with single spaces, ``per_row`` names to a row."""
    per_row = max(1, per_row)
    return [" ".join(names[start:start + per_row]) for start in range(0, len(names), per_row)]


def build_entry_lines(store_name: str, entries: Iterable[Any]) -> List[Line]:
    """
    Build the card lines of a venue's entry board.

    Args:
        store_name: Venue name shown in the title
        entries: Attendance records, newest first

    Returns:
        Lines ready for ``build_composite_svg``
    """
    ranked = rank_entries(entries)
    lines = [
        Line(text=f"{store_name} 엔트리", font_size=TITLE_FONT_SIZE, font_weight="bold"),
        Line(text=f"총 출근인원: {len(ranked)}명", gap_before=SECTION_GAP),
    ]

    if not ranked:
        lines.append(Line(text="엔트리가 없습니다.", gap_before=SECTION_GAP))
        return lines

    lines.append(Line(text="엔트리 목록", font_size=HEADING_FONT_SIZE, font_weight="bold", gap_before=SECTION_GAP))
    for row in group_names([entry.worker_name for entry in ranked]):
        lines.append(Line(text=row, font_size=BODY_FONT_SIZE))

    top = top_entries(ranked)
    lines.append(Line(text="추천 TOP 5", font_size=HEADING_FONT_SIZE, font_weight="bold", gap_before=SECTION_GAP))
    for rank, entry in enumerate(top, start=1):
        lines.append(Line(text=f"{rank}. {entry.worker_name} - 합계 {entry.total}", font_size=BODY_FONT_SIZE))

    logger.debug("Entry card for %s: %d entries, top %d", store_name, len(ranked), len(top))
    return lines
