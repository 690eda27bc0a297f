"""Today's attendance summary across venues."""

from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import Any, Iterable, List, Optional

from ..engine.layout_primitives import Line
from ..utils.validators import coerce_number

TITLE_FONT_SIZE = 34
BODY_FONT_SIZE = 24
SECTION_GAP = 18


def _store_count(store: Any) -> int:
    if not isinstance(store, Mapping):
        return 0
    if "count" in store:
        number = coerce_number(store.get("count"), 0, "count")
        return int(number) if number else 0
    entries = store.get("entries")
    return len(entries) if isinstance(entries, Sized) else 0


def build_today_lines(stores: Iterable[Any], date_label: Optional[str] = None) -> List[Line]:
    """
    Build the lines of today's summary card.

    Args:
        stores: Mappings with ``storeName`` and either ``count`` or an ``entries`` list
        date_label: Optional date shown in the title

    Returns:
        Title, one line per venue (input order) and the overall total
    """
    title = "오늘의 출근 현황"
    if date_label:
        title = f"{title} ({date_label})"
    lines = [Line(text=title, font_size=TITLE_FONT_SIZE, font_weight="bold")]

    total = 0
    first = True
    for store in stores or ():
        name = store.get("storeName", store.get("store_name", "")) if isinstance(store, Mapping) else ""
        count = _store_count(store)
        total += count
        lines.append(
            Line(text=f"{name}: {count}명", font_size=BODY_FONT_SIZE, gap_before=SECTION_GAP if first else 0)
        )
        first = False

    lines.append(Line(text=f"합계: {total}명", font_weight="bold", gap_before=SECTION_GAP))
    return lines
