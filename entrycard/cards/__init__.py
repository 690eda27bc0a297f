"""Shaping of venue data (entries, room status, daily totals) into card lines."""

from .entry_card import RankedEntry, build_entry_lines, group_names, rank_entries, top_entries
from .room_card import build_room_lines, flatten_detail, room_info_display, safe_parse_json
from .today_card import build_today_lines

__all__ = [
    "RankedEntry",
    "build_entry_lines",
    "group_names",
    "rank_entries",
    "top_entries",
    "build_room_lines",
    "flatten_detail",
    "room_info_display",
    "safe_parse_json",
    "build_today_lines",
]
