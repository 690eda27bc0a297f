"""
LayoutOptions: canvas geometry and decoration settings for composite cards.

All fields have defaults; callers override a subset, either directly or via
``LayoutOptions.from_mapping`` which accepts the camelCase keys used by page
data assemblers (``minWidth``, ``backgroundType``, ...). Fields whose default
depends on another field (``default_line_height``, ``notepad_line_spacing``,
``notepad_hole_offset_x``) are resolved once, at construction.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .geometry import round_metric
from ..utils.validators import coerce_number, coerce_optional_str, snake_case

logger = logging.getLogger(__name__)

BACKGROUND_PLAIN = "plain"
BACKGROUND_NOTEPAD = "notepad"

DEFAULT_FONT_FAMILY = "'Noto Sans KR', 'Apple SD Gothic Neo', sans-serif"
LINE_HEIGHT_RATIO = 1.4

_NUMERIC_FIELDS = (
    "default_font_size",
    "default_line_height",
    "padding",
    "border_radius",
    "border_width",
    "min_width",
    "notepad_margin_offset",
    "notepad_text_indent",
    "notepad_line_spacing",
    "notepad_margin_width",
    "notepad_hole_radius",
    "notepad_hole_spacing",
    "notepad_hole_offset_x",
)

_STRING_FIELDS = (
    "background",
    "text_color",
    "font_family",
    "border_color",
    "notepad_line_color",
    "notepad_margin_color",
)


@dataclass(slots=True)
class LayoutOptions:
    """Configuration bag controlling canvas geometry and decoration."""

    default_font_size: float = 24
    default_line_height: Optional[float] = None  # default_font_size * 1.4
    padding: float = 24
    background: str = "#ffffff"
    text_color: str = "#111111"
    font_family: str = DEFAULT_FONT_FAMILY
    border_radius: float = 24
    border_color: str = "#dddddd"
    border_width: float = 1
    min_width: float = 480
    background_type: str = BACKGROUND_PLAIN

    # Notepad decoration
    notepad_margin_offset: float = 68
    notepad_text_indent: float = 16
    notepad_line_spacing: Optional[float] = None  # default_line_height
    notepad_line_color: str = "#e2e7ff"
    notepad_margin_color: str = "#f16b6f"
    notepad_margin_width: float = 2
    notepad_hole_radius: float = 6
    notepad_hole_spacing: float = 110
    notepad_hole_offset_x: Optional[float] = None  # padding / 2

    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        defaults = _FIELD_DEFAULTS
        for name in _NUMERIC_FIELDS:
            setattr(self, name, coerce_number(getattr(self, name), defaults[name], name))
        for name in _STRING_FIELDS:
            value = coerce_optional_str(getattr(self, name))
            setattr(self, name, value if value is not None else defaults[name])

        if self.default_line_height is None:
            self.default_line_height = round_metric(self.default_font_size * LINE_HEIGHT_RATIO)
        if self.notepad_line_spacing is None:
            self.notepad_line_spacing = self.default_line_height
        if self.notepad_hole_offset_x is None:
            self.notepad_hole_offset_x = self.padding / 2

        self.background_type = str(self.background_type or BACKGROUND_PLAIN).strip().lower()

    @property
    def is_notepad(self) -> bool:
        return self.background_type == BACKGROUND_NOTEPAD

    @property
    def text_start_x(self) -> float:
        """Left edge of the text column; clears the notepad margin strip."""
        if self.is_notepad:
            return self.padding + self.notepad_margin_offset + self.notepad_text_indent
        return self.padding

    @property
    def right_padding(self) -> float:
        return self.padding

    @property
    def notepad_margin_x(self) -> float:
        return self.padding + self.notepad_margin_offset

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "LayoutOptions":
        """
        Build options from a loosely-keyed mapping.

        Keys may be camelCase or snake_case. Unknown keys are kept in
        ``extra`` and logged, never rejected.

        Args:
            data: Mapping of option values
            **overrides: Values applied on top of ``data``

        Returns:
            LayoutOptions instance
        """
        known = {f.name for f in dataclasses.fields(cls)} - {"extra"}
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}

        merged: Dict[str, Any] = dict(data or {})
        merged.update(overrides)
        for raw_key, value in merged.items():
            key = snake_case(str(raw_key))
            if key in known:
                values[key] = value
            else:
                extra[raw_key] = value

        if extra:
            logger.debug("Ignoring unknown layout options: %s", ", ".join(sorted(map(str, extra))))
        return cls(extra=extra, **values)

    def with_overrides(self, **changes: Any) -> "LayoutOptions":
        """Return a copy with some fields replaced; dependent defaults are not re-derived."""
        return dataclasses.replace(self, **changes)


_FIELD_DEFAULTS = {
    f.name: f.default
    for f in dataclasses.fields(LayoutOptions)
    if f.default is not dataclasses.MISSING
}
