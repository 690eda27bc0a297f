"""
Data structures shared by the layout pass and the SVG renderer.

``Line`` is what callers hand in, ``LayoutLine`` is the same line after the
layout pass resolved its metrics and position, and ``CompositeLayout`` is the
whole computed canvas. All three are created per render call and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from .geometry import Size
from .layout_options import LayoutOptions
from ..utils.validators import coerce_number, coerce_optional_str, coerce_text, snake_case

###############################################################################
# Input
###############################################################################


@dataclass(frozen=True, slots=True)
class Line:
    """One row of text to render; unset metrics fall back to LayoutOptions."""

    text: str = ""
    font_size: Optional[float] = None
    font_weight: Optional[str] = None
    line_height: Optional[float] = None
    gap_before: float = 0
    fill: Optional[str] = None
    align: Optional[str] = None
    x: Optional[float] = None

    @classmethod
    def coerce(cls, value: Any) -> "Line":
        """
        Turn a caller-supplied value into a Line.

        A bare string becomes ``Line(text=value)``, a mapping is read with
        camelCase or snake_case keys, an existing Line is returned as-is.
        Anything else yields an empty line.
        """
        if isinstance(value, Line):
            return value
        if isinstance(value, str):
            return cls(text=value)
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        return cls(text=coerce_text(value))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Line":
        fields = {snake_case(str(key)): value for key, value in data.items()}
        align = fields.get("align") or fields.get("text_anchor")

        return cls(
            text=coerce_text(fields.get("text")),
            font_size=coerce_number(fields.get("font_size"), None, "font_size"),
            font_weight=coerce_optional_str(fields.get("font_weight")),
            line_height=coerce_number(fields.get("line_height"), None, "line_height"),
            gap_before=coerce_number(fields.get("gap_before"), 0, "gap_before"),
            fill=coerce_optional_str(fields.get("fill")),
            align=coerce_optional_str(align),
            x=coerce_number(fields.get("x"), None, "x"),
        )


###############################################################################
# Layout output
###############################################################################


@dataclass(frozen=True, slots=True)
class LayoutLine:
    """
    A line with resolved metrics and position.

    ``y`` is the absolute baseline. ``dy`` is the advance from the previous
    baseline (0 for the first line); the renderer emits ``y`` for line 0 and
    ``dy`` for the others, so both always describe the same position.
    """

    index: int
    text: str
    font_size: float
    font_weight: str
    line_height: float
    gap_before: float
    dy: float
    x: float
    y: float
    alignment: str
    text_anchor: str
    estimated_width: int
    fill: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CompositeLayout:
    """Computed canvas geometry for one composite image."""

    lines: Tuple[LayoutLine, ...]
    width: float
    height: float
    text_start_x: float
    right_padding: float
    options: LayoutOptions = field(default_factory=LayoutOptions)

    @property
    def is_notepad(self) -> bool:
        return self.options.is_notepad

    @property
    def padding(self) -> float:
        return self.options.padding

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)
