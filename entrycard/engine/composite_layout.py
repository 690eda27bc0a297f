"""
Layout pass for composite text images.

Turns an ordered list of line records into a ``CompositeLayout``: every line
gets resolved metrics, an absolute baseline and an anchor X, and the canvas
is sized so that all lines plus padding fit.

Vertical stacking::

    cursor = padding
    line 0:  cursor += font_size            (its baseline)
    line n:  cursor += gap_before + line_height
    height = cursor + padding
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Union

from .geometry import round_metric
from .layout_options import LayoutOptions
from .layout_primitives import CompositeLayout, Line, LayoutLine
from .text_alignment import TextAlignmentEngine
from .text_metrics import TextMetricsEngine
from ..utils.validators import coerce_text

logger = logging.getLogger(__name__)

OptionsInput = Union[LayoutOptions, Mapping, None]


def normalize_lines(lines: Any) -> List[Line]:
    """
    Normalize caller input into a non-empty list of ``Line`` records.

    A single value (string, bytes, mapping or Line) is treated as a one-element
    list; an empty input becomes one empty-text line so the image is never
    zero-line.
    """
    if lines is None:
        values: List[Any] = []
    elif isinstance(lines, (str, bytes, bytearray, Mapping, Line)):
        values = [lines]
    elif isinstance(lines, Iterable):
        values = list(lines)
    else:
        values = [lines]

    normalized = [Line.coerce(value) for value in values]
    if not normalized:
        normalized.append(Line(text=""))
    return normalized


def resolve_options(options: OptionsInput = None) -> LayoutOptions:
    if isinstance(options, LayoutOptions):
        return options
    return LayoutOptions.from_mapping(options or {})


class CompositeLayoutEngine:
    """
    Computes line positions and canvas size for a composite image.
    """

    def __init__(
        self,
        options: OptionsInput = None,
        metrics: Optional[TextMetricsEngine] = None,
    ) -> None:
        self.options = resolve_options(options)
        self.metrics = metrics or TextMetricsEngine()

    def compute(self, lines: Any) -> CompositeLayout:
        """
        Lay out ``lines`` on a canvas.

        Args:
            lines: Line records, mappings or strings (or a single one of them)

        Returns:
            CompositeLayout with absolute line positions and canvas size
        """
        options = self.options
        normalized = normalize_lines(lines)
        text_start_x = options.text_start_x
        right_padding = options.right_padding

        # Pass 1: metrics, widths and baselines
        resolved = []
        width = max(options.min_width, text_start_x + right_padding)
        cursor = options.padding
        for index, line in enumerate(normalized):
            text = coerce_text(line.text)
            font_size = line.font_size if line.font_size is not None else options.default_font_size
            line_height = line.line_height if line.line_height is not None else options.default_line_height
            gap_before = 0 if index == 0 else (line.gap_before or 0)
            alignment = TextAlignmentEngine.normalize(line.align)

            estimated_width = self.metrics.estimate_width(text, font_size)
            width = max(width, text_start_x + estimated_width + right_padding)
            if line.x is not None and alignment == "start":
                width = max(width, line.x + estimated_width + right_padding)

            if index == 0:
                dy = 0
                cursor = round_metric(cursor + font_size)
            else:
                dy = round_metric(gap_before + line_height)
                cursor = round_metric(cursor + dy)

            resolved.append((line, text, font_size, line_height, gap_before, dy, cursor, alignment, estimated_width))

        height = round_metric(cursor + options.padding)

        # Pass 2: horizontal anchors need the final canvas width
        layout_lines = []
        for index, (line, text, font_size, line_height, gap_before, dy, y, alignment, estimated_width) in enumerate(resolved):
            x = TextAlignmentEngine.calculate_x(
                canvas_width=width,
                padding=options.padding,
                text_start_x=text_start_x,
                alignment=alignment,
                explicit_x=line.x,
            )
            layout_lines.append(
                LayoutLine(
                    index=index,
                    text=text,
                    font_size=font_size,
                    font_weight=line.font_weight or "normal",
                    line_height=line_height,
                    gap_before=gap_before,
                    dy=dy,
                    x=round_metric(x),
                    y=y,
                    alignment=alignment,
                    text_anchor=TextAlignmentEngine.text_anchor(alignment),
                    estimated_width=estimated_width,
                    fill=line.fill,
                )
            )

        logger.debug(
            "Composite layout: %d line(s), canvas %sx%s (%s)",
            len(layout_lines), width, height, options.background_type,
        )
        return CompositeLayout(
            lines=tuple(layout_lines),
            width=round_metric(width),
            height=height,
            text_start_x=text_start_x,
            right_padding=right_padding,
            options=options,
        )


def compute_composite_layout(lines: Any, options: OptionsInput = None) -> CompositeLayout:
    """Compute the layout of ``lines`` with ``options`` (a LayoutOptions or a mapping)."""
    return CompositeLayoutEngine(options).compute(lines)
