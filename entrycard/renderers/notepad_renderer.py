"""
Notepad decoration: ruled lines, a red margin stripe and a column of
binder holes, drawn under the text layer.
"""

from __future__ import annotations

import logging
from typing import List

from svgwrite import base

from . import svg_builder as svg
from ..engine.geometry import round_metric
from ..engine.layout_primitives import CompositeLayout

logger = logging.getLogger(__name__)

RULE_STROKE_WIDTH = 1
HOLE_FILL = "#ffffff"
HOLE_STROKE = "#d0d0d0"
HOLE_TOP_OFFSET = 4


class NotepadRenderer:
    """Renders the notepad decoration for a computed layout."""

    def __init__(self, layout: CompositeLayout):
        self.layout = layout
        self.options = layout.options

    def render(self) -> List[base.BaseElement]:
        """
        Build all decoration elements, in paint order.

        Returns:
            Rule lines, then the margin line, then the holes
        """
        elements: List[base.BaseElement] = []
        elements.extend(self.rule_lines())
        margin = self.margin_line()
        if margin is not None:
            elements.append(margin)
        elements.extend(self.holes())
        return elements

    def rule_lines(self) -> List[base.BaseElement]:
        options = self.options
        spacing = options.notepad_line_spacing
        if spacing is None or spacing <= 0:
            logger.warning("Skipping notepad rules: non-positive line spacing %r", spacing)
            return []

        start_y = round_metric(options.padding + options.default_line_height)
        max_y = self.layout.height - options.padding
        x1 = options.padding
        x2 = self.layout.width - options.padding

        rules = []
        step = 0
        y = start_y
        while y <= max_y:
            rules.append(
                svg.line(
                    x1, y, x2, y,
                    stroke=options.notepad_line_color,
                    stroke_width=RULE_STROKE_WIDTH,
                )
            )
            step += 1
            # y from the step index, not a running sum
            y = round_metric(start_y + step * spacing)
        return rules

    def margin_line(self):
        options = self.options
        if not options.notepad_margin_width or options.notepad_margin_width <= 0:
            return None

        margin_x = options.notepad_margin_x
        return svg.line(
            margin_x, options.padding, margin_x, self.layout.height - options.padding,
            stroke=options.notepad_margin_color,
            stroke_width=options.notepad_margin_width,
        )

    def holes(self) -> List[base.BaseElement]:
        options = self.options
        spacing = options.notepad_hole_spacing
        if spacing is None or spacing <= 0:
            logger.warning("Skipping notepad holes: non-positive hole spacing %r", spacing)
            return []

        start_y = options.padding + options.notepad_hole_radius + HOLE_TOP_OFFSET
        limit = self.layout.height - options.padding

        holes = []
        step = 0
        y = start_y
        while y < limit:
            holes.append(
                svg.circle(
                    options.notepad_hole_offset_x, y, options.notepad_hole_radius,
                    fill=HOLE_FILL,
                    stroke=HOLE_STROKE,
                    stroke_width=1,
                )
            )
            step += 1
            y = round_metric(start_y + step * spacing)
        return holes
