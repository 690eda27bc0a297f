"""
Composite SVG renderer.

Serializes a ``CompositeLayout`` into a standalone SVG document: a rounded
background card, the optional notepad decoration, caller overlays and a
single ``<text>`` block with one ``<tspan>`` per line.

Paint order::

    background -> decoration -> ``before`` overlays -> text -> ``after`` overlays
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from svgwrite import shapes
from svgwrite import text as svgtext

from . import svg_builder as svg
from .notepad_renderer import NotepadRenderer
from .render_utils import to_data_uri
from ..engine.composite_layout import OptionsInput, compute_composite_layout
from ..engine.layout_primitives import CompositeLayout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    """Serialized SVG document plus its declared pixel size."""

    svg: str
    width: int
    height: int

    def to_data_uri(self) -> str:
        return to_data_uri(self.svg)


class CompositeRenderer:
    """Renders a computed layout as an SVG document."""

    def __init__(self, layout: CompositeLayout):
        self.layout = layout
        self.options = layout.options
        canvas = layout.size.ceil()
        self.width = int(canvas.width)
        self.height = int(canvas.height)

    def render(
        self,
        before: Sequence[svg.Fragment] = (),
        after: Sequence[svg.Fragment] = (),
        defs: Sequence[svg.Fragment] = (),
    ) -> RenderResult:
        """
        Render the layout.

        Args:
            before: Overlay fragments painted between the decoration and the text
            after: Overlay fragments painted on top of the text
            defs: Extra ``<defs>`` content (patterns, gradients, filters)

        Returns:
            RenderResult with the SVG text and integer canvas size
        """
        document = svg.SvgDocument(self.width, self.height)
        document.add_style(
            f"text {{ font-family: {self.options.font_family}; fill: {self.options.text_color}; }}"
        )
        document.add_defs(defs)

        document.add(self.background())
        if self.layout.is_notepad:
            document.extend(NotepadRenderer(self.layout).render())
        document.extend(before)
        document.add(self.text_block())
        document.extend(after)

        output = document.to_string()
        logger.debug("Rendered composite SVG %dx%d (%d bytes)", self.width, self.height, len(output))
        return RenderResult(svg=output, width=self.width, height=self.height)

    def background(self) -> shapes.Rect:
        options = self.options
        return svg.rect(
            0, 0, self.width, self.height,
            rx=options.border_radius,
            ry=options.border_radius,
            fill=options.background,
            stroke=options.border_color,
            stroke_width=options.border_width,
        )

    def text_block(self) -> svgtext.Text:
        options = self.options
        block = svg.text(
            x=self.layout.text_start_x,
            y=options.padding,
            font_size=options.default_font_size,
            xml_space="preserve",
        )
        for line in self.layout.lines:
            block.add(
                svg.tspan(
                    line.text,
                    x=line.x,
                    y=line.y if line.index == 0 else None,
                    dy=line.dy if line.index > 0 else None,
                    font_size=line.font_size,
                    font_weight=line.font_weight,
                    fill=line.fill,
                    text_anchor=line.text_anchor if line.text_anchor != "start" else None,
                )
            )
        return block


def render_composite_svg(
    layout: CompositeLayout,
    before: Sequence[svg.Fragment] = (),
    after: Sequence[svg.Fragment] = (),
    defs: Sequence[svg.Fragment] = (),
) -> RenderResult:
    """Render a computed layout; see ``CompositeRenderer.render``."""
    return CompositeRenderer(layout).render(before=before, after=after, defs=defs)


def build_composite_svg(
    lines: Any,
    options: OptionsInput = None,
    before: Sequence[svg.Fragment] = (),
    after: Sequence[svg.Fragment] = (),
    defs: Sequence[svg.Fragment] = (),
) -> RenderResult:
    """
    Lay out and render ``lines`` in one call.

    Args:
        lines: Line records, mappings or strings (or a single one of them)
        options: LayoutOptions or a camelCase/snake_case mapping
        before: Overlays painted under the text
        after: Overlays painted over the text
        defs: Extra ``<defs>`` content

    Returns:
        RenderResult
    """
    layout = compute_composite_layout(lines, options)
    return render_composite_svg(layout, before=before, after=after, defs=defs)
