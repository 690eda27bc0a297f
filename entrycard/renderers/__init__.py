"""SVG renderers for composite cards."""

from .composite_renderer import CompositeRenderer, RenderResult, build_composite_svg, render_composite_svg
from .notepad_renderer import NotepadRenderer
from .render_utils import escape_xml, to_data_uri
from .svg_builder import SvgDocument
from .watermark_renderer import (
    WatermarkOptions,
    WatermarkRenderer,
    WatermarkedCard,
    build_watermarked_svg,
    create_qr_data_uri,
)

__all__ = [
    "CompositeRenderer",
    "RenderResult",
    "build_composite_svg",
    "render_composite_svg",
    "NotepadRenderer",
    "escape_xml",
    "to_data_uri",
    "SvgDocument",
    "WatermarkOptions",
    "WatermarkRenderer",
    "WatermarkedCard",
    "build_watermarked_svg",
    "create_qr_data_uri",
]
