"""
entrycard - composite SVG cards for venue entry and room status boards.

This package turns ordered lists of styled text lines into self-contained
SVG images: a rounded card, optional ruled-notebook decoration, auto-sized
to its content.

Main Components:
- Engine: line normalization, text size estimation, layout computation
- Renderers: SVG serialization, notepad decoration, watermark overlay
- Cards: shaping of entry, room status and daily summary data into lines
- Utils: logging setup, input coercion, caching

Quick Start:
    from entrycard import build_composite_svg

    result = build_composite_svg(
        ["Venue 엔트리", {"text": "총 출근인원: 12명", "gapBefore": 18}],
        {"backgroundType": "notepad"},
    )
    result.svg, result.width, result.height
"""

from .version import __version__, __version_info__

from .exceptions import (
    EntryCardError,
    InputError,
    RenderingError,
    WatermarkError,
)

from .engine import (
    CompositeLayout,
    LayoutLine,
    LayoutOptions,
    Line,
    compute_composite_layout,
)

from .renderers import (
    RenderResult,
    WatermarkOptions,
    build_composite_svg,
    build_watermarked_svg,
    render_composite_svg,
    to_data_uri,
)

from .cards import build_entry_lines, build_room_lines, build_today_lines

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # Layout
    "CompositeLayout",
    "LayoutLine",
    "LayoutOptions",
    "Line",
    "compute_composite_layout",

    # Rendering
    "RenderResult",
    "WatermarkOptions",
    "build_composite_svg",
    "build_watermarked_svg",
    "render_composite_svg",
    "to_data_uri",

    # Cards
    "build_entry_lines",
    "build_room_lines",
    "build_today_lines",

    # Exceptions
    "EntryCardError",
    "InputError",
    "RenderingError",
    "WatermarkError",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()
