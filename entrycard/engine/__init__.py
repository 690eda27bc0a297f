"""
Layout engine for composite text images.

Normalizes line records, estimates text extents and computes the canvas
geometry consumed by the SVG renderers.
"""

from .composite_layout import CompositeLayoutEngine, compute_composite_layout, normalize_lines
from .geometry import Rect, Size
from .layout_options import LayoutOptions
from .layout_primitives import CompositeLayout, LayoutLine, Line
from .text_alignment import TextAlignmentEngine
from .text_metrics import TextMetricsEngine, estimate_text_width

__all__ = [
    "CompositeLayoutEngine",
    "compute_composite_layout",
    "normalize_lines",
    "Rect",
    "Size",
    "LayoutOptions",
    "CompositeLayout",
    "LayoutLine",
    "Line",
    "TextAlignmentEngine",
    "TextMetricsEngine",
    "estimate_text_width",
]
