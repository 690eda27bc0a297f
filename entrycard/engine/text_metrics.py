"""
TextMetricsEngine: estimating the rendered size of a card line.

No text shaping is performed: the width of a line is approximated from the
number of characters and an average glyph width expressed as a fraction of
the font size. The same estimate is used for every glyph, so wide (CJK) and
narrow (Latin) characters are treated alike.
"""

from __future__ import annotations

import math

AVERAGE_GLYPH_WIDTH_RATIO = 0.65


class TextMetricsEngine:
    """
    Estimates text widths with a fixed average-glyph-width heuristic.
    """

    def __init__(self, glyph_width_ratio: float = AVERAGE_GLYPH_WIDTH_RATIO):
        self.glyph_width_ratio = glyph_width_ratio

    def estimate_width(self, text: str, font_size: float) -> int:
        """
        Estimates the width of ``text`` rendered at ``font_size``.

        Args:
            text: Line content (already coerced to ``str``)
            font_size: Font size in pixels

        Returns:
            ``ceil(len(text) * font_size * ratio)``
        """
        if not text:
            return 0
        return math.ceil(len(text) * (font_size * self.glyph_width_ratio))


_default_engine = TextMetricsEngine()


def estimate_text_width(text: str, font_size: float) -> int:
    """Module-level shortcut using the default heuristic."""
    return _default_engine.estimate_width(text, font_size)
