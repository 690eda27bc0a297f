"""
TextAlignmentEngine: horizontal anchoring of card lines.

Supported alignments:
- start: line begins at the text start column (default)
- center: line is centered on the canvas midpoint
- end: line ends at the right padding edge
"""

from typing import Optional

# SVG text-anchor value for each normalized alignment
TEXT_ANCHORS = {
    "start": "start",
    "center": "middle",
    "end": "end",
}


class TextAlignmentEngine:
    """
    Computes the anchor X position of a line from its alignment.
    """

    @staticmethod
    def normalize(alignment: Optional[str]) -> str:
        """
        Normalizes alignment aliases.

        Args:
            alignment: Raw alignment ("start", "center", "middle", "end", "left", "right", ...)

        Returns:
            "start", "center" or "end"
        """
        if not alignment or not isinstance(alignment, str):
            return "start"

        alignment = alignment.strip().lower()
        if alignment in ("center", "middle", "centre", "c"):
            return "center"
        elif alignment in ("end", "right", "r"):
            return "end"
        else:
            return "start"

    @staticmethod
    def calculate_x(
        canvas_width: float,
        padding: float,
        text_start_x: float,
        alignment: str = "start",
        explicit_x: Optional[float] = None,
    ) -> float:
        """
        Calculates the anchor X for a line.

        Args:
            canvas_width: Width of the whole canvas
            padding: Card padding
            text_start_x: Left text column (clears the notepad margin)
            alignment: Normalized alignment
            explicit_x: Caller-supplied position, wins over alignment

        Returns:
            X coordinate of the text anchor
        """
        if explicit_x is not None:
            return explicit_x

        if alignment == "center":
            return canvas_width / 2
        elif alignment == "end":
            return canvas_width - padding
        return text_start_x

    @staticmethod
    def text_anchor(alignment: str) -> str:
        return TEXT_ANCHORS.get(alignment, "start")
