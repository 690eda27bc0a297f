"""
Watermark overlay for composite cards.

A watermark adds a contact block below the card content (phone, link label,
caption), a QR code of the link to the right of that block, a translucent
panel behind both, and optionally a tiled diagonal overlay text across the
whole canvas.
"""

from __future__ import annotations

import dataclasses
import io
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage
from svgwrite.pattern import Pattern

from . import svg_builder as svg
from .composite_renderer import RenderResult, render_composite_svg
from .render_utils import to_data_uri
from ..engine.composite_layout import OptionsInput, compute_composite_layout, normalize_lines, resolve_options
from ..engine.geometry import Rect, round_metric
from ..engine.layout_options import LINE_HEIGHT_RATIO, LayoutOptions
from ..engine.layout_primitives import CompositeLayout, Line
from ..engine.text_metrics import estimate_text_width
from ..exceptions import WatermarkError
from ..utils.cache import Cache
from ..utils.validators import coerce_number, snake_case

logger = logging.getLogger(__name__)

PATTERN_ID = "entrycard-watermark"
PATTERN_FONT_SIZE = 20
PATTERN_ROTATION = -30
PANEL_RADIUS = 16

_qr_cache = Cache(max_size=32)


@dataclass(slots=True)
class WatermarkOptions:
    """Contact details and styling of the watermark block."""

    link_url: str = ""
    phone: str = ""
    link_label: str = ""
    caption: str = ""
    overlay_text: str = ""
    overlay_opacity: float = 0.08
    qr_size: float = 180
    qr_margin: int = 2
    qr_dark_color: str = "#111111"
    qr_light_color: str = "#ffffff"
    qr_data_uri: Optional[str] = None
    gap: float = 22
    phone_font_size: float = 54
    link_font_size: float = 28
    caption_font_size: float = 24
    phone_color: str = "#111111"
    link_color: str = "#1155cc"
    caption_color: str = "#333333"
    background_color: str = "#f5f7ff"
    background_opacity: float = 0.95
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "WatermarkOptions":
        known = {f.name: f for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for raw_key, value in (data or {}).items():
            key = snake_case(str(raw_key))
            if key not in known or key == "extra":
                extra[raw_key] = value
                continue
            default = known[key].default
            if isinstance(default, (int, float)) and not isinstance(default, bool):
                value = coerce_number(value, default, key)
            values[key] = value
        return cls(extra=extra, **values)

    @property
    def has_qr(self) -> bool:
        return bool(self.qr_data_uri or self.link_url) and self.qr_size > 0


@dataclass(frozen=True)
class WatermarkedCard:
    """Everything needed to render a watermarked card."""

    layout: CompositeLayout
    before: Tuple[svg.Fragment, ...]
    after: Tuple[svg.Fragment, ...]
    defs: Tuple[svg.Fragment, ...]
    qr_frame: Optional[Rect] = None
    contact_frame: Optional[Rect] = None

    def render(self) -> RenderResult:
        return render_composite_svg(self.layout, before=self.before, after=self.after, defs=self.defs)


def create_qr_data_uri(
    data: str,
    margin: int = 2,
    dark_color: str = "#111111",
    light_color: str = "#ffffff",
) -> str:
    """
    Encode ``data`` as a QR code PNG and wrap it in a data URI.

    Results are cached per (data, margin, colors).

    Raises:
        WatermarkError: If the QR code cannot be generated
    """
    key = (data, int(margin), dark_color, light_color)
    return _qr_cache.get_or_set(key, lambda: _render_qr_png(data, int(margin), dark_color, light_color))


def _render_qr_png(data: str, margin: int, dark_color: str, light_color: str) -> str:
    try:
        qr = qrcode.QRCode(
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=margin,
            image_factory=PilImage,
        )
        qr.add_data(data)
        qr.make(fit=True)
        image = qr.make_image(fill_color=dark_color, back_color=light_color)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
    except (DataOverflowError, ValueError, OSError) as exc:
        raise WatermarkError("Failed to generate QR code", details=str(exc)) from exc

    logger.debug("Generated QR code for %r (%d bytes)", data, buffer.tell())
    return to_data_uri(buffer.getvalue(), mime_type="image/png")


class WatermarkRenderer:
    """Adds the watermark block to a list of card lines."""

    def __init__(self, watermark: Optional[Any] = None):
        if isinstance(watermark, WatermarkOptions):
            self.watermark = watermark
        else:
            self.watermark = WatermarkOptions.from_mapping(watermark or {})

    def contact_lines(self) -> List[Line]:
        wm = self.watermark
        entries = (
            (wm.phone, wm.phone_font_size, "bold", wm.phone_color),
            (wm.link_label, wm.link_font_size, "normal", wm.link_color),
            (wm.caption, wm.caption_font_size, "normal", wm.caption_color),
        )
        lines = []
        for text, font_size, weight, color in entries:
            if not text:
                continue
            lines.append(
                Line(
                    text=str(text),
                    font_size=font_size,
                    font_weight=weight,
                    line_height=round_metric(font_size * LINE_HEIGHT_RATIO),
                    gap_before=0,
                    fill=color,
                )
            )
        return lines

    def _spaced_contact_lines(self, options: LayoutOptions) -> List[Line]:
        """Contact lines with the leading gap grown until the QR code fits beside them."""
        wm = self.watermark
        lines = self.contact_lines()
        if not lines:
            if not wm.has_qr:
                return []
            lines = [Line(text="", font_size=options.default_font_size, line_height=wm.qr_size)]

        advance = sum(line.line_height for line in lines)
        leading_gap = wm.gap
        if wm.has_qr:
            leading_gap = max(leading_gap, wm.qr_size + wm.gap - advance)
        lines[0] = dataclasses.replace(lines[0], gap_before=round_metric(leading_gap))
        return lines

    def apply(self, lines: Any, options: OptionsInput = None) -> WatermarkedCard:
        """
        Lay out ``lines`` followed by the watermark block.

        Args:
            lines: Card lines (any input accepted by ``compute_composite_layout``)
            options: LayoutOptions or mapping

        Returns:
            WatermarkedCard ready to render
        """
        wm = self.watermark
        options = resolve_options(options)
        body = normalize_lines(lines)
        contact = self._spaced_contact_lines(options)

        if wm.has_qr:
            contact_width = max(
                (estimate_text_width(line.text, line.font_size) for line in contact),
                default=0,
            )
            required = options.text_start_x + contact_width + wm.gap + wm.qr_size + options.right_padding
            if required > options.min_width:
                options = options.with_overrides(min_width=required)

        layout = compute_composite_layout(body + contact, options)

        defs: List[svg.Fragment] = []
        before: List[svg.Fragment] = []
        after: List[svg.Fragment] = []

        if wm.overlay_text:
            defs.append(self._overlay_pattern())
            before.append(
                svg.rect(
                    0, 0, layout.width, layout.height,
                    fill=f"url(#{PATTERN_ID})",
                    opacity=wm.overlay_opacity,
                )
            )

        qr_frame = None
        contact_frame = None
        if contact:
            contact_lines = layout.lines[len(body):]
            first, last = contact_lines[0], contact_lines[-1]
            top = first.y - first.font_size
            if wm.has_qr:
                qr_frame = Rect(
                    x=round_metric(layout.width - options.padding - wm.qr_size),
                    y=round_metric(last.y - wm.qr_size),
                    width=wm.qr_size,
                    height=wm.qr_size,
                )
                top = min(top, qr_frame.y)
            contact_frame = Rect(
                x=options.text_start_x,
                y=round_metric(top),
                width=max(line.estimated_width for line in contact_lines),
                height=round_metric(last.y - top),
            )

            panel_top = round_metric(top - wm.gap / 2)
            before.append(
                svg.rect(
                    options.padding / 2,
                    panel_top,
                    layout.width - options.padding,
                    round_metric(layout.height - options.padding / 2 - panel_top),
                    rx=PANEL_RADIUS,
                    ry=PANEL_RADIUS,
                    fill=wm.background_color,
                    fill_opacity=wm.background_opacity,
                )
            )

        if qr_frame is not None:
            href = wm.qr_data_uri or create_qr_data_uri(
                wm.link_url, wm.qr_margin, wm.qr_dark_color, wm.qr_light_color
            )
            after.append(svg.image(href, qr_frame.x, qr_frame.y, qr_frame.width, qr_frame.height))

        return WatermarkedCard(
            layout=layout,
            before=tuple(before),
            after=tuple(after),
            defs=tuple(defs),
            qr_frame=qr_frame,
            contact_frame=contact_frame,
        )

    def _overlay_pattern(self) -> Pattern:
        wm = self.watermark
        tile_width = estimate_text_width(wm.overlay_text, PATTERN_FONT_SIZE) + 2 * wm.gap
        tile_height = PATTERN_FONT_SIZE * 4
        pattern = svg.pattern(
            PATTERN_ID,
            tile_width,
            tile_height,
            patternUnits="userSpaceOnUse",
            patternTransform=f"rotate({PATTERN_ROTATION})",
        )
        pattern.add(
            svg.text(
                wm.overlay_text,
                x=wm.gap,
                y=tile_height / 2,
                font_size=PATTERN_FONT_SIZE,
            )
        )
        return pattern


def build_watermarked_svg(lines: Any, options: OptionsInput = None, watermark: Optional[Any] = None) -> RenderResult:
    """Lay out ``lines`` with a watermark block and render the card."""
    return WatermarkRenderer(watermark).apply(lines, options).render()
