"""Tests for the watermark overlay (contact block, QR code, tiled text)."""

import base64
import io
import xml.etree.ElementTree as ET

import pytest
from PIL import Image

from entrycard.engine.geometry import Rect
from entrycard.exceptions import WatermarkError
from entrycard.renderers import watermark_renderer
from entrycard.renderers.watermark_renderer import (
    PATTERN_ID,
    WatermarkOptions,
    WatermarkRenderer,
    build_watermarked_svg,
    create_qr_data_uri,
)

SVG = "{http://www.w3.org/2000/svg}"
XLINK_HREF = "{http://www.w3.org/1999/xlink}href"
PNG_PREFIX = "data:image/png;base64,"


def decode_png(uri: str) -> Image.Image:
    assert uri.startswith(PNG_PREFIX)
    return Image.open(io.BytesIO(base64.b64decode(uri[len(PNG_PREFIX):])))


class TestWatermarkOptions:
    """Test suite for WatermarkOptions."""

    def test_from_mapping(self, watermark_data):
        options = WatermarkOptions.from_mapping({**watermark_data, "qrSize": "120", "unknown": 1})

        assert options.link_url == "https://example.com/reserve"
        assert options.phone == "010-1234-5678"
        assert options.qr_size == 120
        assert options.extra == {"unknown": 1}
        assert options.has_qr

    def test_no_link_no_qr(self):
        assert not WatermarkOptions(phone="010").has_qr

    def test_zero_size_disables_qr(self):
        assert not WatermarkOptions(link_url="https://example.com", qr_size=0).has_qr


class TestQrDataUri:
    """Test suite for QR code generation."""

    def test_png_data_uri(self):
        """Test that the QR code is a square PNG."""
        image = decode_png(create_qr_data_uri("https://example.com"))

        assert image.format == "PNG"
        assert image.size[0] == image.size[1]
        assert image.size[0] > 0

    def test_results_are_cached(self):
        first = create_qr_data_uri("https://example.com/a")
        second = create_qr_data_uri("https://example.com/a")

        assert first is second
        assert len(watermark_renderer._qr_cache) == 1

    def test_margin_changes_image(self):
        small = decode_png(create_qr_data_uri("https://example.com", margin=0))
        large = decode_png(create_qr_data_uri("https://example.com", margin=4))

        assert large.size[0] - small.size[0] == 80

    def test_oversized_payload_raises(self):
        """Test that data beyond QR capacity raises WatermarkError."""
        with pytest.raises(WatermarkError):
            create_qr_data_uri("x" * 5000)


class TestWatermarkRenderer:
    """Test suite for WatermarkRenderer."""

    @pytest.fixture
    def card(self, watermark_data):
        return WatermarkRenderer(watermark_data).apply(["Title", "Body"])

    def test_contact_lines(self, watermark_data):
        """Test phone, link label and caption lines with their styles."""
        lines = WatermarkRenderer(watermark_data).contact_lines()

        assert [line.text for line in lines] == ["010-1234-5678", "예약하기", "문의 환영"]
        assert [line.font_size for line in lines] == [54, 28, 24]
        assert lines[0].font_weight == "bold"
        assert lines[1].fill == "#1155cc"

    def test_contact_lines_follow_body(self, card):
        texts = [line.text for line in card.layout.lines]

        assert texts == ["Title", "Body", "010-1234-5678", "예약하기", "문의 환영"]

    def test_leading_gap_makes_room_for_qr(self, card):
        """Test that the contact block is at least as tall as the QR code plus gap."""
        phone = card.layout.lines[2]

        assert phone.gap_before == pytest.approx(180 + 22 - (75.6 + 39.2 + 33.6))

    def test_qr_does_not_overlap_contact_text(self, card):
        assert card.qr_frame is not None
        assert card.contact_frame is not None
        assert not card.qr_frame.intersects(card.contact_frame)
        assert card.qr_frame.left >= card.contact_frame.right + 22

    def test_qr_below_body_text(self, card):
        body_baseline = card.layout.lines[1].y

        assert card.qr_frame.top >= body_baseline + 22 - 1e-6

    def test_qr_inside_canvas(self, card):
        canvas = Rect(0, 0, card.layout.width, card.layout.height)

        assert canvas.contains(card.qr_frame)
        assert card.qr_frame.right == pytest.approx(card.layout.width - 24)
        assert card.qr_frame.bottom == pytest.approx(card.layout.lines[-1].y)

    def test_canvas_widened_for_qr(self, card):
        """Test that min width grows so the QR code fits beside the contact block."""
        assert card.layout.width == 24 + 457 + 22 + 180 + 24

    def test_rendered_document(self, card):
        """Test the panel, QR image and contact text in the SVG output."""
        result = card.render()
        root = ET.fromstring(result.svg.encode("utf-8"))

        images = root.findall(f"{SVG}image")
        assert len(images) == 1
        assert images[0].get("width") == "180"
        decode_png(images[0].get(XLINK_HREF))

        panels = [rect for rect in root.findall(f"{SVG}rect") if rect.get("fill") == "#f5f7ff"]
        assert len(panels) == 1
        assert panels[0].get("fill-opacity") == "0.95"

        tspans = root.findall(f"{SVG}text/{SVG}tspan")
        assert tspans[2].get("fill") == "#111111"
        assert tspans[2].get("font-weight") == "bold"

        assert result.svg.index("#f5f7ff") < result.svg.index("<text") < result.svg.index("<image")

    def test_prebuilt_qr_data_uri(self, watermark_data):
        """Test that a supplied QR image is used as-is."""
        uri = "data:image/png;base64,AAAA"
        card = WatermarkRenderer({**watermark_data, "qrDataUri": uri}).apply(["a"])

        assert f'xlink:href="{uri}"' in card.render().svg
        assert len(watermark_renderer._qr_cache) == 0

    def test_qr_without_contact_text(self):
        """Test that a QR code alone still gets a reserved block."""
        card = WatermarkRenderer({"linkUrl": "https://example.com"}).apply(["Title"])

        assert card.qr_frame is not None
        assert card.qr_frame.top >= card.layout.lines[0].y + 22

    def test_no_watermark_content(self):
        """Test that an empty watermark leaves the card unchanged."""
        card = WatermarkRenderer({}).apply(["a", "b"])

        assert [line.text for line in card.layout.lines] == ["a", "b"]
        assert card.qr_frame is None
        assert card.contact_frame is None
        assert card.before == card.after == card.defs == ()

    def test_overlay_text_pattern(self):
        """Test the tiled diagonal overlay text."""
        result = build_watermarked_svg(["a"], None, {"overlayText": "SAMPLE", "phone": "010"})
        root = ET.fromstring(result.svg.encode("utf-8"))

        pattern = root.find(f"{SVG}defs/{SVG}pattern")
        assert pattern.get("id") == PATTERN_ID
        assert pattern.get("patternTransform") == "rotate(-30)"
        assert pattern.find(f"{SVG}text").text == "SAMPLE"
        assert f'fill="url(#{PATTERN_ID})"' in result.svg
        assert 'opacity="0.08"' in result.svg

    def test_watermark_with_notepad(self, watermark_data):
        """Test that the contact block uses the notepad text column."""
        card = WatermarkRenderer(watermark_data).apply(["Title"], {"backgroundType": "notepad"})

        assert card.contact_frame.x == 108
        assert card.layout.width == 108 + 457 + 22 + 180 + 24
        assert not card.qr_frame.intersects(card.contact_frame)
