"""Tests for LayoutOptions."""

import pytest

from entrycard.engine.layout_options import BACKGROUND_NOTEPAD, DEFAULT_FONT_FAMILY, LayoutOptions


class TestLayoutOptions:
    """Test suite for LayoutOptions defaults and coercion."""

    def test_defaults(self):
        """Test the default option values."""
        options = LayoutOptions()

        assert options.default_font_size == 24
        assert options.default_line_height == pytest.approx(33.6)
        assert options.padding == 24
        assert options.background == "#ffffff"
        assert options.text_color == "#111111"
        assert options.font_family == DEFAULT_FONT_FAMILY
        assert options.border_radius == 24
        assert options.min_width == 480
        assert options.background_type == "plain"
        assert not options.is_notepad

    def test_dependent_defaults(self):
        """Test defaults derived from other fields."""
        options = LayoutOptions(default_font_size=30, padding=40)

        assert options.default_line_height == 42
        assert options.notepad_line_spacing == 42
        assert options.notepad_hole_offset_x == 20

    def test_explicit_line_height_kept(self):
        """Test that an explicit line height is not recomputed."""
        options = LayoutOptions(default_font_size=30, default_line_height=50)

        assert options.default_line_height == 50

    def test_text_start_plain(self):
        """Test that plain cards start text at the padding."""
        assert LayoutOptions(padding=10).text_start_x == 10

    def test_text_start_notepad(self):
        """Test that notepad cards start text after margin and indent."""
        options = LayoutOptions(background_type="Notepad")

        assert options.is_notepad
        assert options.text_start_x == 24 + 68 + 16
        assert options.notepad_margin_x == 92
        assert options.right_padding == 24

    def test_from_mapping_camel_case(self):
        """Test camelCase keys map onto fields."""
        options = LayoutOptions.from_mapping({
            "defaultFontSize": "20",
            "minWidth": 600,
            "backgroundType": "notepad",
            "notepadLineColor": "#000000",
        })

        assert options.default_font_size == 20
        assert options.default_line_height == 28
        assert options.min_width == 600
        assert options.background_type == BACKGROUND_NOTEPAD
        assert options.notepad_line_color == "#000000"

    def test_from_mapping_unknown_keys_go_to_extra(self):
        """Test that unknown keys are kept, not rejected."""
        options = LayoutOptions.from_mapping({"shadow": True, "padding": 8})

        assert options.padding == 8
        assert options.extra == {"shadow": True}

    def test_from_mapping_overrides(self):
        """Test that keyword overrides win over mapping values."""
        options = LayoutOptions.from_mapping({"padding": 8}, padding=12)

        assert options.padding == 12

    def test_invalid_values_use_defaults(self):
        """Test that invalid numbers and blank strings fall back to defaults."""
        options = LayoutOptions(padding="wide", min_width=float("inf"), background="  ")

        assert options.padding == 24
        assert options.min_width == 480
        assert options.background == "#ffffff"

    def test_with_overrides(self):
        """Test that with_overrides returns a modified copy."""
        options = LayoutOptions()
        notepad = options.with_overrides(background_type=BACKGROUND_NOTEPAD)

        assert notepad.is_notepad
        assert not options.is_notepad
        assert notepad.default_line_height == options.default_line_height
