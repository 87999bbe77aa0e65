"""Tests for skriva.ui.colors – palette and color helpers."""

from __future__ import annotations

import pytest

from skriva.ui.colors import TraceColors, blend_hex, outline_hex, rainbow_hex


# ===========================================================================
# TraceColors – constants exist
# ===========================================================================

class TestTraceColors:
    def test_background_is_hex(self):
        assert TraceColors.BG_TOP.startswith("#")
        assert len(TraceColors.BG_BOTTOM) == 7

    def test_guides_carry_alpha(self):
        assert len(TraceColors.GUIDE_LINE) == 9
        assert len(TraceColors.GUIDE_MIDDLE) == 9


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint_rounds(self):
        assert blend_hex("#000000", "#FFFFFF", 0.5) == "#808080"

    def test_lowercase_input(self):
        assert blend_hex("#9e9e9e", "#9e9e9e", 0.3) == "#9E9E9E"

    def test_alpha_channel_blends(self):
        assert blend_hex("#00000000", "#FF0000FF", 1.0) == "#FF0000FF"
        assert blend_hex(TraceColors.GUIDE_LINE, TraceColors.GUIDE_MIDDLE, 0.0) == TraceColors.GUIDE_LINE

    def test_mixed_forms_return_a(self):
        assert blend_hex("#000000", "#FF000000", 0.5) == "#000000"

    def test_t_is_clamped(self):
        assert blend_hex("#000000", "#FFFFFF", 2.0) == "#FFFFFF"
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"

    def test_bad_format_returns_a(self):
        assert blend_hex("red", "#FFFFFF", 0.5) == "red"

    def test_bad_digits_returns_a(self):
        assert blend_hex("#GGGGGG", "#FFFFFF", 0.5) == "#GGGGGG"


# ===========================================================================
# outline_hex
# ===========================================================================

class TestOutlineHex:
    def test_untouched_glyphs(self):
        assert outline_hex(0.0, active=True) == "#9E9E9E"
        assert outline_hex(0.0, active=False) == "#D0D0D0"

    def test_completed_glyph_is_tinted(self):
        done = outline_hex(1.0, active=False)
        assert done == blend_hex(TraceColors.OUTLINE_LOCKED, TraceColors.PRIMARY_LIGHT, 0.5)
        assert done != outline_hex(0.0, active=False)

    def test_tint_grows_with_progress(self):
        half = outline_hex(0.5, active=True)
        assert half == blend_hex(TraceColors.OUTLINE_ACTIVE, TraceColors.PRIMARY_LIGHT, 0.25)


# ===========================================================================
# rainbow_hex
# ===========================================================================

class TestRainbowHex:
    @pytest.mark.parametrize(
        "t, expected",
        [(0.0, "#FF0000"), (1 / 3, "#00FF00"), (2 / 3, "#0000FF")],
    )
    def test_primaries(self, t, expected):
        assert rainbow_hex(t) == expected

    def test_wraps(self):
        assert rainbow_hex(1.0) == rainbow_hex(0.0)
        assert rainbow_hex(-0.25) == rainbow_hex(0.75)

    def test_format(self):
        value = rainbow_hex(0.42)
        assert value.startswith("#") and len(value) == 7
