"""Tests for the ASCII → Unicode glyph variant mapper."""

import string

import pytest

from poststudio_mcp.glyphs import (
    GLYPH_RANGES,
    SMALL_CAPS,
    StyleVariant,
    map_variant,
    to_bold,
    to_circled,
    to_double_struck,
    to_fullwidth,
    to_monospace,
    to_sans_bold,
    to_small_caps,
)

# (upper, lower, digit) start code points, straight from the Unicode charts.
EXPECTED_BASES = {
    StyleVariant.BOLD: (0x1D400, 0x1D41A, 0x1D7CE),
    StyleVariant.SANS_BOLD: (0x1D5D4, 0x1D5EE, 0x1D7EC),
    StyleVariant.MONO: (0x1D670, 0x1D68A, 0x1D7F6),
    StyleVariant.DOUBLE_STRUCK: (0x1D538, 0x1D552, 0x1D7D8),
    StyleVariant.FULLWIDTH: (0xFF21, 0xFF41, 0xFF10),
    StyleVariant.CIRCLED: (0x24B6, 0x24D0, None),
}

CONTIGUOUS = [
    StyleVariant.BOLD,
    StyleVariant.SANS_BOLD,
    StyleVariant.MONO,
    StyleVariant.DOUBLE_STRUCK,
    StyleVariant.FULLWIDTH,
]

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


# ---------------------------------------------------------------------------
# Offset tables
# ---------------------------------------------------------------------------


class TestOffsetTable:
    @pytest.mark.parametrize("variant", list(EXPECTED_BASES))
    def test_table_matches_unicode_charts(self, variant):
        upper, lower, digit = EXPECTED_BASES[variant]
        glyph_range = GLYPH_RANGES[variant]
        assert (glyph_range.upper, glyph_range.lower, glyph_range.digit) == (upper, lower, digit)

    @pytest.mark.parametrize("variant", list(EXPECTED_BASES))
    def test_every_letter_maps_by_index(self, variant):
        upper, lower, _ = EXPECTED_BASES[variant]
        for i, ch in enumerate(string.ascii_uppercase):
            assert map_variant(ch, variant) == chr(upper + i)
        for i, ch in enumerate(string.ascii_lowercase):
            assert map_variant(ch, variant) == chr(lower + i)

    @pytest.mark.parametrize("variant", CONTIGUOUS)
    def test_every_digit_maps_by_index(self, variant):
        _, _, digit = EXPECTED_BASES[variant]
        for i, ch in enumerate(string.digits):
            assert map_variant(ch, variant) == chr(digit + i)

    def test_small_caps_table_is_complete(self):
        assert sorted(SMALL_CAPS) == list(string.ascii_lowercase)


# ---------------------------------------------------------------------------
# map_variant laws
# ---------------------------------------------------------------------------


class TestMapVariant:
    @pytest.mark.parametrize("text", ["", "Hello, World!", "mixed 123 🚀", "𝐇𝐢"])
    def test_plain_is_identity(self, text):
        assert map_variant(text, StyleVariant.PLAIN) == text

    @pytest.mark.parametrize("variant", CONTIGUOUS)
    def test_injective_over_alphanumerics(self, variant):
        outputs = {map_variant(ch, variant) for ch in ALPHANUMERIC}
        assert len(outputs) == len(ALPHANUMERIC)

    @pytest.mark.parametrize("variant", list(StyleVariant))
    def test_non_alphanumerics_pass_through(self, variant):
        text = " .,!?-_()\n\t#@🚀é"
        assert map_variant(text, variant) == text

    @pytest.mark.parametrize("variant", list(StyleVariant))
    def test_empty(self, variant):
        assert map_variant("", variant) == ""

    def test_accepts_wire_name(self):
        assert map_variant("ok", "sansBold") == "𝗼𝗸"

    def test_unknown_wire_name_rejected(self):
        with pytest.raises(ValueError):
            map_variant("ok", "italic")

    def test_idempotent_call(self):
        assert map_variant("Same in", "mono") == map_variant("Same in", "mono")

    def test_supplementary_plane_output(self):
        """Math blocks live above U+FFFF; each glyph is still one str character."""
        result = to_bold("A")
        assert len(result) == 1
        assert ord(result) > 0xFFFF


# ---------------------------------------------------------------------------
# Named converters
# ---------------------------------------------------------------------------


class TestToBold:
    def test_mixed_case_and_digits(self):
        assert to_bold("Hello 2026") == "𝐇𝐞𝐥𝐥𝐨 𝟐𝟎𝟐𝟔"

    def test_punctuation_passthrough(self):
        assert to_bold("Hi!") == "𝐇𝐢!"


class TestToSansBold:
    def test_text(self):
        assert to_sans_bold("Hello 42") == "𝗛𝗲𝗹𝗹𝗼 𝟰𝟮"


class TestToMonospace:
    def test_code(self):
        assert to_monospace("fn(x) = 42") == "𝚏𝚗(𝚡) = 𝟺𝟸"


class TestToDoubleStruck:
    def test_arithmetic_even_across_chart_holes(self):
        """Z lands on the reserved U+1D551 slot; the mapping stays arithmetic."""
        assert to_double_struck("Z9") == chr(0x1D551) + chr(0x1D7E1)


class TestToFullwidth:
    def test_text(self):
        assert to_fullwidth("Ab1!") == "Ａｂ１!"


class TestToCircled:
    def test_letters(self):
        assert to_circled("Ab") == "Ⓐⓑ"

    def test_digits_unchanged(self):
        assert to_circled("5") == "5"
        assert to_circled("Ab5") == "Ⓐⓑ5"


class TestToSmallCaps:
    def test_lowercase(self):
        assert to_small_caps("small caps") == "sᴍᴀʟʟ ᴄᴀᴘs"

    def test_s_and_x_stay_ascii(self):
        assert map_variant("s", StyleVariant.SMALL_CAPS) == "s"
        assert map_variant("x", StyleVariant.SMALL_CAPS) == "x"

    def test_uppercase_and_digits_unchanged(self):
        assert to_small_caps("ABC 123") == "ABC 123"
