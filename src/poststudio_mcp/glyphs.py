"""ASCII → Unicode stylistic variant mapper.

LinkedIn (like X) strips markup from posts, so emphasis has to travel as
ordinary characters borrowed from other Unicode blocks:

    bold          → Math Bold                    (U+1D400 block)
    sansBold      → Math Sans-Serif Bold         (U+1D5D4 block)
    mono          → Math Monospace               (U+1D670 block)
    doubleStruck  → Math Double-Struck           (U+1D538 block)
    fullwidth     → Halfwidth and Fullwidth Forms (U+FF21 block)
    circled       → Enclosed Alphanumerics       (U+24B6 block)
    smallCaps     → assorted IPA / phonetic letters (lookup table)

Styling is one-way: there is no decoder back to ASCII.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleVariant(str, Enum):
    """Selectable glyph styles. Values are the editor's wire names."""

    PLAIN = "plain"
    BOLD = "bold"
    SANS_BOLD = "sansBold"
    MONO = "mono"
    DOUBLE_STRUCK = "doubleStruck"
    FULLWIDTH = "fullwidth"
    CIRCLED = "circled"
    SMALL_CAPS = "smallCaps"


@dataclass(frozen=True)
class GlyphRange:
    """Start code points for A, a and 0 in a contiguous styled block."""

    upper: int
    lower: int
    digit: int | None = None


# ---------------------------------------------------------------------------
# Offset tables
# Each block maps ASCII A-Z (65-90), a-z (97-122), 0-9 (48-57) by index.
# Circled has no digit range here; small caps is not contiguous at all.
# ---------------------------------------------------------------------------

GLYPH_RANGES: dict[StyleVariant, GlyphRange] = {
    StyleVariant.BOLD: GlyphRange(0x1D400, 0x1D41A, 0x1D7CE),  # 𝐀 𝐚 𝟎
    StyleVariant.SANS_BOLD: GlyphRange(0x1D5D4, 0x1D5EE, 0x1D7EC),  # 𝗔 𝗮 𝟬
    StyleVariant.MONO: GlyphRange(0x1D670, 0x1D68A, 0x1D7F6),  # 𝙰 𝚊 𝟶
    StyleVariant.DOUBLE_STRUCK: GlyphRange(0x1D538, 0x1D552, 0x1D7D8),  # 𝔸 𝕒 𝟘
    StyleVariant.FULLWIDTH: GlyphRange(0xFF21, 0xFF41, 0xFF10),  # Ａ ａ ０
    StyleVariant.CIRCLED: GlyphRange(0x24B6, 0x24D0),  # Ⓐ ⓐ
}

# Lowercase only. 's' and 'x' stay ASCII: there is no small-caps glyph for
# them in the reference mapping and the published output relies on that.
SMALL_CAPS: dict[str, str] = {
    "a": "ᴀ", "b": "ʙ", "c": "ᴄ", "d": "ᴅ",
    "e": "ᴇ", "f": "ꜰ", "g": "ɢ", "h": "ʜ",
    "i": "ɪ", "j": "ᴊ", "k": "ᴋ", "l": "ʟ",
    "m": "ᴍ", "n": "ɴ", "o": "ᴏ", "p": "ᴘ",
    "q": "ǫ", "r": "ʀ", "s": "s", "t": "ᴛ",
    "u": "ᴜ", "v": "ᴠ", "w": "ᴡ", "x": "x",
    "y": "ʏ", "z": "ᴢ",
}


def _convert_char(ch: str, glyph_range: GlyphRange) -> str:
    """Convert a single ASCII character into the given block."""
    code = ord(ch)
    if 65 <= code <= 90:  # A-Z
        return chr(glyph_range.upper + (code - 65))
    elif 97 <= code <= 122:  # a-z
        return chr(glyph_range.lower + (code - 97))
    elif 48 <= code <= 57 and glyph_range.digit is not None:  # 0-9
        return chr(glyph_range.digit + (code - 48))
    return ch


def map_variant(text: str, variant: StyleVariant | str) -> str:
    """Render ``text`` in a stylistic variant.

    Only basic Latin letters and digits are rewritten; everything else
    (punctuation, whitespace, emoji, already-styled glyphs) passes through.

    Args:
        text: Input text.
        variant: A ``StyleVariant`` or its wire name (``"sansBold"``).

    Returns:
        The styled text. ``plain`` returns the input unchanged.
    """
    variant = StyleVariant(variant)
    if variant is StyleVariant.PLAIN:
        return text
    if variant is StyleVariant.SMALL_CAPS:
        return "".join(SMALL_CAPS.get(ch, ch) for ch in text)
    glyph_range = GLYPH_RANGES[variant]
    return "".join(_convert_char(ch, glyph_range) for ch in text)


def to_bold(text: str) -> str:
    """Convert plain text to Math Bold Unicode."""
    return map_variant(text, StyleVariant.BOLD)


def to_sans_bold(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Unicode."""
    return map_variant(text, StyleVariant.SANS_BOLD)


def to_monospace(text: str) -> str:
    """Convert plain text to Math Monospace Unicode."""
    return map_variant(text, StyleVariant.MONO)


def to_double_struck(text: str) -> str:
    return map_variant(text, StyleVariant.DOUBLE_STRUCK)


def to_fullwidth(text: str) -> str:
    return map_variant(text, StyleVariant.FULLWIDTH)


def to_circled(text: str) -> str:
    return map_variant(text, StyleVariant.CIRCLED)


def to_small_caps(text: str) -> str:
    return map_variant(text, StyleVariant.SMALL_CAPS)
