"""Selection styling and a minimal in-memory draft buffer.

The browser editor replaced the user's selection with a styled copy and
parked the caret right after it. Here the same steps work on plain
strings and integer offsets, so any front end (or an MCP client) can drive
them without a DOM.
"""

from __future__ import annotations

import logging

from poststudio_mcp.glyphs import StyleVariant, map_variant
from poststudio_mcp.reducer import reduce_to_text

logger = logging.getLogger(__name__)


def apply_variant(selected_text: str, variant: StyleVariant | str) -> str:
    """Return the replacement for a selection rendered in ``variant``.

    Raises:
        ValueError: If ``variant`` is not a known style name.
    """
    return map_variant(selected_text, StyleVariant(variant))


class Draft:
    """Plain-text post buffer with selection styling and one snapshot slot."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self._snapshot = ""

    @classmethod
    def from_html(cls, html: str) -> Draft:
        """Seed a draft from editor/model HTML."""
        return cls(reduce_to_text(html))

    def apply_to_selection(
        self, start: int, end: int, variant: StyleVariant | str
    ) -> int:
        """Restyle ``text[start:end]`` in place.

        Args:
            start: Selection start offset (code points).
            end: Selection end offset, exclusive.
            variant: Style to apply.

        Returns:
            The caret offset immediately after the inserted replacement.
            An empty selection changes nothing and returns ``end``.

        Raises:
            ValueError: If the bounds fall outside the text, are inverted,
                or the variant is unknown.
        """
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(
                f"Selection {start}:{end} is outside the draft (length {len(self.text)})."
            )
        variant = StyleVariant(variant)
        if start == end:
            return end

        replacement = apply_variant(self.text[start:end], variant)
        self.text = self.text[:start] + replacement + self.text[end:]
        logger.debug("Applied %s to %d characters", variant.value, end - start)
        return start + len(replacement)

    def snapshot(self) -> None:
        """Remember the current text so it can be restored with ``revert``."""
        self._snapshot = self.text

    @property
    def has_snapshot(self) -> bool:
        return bool(self._snapshot)

    def revert(self) -> bool:
        """Restore the last snapshot. Returns False if none (or an empty one) was taken."""
        if not self._snapshot:
            return False
        self.text = self._snapshot
        return True

    def plain_text(self) -> str:
        """The copyable text of the draft."""
        return self.text
