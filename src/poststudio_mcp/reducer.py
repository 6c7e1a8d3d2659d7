"""HTML fragment → styled plain text reducer.

Model drafts and the editor both hand us small HTML fragments (``<b>``,
``<br>``, ``<p>`` and little else). Two flattenings exist and they are
deliberately different:

    reduce_to_text          bold tags are dropped, text kept unstyled,
                            markdown asterisks stripped, p/div → blank line
    reduce_to_styled_text   text under <b>/<strong> is re-encoded into the
                            Math Bold block; only <br> breaks lines unless
                            block_breaks=True

Both are best-effort: they never raise and return "" when the fragment
cannot be processed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from poststudio_mcp.glyphs import to_bold

logger = logging.getLogger(__name__)

_BOLD_TAGS = frozenset({"b", "strong"})
_BLOCK_TAGS = frozenset({"p", "div"})

_BLANK_RUN = re.compile(r"\n{3,}")
_MARKDOWN_BOLD = re.compile(r"\*\*(.*?)\*\*")
_PADDED_BOLD = re.compile(
    r"<\s*(b|strong)\s*>\s*(.*?)\s*<\s*/\s*\1\s*>", re.IGNORECASE | re.DOTALL
)


@dataclass(frozen=True)
class StyledSpan:
    """A run of text plus whether a <b>/<strong> ancestor covers it."""

    text: str
    bold: bool = False


_LINE_BREAK = StyledSpan("\n")
_BLOCK_BREAK = StyledSpan("\n\n")


def _walk(root: Tag, block_breaks: bool) -> Iterator[StyledSpan]:
    """Depth-first traversal yielding spans with inherited bold state.

    Uses an explicit stack so deeply nested fragments do not hit the
    interpreter recursion limit. Pending block breaks ride the stack as
    ready-made spans.
    """
    stack: list = [(root, False)]
    while stack:
        item = stack.pop()
        if isinstance(item, StyledSpan):
            yield item
            continue

        node, bold = item
        # Comments, doctypes, CDATA and processing instructions carry no text.
        if isinstance(node, PreformattedString):
            continue
        if isinstance(node, NavigableString):
            yield StyledSpan(str(node), bold)
            continue
        if not isinstance(node, Tag):
            continue

        name = (node.name or "").lower()
        if name == "br":
            yield _LINE_BREAK
            continue

        bold = bold or name in _BOLD_TAGS
        if block_breaks and name in _BLOCK_TAGS:
            stack.append(_BLOCK_BREAK)
        stack.extend((child, bold) for child in reversed(node.contents))


def parse_spans(html: str, *, block_breaks: bool = True) -> list[StyledSpan]:
    """Parse an HTML fragment into a flat list of styled spans.

    Unknown tags are transparent. Malformed markup is repaired by the
    ``html.parser`` tree builder (unterminated tags close at end of input).

    Raises whatever the parser raises; callers wanting the total,
    never-failing behaviour should use the ``reduce_*`` functions.
    """
    soup = BeautifulSoup(html.replace("\r", ""), "html.parser")
    return list(_walk(soup, block_breaks))


def _serialize(spans: list[StyledSpan], promote_bold: bool) -> str:
    out = "".join(
        to_bold(span.text) if promote_bold and span.bold else span.text
        for span in spans
    )
    out = _BLANK_RUN.sub("\n\n", out)
    return out.strip()


def _reduce(html: str, *, promote_bold: bool, block_breaks: bool) -> str:
    try:
        spans = parse_spans(html, block_breaks=block_breaks)
    except Exception:
        logger.warning("Could not reduce HTML fragment; returning empty text", exc_info=True)
        return ""
    return _serialize(spans, promote_bold)


def reduce_to_text(html: str) -> str:
    """Flatten an HTML fragment to unstyled plain text.

    Markdown emphasis markers (``*``/``**``) are removed outright and HTML
    bold is dropped, keeping only its text. ``<br>`` becomes a newline and
    each closing ``</p>``/``</div>`` a blank line. Runs of three or more
    newlines collapse to two and the result is stripped.

    Args:
        html: HTML-bearing text, e.g. a raw model reply.

    Returns:
        Plain text, or "" if the fragment could not be processed.
    """
    if not isinstance(html, str):
        return ""
    return _reduce(html.replace("*", ""), promote_bold=False, block_breaks=True)


def reduce_to_styled_text(html: str, *, block_breaks: bool = False) -> str:
    """Flatten an HTML fragment, rendering bold spans in Unicode Math Bold.

    Text under a ``<b>`` or ``<strong>`` ancestor (any depth, any case) is
    mapped through the bold glyph table; other text passes through.
    ``<br>`` becomes a newline.

    Args:
        html: HTML fragment, e.g. the editor's current content.
        block_breaks: Also end each ``</p>``/``</div>`` with a blank line.

    Returns:
        Styled plain text, or "" if the fragment could not be processed.
    """
    if not isinstance(html, str):
        return ""
    return _reduce(html, promote_bold=True, block_breaks=block_breaks)


def markdown_bold_to_html(text: str) -> str:
    """Turn ``**phrase**`` into ``<b>phrase</b>`` and drop stray asterisks."""
    return _MARKDOWN_BOLD.sub(r"<b>\1</b>", text).replace("*", "")


def tighten_bold_tags(html: str) -> str:
    """Drop whitespace just inside ``<b>``/``<strong>`` pairs.

    ``<b> key </b>`` becomes ``<b>key</b>`` so bold promotion does not
    emit padded glyph runs.
    """
    return _PADDED_BOLD.sub(r"<\1>\2</\1>", html)
