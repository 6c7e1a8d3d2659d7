"""poststudio-mcp — FastMCP server for drafting and restyling social posts.

Drafts LinkedIn posts through Venice AI and restyles text with Unicode
glyph variants (bold, sans bold, monospace, ...) that survive platforms
which strip real formatting.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

mcp = FastMCP("PostStudio")

_STYLE_SAMPLE = "Aa 123"


# ---------------------------------------------------------------------------
# Settings singleton
# ---------------------------------------------------------------------------

_settings = None


def get_settings():
    """Get or create the Settings singleton."""
    global _settings
    if _settings is not None:
        return _settings
    from poststudio_mcp.config import Settings

    _settings = Settings()
    return _settings


def _get_venice_client():
    """Build a VeniceClient from settings. Raises ValueError if unconfigured."""
    from poststudio_mcp.venice_client import VeniceClient

    settings = get_settings()
    if not settings.venice_api_key:
        raise ValueError("Venice API not configured. Set VENICE_API_KEY.")
    return VeniceClient(
        api_key=settings.venice_api_key,
        base_url=settings.venice_api_base,
        timeout=settings.venice_timeout_seconds,
    )


# ---------------------------------------------------------------------------
# MCP Tools — Service
# ---------------------------------------------------------------------------


async def health() -> dict:
    """Health check — returns service version and status."""
    from poststudio_mcp import __version__

    return {
        "service": "poststudio-mcp",
        "version": __version__,
        "status": "ok",
        "venice_configured": bool(get_settings().venice_api_key),
    }


async def list_styles() -> dict[str, Any]:
    """List the available Unicode style variants with a rendered sample of each."""
    from poststudio_mcp.glyphs import StyleVariant, map_variant

    return {
        "styles": [
            {"name": v.value, "sample": map_variant(_STYLE_SAMPLE, v)}
            for v in StyleVariant
        ]
    }


# ---------------------------------------------------------------------------
# MCP Tools — Text styling
# ---------------------------------------------------------------------------


async def style_text(text: str, variant: str = "sansBold") -> dict[str, Any]:
    """Restyle text with a Unicode glyph variant.

    Letters and digits are swapped for look-alike characters from other
    Unicode blocks; punctuation, spaces and emoji pass through:

        bold          → 𝐛𝐨𝐥𝐝
        sansBold      → 𝘀𝗮𝗻𝘀
        mono          → 𝚖𝚘𝚗𝚘
        doubleStruck  → 𝕕𝕠𝕦𝕓𝕝𝕖
        fullwidth     → ｗｉｄｅ
        circled       → ⓒⓘⓡⓒⓛⓔ
        smallCaps     → sᴍᴀʟʟ ᴄᴀᴘs (lowercase only; s and x stay ASCII)
        plain         → unchanged

    Args:
        text: Text to restyle.
        variant: One of the style names above.

    Returns:
        text_styled: The restyled text.
    """
    from poststudio_mcp.editor import apply_variant

    try:
        styled = apply_variant(text, variant)
    except ValueError:
        return {"error": f"Unknown style variant: {variant!r}. Call list_styles for options."}
    return {"variant": variant, "text_styled": styled}


async def reduce_html(html: str, styled: bool = False) -> dict[str, Any]:
    """Flatten an HTML fragment (editor or model output) to postable text.

    Args:
        html: Fragment using <b>/<strong>, <br>, <p>, <div>.
        styled: False strips bold to plain text (and removes markdown
            asterisks); True renders <b>/<strong> spans in Unicode bold.

    Returns:
        text: The flattened text ("" if the fragment could not be processed).
    """
    from poststudio_mcp.reducer import reduce_to_styled_text, reduce_to_text

    text = reduce_to_styled_text(html) if styled else reduce_to_text(html)
    return {"styled": styled, "text": text}


async def apply_style_to_selection(
    text: str, start: int, end: int, variant: str = "sansBold"
) -> dict[str, Any]:
    """Restyle only the selected range of a draft.

    Args:
        text: The full draft text.
        start: Selection start offset (in characters).
        end: Selection end offset, exclusive.
        variant: Style name (see list_styles).

    Returns:
        text: The draft with the selection replaced.
        caret: Offset just after the replaced range, where the cursor goes.
    """
    from poststudio_mcp.editor import Draft

    draft = Draft(text)
    try:
        caret = draft.apply_to_selection(start, end, variant)
    except ValueError as e:
        return {"error": str(e)}
    return {"text": draft.text, "caret": caret}


# ---------------------------------------------------------------------------
# MCP Tools — Generation
# ---------------------------------------------------------------------------


async def generate_post(
    prompt: str = "",
    audience: str = "",
    words: int | None = None,
    model_size: str | None = None,
    ask_ai: bool = True,
) -> dict[str, Any]:
    """Draft a LinkedIn post with Venice AI.

    The model marks 2-3 key phrases in bold. Each variant comes back as
    editor HTML (text), fully plain text (plain) and text with the bold
    phrases already rendered in Unicode bold (unicodeBold).

    Args:
        prompt: What the post is about. Blank asks for a generic post.
        audience: Who it is for (default "professionals").
        words: Target length, 80-350 words (default 160).
        model_size: small, medium, large or creative (default medium).
        ask_ai: False with a non-empty prompt skips generation.

    Returns:
        variants: List of {text, plain, unicodeBold}.
        model: The Venice model id used.
        modelSize, words: The effective request settings.
    """
    from poststudio_mcp.generator import GenerationRequest
    from poststudio_mcp.generator import generate_post as _generate
    from poststudio_mcp.venice_client import VeniceAPIError

    settings = get_settings()
    try:
        request = GenerationRequest(
            prompt=prompt or "",
            audience=audience or settings.default_audience,
            ask_ai=ask_ai,
            model_size=model_size or settings.default_model_size,
            words=words if words is not None else settings.default_words,
        )
    except ValueError as e:
        return {"error": str(e)}

    needs_model = request.ask_ai or not request.prompt.strip()
    try:
        client = _get_venice_client() if needs_model else None
    except ValueError as e:
        return {"error": str(e)}

    try:
        result = await _generate(request, client)
    except VeniceAPIError as exc:
        logger.warning("Post generation failed: %s", exc)
        return {
            "error": str(exc),
            "status_code": exc.status_code,
            "detail": exc.detail,
        }

    return result.to_dict()


# Registered without rebinding so the module names stay plain coroutines
# that tests and in-process callers can await directly.
for _tool in (
    health,
    list_styles,
    style_text,
    reduce_html,
    apply_style_to_selection,
    generate_post,
):
    mcp.tool()(_tool)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the PostStudio MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
