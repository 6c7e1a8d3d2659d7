"""LinkedIn post drafting via the Venice chat API.

A request names a topic, an audience, a target length and a model size.
The model is asked to mark 2-3 key phrases with ``<b>`` and may also use
markdown ``**bold**``; one reply becomes one ``GeneratedVariant`` with
three renderings of the same draft:

    text          HTML for the editor (markdown bold → <b>, asterisks gone)
    plain         everything unstyled, markup and asterisks stripped
    unicode_bold  <b> phrases rendered in Math Bold, other markup stripped

``plain`` and ``unicode_bold`` intentionally disagree about bold phrases.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from poststudio_mcp.reducer import (
    markdown_bold_to_html,
    reduce_to_styled_text,
    reduce_to_text,
    tighten_bold_tags,
)
from poststudio_mcp.venice_client import ChatMessage, VeniceClient

logger = logging.getLogger(__name__)

MIN_WORDS = 80
MAX_WORDS = 350
DEFAULT_WORDS = 160
DEFAULT_AUDIENCE = "professionals"
DEFAULT_TOPIC = "the topic"


class ModelSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    CREATIVE = "creative"


MODEL_IDS: dict[ModelSize, str] = {
    ModelSize.SMALL: "qwen3-4b",  # fast, 4B params
    ModelSize.MEDIUM: "mistral-31-24b",  # balanced, 24B params
    ModelSize.LARGE: "qwen3-235b",  # highest quality
    ModelSize.CREATIVE: "venice-uncensored",
}


def choose_model(model_size: ModelSize | str | None = None) -> str:
    """Map a model size to a Venice model id (``medium`` when unset)."""
    return MODEL_IDS[ModelSize(model_size or ModelSize.MEDIUM)]


@dataclass
class GenerationRequest:
    """What to write, for whom, and how long."""

    prompt: str = ""
    audience: str | None = None
    ask_ai: bool = True
    model_size: ModelSize = ModelSize.MEDIUM
    words: int = DEFAULT_WORDS

    def __post_init__(self) -> None:
        self.model_size = ModelSize(self.model_size)
        if not MIN_WORDS <= self.words <= MAX_WORDS:
            raise ValueError(
                f"words must be between {MIN_WORDS} and {MAX_WORDS}, got {self.words}."
            )

    @property
    def topic(self) -> str:
        return self.prompt.strip() or DEFAULT_TOPIC

    @property
    def final_audience(self) -> str:
        return (self.audience or "").strip() or DEFAULT_AUDIENCE


@dataclass(frozen=True)
class GeneratedVariant:
    text: str
    plain: str
    unicode_bold: str

    @classmethod
    def from_reply(cls, reply: str) -> GeneratedVariant:
        """Build all three renderings from a raw model reply."""
        raw = reply.strip()
        text = markdown_bold_to_html(raw)
        return cls(
            text=text,
            plain=reduce_to_text(raw),
            unicode_bold=reduce_to_styled_text(tighten_bold_tags(text), block_breaks=True),
        )

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "plain": self.plain, "unicodeBold": self.unicode_bold}


@dataclass
class GenerationResult:
    model: str
    model_size: ModelSize
    words: int
    variants: list[GeneratedVariant] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "variants": [v.to_dict() for v in self.variants],
            "model": self.model,
            "modelSize": self.model_size.value,
            "words": self.words,
        }


def build_messages(topic: str, audience: str, words: int) -> list[ChatMessage]:
    """System + user prompt pair for one post."""
    system = (
        f'You are writing a {words}-word LinkedIn post about "{topic}" for '
        f'"{audience}". Stay focused on this exact topic and audience.'
    )
    user = "\n".join([
        f"Write a LinkedIn post about {topic} specifically for {audience}.",
        "",
        f"- Write exactly {words} words",
        "- Use <b>text</b> for 2-3 key phrases",
        "- Add 3-5 relevant hashtags at the end",
        "- Make it practical and specific to the audience",
    ])
    return [ChatMessage("system", system), ChatMessage("user", user)]


async def generate_post(
    request: GenerationRequest, client: VeniceClient | None
) -> GenerationResult:
    """Draft a post for ``request``.

    When ``ask_ai`` is off and a prompt was supplied, the prompt is the
    user's own text and nothing is generated (empty ``variants``).

    Raises:
        VeniceAPIError: If the model call fails.
    """
    model = choose_model(request.model_size)
    result = GenerationResult(model=model, model_size=request.model_size, words=request.words)

    if not request.ask_ai and request.prompt.strip():
        return result

    messages = build_messages(request.topic, request.final_audience, request.words)
    logger.info("Generating %d-word post with %s", request.words, model)
    reply = await client.chat(messages, model)

    result.variants.append(GeneratedVariant.from_reply(reply))
    return result
