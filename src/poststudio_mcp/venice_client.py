"""Venice AI chat-completions client.

Venice exposes an OpenAI-compatible ``/chat/completions`` endpoint with
bearer-token auth. Only the non-streaming, single-choice form is used:
one prompt in, one draft out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

VENICE_API_BASE = "https://api.venice.ai/api/v1"
DEFAULT_MAX_TOKENS = 1200
DEFAULT_TIMEOUT_SECONDS = 60.0


class VeniceAPIError(Exception):
    """Raised when the Venice API returns an error or cannot be reached."""

    def __init__(self, status_code: int, detail: str, raw: dict | None = None):
        self.status_code = status_code
        self.detail = detail
        self.raw = raw or {}
        super().__init__(f"Venice API {status_code}: {detail}")


@dataclass(frozen=True)
class ChatMessage:
    """One chat turn sent to the model."""

    role: str  # "system" | "user" | "assistant"
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


def _error_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except Exception:
        return {"raw": response.text}
    return body if isinstance(body, dict) else {"raw": body}


class VeniceClient:
    """Async Venice chat-completions client."""

    def __init__(
        self,
        api_key: str,
        base_url: str = VENICE_API_BASE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(
        self,
        messages: list[ChatMessage],
        model: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> dict:
        """Request body for a single non-streaming completion."""
        return {
            "model": model,
            "messages": [m.to_dict() for m in messages],
            "temperature": 0.7,
            "top_p": 0.9,
            "max_tokens": max_tokens,
            "n": 1,
            "stream": False,
            "venice_parameters": {"strip_thinking_response": True},
        }

    async def chat(
        self,
        messages: list[ChatMessage],
        model: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        """Run one chat completion and return the first choice's text.

        Args:
            messages: System/user turns, in order.
            model: Venice model id, e.g. ``mistral-31-24b``.
            max_tokens: Completion budget.

        Returns:
            The message content of the first choice, or "" if the response
            carried none.

        Raises:
            VeniceAPIError: On any non-2xx response, transport failure or
                non-JSON body.
        """
        url = f"{self._base_url}/chat/completions"
        payload = self.build_payload(messages, model, max_tokens)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            raise VeniceAPIError(0, f"Request failed: {exc}") from exc

        if response.status_code == 429:
            raise VeniceAPIError(429, "Rate limited — try again later", _error_body(response))

        if response.status_code in (401, 403):
            body = _error_body(response)
            detail = body.get("error", body.get("detail", "Authentication failed"))
            raise VeniceAPIError(response.status_code, str(detail), body)

        if not 200 <= response.status_code < 300:
            raise VeniceAPIError(
                response.status_code,
                f"Unexpected response: {response.status_code}",
                _error_body(response),
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise VeniceAPIError(
                response.status_code, "Response was not JSON", {"raw": response.text}
            ) from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            logger.warning("Venice response for %s had no message content", model)
            return ""
        return content or ""
