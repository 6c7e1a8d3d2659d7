"""poststudio-mcp settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """PostStudio MCP server settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Venice chat-completions API (post generation)
    venice_api_key: str | None = None
    venice_api_base: str = "https://api.venice.ai/api/v1"
    venice_timeout_seconds: float = 60.0

    # Generation defaults (used when a tool call omits them)
    default_model_size: str = "medium"
    default_words: int = 160
    default_audience: str = "professionals"
