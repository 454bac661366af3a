"""Application configuration via pydantic-settings."""

import json
from functools import lru_cache
from typing import Annotated

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Slash command
    slash_command_tokens: Annotated[list[str], NoDecode] = []

    # imgflip
    imgflip_username: str = ""
    imgflip_password: SecretStr = SecretStr("")
    imgflip_api_url: str = "https://api.imgflip.com/caption_image"
    imgflip_timeout: float = 30.0

    # Callback delivery
    callback_timeout: float = 10.0

    # App
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    @field_validator("slash_command_tokens", mode="before")
    @classmethod
    def _split_tokens(cls, value: object) -> object:
        """Accept a JSON list or a comma-separated string of tokens."""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [token for token in value.split(",") if token]
        return value

    def accepted_tokens(self) -> tuple[str, ...]:
        """Return the configured slash command tokens as an immutable tuple.

        Raises ValueError when no token is configured: a hook without tokens
        would reject every request.
        """
        tokens = tuple(token for token in self.slash_command_tokens if token)
        if not tokens:
            raise ValueError("At least one SLASH_COMMAND_TOKENS entry is required")
        return tokens


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
