"""Configuration management for repobot using Pydantic Settings."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bot inputs configurable via environment variables and .env file.

    Environment variables must be prefixed with REPOBOT_.
    Example: REPOBOT_TRIGGER_PHRASE=@mybot
    """

    model_config = SettingsConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REPOBOT_",
        case_sensitive=False,
        extra="ignore",
    )

    TRIGGER_PHRASE: str = Field(
        default="@claude",
        description="Phrase that activates tag mode when found in a comment.",
    )

    PROMPT: str = Field(
        default="",
        description="Direct instruction for the bot. When set, agent mode always runs.",
    )

    # --- Logging ---

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level name for repobot loggers.",
    )

    LOG_FILE: Path | None = Field(
        default=None,
        description="Optional JSONL log file.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level


# Global settings instance
settings = Settings()
