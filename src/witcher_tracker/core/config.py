"""Configuration management for the Witcher Tracker interpreter.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides. The
settings only shape the outer REPL and logging; the sentence grammar and
its responses are fixed and not configurable.

Example:
    >>> from witcher_tracker.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.repl.prompt)
    '>> '

Environment Variables:
    WITCHER_TRACKER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    WITCHER_TRACKER_LOG_JSON: Render logs as JSON lines
    WITCHER_TRACKER_LOG_FILE: Optional log file path
    WITCHER_TRACKER_REPL_PROMPT: Prompt printed before each interactive read
    WITCHER_TRACKER_REPL_SHOW_PROMPT: Whether the prompt is printed at all
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from witcher_tracker.core.constants import (
    DEFAULT_PROMPT,
    EXIT_KEYWORD,
    INVALID_RESPONSE,
    MAX_LINE_LENGTH,
)
from witcher_tracker.core.exceptions import ConfigurationError


class ReplSettings(BaseSettings):
    """Configuration for the interactive read-eval-print loop.

    Attributes:
        prompt: Text printed before each interactive read.
        show_prompt: Whether the prompt is printed.
        invalid_response: Answer printed for unrecognized lines.
        exit_keyword: Line that terminates the loop.
        max_line_length: Longest accepted line; longer lines are invalid.
    """

    model_config = SettingsConfigDict(
        env_prefix="WITCHER_TRACKER_REPL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(
        default=DEFAULT_PROMPT,
        description="Prompt printed before each read",
    )
    show_prompt: bool = Field(
        default=True,
        description="Print the prompt in interactive mode",
    )
    invalid_response: str = Field(
        default=INVALID_RESPONSE,
        min_length=1,
        description="Answer for unrecognized lines",
    )
    exit_keyword: str = Field(
        default=EXIT_KEYWORD,
        description="Line that terminates the loop",
    )
    max_line_length: int = Field(
        default=MAX_LINE_LENGTH,
        ge=16,
        le=65536,
        description="Longest accepted input line",
    )

    @model_validator(mode="after")
    def validate_exit_keyword(self) -> "ReplSettings":
        """Ensure the exit keyword is a single alphabetic word.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the keyword is empty or not alphabetic.
        """
        if not self.exit_keyword.isascii() or not self.exit_keyword.isalpha():
            raise ConfigurationError(
                f"exit_keyword must be a single alphabetic word, got {self.exit_keyword!r}",
                config_key="exit_keyword",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        debug: Force DEBUG logging regardless of log_level.
        log_level: Application logging level.
        log_json: Render log events as JSON.
        log_file: Optional log file path.
        repl: REPL settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="WITCHER_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(
        default=False,
        description="Log at DEBUG level",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON lines",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file",
    )

    repl: ReplSettings = Field(default_factory=ReplSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log levels in any case.

        Args:
            value: Raw log level value.

        Returns:
            Upper-cased level when a string was given.
        """
        if isinstance(value, str):
            return value.upper()
        return value

    @property
    def effective_log_level(self) -> str:
        """Level to configure logging with; debug mode wins over log_level."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "ReplSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
