"""instantpress configuration.

Overridable output defaults loaded from environment variables with
INSTANTPRESS_ prefix. The library itself never reads the environment: serializers
and timestamp setters fall back to the fixed defaults in
`instantpress.models.base` unless a `Settings` instance is passed in. The CLI
builds one with `get_settings()`.

Example:
    >>> from instantpress.core.config import get_settings
    >>> settings = get_settings(feed_language="de-de")
    >>> settings.feed_language
    'de-de'
    >>> settings.default_language
    'en'
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from instantpress.models.base import (
    CHARSET,
    DEFAULT_LANGUAGE,
    DISPLAY_TIME_FORMAT,
    FEED_LANGUAGE,
    MARKUP_VERSION,
)


class Settings(BaseSettings):
    """Library settings.

    Loads from environment variables with INSTANTPRESS_ prefix.

    Example:
        >>> from instantpress.core.config import Settings
        >>> s = Settings(markup_version="v1.1")
        >>> s.markup_version
        'v1.1'
        >>> s.charset
        'utf-8'
    """

    model_config = SettingsConfigDict(
        env_prefix="INSTANTPRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Article markup
    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        min_length=1,
        description="Article lang attribute when unset",
    )
    markup_version: str = Field(default=MARKUP_VERSION, description="Synthesized op:markup_version content")
    charset: str = Field(default=CHARSET, description="Synthesized meta charset")
    display_time_format: str = Field(
        default=DISPLAY_TIME_FORMAT,
        description="strftime format for human-readable <time> text",
    )

    # Feed
    feed_language: str = Field(default=FEED_LANGUAGE, min_length=1, description="Channel language when unset")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from instantpress.core.config import get_settings
        >>> s = get_settings(charset="iso-8859-1")
        >>> s.charset
        'iso-8859-1'
    """
    return Settings(**overrides)
