"""Core configuration and exceptions."""

from instantpress.core.config import Settings, get_settings
from instantpress.core.exceptions import (
    InstantPressError,
    MissingCanonicalLinkError,
    MissingTitleError,
    SerializationError,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "InstantPressError",
    "SerializationError",
    "MissingTitleError",
    "MissingCanonicalLinkError",
]
