"""Base models and shared vocabulary.

This module provides the pydantic base model and the fixed Instant Articles
vocabulary used throughout instantpress.

Example:
    >>> from instantpress.models.base import FigureClass, TimestampKind
    >>> FigureClass.AD.value
    'op-ad'
    >>> TimestampKind.PUBLISHED.css_class
    'op-published'
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

# Root <html prefix="..."> attribute identifying the target vocabulary
NAMESPACE_PREFIX = "op: http://media.facebook.com/op#"

KICKER_CLASS = "op-kicker"
MARKUP_VERSION_PROPERTY = "op:markup_version"
ARTICLE_STYLE_PROPERTY = "fb:article_style"
AUTOMATIC_AD_PROPERTY = "fb:use_automatic_ad_placement"

# Machine-readable <time datetime="..."> format, second precision, UTC
MACHINE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Fixed output defaults, used when no Settings are passed
CHARSET = "utf-8"
MARKUP_VERSION = "v1.0"
DEFAULT_LANGUAGE = "en"
FEED_LANGUAGE = "en-us"
DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class FigureClass(str, Enum):
    """Reserved figure style classes.

    Example:
        >>> FigureClass.TRACKER.value
        'op-tracker'
    """

    AD = "op-ad"  # Ad slot
    TRACKER = "op-tracker"  # Third-party analytics


class TimestampKind(str, Enum):
    """Kind of header <time> entry."""

    PUBLISHED = "published"
    MODIFIED = "modified"

    @property
    def css_class(self) -> str:
        """Class attribute rendered on the <time> element."""
        return f"op-{self.value}"


class InstantModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )
