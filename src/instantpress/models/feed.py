"""Feed item model.

A `FeedItem` is the RSS projection of one serialized article.

Example:
    >>> from instantpress.models.feed import FeedItem
    >>> item = FeedItem(title="Hello", guid="abc", link="https://example.com/hello")
    >>> item.authors
    []
"""

from __future__ import annotations

from pydantic import Field

from instantpress.models.base import InstantModel


class FeedItem(InstantModel):
    """One <item> of the feed channel."""

    title: str
    guid: str
    link: str
    description: str = Field(default="", description="Subtitle, or first paragraph")
    authors: list[str] = Field(default_factory=list, description="Author names in document order")
    pub_date: str = Field(default="", description="Latest article timestamp")
    content: str = Field(default="", description="CDATA-wrapped <content:encoded> payload")
