"""
instantpress - Instant Articles markup and RSS feed builder.

instantpress builds an in-memory model of a syndicated article and
serializes it into Instant Articles markup, plus an RSS 2.0 feed that embeds
serialized articles as CDATA payloads.

Key Features:
- Setter-based article model (title, byline, cover media, ads, trackers)
- Shallow content splitter for <p> and <figure> fragments
- Self-closing head rendering with charset / markup version defaults
- RSS feed aggregation with derived GUID, description and pubDate

Quick Start:
    >>> from instantpress import Article, Feed
    >>> article = Article.create("My article title", "https://example.com/my-article")
    >>> article.set_content("<p>My content</p><p>Other paragraph</p>")
    >>> feed = Feed.create("My site", "https://example.com", "News")
    >>> item = feed.add_article(article)
    >>> feed.to_markup().startswith('<rss version="2.0"')
    True

Architecture:
    Models: Article, Figure, Paragraph, FeedItem
    Serializers: ArticleSerializer, FeedSerializer
    Aggregation: Feed
"""

from instantpress.core.config import Settings, get_settings
from instantpress.core.exceptions import (
    InstantPressError,
    MissingCanonicalLinkError,
    MissingTitleError,
    SerializationError,
)
from instantpress.feed import Feed, guid_for
from instantpress.markup.article import ArticleSerializer, serialize_article
from instantpress.markup.feed import FeedSerializer, serialize_feed
from instantpress.models.article import Article, Author, Footer, Header, Meta, Timestamp
from instantpress.models.base import FigureClass, TimestampKind
from instantpress.models.elements import Figure, Frame, Image, Paragraph, Video
from instantpress.models.feed import FeedItem

__version__ = "0.1.0"

__all__ = [
    # Models
    "Article",
    "Author",
    "Footer",
    "Header",
    "Meta",
    "Timestamp",
    "TimestampKind",
    "Figure",
    "FigureClass",
    "Frame",
    "Image",
    "Paragraph",
    "Video",
    "FeedItem",
    # Serializers
    "ArticleSerializer",
    "FeedSerializer",
    "serialize_article",
    "serialize_feed",
    # Feed
    "Feed",
    "guid_for",
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "InstantPressError",
    "SerializationError",
    "MissingTitleError",
    "MissingCanonicalLinkError",
]
