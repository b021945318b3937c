"""Feed aggregator.

`Feed` represents an Instant Articles RSS feed. Articles are serialized as
they are added and stored as `FeedItem` projections, in insertion order.

Example:
    >>> from datetime import datetime, timezone
    >>> from instantpress.feed import Feed
    >>> from instantpress.models.article import Article
    >>> feed = Feed.create("My site", "https://example.com", "News from all around the world")
    >>> a = Article.create("Hello", "https://example.com/hello")
    >>> a.set_published(datetime(2024, 1, 15, tzinfo=timezone.utc))
    >>> a.add_paragraph("First paragraph")
    >>> item = feed.add_article(a)
    >>> item.guid  # MD5 of the canonical URL
    '6080d107f05cc6f9d88d22f55d06e1c3'
    >>> item.description, feed.last_build_date
    ('First paragraph', '2024-01-15T00:00:00Z')
"""

from __future__ import annotations

import hashlib
import logging
from datetime import UTC, datetime

from pydantic import Field

from instantpress.core.config import Settings
from instantpress.markup.article import ArticleSerializer
from instantpress.markup.feed import CONTENT_NAMESPACE, RSS_VERSION, FeedSerializer, encoded_content
from instantpress.models.article import Article
from instantpress.models.base import MACHINE_TIME_FORMAT, InstantModel
from instantpress.models.feed import FeedItem

logger = logging.getLogger(__name__)


def guid_for(url: str) -> str:
    """Default item GUID: hex MD5 digest of the canonical URL."""
    return hashlib.md5(url.encode("utf-8"), usedforsecurity=False).hexdigest()


class Feed(InstantModel):
    """An RSS channel of serialized articles."""

    title: str = ""
    link: str = ""
    description: str = ""
    language: str | None = Field(default=None, description="Channel language, 'en-us' when unset")
    last_build_date: str = Field(default="", description="Latest item pubDate")
    items: list[FeedItem] = Field(default_factory=list)

    @classmethod
    def create(cls, title: str, link: str, description: str) -> Feed:
        """Create a feed with its channel headers set."""
        return cls(title=title, link=link, description=description)

    @property
    def version(self) -> str:
        return RSS_VERSION

    @property
    def content_namespace(self) -> str:
        return CONTENT_NAMESPACE

    def set_title(self, title: str) -> None:
        self.title = title

    def set_link(self, link: str) -> None:
        self.link = link

    def set_description(self, description: str) -> None:
        self.description = description

    def set_language(self, language: str) -> None:
        """Set the channel language. Default is en-us."""
        self.language = language

    def set_last_build_date(self, instant: datetime) -> None:
        """Set the channel build date. Later articles still raise it."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self.last_build_date = instant.astimezone(UTC).strftime(MACHINE_TIME_FORMAT)

    def add_article(self, article: Article, settings: Settings | None = None) -> FeedItem:
        """Add an article. The MD5 checksum of its URL is used as GUID."""
        return self.add_article_with_guid(article, "", settings)

    def add_article_with_guid(self, article: Article, guid: str, settings: Settings | None = None) -> FeedItem:
        """Add an article with an explicit GUID (e.g. a database id).

        Raises:
            MissingTitleError: If the article title is unset. Feed is unchanged.
            MissingCanonicalLinkError: If the canonical link is unset. Feed is unchanged.
        """
        markup = ArticleSerializer(settings).render(article)

        item = FeedItem(
            title=article.header.title,
            guid=guid or guid_for(article.canonical),
            link=article.canonical,
            description=article.header.subtitle or article.first_paragraph(),
            authors=[author.name for author in article.header.authors],
            pub_date=article.latest_timestamp(),
            content=encoded_content(markup),
        )

        if item.pub_date > self.last_build_date:
            self.last_build_date = item.pub_date

        self.items.append(item)
        logger.debug(f"Added feed item {item.guid} ({item.link}), {len(self.items)} items total")
        return item

    def to_markup(self, settings: Settings | None = None, *, xml_declaration: bool = False) -> str:
        return FeedSerializer(settings, xml_declaration=xml_declaration).render(self)

    def to_bytes(self, settings: Settings | None = None, *, xml_declaration: bool = False) -> bytes:
        return self.to_markup(settings, xml_declaration=xml_declaration).encode("utf-8")
