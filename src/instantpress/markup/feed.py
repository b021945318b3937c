"""RSS 2.0 feed serializer.

Renders a `Feed` channel with its items. Each item embeds a serialized
article as a CDATA payload inside <content:encoded>.

Example:
    >>> from instantpress.markup.feed import cdata, encoded_content
    >>> cdata("<p>a</p>")
    '<![CDATA[<p>a</p>]]>'
    >>> cdata("x]]>y")
    '<![CDATA[x]]]]><![CDATA[>y]]>'
    >>> encoded_content("<p>a</p>")
    '\\n<content:encoded><![CDATA[\\n<p>a</p>\\n]]></content:encoded>'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from instantpress.core.config import Settings
from instantpress.markup.tree import Node, Raw, format_attrs, render
from instantpress.models.base import FEED_LANGUAGE
from instantpress.models.feed import FeedItem

if TYPE_CHECKING:
    from instantpress.feed import Feed

logger = logging.getLogger(__name__)

RSS_VERSION = "2.0"
CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def cdata(payload: str) -> str:
    """Wrap payload in a CDATA section, splitting any embedded ``]]>``."""
    return f"<![CDATA[{payload.replace(']]>', ']]]]><![CDATA[>')}]]>"


def encoded_content(markup: str) -> str:
    """Build the <content:encoded> payload block for an item."""
    payload = "\n" + markup + "\n"
    return f"\n<content:encoded>{cdata(payload)}</content:encoded>"


class FeedSerializer:
    """Serialize feeds to RSS 2.0 markup.

    Args:
        settings: Override for the default channel language.
        xml_declaration: Prefix output with an XML declaration.
    """

    def __init__(self, settings: Settings | None = None, *, xml_declaration: bool = False) -> None:
        self.default_language = settings.feed_language if settings is not None else FEED_LANGUAGE
        self.xml_declaration = xml_declaration

    def render(self, feed: Feed) -> str:
        channel = Node("channel")
        for tag, text in (
            ("title", feed.title),
            ("lastBuildDate", feed.last_build_date),
            ("language", feed.language or self.default_language),
            ("link", feed.link),
            ("description", feed.description),
        ):
            channel.append(Node(tag, children=[text]))
        channel.extend([item_node(item) for item in feed.items])

        logger.debug(f"Serializing feed {feed.link!r} with {len(feed.items)} items")
        rss_attrs = [("version", RSS_VERSION), ("xmlns:content", CONTENT_NAMESPACE)]
        markup = f"<rss{format_attrs(rss_attrs)}>{render(channel)}</rss>"
        if self.xml_declaration:
            markup = f"{XML_DECLARATION}\n{markup}"
        return markup

    def serialize(self, feed: Feed) -> bytes:
        return self.render(feed).encode("utf-8")


def item_node(item: FeedItem) -> Node:
    node = Node("item")
    node.append(Node("title", children=[item.title]))
    node.append(Node("guid", children=[item.guid]))
    node.append(Node("description", children=[item.description]))
    node.append(Node("link", children=[item.link]))
    node.extend([Node("author", children=[name]) for name in item.authors])
    node.append(Node("pubDate", children=[item.pub_date]))
    node.append(Raw(item.content))
    return node


def serialize_feed(feed: Feed, settings: Settings | None = None, *, xml_declaration: bool = False) -> bytes:
    """Serialize a feed to UTF-8 RSS markup."""
    return FeedSerializer(settings, xml_declaration=xml_declaration).serialize(feed)
