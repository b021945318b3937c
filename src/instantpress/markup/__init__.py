"""Markup serializers for articles and feeds."""

from instantpress.markup.article import ArticleSerializer, serialize_article
from instantpress.markup.feed import FeedSerializer, cdata, encoded_content, serialize_feed
from instantpress.markup.head import render_head
from instantpress.markup.tree import Node, Raw, render

__all__ = [
    # Tree
    "Node",
    "Raw",
    "render",
    # Head
    "render_head",
    # Article
    "ArticleSerializer",
    "serialize_article",
    # Feed
    "FeedSerializer",
    "cdata",
    "encoded_content",
    "serialize_feed",
]
