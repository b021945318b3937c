"""Pydantic models for instantpress."""

from instantpress.models.article import Article, Author, Footer, Header, Meta, Timestamp
from instantpress.models.base import FigureClass, InstantModel, TimestampKind
from instantpress.models.content import parse_figure, split_content
from instantpress.models.elements import (
    ContentElement,
    Figure,
    Frame,
    Image,
    Paragraph,
    Video,
    ad_figure,
    tracker_figure,
)
from instantpress.models.feed import FeedItem

__all__ = [
    # Base
    "InstantModel",
    "FigureClass",
    "TimestampKind",
    # Elements
    "ContentElement",
    "Figure",
    "Frame",
    "Image",
    "Paragraph",
    "Video",
    "ad_figure",
    "tracker_figure",
    # Content splitting
    "parse_figure",
    "split_content",
    # Article
    "Article",
    "Author",
    "Footer",
    "Header",
    "Meta",
    "Timestamp",
    # Feed
    "FeedItem",
]
