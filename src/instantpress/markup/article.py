"""Instant Article serializer.

Walks an `Article` and produces Instant Articles markup:

    <!doctype html><html prefix="op: ..." lang="en"><head>
    <link href="..." rel="canonical" />
    <meta charset="utf-8" />
    <meta property="op:markup_version" content="v1.0" /></head><body><article>
    <header>...</header> <p>...</p> <figure>...</figure> ... <footer>...</footer>
    </article></body></html>

The head comes from `instantpress.markup.head`; everything else goes through
the generic tree serializer in `instantpress.markup.tree`.

Example:
    >>> from instantpress.markup.article import serialize_article
    >>> from instantpress.models.article import Article
    >>> a = Article.create("Hello", "https://example.com/hello")
    >>> a.add_paragraph("World")
    >>> markup = serialize_article(a).decode()
    >>> markup.startswith('<!doctype html><html prefix="op: http://media.facebook.com/op#" lang="en">')
    True
    >>> "<p>World</p>" in markup
    True
"""

from __future__ import annotations

import logging

from instantpress.core.config import Settings
from instantpress.core.exceptions import MissingCanonicalLinkError, MissingTitleError
from instantpress.markup.head import render_head
from instantpress.markup.tree import Node, Raw, format_attrs, render, text_node
from instantpress.models.article import Article, Author, Footer, Header, Timestamp
from instantpress.models.base import CHARSET, DEFAULT_LANGUAGE, KICKER_CLASS, MARKUP_VERSION
from instantpress.models.elements import ContentElement, Figure, Frame, Image, Paragraph, Video

logger = logging.getLogger(__name__)

DOCTYPE = "<!doctype html>"


class ArticleSerializer:
    """Serialize articles to Instant Articles markup.

    Args:
        settings: Overrides for the default language, charset and markup
            version. Without settings the fixed defaults apply.

    Example:
        >>> from instantpress.markup.article import ArticleSerializer
        >>> from instantpress.core.config import Settings
        >>> serializer = ArticleSerializer(Settings(default_language="de"))
        >>> serializer.default_language
        'de'
    """

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            self.default_language = DEFAULT_LANGUAGE
            self.charset = CHARSET
            self.markup_version = MARKUP_VERSION
        else:
            self.default_language = settings.default_language
            self.charset = settings.charset
            self.markup_version = settings.markup_version

    def render(self, article: Article) -> str:
        """Render an article to a markup string.

        Raises:
            MissingTitleError: If the title is unset.
            MissingCanonicalLinkError: If the canonical link is unset.
        """
        self.validate(article)

        head = render_head(
            article.canonical,
            article.meta,
            charset=self.charset,
            markup_version=self.markup_version,
        )
        body = Node("body", children=[self.article_node(article)])
        html_attrs = [
            ("prefix", article.prefix),
            ("lang", article.language or self.default_language),
        ]

        logger.debug(f"Serializing article {article.canonical} with {len(article.elements)} elements")
        return f"{DOCTYPE}<html{format_attrs(html_attrs)}><head>{head}</head>{render(body)}</html>"

    def serialize(self, article: Article) -> bytes:
        """Render an article to UTF-8 bytes."""
        return self.render(article).encode("utf-8")

    @staticmethod
    def validate(article: Article) -> None:
        """Check the required fields."""
        if not article.header.title:
            raise MissingTitleError()
        if not article.canonical:
            raise MissingCanonicalLinkError()

    # ------------------------------------------------------------------
    # Body tree
    # ------------------------------------------------------------------

    def article_node(self, article: Article) -> Node:
        node = Node("article")
        node.append(header_node(article.header))
        node.extend([element_node(element) for element in article.elements])
        node.append(footer_node(article.footer))
        return node


def header_node(header: Header) -> Node:
    node = Node("header")
    node.append(Node("h1", children=[header.title]))
    node.extend([time_node(t) for t in header.timestamps])
    node.append(text_node("h2", header.subtitle))
    if header.kick:
        node.append(Node("h3", children=[header.kick]).set("class", KICKER_CLASS))
    node.extend([address_node(author) for author in header.authors])
    if header.cover is not None:
        node.append(figure_node(header.cover))
    node.extend([figure_node(slot) for slot in header.ad_slots])
    return node


def time_node(timestamp: Timestamp) -> Node:
    return (
        Node("time", children=[timestamp.display])
        .set("class", timestamp.kind.css_class, required=True)
        .set("datetime", timestamp.datetime, required=True)
    )


def address_node(author: Author) -> Node:
    link = Node("a", children=[author.name]).set("href", author.link)
    return Node("address", children=[link]).append(author.description)


def footer_node(footer: Footer) -> Node:
    node = Node("footer")
    if footer.credits:
        node.append(Node("aside", children=[Raw(footer.credits)]))
    node.append(text_node("small", footer.copyright))
    return node


def element_node(element: ContentElement) -> Node:
    """Render one content element: a paragraph or a figure."""
    match element:
        case Paragraph(markup=markup):
            return Node("p", children=[Raw(markup)])
        case Figure():
            return figure_node(element)
        case _:
            raise TypeError(f"Unknown content element: {type(element).__name__}")


def figure_node(figure: Figure) -> Node:
    node = Node("figure").set("class", figure.style_class)
    node.append(media_node(figure.media))
    node.append(text_node("figcaption", figure.caption))
    return node


def media_node(media: Image | Frame | Video) -> Node:
    """Render the populated member of the figure media union."""
    match media:
        case Image(src=src):
            return Node("img").set("src", src, required=True)
        case Frame():
            return (
                Node("iframe", children=[Raw(media.code)])
                .set("src", media.src)
                .set("height", media.height)
                .set("width", media.width)
                .set("style", media.style)
                .set("hidden", media.hidden)
            )
        case Video(src=src, mime_type=mime_type):
            source = Node("source").set("src", src, required=True).set("type", mime_type, required=True)
            return Node("video", children=[source])
        case _:
            raise TypeError(f"Unknown figure media: {type(media).__name__}")


def serialize_article(article: Article, settings: Settings | None = None) -> bytes:
    """Serialize an article to UTF-8 Instant Articles markup."""
    return ArticleSerializer(settings).serialize(article)
