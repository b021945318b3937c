"""Article document model.

`Article` is the in-memory model of one Instant Article. It is built through
setter methods and consumed by `instantpress.markup.article.ArticleSerializer`.
Setters never fail: required fields (title, canonical link) are only checked
when the article is serialized.

Example:
    >>> from datetime import datetime, timezone
    >>> from instantpress.models.article import Article
    >>> a = Article()
    >>> a.set_title("My article title")
    >>> a.set_canonical("https://example.com/my-article")
    >>> a.set_published(datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc))
    >>> a.set_content("<p>First</p><p>Second</p>")
    >>> len(a.elements)
    2
    >>> a.header.timestamps[0].datetime
    '2024-01-15T09:30:00Z'
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import Field

from instantpress.models.base import (
    ARTICLE_STYLE_PROPERTY,
    AUTOMATIC_AD_PROPERTY,
    DISPLAY_TIME_FORMAT,
    MACHINE_TIME_FORMAT,
    NAMESPACE_PREFIX,
    InstantModel,
    TimestampKind,
)
from instantpress.models.content import split_content
from instantpress.models.elements import (
    ContentElement,
    Figure,
    Image,
    Paragraph,
    Video,
    ad_figure,
    tracker_figure,
)

if TYPE_CHECKING:
    from instantpress.core.config import Settings


class Meta(InstantModel):
    """A <meta> head entry. Only non-empty attributes are rendered."""

    charset: str = ""
    property: str = ""
    content: str = ""


class Author(InstantModel):
    """A byline entry rendered as <address>."""

    name: str
    link: str = ""
    description: str = ""


class Timestamp(InstantModel):
    """A header <time> entry.

    Example:
        >>> from instantpress.models.article import Timestamp
        >>> from instantpress.models.base import TimestampKind
        >>> t = Timestamp(kind=TimestampKind.MODIFIED, datetime="2024-01-01T00:00:00Z", display="Jan 1")
        >>> t.kind.css_class
        'op-modified'
    """

    kind: TimestampKind
    datetime: str = Field(..., description="Machine-readable instant, YYYY-MM-DDTHH:MM:SSZ")
    display: str = Field(default="", description="Human-readable rendering")


class Header(InstantModel):
    """Article <header> contents."""

    title: str = ""
    subtitle: str = ""
    kick: str = ""
    authors: list[Author] = Field(default_factory=list)
    timestamps: list[Timestamp] = Field(default_factory=list)
    cover: Figure | None = Field(default=None, description="Cover image or video, last write wins")
    ad_slots: list[Figure] = Field(default_factory=list, description="Automatically placed ads")


class Footer(InstantModel):
    """Article <footer> contents."""

    credits: str = Field(default="", description="Markup rendered in <aside>")
    copyright: str = Field(default="", description="Text rendered in <small>")


class Article(InstantModel):
    """An Instant Article document.

    Example:
        >>> from instantpress.models.article import Article
        >>> a = Article.create("Title", "https://example.com/a", language="fr")
        >>> a.language
        'fr'
        >>> a.prefix
        'op: http://media.facebook.com/op#'
    """

    language: str | None = Field(default=None, description="Two-letter language code, 'en' when unset")
    canonical: str = Field(default="", description="Public web URL of this article")
    meta: list[Meta] = Field(default_factory=list, description="Head metadata, append-only")
    header: Header = Field(default_factory=Header)
    elements: list[ContentElement] = Field(default_factory=list)
    footer: Footer = Field(default_factory=Footer)

    @classmethod
    def create(cls, title: str, canonical: str, *, language: str | None = None) -> Article:
        """Create an article with its mandatory fields set."""
        article = cls(language=language)
        article.set_title(title)
        article.set_canonical(canonical)
        return article

    @property
    def prefix(self) -> str:
        return NAMESPACE_PREFIX

    # ------------------------------------------------------------------
    # Head
    # ------------------------------------------------------------------

    def set_title(self, title: str) -> None:
        """Set the article title. Mandatory."""
        self.header.title = title

    def set_canonical(self, url: str) -> None:
        """Set the public web URL for this article. Mandatory."""
        self.canonical = url

    def set_language(self, language: str) -> None:
        self.language = language

    def set_style(self, style: str) -> None:
        """Set a user defined article style (fb:article_style)."""
        self.add_meta(property=ARTICLE_STYLE_PROPERTY, content=style)

    def add_meta(self, property: str = "", content: str = "", charset: str = "") -> None:
        """Append a raw <meta> entry. Duplicates are kept."""
        self.meta.append(Meta(charset=charset, property=property, content=content))

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def set_subtitle(self, subtitle: str) -> None:
        self.header.subtitle = subtitle

    def set_kick(self, kick: str) -> None:
        """Set the kicker text rendered above the title."""
        self.header.kick = kick

    def add_author(self, name: str, link: str = "", description: str = "") -> None:
        """Append an author. Link and description are optional."""
        self.header.authors.append(Author(name=name, link=link, description=description))

    def set_published(
        self,
        instant: datetime,
        display: str | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        """Append a published timestamp."""
        self._add_timestamp(TimestampKind.PUBLISHED, instant, display, settings)

    def set_modified(
        self,
        instant: datetime,
        display: str | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        """Append a modified timestamp."""
        self._add_timestamp(TimestampKind.MODIFIED, instant, display, settings)

    def _add_timestamp(
        self,
        kind: TimestampKind,
        instant: datetime,
        display: str | None,
        settings: Settings | None,
    ) -> None:
        # Naive datetimes are taken as UTC
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        else:
            instant = instant.astimezone(UTC)

        if display is None:
            time_format = settings.display_time_format if settings is not None else DISPLAY_TIME_FORMAT
            display = instant.strftime(time_format)

        self.header.timestamps.append(
            Timestamp(kind=kind, datetime=instant.strftime(MACHINE_TIME_FORMAT), display=display)
        )

    def set_cover_image(self, url: str, caption: str = "") -> None:
        """Replace the cover with an image. No-op on empty url."""
        if url:
            self.header.cover = Figure(media=Image(src=url), caption=caption)

    def set_cover_video(self, url: str, mime_type: str, caption: str = "") -> None:
        """Replace the cover with a video. No-op on empty url.

        mime_type is the source type, e.g. video/mp4.
        """
        if url:
            self.header.cover = Figure(media=Video(src=url, mime_type=mime_type), caption=caption)

    # ------------------------------------------------------------------
    # Footer
    # ------------------------------------------------------------------

    def set_footer(self, credits: str, copyright: str) -> None:
        """Overwrite footer credits (markup allowed) and copyright line."""
        self.footer = Footer(credits=credits, copyright=copyright)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def set_content(self, html: str) -> None:
        """Append the paragraphs and figures found in html.

        All text should be in <p> ... </p> elements. If none are found the
        entire input is added as one paragraph.
        """
        self.elements.extend(split_content(html))

    def add_paragraph(self, markup: str) -> None:
        """Append a paragraph. Markup is written verbatim."""
        self.elements.append(Paragraph(markup=markup))

    def add_figure(self, figure: Figure) -> None:
        self.elements.append(figure)

    def insert_figure(self, position: int, figure: Figure) -> None:
        """Insert a figure before ``position``, clamped to [0, len(elements)]."""
        position = max(0, min(position, len(self.elements)))
        self.elements.insert(position, figure)

    # ------------------------------------------------------------------
    # Ads and tracking
    # ------------------------------------------------------------------

    def set_automatic_ad(self, src: str, width: int, height: int, style: str = "", code: str = "") -> None:
        """Add a header ad and let the platform place ads automatically."""
        self.header.ad_slots.append(ad_figure(src, width, height, style, code))
        self._switch_automatic_ad(True)

    def insert_ad(
        self,
        position: int,
        src: str,
        width: int,
        height: int,
        style: str = "",
        code: str = "",
    ) -> None:
        """Insert an ad between content elements; disables automatic placement."""
        self.insert_figure(position, ad_figure(src, width, height, style, code))
        self._switch_automatic_ad(False)

    def add_ad(self, src: str, width: int, height: int, style: str = "", code: str = "") -> None:
        """Append an ad to the content; disables automatic placement."""
        self.add_figure(ad_figure(src, width, height, style, code))
        self._switch_automatic_ad(False)

    def _switch_automatic_ad(self, on: bool) -> None:
        value = "true" if on else "false"
        for entry in self.meta:
            if entry.property == AUTOMATIC_AD_PROPERTY:
                entry.content = value
                return
        self.add_meta(property=AUTOMATIC_AD_PROPERTY, content=value)

    def set_tracker_code(self, code: str) -> None:
        """Append a tracker carrying inline analytics code."""
        self.add_figure(tracker_figure(code=code))

    def set_tracker_url(self, url: str) -> None:
        """Append a tracker loaded from url."""
        self.add_figure(tracker_figure(src=url))

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------

    def first_paragraph(self) -> str:
        """Markup of the first paragraph, skipping figures. Empty if none."""
        for element in self.elements:
            if isinstance(element, Paragraph):
                return element.markup
        return ""

    def latest_timestamp(self) -> str:
        """Latest machine timestamp across the header. Empty if none.

        Timestamps are fixed width so string comparison orders them.
        """
        return max((t.datetime for t in self.header.timestamps), default="")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_markup(self, settings: Settings | None = None) -> str:
        """Serialize to Instant Article markup.

        Raises:
            MissingTitleError: If the title is unset.
            MissingCanonicalLinkError: If the canonical link is unset.
        """
        from instantpress.markup.article import ArticleSerializer

        return ArticleSerializer(settings).render(self)

    def to_bytes(self, settings: Settings | None = None) -> bytes:
        return self.to_markup(settings).encode("utf-8")
