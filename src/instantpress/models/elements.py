"""Article body elements.

Content is an ordered sequence of two element kinds:

- `Paragraph`: trusted raw markup rendered inside <p>
- `Figure`: one media block (`Image`, `Frame` or `Video`) with optional caption

Both unions are discriminated on the ``kind`` field, so a JSON description of
an article validates straight into the right types.

Example:
    >>> from instantpress.models.elements import Figure, Image
    >>> fig = Figure(media=Image(src="https://example.com/a.jpg"), caption="A")
    >>> fig.media.kind
    'image'
    >>> fig.is_ad
    False
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from instantpress.models.base import FigureClass, InstantModel


class Image(InstantModel):
    """<img src="..."> media."""

    kind: Literal["image"] = "image"
    src: str = Field(..., description="Image URL")


class Frame(InstantModel):
    """<iframe> media used for embeds, ads and trackers.

    ``code`` is trusted inline markup written verbatim inside the frame.

    Example:
        >>> from instantpress.models.elements import Frame
        >>> Frame(code="<script>track()</script>").src
        ''
    """

    kind: Literal["frame"] = "frame"
    src: str = ""
    width: str = ""
    height: str = ""
    style: str = ""
    hidden: str = ""
    code: str = Field(default="", description="Inline markup rendered inside the iframe")


class Video(InstantModel):
    """<video><source src="..." type="..."></video> media."""

    kind: Literal["video"] = "video"
    src: str = Field(..., description="Video URL")
    mime_type: str = Field(default="", description="Source type, e.g. video/mp4")


Media = Annotated[Image | Frame | Video, Field(discriminator="kind")]


class Figure(InstantModel):
    """A <figure> content element."""

    kind: Literal["figure"] = "figure"
    media: Media
    caption: str = ""
    style_class: str = Field(default="", description="Figure class attribute (op-ad, op-tracker, ...)")

    @property
    def is_ad(self) -> bool:
        return self.style_class == FigureClass.AD.value

    @property
    def is_tracker(self) -> bool:
        return self.style_class == FigureClass.TRACKER.value


class Paragraph(InstantModel):
    """A <p> content element holding raw inner markup.

    Example:
        >>> from instantpress.models.elements import Paragraph
        >>> Paragraph(markup="Hello <b>world</b>").markup
        'Hello <b>world</b>'
    """

    kind: Literal["paragraph"] = "paragraph"
    markup: str


ContentElement = Annotated[Paragraph | Figure, Field(discriminator="kind")]


def ad_figure(src: str, width: int, height: int, style: str = "", code: str = "") -> Figure:
    """Build an op-ad frame figure.

    Example:
        >>> from instantpress.models.elements import ad_figure
        >>> fig = ad_figure("https://ads.example.com/slot", 320, 50)
        >>> fig.media.width, fig.media.height
        ('320', '50')
    """
    return Figure(
        media=Frame(src=src, width=str(width), height=str(height), style=style, code=code),
        style_class=FigureClass.AD.value,
    )


def tracker_figure(*, src: str = "", code: str = "") -> Figure:
    """Build an op-tracker frame figure from a URL or inline code."""
    return Figure(media=Frame(src=src, code=code), style_class=FigureClass.TRACKER.value)
