"""Tests for instantpress.models.content - the shallow content splitter."""

from __future__ import annotations

import logging

import pytest

from instantpress.models.content import parse_figure, split_content
from instantpress.models.elements import Figure, Frame, Image, Paragraph, Video


class TestSplitParagraphs:
    """Paragraph splitting."""

    def test_two_paragraphs_in_order(self) -> None:
        """<p>A</p><p>B</p> yields two paragraphs A and B."""
        elements = split_content("<p>A</p><p>B</p>")
        assert [type(e) for e in elements] == [Paragraph, Paragraph]
        assert [e.markup for e in elements] == ["A", "B"]

    def test_plain_text_is_one_paragraph(self) -> None:
        """Input without fragments becomes a single verbatim paragraph."""
        elements = split_content("plain")
        assert elements == [Paragraph(markup="plain")]

    def test_inner_markup_kept(self) -> None:
        """Inline markup inside a paragraph is not escaped or stripped."""
        elements = split_content("<p>Hello <strong>world</strong></p>")
        assert elements[0].markup == "Hello <strong>world</strong>"

    def test_multiline_paragraph(self) -> None:
        """Paragraphs may span lines."""
        elements = split_content("<p>line one\nline two</p>")
        assert elements[0].markup == "line one\nline two"

    def test_text_between_fragments_dropped(self) -> None:
        """Only matched fragments become elements."""
        elements = split_content("intro<p>A</p>between<p>B</p>outro")
        assert [e.markup for e in elements] == ["A", "B"]

    def test_empty_input(self) -> None:
        """Empty input yields no elements, so nothing is rendered."""
        assert split_content("") == []
        assert split_content("  \n") == []


class TestSplitMixed:
    """Paragraphs mixed with figures."""

    def test_paragraphs_and_figure(self) -> None:
        """Figures are parsed in place, malformed nesting is best effort."""
        html = (
            "<p>Plain text</p><figure><iframe>a = 0;</iframe></figure>"
            "<p>Plain <b>text</b><p>Plain text 22</p>"
        )
        elements = split_content(html)

        assert len(elements) == 3
        assert elements[0] == Paragraph(markup="Plain text")
        assert isinstance(elements[1], Figure)
        assert isinstance(elements[1].media, Frame)
        assert elements[1].media.code == "a = 0;"
        assert elements[2] == Paragraph(markup="Plain <b>text</b><p>Plain text 22")

    def test_bad_figure_skipped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unparseable figures are skipped and logged."""
        with caplog.at_level(logging.WARNING, logger="instantpress.models.content"):
            elements = split_content("<p>A</p><figure><b></figure><p>B</p>")

        assert [e.markup for e in elements] == ["A", "B"]
        assert "Skipping unparseable figure" in caplog.text


class TestParseFigure:
    """Figure fragment parsing."""

    def test_image_with_caption_and_class(self) -> None:
        """Unclosed <img> is accepted; class and caption are read."""
        fig = parse_figure('<figure class="wide"><img src="a.jpg"><figcaption>Cap</figcaption></figure>')
        assert fig is not None
        assert fig.media == Image(src="a.jpg")
        assert fig.caption == "Cap"
        assert fig.style_class == "wide"

    def test_self_closed_image(self) -> None:
        """Self-closed <img /> works too."""
        fig = parse_figure('<figure><img src="b.jpg" /></figure>')
        assert fig is not None
        assert fig.media == Image(src="b.jpg")

    def test_video_source(self) -> None:
        """<video><source> becomes Video media."""
        fig = parse_figure('<figure><video><source src="v.mp4" type="video/mp4"></source></video></figure>')
        assert fig is not None
        assert fig.media == Video(src="v.mp4", mime_type="video/mp4")

    def test_iframe_attributes_and_inner_markup(self) -> None:
        """Iframe attributes and child markup are kept."""
        fig = parse_figure(
            '<figure class="op-ad"><iframe src="https://ads/x" width="320" height="50">'
            "<div>slot</div></iframe></figure>"
        )
        assert fig is not None
        assert fig.is_ad
        assert fig.media == Frame(src="https://ads/x", width="320", height="50", code="<div>slot</div>")

    def test_no_media_returns_none(self) -> None:
        """A figure with no media is rejected."""
        assert parse_figure("<figure><figcaption>Only caption</figcaption></figure>") is None

    def test_malformed_returns_none(self) -> None:
        """Not well formed markup is rejected."""
        assert parse_figure("<figure><img src='a.jpg'><b></figure>") is None

    def test_query_string_ampersand(self) -> None:
        """Bare ampersands in attribute values are accepted."""
        elements = split_content(
            '<p>A</p><figure><img src="https://cdn.example.com/a.jpg?w=600&h=400"></figure><p>B</p>'
        )
        assert [type(e) for e in elements] == [Paragraph, Figure, Paragraph]
        assert elements[1].media == Image(src="https://cdn.example.com/a.jpg?w=600&h=400")

    def test_existing_entities_kept(self) -> None:
        """Already escaped ampersands are not escaped twice."""
        fig = parse_figure('<figure><img src="a.jpg?w=1&amp;h=2"><figcaption>Q&#38;A</figcaption></figure>')
        assert fig is not None
        assert fig.media == Image(src="a.jpg?w=1&h=2")
        assert fig.caption == "Q&A"

    def test_uppercase_tags(self) -> None:
        """Tag and attribute names match regardless of case."""
        assert split_content('<figure><IMG src="a.jpg"></figure>') == [Figure(media=Image(src="a.jpg"))]

        fig = parse_figure('<figure CLASS="op-ad"><IFRAME SRC="https://ads/x" WIDTH="300"></IFRAME></figure>')
        assert fig is not None
        assert fig.is_ad
        assert fig.media == Frame(src="https://ads/x", width="300")
