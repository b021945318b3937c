"""Shallow content splitter.

Turns a chunk of article HTML into typed content elements. This is a
pattern match over top-level ``<p>`` and ``<figure>`` fragments, not an HTML
parser: nested or malformed tags give undefined element boundaries.

Example:
    >>> from instantpress.models.content import split_content
    >>> [e.markup for e in split_content("<p>A</p><p>B</p>")]
    ['A', 'B']
    >>> [e.markup for e in split_content("plain")]
    ['plain']
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from instantpress.models.elements import ContentElement, Figure, Frame, Image, Paragraph, Video

logger = logging.getLogger(__name__)

# Non-greedy: open <p> or <figure ...> up to the first closing </p> or </figure>
CONTENT_PATTERN = re.compile(r"((?:<p>|<figure[^>]*>).*?(?:</p>|</figure>))", re.DOTALL)

# HTML void tags that are not closed, e.g. <img src="a.jpg">
_VOID_TAG_PATTERN = re.compile(r"<(img|source|br)\b([^>]*?)\s*/?>", re.IGNORECASE)
_VOID_CLOSE_PATTERN = re.compile(r"</(?:img|source|br)\s*>", re.IGNORECASE)

# HTML tolerates bare ampersands, e.g. src="a.jpg?w=600&h=400"
_BARE_AMPERSAND_PATTERN = re.compile(r"&(?!#\d+;|#x[0-9a-fA-F]+;|[A-Za-z]\w*;)")


def split_content(html: str) -> list[ContentElement]:
    """Split HTML into paragraphs and figures in document order.

    If no fragment matches, the entire input becomes one paragraph. Empty
    input yields no elements. Figure fragments that cannot be parsed are
    skipped.
    """
    if not html.strip():
        return []

    matches = CONTENT_PATTERN.findall(html)
    if not matches:
        return [Paragraph(markup=html)]

    elements: list[ContentElement] = []
    for fragment in matches:
        if fragment.startswith("<p"):
            elements.append(Paragraph(markup=_strip_wrapper(fragment, "<p>", "</p>")))
            continue
        figure = parse_figure(fragment)
        if figure is None:
            logger.warning(f"Skipping unparseable figure fragment: {fragment[:80]!r}")
            continue
        elements.append(figure)
    return elements


def parse_figure(fragment: str) -> Figure | None:
    """Parse a ``<figure>...</figure>`` fragment into a Figure.

    Returns:
        The figure, or None when the fragment is not well formed or carries
        no image, iframe or video.

    Example:
        >>> from instantpress.models.content import parse_figure
        >>> fig = parse_figure('<figure class="wide"><img src="a.jpg"><figcaption>Cap</figcaption></figure>')
        >>> fig.media.src, fig.caption, fig.style_class
        ('a.jpg', 'Cap', 'wide')
    """
    try:
        root = ET.fromstring(_normalize(fragment))
    except ET.ParseError as e:
        logger.debug(f"Figure fragment is not well formed: {e}")
        return None

    # HTML names are case-insensitive
    for elem in root.iter():
        elem.tag = elem.tag.lower()
        elem.attrib = {name.lower(): value for name, value in elem.attrib.items()}

    if root.tag != "figure":
        return None

    media = _parse_media(root)
    if media is None:
        return None

    caption_elem = root.find("figcaption")
    caption = "".join(caption_elem.itertext()).strip() if caption_elem is not None else ""

    return Figure(media=media, caption=caption, style_class=root.get("class", ""))


def _parse_media(root: ET.Element) -> Image | Frame | Video | None:
    img = root.find("img")
    if img is not None:
        return Image(src=img.get("src", ""))

    iframe = root.find("iframe")
    if iframe is not None:
        return Frame(
            src=iframe.get("src", ""),
            width=iframe.get("width", ""),
            height=iframe.get("height", ""),
            style=iframe.get("style", ""),
            hidden=iframe.get("hidden", ""),
            code=_inner_markup(iframe),
        )

    video = root.find("video")
    if video is not None:
        source = video.find("source")
        if source is not None:
            return Video(src=source.get("src", ""), mime_type=source.get("type", ""))
        if video.get("src"):
            return Video(src=video.get("src", ""), mime_type=video.get("type", ""))

    return None


def _normalize(fragment: str) -> str:
    """Rewrite common HTML habits into well-formed XML."""
    fragment = _VOID_CLOSE_PATTERN.sub("", fragment)
    fragment = _VOID_TAG_PATTERN.sub(lambda m: f"<{m.group(1).lower()}{m.group(2)} />", fragment)
    return _BARE_AMPERSAND_PATTERN.sub("&amp;", fragment)


def _inner_markup(elem: ET.Element) -> str:
    """Return the element's children and text as a markup string."""
    parts = [elem.text or ""]
    parts.extend(ET.tostring(child, encoding="unicode") for child in elem)
    return "".join(parts)


def _strip_wrapper(fragment: str, prefix: str, suffix: str) -> str:
    return fragment.removeprefix(prefix).removesuffix(suffix)
