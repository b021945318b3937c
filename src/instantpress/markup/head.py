"""Article <head> renderer.

The generic tree serializer only writes open/close pairs, but the head needs
self-closing <link /> and <meta /> elements, so it is assembled here by hand.

Caller metadata is written first, in order. A charset entry and an
op:markup_version entry are then synthesized only if the caller supplied none.

Example:
    >>> from instantpress.markup.head import render_head
    >>> from instantpress.models.article import Meta
    >>> print(render_head("https://example.com/a", [Meta(property="fb:article_style", content="bold")]))
    <BLANKLINE>
    <link href="https://example.com/a" rel="canonical" />
    <meta property="fb:article_style" content="bold" />
    <meta charset="utf-8" />
    <meta property="op:markup_version" content="v1.0" />
"""

from __future__ import annotations

from collections.abc import Iterable

from instantpress.markup.tree import escape_attr
from instantpress.models.article import Meta
from instantpress.models.base import CHARSET, MARKUP_VERSION, MARKUP_VERSION_PROPERTY


def self_closing(tag: str, attrs: Iterable[tuple[str, str]]) -> str:
    """Render ``<tag name="value" ... />``."""
    rendered = "".join(f'{name}="{escape_attr(value)}" ' for name, value in attrs)
    return f"<{tag} {rendered}/>"


def render_meta(meta: Meta) -> str:
    """Render one <meta />, attributes ordered charset, property, content."""
    attrs = [
        (name, value)
        for name, value in (("charset", meta.charset), ("property", meta.property), ("content", meta.content))
        if value
    ]
    return self_closing("meta", attrs)


def render_head(
    canonical: str,
    meta: Iterable[Meta],
    *,
    charset: str = CHARSET,
    markup_version: str = MARKUP_VERSION,
) -> str:
    """Render the inner markup of <head>, one element per line."""
    lines = [self_closing("link", [("href", canonical), ("rel", "canonical")])]

    has_charset = False
    has_markup_version = False
    for entry in meta:
        lines.append(render_meta(entry))
        has_charset = has_charset or bool(entry.charset)
        has_markup_version = has_markup_version or entry.property == MARKUP_VERSION_PROPERTY

    # Defaults are fallbacks, never overrides
    if not has_charset:
        lines.append(render_meta(Meta(charset=charset)))
    if not has_markup_version:
        lines.append(render_meta(Meta(property=MARKUP_VERSION_PROPERTY, content=markup_version)))

    return "".join(f"\n{line}" for line in lines)
