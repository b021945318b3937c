"""Tests for instantpress.cli."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from instantpress import __version__
from instantpress.cli import app

runner = CliRunner()

ARTICLE = {
    "canonical": "https://example.com/a",
    "header": {
        "title": "Hello",
        "timestamps": [{"kind": "published", "datetime": "2024-01-15T09:30:00Z", "display": "Jan 15"}],
    },
    "elements": [
        {"kind": "paragraph", "markup": "Body"},
        {"kind": "figure", "media": {"kind": "image", "src": "a.jpg"}},
    ],
}


@pytest.fixture
def article_file(tmp_path: Path) -> Path:
    path = tmp_path / "article.json"
    path.write_text(json.dumps(ARTICLE), encoding="utf-8")
    return path


class TestInfoCommands:
    """version / info."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info(self) -> None:
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "feed_language" in result.output


class TestRender:
    """render command."""

    def test_render_article(self, article_file: Path) -> None:
        result = runner.invoke(app, ["render", str(article_file)])
        assert result.exit_code == 0
        assert result.output.startswith("<!doctype html>")
        assert "<p>Body</p>" in result.output
        assert '<time class="op-published" datetime="2024-01-15T09:30:00Z">Jan 15</time>' in result.output

    def test_render_missing_title_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"canonical": "https://example.com/a"}), encoding="utf-8")
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 1

    def test_render_invalid_json_model_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"unknown": 1}), encoding="utf-8")
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 1


class TestFeedCommand:
    """feed command."""

    def test_feed(self, tmp_path: Path) -> None:
        data = {
            "title": "My site",
            "link": "https://example.com",
            "description": "News",
            "articles": [dict(ARTICLE, guid="12333"), ARTICLE],
        }
        path = tmp_path / "feed.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        result = runner.invoke(app, ["feed", str(path), "--declaration"])

        assert result.exit_code == 0
        assert result.output.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert result.output.count("<item>") == 2
        assert "<guid>12333</guid>" in result.output
        assert "<lastBuildDate>2024-01-15T09:30:00Z</lastBuildDate>" in result.output

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"articles": [1]}'])
    def test_bad_feed_json_fails_cleanly(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "feed.json"
        path.write_text(content, encoding="utf-8")

        result = runner.invoke(app, ["feed", str(path)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, (ValueError, AttributeError))


class TestEnvironmentSettings:
    """The CLI applies INSTANTPRESS_* overrides."""

    def test_render_uses_environment(self, article_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSTANTPRESS_MARKUP_VERSION", "v1.1")
        result = runner.invoke(app, ["render", str(article_file)])
        assert result.exit_code == 0
        assert '<meta property="op:markup_version" content="v1.1" />' in result.output

    def test_feed_language_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSTANTPRESS_FEED_LANGUAGE", "de-de")
        path = tmp_path / "feed.json"
        path.write_text(json.dumps({"title": "T", "articles": [ARTICLE]}), encoding="utf-8")
        result = runner.invoke(app, ["feed", str(path)])
        assert result.exit_code == 0
        assert "<language>de-de</language>" in result.output
