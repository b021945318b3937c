"""CLI entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from instantpress.core.config import get_settings
from instantpress.core.exceptions import InstantPressError

app = typer.Typer(
    name="instantpress",
    help="Instant Articles markup and RSS feed builder",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Configure logging for all commands."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def version() -> None:
    """Show version."""
    from instantpress import __version__

    console.print(f"instantpress {__version__}")


@app.command()
def info() -> None:
    """Show system information and effective settings."""
    import sys

    from instantpress import __version__

    settings = get_settings()
    console.print(f"[bold]instantpress[/bold] {__version__}")
    console.print(f"Python {sys.version}")
    for name, value in settings.model_dump().items():
        console.print(f"  {name}: {value}")


@app.command()
def render(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Article JSON file")],
) -> None:
    """Render an article described in JSON to Instant Article markup."""
    from instantpress.models.article import Article

    try:
        settings = get_settings()
        article = Article.model_validate_json(path.read_text(encoding="utf-8"))
        typer.echo(article.to_markup(settings))
    except (InstantPressError, ValidationError) as e:
        _fail(e)


@app.command()
def feed(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Feed JSON file")],
    declaration: Annotated[bool, typer.Option(help="Prefix output with an XML declaration")] = False,
) -> None:
    """Render a feed described in JSON to RSS.

    The file holds the channel fields plus an ``articles`` list; each article
    may carry an optional ``guid``.
    """
    from instantpress.feed import Feed
    from instantpress.models.article import Article

    try:
        settings = get_settings()
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("feed JSON must be an object")
        articles = data.pop("articles", [])
        if not isinstance(articles, list):
            raise ValueError("articles must be a JSON list")
        channel = Feed.model_validate(data)
        for entry in articles:
            if not isinstance(entry, dict):
                raise ValueError("each article must be a JSON object")
            guid = entry.pop("guid", "")
            channel.add_article_with_guid(Article.model_validate(entry), guid, settings)
        typer.echo(channel.to_markup(settings, xml_declaration=declaration))
    except (InstantPressError, ValueError) as e:
        # ValueError covers JSONDecodeError and pydantic's ValidationError
        _fail(e)


def _fail(error: Exception) -> None:
    err_console.print(f"[red]Error:[/red] {error}", markup=True, highlight=False)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
