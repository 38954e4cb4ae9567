"""Click CLI entry point.

Usage:
    webzine slugify "ആദ്യ ലേഖനം"
    webzine clean-html draft.html
    cat draft.html | webzine words
    webzine serve --port 8000
"""

from __future__ import annotations

import click

from webzine_cms.utils.logging import BOLD, DIM, GREEN, RESET, YELLOW, get_logger

log = get_logger()


@click.group()
def cli() -> None:
    """Webzine CMS text tools."""
    pass


@cli.command()
@click.argument("text", nargs=-1, required=True)
def slugify(text: tuple[str, ...]) -> None:
    """Print the URL slug for a title."""
    from webzine_cms.text.slugify import slugify as make_slug

    slug = make_slug(" ".join(text))
    if not slug:
        click.echo(f"{YELLOW}Title produced an empty slug{RESET}", err=True)
        raise SystemExit(1)
    click.echo(slug)


@cli.command("clean-html")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def clean_html(source) -> None:
    """Normalize editor HTML from a file (or stdin)."""
    from webzine_cms.text.html_clean import clean_html_content

    click.echo(clean_html_content(source.read()))


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def words(source) -> None:
    """Count the words of an HTML fragment from a file (or stdin)."""
    from webzine_cms.text.editor import count_words

    click.echo(count_words(source.read()))


@cli.command()
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", default=None, type=int, help="Port (default from settings)")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from webzine_cms.config import settings

    host = host or settings.host
    port = port or settings.port
    log.info(f"{BOLD}Webzine CMS API{RESET} {DIM}on{RESET} {GREEN}http://{host}:{port}{RESET}")
    uvicorn.run("webzine_cms.main:app", host=host, port=port, log_level=settings.log_level)


if __name__ == "__main__":
    cli()
