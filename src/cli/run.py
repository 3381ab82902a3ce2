"""CLI commands."""
from __future__ import annotations

import logging

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from app.main import VERSION, create_app
from src.config.log_config import configure_logging
from src.config.settings import settings
from src.i18n.catalog import CatalogError, LocaleCatalog, load_catalog

app = typer.Typer(
    add_completion=False,
    help="screensy website - serve the localized landing page and static assets",
)
console = Console()
logger = logging.getLogger(__name__)


def _load_or_exit(translations: str, pattern: str, fallback: str) -> LocaleCatalog:
    try:
        return load_catalog(translations, pattern=pattern, fallback_locale=fallback)
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def serve(
    host: str = typer.Option(settings.server.host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.server.port, "--port", "-p", help="Port to listen on"),
    timeout: int = typer.Option(
        settings.server.timeout,
        "--timeout",
        help="Idle connection timeout in seconds",
    ),
    translations: str = typer.Option(
        settings.translations.directory,
        "--translations",
        "-t",
        help="Directory holding <language-tag>.html files",
    ),
    pattern: str = typer.Option(
        settings.translations.pattern,
        "--pattern",
        help="Glob selecting translation files inside the directory",
    ),
    fallback: str = typer.Option(
        settings.translations.fallback_locale,
        "--fallback",
        "-f",
        help="Language tag served when nothing else matches",
    ),
    root: str = typer.Option(settings.web_root, "--root", "-r", help="Directory served for static assets"),
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    """Load the translations, then serve the site.

    Examples:
        screensy-website serve
        screensy-website serve --port 8080 --translations ./translations
    """
    configure_logging(log_level.upper())

    # The catalog must be complete before the listener accepts a connection
    catalog = _load_or_exit(translations, pattern, fallback)
    site = create_app(catalog, root)

    logger.info("Server started on port %d", port)
    uvicorn.run(
        site,
        host=host,
        port=port,
        timeout_keep_alive=timeout,
        timeout_graceful_shutdown=timeout,
        log_config=None,
        log_level=log_level.lower(),
    )


@app.command()
def locales(
    translations: str = typer.Option(settings.translations.directory, "--translations", "-t"),
    pattern: str = typer.Option(settings.translations.pattern, "--pattern"),
    fallback: str = typer.Option(settings.translations.fallback_locale, "--fallback", "-f"),
) -> None:
    """List the translation files that would be served."""
    catalog = _load_or_exit(translations, pattern, fallback)

    table = Table(title=f"{len(catalog)} translation files")
    table.add_column("#", justify="right")
    table.add_column("Tag", style="cyan")
    table.add_column("Language")
    table.add_column("File")
    table.add_column("Bytes", justify="right")

    for idx, document in enumerate(catalog):
        tag = document.locale
        if idx == 0:
            tag = f"{tag} [dim](fallback)[/dim]"
        table.add_row(
            str(idx),
            tag,
            document.tag.display_name(),
            document.filename,
            f"{len(document.content):,}",
        )

    console.print(table)


@app.command()
def negotiate(
    header: str = typer.Argument("", help="Accept-Language header value"),
    translations: str = typer.Option(settings.translations.directory, "--translations", "-t"),
    pattern: str = typer.Option(settings.translations.pattern, "--pattern"),
    fallback: str = typer.Option(settings.translations.fallback_locale, "--fallback", "-f"),
) -> None:
    """Show which translation a given Accept-Language header receives.

    Example:
        screensy-website negotiate "nl,en;q=0.5"
    """
    catalog = _load_or_exit(translations, pattern, fallback)
    result = catalog.match(header)
    document = catalog.documents[result.index]

    console.print(
        f"[green]{document.filename}[/green] "
        f"[dim]({document.locale}, {result.confidence.name.lower()} match)[/dim]"
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]screensy website[/bold] v{VERSION}")
    console.print("[dim]Language-negotiating static site server[/dim]")


if __name__ == "__main__":
    app()
