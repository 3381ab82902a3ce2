"""FastAPI entry point."""
from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.routes.index import router as index_router
from src.config.log_config import configure_logging
from src.config.settings import Settings, settings
from src.i18n.catalog import LocaleCatalog, load_catalog

VERSION = "1.0.0"


def create_app(catalog: LocaleCatalog, web_root: str | Path = ".") -> FastAPI:
    """Build the site for an already loaded catalog.

    ``/`` and ``/index.html`` are negotiated against the catalog; every other
    path is served from ``web_root`` as is.
    """
    app = FastAPI(
        title="screensy website",
        version=VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.catalog = catalog

    # Routes take precedence over the catch-all mount below
    app.include_router(index_router)
    app.mount("/", StaticFiles(directory=web_root), name="static")

    return app


def get_application(config: Settings | None = None) -> FastAPI:
    """Load translations and build the app (``uvicorn --factory``).

    Raises CatalogError before anything is served if a translation file
    is missing, unreadable or badly named.
    """
    config = config or settings
    configure_logging(config.log_level)
    catalog = load_catalog(
        config.translations.directory,
        pattern=config.translations.pattern,
        fallback_locale=config.translations.fallback_locale,
    )
    return create_app(catalog, config.web_root)
