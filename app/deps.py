"""Request dependencies."""
from __future__ import annotations

from fastapi import Request

from src.i18n.catalog import LocaleCatalog


def get_catalog(request: Request) -> LocaleCatalog:
    """Return the catalog the application was built with."""
    return request.app.state.catalog
