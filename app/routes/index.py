"""Localized index page."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.deps import get_catalog
from src.i18n.catalog import LocaleCatalog

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@router.api_route("/index.html", methods=["GET", "HEAD"], include_in_schema=False)
async def index(
    request: Request,
    catalog: LocaleCatalog = Depends(get_catalog),
) -> HTMLResponse:
    """Serve the translation that best fits the client's Accept-Language.

    No Last-Modified or ETag is sent, so this page is never answered with
    304 Not Modified.
    """
    accept_language = request.headers.get("accept-language")
    result = catalog.match(accept_language)
    document = catalog.documents[result.index]

    logger.debug(
        "Accept-Language %r -> %s (%s)",
        accept_language,
        document.filename,
        result.confidence.name.lower(),
    )

    return HTMLResponse(
        content=document.content,
        headers={
            "Content-Language": document.locale,
            "Vary": "Accept-Language",
            "Cache-Control": "no-cache",
        },
    )
