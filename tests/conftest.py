"""Shared test fixtures and configuration."""
from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from src.i18n.catalog import LocaleCatalog, load_catalog

PAGES = {
    "en": "<!DOCTYPE html><html lang=\"en\"><body><h1>Share your screen</h1></body></html>",
    "nl": "<!DOCTYPE html><html lang=\"nl\"><body><h1>Deel je scherm</h1></body></html>",
    "fr": "<!DOCTYPE html><html lang=\"fr\"><body><h1>Partagez votre écran</h1></body></html>",
}


def write_translations(directory: Path, pages: dict[str, str]) -> Path:
    """Write <tag>.html files into directory and return it."""
    directory.mkdir(parents=True, exist_ok=True)
    for tag, html in pages.items():
        (directory / f"{tag}.html").write_text(html, encoding="utf-8")
    return directory


@pytest.fixture
def pages() -> dict[str, str]:
    """Return the HTML of each test translation, keyed by language tag."""
    return dict(PAGES)


@pytest.fixture
def web_root(tmp_path: Path) -> Path:
    """Return a site directory with a stylesheet and a translations folder."""
    root = tmp_path / "site"
    write_translations(root / "translations", PAGES)
    (root / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (root / "screensy.js").write_text("console.log('screensy');\n", encoding="utf-8")
    return root


@pytest.fixture
def translations_dir(web_root: Path) -> Path:
    """Return the directory holding en.html, fr.html and nl.html."""
    return web_root / "translations"


@pytest.fixture
def catalog(translations_dir: Path) -> LocaleCatalog:
    """Return a catalog of en (fallback), fr and nl."""
    return load_catalog(translations_dir)


@pytest.fixture
def client(catalog: LocaleCatalog, web_root: Path) -> TestClient:
    """Create test client serving web_root."""
    return TestClient(create_app(catalog, web_root))


@pytest.fixture
def make_translations(tmp_path: Path):
    """Return a helper writing {tag: html} pages into a fresh directory."""
    def _make(pages: dict[str, str], name: str = "translations") -> Path:
        return write_translations(tmp_path / name, pages)

    return _make
