"""Tests for the negotiated index page and static passthrough."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.deps import get_catalog
from app.main import create_app, get_application
from src.config.settings import Settings
from src.i18n.catalog import CatalogError, LocaleCatalog, LocalizedDocument
from src.i18n.tags import parse_language_tag


class TestIndexNegotiation:
    """Tests for GET / and GET /index.html."""

    def test_preferred_language_served(self, client, pages):
        """nl,en;q=0.5 should receive the Dutch page."""
        response = client.get("/", headers={"Accept-Language": "nl,en;q=0.5"})

        assert response.status_code == 200
        assert response.text == pages["nl"]
        assert response.headers["content-language"] == "nl"

    def test_unmatched_language_gets_fallback(self, client, pages):
        """A language outside the catalog should receive English."""
        response = client.get("/", headers={"Accept-Language": "de"})

        assert response.status_code == 200
        assert response.text == pages["en"]

    def test_absent_header_gets_fallback(self, client, pages):
        """No Accept-Language header should receive English."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == pages["en"]

    def test_malformed_header_gets_fallback(self, client, pages):
        """A garbage header should never produce an error."""
        response = client.get("/", headers={"Accept-Language": ";;q=what,,,"})

        assert response.status_code == 200
        assert response.text == pages["en"]

    @pytest.mark.parametrize("header", ["fr", "nl-BE", "de,fr;q=0.3", "", "ja"])
    def test_root_and_index_html_identical(self, client, header):
        """/ and /index.html should negotiate the same way."""
        root = client.get("/", headers={"Accept-Language": header})
        index = client.get("/index.html", headers={"Accept-Language": header})

        assert root.status_code == index.status_code == 200
        assert root.content == index.content
        assert root.headers["content-language"] == index.headers["content-language"]

    def test_html_headers(self, client):
        """The page should be HTML that varies by language."""
        response = client.get("/", headers={"Accept-Language": "fr"})

        assert response.headers["content-type"].startswith("text/html")
        assert "Accept-Language" in response.headers["vary"]
        assert response.headers["cache-control"] == "no-cache"

    def test_no_conditional_get_validators(self, client):
        """No Last-Modified or ETag, so no 304 responses."""
        response = client.get("/")

        assert "last-modified" not in response.headers
        assert "etag" not in response.headers

        again = client.get("/", headers={"If-Modified-Since": "Sun, 01 Jan 2090 00:00:00 GMT"})
        assert again.status_code == 200

    def test_head_request(self, client):
        """HEAD / should succeed with the negotiated headers."""
        response = client.head("/", headers={"Accept-Language": "nl"})

        assert response.status_code == 200
        assert response.headers["content-language"] == "nl"

    def test_injected_catalog(self, catalog, web_root):
        """The route should use whatever catalog the dependency yields."""
        other = LocaleCatalog.from_documents([
            LocalizedDocument(tag=parse_language_tag("de"), filename="de.html", content=b"<p>Hallo</p>"),
        ])
        app = create_app(catalog, web_root)
        app.dependency_overrides[get_catalog] = lambda: other

        response = TestClient(app).get("/", headers={"Accept-Language": "nl"})

        assert response.text == "<p>Hallo</p>"
        assert response.headers["content-language"] == "de"


class TestStaticPassthrough:
    """Every other path goes to the static file server."""

    def test_stylesheet_served_from_disk(self, client):
        """Assets should be served unmodified whatever the header."""
        response = client.get("/style.css", headers={"Accept-Language": "nl"})

        assert response.status_code == 200
        assert response.text == "body { margin: 0; }\n"
        assert response.headers["content-type"].startswith("text/css")
        assert "content-language" not in response.headers

    def test_translation_file_served_raw(self, client, pages):
        """Paths under /translations are plain files, not negotiated."""
        response = client.get("/translations/nl.html", headers={"Accept-Language": "fr"})

        assert response.status_code == 200
        assert response.text == pages["nl"]

    def test_static_files_have_validators(self, client):
        """Conditional GET headers belong to the static server."""
        response = client.get("/screensy.js")

        assert response.status_code == 200
        assert "last-modified" in response.headers

    def test_missing_asset_is_404(self, client):
        """Unknown paths should surface the static server's 404."""
        response = client.get("/missing.js", headers={"Accept-Language": "nl"})

        assert response.status_code == 404

    def test_other_html_pages_not_negotiated(self, client, web_root):
        """Only / and /index.html are negotiated."""
        (web_root / "about.html").write_text("<p>about</p>", encoding="utf-8")

        response = client.get("/about.html", headers={"Accept-Language": "nl"})

        assert response.text == "<p>about</p>"


class TestApplicationFactory:
    """Tests for get_application."""

    def _settings(self, web_root, translations_dir) -> Settings:
        config = Settings()
        config.web_root = str(web_root)
        config.translations.directory = str(translations_dir)
        config.translations.fallback_locale = "en"
        config.translations.pattern = "*.html"
        return config

    def test_builds_app_from_settings(self, web_root, translations_dir, pages):
        """The factory should load the configured translations."""
        app = get_application(self._settings(web_root, translations_dir))

        response = TestClient(app).get("/", headers={"Accept-Language": "fr"})

        assert response.text == pages["fr"]

    def test_bad_translations_fail_before_serving(self, web_root, tmp_path):
        """A broken translation directory should raise at startup."""
        with pytest.raises(CatalogError):
            get_application(self._settings(web_root, tmp_path / "missing"))
