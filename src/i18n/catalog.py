"""Localized index documents, loaded once at startup.

One HTML file per locale lives in the translations directory, named after
its language tag (``en.html``, ``nl.html``, ``en-GB.html``). The fallback
document (``en.html`` unless configured otherwise) must exist and is always
the first catalog entry, which makes it the matcher's answer whenever no
requested language is acceptable.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from src.i18n.accept_language import parse_accept_language
from src.i18n.matcher import LanguageMatcher, MatchResult
from src.i18n.tags import InvalidLanguageTag, LanguageTag, parse_language_tag

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"


class CatalogError(Exception):
    """Raised when the translation directory cannot be turned into a catalog."""


@dataclass(frozen=True)
class LocalizedDocument:
    """A pre-rendered index page for one locale."""
    tag: LanguageTag
    filename: str
    content: bytes = field(repr=False)

    @property
    def locale(self) -> str:
        return str(self.tag)


@dataclass(frozen=True)
class LocaleCatalog:
    """The loaded documents plus a matcher over their tags.

    ``documents[0]`` is the fallback.
    """
    documents: tuple[LocalizedDocument, ...]
    matcher: LanguageMatcher = field(repr=False)

    @classmethod
    def from_documents(cls, documents: list[LocalizedDocument]) -> LocaleCatalog:
        if not documents:
            raise CatalogError("A catalog needs at least the fallback document")
        return cls(
            documents=tuple(documents),
            matcher=LanguageMatcher([doc.tag for doc in documents]),
        )

    @property
    def fallback(self) -> LocalizedDocument:
        return self.documents[0]

    @property
    def locales(self) -> list[str]:
        return [doc.locale for doc in self.documents]

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[LocalizedDocument]:
        return iter(self.documents)

    def match(self, accept_language: str | None) -> MatchResult:
        ranges = parse_accept_language(accept_language)
        return self.matcher.match(r.tag for r in ranges)

    def negotiate(self, accept_language: str | None) -> LocalizedDocument:
        """Return the document to serve for an Accept-Language header."""
        return self.documents[self.match(accept_language).index]


def _read_document(path: Path) -> LocalizedDocument:
    try:
        tag = parse_language_tag(path.stem)
    except InvalidLanguageTag as exc:
        raise CatalogError(f"Translation file {path.name} is not named after a language tag: {exc}") from exc

    try:
        content = path.read_bytes()
    except OSError as exc:
        raise CatalogError(f"Could not read localisation file {path}: {exc}") from exc

    return LocalizedDocument(tag=tag, filename=path.name, content=content)


def _discover(directory: Path, pattern: str) -> list[Path]:
    try:
        return sorted(p for p in directory.glob(pattern) if p.is_file())
    except (ValueError, NotImplementedError) as exc:
        raise CatalogError(f"Invalid translation file pattern {pattern!r}: {exc}") from exc


def load_catalog(
    directory: str | Path,
    pattern: str = f"*{HTML_SUFFIX}",
    fallback_locale: str = "en",
) -> LocaleCatalog:
    """Read every translation file into memory and build the catalog.

    Loading is all-or-nothing: any unreadable file or badly named file
    raises CatalogError and no catalog is returned.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise CatalogError(f"Translation directory not found: {directory}")

    try:
        parse_language_tag(fallback_locale)
    except InvalidLanguageTag as exc:
        raise CatalogError(f"Fallback locale is not a language tag: {exc}") from exc

    fallback_path = directory / f"{fallback_locale}{HTML_SUFFIX}"
    paths = [fallback_path]
    paths.extend(p for p in _discover(directory, pattern) if p != fallback_path)

    documents: list[LocalizedDocument] = []
    seen: dict[LanguageTag, Path] = {}
    for path in paths:
        document = _read_document(path)
        relative = path.relative_to(directory)
        if document.tag in seen:
            raise CatalogError(
                f"Translation files {seen[document.tag]} and {relative} "
                f"both resolve to language tag {document.locale}"
            )
        seen[document.tag] = relative
        documents.append(document)

    logger.info("Registered the following %d translation files:", len(documents))
    for idx, document in enumerate(documents):
        logger.info("%3d. %s", idx, document.filename)

    return LocaleCatalog.from_documents(documents)
