"""BCP-47 language tag parsing backed by Babel's CLDR data."""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.core import get_global, parse_locale

# language, then any number of 1-8 alphanumeric subtags; "_" is accepted like "-"
_TAG_PATTERN = re.compile(r"^[A-Za-z]{2,8}(?:[-_][A-Za-z0-9]{1,8})*$")


class InvalidLanguageTag(ValueError):
    """Raised when a string is not a usable language tag."""

    def __init__(self, tag: str, reason: str):
        super().__init__(f"Invalid language tag {tag!r}: {reason}")
        self.tag = tag
        self.reason = reason


@dataclass(frozen=True)
class LanguageTag:
    """A parsed language tag.

    Subtags are stored in their canonical case (``zh-Hant-TW``).
    """

    language: str
    script: str | None = None
    territory: str | None = None
    variant: str | None = None

    def __str__(self) -> str:
        return "-".join(
            part
            for part in (self.language, self.script, self.territory, self.variant)
            if part
        )

    @property
    def posix(self) -> str:
        """Underscore-separated identifier as Babel expects it."""
        return str(self).replace("-", "_")

    def display_name(self) -> str:
        """English display name, falling back to the tag itself."""
        try:
            locale = Locale.parse(self.posix)
        except (ValueError, UnknownLocaleError):
            return str(self)
        return locale.get_display_name("en") or str(self)


@lru_cache(maxsize=256)
def parse_language_tag(text: str) -> LanguageTag:
    """Parse a language tag such as ``en``, ``en-GB`` or ``zh-Hant-TW``.

    Raises:
        InvalidLanguageTag: If the tag is malformed or its language is not
            known to CLDR.
    """
    if not isinstance(text, str) or not _TAG_PATTERN.match(text):
        raise InvalidLanguageTag(str(text), "malformed tag")

    try:
        language, territory, script, variant = parse_locale(text.replace("-", "_"))
    except ValueError as exc:
        raise InvalidLanguageTag(text, str(exc)) from exc

    try:
        Locale.parse(language)
    except (ValueError, UnknownLocaleError) as exc:
        raise InvalidLanguageTag(text, f"unknown language {language!r}") from exc

    return LanguageTag(
        language=language,
        script=script,
        territory=territory,
        variant=variant,
    )


@lru_cache(maxsize=256)
def maximize(tag: LanguageTag) -> LanguageTag:
    """Fill in the likely script and territory for a tag.

    ``en`` becomes ``en-Latn-US`` and ``zh-TW`` becomes ``zh-Hant-TW``.
    Subtags that are already present are never replaced.
    """
    likely = get_global("likely_subtags")

    candidates = []
    if tag.script and tag.territory:
        candidates.append(f"{tag.language}_{tag.script}_{tag.territory}")
    if tag.territory:
        candidates.append(f"{tag.language}_{tag.territory}")
    if tag.script:
        candidates.append(f"{tag.language}_{tag.script}")
    candidates.append(tag.language)

    for key in candidates:
        if key not in likely:
            continue
        _, territory, script, _ = parse_locale(likely[key])
        return replace(
            tag,
            script=tag.script or script,
            territory=tag.territory or territory,
        )
    return tag
