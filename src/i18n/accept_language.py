"""Accept-Language header parsing."""
from __future__ import annotations

import re
from dataclasses import dataclass

from src.i18n.tags import InvalidLanguageTag, LanguageTag, parse_language_tag

# Headers are client-controlled; anything past this many entries is ignored
MAX_ENTRIES = 32

# qvalue = ( "0" [ "." 0*3DIGIT ] ) / ( "1" [ "." 0*3("0") ] )
_QVALUE = re.compile(r"^(?:0(?:\.\d{0,3})?|1(?:\.0{0,3})?)$")


@dataclass(frozen=True)
class LanguageRange:
    """One ranked entry of an Accept-Language header."""

    tag: LanguageTag
    quality: float = 1.0


def _parse_quality(params: list[str]) -> float | None:
    """Return the q parameter of an entry, or None if it is malformed."""
    quality = 1.0
    for param in params:
        key, _, value = param.partition("=")
        if key.strip().lower() != "q":
            continue
        value = value.strip()
        if not _QVALUE.match(value):
            return None
        quality = float(value)
    return quality


def _parse_range(text: str) -> LanguageTag | None:
    """Parse a language range, dropping trailing subtags until it parses.

    ``en-US-u-ca-gregory`` is tried as-is, then ``en-US-u-ca``, and so on
    down to ``en``.
    """
    subtags = text.replace("_", "-").split("-")
    while subtags:
        try:
            return parse_language_tag("-".join(subtags))
        except InvalidLanguageTag:
            subtags.pop()
            # A singleton (like the "u" above) cannot end a tag
            while subtags and len(subtags[-1]) == 1:
                subtags.pop()
    return None


def parse_accept_language(header: str | None) -> list[LanguageRange]:
    """Parse an Accept-Language header into ranges, most preferred first.

    Malformed entries are skipped, so a header that is entirely malformed
    yields an empty list. Entries with ``q=0`` and the ``*`` wildcard carry
    no concrete preference and are dropped too.
    """
    if not header:
        return []

    ranges: list[LanguageRange] = []
    for part in header.split(",")[:MAX_ENTRIES]:
        pieces = part.split(";")
        text = pieces[0].strip()
        if not text or text == "*":
            continue

        quality = _parse_quality(pieces[1:])
        if quality is None or quality == 0:
            continue

        tag = _parse_range(text)
        if tag is None:
            continue
        ranges.append(LanguageRange(tag=tag, quality=quality))

    # sorted() is stable: equal weights keep header order
    return sorted(ranges, key=lambda r: r.quality, reverse=True)
