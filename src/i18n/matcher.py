"""Language preference matcher over a fixed list of supported tags."""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from src.i18n.tags import LanguageTag, maximize


class Confidence(IntEnum):
    """How well a supported tag satisfies a requested one."""

    NONE = 0
    # Same language and script, different region (en-AU for en-GB)
    LOW = 1
    # Same language, script and region once likely subtags are added (en for en-US)
    HIGH = 2
    EXACT = 3


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a match: the chosen index into the supported list."""

    index: int
    tag: LanguageTag
    confidence: Confidence


class LanguageMatcher:
    """Pick the supported tag that best satisfies a ranked list of requests.

    The first supported tag is the fallback: it is returned whenever nothing
    requested is acceptable, so ``match`` never fails.
    """

    def __init__(self, supported: Sequence[LanguageTag]):
        if not supported:
            raise ValueError("LanguageMatcher needs at least one supported tag")
        self._supported = tuple(supported)
        self._maximized = tuple(maximize(tag) for tag in self._supported)

    @property
    def supported(self) -> tuple[LanguageTag, ...]:
        return self._supported

    def _score(self, requested: LanguageTag, index: int) -> tuple[Confidence, int]:
        supported = self._supported[index]
        if requested == supported:
            return Confidence.EXACT, 0

        want = maximize(requested)
        have = self._maximized[index]
        if want.language != have.language or want.script != have.script:
            return Confidence.NONE, 0
        if want.territory == have.territory:
            return Confidence.HIGH, 0
        # Prefer the regionless document over a sibling region
        return Confidence.LOW, 1 if supported.territory is None else 0

    def match(self, requested: Iterable[LanguageTag]) -> MatchResult:
        """Return the best supported tag for the requested tags.

        Requested tags are taken in preference order; the first one with any
        acceptable match decides. Among equally good candidates the earliest
        supported tag wins.
        """
        for tag in requested:
            best_index = -1
            best_score = (Confidence.NONE, 0)
            for index in range(len(self._supported)):
                score = self._score(tag, index)
                if score[0] > Confidence.NONE and score > best_score:
                    best_index, best_score = index, score
            if best_index >= 0:
                return MatchResult(
                    index=best_index,
                    tag=self._supported[best_index],
                    confidence=best_score[0],
                )

        return MatchResult(index=0, tag=self._supported[0], confidence=Confidence.NONE)
