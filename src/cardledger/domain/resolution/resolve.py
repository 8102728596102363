"""Candidate lookup for a single card list line.

Lookup policy:
- literal id records short-circuit to one synthetic candidate
- ``a // b`` tokens match both faces through the face vocabulary
- other tokens try an exact name match, and only fall back to the fuzzy
  vocabulary when nothing matches exactly

Lookup failures propagate; nothing here retries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cardledger.domain.model import Candidate, LiteralIdLine, MatchKind, Resolution
from cardledger.domain.normalize import normalize_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cardledger.domain.model import InputLine, TextLine
    from cardledger.domain.ports import CatalogRepository, FuzzyIndex, ScoredWords

log = logging.getLogger(__name__)


class CandidateResolver:
    """Produce the candidate set for one input line."""

    def __init__(
        self,
        *,
        catalog: CatalogRepository,
        card_names: FuzzyIndex,
        face_names: FuzzyIndex,
    ) -> None:
        self._catalog = catalog
        self._card_names = card_names
        self._face_names = face_names

    def resolve(self, line: InputLine) -> Resolution:
        if isinstance(line, LiteralIdLine):
            literal = Candidate(display_name=line.catalog_id, catalog_id=line.catalog_id)
            return Resolution(MatchKind.LITERAL, (literal,))
        if line.is_double_faced:
            return self._resolve_double_faced(line)
        return self._resolve_name(line.token)

    def _resolve_name(self, token: str) -> Resolution:
        name = normalize_name(token)
        exact = self._catalog.exact(name)
        if exact:
            log.debug("Exact match for %r: %d candidates", token, len(exact))
            return Resolution(MatchKind.EXACT, exact)

        words = _scored_words(self._card_names.match(name))
        candidates = self._catalog.by_names(words) if words else ()
        log.debug("Fuzzy match for %r: %d candidates", token, len(candidates))
        return Resolution(MatchKind.FUZZY, candidates)

    def _resolve_double_faced(self, line: TextLine) -> Resolution:
        first, second = (normalize_name(face) for face in line.faces())
        log.info("Handling double card %s", line.token)
        first_words = _scored_words(self._face_names.match(first))
        second_words = _scored_words(self._face_names.match(second))
        if not first_words or not second_words:
            return Resolution(MatchKind.DOUBLE_FACED)
        candidates = self._catalog.by_face_pairs(first_words, second_words)
        return Resolution(MatchKind.DOUBLE_FACED, candidates)


def _scored_words(matches: Iterable[tuple[str, float]]) -> ScoredWords:
    best: dict[str, float] = {}
    for word, score in matches:
        if word not in best or score < best[word]:
            best[word] = score
    return best
