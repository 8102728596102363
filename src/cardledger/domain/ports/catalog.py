"""Read-only ports onto the catalog produced by ingestion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cardledger.domain.model import Candidate

type ScoredWords = Mapping[str, float]


@runtime_checkable
class FuzzyIndex(Protocol):
    """Misspelling-tolerant vocabulary lookup."""

    def match(self, token: str) -> Sequence[tuple[str, float]]:
        """Return ``(word, distance)`` pairs for vocabulary words close to ``token``."""
        ...


@runtime_checkable
class CatalogRepository(Protocol):
    """Lookups against the catalog and face tables."""

    def exact(self, name: str) -> tuple[Candidate, ...]:
        """Rows whose printed name (or name, when unprinted) equals ``name``."""
        ...

    def by_names(self, words: ScoredWords) -> tuple[Candidate, ...]:
        """Rows whose effective name is one of ``words``, carrying the word's score."""
        ...

    def by_face_pairs(self, first: ScoredWords, second: ScoredWords) -> tuple[Candidate, ...]:
        """Cards with one face in ``first`` and a different face in ``second``."""
        ...
