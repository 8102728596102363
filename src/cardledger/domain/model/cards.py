"""Catalog candidates and resolution results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MatchKind(StrEnum):
    """How the resolver arrived at a set of candidates."""

    LITERAL = "literal"
    EXACT = "exact"
    FUZZY = "fuzzy"
    DOUBLE_FACED = "double_faced"


@dataclass(frozen=True, slots=True, kw_only=True)
class Candidate:
    """One catalog printing a token may refer to.

    ``match_score`` is 0 for exact matches and the index distance otherwise
    (lower is closer). Literal candidates carry no score.
    """

    display_name: str
    catalog_id: str
    source_uri: str = ""
    set_name: str = ""
    is_promo: bool = False
    match_score: float | None = None


@dataclass(frozen=True, slots=True)
class Resolution:
    """Candidates produced for one line, all of the same kind."""

    kind: MatchKind
    candidates: tuple[Candidate, ...] = ()

    @property
    def needs_operator(self) -> bool:
        """Whether the operator has to pick among the candidates."""

        if self.kind is MatchKind.FUZZY:
            return True
        return len(self.candidates) != 1


@dataclass(frozen=True, slots=True)
class CardCountKey:
    catalog_id: str
    variant: bool = False
