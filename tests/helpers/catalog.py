"""Catalog fixtures and an in-memory stand-in for the spellfix vocabularies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rapidfuzz.distance import Levenshtein
from sqlalchemy import select

from cardledger.adapters.sqlalchemy import catalog_card_table, catalog_face_table
from cardledger.config import CARD_NAMES_VOCABULARY
from cardledger.domain.model import Candidate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.engine import Connection
    from sqlalchemy.orm import Session

    from cardledger.domain.ports import ScoredWords


@dataclass(frozen=True, slots=True)
class CardSeed:
    id: str
    name: str
    set_name: str
    printed_name: str | None = None
    promo: bool = False
    faces: tuple[str, ...] = ()

    @property
    def uri(self) -> str:
        return f"https://cards.example/{self.id}"


DEFAULT_CARDS: tuple[CardSeed, ...] = (
    CardSeed("I1", "island", "Alpha"),
    CardSeed("L1", "lightning bolt", "Alpha"),
    CardSeed("L2", "lightning bolt", "Beta"),
    CardSeed("L3", "lightning bolt", "Magic 2010", promo=True),
    CardSeed("C1", "counterspell", "Alpha"),
    CardSeed("C2", "counterspell", "Beta"),
    CardSeed("E1", "llanowar elves", "Beta"),
    CardSeed("G1", "giant growth", "Legends FR", printed_name="croissance gigantesque"),
    CardSeed("FI1", "fire // ice", "Apocalypse", faces=("fire", "ice")),
    CardSeed("WT1", "wear // tear", "Dragon's Maze", faces=("wear", "tear")),
)


def seed_catalog(connection: Connection, cards: Iterable[CardSeed] = DEFAULT_CARDS) -> None:
    for card in cards:
        connection.execute(
            catalog_card_table.insert().values(
                id=card.id,
                name=card.name,
                printed_name=card.printed_name,
                uri=card.uri,
                set_name=card.set_name,
                promo=card.promo,
            )
        )
        for face in card.faces:
            connection.execute(catalog_face_table.insert().values(id=card.id, name=face))


def make_candidate(
    catalog_id: str,
    *,
    name: str = "lightning bolt",
    set_name: str = "Alpha",
    score: float | None = 0,
) -> Candidate:
    return Candidate(
        display_name=name,
        catalog_id=catalog_id,
        source_uri=f"https://cards.example/{catalog_id}",
        set_name=set_name,
        match_score=score,
    )


class FakeFuzzyIndex:
    """Edit-distance vocabulary lookup that records every query."""

    def __init__(self, words: Iterable[str], *, max_distance: int = 2) -> None:
        self.words = sorted(set(words))
        self.max_distance = max_distance
        self.queries: list[str] = []

    def match(self, token: str) -> list[tuple[str, float]]:
        self.queries.append(token)
        scored = [(word, float(Levenshtein.distance(token, word))) for word in self.words]
        return sorted(
            ((word, score) for word, score in scored if score <= self.max_distance),
            key=lambda item: (item[1], item[0]),
        )


def catalog_vocabulary_index(session: Session, vocabulary: str) -> FakeFuzzyIndex:
    """Build a fake index over the same words spellfix would hold."""

    if vocabulary == CARD_NAMES_VOCABULARY:
        printed = session.execute(
            select(catalog_card_table.c.printed_name).where(
                catalog_card_table.c.printed_name.is_not(None)
            )
        ).scalars()
        names = session.execute(select(catalog_card_table.c.name)).scalars()
        return FakeFuzzyIndex([*printed, *names])
    faces = session.execute(select(catalog_face_table.c.name)).scalars()
    return FakeFuzzyIndex(faces)


class FakeCatalog:
    """In-memory ``CatalogRepository`` over seed rows."""

    def __init__(self, cards: Iterable[CardSeed] = DEFAULT_CARDS) -> None:
        self.cards = tuple(cards)
        self.calls: list[str] = []

    def exact(self, name: str) -> tuple[Candidate, ...]:
        self.calls.append("exact")
        return tuple(
            self._candidate(card, self._effective(card), 0)
            for card in self.cards
            if self._effective(card) == name
        )

    def by_names(self, words: ScoredWords) -> tuple[Candidate, ...]:
        self.calls.append("by_names")
        return tuple(
            self._candidate(card, self._effective(card), words[self._effective(card)])
            for card in self.cards
            if self._effective(card) in words
        )

    def by_face_pairs(self, first: ScoredWords, second: ScoredWords) -> tuple[Candidate, ...]:
        self.calls.append("by_face_pairs")
        best: dict[str, Candidate] = {}
        for card in self.cards:
            for first_face in card.faces:
                for second_face in card.faces:
                    if first_face == second_face:
                        continue
                    if first_face not in first or second_face not in second:
                        continue
                    score = (first[first_face] + second[second_face]) / 2
                    current = best.get(card.id)
                    if current is None or score < (current.match_score or 0.0):
                        best[card.id] = self._candidate(
                            card, f"{first_face} // {second_face}", score
                        )
        return tuple(sorted(best.values(), key=lambda candidate: candidate.match_score or 0.0))

    @staticmethod
    def _effective(card: CardSeed) -> str:
        return card.printed_name or card.name

    @staticmethod
    def _candidate(card: CardSeed, display_name: str, score: float) -> Candidate:
        return Candidate(
            display_name=display_name,
            catalog_id=card.id,
            source_uri=card.uri,
            set_name=card.set_name,
            is_promo=card.promo,
            match_score=score,
        )
