from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.orm import Session

from cardledger.adapters.sqlalchemy import SpellfixIndex, SqlAlchemyCatalogRepository
from cardledger.domain.errors import CatalogLookupError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture
def session(seeded_engine: Engine) -> Iterator[Session]:
    with Session(seeded_engine) as session:
        yield session


def test_exact_returns_every_printing(session: Session) -> None:
    repository = SqlAlchemyCatalogRepository(session)

    candidates = repository.exact("lightning bolt")

    assert [candidate.catalog_id for candidate in candidates] == ["L1", "L2", "L3"]
    assert [candidate.set_name for candidate in candidates] == ["Alpha", "Beta", "Magic 2010"]
    assert all(candidate.match_score == 0 for candidate in candidates)
    assert candidates[2].is_promo
    assert candidates[0].source_uri == "https://cards.example/L1"


def test_exact_prefers_printed_name(session: Session) -> None:
    repository = SqlAlchemyCatalogRepository(session)

    assert [c.catalog_id for c in repository.exact("croissance gigantesque")] == ["G1"]
    assert repository.exact("giant growth") == ()
    assert repository.exact("croissance gigantesque")[0].display_name == "croissance gigantesque"


def test_by_names_carries_word_scores(session: Session) -> None:
    repository = SqlAlchemyCatalogRepository(session)

    candidates = repository.by_names({"counterspell": 2.0, "island": 1.0})

    assert [(c.catalog_id, c.match_score) for c in candidates] == [
        ("I1", 1.0),
        ("C1", 2.0),
        ("C2", 2.0),
    ]


def test_by_names_without_words_skips_query(session: Session) -> None:
    assert SqlAlchemyCatalogRepository(session).by_names({}) == ()


def test_by_face_pairs_joins_faces_of_one_card(session: Session) -> None:
    repository = SqlAlchemyCatalogRepository(session)

    candidates = repository.by_face_pairs({"fire": 0.0, "ice": 2.0}, {"ice": 0.0, "fire": 2.0})

    assert len(candidates) == 1
    assert candidates[0].catalog_id == "FI1"
    assert candidates[0].display_name == "fire // ice"
    assert candidates[0].match_score == 0


def test_by_face_pairs_ignores_faces_from_different_cards(session: Session) -> None:
    repository = SqlAlchemyCatalogRepository(session)

    assert repository.by_face_pairs({"fire": 0.0}, {"tear": 0.0}) == ()
    assert repository.by_face_pairs({"fire": 0.0}, {"fire": 0.0}) == ()


def test_spellfix_index_wraps_query_failures(session: Session) -> None:
    index = SpellfixIndex(session, "card_names")

    with pytest.raises(CatalogLookupError) as excinfo:
        index.match("island")

    assert excinfo.value.token == "island"


def test_spellfix_index_rejects_unsafe_table_names(session: Session) -> None:
    with pytest.raises(ValueError, match="vocabulary"):
        SpellfixIndex(session, "card_names; DROP TABLE catalog_card")
