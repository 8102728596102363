from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.orm import Session

from cardledger.adapters.sqlalchemy import (
    SqlAlchemyAppliedListRepository,
    SqlAlchemyCardCountRepository,
)
from cardledger.domain.model import CardCountKey

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture
def session(ledger_engine: Engine) -> Iterator[Session]:
    with Session(ledger_engine) as session:
        yield session


def test_increment_upserts_amount(session: Session) -> None:
    repository = SqlAlchemyCardCountRepository(session)

    repository.increment(CardCountKey("I1"))
    repository.increment(CardCountKey("I1"))
    repository.increment(CardCountKey("I1", variant=True), amount=3)
    session.commit()

    assert repository.amount(CardCountKey("I1")) == 2
    assert repository.amount(CardCountKey("I1", variant=True)) == 3
    assert repository.amount(CardCountKey("missing")) == 0
    assert repository.all() == {
        CardCountKey("I1"): 2,
        CardCountKey("I1", variant=True): 3,
    }


def test_uncommitted_increments_roll_back(session: Session) -> None:
    repository = SqlAlchemyCardCountRepository(session)

    repository.increment(CardCountKey("I1"))
    session.rollback()

    assert repository.all() == {}


def test_applied_list_insert_is_idempotent(session: Session) -> None:
    repository = SqlAlchemyAppliedListRepository(session)
    fingerprint = bytes.fromhex("abc123")

    assert not repository.contains(fingerprint)
    repository.add(fingerprint)
    repository.add(fingerprint)
    session.commit()

    assert repository.contains(fingerprint)
    assert not repository.contains(b"\x00")
