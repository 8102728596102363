from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cardledger.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLedgerUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from cardledger.domain.model import CardCountKey

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Engine


def test_unit_of_work_requires_startup() -> None:
    shutdown()

    with pytest.raises(StartupError):
        SqlAlchemyLedgerUnitOfWork()


def test_startup_refuses_to_reconfigure_without_force(ledger_engine: Engine) -> None:
    assert is_started()
    assert configured_engine() is ledger_engine

    with pytest.raises(StartupError):
        startup(engine=ledger_engine)


def test_repositories_need_an_open_session(
    sqlite_unit_of_work: Callable[[], SqlAlchemyLedgerUnitOfWork],
) -> None:
    uow = sqlite_unit_of_work()

    with pytest.raises(StartupError):
        _ = uow.repositories


def test_commit_persists_counts(
    sqlite_unit_of_work: Callable[[], SqlAlchemyLedgerUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.card_counts.increment(CardCountKey("I1"))
        uow.repositories.applied_lists.add(b"\x01")
        uow.commit()

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.card_counts.amount(CardCountKey("I1")) == 1
        assert uow.repositories.applied_lists.contains(b"\x01")


def test_exception_rolls_back(
    sqlite_unit_of_work: Callable[[], SqlAlchemyLedgerUnitOfWork],
) -> None:
    with pytest.raises(RuntimeError), sqlite_unit_of_work() as uow:
        uow.repositories.card_counts.increment(CardCountKey("I1"))
        raise RuntimeError("boom")

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.card_counts.all() == {}


def test_catalog_repository_reads_seeded_rows(
    sqlite_unit_of_work: Callable[[], SqlAlchemyLedgerUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        candidates = uow.repositories.catalog.exact("island")
        words = uow.repositories.card_names.match("iland")

    assert [candidate.catalog_id for candidate in candidates] == ["I1"]
    assert ("island", 1.0) in words
