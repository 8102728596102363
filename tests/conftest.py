from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy.engine import Engine  # noqa: TC002

from cardledger.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLedgerUnitOfWork,
    build_engine,
    shutdown,
    startup,
)
from cardledger.config import sqlite_uri
from tests.helpers.catalog import catalog_vocabulary_index, seed_catalog
from tests.helpers.ledger import LedgerStore

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def sqlite_engine(tmp_path: Path) -> Iterator[Engine]:
    engine = build_engine(sqlite_uri(tmp_path / "ledger.db"))
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def ledger_engine(sqlite_engine: Engine) -> Iterator[Engine]:
    startup(engine=sqlite_engine, force=True)
    try:
        yield sqlite_engine
    finally:
        shutdown()


@pytest.fixture
def seeded_engine(ledger_engine: Engine) -> Engine:
    with ledger_engine.begin() as connection:
        seed_catalog(connection)
    return ledger_engine


@pytest.fixture
def sqlite_unit_of_work(
    seeded_engine: Engine,
) -> Callable[[], SqlAlchemyLedgerUnitOfWork]:
    def factory() -> SqlAlchemyLedgerUnitOfWork:
        return SqlAlchemyLedgerUnitOfWork(fuzzy_index_factory=catalog_vocabulary_index)

    return factory


@pytest.fixture
def ledger_store() -> LedgerStore:
    return LedgerStore()
