"""SQLAlchemy-backed unit of work for list application."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from cardledger.adapters.sqlalchemy.catalog import SqlAlchemyCatalogRepository
from cardledger.adapters.sqlalchemy.mappings import create_catalog_tables
from cardledger.adapters.sqlalchemy.migrations import upgrade_head
from cardledger.adapters.sqlalchemy.repositories import (
    SqlAlchemyAppliedListRepository,
    SqlAlchemyCardCountRepository,
)
from cardledger.adapters.sqlalchemy.spellfix import SpellfixIndex, install_spellfix
from cardledger.adapters.sqlalchemy.sqlite import install_transactional_ddl
from cardledger.config import CARD_NAMES_VOCABULARY, FACE_NAMES_VOCABULARY, get_database_config
from cardledger.domain.errors import CardLedgerError
from cardledger.domain.ports import FuzzyIndex, LedgerRepositories

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from sqlalchemy.engine import Engine

type FuzzyIndexFactory = Callable[[Session, str], FuzzyIndex]


class StartupError(CardLedgerError):
    """Raised when a SQLAlchemy unit of work is used before initialisation."""


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call cardledger.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def build_engine(database_uri: str, *, spellfix_extension: Path | None = None) -> Engine:
    """Create an engine, loading spellfix1 on each connection when given."""

    engine = create_engine(database_uri, future=True)
    if engine.dialect.name == "sqlite":
        install_transactional_ddl(engine)
    if spellfix_extension is not None:
        install_spellfix(engine, spellfix_extension)
    return engine


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Initialise the engine, migrate the ledger schema and reset the session factory."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )
    resolved_engine = engine or build_engine(database_uri or get_database_config().uri)
    upgrade_head(engine=resolved_engine)
    create_catalog_tables(resolved_engine)

    _STATE.engine = resolved_engine


def configured_engine() -> Engine | None:
    """Return the engine currently managed by the adapter (if any)."""

    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the managed engine and reset state."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None


def spellfix_index_factory(session: Session, vocabulary: str) -> FuzzyIndex:
    return SpellfixIndex(session, vocabulary)


class SqlAlchemyLedgerUnitOfWork:
    """One session, and therefore one transaction, per list application."""

    def __init__(
        self,
        *,
        fuzzy_index_factory: FuzzyIndexFactory = spellfix_index_factory,
        card_vocabulary: str = CARD_NAMES_VOCABULARY,
        face_vocabulary: str = FACE_NAMES_VOCABULARY,
    ) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.session_factory
        self._session: Session | None = None
        self._fuzzy_index_factory = fuzzy_index_factory
        self._card_vocabulary = card_vocabulary
        self._face_vocabulary = face_vocabulary

    def _build_repositories(self, session: Session) -> LedgerRepositories:
        return LedgerRepositories(
            catalog=SqlAlchemyCatalogRepository(session),
            card_names=self._fuzzy_index_factory(session, self._card_vocabulary),
            face_names=self._fuzzy_index_factory(session, self._face_vocabulary),
            card_counts=SqlAlchemyCardCountRepository(session),
            applied_lists=SqlAlchemyAppliedListRepository(session),
        )

    def __enter__(self) -> SqlAlchemyLedgerUnitOfWork:
        self.session = self.session_factory()
        self._repositories = self._build_repositories(self.session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> LedgerRepositories:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


if TYPE_CHECKING:
    from cardledger.domain.ports import LedgerUnitOfWork

    _uow_check: LedgerUnitOfWork = SqlAlchemyLedgerUnitOfWork()
