"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from cardledger.adapters.catalog_snapshot import load_catalog_snapshot
from cardledger.adapters.console import RichPrompter
from cardledger.adapters.resume_log import FileResumeLog
from cardledger.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLedgerUnitOfWork,
    build_engine,
    shutdown,
    startup,
)
from cardledger.config import get_catalog_config, get_database_config
from cardledger.domain.apply_list import apply_card_list
from cardledger.domain.list_input import read_card_list

if TYPE_CHECKING:
    from pathlib import Path

    from cardledger.adapters.catalog_snapshot import CatalogLoadResult
    from cardledger.domain.apply_list import ApplyListResult, UnitOfWorkFactory
    from cardledger.domain.ports import Prompter


log = getLogger(__name__)


def add_card_list(
    list_path: Path,
    *,
    database_path: Path | None = None,
    spellfix_extension: Path | None = None,
    save_on_error: Path | None = None,
    prompter: Prompter | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ApplyListResult:
    """Resolve a card list against the catalog and add it to the owned counters."""

    card_list = read_card_list(list_path)
    log.info(
        "Applying card list %s: lines=%d, fingerprint=%s",
        list_path,
        len(card_list.lines),
        card_list.fingerprint_hex,
    )

    started_here = unit_of_work_factory is None
    effective_uow = unit_of_work_factory or _start_sqlalchemy(database_path, spellfix_extension)
    try:
        result = apply_card_list(
            card_list,
            unit_of_work_factory=effective_uow,
            prompter=prompter or RichPrompter(),
            resume_log_factory=FileResumeLog.factory(save_on_error) if save_on_error else None,
        )
    finally:
        if started_here:
            shutdown()

    log.info(
        "Finished card list %s: status=%s, lines=%d, prompts=%d",
        list_path,
        result.status,
        result.lines_applied,
        result.prompts,
    )
    return result


def load_catalog(
    snapshot_path: Path,
    *,
    database_path: Path | None = None,
    spellfix_extension: Path | None = None,
    build_vocabulary: bool = True,
) -> CatalogLoadResult:
    """Replace the catalog tables (and vocabularies) from a snapshot file."""

    database = get_database_config(database_path=database_path)
    extension = None
    if build_vocabulary:
        extension = get_catalog_config(spellfix_extension=spellfix_extension).spellfix_extension
    engine = build_engine(database.uri, spellfix_extension=extension)
    try:
        return load_catalog_snapshot(
            snapshot_path,
            engine=engine,
            build_vocabulary=build_vocabulary,
        )
    finally:
        engine.dispose()


def _start_sqlalchemy(
    database_path: Path | None,
    spellfix_extension: Path | None,
) -> UnitOfWorkFactory:
    catalog_config = get_catalog_config(spellfix_extension=spellfix_extension)
    database = get_database_config(database_path=database_path)
    engine = build_engine(database.uri, spellfix_extension=catalog_config.spellfix_extension)
    startup(engine=engine, force=True)

    def factory() -> SqlAlchemyLedgerUnitOfWork:
        return SqlAlchemyLedgerUnitOfWork(
            card_vocabulary=catalog_config.card_vocabulary,
            face_vocabulary=catalog_config.face_vocabulary,
        )

    return factory
