"""Load a newline-delimited catalog snapshot into the catalog tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError
from sqlalchemy import func, select

from cardledger.adapters.sqlalchemy import (
    catalog_card_table,
    catalog_face_table,
    rebuild_vocabularies,
    recreate_catalog_tables,
)
from cardledger.config import CARD_NAMES_VOCABULARY, FACE_NAMES_VOCABULARY
from cardledger.domain.errors import InputError

from .schema import CardRecord
from .translator import CatalogCardRow, CatalogFaceRow, translate_card

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Engine

DEFAULT_BATCH_SIZE: Final[int] = 1000
PROGRESS_EVERY: Final[int] = 10_000

log = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogLoadResult:
    """Summary of one snapshot load."""

    declared: int | None
    cards: int
    faces: int
    vocabulary_built: bool


def iter_snapshot(path: Path) -> Iterator[CardRecord]:
    """Yield records from a snapshot whose first line holds the record count."""

    try:
        handle = path.open(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Could not read catalog snapshot {path}") from exc
    with handle:
        handle.readline()
        for line_number, line in enumerate(handle, start=2):
            if not line.strip():
                continue
            try:
                yield CardRecord.model_validate_json(line)
            except ValidationError as exc:
                raise InputError(f"Invalid catalog record at line {line_number}") from exc


def read_declared_count(path: Path) -> int | None:
    try:
        with path.open(encoding="utf-8") as handle:
            header = handle.readline().strip()
    except OSError as exc:
        raise InputError(f"Could not read catalog snapshot {path}") from exc
    if not header:
        raise InputError(f"Catalog snapshot {path} is empty")
    try:
        return int(header)
    except ValueError:
        log.warning("Catalog snapshot header %r is not a record count", header)
        return None


def load_catalog_snapshot(
    path: Path,
    *,
    engine: Engine,
    build_vocabulary: bool = True,
    card_vocabulary: str = CARD_NAMES_VOCABULARY,
    face_vocabulary: str = FACE_NAMES_VOCABULARY,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> CatalogLoadResult:
    """Replace the catalog tables with the content of ``path``.

    Vocabulary tables need the spellfix1 extension loaded on ``engine``. The
    previous catalog survives a failed load only when ``engine`` runs DDL
    transactionally (see ``install_transactional_ddl``); ``build_engine`` sets
    that up for SQLite.
    """

    declared = read_declared_count(path)
    log.info("Loading catalog snapshot %s (%s records declared)", path, declared)
    processed = 0
    with engine.begin() as connection:
        recreate_catalog_tables(connection)
        card_batch: list[CatalogCardRow] = []
        face_batch: list[CatalogFaceRow] = []
        for record in iter_snapshot(path):
            card_row, face_rows = translate_card(record)
            card_batch.append(card_row)
            face_batch.extend(face_rows)
            processed += 1
            if len(card_batch) >= batch_size:
                _flush(connection, card_batch, face_batch)
            if processed % PROGRESS_EVERY == 0:
                log.info("Parsed %d/%s catalog records", processed, declared or "?")
        _flush(connection, card_batch, face_batch)
        cards = _count(connection, catalog_card_table)
        faces = _count(connection, catalog_face_table)

        if build_vocabulary:
            rebuild_vocabularies(
                connection,
                card_vocabulary=card_vocabulary,
                face_vocabulary=face_vocabulary,
            )

    log.info("Catalog loaded: cards=%d, faces=%d", cards, faces)
    return CatalogLoadResult(
        declared=declared,
        cards=cards,
        faces=faces,
        vocabulary_built=build_vocabulary,
    )


def _flush(
    connection: Connection,
    card_batch: list[CatalogCardRow],
    face_batch: list[CatalogFaceRow],
) -> None:
    if card_batch:
        connection.execute(catalog_card_table.insert().prefix_with("OR IGNORE"), card_batch)
    if face_batch:
        connection.execute(catalog_face_table.insert().prefix_with("OR IGNORE"), face_batch)
    card_batch.clear()
    face_batch.clear()


def _count(connection: Connection, table: Table) -> int:
    return connection.execute(select(func.count()).select_from(table)).scalar_one()
