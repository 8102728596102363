"""Fuzzy vocabulary lookups through the SQLite spellfix1 extension."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Final

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError

from cardledger.adapters.sqlalchemy.mappings import catalog_card_table, catalog_face_table
from cardledger.domain.errors import CatalogLookupError

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.orm import Session

log = logging.getLogger(__name__)

_IDENTIFIER: Final = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _vocabulary_name(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid vocabulary table name: {name!r}")
    return name


def install_spellfix(engine: Engine, extension: Path) -> None:
    """Load the spellfix1 extension on every new DBAPI connection of ``engine``."""

    extension_path = str(extension)

    @event.listens_for(engine, "connect")
    def _load_spellfix(dbapi_connection: Any, _connection_record: object) -> None:  # pyright: ignore[reportUnusedFunction]
        dbapi_connection.enable_load_extension(True)
        try:
            dbapi_connection.load_extension(extension_path)
        finally:
            dbapi_connection.enable_load_extension(False)

    log.debug("Registered spellfix extension %s", extension_path)


class SpellfixIndex:
    """``FuzzyIndex`` over a spellfix1 virtual table."""

    def __init__(self, session: Session, vocabulary: str) -> None:
        self.session = session
        self.vocabulary = _vocabulary_name(vocabulary)

    def match(self, token: str) -> list[tuple[str, float]]:
        sql = f"SELECT word, score FROM {self.vocabulary} WHERE word MATCH :token"  # noqa: S608
        try:
            rows = self.session.execute(text(sql), {"token": token}).all()
        except SQLAlchemyError as exc:
            raise CatalogLookupError(f"{self.vocabulary} match", token) from exc
        return [(str(word), float(score)) for word, score in rows]


def rebuild_vocabularies(
    connection: Connection,
    *,
    card_vocabulary: str,
    face_vocabulary: str,
) -> None:
    """Recreate both spellfix vocabularies from the catalog tables."""

    cards = _vocabulary_name(card_vocabulary)
    faces = _vocabulary_name(face_vocabulary)
    card = catalog_card_table.name
    face = catalog_face_table.name
    statements = (
        f"DROP TABLE IF EXISTS {cards}",
        f"DROP TABLE IF EXISTS {faces}",
        f"CREATE VIRTUAL TABLE {cards} USING spellfix1",
        f"CREATE VIRTUAL TABLE {faces} USING spellfix1",
        f"INSERT INTO {cards}(word) SELECT DISTINCT printed_name FROM {card} "
        "WHERE printed_name IS NOT NULL",
        f"INSERT INTO {cards}(word) SELECT DISTINCT name FROM {card}",
        f"INSERT INTO {faces}(word) SELECT DISTINCT name FROM {face}",
    )
    log.info("Creating vocabulary tables %s and %s", cards, faces)
    for statement in statements:
        connection.execute(text(statement))
