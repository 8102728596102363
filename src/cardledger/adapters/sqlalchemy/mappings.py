"""SQLAlchemy table metadata for the catalog and the ledger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    String,
    Table,
    false,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

log = logging.getLogger(__name__)

NAMING_CONVENTION: Final[dict[str, str]] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Catalog tables are produced by the snapshot loader and only read while
# applying lists.
catalog_metadata = MetaData(naming_convention=NAMING_CONVENTION)

# Ledger tables are owned by the list applier and managed through Alembic.
ledger_metadata = MetaData(naming_convention=NAMING_CONVENTION)

# Catalog tables ---------------------------------------------------------------

catalog_card_table = Table(
    "catalog_card",
    catalog_metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("printed_name", String, nullable=True),
    Column("uri", String, nullable=False),
    Column("set_name", String, nullable=False),
    Column("promo", Boolean, nullable=False, default=False),
    Index("ix_catalog_card_name", "name"),
    Index("ix_catalog_card_printed_name", "printed_name"),
)

catalog_face_table = Table(
    "catalog_face",
    catalog_metadata,
    Column("id", String, primary_key=True),
    Column("name", String, primary_key=True),
    Index("ix_catalog_face_name", "name"),
)

# Ledger tables ----------------------------------------------------------------

card_count_table = Table(
    "card_count",
    ledger_metadata,
    Column("catalog_id", String, primary_key=True),
    Column("variant", Boolean, primary_key=True, server_default=false()),
    Column("amount", Integer, nullable=False),
)

applied_list_table = Table(
    "applied_list",
    ledger_metadata,
    Column("fingerprint", LargeBinary, primary_key=True),
)


def create_catalog_tables(bind: Engine | Connection) -> None:
    """Create empty catalog tables where they do not exist yet."""

    catalog_metadata.create_all(bind, checkfirst=True)


def recreate_catalog_tables(bind: Engine | Connection) -> None:
    """Drop and recreate the catalog tables ahead of a full reload."""

    log.info("Recreating catalog tables")
    catalog_metadata.drop_all(bind, checkfirst=True)
    catalog_metadata.create_all(bind)
