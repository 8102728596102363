"""SQLAlchemy adapter package for cardledger."""

from __future__ import annotations

from .catalog import SqlAlchemyCatalogRepository
from .mappings import (
    applied_list_table,
    card_count_table,
    catalog_card_table,
    catalog_face_table,
    catalog_metadata,
    create_catalog_tables,
    ledger_metadata,
    recreate_catalog_tables,
)
from .repositories import SqlAlchemyAppliedListRepository, SqlAlchemyCardCountRepository
from .spellfix import SpellfixIndex, install_spellfix, rebuild_vocabularies
from .sqlite import install_transactional_ddl

__all__ = [
    "SpellfixIndex",
    "SqlAlchemyAppliedListRepository",
    "SqlAlchemyCardCountRepository",
    "SqlAlchemyCatalogRepository",
    "applied_list_table",
    "card_count_table",
    "catalog_card_table",
    "catalog_face_table",
    "catalog_metadata",
    "create_catalog_tables",
    "install_spellfix",
    "install_transactional_ddl",
    "ledger_metadata",
    "rebuild_vocabularies",
    "recreate_catalog_tables",
]
