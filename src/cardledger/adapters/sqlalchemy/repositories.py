"""Repository implementations for the ledger tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from cardledger.adapters.sqlalchemy.mappings import applied_list_table, card_count_table
from cardledger.domain.model import CardCountKey

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyCardCountRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def increment(self, key: CardCountKey, amount: int = 1) -> None:
        stmt = sqlite_insert(card_count_table).values(
            catalog_id=key.catalog_id,
            variant=key.variant,
            amount=amount,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[card_count_table.c.catalog_id, card_count_table.c.variant],
            set_={"amount": card_count_table.c.amount + stmt.excluded.amount},
        )
        self.session.execute(stmt)

    def amount(self, key: CardCountKey) -> int:
        stmt = (
            select(card_count_table.c.amount)
            .where(card_count_table.c.catalog_id == key.catalog_id)
            .where(card_count_table.c.variant == key.variant)
        )
        return self.session.execute(stmt).scalar_one_or_none() or 0

    def all(self) -> dict[CardCountKey, int]:
        stmt = select(
            card_count_table.c.catalog_id,
            card_count_table.c.variant,
            card_count_table.c.amount,
        )
        return {
            CardCountKey(catalog_id=catalog_id, variant=bool(variant)): amount
            for catalog_id, variant, amount in self.session.execute(stmt).all()
        }


class SqlAlchemyAppliedListRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def contains(self, fingerprint: bytes) -> bool:
        stmt = select(applied_list_table.c.fingerprint).where(
            applied_list_table.c.fingerprint == fingerprint
        )
        return self.session.execute(stmt).first() is not None

    def add(self, fingerprint: bytes) -> None:
        stmt = applied_list_table.insert().prefix_with("OR IGNORE").values(fingerprint=fingerprint)
        self.session.execute(stmt)


if TYPE_CHECKING:
    from cardledger.domain.ports import AppliedListRepository, CardCountRepository

    _session_stub = cast("Session", object())
    _counts_check: CardCountRepository = SqlAlchemyCardCountRepository(_session_stub)
    _lists_check: AppliedListRepository = SqlAlchemyAppliedListRepository(_session_stub)
