"""Catalog lookups backed by SQLAlchemy Core queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from cardledger.adapters.sqlalchemy.mappings import catalog_card_table, catalog_face_table
from cardledger.domain.errors import CatalogLookupError
from cardledger.domain.model import Candidate

if TYPE_CHECKING:
    from collections.abc import Collection

    from sqlalchemy import ColumnElement, Row, Select
    from sqlalchemy.orm import Session

    from cardledger.domain.ports import ScoredWords

_card = catalog_card_table
_effective_name = func.coalesce(_card.c.printed_name, _card.c.name).label("effective_name")


def _names_match(names: Collection[str]) -> ColumnElement[bool]:
    """Printed name in ``names``, or canonical name when nothing was printed."""

    return or_(
        _card.c.printed_name.in_(names),
        and_(_card.c.name.in_(names), _card.c.printed_name.is_(None)),
    )


def _card_columns() -> Select[Any]:
    return select(
        _effective_name,
        _card.c.id,
        _card.c.uri,
        _card.c.set_name,
        _card.c.promo,
    )


def _candidate(row: Row[Any], *, display_name: str, score: float) -> Candidate:
    return Candidate(
        display_name=display_name,
        catalog_id=row.id,
        source_uri=row.uri,
        set_name=row.set_name,
        is_promo=bool(row.promo),
        match_score=score,
    )


class SqlAlchemyCatalogRepository:
    """Read the catalog tables inside the caller's session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exact(self, name: str) -> tuple[Candidate, ...]:
        stmt = _card_columns().where(_names_match((name,))).order_by(_card.c.set_name, _card.c.id)
        rows = self._rows(stmt, query="exact", token=name)
        return tuple(_candidate(row, display_name=row.effective_name, score=0) for row in rows)

    def by_names(self, words: ScoredWords) -> tuple[Candidate, ...]:
        if not words:
            return ()
        stmt = _card_columns().where(_names_match(list(words)))
        rows = self._rows(stmt, query="by_names", token=", ".join(words))
        candidates = [
            _candidate(row, display_name=row.effective_name, score=words[row.effective_name])
            for row in rows
        ]
        candidates.sort(key=lambda candidate: (candidate.match_score, candidate.catalog_id))
        return tuple(candidates)

    def by_face_pairs(self, first: ScoredWords, second: ScoredWords) -> tuple[Candidate, ...]:
        if not first or not second:
            return ()
        first_face = catalog_face_table.alias("first_face")
        second_face = catalog_face_table.alias("second_face")
        stmt = (
            select(
                first_face.c.name.label("first_name"),
                second_face.c.name.label("second_name"),
                _card.c.id,
                _card.c.uri,
                _card.c.set_name,
                _card.c.promo,
            )
            .select_from(first_face)
            .join(
                second_face,
                and_(
                    second_face.c.id == first_face.c.id,
                    second_face.c.name != first_face.c.name,
                ),
            )
            .join(_card, _card.c.id == first_face.c.id)
            .where(first_face.c.name.in_(list(first)))
            .where(second_face.c.name.in_(list(second)))
        )
        token = f"{', '.join(first)} // {', '.join(second)}"
        best: dict[str, Candidate] = {}
        for row in self._rows(stmt, query="by_face_pairs", token=token):
            score = (first[row.first_name] + second[row.second_name]) / 2
            current = best.get(row.id)
            if current is not None and current.match_score is not None:
                if current.match_score <= score:
                    continue
            best[row.id] = _candidate(
                row,
                display_name=f"{row.first_name} // {row.second_name}",
                score=score,
            )
        return tuple(
            sorted(best.values(), key=lambda candidate: (candidate.match_score, candidate.catalog_id))
        )

    def _rows(self, stmt: Select[Any], *, query: str, token: str) -> list[Row[Any]]:
        try:
            return list(self.session.execute(stmt).all())
        except SQLAlchemyError as exc:
            raise CatalogLookupError(query, token) from exc
