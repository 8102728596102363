"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from .catalog import CatalogRepository, FuzzyIndex
    from .persistence import AppliedListRepository, CardCountRepository


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Transaction boundary around a repository collection."""

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class LedgerRepositories(RepositoryCollection):
    """Everything one list application reads from or writes to."""

    catalog: CatalogRepository
    card_names: FuzzyIndex
    face_names: FuzzyIndex
    card_counts: CardCountRepository
    applied_lists: AppliedListRepository


type LedgerUnitOfWork = UnitOfWork[LedgerRepositories]
