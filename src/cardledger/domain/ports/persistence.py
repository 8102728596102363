"""Ports for the durable output of list application."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cardledger.domain.model import CardCountKey


@runtime_checkable
class CardCountRepository(Protocol):
    """Owned quantities keyed by catalog id and variant flag."""

    def increment(self, key: CardCountKey, amount: int = 1) -> None: ...

    def amount(self, key: CardCountKey) -> int: ...

    def all(self) -> dict[CardCountKey, int]: ...


@runtime_checkable
class AppliedListRepository(Protocol):
    """Fingerprints of lists whose counts have been committed."""

    def contains(self, fingerprint: bytes) -> bool: ...

    def add(self, fingerprint: bytes) -> None: ...
