"""Write-ahead log of resolution decisions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cardledger.domain.model import LiteralIdLine


@runtime_checkable
class ResumeLog(Protocol):
    """Append-only record that lets an aborted list be replayed."""

    def record(self, line: LiteralIdLine) -> None:
        """Durably append a resolved line before its counter is touched."""
        ...

    def record_unprocessed(self, lines: Iterable[str]) -> None:
        """Append raw lines that were not applied, verbatim."""
        ...

    def close(self) -> None: ...
