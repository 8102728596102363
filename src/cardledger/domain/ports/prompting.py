"""Operator interaction port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cardledger.domain.model import Candidate


@runtime_checkable
class Prompter(Protocol):
    """Blocking, synchronous questions to the operator."""

    def announce(self, text: str) -> None: ...

    def show_choice(self, index: int, candidate: Candidate) -> None: ...

    def ask_index(self, question: str) -> int: ...

    def confirm(self, question: str, *, default: bool) -> bool: ...
