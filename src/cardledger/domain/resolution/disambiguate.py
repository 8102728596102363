"""Interactive choice among several candidates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from cardledger.domain.errors import UnresolvedTokenError

from .ranking import rank_candidates

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cardledger.domain.model import Candidate, SessionMemory
    from cardledger.domain.ports import Prompter

PAGE_SIZE: Final[int] = 10
MORE_CHOICES: Final[int] = 0

log = logging.getLogger(__name__)


class DisambiguationSession:
    """Ask the operator which candidate a token refers to.

    Candidates are revealed one page at a time; answering ``0`` reveals the
    next page. The pick is recorded in the session memory so later ties lean
    towards the same card and set.
    """

    def __init__(self, prompter: Prompter, *, page_size: int = PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("Page size must be positive")
        self._prompter = prompter
        self._page_size = page_size

    def disambiguate(
        self,
        token: str,
        candidates: Sequence[Candidate],
        memory: SessionMemory,
    ) -> Candidate:
        if not candidates:
            raise UnresolvedTokenError(token)

        ranked = rank_candidates(candidates, memory)
        self._prompter.announce(f"Choose match for {token}:")
        revealed = self._reveal(ranked, 0)
        while True:
            remaining = len(ranked) - revealed
            question = (
                "Correct card (0 for more choices)?" if remaining > 0 else "Correct card?"
            )
            answer = self._prompter.ask_index(question)
            if answer == MORE_CHOICES:
                revealed = self._reveal(ranked, revealed)
                continue
            if not 1 <= answer <= revealed:
                continue
            chosen = ranked[answer - 1]
            memory.remember(chosen)
            log.debug("Operator chose %s (%s) for %r", chosen.catalog_id, chosen.set_name, token)
            return chosen

    def _reveal(self, ranked: Sequence[Candidate], start: int) -> int:
        page = ranked[start : start + self._page_size]
        for offset, candidate in enumerate(page, start=start + 1):
            self._prompter.show_choice(offset, candidate)
        return start + len(page)
