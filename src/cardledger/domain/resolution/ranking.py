"""Ordering of competing candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cardledger.domain.model import Candidate, SessionMemory


def rank_candidates(
    candidates: Iterable[Candidate],
    memory: SessionMemory,
) -> list[Candidate]:
    """Sort candidates so earlier operator choices come first.

    Previously chosen ids win, then previously chosen sets, then the closest
    score, with display name and set name as the final tie-breakers.
    """

    def sort_key(candidate: Candidate) -> tuple[bool, bool, float, str, str]:
        return (
            candidate.catalog_id not in memory.chosen_ids,
            candidate.set_name not in memory.chosen_sets,
            candidate.match_score or 0.0,
            candidate.display_name,
            candidate.set_name,
        )

    return sorted(candidates, key=sort_key)
