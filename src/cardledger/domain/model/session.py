"""Per-run operator preferences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cards import Candidate


@dataclass(slots=True)
class SessionMemory:
    """Catalog ids and sets the operator picked during the current run.

    Owned by one list application and discarded with it.
    """

    chosen_ids: set[str] = field(default_factory=set[str])
    chosen_sets: set[str] = field(default_factory=set[str])

    def remember(self, candidate: Candidate) -> None:
        self.chosen_ids.add(candidate.catalog_id)
        self.chosen_sets.add(candidate.set_name)
