"""Turning card list tokens into confirmed catalog identifiers.

Stages:
1) ``resolve`` looks a token up (literal, exact, fuzzy or double-faced)
2) ``ranking`` orders competing candidates using the session memory
3) ``disambiguate`` asks the operator when more than one candidate remains
"""

from __future__ import annotations

from .disambiguate import PAGE_SIZE, DisambiguationSession
from .ranking import rank_candidates
from .resolve import CandidateResolver

__all__ = [
    "PAGE_SIZE",
    "CandidateResolver",
    "DisambiguationSession",
    "rank_candidates",
]
