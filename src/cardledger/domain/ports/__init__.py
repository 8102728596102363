"""Ports the resolution engine depends on."""

from __future__ import annotations

from .catalog import CatalogRepository, FuzzyIndex, ScoredWords
from .persistence import AppliedListRepository, CardCountRepository
from .prompting import Prompter
from .resume import ResumeLog
from .unit_of_work import LedgerRepositories, LedgerUnitOfWork, UnitOfWork

__all__ = [
    "AppliedListRepository",
    "CardCountRepository",
    "CatalogRepository",
    "FuzzyIndex",
    "LedgerRepositories",
    "LedgerUnitOfWork",
    "Prompter",
    "ResumeLog",
    "ScoredWords",
    "UnitOfWork",
]
