"""Domain model for card list reconciliation."""

from __future__ import annotations

from .cards import Candidate, CardCountKey, MatchKind, Resolution
from .lines import (
    DOUBLE_FACED_SEPARATOR,
    FOIL_MARKER,
    LITERAL_ID_MARKER,
    UID_PREFIX,
    CardList,
    InputLine,
    LiteralIdLine,
    TextLine,
)
from .session import SessionMemory

__all__ = [
    "DOUBLE_FACED_SEPARATOR",
    "FOIL_MARKER",
    "LITERAL_ID_MARKER",
    "UID_PREFIX",
    "Candidate",
    "CardCountKey",
    "CardList",
    "InputLine",
    "LiteralIdLine",
    "MatchKind",
    "Resolution",
    "SessionMemory",
    "TextLine",
]
