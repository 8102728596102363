"""Fuzzy catalog index configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_env_var

SPELLFIX_ENV_VAR: Final[str] = "SPELLFIX_EXT"
CARD_NAMES_VOCABULARY: Final[str] = "card_names"
FACE_NAMES_VOCABULARY: Final[str] = "face_names"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the spellfix1 extension lives and which vocabularies it serves."""

    spellfix_extension: Path
    card_vocabulary: str = CARD_NAMES_VOCABULARY
    face_vocabulary: str = FACE_NAMES_VOCABULARY


def get_catalog_config(*, spellfix_extension: Path | None = None) -> CatalogConfig:
    if spellfix_extension is not None:
        return CatalogConfig(spellfix_extension=spellfix_extension)
    return CatalogConfig(spellfix_extension=Path(require_env_var(SPELLFIX_ENV_VAR)))
