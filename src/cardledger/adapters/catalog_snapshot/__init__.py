"""Catalog snapshot ingestion."""

from __future__ import annotations

from .loader import CatalogLoadResult, iter_snapshot, load_catalog_snapshot
from .schema import CardFaceRecord, CardRecord
from .translator import translate_card

__all__ = [
    "CardFaceRecord",
    "CardRecord",
    "CatalogLoadResult",
    "iter_snapshot",
    "load_catalog_snapshot",
    "translate_card",
]
