"""Name normalization shared by catalog loading and token lookup."""

from __future__ import annotations

from unidecode import unidecode


def normalize_name(value: str) -> str:
    """Transliterate to ASCII, lower-case and collapse whitespace.

    Catalog names are stored in this form, so tokens must be normalized the
    same way before exact lookups.
    """

    return " ".join(unidecode(value).lower().split())
