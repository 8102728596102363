"""Translate snapshot records into catalog table rows."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

from cardledger.domain.normalize import normalize_name

if TYPE_CHECKING:
    from .schema import CardRecord


class CatalogCardRow(TypedDict):
    id: str
    name: str
    printed_name: str | None
    uri: str
    set_name: str
    promo: bool


class CatalogFaceRow(TypedDict):
    id: str
    name: str


def translate_card(record: CardRecord) -> tuple[CatalogCardRow, list[CatalogFaceRow]]:
    """Return the catalog row and face rows for one snapshot record.

    Names are stored normalized; faces prefer their printed (localized) name.
    """

    card: CatalogCardRow = {
        "id": record.id,
        "name": normalize_name(record.name),
        "printed_name": normalize_name(record.printed_name) if record.printed_name else None,
        "uri": record.scryfall_uri,
        "set_name": record.set_name,
        "promo": record.promo,
    }
    seen: set[str] = set()
    faces: list[CatalogFaceRow] = []
    for face in record.card_faces:
        face_name = normalize_name(face.printed_name or face.name)
        if face_name in seen:
            continue
        seen.add(face_name)
        faces.append({"id": record.id, "name": face_name})
    return card, faces
