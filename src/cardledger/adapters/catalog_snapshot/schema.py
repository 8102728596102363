"""Minimal Pydantic models for catalog snapshot records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CardFaceRecord(SnapshotBaseModel):
    name: str
    printed_name: str | None = None


class CardRecord(SnapshotBaseModel):
    id: str
    name: str
    printed_name: str | None = None
    scryfall_uri: str
    set_name: str
    promo: bool = False
    card_faces: list[CardFaceRecord] = Field(default_factory=list["CardFaceRecord"])
