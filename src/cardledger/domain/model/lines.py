"""Card list lines and the list container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

FOIL_MARKER: Final[str] = "[F]"
LITERAL_ID_MARKER: Final[str] = "[id]"
DOUBLE_FACED_SEPARATOR: Final[str] = "//"
UID_PREFIX: Final[str] = "uid="


@dataclass(frozen=True, slots=True)
class TextLine:
    """A card name that has to go through resolution."""

    token: str
    variant: bool = False

    @property
    def is_double_faced(self) -> bool:
        return DOUBLE_FACED_SEPARATOR in self.token

    def faces(self) -> tuple[str, str]:
        first, _, second = self.token.partition(DOUBLE_FACED_SEPARATOR)
        return first.strip(), second.strip()


@dataclass(frozen=True, slots=True)
class LiteralIdLine:
    """A catalog id recorded by an earlier run, replayed without lookup."""

    catalog_id: str
    variant: bool = False

    def render(self) -> str:
        marker = FOIL_MARKER if self.variant else ""
        return f"{LITERAL_ID_MARKER}{marker}{self.catalog_id}"


type InputLine = TextLine | LiteralIdLine


@dataclass(frozen=True, slots=True)
class CardList:
    """The raw lines of a list together with its idempotency fingerprint."""

    fingerprint: bytes
    lines: tuple[str, ...]
    line_numbers: tuple[int, ...] = ()

    @property
    def fingerprint_hex(self) -> str:
        return self.fingerprint.hex()

    def line_number(self, index: int) -> int:
        """Position of ``lines[index]`` in the source file, 1-based."""

        if index < len(self.line_numbers):
            return self.line_numbers[index]
        return index + 1
