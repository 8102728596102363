"""Parsing of card list files and their individual lines."""

from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING

from cardledger.domain.errors import InputError
from cardledger.domain.model import (
    FOIL_MARKER,
    LITERAL_ID_MARKER,
    UID_PREFIX,
    CardList,
    InputLine,
    LiteralIdLine,
    TextLine,
)

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


def read_card_list(path: Path) -> CardList:
    """Read and parse a card list file."""

    try:
        content = path.read_bytes()
        text = content.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Could not read card list {path}") from exc
    return parse_card_list(text, content=content)


def parse_card_list(text: str, *, content: bytes | None = None) -> CardList:
    """Split list text into lines and derive its fingerprint.

    A leading ``uid=<hex>`` line supplies the fingerprint explicitly; otherwise
    it is the SHA-256 of ``content``, the bytes as stored on disk (the UTF-8
    encoding of ``text`` when not given). Blank lines are dropped; kept lines
    remember their 1-based position in the file.
    """

    lines = text.splitlines()
    first_line = 1
    if lines and lines[0].startswith(UID_PREFIX):
        first_line = 2
        header = lines.pop(0).removeprefix(UID_PREFIX).strip()
        try:
            fingerprint = bytes.fromhex(header)
        except ValueError as exc:
            raise InputError(f"Could not decode list uid {header!r}") from exc
        if not fingerprint:
            raise InputError("List uid is empty")
    else:
        raw = content if content is not None else text.encode("utf-8")
        fingerprint = hashlib.sha256(raw).digest()

    numbered = [
        (number, line.rstrip())
        for number, line in enumerate(lines, start=first_line)
        if line.strip()
    ]
    log.debug("Parsed card list %s with %d lines", fingerprint.hex(), len(numbered))
    return CardList(
        fingerprint=fingerprint,
        lines=tuple(line for _, line in numbered),
        line_numbers=tuple(number for number, _ in numbered),
    )


def parse_line(raw: str) -> InputLine:
    """Classify one raw line as a literal id record or a text token."""

    line = raw.strip()
    if line.startswith(LITERAL_ID_MARKER):
        variant, catalog_id = _strip_variant(line.removeprefix(LITERAL_ID_MARKER))
        if not catalog_id:
            raise InputError(f"Literal id record without an id: {raw!r}")
        return LiteralIdLine(catalog_id=catalog_id, variant=variant)

    variant, token = _strip_variant(line)
    if not token:
        raise InputError(f"Line without a card name: {raw!r}")
    return TextLine(token=token, variant=variant)


def _strip_variant(value: str) -> tuple[bool, str]:
    if value.startswith(FOIL_MARKER):
        return True, value.removeprefix(FOIL_MARKER).strip()
    return False, value.strip()
