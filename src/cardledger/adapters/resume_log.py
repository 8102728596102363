"""File-backed resume log for aborted list applications."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from cardledger.domain.model import UID_PREFIX

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from cardledger.domain.model import CardList, LiteralIdLine

log = logging.getLogger(__name__)


class FileResumeLog:
    """Write ``uid=<hex>``, then one literal record per resolved line.

    Each record is flushed and synced before the caller touches the matching
    counter, so the file survives a crash of the main transaction.
    """

    def __init__(self, path: Path, fingerprint: bytes) -> None:
        self.path = path
        self._handle = path.open("w", encoding="utf-8")
        self._write_line(f"{UID_PREFIX}{fingerprint.hex()}")
        log.debug("Opened resume log %s", path)

    @classmethod
    def factory(cls, path: Path) -> Callable[[CardList], FileResumeLog]:
        def open_for(card_list: CardList) -> FileResumeLog:
            return cls(path, card_list.fingerprint)

        return open_for

    def record(self, line: LiteralIdLine) -> None:
        self._write_line(line.render())

    def record_unprocessed(self, lines: Iterable[str]) -> None:
        count = 0
        for line in lines:
            self._handle.write(f"{line}\n")
            count += 1
        self._sync()
        log.info("Saved %d unprocessed lines to %s", count, self.path)

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def _write_line(self, line: str) -> None:
        self._handle.write(f"{line}\n")
        self._sync()

    def _sync(self) -> None:
        self._handle.flush()
        os.fsync(self._handle.fileno())


if TYPE_CHECKING:
    from cardledger.domain.ports import ResumeLog

    _resume_check: ResumeLog = FileResumeLog(Path(), b"")
