"""Application of a whole card list to the owned-card counters.

The list is applied inside one unit of work: either every counter update and
the list fingerprint commit together, or nothing does. When a resume log is
configured, every resolved line is logged before its counter is touched, and
the unprocessed remainder is written verbatim if the run aborts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from cardledger.domain.errors import ListApplicationError
from cardledger.domain.list_input import parse_line
from cardledger.domain.model import CardCountKey, LiteralIdLine, SessionMemory, TextLine
from cardledger.domain.resolution import PAGE_SIZE, CandidateResolver, DisambiguationSession

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cardledger.domain.model import Candidate, CardList, InputLine, Resolution
    from cardledger.domain.ports import LedgerRepositories, LedgerUnitOfWork, Prompter, ResumeLog

type UnitOfWorkFactory = Callable[[], LedgerUnitOfWork]
type ResumeLogFactory = Callable[[CardList], ResumeLog]

ALREADY_APPLIED_QUESTION = "This list was already added, do you want to continue"

log = logging.getLogger(__name__)


class ApplyState(StrEnum):
    START = "start"
    FINGERPRINT_CHECK = "fingerprint_check"
    PROCESSING = "processing"
    FINALIZE = "finalize"
    DONE = "done"
    ABORTED = "aborted"


class ApplyStatus(StrEnum):
    APPLIED = "applied"
    SKIPPED = "skipped"


@dataclass(slots=True)
class ApplyListResult:
    """Outcome of one list application."""

    fingerprint: bytes
    status: ApplyStatus
    lines_applied: int = 0
    prompts: int = 0


def apply_card_list(
    card_list: CardList,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    prompter: Prompter,
    resume_log_factory: ResumeLogFactory | None = None,
    page_size: int = PAGE_SIZE,
) -> ApplyListResult:
    """Resolve every line of ``card_list`` and add it to the counters atomically."""

    application = ListApplication(
        card_list,
        unit_of_work_factory=unit_of_work_factory,
        prompter=prompter,
        resume_log_factory=resume_log_factory,
        page_size=page_size,
    )
    return application.run()


class ListApplication:
    """One run of the list applier; owns the session memory for that run."""

    def __init__(
        self,
        card_list: CardList,
        *,
        unit_of_work_factory: UnitOfWorkFactory,
        prompter: Prompter,
        resume_log_factory: ResumeLogFactory | None = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.card_list = card_list
        self.state = ApplyState.START
        self.memory = SessionMemory()
        self._unit_of_work_factory = unit_of_work_factory
        self._prompter = prompter
        self._resume_log_factory = resume_log_factory
        self._session = DisambiguationSession(prompter, page_size=page_size)
        self._prompts = 0

    def run(self) -> ApplyListResult:
        fingerprint = self.card_list.fingerprint
        applied = 0
        try:
            with self._unit_of_work_factory() as uow:
                repositories = uow.repositories
                self._transition(ApplyState.FINGERPRINT_CHECK)
                if repositories.applied_lists.contains(fingerprint) and not (
                    self._prompter.confirm(ALREADY_APPLIED_QUESTION, default=False)
                ):
                    log.info("List %s already applied; skipping", self.card_list.fingerprint_hex)
                    self._transition(ApplyState.DONE)
                    return ApplyListResult(fingerprint=fingerprint, status=ApplyStatus.SKIPPED)

                resume_log = (
                    self._resume_log_factory(self.card_list) if self._resume_log_factory else None
                )
                try:
                    self._transition(ApplyState.PROCESSING)
                    applied = self._process(repositories, resume_log)
                    self._transition(ApplyState.FINALIZE)
                    repositories.applied_lists.add(fingerprint)
                    uow.commit()
                finally:
                    if resume_log is not None:
                        self._close_resume_log(resume_log)
        except BaseException:
            self._transition(ApplyState.ABORTED)
            raise

        self._transition(ApplyState.DONE)
        return ApplyListResult(
            fingerprint=fingerprint,
            status=ApplyStatus.APPLIED,
            lines_applied=applied,
            prompts=self._prompts,
        )

    def _process(self, repositories: LedgerRepositories, resume_log: ResumeLog | None) -> int:
        resolver = CandidateResolver(
            catalog=repositories.catalog,
            card_names=repositories.card_names,
            face_names=repositories.face_names,
        )
        lines = self.card_list.lines
        for index, raw in enumerate(lines):
            recorded = False
            try:
                outcome = self._resolve_line(resolver, parse_line(raw))
                if resume_log is not None:
                    resume_log.record(outcome)
                    recorded = True
                repositories.card_counts.increment(
                    CardCountKey(catalog_id=outcome.catalog_id, variant=outcome.variant)
                )
            except Exception as exc:
                self._flush_unprocessed(resume_log, lines, index + 1 if recorded else index)
                raise ListApplicationError(self.card_list.line_number(index), raw) from exc
            except BaseException:
                self._flush_unprocessed(resume_log, lines, index + 1 if recorded else index)
                raise
        return len(lines)

    def _resolve_line(self, resolver: CandidateResolver, line: InputLine) -> LiteralIdLine:
        resolution = resolver.resolve(line)
        token = line.token if isinstance(line, TextLine) else line.render()
        candidate = self._choose(token, resolution)
        return LiteralIdLine(catalog_id=candidate.catalog_id, variant=line.variant)

    def _choose(self, token: str, resolution: Resolution) -> Candidate:
        log.debug("Resolved %r via %s", token, resolution.kind)
        if not resolution.needs_operator:
            return resolution.candidates[0]
        self._prompts += 1
        return self._session.disambiguate(token, resolution.candidates, self.memory)

    def _flush_unprocessed(
        self,
        resume_log: ResumeLog | None,
        lines: Sequence[str],
        start: int,
    ) -> None:
        if resume_log is None:
            return
        remaining = lines[start:]
        log.warning(
            "Aborting list %s; saving %d unprocessed lines to the resume log",
            self.card_list.fingerprint_hex,
            len(remaining),
        )
        try:
            resume_log.record_unprocessed(remaining)
        except Exception:
            log.exception(
                "Could not save unprocessed lines of list %s", self.card_list.fingerprint_hex
            )

    def _close_resume_log(self, resume_log: ResumeLog) -> None:
        try:
            resume_log.close()
        except Exception:
            log.exception("Could not close resume log of list %s", self.card_list.fingerprint_hex)

    def _transition(self, state: ApplyState) -> None:
        log.debug("List %s: %s -> %s", self.card_list.fingerprint_hex, self.state, state)
        self.state = state
