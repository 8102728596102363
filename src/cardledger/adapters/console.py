"""Terminal prompter built on rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt

if TYPE_CHECKING:
    from typing import TextIO

    from cardledger.domain.model import Candidate


class RichPrompter:
    """Ask the operator on the terminal; ``stream`` overrides stdin."""

    def __init__(self, console: Console | None = None, *, stream: TextIO | None = None) -> None:
        self.console = console or Console()
        self.stream = stream

    def announce(self, text: str) -> None:
        self.console.print(escape(text))

    def show_choice(self, index: int, candidate: Candidate) -> None:
        score = "" if candidate.match_score is None else f"{candidate.match_score:g}"
        promo = " [promo]" if candidate.is_promo else ""
        self.console.print(
            escape(
                f"  - [{index}] {candidate.display_name} - {candidate.set_name}{promo} "
                f"[{score}]({candidate.source_uri})"
            ),
            highlight=False,
        )

    def ask_index(self, question: str) -> int:
        return IntPrompt.ask(escape(question), console=self.console, stream=self.stream)

    def confirm(self, question: str, *, default: bool) -> bool:
        return Confirm.ask(
            escape(question),
            console=self.console,
            default=default,
            stream=self.stream,
        )


if TYPE_CHECKING:
    from cardledger.domain.ports import Prompter

    _prompter_check: Prompter = RichPrompter()
