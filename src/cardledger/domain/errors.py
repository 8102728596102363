"""Error taxonomy shared by the resolution engine and its adapters."""

from __future__ import annotations


class CardLedgerError(Exception):
    """Base class for every error raised on purpose by cardledger."""


class InputError(CardLedgerError):
    """The card list could not be read or its header is malformed."""


class ResolutionError(CardLedgerError):
    """A line could not be turned into a catalog identifier."""


class CatalogLookupError(ResolutionError):
    """A catalog or fuzzy-index query failed."""

    def __init__(self, query: str, token: str) -> None:
        super().__init__(f"Catalog query {query!r} failed for {token!r}")
        self.query = query
        self.token = token


class UnresolvedTokenError(ResolutionError):
    """No candidate could be presented for a token."""

    def __init__(self, token: str) -> None:
        super().__init__(f"No catalog candidate for {token!r}")
        self.token = token


class ListApplicationError(CardLedgerError):
    """Applying a card list failed at a specific line."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"Failed to apply line {line_number} ({line!r})")
        self.line_number = line_number
        self.line = line
