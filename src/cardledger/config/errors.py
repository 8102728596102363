"""Configuration error definitions."""

from __future__ import annotations

from cardledger.domain.errors import CardLedgerError


class ConfigurationError(CardLedgerError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""
