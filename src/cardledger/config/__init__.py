"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    CARD_NAMES_VOCABULARY,
    FACE_NAMES_VOCABULARY,
    SPELLFIX_ENV_VAR,
    CatalogConfig,
    get_catalog_config,
)
from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_storage_config,
    sqlite_uri,
)

__all__ = [
    "CARD_NAMES_VOCABULARY",
    "FACE_NAMES_VOCABULARY",
    "SPELLFIX_ENV_VAR",
    "CatalogConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "get_catalog_config",
    "get_database_config",
    "get_storage_config",
    "require_env_var",
    "require_env_vars",
    "sqlite_uri",
]
