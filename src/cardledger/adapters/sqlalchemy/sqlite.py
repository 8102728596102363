"""Engine hooks for SQLite connections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import event

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

log = logging.getLogger(__name__)


def install_transactional_ddl(engine: Engine) -> None:
    """Let SQLAlchemy emit BEGIN itself so DROP and CREATE roll back with the data.

    pysqlite commits pending work before DDL on its own. Disabling its
    transaction handling and beginning explicitly keeps catalog rebuilds
    atomic.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection: Any, _connection_record: object) -> None:  # pyright: ignore[reportUnusedFunction]
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(connection: Connection) -> None:  # pyright: ignore[reportUnusedFunction]
        connection.exec_driver_sql("BEGIN")

    log.debug("Enabled transactional DDL for %s", engine.url)
