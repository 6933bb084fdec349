"""Connection handle — a lazily opened sqlite3 connection plus its connection string."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Generator, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionString:
    """Resolved data source plus the flags applied on every open."""

    data_source: Path
    foreign_keys: bool = True
    timeout: float = 5.0

    @property
    def uri(self) -> str:
        # mode=rw: never create the file implicitly on open
        return f"{self.data_source.resolve().as_uri()}?mode=rw"

    def __str__(self) -> str:
        return f"Data Source={self.data_source};Foreign Keys={self.foreign_keys}"


class ConnectionHandle:
    """
    Logical reference to a database session, open or closed.

    Created closed by the connection factory. Executors open it on demand
    and close it again when they finish, so one handle can serve many
    sequential calls but must not be shared between threads.

    Usage:
        handle = connect("app.db", create_if_missing=True)
        with handle.session() as conn:
            conn.execute("SELECT 1")
    """

    def __init__(self, connection_string: ConnectionString):
        self._connection_string = connection_string
        self._conn: Optional[sqlite3.Connection] = None

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"<ConnectionHandle {self._connection_string} ({state})>"

    @property
    def connection_string(self) -> ConnectionString:
        return self._connection_string

    @property
    def path(self) -> Path:
        return self._connection_string.data_source

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    # -- connection lifecycle --------------------------------------------------

    def open(self) -> sqlite3.Connection:
        """Open the connection if closed and return the driver connection."""
        if self._conn is None:
            cs = self._connection_string
            # isolation_level=None: autocommit, each statement is its own transaction
            conn = sqlite3.connect(
                cs.uri,
                uri=True,
                timeout=cs.timeout,
                isolation_level=None,
            )
            try:
                if cs.foreign_keys:
                    conn.execute("PRAGMA foreign_keys = ON")
            except Exception:
                conn.close()
                raise
            self._conn = conn
            logger.debug(f"Opened {cs}")
        return self._conn

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None
            logger.debug(f"Closed {self._connection_string}")

    @contextmanager
    def session(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Scoped acquisition of the connection.

        Opens if closed and closes on every exit path, including when the
        block raises. A handle that was already open on entry is closed too.
        """
        conn = self.open()
        try:
            yield conn
        finally:
            self.close()
