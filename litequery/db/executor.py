"""Statement executors — one call, one open/close of the handle.

Driver errors (``sqlite3.Error`` subclasses) propagate unchanged; the
handle is closed on every exit path.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Iterable, Optional

from litequery.db.connection import ConnectionHandle
from litequery.models.values import ParameterSet, ResultRow, normalise_parameters, row_to_record
from litequery.utils.redact import describe_parameters, redact

logger = logging.getLogger(__name__)


def _affected(conn: sqlite3.Connection, cursor: sqlite3.Cursor, changes_before: int) -> int:
    # sqlite3 only counts statements that start with INSERT/UPDATE/DELETE/REPLACE;
    # anything else (DDL, WITH ... INSERT) reports -1, so fall back to the
    # connection's change counter. DDL leaves it untouched and yields 0.
    if cursor.rowcount >= 0:
        return cursor.rowcount
    return conn.total_changes - changes_before


def execute_non_query(handle: ConnectionHandle, sql: str, params: Optional[ParameterSet] = None) -> int:
    """Execute an INSERT/UPDATE/DELETE/DDL statement and return the affected row count."""
    logger.debug(f"Non-query on {handle.path.name}: {redact(sql)} [{describe_parameters(params)}]")
    with handle.session() as conn:
        before = conn.total_changes
        cursor = conn.execute(sql, normalise_parameters(params))
        count = _affected(conn, cursor, before)
    logger.debug(f"{count} row(s) affected")
    return count


def execute_query(handle: ConnectionHandle, sql: str, params: Optional[ParameterSet] = None) -> list[ResultRow]:
    """Execute a SELECT and return every row as a dict of column name -> value."""
    logger.debug(f"Query on {handle.path.name}: {redact(sql)} [{describe_parameters(params)}]")
    with handle.session() as conn:
        cursor = conn.execute(sql, normalise_parameters(params))
        if cursor.description is None:
            return []
        columns = [d[0] for d in cursor.description]
        rows = [row_to_record(columns, r) for r in cursor.fetchall()]
    logger.debug(f"{len(rows)} row(s) returned")
    return rows


def execute_one(handle: ConnectionHandle, sql: str, params: Optional[ParameterSet] = None) -> Optional[ResultRow]:
    """Execute a SELECT and return the first row, or None."""
    results = execute_query(handle, sql, params)
    return results[0] if results else None


def execute_many(handle: ConnectionHandle, sql: str, param_sets: Iterable[ParameterSet]) -> int:
    """Execute one statement once per parameter set; returns total affected rows."""
    logger.debug(f"Batch on {handle.path.name}: {redact(sql)}")
    with handle.session() as conn:
        before = conn.total_changes
        cursor = conn.executemany(sql, (normalise_parameters(p) for p in param_sets))
        count = _affected(conn, cursor, before)
    logger.debug(f"{count} row(s) affected")
    return count
