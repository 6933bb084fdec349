"""litequery — parameterized SQLite queries over per-call connections."""

from litequery.config import Settings, get_settings
from litequery.db import (
    ConnectionFactory,
    ConnectionHandle,
    ConnectionString,
    connect,
    execute_many,
    execute_non_query,
    execute_one,
    execute_query,
)

__version__ = "1.0.0"

__all__ = [
    "ConnectionFactory",
    "ConnectionHandle",
    "ConnectionString",
    "Settings",
    "connect",
    "execute_many",
    "execute_non_query",
    "execute_one",
    "execute_query",
    "get_settings",
]
