"""Database layer — connection factory, handles and statement executors."""

from litequery.db.connection import ConnectionHandle, ConnectionString
from litequery.db.executor import execute_many, execute_non_query, execute_one, execute_query
from litequery.db.factory import ConnectionFactory, connect, create_database_file

__all__ = [
    "ConnectionFactory",
    "ConnectionHandle",
    "ConnectionString",
    "connect",
    "create_database_file",
    "execute_many",
    "execute_non_query",
    "execute_one",
    "execute_query",
]
