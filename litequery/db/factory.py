"""Connection factory — resolves database files under the data root."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from litequery.config import Settings, get_settings
from litequery.db.connection import ConnectionHandle, ConnectionString

logger = logging.getLogger(__name__)


class ConnectionFactory:
    """
    Builds closed connection handles for files under one data root.

    The root and connection flags are fixed at construction; pass a
    ``Settings`` (or just ``data_root``) to point the factory elsewhere.
    """

    def __init__(self, data_root: Optional[Path | str] = None, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        root = data_root if data_root is not None else self._settings.data_root
        self.data_root: Path = Path(root)

    def resolve(self, database_file_name: str) -> Path:
        """Return the absolute path for ``database_file_name`` under the root."""
        root = self.data_root.resolve()
        path = (root / database_file_name).resolve()
        if path == root:
            raise ValueError("database_file_name must name a file, not the data root")
        if not self._settings.allow_path_escape and not path.is_relative_to(root):
            raise ValueError(f"Database file {database_file_name!r} resolves outside {root}")
        return path

    def connect(self, database_file_name: str, create_if_missing: bool = False) -> ConnectionHandle:
        path = self.resolve(database_file_name)
        if create_if_missing:
            create_database_file(path)
        cs = ConnectionString(
            data_source=path,
            foreign_keys=self._settings.foreign_keys,
            timeout=self._settings.timeout,
        )
        return ConnectionHandle(cs)


def create_database_file(path: Path) -> bool:
    """Create an empty database at ``path`` unless one exists. Returns True if created."""
    if path.exists():
        logger.info(f"Using existing database at {path}")
        return False
    logger.info(f"Creating new database at {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    sqlite3.connect(str(path)).close()
    return True


def connect(database_file_name: str, create_if_missing: bool = False) -> ConnectionHandle:
    """Resolve ``database_file_name`` against the configured data root, read now."""
    return ConnectionFactory().connect(database_file_name, create_if_missing)
