#!/usr/bin/env python3
"""Create a database under the data root and optionally seed it from a YAML file.

Seed file format:

    statements:
      - sql: CREATE TABLE t (id INTEGER, name TEXT)
      - sql: INSERT INTO t (id, name) VALUES (@id, @name)
        params: {"@id": 1, "@name": george}
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import yaml

from litequery.config import get_settings
from litequery.db import ConnectionFactory, ConnectionHandle, execute_non_query


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize a database file")
    parser.add_argument("database", type=str, help="Database file name, relative to the data root")
    parser.add_argument("--data-root", type=str, help="Override the configured data root")
    parser.add_argument("--seed", type=str, help="YAML file with statements to run")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    factory = ConnectionFactory(data_root=args.data_root, settings=settings)
    handle = factory.connect(args.database, create_if_missing=True)
    print(f"Database ready at: {handle.path}")

    if args.seed:
        _seed(handle, Path(args.seed))

    print("Done.")
    return 0


def _seed(handle: ConnectionHandle, path: Path) -> None:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    for i, stmt in enumerate(data.get("statements", []), start=1):
        count = execute_non_query(handle, stmt["sql"], stmt.get("params"))
        print(f"  [{i}] {count} row(s) affected")


if __name__ == "__main__":
    sys.exit(main())
