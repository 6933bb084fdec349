#!/usr/bin/env python3
"""Quick check of database state: tables and row counts."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from litequery.config import get_settings
from litequery.db import ConnectionFactory, execute_one, execute_query


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show tables and row counts")
    parser.add_argument("database", type=str, help="Database file name, relative to the data root")
    parser.add_argument("--data-root", type=str, help="Override the configured data root")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    handle = ConnectionFactory(data_root=args.data_root, settings=settings).connect(args.database)
    print(f"=== {handle.path} ===")

    tables = execute_query(
        handle,
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name",
    )
    print(f"Tables: {len(tables)}")
    for t in tables:
        # Table names cannot be bound as parameters
        quoted = t["name"].replace('"', '""')
        row = execute_one(handle, f'SELECT COUNT(*) AS n FROM "{quoted}"')
        print(f"  {t['name']:<30} {row['n']:>8}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
