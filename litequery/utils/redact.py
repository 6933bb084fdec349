"""Literal redaction — keep values out of statement logs."""

from __future__ import annotations

import re
from typing import Optional

from litequery.models.values import ParameterSet

_PATTERNS = [
    (re.compile(r"[xX]'[0-9A-Fa-f]*'"), "[BLOB]"),
    (re.compile(r"'(?:[^']|'')*'"), "'[REDACTED]'"),
]


def redact(sql: str) -> str:
    for pattern, replacement in _PATTERNS:
        sql = pattern.sub(replacement, sql)
    return sql


def describe_parameters(params: Optional[ParameterSet]) -> str:
    """Parameter names only, e.g. ``@id, @name``."""
    if not params:
        return "-"
    return ", ".join(params.keys())
