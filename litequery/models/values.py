"""Value types shared by parameters and result rows."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

# Scalar kinds a parameter or result field can hold. SQLite BLOB columns come
# back as bytes, so results also admit that kind.
SqlValue = Union[int, float, str, bool, None]
FieldValue = Union[SqlValue, bytes]

ParameterSet = Mapping[str, SqlValue]
ResultRow = dict[str, FieldValue]

PARAM_PREFIXES = ("@", ":", "$")


def parameter_name(name: str) -> str:
    """Strip one placeholder prefix: ``@id`` -> ``id``."""
    if name and name[0] in PARAM_PREFIXES:
        return name[1:]
    return name


def normalise_parameters(params: Optional[ParameterSet]) -> dict[str, Any]:
    """Return a bind-ready dict keyed by bare parameter names.

    sqlite3 looks up named placeholders by name without the prefix, so
    ``{"@id": 1}`` and ``{"id": 1}`` both bind ``WHERE id = @id``. Names that
    match no placeholder are carried along and ignored by the driver.

    Raises ValueError when two keys name the same placeholder, e.g.
    ``{"@id": 1, "id": 2}``.
    """
    if not params:
        return {}
    bound: dict[str, Any] = {}
    for key, value in params.items():
        name = parameter_name(key)
        if name in bound:
            raise ValueError(f"Parameter {key!r} duplicates an earlier name for placeholder {name!r}")
        bound[name] = value
    return bound


def row_to_record(columns: list[str], row: tuple) -> ResultRow:
    """Copy one driver row into a record; SQL NULL arrives as ``None``."""
    return {col: value for col, value in zip(columns, row)}
