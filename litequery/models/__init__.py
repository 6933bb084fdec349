"""Data models"""
from .values import (
    FieldValue,
    ParameterSet,
    ResultRow,
    SqlValue,
    normalise_parameters,
    parameter_name,
    row_to_record,
)

__all__ = [
    "FieldValue",
    "ParameterSet",
    "ResultRow",
    "SqlValue",
    "normalise_parameters",
    "parameter_name",
    "row_to_record",
]
