"""Typed query-string filters rendered to SQL clauses and MongoDB predicates."""

from __future__ import annotations

from .declarations import Declaration, ValidationSpec
from .exceptions import (
    BadFormatError,
    InvalidValueError,
    MethodNotAllowedError,
    QueryParamError,
    UnknownMethodError,
    ValidationNotFoundError,
)
from .filter import Filter, ORState
from .keys import parse_key
from .methods import SQL_OPERATORS, Method
from .parser import FilterParser, new_filter
from .validators import all_of, max_value, min_max, min_value, not_empty, one_of
from .values import NULL, ValueType

__all__ = [
    # Core types
    "Filter",
    "Method",
    "ORState",
    "ValueType",
    "NULL",
    "SQL_OPERATORS",
    # Parsing
    "FilterParser",
    "new_filter",
    "parse_key",
    "Declaration",
    "ValidationSpec",
    # Validators
    "all_of",
    "max_value",
    "min_max",
    "min_value",
    "not_empty",
    "one_of",
    # Exceptions
    "QueryParamError",
    "ValidationNotFoundError",
    "UnknownMethodError",
    "BadFormatError",
    "MethodNotAllowedError",
    "InvalidValueError",
]
