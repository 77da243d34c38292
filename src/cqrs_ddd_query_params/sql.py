"""
Relational rendering: parameterized clause fragment plus positional args.

Placeholders are always ``?``; drivers that use another paramstyle
convert the assembled statement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .exceptions import UnknownMethodError
from .methods import (
    COMPARISON_METHODS,
    LIST_METHODS,
    NULL_METHODS,
    PATTERN_METHODS,
    SQL_OPERATORS,
    Method,
)
from .values import NULL, as_list

if TYPE_CHECKING:
    from .filter import Filter

_PLACEHOLDER = "?"


def _null_only(f: Filter) -> UnknownMethodError:
    return UnknownMethodError(
        f.method.value, reason=f"{f.method.value} can only be used with NULL."
    )


def like_pattern(value: str) -> str:
    """Rewrite a leading/trailing ``*`` to the SQL ``%`` wildcard."""
    if len(value) >= 2 and value.startswith("*"):
        value = "%" + value[1:]
    if len(value) >= 2 and value.endswith("*"):
        value = value[:-1] + "%"
    return value


def where(f: Filter) -> str:
    """Return the clause fragment for *f*."""
    method = f.method
    if method in COMPARISON_METHODS or method in PATTERN_METHODS:
        return f"{f.name} {SQL_OPERATORS[method]} {_PLACEHOLDER}"
    if method in NULL_METHODS:
        if f.value is NULL:
            return f"{f.name} {SQL_OPERATORS[method]} NULL"
        raise _null_only(f)
    if method in LIST_METHODS:
        placeholders = ",".join(_PLACEHOLDER for _ in as_list(f.value))
        return f"{f.name} {SQL_OPERATORS[method]} ({placeholders})"
    if method is Method.RAW:
        return f.name
    raise UnknownMethodError(method.value)


def args(f: Filter) -> list[Any]:
    """Return the positional arguments for :func:`where`, in order."""
    method = f.method
    if method in COMPARISON_METHODS:
        return [f.value]
    if method in PATTERN_METHODS:
        return [like_pattern(str(f.value))]
    if method in NULL_METHODS:
        if f.value is NULL:
            return []
        raise _null_only(f)
    if method in LIST_METHODS:
        return as_list(f.value)
    if method is Method.RAW:
        return []
    raise UnknownMethodError(method.value)


def render(f: Filter) -> tuple[str, list[Any]]:
    """Return ``(clause, args)`` for *f*."""
    return where(f), args(f)
