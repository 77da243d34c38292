"""Document-store rendering: filter -> MongoDB query predicate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bson.regex import Regex

from .exceptions import MethodNotAllowedError, UnknownMethodError
from .methods import (
    CASE_INSENSITIVE_METHODS,
    LIST_METHODS,
    NEGATED_PATTERN_METHODS,
    PATTERN_METHODS,
    Method,
)
from .values import NULL, as_list

if TYPE_CHECKING:
    from .filter import Filter

_OPERATOR_METHODS = frozenset({Method.NE, Method.GT, Method.LT, Method.GTE, Method.LTE})


def _operator(method: Method) -> str:
    return "$" + method.value.lower()


def regex_pattern(value: str) -> str:
    """
    Translate a ``*`` wildcard pattern to an anchored regex.

    A leading ``*`` leaves the start unanchored, otherwise ``^`` is added;
    a trailing ``*`` leaves the end unanchored, otherwise ``$`` is added.
    The rest of the value is passed to the regex unchanged.
    """
    if value.startswith("*"):
        value = value[1:]
        prefix = ""
    else:
        prefix = "^"
    if value.endswith("*"):
        value = value[:-1]
        suffix = ""
    else:
        suffix = "$"
    return prefix + value + suffix


def _regex(f: Filter) -> dict[str, Any]:
    flags = "i" if f.method in CASE_INSENSITIVE_METHODS else ""
    condition: dict[str, Any] = {"$regex": Regex(regex_pattern(str(f.value)), flags)}
    if f.method in NEGATED_PATTERN_METHODS:
        return {"$not": condition}
    return condition


def predicate(f: Filter) -> Any:
    """
    Return the predicate for *f*'s field.

    ``EQ`` yields the bare value (implicit equality); every other method
    yields an operator document.
    """
    method = f.method
    if method is Method.EQ:
        return f.value
    if method in _OPERATOR_METHODS:
        return {_operator(method): f.value}
    if method in PATTERN_METHODS:
        return _regex(f)
    if method is Method.NOT or method is Method.IS:
        if f.value is not NULL:
            raise MethodNotAllowedError(method.value, f.value_type.value)
        return {"$exists": method is Method.NOT}
    if method in LIST_METHODS:
        return {_operator(method): as_list(f.value)}
    raise UnknownMethodError(method.value)


def document(f: Filter) -> dict[str, Any]:
    """Return ``{name: predicate}``, usable directly as a find() filter."""
    return {f.name: predicate(f)}
