from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Method(str, Enum):
    """Comparison and membership methods accepted in ``name[method]`` keys."""

    EQ = "EQ"
    NE = "NE"
    GT = "GT"
    LT = "LT"
    GTE = "GTE"
    LTE = "LTE"
    LIKE = "LIKE"
    ILIKE = "ILIKE"
    NLIKE = "NLIKE"
    NILIKE = "NILIKE"
    IS = "IS"
    NOT = "NOT"
    IN = "IN"
    NIN = "NIN"

    # Pre-built expression, never parsed from a key
    RAW = "RAW"


# Relational spelling of every method that can appear in a key
SQL_OPERATORS: MappingProxyType[Method, str] = MappingProxyType(
    {
        Method.EQ: "=",
        Method.NE: "<>",
        Method.GT: ">",
        Method.LT: "<",
        Method.GTE: ">=",
        Method.LTE: "<=",
        Method.LIKE: "LIKE",
        Method.ILIKE: "ILIKE",
        Method.NLIKE: "NOT LIKE",
        Method.NILIKE: "NOT ILIKE",
        Method.IN: "IN",
        Method.NIN: "NOT IN",
        Method.IS: "IS",
        Method.NOT: "IS NOT",
    }
)

COMPARISON_METHODS: frozenset[Method] = frozenset(
    {Method.EQ, Method.NE, Method.GT, Method.LT, Method.GTE, Method.LTE}
)
PATTERN_METHODS: frozenset[Method] = frozenset(
    {Method.LIKE, Method.ILIKE, Method.NLIKE, Method.NILIKE}
)
CASE_INSENSITIVE_METHODS: frozenset[Method] = frozenset({Method.ILIKE, Method.NILIKE})
NEGATED_PATTERN_METHODS: frozenset[Method] = frozenset({Method.NLIKE, Method.NILIKE})
NULL_METHODS: frozenset[Method] = frozenset({Method.IS, Method.NOT})
LIST_METHODS: frozenset[Method] = frozenset({Method.IN, Method.NIN})


def lookup_method(token: str) -> Method | None:
    """Return the key-parsable method for an upper-cased token, or None."""
    try:
        method = Method(token)
    except ValueError:
        return None
    return method if method in SQL_OPERATORS else None


def key_method_names() -> list[str]:
    """Method tokens accepted inside key brackets."""
    return [m.value for m in SQL_OPERATORS]
