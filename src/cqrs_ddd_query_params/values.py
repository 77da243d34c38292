"""Declared value types and the NULL sentinel."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from bson import ObjectId


class ValueType(str, Enum):
    """Type declared for a field with the ``field:type`` declarator suffix."""

    INT = "int"
    BOOL = "bool"
    MONGOID = "mongoid"
    STRING = "string"

    @classmethod
    def from_suffix(cls, suffix: str | None) -> ValueType:
        """Map a declarator suffix to a value type; unknown suffixes are strings."""
        return _SUFFIXES.get(suffix or "", cls.STRING)


_SUFFIXES: dict[str, ValueType] = {
    "int": ValueType.INT,
    "i": ValueType.INT,
    "bool": ValueType.BOOL,
    "b": ValueType.BOOL,
    "mongoid": ValueType.MONGOID,
}


class NullType:
    """Singleton marking the ``NULL`` literal used with ``IS`` and ``NOT``."""

    _instance: NullType | None = None

    def __new__(cls) -> NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NULL"


NULL = NullType()

NULL_LITERAL = "NULL"

Scalar = Union[int, bool, str, "ObjectId"]
FilterValue = Union[
    Scalar,
    NullType,
    tuple[int, ...],
    tuple[str, ...],
    tuple["ObjectId", ...],
]


def is_null_literal(token: str) -> bool:
    return token.upper() == NULL_LITERAL


def as_list(value: object) -> list[object]:
    """Flatten a filter value into one element per list item."""
    if isinstance(value, tuple | list):
        return list(value)
    return [value]
