"""Filter: one typed, validated predicate built from a query key/value pair."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from . import mongo, sql
from .methods import Method
from .values import NULL, FilterValue, ValueType


class ORState(str, Enum):
    """Position of a filter inside an OR group assembled by the caller."""

    NONE = "none"
    GROUP_START = "group_start"
    IN_GROUP = "in_group"
    GROUP_END = "group_end"


@dataclass(frozen=True)
class Filter:
    """
    Immutable filter.

    Attributes:
        key: Raw query key, e.g. ``"id[in]"``. Diagnostic only.
        name: Field name (the identity field for ``mongoid`` declarations).
        method: Resolved comparison method.
        value: Coerced value. Lists are stored as tuples.
        value_type: Declared type of the field.
        or_state: OR-group marker carried for the caller.
    """

    key: str
    name: str
    method: Method
    value: FilterValue
    value_type: ValueType = ValueType.STRING
    or_state: ORState = ORState.NONE

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError(f"Filter {self.key!r} has an empty field name")

    @classmethod
    def raw(cls, expression: str, *, or_state: ORState = ORState.NONE) -> Filter:
        """Wrap a pre-built SQL expression that is rendered verbatim."""
        return cls(
            key=expression,
            name=expression,
            method=Method.RAW,
            value=NULL,
            or_state=or_state,
        )

    @property
    def is_list(self) -> bool:
        return isinstance(self.value, tuple)

    @property
    def is_null(self) -> bool:
        return self.value is NULL

    def with_or_state(self, or_state: ORState) -> Filter:
        return dataclasses.replace(self, or_state=or_state)

    # -- rendering -------------------------------------------------------

    def where(self) -> str:
        """Relational clause fragment, e.g. ``"id IN (?,?)"``."""
        return sql.where(self)

    def args(self) -> list[Any]:
        """Positional arguments matching :meth:`where`."""
        return sql.args(self)

    def mongo(self) -> Any:
        """Document-store predicate for this field."""
        return mongo.predicate(self)
