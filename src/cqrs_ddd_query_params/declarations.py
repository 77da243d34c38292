"""
Validation specification: which fields may be filtered, with which type,
and which extra check.

Callers declare fields with the ``"field"`` / ``"field:type"`` wire format::

    {
        "id:int": None,
        "email": None,
        "status": one_of("active", "archived"),
    }

The mapping is parsed once into :class:`Declaration` records; lookups
never re-split declarator strings.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .exceptions import ValidationNotFoundError
from .values import ValueType

Validator = Callable[[Any], Any]
Validations = Mapping[str, "Validator | None"]


@dataclass(frozen=True)
class Declaration:
    """One parsed declarator."""

    field: str
    value_type: ValueType = ValueType.STRING
    validator: Validator | None = None

    @classmethod
    def parse(
        cls, declarator: str, validator: Validator | None = None
    ) -> Declaration:
        """Parse ``"field"`` or ``"field:type"``; extra colon parts are ignored."""
        if ":" in declarator:
            field, suffix = declarator.split(":", 2)[:2]
        else:
            field, suffix = declarator, None
        return cls(field, ValueType.from_suffix(suffix), validator)


class ValidationSpec:
    """Read-only set of declarations keyed by field name."""

    def __init__(self, declarations: Mapping[str, Declaration] | None = None) -> None:
        self._declarations: Mapping[str, Declaration] = MappingProxyType(
            dict(declarations or {})
        )

    @classmethod
    def from_mapping(cls, validations: Validations | None) -> ValidationSpec:
        """
        Build a ValidationSpec from a declarator mapping.

        When a field is declared more than once, the first declarator
        in mapping order wins.
        """
        declarations: dict[str, Declaration] = {}
        for declarator, validator in (validations or {}).items():
            declaration = Declaration.parse(declarator, validator)
            declarations.setdefault(declaration.field, declaration)
        return cls(declarations)

    def resolve(self, field: str) -> Declaration:
        """Return the declaration for *field* or raise ValidationNotFoundError."""
        try:
            return self._declarations[field]
        except KeyError:
            raise ValidationNotFoundError(field) from None

    def validator_for(self, field: str) -> Validator | None:
        return self.resolve(field).validator

    def type_for(self, field: str) -> ValueType:
        return self.resolve(field).value_type

    def __contains__(self, field: object) -> bool:
        return field in self._declarations

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self._declarations.values())

    def __len__(self) -> int:
        return len(self._declarations)
