"""Tests for declarator parsing and resolution."""

from __future__ import annotations

import pytest

from cqrs_ddd_query_params.declarations import Declaration, ValidationSpec
from cqrs_ddd_query_params.exceptions import ValidationNotFoundError
from cqrs_ddd_query_params.values import ValueType


@pytest.mark.parametrize(
    ("declarator", "field", "value_type"),
    [
        ("id", "id", ValueType.STRING),
        ("id:int", "id", ValueType.INT),
        ("id:i", "id", ValueType.INT),
        ("flag:bool", "flag", ValueType.BOOL),
        ("flag:b", "flag", ValueType.BOOL),
        ("doc:mongoid", "doc", ValueType.MONGOID),
        ("name:str", "name", ValueType.STRING),
        ("limit:required", "limit", ValueType.STRING),
        ("age:int:required", "age", ValueType.INT),
    ],
)
def test_parse_declarator(declarator, field, value_type) -> None:
    declaration = Declaration.parse(declarator)
    assert declaration.field == field
    assert declaration.value_type is value_type
    assert declaration.validator is None


def test_resolve_returns_validator() -> None:
    def check(value):
        return None

    spec = ValidationSpec.from_mapping({"age:int": check, "name": None})
    assert spec.validator_for("age") is check
    assert spec.validator_for("name") is None
    assert spec.type_for("age") is ValueType.INT
    assert "name" in spec
    assert len(spec) == 2


def test_first_declarator_wins() -> None:
    spec = ValidationSpec.from_mapping({"id:int": None, "id:mongoid": None})
    assert spec.type_for("id") is ValueType.INT


def test_undeclared_field() -> None:
    spec = ValidationSpec.from_mapping({"id:int": None})
    with pytest.raises(ValidationNotFoundError) as exc_info:
        spec.resolve("x")
    assert exc_info.value.field == "x"
    assert exc_info.value.to_dict() == {
        "error": "VALIDATION_NOT_FOUND",
        "message": "No validation declared for field 'x'",
        "field": "x",
    }


def test_name_part_must_match_exactly() -> None:
    spec = ValidationSpec.from_mapping({"identifier:int": None})
    with pytest.raises(ValidationNotFoundError):
        spec.resolve("id")


def test_empty_mapping() -> None:
    spec = ValidationSpec.from_mapping(None)
    assert len(spec) == 0
    assert list(spec) == []
