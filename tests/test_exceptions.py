"""Tests for exceptions module."""

from __future__ import annotations

from cqrs_ddd_query_params.exceptions import (
    BadFormatError,
    MethodNotAllowedError,
    QueryParamError,
    UnknownMethodError,
    ValidationNotFoundError,
)


def test_all_errors_share_base() -> None:
    for err in (
        ValidationNotFoundError("x"),
        UnknownMethodError("FOO"),
        BadFormatError("abc", "int"),
        MethodNotAllowedError("LIKE", "int"),
    ):
        assert isinstance(err, QueryParamError)


def test_base_to_dict() -> None:
    err = QueryParamError("boom")
    assert err.to_dict() == {"error": "QueryParamError", "message": "boom"}


def test_unknown_method_without_candidates() -> None:
    err = UnknownMethodError("ZZZ")
    assert err.suggestions == []
    assert "ZZZ" in str(err)


def test_unknown_method_reason() -> None:
    err = UnknownMethodError("IS", reason="IS can only be used with NULL.")
    assert "only be used with NULL" in str(err)


def test_bad_format_to_dict() -> None:
    d = BadFormatError("abc", "int").to_dict()
    assert d == {
        "error": "BAD_FORMAT",
        "message": "Bad format: 'abc' is not a valid int",
        "value": "abc",
        "value_type": "int",
    }


def test_method_not_allowed_message() -> None:
    assert "list of bool" in str(MethodNotAllowedError("EQ", "bool", multiple=True))
    d = MethodNotAllowedError("LIKE", "int").to_dict()
    assert d["error"] == "METHOD_NOT_ALLOWED"
    assert d["multiple"] is False
