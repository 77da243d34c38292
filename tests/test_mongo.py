"""Tests for MongoDB predicate rendering."""

from __future__ import annotations

import re

import pytest
from bson import ObjectId
from bson.regex import Regex

from cqrs_ddd_query_params import (
    Filter,
    Method,
    MethodNotAllowedError,
    UnknownMethodError,
    new_filter,
)
from cqrs_ddd_query_params.mongo import document, predicate, regex_pattern
from cqrs_ddd_query_params.sql import like_pattern

OID_A = "64e9c6d61209c16ffaa3062e"
OID_B = "64e9c6d61209c16ffaa3062f"


def test_eq_is_bare_value(parser) -> None:
    assert predicate(parser.parse("name", "tim")) == "tim"
    assert predicate(parser.parse("active", "true")) is True


@pytest.mark.parametrize(
    ("method", "operator"),
    [("ne", "$ne"), ("gt", "$gt"), ("lt", "$lt"), ("gte", "$gte"), ("lte", "$lte")],
)
def test_comparison_operators(parser, method, operator) -> None:
    assert predicate(parser.parse(f"id[{method}]", "5")) == {operator: 5}


def test_in_list() -> None:
    f = new_filter("id[in]", "5,6,7", ",", {"id:int": None})
    assert predicate(f) == {"$in": [5, 6, 7]}


def test_nin_object_ids(parser) -> None:
    f = parser.parse("doc[nin]", f"{OID_A},{OID_B}")
    assert document(f) == {"_id": {"$nin": [ObjectId(OID_A), ObjectId(OID_B)]}}


def test_like_unanchored_case_sensitive() -> None:
    f = new_filter("name[like]", "*tim*", ",", {"name": None})
    result = predicate(f)
    regex = result["$regex"]
    assert isinstance(regex, Regex)
    assert regex.pattern == "tim"
    assert not regex.flags & re.IGNORECASE


def test_ilike_sets_case_insensitive_flag(parser) -> None:
    regex = predicate(parser.parse("name[ilike]", "tim*"))["$regex"]
    assert regex.pattern == "^tim"
    assert regex.flags & re.IGNORECASE


@pytest.mark.parametrize("method", ["nlike", "nilike"])
def test_negated_patterns(parser, method) -> None:
    result = predicate(parser.parse(f"name[{method}]", "*tim"))
    assert set(result) == {"$not"}
    assert result["$not"]["$regex"].pattern == "tim$"


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("tim", "^tim$"),
        ("*tim", "tim$"),
        ("tim*", "^tim"),
        ("*tim*", "tim"),
        ("t*m", "^t*m$"),
        ("a.b", "^a.b$"),
        ("a.b*", "^a.b"),
        ("*", "$"),
    ],
)
def test_regex_pattern(pattern, expected) -> None:
    assert regex_pattern(pattern) == expected


def test_not_null_means_exists() -> None:
    calls = []
    f = new_filter("active[not]", "null", ",", {"active": calls.append})
    assert predicate(f) == {"$exists": True}
    assert f.where() == "active IS NOT NULL"
    assert f.args() == []
    assert calls == []


def test_is_null_means_missing(parser) -> None:
    assert predicate(parser.parse("email[is]", "NULL")) == {"$exists": False}


def test_is_with_value_not_allowed() -> None:
    f = Filter(key="email[not]", name="email", method=Method.NOT, value="x")
    with pytest.raises(MethodNotAllowedError):
        predicate(f)


def test_raw_has_no_document_form() -> None:
    with pytest.raises(UnknownMethodError):
        predicate(Filter.raw("a = 1"))


def test_rendering_is_repeatable(parser) -> None:
    f = parser.parse("name[nilike]", "*tim*")
    assert predicate(f) == predicate(f)
    assert f.mongo() == predicate(f)


@pytest.mark.parametrize(
    ("raw", "pattern"),
    [("t*m", "^t*m$"), ("a.b*", "^a.b"), ("*x|y*", "x|y")],
)
def test_pattern_body_is_not_escaped(raw: str, pattern: str) -> None:
    f = new_filter("name[like]", raw, ",", {"name": None})
    assert f.mongo()["$regex"].pattern == pattern
    assert f.args() == [like_pattern(raw)]
