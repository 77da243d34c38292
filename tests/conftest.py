"""Shared fixtures for query parameter tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_query_params import FilterParser, one_of


@pytest.fixture
def validations():
    """Declarations covering every value type."""
    return {
        "id:int": None,
        "doc:mongoid": None,
        "active:bool": None,
        "name": None,
        "email": None,
        "status": one_of("active", "archived"),
    }


@pytest.fixture
def parser(validations):
    return FilterParser(validations)
