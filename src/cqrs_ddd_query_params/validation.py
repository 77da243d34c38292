"""Invocation of user validators on coerced values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .values import NullType

if TYPE_CHECKING:
    from .declarations import Validator
    from .values import FilterValue


def _check(validator: Validator, value: Any) -> None:
    result = validator(value)
    if isinstance(result, BaseException):
        raise result


def apply_validator(validator: Validator | None, value: FilterValue) -> None:
    """
    Run *validator* against a coerced value.

    The NULL sentinel is never validated. Tuples are validated element by
    element and the first failure is raised. A validator fails either by
    raising or by returning an exception instance; both reach the caller
    unchanged.
    """
    if validator is None or isinstance(value, NullType):
        return
    if isinstance(value, tuple):
        for item in value:
            _check(validator, item)
    else:
        _check(validator, value)
