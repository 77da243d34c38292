"""
Ready-made validators for declarations.

Each factory returns a callable that raises :class:`InvalidValueError`
when the value is rejected::

    validations = {
        "status": one_of("active", "archived"),
        "age:int": min_max(18, 120),
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .exceptions import InvalidValueError

if TYPE_CHECKING:
    from .declarations import Validator


def one_of(*allowed: Any) -> Validator:
    """Accept only values present in *allowed*."""
    choices = frozenset(allowed)

    def validate(value: Any) -> None:
        if value not in choices:
            raise InvalidValueError(
                f"{value!r} is not one of: {', '.join(sorted(map(str, choices)))}",
                value,
            )

    return validate


def min_value(minimum: int) -> Validator:
    def validate(value: Any) -> None:
        if value < minimum:
            raise InvalidValueError(f"{value!r} is lower than {minimum}", value)

    return validate


def max_value(maximum: int) -> Validator:
    def validate(value: Any) -> None:
        if value > maximum:
            raise InvalidValueError(f"{value!r} is greater than {maximum}", value)

    return validate


def min_max(minimum: int, maximum: int) -> Validator:
    """Accept values in the closed range ``[minimum, maximum]``."""
    if minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
    return all_of(min_value(minimum), max_value(maximum))


def not_empty() -> Validator:
    def validate(value: Any) -> None:
        if isinstance(value, str) and not value.strip():
            raise InvalidValueError("value must not be empty", value)

    return validate


def all_of(*validators: Validator) -> Validator:
    """Run *validators* in order; the first failure wins."""

    def validate(value: Any) -> Any:
        for validator in validators:
            result = validator(value)
            if isinstance(result, BaseException):
                return result
        return None

    return validate
