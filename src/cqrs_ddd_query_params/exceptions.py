"""
Query parameter exception hierarchy.

All exceptions inherit from ``QueryParamError`` and provide ``to_dict()``
for API-friendly error responses. Errors raised by user validators are
not wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class QueryParamError(Exception):
    """Base exception for all query parameter errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationNotFoundError(QueryParamError):
    """The field has no declarator in the validation specification."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"No validation declared for field {field!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_NOT_FOUND",
            "message": str(self),
            "field": self.field,
        }


class UnknownMethodError(QueryParamError):
    """
    Unknown operator token, or an operator that cannot be rendered
    for the filter's value.

    Provides fuzzy-matched suggestions when the valid methods are known.
    """

    def __init__(
        self,
        method: str,
        valid_methods: list[str] | None = None,
        reason: str | None = None,
    ) -> None:
        self.method = method
        self.valid_methods = valid_methods or []
        self.suggestions = get_close_matches(
            method, self.valid_methods, n=3, cutoff=0.6
        )

        message = f"Unknown method: '{method}'."
        if reason:
            message += f" {reason}"
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_METHOD",
            "message": str(self),
            "method": self.method,
            "suggestions": self.suggestions,
        }


class BadFormatError(QueryParamError):
    """A value token cannot be parsed into its declared type."""

    def __init__(self, value: str, value_type: str) -> None:
        self.value = value
        self.value_type = value_type
        super().__init__(f"Bad format: {value!r} is not a valid {value_type}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "BAD_FORMAT",
            "message": str(self),
            "value": self.value,
            "value_type": self.value_type,
        }


class MethodNotAllowedError(QueryParamError):
    """The operator is not allowed for this value type or cardinality."""

    def __init__(self, method: str, value_type: str, *, multiple: bool = False) -> None:
        self.method = method
        self.value_type = value_type
        self.multiple = multiple
        kind = f"list of {value_type}" if multiple else value_type
        super().__init__(f"Method '{method}' is not allowed for {kind} values")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "METHOD_NOT_ALLOWED",
            "message": str(self),
            "method": self.method,
            "value_type": self.value_type,
            "multiple": self.multiple,
        }


class InvalidValueError(QueryParamError):
    """Raised by the ready-made validators when a value is rejected."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_VALUE",
            "message": self.message,
            "value": self.value,
        }
