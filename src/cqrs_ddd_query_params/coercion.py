"""Value coercion: raw query value -> typed scalar or tuple."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from bson import ObjectId
from bson.errors import InvalidId

from .exceptions import BadFormatError, MethodNotAllowedError
from .methods import (
    COMPARISON_METHODS,
    LIST_METHODS,
    NULL_METHODS,
    PATTERN_METHODS,
    Method,
)
from .values import NULL, ValueType, is_null_literal

if TYPE_CHECKING:
    from collections.abc import Callable

    from .values import FilterValue

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_SCALAR_METHODS = COMPARISON_METHODS | LIST_METHODS
_STRING_SCALAR_METHODS = COMPARISON_METHODS | PATTERN_METHODS | LIST_METHODS


def split_value(raw_value: str, delimiter: str = ",") -> list[str]:
    """Split on *delimiter*; an empty delimiter never splits."""
    if delimiter and delimiter in raw_value:
        return raw_value.split(delimiter)
    return [raw_value]


def parse_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise BadFormatError(token, ValueType.INT.value)
    return int(token)


def parse_bool(token: str) -> bool:
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise BadFormatError(token, ValueType.BOOL.value)


def parse_object_id(token: str) -> ObjectId:
    # ObjectId() also accepts 12-byte strings; only hex ids are valid here
    if len(token) != 24:
        raise BadFormatError(token, ValueType.MONGOID.value)
    try:
        return ObjectId(token)
    except (InvalidId, TypeError) as exc:
        raise BadFormatError(token, ValueType.MONGOID.value) from exc


def _not_allowed(
    method: Method, value_type: ValueType, tokens: list[str]
) -> MethodNotAllowedError:
    logger.debug(
        "Method %s rejected for %d %s token(s)",
        method.value,
        len(tokens),
        value_type.value,
    )
    return MethodNotAllowedError(
        method.value, value_type.value, multiple=len(tokens) > 1
    )


def _coerce_list(
    method: Method,
    value_type: ValueType,
    tokens: list[str],
    parse: Callable[[str], object],
) -> tuple[object, ...]:
    if method not in LIST_METHODS:
        raise _not_allowed(method, value_type, tokens)
    return tuple(parse(token) for token in tokens)


def coerce_int(method: Method, tokens: list[str]) -> FilterValue:
    if len(tokens) == 1:
        if method not in _INT_SCALAR_METHODS:
            raise _not_allowed(method, ValueType.INT, tokens)
        return parse_int(tokens[0])
    values = _coerce_list(method, ValueType.INT, tokens, parse_int)
    return values  # type: ignore[return-value]


def coerce_bool(method: Method, tokens: list[str]) -> FilterValue:
    if len(tokens) != 1 or method is not Method.EQ:
        raise _not_allowed(method, ValueType.BOOL, tokens)
    return parse_bool(tokens[0])


def coerce_object_id(method: Method, tokens: list[str]) -> FilterValue:
    if len(tokens) == 1:
        if method is not Method.EQ:
            raise _not_allowed(method, ValueType.MONGOID, tokens)
        return parse_object_id(tokens[0])
    values = _coerce_list(method, ValueType.MONGOID, tokens, parse_object_id)
    return values  # type: ignore[return-value]


def coerce_string(method: Method, tokens: list[str]) -> FilterValue:
    if len(tokens) == 1:
        token = tokens[0]
        if method in _STRING_SCALAR_METHODS:
            return token
        if method in NULL_METHODS and is_null_literal(token):
            return NULL
        raise _not_allowed(method, ValueType.STRING, tokens)
    values = _coerce_list(method, ValueType.STRING, tokens, str)
    return values  # type: ignore[return-value]


_COERCERS: dict[ValueType, Callable[[Method, list[str]], FilterValue]] = {
    ValueType.INT: coerce_int,
    ValueType.BOOL: coerce_bool,
    ValueType.MONGOID: coerce_object_id,
    ValueType.STRING: coerce_string,
}


def coerce_value(
    raw_value: str,
    method: Method,
    value_type: ValueType,
    delimiter: str = ",",
) -> FilterValue:
    """
    Convert a raw value to the declared type.

    A single token becomes a scalar and several tokens become a tuple.
    Which methods are legal depends on both the type and the number of
    tokens.

    Raises:
        MethodNotAllowedError: method/type/cardinality combination is invalid.
        BadFormatError: a token cannot be parsed as the declared type.
    """
    tokens = split_value(raw_value, delimiter)
    return _COERCERS[value_type](method, tokens)
