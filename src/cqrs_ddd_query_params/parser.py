"""FilterParser: ``name[method]=value`` -> validated :class:`Filter`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .coercion import coerce_value
from .declarations import ValidationSpec
from .filter import Filter, ORState
from .keys import parse_key
from .validation import apply_validator
from .values import ValueType

if TYPE_CHECKING:
    from .declarations import Validations

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
DEFAULT_IDENTITY_FIELD = "_id"


class FilterParser:
    """Parse query key/value pairs against a fixed validation specification."""

    def __init__(
        self,
        validations: Validations | ValidationSpec | None = None,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        identity_field: str = DEFAULT_IDENTITY_FIELD,
    ) -> None:
        """
        Initialize FilterParser.

        Args:
            validations: Declarator mapping (``{"id:int": None, ...}``) or an
                already parsed :class:`ValidationSpec`.
            delimiter: Separator for list values (``id[in]=1,2,3``).
            identity_field: Field name that ``mongoid`` declarations resolve to.
        """
        if isinstance(validations, ValidationSpec):
            self._spec = validations
        else:
            self._spec = ValidationSpec.from_mapping(validations)
        self._delimiter = delimiter
        self._identity_field = identity_field

    @property
    def spec(self) -> ValidationSpec:
        return self._spec

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def parse(
        self,
        raw_key: str,
        raw_value: str,
        *,
        or_state: ORState = ORState.NONE,
    ) -> Filter:
        """
        Build a filter from one query key/value pair.

        Construction is all-or-nothing: any error is raised and no filter
        is returned.

        Raises:
            UnknownMethodError: unknown method in the key.
            ValidationNotFoundError: the field is not declared.
            MethodNotAllowedError: method not allowed for the type/cardinality.
            BadFormatError: value cannot be parsed as the declared type.
            Exception: whatever the field's validator raises.
        """
        name, method = parse_key(raw_key)
        declaration = self._spec.resolve(name)
        value_type = declaration.value_type
        if value_type is ValueType.MONGOID:
            name = self._identity_field

        logger.debug(
            "Parsing %s: type=%s method=%s delimiter=%r",
            raw_key,
            value_type.value,
            method.value,
            self._delimiter,
        )
        value = coerce_value(raw_value, method, value_type, self._delimiter)
        apply_validator(declaration.validator, value)

        return Filter(
            key=raw_key,
            name=name,
            method=method,
            value=value,
            value_type=value_type,
            or_state=or_state,
        )


def new_filter(
    raw_key: str,
    raw_value: str,
    delimiter: str = DEFAULT_DELIMITER,
    validations: Validations | ValidationSpec | None = None,
) -> Filter:
    """One-shot form of :meth:`FilterParser.parse`."""
    return FilterParser(validations, delimiter=delimiter).parse(raw_key, raw_value)
