"""Key parsing: ``id[eq]`` -> (``"id"``, ``Method.EQ``)."""

from __future__ import annotations

import logging

from .exceptions import UnknownMethodError, ValidationNotFoundError
from .methods import Method, key_method_names, lookup_method

logger = logging.getLogger(__name__)


def parse_key(raw_key: str) -> tuple[str, Method]:
    """
    Split a raw query key into field name and method.

    The method is the upper-cased text inside the first ``[...]`` pair.
    A key without brackets, without a closing bracket, or with empty
    brackets defaults to ``EQ``.

    Raises:
        UnknownMethodError: the bracket content is not a known method.
        ValidationNotFoundError: the key has no field name.
    """
    method = Method.EQ
    start = raw_key.find("[")
    if start == -1:
        name = raw_key
    else:
        name = raw_key[:start]
        end = raw_key.find("]", start + 1)
        if end != -1:
            token = raw_key[start + 1 : end].upper()
            if token:
                found = lookup_method(token)
                if found is None:
                    logger.debug("Rejected method %r in key %r", token, raw_key)
                    raise UnknownMethodError(token, key_method_names())
                method = found

    if not name:
        raise ValidationNotFoundError(name)
    return name, method
