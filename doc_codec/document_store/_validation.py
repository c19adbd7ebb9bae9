"""Structural validation of Documents before they reach a store."""

import math
from typing import Any

from doc_codec._types import Document


def _check_value(value: Any, path: str) -> None:
    if value is None or isinstance(value, (bool, int, str)):
        return
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeError(f"{path}: non-finite number {value!r} is not storable")
        return
    if isinstance(value, list):
        for index, item in enumerate(value):
            _check_value(item, f"{path}[{index}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{path}: document keys must be str, got {type(key).__name__}")
            _check_value(item, f"{path}.{key}")
        return
    raise TypeError(f"{path}: {type(value).__name__} is not a document value")


def validate_document(value: Any) -> Document:
    """Return ``value`` unchanged if it is a well-formed Document.

    Raises:
        TypeError: The value is not a dict with str keys whose values are null,
            booleans, finite numbers, strings, lists or nested documents.
    """
    if not isinstance(value, dict):
        raise TypeError(f"expected a document (dict), got {type(value).__name__}")
    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeError(f"document keys must be str, got {type(key).__name__}")
        _check_value(item, key)
    return value
