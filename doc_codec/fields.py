"""Field accessors for hand-written decoders.

Each helper reads one field from a Document and raises DecodeError naming that
field when it is missing or holds a value of the wrong kind. Booleans are never
accepted where a number is expected, and ``float`` accepts ``int``.
"""

from collections.abc import Mapping
from typing import Any, TypeVar, cast

from doc_codec._types import Document, DocumentValue
from doc_codec.exceptions import DecodeError

_T = TypeVar("_T")

_KIND_NAMES: dict[type, str] = {
    bool: "boolean",
    int: "integer",
    float: "number",
    str: "string",
    list: "list",
    dict: "document",
}


def _kind_name(kind: type) -> str:
    return _KIND_NAMES.get(kind, kind.__name__)


def _value_kind(value: Any) -> str:
    if value is None:
        return "null"
    return _kind_name(type(value))


def _matches(value: Any, kind: type) -> bool:
    if isinstance(value, bool):
        return kind is bool
    if kind is float:
        return isinstance(value, (int, float))
    return isinstance(value, kind)


def _coerce(value: Any, kind: type[_T]) -> _T:
    if kind is float and isinstance(value, int):
        return cast(_T, float(value))
    return cast(_T, value)


def require(doc: Mapping[str, DocumentValue], name: str, kind: type[_T]) -> _T:
    """Return ``doc[name]``, which must be present, non-null and of ``kind``."""
    if name not in doc:
        raise DecodeError(name, "missing required field")
    value = doc[name]
    if value is None:
        raise DecodeError(name, f"expected {_kind_name(kind)}, got null")
    if not _matches(value, kind):
        raise DecodeError(name, f"expected {_kind_name(kind)}, got {_value_kind(value)}")
    return _coerce(value, kind)


def optional(doc: Mapping[str, DocumentValue], name: str, kind: type[_T], default: _T | None = None) -> _T | None:
    """Return ``doc[name]`` if present and non-null, otherwise ``default``."""
    value = doc.get(name)
    if value is None:
        return default
    if not _matches(value, kind):
        raise DecodeError(name, f"expected {_kind_name(kind)}, got {_value_kind(value)}")
    return _coerce(value, kind)


def require_list(doc: Mapping[str, DocumentValue], name: str, item_kind: type[_T]) -> list[_T]:
    """Return ``doc[name]`` as a list whose every item is of ``item_kind``.

    The offending item is reported as ``name[index]``.
    """
    items = require(doc, name, list)
    result: list[_T] = []
    for index, item in enumerate(items):
        if item is None or not _matches(item, item_kind):
            raise DecodeError(f"{name}[{index}]", f"expected {_kind_name(item_kind)}, got {_value_kind(item)}")
        result.append(_coerce(item, item_kind))
    return result


def require_document(doc: Mapping[str, DocumentValue], name: str) -> Document:
    """Return the nested document stored under ``name``."""
    nested = require(doc, name, dict)
    if not all(isinstance(key, str) for key in nested):
        raise DecodeError(name, "nested document has non-string keys")
    return nested


__all__ = ["optional", "require", "require_document", "require_list"]
