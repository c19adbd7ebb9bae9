"""Codec contract binding a record type to its Document representation.

@public

A Codec is an immutable pair of functions. ``encode`` turns a record into a
Document and always succeeds for a well-formed record. ``decode`` turns a
Document of unknown provenance back into a record, or raises DecodeError
naming the first field that could not be coerced.

Three ways to build one:

    >>> codec = define_codec(decode=person_from_document, encode=person_to_document)
    >>> codec = encodable_codec(Person, decode=Person.from_document)  # Person implements to_document()
    >>> codec = model_codec(PersonModel)  # pydantic model
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ValidationError

from doc_codec._types import Document
from doc_codec.exceptions import ConfigurationError, DecodeError

R = TypeVar("R")
M = TypeVar("M", bound=BaseModel)

WHOLE_DOCUMENT = "<document>"


@runtime_checkable
class Encodable(Protocol):
    """Capability of a record that can render itself as a Document."""

    def to_document(self) -> Document:
        """Return the Document representation of this record."""
        ...


class _MissingField(KeyError):
    """A decoder looked up a top-level field the document does not have."""


class _FieldLookup(dict):
    """Copy of the document handed to decoders; missing-key lookups raise _MissingField."""

    __slots__ = ()

    def __missing__(self, key):
        raise _MissingField(key)


@dataclass(frozen=True, slots=True)
class Codec(Generic[R]):
    """Encode/decode function pair for one record type.

    Use define_codec(), encodable_codec() or model_codec() rather than the
    constructor; they validate their inputs.
    """

    decode_fn: Callable[[Document], R]
    encode_fn: Callable[[R], Document]

    def decode(self, document: Any) -> R:
        """Decode a Document into a record.

        Raises:
            DecodeError: The document is not a mapping, lacks a required field,
                or holds a value of the wrong kind or outside its domain.
        """
        if not isinstance(document, Mapping):
            raise DecodeError(WHOLE_DOCUMENT, f"expected a document, got {type(document).__name__}")
        try:
            return self.decode_fn(_FieldLookup(document))
        except DecodeError:
            raise
        except ValidationError as exc:
            raise decode_error_from_validation(exc) from exc
        except _MissingField as exc:
            raise DecodeError(str(exc.args[0]), "missing required field") from exc
        except KeyError as exc:
            raise DecodeError(WHOLE_DOCUMENT, f"KeyError: {exc}") from exc
        except (IndexError, TypeError, ValueError) as exc:
            raise DecodeError(WHOLE_DOCUMENT, str(exc) or type(exc).__name__) from exc

    def encode(self, record: R) -> Document:
        """Encode a record into a Document."""
        document = self.encode_fn(record)
        if not isinstance(document, dict) or not all(isinstance(key, str) for key in document):
            raise TypeError(f"encode must return a dict with str keys, got {type(document).__name__}")
        return document


def define_codec(decode: Callable[[Document], R], encode: Callable[[R], Document]) -> Codec[R]:
    """Bundle a decode and an encode function into a Codec."""
    if decode is None or encode is None:
        raise ConfigurationError("define_codec requires both a decode and an encode function")
    if not callable(decode) or not callable(encode):
        raise ConfigurationError("decode and encode must be callable")
    return Codec(decode_fn=decode, encode_fn=encode)


def _to_document(record: Encodable) -> Document:
    return record.to_document()


def encodable_codec(record_type: type[R], decode: Callable[[Document], R]) -> Codec[R]:
    """Build a Codec for a record type that implements Encodable.

    Encoding calls ``record.to_document()``; decoding uses the supplied function,
    since it must work before any instance exists.
    """
    if record_type is None:
        raise ConfigurationError("encodable_codec requires a record type")
    if not callable(getattr(record_type, "to_document", None)):
        raise ConfigurationError(f"{record_type.__name__} does not implement to_document()")
    return define_codec(decode=decode, encode=_to_document)  # type: ignore[arg-type]


def _format_loc(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or WHOLE_DOCUMENT


def decode_error_from_validation(exc: ValidationError) -> DecodeError:
    """Convert the first error of a pydantic ValidationError to a DecodeError."""
    errors = exc.errors(include_url=False)
    if not errors:
        return DecodeError(WHOLE_DOCUMENT, str(exc))
    first = errors[0]
    return DecodeError(_format_loc(tuple(first["loc"])), first["msg"])


def model_codec(model_type: type[M]) -> Codec[M]:
    """Build a Codec for a pydantic model.

    Decoding runs strict JSON-mode validation, so a value of the wrong kind
    (``"50"`` for an ``int`` field) fails instead of being coerced. Every model
    field is emitted on encode, including those left at their defaults.
    """
    if not (isinstance(model_type, type) and issubclass(model_type, BaseModel)):
        raise ConfigurationError(f"model_codec requires a pydantic BaseModel subclass, got {model_type!r}")

    def decode(document: Document) -> M:
        try:
            return model_type.model_validate_json(json.dumps(document), strict=True)
        except ValidationError as exc:
            raise decode_error_from_validation(exc) from exc

    def encode(record: M) -> Document:
        return record.model_dump(mode="json")

    return Codec(decode_fn=decode, encode_fn=encode)


__all__ = [
    "Codec",
    "Encodable",
    "WHOLE_DOCUMENT",
    "decode_error_from_validation",
    "define_codec",
    "encodable_codec",
    "model_codec",
]
