"""Explicit registry of codecs keyed by record type."""

from typing import Any, TypeVar

from doc_codec.bound import BoundCollection
from doc_codec.codec import Codec
from doc_codec.document_store.protocol import RawCollection
from doc_codec.exceptions import ConfigurationError

R = TypeVar("R")


class CodecRegistry:
    """Maps record types to their codecs.

    @public

    Registries are plain instances; create one per application (or per test).

    Example:
        >>> registry = CodecRegistry()
        >>> registry.register(Person, person_codec)
        >>> people = registry.bind(store.collection("people"), Person)
    """

    def __init__(self) -> None:
        self._codecs: dict[type, Codec[Any]] = {}

    def register(self, record_type: type[R], codec: Codec[R]) -> Codec[R]:
        """Register the codec for a record type and return it.

        Raises:
            ConfigurationError: The type is already registered, or an argument is invalid.
        """
        if not isinstance(record_type, type):
            raise ConfigurationError(f"record_type must be a class, got {record_type!r}")
        if not isinstance(codec, Codec):
            raise ConfigurationError(f"Cannot register {record_type.__name__}: {type(codec).__name__} is not a Codec")
        if record_type in self._codecs:
            raise ConfigurationError(f"A codec for {record_type.__name__} is already registered")
        self._codecs[record_type] = codec
        return codec

    def codec_for(self, record_type: type[R]) -> Codec[R]:
        """Return the codec registered for exactly this record type."""
        try:
            return self._codecs[record_type]
        except KeyError:
            name = getattr(record_type, "__name__", repr(record_type))
            raise ConfigurationError(f"No codec registered for {name}") from None

    def bind(self, collection: RawCollection, record_type: type[R]) -> BoundCollection[R]:
        """Bind a raw collection to the codec registered for ``record_type``."""
        return BoundCollection(collection, self.codec_for(record_type))

    def __contains__(self, record_type: object) -> bool:
        return record_type in self._codecs

    def __len__(self) -> int:
        return len(self._codecs)


__all__ = ["CodecRegistry"]
