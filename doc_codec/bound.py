"""Typed view over a raw document collection.

@public

A BoundCollection couples one RawCollection with one Codec. Writes accept only
records and reads return only records, so application code never handles raw
Documents.

Example:
    >>> people = bind(store.collection("people"), person_codec)
    >>> doc_id = await people.add(Person(name="Sundar", age=50))
    >>> person = await people.get(doc_id)  # Person, or None if absent

Outcomes of get():
    - record: the document exists and decodes
    - None: no document has this identifier
    - DecodeError raised: the document exists but does not match the record shape

Store errors propagate with their original type and carry a note naming the
operation, collection and identifier.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

from doc_codec._types import DocumentId
from doc_codec.codec import Codec
from doc_codec.document_store.protocol import RawCollection
from doc_codec.exceptions import ConfigurationError, DecodeError
from doc_codec.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

R = TypeVar("R")


class BoundCollection(Generic[R]):
    """Collection handle fixed to one record type through its Codec.

    Holds references to the collection and codec only; both are shared and
    never mutated, so one instance may serve any number of concurrent tasks.
    """

    __slots__ = ("_codec", "_collection")

    def __init__(self, collection: RawCollection, codec: Codec[R]) -> None:
        if collection is None:
            raise ConfigurationError("Cannot bind: collection is missing")
        if codec is None:
            raise ConfigurationError("Cannot bind: codec is missing")
        if not isinstance(collection, RawCollection):
            raise ConfigurationError(f"Cannot bind: {type(collection).__name__} is not a RawCollection")
        if not isinstance(codec, Codec):
            raise ConfigurationError(f"Cannot bind: {type(codec).__name__} is not a Codec")
        self._collection = collection
        self._codec = codec

    @property
    def collection(self) -> RawCollection:
        return self._collection

    @property
    def codec(self) -> Codec[R]:
        return self._codec

    async def add(self, record: R) -> DocumentId:
        """Encode and store a record, returning the store-assigned identifier."""
        document = self._codec.encode(record)
        try:
            doc_id = await self._collection.insert(document)
        except Exception as exc:
            exc.add_note(f"while adding a document to collection {self._collection.name!r}")
            raise
        logger.debug(f"Added document {doc_id} to {self._collection.name}")
        return doc_id

    async def get(self, doc_id: DocumentId) -> R | None:
        """Fetch and decode a record. Returns None when the identifier is unknown.

        Raises:
            DecodeError: The stored document does not match the record shape.
                ``collection`` and ``document_id`` are set on the error.
        """
        try:
            document = await self._collection.fetch(doc_id)
        except Exception as exc:
            exc.add_note(f"while getting document {doc_id!r} from collection {self._collection.name!r}")
            raise
        if document is None:
            logger.debug(f"Document {doc_id} not found in {self._collection.name}")
            return None
        try:
            return self._codec.decode(document)
        except DecodeError as exc:
            located = exc.with_location(self._collection.name, doc_id)
            logger.warning(f"Schema drift: {located}")
            raise located from exc

    async def add_batch(self, records: Iterable[R]) -> list[DocumentId]:
        """Add records sequentially, returning their identifiers in input order.

        Every record is encoded before the first write, so an encoding bug stores nothing.
        """
        documents = [self._codec.encode(record) for record in records]
        doc_ids: list[DocumentId] = []
        for document in documents:
            try:
                doc_ids.append(await self._collection.insert(document))
            except Exception as exc:
                exc.add_note(f"while adding document {len(doc_ids) + 1} of {len(documents)} to collection {self._collection.name!r}")
                raise
        return doc_ids

    async def get_many(self, doc_ids: Iterable[DocumentId]) -> dict[DocumentId, R]:
        """Fetch several records. Unknown identifiers are omitted from the result.

        Raises DecodeError for the first stored document that fails to decode.
        """
        result: dict[DocumentId, R] = {}
        for doc_id in doc_ids:
            record = await self.get(doc_id)
            if record is not None:
                result[doc_id] = record
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collection.name!r})"


def bind(collection: RawCollection, codec: Codec[R]) -> BoundCollection[R]:
    """Bind a raw collection to a codec. No I/O.

    @public

    Raises:
        ConfigurationError: Either argument is missing or of the wrong kind.
    """
    return BoundCollection(collection, codec)


__all__ = ["BoundCollection", "bind"]
