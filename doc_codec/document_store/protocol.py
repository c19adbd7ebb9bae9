"""Document store and raw collection protocols.

The codec layer never talks to a concrete store. It depends only on these
protocols, so any schemaless store can be adapted by implementing them.
"""

from typing import Protocol, runtime_checkable

from doc_codec._types import CollectionName, Document, DocumentId


@runtime_checkable
class RawCollection(Protocol):
    """Untyped handle to one named collection of a document store."""

    @property
    def name(self) -> CollectionName:
        """Name of the collection inside its store."""
        ...

    async def insert(self, document: Document) -> DocumentId:
        """Store a document and return its store-assigned identifier."""
        ...

    async def fetch(self, doc_id: DocumentId) -> Document | None:
        """Return the stored document, or None if no document has this identifier."""
        ...


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for schemaless document storage backends.

    Implementations: LocalDocumentStore (filesystem), MemoryDocumentStore (testing).
    """

    def collection(self, name: str) -> RawCollection:
        """Return a raw handle for the named collection. No I/O."""
        ...

    async def write(self, collection: CollectionName, document: Document) -> DocumentId:
        """Write a document into a collection and return its new identifier."""
        ...

    async def read(self, collection: CollectionName, doc_id: DocumentId) -> Document | None:
        """Read a document by identifier. Returns None when it does not exist."""
        ...

    def shutdown(self) -> None:
        """Release any resources held by the store."""
        ...
