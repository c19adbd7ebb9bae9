"""In-memory document store for testing.

Simple dict-based storage implementing the DocumentStore protocol.
Not for production use — all data is lost when the process exits.
"""

import copy
from uuid import uuid4

from doc_codec._types import CollectionName, Document, DocumentId
from doc_codec.document_store._collection import StoreCollection, validate_collection_name
from doc_codec.document_store._validation import validate_document


class MemoryDocumentStore:
    """Dict-based document store for unit tests.

    Storage layout: collection name -> {document id -> document}. Documents are
    deep-copied on the way in and on the way out.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Document]] = {}

    def collection(self, name: str) -> StoreCollection:
        """Return a raw handle for the named collection."""
        return StoreCollection(self, name)

    async def write(self, collection: CollectionName, document: Document) -> DocumentId:
        """Store a copy of the document under a fresh uuid4 identifier."""
        validate_collection_name(collection)
        stored = copy.deepcopy(validate_document(document))
        doc_id = DocumentId(uuid4().hex)
        self._collections.setdefault(collection, {})[doc_id] = stored
        return doc_id

    async def read(self, collection: CollectionName, doc_id: DocumentId) -> Document | None:
        """Return a copy of the stored document, or None."""
        document = self._collections.get(collection, {}).get(doc_id)
        if document is None:
            return None
        return copy.deepcopy(document)

    def put_raw(self, collection: str, doc_id: str, document: Document) -> None:
        """Place a document verbatim under a chosen id, bypassing validation.

        Simulates documents written by other tools or older schema versions.
        """
        self._collections.setdefault(validate_collection_name(collection), {})[doc_id] = document

    def count(self, collection: str) -> int:
        """Number of documents stored in a collection."""
        return len(self._collections.get(collection, {}))

    def shutdown(self) -> None:
        """Drop all stored documents."""
        self._collections.clear()
