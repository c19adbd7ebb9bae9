"""Raw collection handle shared by the bundled store backends."""

import re
from typing import TYPE_CHECKING

from doc_codec._types import CollectionName, Document, DocumentId

if TYPE_CHECKING:
    from doc_codec.document_store.protocol import DocumentStore

_COLLECTION_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]{0,127}$")


def validate_collection_name(name: str) -> CollectionName:
    """Return ``name`` as a CollectionName, or raise ValueError if it is unusable."""
    if not isinstance(name, str) or not _COLLECTION_NAME_RE.match(name) or ".." in name:
        raise ValueError(f"Invalid collection name: {name!r}")
    return CollectionName(name)


class StoreCollection:
    """Named collection view over a DocumentStore. Holds no state of its own."""

    __slots__ = ("_name", "_store")

    def __init__(self, store: "DocumentStore", name: str) -> None:
        self._store = store
        self._name = validate_collection_name(name)

    @property
    def name(self) -> CollectionName:
        return self._name

    async def insert(self, document: Document) -> DocumentId:
        return await self._store.write(self._name, document)

    async def fetch(self, doc_id: DocumentId) -> Document | None:
        return await self._store.read(self._name, doc_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
