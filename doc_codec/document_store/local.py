"""Local filesystem document store for CLI/debug mode.

Layout:
    {base_path}/{collection}/{doc_id}.json   <- one JSON document per file
"""

import asyncio
import json
import os
import re
from pathlib import Path
from uuid import uuid4

from doc_codec._types import CollectionName, Document, DocumentId
from doc_codec.document_store._collection import StoreCollection, validate_collection_name
from doc_codec.document_store._validation import validate_document
from doc_codec.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

_DOC_ID_RE = re.compile(r"^[0-9a-f]{32}$")


class LocalDocumentStore:
    """Filesystem-backed document store for local development and debugging.

    Documents are stored as browsable JSON files organized by collection.
    Each write goes to a temporary file first and is renamed into place, so
    read() never observes a partially written document.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        self._base_path = base_path or Path.cwd()

    @property
    def base_path(self) -> Path:
        """Root directory for all stored collections."""
        return self._base_path

    def collection(self, name: str) -> StoreCollection:
        """Return a raw handle for the named collection."""
        return StoreCollection(self, name)

    def _document_path(self, collection: CollectionName, doc_id: str) -> Path:
        return self._base_path / collection / f"{doc_id}.json"

    async def write(self, collection: CollectionName, document: Document) -> DocumentId:
        """Write a document to disk under a fresh uuid4 identifier."""
        validate_collection_name(collection)
        payload = json.dumps(validate_document(document), ensure_ascii=False, allow_nan=False, indent=2)
        doc_id = DocumentId(uuid4().hex)
        await asyncio.to_thread(self._write_sync, self._document_path(collection, doc_id), payload)
        logger.debug(f"Wrote document {doc_id} to {collection}")
        return doc_id

    @staticmethod
    def _write_sync(path: Path, payload: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, path)

    async def read(self, collection: CollectionName, doc_id: DocumentId) -> Document | None:
        """Read a document from disk. Unknown or malformed identifiers yield None.

        A file that is not valid JSON is a store error: json.JSONDecodeError
        propagates, distinct from both absence and DecodeError.
        """
        validate_collection_name(collection)
        if not isinstance(doc_id, str) or not _DOC_ID_RE.match(doc_id):
            return None
        return await asyncio.to_thread(self._read_sync, self._document_path(collection, doc_id))

    @staticmethod
    def _read_sync(path: Path) -> Document | None:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        return json.loads(text)

    def shutdown(self) -> None:
        """Nothing to release; files are opened per operation."""
