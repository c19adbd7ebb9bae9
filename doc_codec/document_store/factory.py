"""Factory function for creating document store instances based on settings."""

from pathlib import Path

from doc_codec.document_store.protocol import DocumentStore
from doc_codec.settings import Settings


def create_document_store(settings: Settings) -> DocumentStore:
    """Create a DocumentStore based on settings.

    Selects LocalDocumentStore when document_store_path is configured,
    otherwise falls back to MemoryDocumentStore.

    Backends are imported lazily to avoid circular imports.
    """
    if settings.document_store_path:
        from doc_codec.document_store.local import LocalDocumentStore

        return LocalDocumentStore(base_path=Path(settings.document_store_path))

    from doc_codec.document_store.memory import MemoryDocumentStore

    return MemoryDocumentStore()
