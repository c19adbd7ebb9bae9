"""Document store protocols and backends consumed by the codec layer."""

from ._collection import StoreCollection
from ._validation import validate_document
from .factory import create_document_store
from .protocol import DocumentStore, RawCollection

__all__ = [
    "DocumentStore",
    "RawCollection",
    "StoreCollection",
    "create_document_store",
    "validate_document",
]
