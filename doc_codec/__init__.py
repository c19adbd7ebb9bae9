"""doc_codec - typed records over schemaless document stores.

@public

Converts between strongly-typed application records and the loosely-typed
Documents a schemaless store exchanges, so call sites never marshal maps.

Quick Start:
    >>> from doc_codec import bind, model_codec
    >>> from doc_codec.document_store.memory import MemoryDocumentStore
    >>> from pydantic import BaseModel
    >>>
    >>> class Person(BaseModel):
    ...     name: str
    ...     age: int
    >>>
    >>> people = bind(MemoryDocumentStore().collection("people"), model_codec(Person))
    >>> doc_id = await people.add(Person(name="Sundar", age=50))
    >>> await people.get(doc_id)
    Person(name='Sundar', age=50)

Environment Variables:
    - DOCUMENT_STORE_PATH: Directory for the local filesystem store
    - DOC_CODEC_LOG_LEVEL: Log level for doc_codec loggers
"""

from . import fields
from ._types import CollectionName, Document, DocumentId, DocumentValue
from .bound import BoundCollection, bind
from .codec import Codec, Encodable, define_codec, encodable_codec, model_codec
from .document_store import DocumentStore, RawCollection, create_document_store, validate_document
from .exceptions import ConfigurationError, DecodeError, DocCodecError
from .logging import LoggingConfig, get_pipeline_logger, setup_logging
from .logging import get_pipeline_logger as get_logger
from .registry import CodecRegistry
from .settings import Settings, settings

__version__ = "0.1.0"

__all__ = [
    # Config/Settings
    "Settings",
    "settings",
    # Logging
    "get_logger",
    "get_pipeline_logger",
    "LoggingConfig",
    "setup_logging",
    # Types
    "CollectionName",
    "Document",
    "DocumentId",
    "DocumentValue",
    # Codec
    "Codec",
    "CodecRegistry",
    "Encodable",
    "define_codec",
    "encodable_codec",
    "model_codec",
    "fields",
    # Binding
    "BoundCollection",
    "bind",
    # Store boundary
    "DocumentStore",
    "RawCollection",
    "create_document_store",
    "validate_document",
    # Errors
    "ConfigurationError",
    "DecodeError",
    "DocCodecError",
]
