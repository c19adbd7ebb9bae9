"""Domain-specific types for the codec layer."""

from typing import NewType

type DocumentValue = None | bool | int | float | str | list[DocumentValue] | dict[str, DocumentValue]
"""Any value a schemaless document may hold."""

type Document = dict[str, DocumentValue]
"""Schemaless field-name -> value mapping as exchanged with the document store."""

DocumentId = NewType("DocumentId", str)
"""Store-assigned identifier of a stored document."""

CollectionName = NewType("CollectionName", str)
"""Name of a collection inside a document store."""

__all__ = ["CollectionName", "Document", "DocumentId", "DocumentValue"]
