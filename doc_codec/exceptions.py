"""Exception hierarchy for doc_codec.

All exceptions raised by the codec layer inherit from DocCodecError. Errors raised
by a document store backend are not wrapped; they propagate with their original type.
"""


class DocCodecError(Exception):
    """Base exception for all doc_codec errors."""


class ConfigurationError(DocCodecError):
    """Raised when a codec, registry or bound collection is assembled incorrectly."""


class DecodeError(DocCodecError):
    """Raised when a stored document cannot be coerced into the target record.

    Attributes:
        field: Name (dotted path for nested values) of the first offending field.
            ``"<document>"`` when the document as a whole is unusable.
        reason: Human-readable description of the failure.
        collection: Collection the document was read from, when known.
        document_id: Identifier of the offending document, when known.
    """

    def __init__(
        self,
        field: str,
        reason: str,
        *,
        collection: str | None = None,
        document_id: str | None = None,
    ) -> None:
        self.field = field
        self.reason = reason
        self.collection = collection
        self.document_id = document_id
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"field {self.field!r}: {self.reason}"
        if self.document_id is not None:
            message = f"document {self.document_id!r} in {self.collection!r}: {message}"
        return message

    def with_location(self, collection: str, document_id: str) -> "DecodeError":
        """Return a copy of this error that also names where the document came from."""
        return DecodeError(self.field, self.reason, collection=collection, document_id=document_id)


__all__ = ["ConfigurationError", "DecodeError", "DocCodecError"]
