"""Sample record types and codecs for tests."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from doc_codec import DecodeError, Document, encodable_codec, model_codec
from doc_codec.fields import optional, require, require_list


@dataclass(frozen=True, slots=True)
class Person:
    """Plain record implementing the Encodable capability."""

    name: str
    age: int
    email: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    def to_document(self) -> Document:
        return {"name": self.name, "age": self.age, "email": self.email, "tags": list(self.tags)}

    @classmethod
    def from_document(cls, doc: Document) -> "Person":
        name = require(doc, "name", str)
        age = require(doc, "age", int)
        if age < 0:
            raise DecodeError("age", "must be non-negative")
        return cls(
            name=name,
            age=age,
            email=optional(doc, "email", str),
            tags=tuple(require_list(doc, "tags", str)),
        )


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    zip_code: str


class PersonModel(BaseModel):
    """Pydantic record."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(ge=0)
    address: Address | None = None
    scores: list[float] = Field(default_factory=list)


person_codec = encodable_codec(Person, decode=Person.from_document)
person_model_codec = model_codec(PersonModel)
