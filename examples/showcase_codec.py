#!/usr/bin/env python3
"""Typed document codec showcase — runs standalone without external services.

Demonstrates:
  - A plain dataclass record implementing Encodable, decoded with field helpers
  - A pydantic record with model_codec()
  - CodecRegistry and bound collections over Memory/Local document stores
  - Telling "not found" apart from "stored but malformed"

Usage:
  python examples/showcase_codec.py
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from tempfile import TemporaryDirectory

from pydantic import BaseModel, Field

from doc_codec import CodecRegistry, DecodeError, Document, DocumentId, bind, encodable_codec, model_codec, setup_logging
from doc_codec.document_store.local import LocalDocumentStore
from doc_codec.document_store.memory import MemoryDocumentStore
from doc_codec.fields import require

# ---------------------------------------------------------------------------
# Record types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: int

    def to_document(self) -> Document:
        return {"name": self.name, "age": self.age}

    @classmethod
    def from_document(cls, doc: Document) -> "Person":
        return cls(name=require(doc, "name", str), age=require(doc, "age", int))


class Team(BaseModel):
    name: str
    size: int = Field(ge=1)


# ---------------------------------------------------------------------------
# 1. MemoryDocumentStore: add, get, absence, schema drift
# ---------------------------------------------------------------------------


async def demo_memory_store(registry: CodecRegistry) -> None:
    print("\n=== MemoryDocumentStore Demo ===\n")
    store = MemoryDocumentStore()
    people = registry.bind(store.collection("people"), Person)

    doc_id = await people.add(Person(name="Sundar", age=50))
    print(f"Added Sundar as {doc_id}")
    print(f"get({doc_id}) -> {await people.get(doc_id)}")
    print(f"get(unknown) -> {await people.get(DocumentId('unknown'))}")

    store.put_raw("people", "legacy", {"name": "Sundar", "years": 50})
    try:
        await people.get(DocumentId("legacy"))
    except DecodeError as exc:
        print(f"Legacy document rejected: {exc}")


# ---------------------------------------------------------------------------
# 2. LocalDocumentStore with a pydantic record
# ---------------------------------------------------------------------------


async def demo_local_store(registry: CodecRegistry, base_path: Path) -> None:
    print("\n=== LocalDocumentStore Demo ===\n")
    teams = registry.bind(LocalDocumentStore(base_path=base_path).collection("teams"), Team)

    doc_ids = await teams.add_batch([Team(name="core", size=4), Team(name="infra", size=2)])
    for path in sorted((base_path / "teams").glob("*.json")):
        print(f"  {path.relative_to(base_path)}")
    print(f"Loaded: {list((await teams.get_many(doc_ids)).values())}")


# ---------------------------------------------------------------------------
# 3. Concurrent adds through one handle
# ---------------------------------------------------------------------------


async def demo_concurrency() -> None:
    print("\n=== Concurrency Demo ===\n")
    people = bind(MemoryDocumentStore().collection("people"), encodable_codec(Person, decode=Person.from_document))
    records = [Person(name=f"person-{i}", age=20 + i) for i in range(10)]
    doc_ids = await asyncio.gather(*(people.add(record) for record in records))
    fetched = await asyncio.gather(*(people.get(doc_id) for doc_id in doc_ids))
    print(f"{len(doc_ids)} concurrent adds, all retrievable: {fetched == records}")


async def main() -> None:
    setup_logging(level="INFO")
    registry = CodecRegistry()
    registry.register(Person, encodable_codec(Person, decode=Person.from_document))
    registry.register(Team, model_codec(Team))

    await demo_memory_store(registry)
    with TemporaryDirectory() as tmp:
        await demo_local_store(registry, Path(tmp))
    await demo_concurrency()


if __name__ == "__main__":
    asyncio.run(main())
