"""Tests for LocalDocumentStore."""

import json
from pathlib import Path

import pytest

from doc_codec import CollectionName, DecodeError, DocumentId, bind
from doc_codec.document_store import DocumentStore
from doc_codec.document_store.local import LocalDocumentStore
from tests.support.helpers import Person, person_codec


@pytest.fixture
def store(tmp_path: Path) -> LocalDocumentStore:
    return LocalDocumentStore(base_path=tmp_path)


class TestProtocolCompliance:
    def test_satisfies_document_store_protocol(self, store: LocalDocumentStore):
        assert isinstance(store, DocumentStore)

    def test_default_base_path_is_cwd(self):
        assert LocalDocumentStore().base_path == Path.cwd()


class TestWriteAndRead:
    @pytest.mark.asyncio
    async def test_round_trip(self, store: LocalDocumentStore):
        document = {"name": "Sundar", "age": 50, "nested": {"ok": True, "items": [1, 2.5, None]}}
        doc_id = await store.write(CollectionName("people"), document)
        assert await store.read(CollectionName("people"), doc_id) == document

    @pytest.mark.asyncio
    async def test_layout_is_one_json_file_per_document(self, store: LocalDocumentStore, tmp_path: Path):
        doc_id = await store.write(CollectionName("people"), {"name": "Sundar"})
        path = tmp_path / "people" / f"{doc_id}.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"name": "Sundar"}
        assert not list((tmp_path / "people").glob("*.tmp"))

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, store: LocalDocumentStore):
        assert await store.read(CollectionName("people"), DocumentId("0" * 32)) is None

    @pytest.mark.asyncio
    async def test_foreign_id_returns_none(self, store: LocalDocumentStore):
        assert await store.read(CollectionName("people"), DocumentId("../../etc/passwd")) is None

    @pytest.mark.asyncio
    async def test_rejects_bad_collection_name(self, store: LocalDocumentStore):
        with pytest.raises(ValueError):
            await store.write(CollectionName("a/b"), {})

    @pytest.mark.asyncio
    async def test_rejects_non_finite_numbers(self, store: LocalDocumentStore):
        with pytest.raises(TypeError):
            await store.write(CollectionName("people"), {"score": float("nan")})


class TestBoundOverLocal:
    @pytest.mark.asyncio
    async def test_add_then_get(self, store: LocalDocumentStore):
        people = bind(store.collection("people"), person_codec)
        doc_id = await people.add(Person(name="Sundar", age=50))
        assert await people.get(doc_id) == Person(name="Sundar", age=50)

    @pytest.mark.asyncio
    async def test_hand_edited_document_is_malformed(self, store: LocalDocumentStore, tmp_path: Path):
        people = bind(store.collection("people"), person_codec)
        doc_id = await people.add(Person(name="Sundar", age=50))
        path = tmp_path / "people" / f"{doc_id}.json"
        path.write_text(json.dumps({"name": "Sundar", "age": "fifty", "tags": []}), encoding="utf-8")

        with pytest.raises(DecodeError) as exc_info:
            await people.get(doc_id)
        assert exc_info.value.field == "age"
        assert exc_info.value.document_id == doc_id

    @pytest.mark.asyncio
    async def test_write_failure_propagates(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        people = bind(LocalDocumentStore(base_path=blocker).collection("people"), person_codec)
        with pytest.raises(OSError) as exc_info:
            await people.add(Person(name="Sundar", age=50))
        assert exc_info.value.__notes__

    @pytest.mark.asyncio
    async def test_corrupt_file_is_a_store_error(self, store: LocalDocumentStore, tmp_path: Path):
        people = bind(store.collection("people"), person_codec)
        doc_id = await people.add(Person(name="Sundar", age=50))
        (tmp_path / "people" / f"{doc_id}.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError) as exc_info:
            await people.get(doc_id)
        assert not isinstance(exc_info.value, DecodeError)
        assert any(doc_id in note for note in exc_info.value.__notes__)
