"""Common test fixtures for doc_codec.

Codec and binding tests are Prefect-independent; no ephemeral Prefect server
or run logger is needed.
"""

import pytest

from doc_codec import BoundCollection, CodecRegistry, bind
from doc_codec.document_store.memory import MemoryDocumentStore
from tests.support.helpers import Person, PersonModel, person_codec, person_model_codec


@pytest.fixture
def memory_store() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest.fixture
def people(memory_store: MemoryDocumentStore) -> BoundCollection[Person]:
    return bind(memory_store.collection("people"), person_codec)


@pytest.fixture
def people_models(memory_store: MemoryDocumentStore) -> BoundCollection[PersonModel]:
    return bind(memory_store.collection("people_models"), person_model_codec)


@pytest.fixture
def registry() -> CodecRegistry:
    registry = CodecRegistry()
    registry.register(Person, person_codec)
    registry.register(PersonModel, person_model_codec)
    return registry
