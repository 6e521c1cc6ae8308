from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from docspec.core.type_mapper import DefaultTypeMapper
from docspec.core.writer import MappingDocumentWriter
from tests.models import Address, User

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def type_mapper() -> DefaultTypeMapper:
    return DefaultTypeMapper(aliases={User: "com.example.User", Address: "com.example.Address"})


@pytest.fixture
def writer(type_mapper: DefaultTypeMapper) -> MappingDocumentWriter:
    return MappingDocumentWriter(type_mapper)


@pytest.fixture
def alice() -> User:
    return User("Alice", Address("NY"))


@pytest.fixture
def alice_document() -> dict[str, Any]:
    return {
        "name": "Alice",
        "_class": "com.example.User",
        "address": {"city": "NY", "_class": "com.example.Address"},
    }
