"""Unit tests for DefaultTypeMapper."""

import pytest

from docspec.core.type_mapper import DEFAULT_TYPE_KEY, DefaultTypeMapper
from docspec.exceptions import TypeResolutionError
from tests.models import Address, User


def test_default_type_key() -> None:
    mapper = DefaultTypeMapper()

    assert mapper.type_key == DEFAULT_TYPE_KEY == "_class"
    assert mapper.is_type_key("_class")
    assert not mapper.is_type_key("class")
    assert not mapper.is_type_key("_id")


def test_disabled_mapper_has_no_type_keys() -> None:
    mapper = DefaultTypeMapper(type_key=None)
    document: dict[str, object] = {}

    mapper.write_type(User, document)

    assert not mapper.is_type_key("_class")
    assert document == {}
    assert mapper.read_type({"_class": "anything"}, default=User) is User


def test_write_type_uses_alias(type_mapper: DefaultTypeMapper) -> None:
    document: dict[str, object] = {}

    type_mapper.write_type(User, document)

    assert document == {"_class": "com.example.User"}


def test_write_type_falls_back_to_qualified_name() -> None:
    document: dict[str, object] = {}

    DefaultTypeMapper().write_type(Address, document)

    assert document == {"_class": f"{Address.__module__}.Address"}


def test_read_type_resolves_alias_and_dotted_path(type_mapper: DefaultTypeMapper) -> None:
    assert type_mapper.read_type({"_class": "com.example.Address"}) is Address
    assert DefaultTypeMapper().read_type({"_class": f"{User.__module__}.User"}) is User


def test_read_type_without_hint_returns_default() -> None:
    assert DefaultTypeMapper().read_type({"name": "x"}) is None
    assert DefaultTypeMapper().read_type({"name": "x"}, default=Address) is Address


def test_read_type_unresolvable_hint_raises() -> None:
    with pytest.raises(TypeResolutionError):
        DefaultTypeMapper().read_type({"_class": "no.such.module.Type"})


def test_read_type_non_type_hint_raises() -> None:
    with pytest.raises(TypeResolutionError, match="does not name a type"):
        DefaultTypeMapper().read_type({"_class": "os.path.join"})
