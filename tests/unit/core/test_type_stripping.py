"""Unit tests for type information stripping."""

import copy
from typing import Any, Optional
from unittest.mock import Mock

import pytest

from docspec.core.config import ConversionConfig
from docspec.core.type_mapper import DefaultTypeMapper, TypeMapper, TypeMapperProvider
from docspec.core.type_stripping import TypeStrippingConverter, strip_type_info
from docspec.core.writer import DocumentWriter, MappingDocumentWriter
from docspec.exceptions import DocumentConversionError


class _PlainWriter(DocumentWriter):
    """Writer without type mapper capability that keeps type keys in its output."""

    def convert_to_document_type(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {**value, "_class": "plain"}
        return f"converted:{value}"


class _MapperlessWriter(DocumentWriter, TypeMapperProvider):
    def convert_to_document_type(self, value: Any) -> Any:
        return copy.deepcopy(value)

    def get_type_mapper(self) -> Optional[TypeMapper]:
        return None

    def as_type_mapper_provider(self) -> Optional[TypeMapperProvider]:
        return self


def test_strip_removes_nested_type_keys(alice_document: "dict[str, Any]") -> None:
    result = strip_type_info(alice_document, DefaultTypeMapper())

    assert result == {"name": "Alice", "address": {"city": "NY"}}


def test_strip_returns_same_document_instance(alice_document: "dict[str, Any]") -> None:
    assert strip_type_info(alice_document, DefaultTypeMapper()) is alice_document


def test_strip_leaves_documents_without_type_keys_unchanged() -> None:
    document = {"name": "Bob", "roles": [{"name": "admin"}, "guest"], "meta": {"level": 3, "nested": {"x": [1, 2]}}}
    expected = copy.deepcopy(document)

    assert strip_type_info(document, DefaultTypeMapper()) == expected


def test_strip_handles_list_of_documents_independently() -> None:
    document = {
        "members": [
            {"name": "a", "_class": "A"},
            {"name": "b", "_class": "B", "inner": {"_class": "C", "v": 1}},
            "scalar",
        ]
    }

    strip_type_info(document, DefaultTypeMapper())

    assert document == {"members": [{"name": "a"}, {"name": "b", "inner": {"v": 1}}, "scalar"]}


def test_strip_traverses_top_level_lists() -> None:
    values = [{"_class": "A", "v": 1}, [{"_class": "B"}], 3]

    assert strip_type_info(values, DefaultTypeMapper()) == [{"v": 1}, [{}], 3]


@pytest.mark.parametrize("value", [42, "text", None, 1.5, b"raw", (1, 2)])
def test_strip_passes_non_documents_through(value: Any) -> None:
    assert strip_type_info(value, DefaultTypeMapper()) is value


def test_strip_without_mapper_is_noop(alice_document: "dict[str, Any]") -> None:
    expected = copy.deepcopy(alice_document)

    assert strip_type_info(alice_document, None) == expected


def test_strip_removes_only_last_type_key_per_level() -> None:
    mapper = Mock(spec=TypeMapper)
    mapper.is_type_key.side_effect = lambda key: key in {"_class", "_type"}
    document = {"_class": "A", "value": 1, "_type": "B"}

    strip_type_info(document, mapper)

    assert document == {"_class": "A", "value": 1}


def test_strip_remove_all_removes_every_type_key() -> None:
    mapper = Mock(spec=TypeMapper)
    mapper.is_type_key.side_effect = lambda key: key in {"_class", "_type"}
    document = {"_class": "A", "value": {"_type": "C", "_class": "D"}, "_type": "B"}

    strip_type_info(document, mapper, remove_all=True)

    assert document == {"value": {}}


def test_strip_respects_custom_type_key() -> None:
    document = {"_t": "User", "_class": "kept", "name": "x"}

    strip_type_info(document, DefaultTypeMapper(type_key="_t"))

    assert document == {"_class": "kept", "name": "x"}


def test_converter_scenario_strips_user_and_address(writer: MappingDocumentWriter, alice: Any) -> None:
    converter = TypeStrippingConverter(writer)

    assert converter.convert(alice) == {"name": "Alice", "address": {"city": "NY", "zip_code": None}, "tags": []}


def test_converter_scalar_is_writer_conversion(writer: MappingDocumentWriter) -> None:
    converter = TypeStrippingConverter(writer)

    assert converter.convert(42) == writer.convert_to_document_type(42) == 42


def test_converter_without_capability_returns_plain_conversion() -> None:
    writer = _PlainWriter()
    converter = TypeStrippingConverter(writer)

    assert converter.convert({"a": 1}) == {"a": 1, "_class": "plain"}
    assert converter.convert(7) == "converted:7"


def test_converter_with_absent_mapper_skips_stripping() -> None:
    converter = TypeStrippingConverter(_MapperlessWriter())

    assert converter.convert({"_class": "A", "x": 1}) == {"_class": "A", "x": 1}


def test_converter_does_not_mutate_raw_value(writer: MappingDocumentWriter) -> None:
    raw = {"user": {"name": "x", "_class": "raw"}, "items": [{"_class": "raw"}]}
    expected = copy.deepcopy(raw)

    converted = TypeStrippingConverter(writer).convert(raw)

    assert raw == expected
    assert converted == {"user": {"name": "x"}, "items": [{}]}


def test_converter_honours_remove_all_config() -> None:
    mapper = Mock(spec=TypeMapper)
    mapper.is_type_key.side_effect = lambda key: key.startswith("_")
    writer = MappingDocumentWriter(mapper, ConversionConfig(write_type_hints=False))
    converter = TypeStrippingConverter(writer, ConversionConfig(remove_all_type_keys=True))

    assert converter.convert({"_a": 1, "_b": 2, "c": 3}) == {"c": 3}


def test_converter_propagates_writer_errors(writer: MappingDocumentWriter) -> None:
    with pytest.raises(DocumentConversionError):
        TypeStrippingConverter(writer).convert(object())


def test_converter_is_callable(writer: MappingDocumentWriter) -> None:
    converter = TypeStrippingConverter(writer)

    assert converter({"a": [1, 2]}) == {"a": [1, 2]}
