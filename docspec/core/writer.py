"""Document writers convert Python values into the native document representation."""

import datetime
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Final, Optional
from uuid import UUID

from mypy_extensions import mypyc_attr

from docspec.core.config import ConversionConfig
from docspec.core.type_mapper import DefaultTypeMapper, TypeMapper, TypeMapperProvider
from docspec.exceptions import DocumentConversionError
from docspec.typing import Document
from docspec.utils.type_guards import is_document, is_schema, schema_dump

__all__ = ("NATIVE_SCALAR_TYPES", "DocumentWriter", "MappingDocumentWriter")

NATIVE_SCALAR_TYPES: Final[tuple[type, ...]] = (
    str,
    bytes,
    bool,
    int,
    float,
    Decimal,
    UUID,
    datetime.datetime,
    datetime.date,
    datetime.time,
    re.Pattern,
)
"""Types the document store stores as-is."""

_SEQUENCE_TYPES: Final[tuple[type, ...]] = (list, tuple, set, frozenset)
_STRINGIFIED_KEY_TYPES: Final[tuple[type, ...]] = (int, float, UUID)


@mypyc_attr(allow_interpreted_subclasses=True)
class DocumentWriter(ABC):
    """Converts values into the document store's native representation.

    Writers that can expose a :class:`TypeMapper` advertise it through
    :meth:`as_type_mapper_provider`; the default is no such capability.
    """

    __slots__ = ()

    @abstractmethod
    def convert_to_document_type(self, value: Any) -> Any:
        """Convert a value into its native representation.

        The result must never share mutable structure with ``value``.
        """

    def write(self, value: Any, document: "MutableMapping[str, Any]") -> None:
        """Write a value's document form into an existing document.

        Args:
            value: Value converting to a document.
            document: Target document, updated in place.

        Raises:
            DocumentConversionError: If the value does not convert to a document.
        """
        converted = self.convert_to_document_type(value)
        if not is_document(converted):
            msg = "Value does not convert to a document"
            raise DocumentConversionError(msg, type(value))
        document.update(converted)

    def as_type_mapper_provider(self) -> Optional[TypeMapperProvider]:
        """Return this writer's type mapper capability, or None if it has none."""
        return None


class MappingDocumentWriter(DocumentWriter, TypeMapperProvider):
    """Writer producing plain ``dict``/``list`` documents.

    Conversion rules, first match wins:

    1. an entry of ``config.type_coercion_map`` for the value's type or one of its bases
    2. ``None`` passes through
    3. enums convert to their value
    4. native scalars pass through
    5. mappings convert to a new ``dict`` with string keys
    6. lists, tuples and sets convert to a new ``list``
    7. dataclasses, pydantic models, msgspec structs and attrs instances convert to
       a new ``dict`` carrying a type hint written by the type mapper
    """

    __slots__ = ("_type_mapper", "config")

    def __init__(self, type_mapper: Optional[TypeMapper] = None, config: Optional[ConversionConfig] = None) -> None:
        """Initialize the writer.

        Args:
            type_mapper: Type mapper to record type hints with. Defaults to a
                :class:`DefaultTypeMapper` using ``config.type_key``.
            config: Conversion configuration.
        """
        self.config = config or ConversionConfig()
        self._type_mapper = type_mapper if type_mapper is not None else DefaultTypeMapper(self.config.type_key)

    def get_type_mapper(self) -> Optional[TypeMapper]:
        return self._type_mapper

    def as_type_mapper_provider(self) -> Optional[TypeMapperProvider]:
        return self

    def convert_to_document_type(self, value: Any) -> Any:
        """Convert a value into a document, a list or a native scalar.

        Args:
            value: Value to convert.

        Raises:
            DocumentConversionError: If no rule applies to the value.

        Returns:
            The converted value.
        """
        coercer = self._find_coercer(type(value))
        if coercer is not None:
            return coercer(value)
        if value is None:
            return None
        if isinstance(value, Enum):
            return self.convert_to_document_type(value.value)
        if isinstance(value, NATIVE_SCALAR_TYPES):
            return value
        if isinstance(value, Mapping):
            return {self._convert_key(key): self.convert_to_document_type(item) for key, item in value.items()}
        if isinstance(value, _SEQUENCE_TYPES):
            return [self.convert_to_document_type(item) for item in value]
        if is_schema(value):
            return self._convert_schema(value)
        msg = "No conversion rule for value"
        raise DocumentConversionError(msg, type(value))

    def _convert_schema(self, value: Any) -> Document:
        document = {name: self.convert_to_document_type(item) for name, item in schema_dump(value).items()}
        if self.config.write_type_hints and self._type_mapper is not None:
            self._type_mapper.write_type(type(value), document)
        return document

    def _find_coercer(self, value_type: type) -> Optional[Callable[[Any], Any]]:
        coercion_map = self.config.type_coercion_map
        if not coercion_map:
            return None
        for base in value_type.__mro__:
            if base in coercion_map:
                return coercion_map[base]
        return None

    @staticmethod
    def _convert_key(key: Any) -> str:
        if isinstance(key, Enum):
            return str(key.value)
        if isinstance(key, str):
            return key
        if isinstance(key, _STRINGIFIED_KEY_TYPES) and not isinstance(key, bool):
            return str(key)
        msg = f"Unsupported document key {key!r}"
        raise DocumentConversionError(msg, type(key))
