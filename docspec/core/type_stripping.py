"""Conversion of query parameters with type information removed.

Documents written for persistence carry a type discriminator so they can be
read back polymorphically. Query parameters must not: a ``_class`` key inside
a query document would only match documents written from the exact same type.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from docspec.core.config import ConversionConfig
from docspec.utils.logging import get_logger, log_with_context
from docspec.utils.type_guards import is_document, is_document_list

if TYPE_CHECKING:
    from docspec.core.type_mapper import TypeMapper
    from docspec.core.writer import DocumentWriter
    from docspec.typing import ConvertedValue, RawValue

__all__ = ("TypeStrippingConverter", "strip_type_info")

logger = get_logger("core.type_stripping")


def strip_type_info(node: Any, mapper: "Optional[TypeMapper]", remove_all: bool = False) -> Any:
    """Remove type discriminator keys from a converted value, recursively.

    Documents are edited in place and returned. Within one document level only
    the last type key seen is removed unless ``remove_all`` is set. Lists are
    traversed element by element; any other value is returned untouched.

    Args:
        node: Converted value as produced by a document writer.
        mapper: Type mapper deciding which keys are type keys. None disables stripping.
        remove_all: Remove every type key of a level instead of only the last one.

    Returns:
        The same ``node``.
    """
    if mapper is None:
        return node
    if is_document_list(node):
        for element in node:
            strip_type_info(element, mapper, remove_all)
        return node
    if not is_document(node):
        return node

    keys_to_remove: list[str] = []
    for key, value in node.items():
        if mapper.is_type_key(key):
            if remove_all:
                keys_to_remove.append(key)
            else:
                keys_to_remove[:] = [key]
        strip_type_info(value, mapper, remove_all)

    for key in keys_to_remove:
        del node[key]
    if keys_to_remove:
        log_with_context(logger, logging.DEBUG, "Removed type keys from document", type_keys=keys_to_remove)
    return node


class TypeStrippingConverter:
    """Converts parameter values with a document writer and strips type information."""

    __slots__ = ("config", "writer")

    def __init__(self, writer: "DocumentWriter", config: Optional[ConversionConfig] = None) -> None:
        self.writer = writer
        self.config = config or ConversionConfig()

    def convert(self, value: "RawValue") -> "ConvertedValue":
        """Convert a raw parameter value into a query-safe native value.

        Writers without a type mapper capability only convert. A capable
        writer whose mapper is unavailable converts without stripping.

        Args:
            value: Raw parameter value. It is never modified.

        Returns:
            The converted value, free of type discriminator keys.
        """
        provider = self.writer.as_type_mapper_provider()
        if provider is None:
            logger.debug("Writer %s has no type mapper, skipping type stripping", type(self.writer).__name__)
            return self.writer.convert_to_document_type(value)

        mapper = provider.get_type_mapper()
        converted = self.writer.convert_to_document_type(value)
        return strip_type_info(converted, mapper, self.config.remove_all_type_keys)

    def __call__(self, value: Any) -> Any:
        return self.convert(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(writer={self.writer!r})"
