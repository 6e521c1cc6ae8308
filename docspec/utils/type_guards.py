"""Type guard functions for runtime type checking in docspec.

This module provides type-safe runtime checks that help the type checker
understand type narrowing, replacing defensive hasattr() and duck typing patterns.
"""

from collections.abc import Iterable, MutableMapping
from typing import TYPE_CHECKING, Any, cast

from docspec._typing import ATTRS_INSTALLED, MSGSPEC_INSTALLED, PYDANTIC_INSTALLED, DataclassProtocol

if TYPE_CHECKING:
    from dataclasses import Field

    from typing_extensions import TypeGuard

    from docspec.core.paging import Distance, Pageable, Sort

__all__ = (
    "dataclass_to_dict",
    "extract_dataclass_fields",
    "is_attrs_instance",
    "is_dataclass_instance",
    "is_distance",
    "is_document",
    "is_document_list",
    "is_msgspec_struct",
    "is_pageable",
    "is_pydantic_model",
    "is_schema",
    "is_sort",
    "schema_dump",
)


def is_document(obj: Any) -> "TypeGuard[MutableMapping[str, Any]]":
    """Check if a value is document shaped.

    Only mutable mappings qualify since type stripping edits documents in place.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, MutableMapping)


def is_document_list(obj: Any) -> "TypeGuard[list[Any]]":
    """Check if a value is a document list.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, list)


def is_pageable(obj: Any) -> "TypeGuard[Pageable]":
    from docspec.core.paging import Pageable

    return isinstance(obj, Pageable)


def is_sort(obj: Any) -> "TypeGuard[Sort]":
    from docspec.core.paging import Sort

    return isinstance(obj, Sort)


def is_distance(obj: Any) -> "TypeGuard[Distance]":
    from docspec.core.paging import Distance

    return isinstance(obj, Distance)


def is_dataclass_instance(obj: Any) -> "TypeGuard[DataclassProtocol]":
    """Check if an object is a dataclass instance.

    Args:
        obj: An object to check.

    Returns:
        True if the object is a dataclass instance.
    """
    # Ensure obj is an instance and not the class itself.
    return not isinstance(obj, type) and hasattr(type(obj), "__dataclass_fields__")


def is_pydantic_model(obj: Any) -> bool:
    """Check if a value is a pydantic model instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if not PYDANTIC_INSTALLED or isinstance(obj, type):
        return False
    from pydantic import BaseModel

    return isinstance(obj, BaseModel)


def is_msgspec_struct(obj: Any) -> bool:
    """Check if a value is a msgspec struct instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if not MSGSPEC_INSTALLED or isinstance(obj, type):
        return False
    from msgspec import Struct

    return isinstance(obj, Struct)


def is_attrs_instance(obj: Any) -> bool:
    """Check if a value is an attrs class instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if not ATTRS_INSTALLED or isinstance(obj, type):
        return False
    from attrs import has

    return has(type(obj))


def is_schema(obj: Any) -> bool:
    """Check if a value is an instance of any supported schema model type."""
    return is_dataclass_instance(obj) or is_pydantic_model(obj) or is_msgspec_struct(obj) or is_attrs_instance(obj)


def extract_dataclass_fields(obj: "DataclassProtocol", exclude_none: bool = False) -> "tuple[Field[Any], ...]":
    """Extract dataclass fields.

    Args:
        obj: A dataclass instance.
        exclude_none: Whether to exclude None values.

    Returns:
        A tuple of dataclass fields.
    """
    from dataclasses import fields

    dataclass_fields: Iterable[Field[Any]] = fields(obj)  # type: ignore[arg-type]
    if exclude_none:
        dataclass_fields = (field for field in dataclass_fields if getattr(obj, field.name) is not None)
    return tuple(dataclass_fields)


def dataclass_to_dict(obj: "DataclassProtocol", exclude_none: bool = False) -> "dict[str, Any]":
    """Convert a dataclass to a dictionary.

    This method has important differences to the standard library version:
    - it does not deepcopy values
    - it does not recurse into nested values

    Args:
        obj: A dataclass instance.
        exclude_none: Whether to exclude None values.

    Returns:
        A dictionary of key/value pairs.
    """
    return {field.name: getattr(obj, field.name) for field in extract_dataclass_fields(obj, exclude_none)}


def schema_dump(data: Any, exclude_none: bool = False) -> "dict[str, Any]":
    """Dump a schema model to a shallow dictionary.

    Nested values are returned untouched so the caller can convert them with
    its own rules.

    Args:
        data: A dataclass, pydantic model, msgspec struct or attrs instance.
        exclude_none: Whether to exclude None values.

    Returns:
        :type:`dict[str, Any]`
    """
    if is_dataclass_instance(data):
        return dataclass_to_dict(data, exclude_none=exclude_none)
    if is_pydantic_model(data):
        names = type(data).model_fields
        dumped = {name: getattr(data, name) for name in names}
    elif is_msgspec_struct(data):
        dumped = {name: getattr(data, name) for name in data.__struct_fields__}
    elif is_attrs_instance(data):
        from attrs import fields

        dumped = {attribute.name: getattr(data, attribute.name) for attribute in fields(type(data))}
    else:
        dumped = cast("dict[str, Any]", dict(vars(data)))
    if exclude_none:
        return {key: value for key, value in dumped.items() if value is not None}
    return dumped
