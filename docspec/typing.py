from typing import Any

from typing_extensions import TypeAlias

__all__ = ("ConvertedValue", "Document", "DocumentList", "RawValue")

RawValue: TypeAlias = Any
"""A call-site parameter value of unknown shape."""
Document: TypeAlias = "dict[str, Any]"
"""Native document representation produced by a document writer."""
DocumentList: TypeAlias = "list[Any]"
"""Native list representation produced by a document writer."""
ConvertedValue: TypeAlias = Any
"""Result of converting a raw value: a scalar, a :data:`Document` or a :data:`DocumentList`."""
