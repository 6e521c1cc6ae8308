"""Optional dependency detection and shared structural types.

The flags are computed with :func:`importlib.util.find_spec` so that nothing is
imported until a type guard actually needs the library.
"""

from dataclasses import Field
from importlib.util import find_spec
from typing import Any, ClassVar, Final, Protocol

__all__ = ("ATTRS_INSTALLED", "MSGSPEC_INSTALLED", "PYDANTIC_INSTALLED", "DataclassProtocol", "module_available")


def module_available(name: str) -> bool:
    """Return whether a top level module can be imported.

    Args:
        name: Module name.

    Returns:
        True if the module is importable.
    """
    try:
        return find_spec(name) is not None
    except (ImportError, ValueError):
        return False


PYDANTIC_INSTALLED: Final[bool] = module_available("pydantic")
MSGSPEC_INSTALLED: Final[bool] = module_available("msgspec")
ATTRS_INSTALLED: Final[bool] = module_available("attrs")


class DataclassProtocol(Protocol):
    """Protocol for instance checking dataclasses."""

    __dataclass_fields__: "ClassVar[dict[str, Field[Any]]]"
