"""Type discriminator handling for documents.

A type mapper owns the reserved document key that records the Python type a
document was written from, so polymorphic values can be read back.
"""

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any, Final, Optional

from mypy_extensions import mypyc_attr

from docspec.exceptions import TypeResolutionError
from docspec.utils.logging import get_logger
from docspec.utils.module_loader import import_string

__all__ = ("DEFAULT_TYPE_KEY", "DefaultTypeMapper", "TypeMapper", "TypeMapperProvider")

DEFAULT_TYPE_KEY: Final[str] = "_class"

logger = get_logger("core.type_mapper")


@mypyc_attr(allow_interpreted_subclasses=True)
class TypeMapper(ABC):
    """Decides which document keys carry type information and reads/writes them."""

    __slots__ = ()

    @abstractmethod
    def is_type_key(self, key: str) -> bool:
        """Return whether ``key`` is a type discriminator key."""

    @abstractmethod
    def write_type(self, type_: type, document: "MutableMapping[str, Any]") -> None:
        """Record ``type_`` in ``document``."""

    @abstractmethod
    def read_type(self, document: "MutableMapping[str, Any]", default: Optional[type] = None) -> Optional[type]:
        """Resolve the type recorded in ``document``, falling back to ``default``."""


class DefaultTypeMapper(TypeMapper):
    """Type mapper storing a type alias under a single configurable key.

    Types are written as their registered alias, or as ``module.qualname``
    when no alias is registered. Passing ``type_key=None`` disables type
    information entirely: nothing is written and no key is a type key.
    """

    __slots__ = ("_aliases", "_types_by_alias", "type_key")

    def __init__(self, type_key: Optional[str] = DEFAULT_TYPE_KEY, aliases: "Optional[dict[type, str]]" = None) -> None:
        self.type_key = type_key
        self._aliases: dict[type, str] = {}
        self._types_by_alias: dict[str, type] = {}
        for type_, alias in (aliases or {}).items():
            self.register_alias(type_, alias)

    def register_alias(self, type_: type, alias: str) -> None:
        """Register a short alias to store instead of the dotted type path."""
        self._aliases[type_] = alias
        self._types_by_alias[alias] = type_

    def get_alias(self, type_: type) -> str:
        alias = self._aliases.get(type_)
        if alias is not None:
            return alias
        return f"{type_.__module__}.{type_.__qualname__}"

    def is_type_key(self, key: str) -> bool:
        return self.type_key is not None and key == self.type_key

    def write_type(self, type_: type, document: "MutableMapping[str, Any]") -> None:
        if self.type_key is None:
            return
        document[self.type_key] = self.get_alias(type_)

    def read_type(self, document: "MutableMapping[str, Any]", default: Optional[type] = None) -> Optional[type]:
        """Resolve the stored type hint.

        Args:
            document: Document possibly carrying a type hint.
            default: Type returned when the document carries no hint.

        Raises:
            TypeResolutionError: If the hint names neither a registered alias nor an importable type.

        Returns:
            The resolved type, or ``default``.
        """
        if self.type_key is None:
            return default
        alias = document.get(self.type_key)
        if alias is None:
            return default
        if alias in self._types_by_alias:
            return self._types_by_alias[alias]
        try:
            resolved = import_string(str(alias))
        except ImportError as exc:
            msg = f"Unable to resolve type hint {alias!r}"
            raise TypeResolutionError(msg) from exc
        if not isinstance(resolved, type):
            msg = f"Type hint {alias!r} does not name a type"
            raise TypeResolutionError(msg)
        logger.debug("Resolved type hint %r to %s", alias, resolved)
        return resolved

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type_key={self.type_key!r})"


@mypyc_attr(allow_interpreted_subclasses=True)
class TypeMapperProvider(ABC):
    """Capability of exposing a :class:`TypeMapper`."""

    __slots__ = ()

    @abstractmethod
    def get_type_mapper(self) -> Optional[TypeMapper]:
        """Return the type mapper, or None when none is available."""
