"""Conversion configuration for document writers and type stripping."""

from typing import Any, Callable, Optional

from docspec.core.type_mapper import DEFAULT_TYPE_KEY

__all__ = ("ConversionConfig",)


class ConversionConfig:
    """Declarative configuration for converting parameter values into documents."""

    __slots__ = ("remove_all_type_keys", "type_coercion_map", "type_key", "write_type_hints")

    def __init__(
        self,
        type_key: Optional[str] = DEFAULT_TYPE_KEY,
        write_type_hints: bool = True,
        remove_all_type_keys: bool = False,
        type_coercion_map: Optional[dict[type, Callable[[Any], Any]]] = None,
    ) -> None:
        """Initialize conversion configuration.

        Args:
            type_key: Document key holding type information, None to disable type hints
            write_type_hints: Whether the writer records the source type of schema models
            remove_all_type_keys: Strip every type key of a document level instead of only the last one seen
            type_coercion_map: Mapping of types to their coercion functions, applied before the built-in rules
        """
        self.type_key = type_key
        self.write_type_hints = write_type_hints
        self.remove_all_type_keys = remove_all_type_keys
        self.type_coercion_map = type_coercion_map or {}

    def replace(self, **kwargs: Any) -> "ConversionConfig":
        """Return a copy with the given attributes replaced."""
        values = {name: getattr(self, name) for name in self.__slots__}
        values.update(kwargs)
        return ConversionConfig(**values)

    def hash(self) -> int:
        """Generate a deterministic hash of the configuration."""
        return hash(
            (
                self.type_key,
                self.write_type_hints,
                self.remove_all_type_keys,
                tuple(sorted(f"{k.__module__}.{k.__qualname__}" for k in self.type_coercion_map)),
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConversionConfig):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type_key={self.type_key!r}, write_type_hints={self.write_type_hints!r}, "
            f"remove_all_type_keys={self.remove_all_type_keys!r})"
        )
