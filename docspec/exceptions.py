from typing import Any, Optional

__all__ = (
    "DocSpecError",
    "DocumentConversionError",
    "ImproperConfigurationError",
    "ParameterError",
    "ParameterIndexError",
    "TypeResolutionError",
    "UnsupportedOperationError",
)


class DocSpecError(Exception):
    """Base exception class from which all docspec exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``DocSpecError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(DocSpecError):
    """Raised when a configuration value or a value object is invalid."""


# -- Parameter Errors --
class ParameterError(DocSpecError):
    """Base class for parameter-related errors."""

    method: Optional[str]

    def __init__(self, message: str, method: Optional[str] = None) -> None:
        """Initialize with optional query method context."""
        detail_message = message
        if method:
            detail_message = f"{message} (Method: {method})"
        super().__init__(detail=detail_message)
        self.method = method


class ParameterIndexError(ParameterError, IndexError):
    """Raised when a bindable parameter position is out of range."""

    index: int

    def __init__(self, index: int, count: int, method: Optional[str] = None) -> None:
        super().__init__(f"Invalid bindable parameter index {index}, {count} bindable parameters available", method)
        self.index = index


class UnsupportedOperationError(DocSpecError):
    """Raised when an iterator or accessor does not support the requested operation."""


# -- Conversion Errors --
class DocumentConversionError(DocSpecError):
    """A value could not be converted into the document representation."""

    value_type: Optional[type]

    def __init__(self, message: str, value_type: Optional[type] = None) -> None:
        detail_message = message
        if value_type is not None:
            detail_message = f"{message} (Type: {value_type.__module__}.{value_type.__qualname__})"
        super().__init__(detail=detail_message)
        self.value_type = value_type


class TypeResolutionError(DocSpecError):
    """A stored type hint could not be resolved to a Python type."""
