"""Parameter accessor decorator converting bindable values into documents."""

from typing import TYPE_CHECKING, Any, Optional

from docspec.core.config import ConversionConfig
from docspec.core.type_stripping import TypeStrippingConverter

if TYPE_CHECKING:
    from docspec.core.paging import Distance, Pageable, Sort
    from docspec.core.writer import DocumentWriter
    from docspec.protocols import DocumentParameterAccessor, ParameterIterator
    from docspec.typing import ConvertedValue, RawValue

__all__ = ("ConvertingIterator", "ConvertingParameterAccessor")


class ConvertingParameterAccessor:
    """Parameter accessor that converts bindable values with a :class:`DocumentWriter`.

    Values are converted on every retrieval and stripped of type information.
    Pageable, sort and max distance are returned from the delegate untouched.
    """

    __slots__ = ("_converter", "delegate", "writer")

    def __init__(
        self,
        writer: "DocumentWriter",
        delegate: "DocumentParameterAccessor",
        config: Optional[ConversionConfig] = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            writer: Writer converting values into documents.
            delegate: Accessor supplying the raw values.
            config: Conversion configuration used for type stripping.
        """
        self.writer = writer
        self.delegate = delegate
        self._converter = TypeStrippingConverter(writer, config)

    def iterator(self) -> "ConvertingIterator":
        return ConvertingIterator(self.delegate.iterator(), self._converter)

    def __iter__(self) -> "ConvertingIterator":
        return self.iterator()

    def get_pageable(self) -> "Optional[Pageable]":
        return self.delegate.get_pageable()

    def get_sort(self) -> "Optional[Sort]":
        return self.delegate.get_sort()

    def get_max_distance(self) -> "Optional[Distance]":
        return self.delegate.get_max_distance()

    def get_bindable_value(self, index: int) -> "ConvertedValue":
        """Return the converted bindable value at ``index``.

        Args:
            index: Position among the bindable parameters.

        Returns:
            The value converted by the writer with type information removed.
        """
        return self._converter.convert(self.delegate.get_bindable_value(index))

    def convert(self, value: "RawValue") -> "ConvertedValue":
        """Convert an arbitrary value the same way bindable values are converted."""
        return self._converter.convert(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(writer={self.writer!r}, delegate={self.delegate!r})"


class ConvertingIterator:
    """Iterator over a delegate cursor that can hand out converted values.

    ``next()`` and :meth:`next_converted` consume the same delegate cursor.
    """

    __slots__ = ("_converter", "_delegate")

    def __init__(self, delegate: "ParameterIterator", converter: TypeStrippingConverter) -> None:
        self._delegate = delegate
        self._converter = converter

    def __iter__(self) -> "ConvertingIterator":
        return self

    def has_next(self) -> bool:
        return self._delegate.has_next()

    def __next__(self) -> Any:
        return next(self._delegate)

    def next_converted(self) -> "ConvertedValue":
        """Advance the cursor and return the converted value.

        Raises:
            StopIteration: If the delegate cursor is exhausted.
        """
        return self._converter.convert(next(self))

    def remove(self) -> None:
        self._delegate.remove()
