"""Runtime-checkable protocols for docspec parameter access.

These describe the contracts the converting accessor relies on, so any
accessor implementation can be wrapped without inheriting from docspec classes.
"""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from docspec.core.paging import Distance, Pageable, Sort

__all__ = ("DocumentParameterAccessor", "ParameterAccessor", "ParameterIterator", "PotentiallyConvertingIterator")


@runtime_checkable
class ParameterIterator(Protocol):
    """Cursor over the bindable values of a query method invocation."""

    def __iter__(self) -> "Iterator[Any]": ...

    def __next__(self) -> Any:
        """Advance the cursor and return the raw value."""
        ...

    def has_next(self) -> bool:
        """Return whether another value is available."""
        ...

    def remove(self) -> None:
        """Remove the value last returned by the cursor."""
        ...


@runtime_checkable
class PotentiallyConvertingIterator(ParameterIterator, Protocol):
    """Parameter iterator that can also hand out converted values."""

    def next_converted(self) -> Any:
        """Advance the cursor and return the converted value."""
        ...


@runtime_checkable
class ParameterAccessor(Protocol):
    """Positional access to the arguments of a query method invocation."""

    def get_bindable_value(self, index: int) -> Any: ...

    def get_pageable(self) -> "Optional[Pageable]": ...

    def get_sort(self) -> "Optional[Sort]": ...

    def iterator(self) -> ParameterIterator: ...


@runtime_checkable
class DocumentParameterAccessor(ParameterAccessor, Protocol):
    """Parameter accessor for document stores, adding the geo-near distance."""

    def get_max_distance(self) -> "Optional[Distance]": ...
