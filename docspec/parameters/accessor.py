"""Default parameter access for query method invocations.

Query method arguments fall into two groups: special parameters (a
:class:`Pageable`, a :class:`Sort` or a :class:`Distance`) that shape the query,
and bindable parameters whose values are bound into it. Bindable parameters are
addressed by their position among bindable parameters only.
"""

import inspect
import re
from collections.abc import Iterator, Sequence
from enum import Enum
from types import UnionType
from typing import TYPE_CHECKING, Any, Callable, ForwardRef, Optional, Union, get_args, get_origin

from docspec.core.paging import Distance, Pageable, Sort
from docspec.exceptions import ParameterError, ParameterIndexError, UnsupportedOperationError
from docspec.utils.logging import get_logger
from docspec.utils.type_guards import is_distance, is_pageable, is_sort

if TYPE_CHECKING:
    from docspec.protocols import ParameterIterator

__all__ = (
    "BindableParameterIterator",
    "ParameterKind",
    "ParametersParameterAccessor",
    "QueryMethodParameter",
    "QueryMethodParameters",
)

logger = get_logger("parameters.accessor")

_IMPLICIT_PARAMETERS = frozenset({"self", "cls"})
_UNION_ORIGINS = (Union, UnionType)
_ANNOTATION_TOKEN = re.compile(r"[\w.]+")
_OPTIONAL_TOKENS = frozenset({"None", "NoneType", "Optional", "Union"})
_SPECIAL_TYPE_NAMES = {"Pageable": "pageable", "Sort": "sort", "Distance": "distance"}


class ParameterKind(str, Enum):
    """Role of a query method parameter."""

    BINDABLE = "bindable"
    PAGEABLE = "pageable"
    SORT = "sort"
    DISTANCE = "distance"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def for_type(cls, annotation: Any) -> "ParameterKind":
        if get_origin(annotation) in _UNION_ORIGINS:
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(members) == 1:
                annotation = members[0]
        if isinstance(annotation, ForwardRef):
            annotation = annotation.__forward_arg__
        if isinstance(annotation, str):
            return cls._for_type_name(annotation)
        if isinstance(annotation, type):
            if issubclass(annotation, Pageable):
                return cls.PAGEABLE
            if issubclass(annotation, Sort):
                return cls.SORT
            if issubclass(annotation, Distance):
                return cls.DISTANCE
        return cls.BINDABLE

    @classmethod
    def _for_type_name(cls, annotation: str) -> "ParameterKind":
        """Classify an annotation that could not be evaluated by the names it mentions.

        ``"Pageable"``, ``"Optional[Pageable]"``, ``"Pageable | None"`` and
        ``"docspec.Pageable"`` all classify as :attr:`PAGEABLE`.
        """
        names = [
            name
            for name in (token.rsplit(".", 1)[-1] for token in _ANNOTATION_TOKEN.findall(annotation))
            if name not in _OPTIONAL_TOKENS
        ]
        if len(names) == 1 and names[0] in _SPECIAL_TYPE_NAMES:
            return cls(_SPECIAL_TYPE_NAMES[names[0]])
        return cls.BINDABLE

    @classmethod
    def for_value(cls, value: Any) -> "ParameterKind":
        if is_pageable(value):
            return cls.PAGEABLE
        if is_sort(value):
            return cls.SORT
        if is_distance(value):
            return cls.DISTANCE
        return cls.BINDABLE


def _resolve_annotation(annotation: Any, namespace: "dict[str, Any]") -> Any:
    """Evaluate a string annotation in the namespace of the module defining the method.

    An annotation that cannot be evaluated is returned unchanged and classified by
    name, leaving the other parameters of the method unaffected.
    """
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, namespace)  # noqa: S307
    except (NameError, AttributeError, SyntaxError, TypeError):
        logger.debug("Could not resolve annotation %r, classifying by name", annotation)
        return annotation


class QueryMethodParameter:
    """A single declared query method parameter."""

    __slots__ = ("index", "kind", "name")

    def __init__(self, index: int, kind: ParameterKind, name: Optional[str] = None) -> None:
        self.index = index
        self.kind = kind
        self.name = name

    @property
    def is_bindable(self) -> bool:
        return self.kind is ParameterKind.BINDABLE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryMethodParameter):
            return False
        return (self.index, self.kind, self.name) == (other.index, other.kind, other.name)

    def __hash__(self) -> int:
        return hash((self.index, self.kind, self.name))

    def __repr__(self) -> str:
        return f"QueryMethodParameter(index={self.index!r}, kind={self.kind!r}, name={self.name!r})"


class QueryMethodParameters:
    """Declared parameters of a query method.

    At most one parameter of each special kind is allowed.
    """

    __slots__ = ("_bindable", "_special_indexes", "method_name", "parameters")

    def __init__(self, parameters: "Sequence[QueryMethodParameter]", method_name: Optional[str] = None) -> None:
        """Initialize from already classified parameters.

        Args:
            parameters: Parameters in declaration order.
            method_name: Name of the query method, used in error messages.

        Raises:
            ParameterError: If a special parameter kind is declared more than once.
        """
        self.parameters = tuple(parameters)
        self.method_name = method_name
        self._special_indexes: dict[ParameterKind, int] = {}
        for parameter in self.parameters:
            if parameter.is_bindable:
                continue
            if parameter.kind in self._special_indexes:
                msg = f"Only one {parameter.kind} parameter is allowed"
                raise ParameterError(msg, method_name)
            self._special_indexes[parameter.kind] = parameter.index
        self._bindable = tuple(parameter for parameter in self.parameters if parameter.is_bindable)

    @classmethod
    def from_callable(cls, func: "Callable[..., Any]") -> "QueryMethodParameters":
        """Classify the parameters of a query method by their annotations.

        ``self`` and ``cls`` are skipped; unannotated parameters are bindable.

        Args:
            func: The query method.

        Returns:
            The classified parameters.
        """
        signature = inspect.signature(func)
        namespace = getattr(inspect.unwrap(func), "__globals__", {})
        parameters = []
        for parameter in signature.parameters.values():
            if parameter.name in _IMPLICIT_PARAMETERS:
                continue
            annotation = _resolve_annotation(parameter.annotation, namespace)
            parameters.append(
                QueryMethodParameter(len(parameters), ParameterKind.for_type(annotation), parameter.name)
            )
        return cls(parameters, getattr(func, "__qualname__", None))

    @classmethod
    def from_values(cls, values: "Sequence[Any]") -> "QueryMethodParameters":
        """Classify parameters by the runtime type of the supplied values."""
        return cls([QueryMethodParameter(index, ParameterKind.for_value(value)) for index, value in enumerate(values)])

    @property
    def bindable_parameters(self) -> "tuple[QueryMethodParameter, ...]":
        return self._bindable

    def get_index(self, kind: ParameterKind) -> Optional[int]:
        """Return the declared index of a special parameter kind, if present."""
        return self._special_indexes.get(kind)

    def get_bindable_parameter(self, index: int) -> QueryMethodParameter:
        """Return the bindable parameter at a bindable position.

        Raises:
            ParameterIndexError: If the position is out of range.
        """
        if not 0 <= index < len(self._bindable):
            raise ParameterIndexError(index, len(self._bindable), self.method_name)
        return self._bindable[index]

    def __len__(self) -> int:
        return len(self.parameters)

    def __iter__(self) -> "Iterator[QueryMethodParameter]":
        return iter(self.parameters)

    def __repr__(self) -> str:
        return f"QueryMethodParameters({list(self.parameters)!r})"


class ParametersParameterAccessor:
    """Parameter accessor over the argument values of one query method invocation."""

    __slots__ = ("parameters", "values")

    def __init__(self, parameters: QueryMethodParameters, values: "Sequence[Any]") -> None:
        """Initialize the accessor.

        Args:
            parameters: Declared parameters of the query method.
            values: Argument values in declaration order.

        Raises:
            ParameterError: If the number of values does not match the declared parameters.
        """
        if len(values) != len(parameters):
            msg = f"Expected {len(parameters)} parameter values, got {len(values)}"
            raise ParameterError(msg, parameters.method_name)
        self.parameters = parameters
        self.values = tuple(values)

    @classmethod
    def from_values(cls, *values: Any) -> "ParametersParameterAccessor":
        """Create an accessor classifying parameters by the runtime type of ``values``."""
        return cls(QueryMethodParameters.from_values(values), values)

    def _get_special(self, kind: ParameterKind) -> Any:
        index = self.parameters.get_index(kind)
        return None if index is None else self.values[index]

    def get_pageable(self) -> Optional[Pageable]:
        return self._get_special(ParameterKind.PAGEABLE)

    def get_sort(self) -> Optional[Sort]:
        """Return the sort argument, falling back to the sort of the pageable argument."""
        sort = self._get_special(ParameterKind.SORT)
        if sort is not None:
            return sort
        pageable = self.get_pageable()
        return pageable.sort if pageable is not None else None

    def get_max_distance(self) -> Optional[Distance]:
        return self._get_special(ParameterKind.DISTANCE)

    def get_bindable_value(self, index: int) -> Any:
        """Return the value of the bindable parameter at ``index``.

        Raises:
            ParameterIndexError: If the position is out of range.
        """
        return self.values[self.parameters.get_bindable_parameter(index).index]

    def get_bindable_values(self) -> "tuple[Any, ...]":
        return tuple(self.values[parameter.index] for parameter in self.parameters.bindable_parameters)

    def iterator(self) -> "ParameterIterator":
        return BindableParameterIterator(self)

    def __iter__(self) -> "ParameterIterator":
        return self.iterator()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(values={self.values!r})"


class BindableParameterIterator:
    """Cursor over the bindable values of a :class:`ParametersParameterAccessor`.

    Removal is not supported.
    """

    __slots__ = ("_accessor", "_count", "_position")

    def __init__(self, accessor: ParametersParameterAccessor) -> None:
        self._accessor = accessor
        self._count = len(accessor.parameters.bindable_parameters)
        self._position = 0

    def __iter__(self) -> "BindableParameterIterator":
        return self

    def has_next(self) -> bool:
        return self._position < self._count

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        value = self._accessor.get_bindable_value(self._position)
        self._position += 1
        return value

    def remove(self) -> None:
        msg = "Bindable parameters cannot be removed"
        raise UnsupportedOperationError(msg)
