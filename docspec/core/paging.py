"""Pagination, sorting and geo distance value objects.

These are the special query method parameters. They are never bound as
query values: parameter accessors hand them out separately.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any, Final, Optional

from docspec.exceptions import ImproperConfigurationError

__all__ = ("Direction", "Distance", "Metric", "Metrics", "Order", "Pageable", "Sort")


class Direction(str, Enum):
    """Sort direction enumeration with string values."""

    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        return self.value

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse a direction case-insensitively.

        Args:
            value: ``"asc"`` or ``"desc"`` in any case.

        Raises:
            ImproperConfigurationError: If the value is not a known direction.

        Returns:
            The matching direction.
        """
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            msg = f"Invalid sort direction {value!r}, expected 'asc' or 'desc'"
            raise ImproperConfigurationError(msg) from exc


class Order:
    """Sort instruction for a single field."""

    __slots__ = ("direction", "field_name", "ignore_case")

    field_name: str
    direction: Direction
    ignore_case: bool

    def __init__(self, field_name: str, direction: Direction = Direction.ASC, ignore_case: bool = False) -> None:
        if not field_name:
            msg = "Sort field name must not be empty"
            raise ImproperConfigurationError(msg)
        self.field_name = field_name
        self.direction = direction
        self.ignore_case = ignore_case

    @property
    def is_ascending(self) -> bool:
        return self.direction.is_ascending

    def with_direction(self, direction: Direction) -> "Order":
        return Order(self.field_name, direction, self.ignore_case)

    def ignoring_case(self) -> "Order":
        return Order(self.field_name, self.direction, ignore_case=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return False
        return (self.field_name, self.direction, self.ignore_case) == (
            other.field_name,
            other.direction,
            other.ignore_case,
        )

    def __hash__(self) -> int:
        return hash((self.field_name, self.direction, self.ignore_case))

    def __repr__(self) -> str:
        suffix = ", ignore_case=True" if self.ignore_case else ""
        return f"Order({self.field_name!r}, {self.direction}{suffix})"


class Sort:
    """Ordered collection of :class:`Order` instructions."""

    __slots__ = ("_orders",)

    def __init__(self, *orders: Order) -> None:
        self._orders: tuple[Order, ...] = orders

    @classmethod
    def by(cls, *field_names: str, direction: Direction = Direction.ASC) -> "Sort":
        """Create a sort for the given fields sharing one direction."""
        return cls(*(Order(name, direction) for name in field_names))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self._orders)

    @property
    def orders(self) -> "tuple[Order, ...]":
        return self._orders

    def and_(self, other: "Sort") -> "Sort":
        """Return a new sort with the orders of ``other`` appended."""
        return Sort(*self._orders, *other.orders)

    def ascending(self) -> "Sort":
        return Sort(*(order.with_direction(Direction.ASC) for order in self._orders))

    def descending(self) -> "Sort":
        return Sort(*(order.with_direction(Direction.DESC) for order in self._orders))

    def get_order_for(self, field_name: str) -> Optional[Order]:
        for order in self._orders:
            if order.field_name == field_name:
                return order
        return None

    def to_document(self) -> "dict[str, int]":
        """Render the sort as a document store sort specification.

        Returns:
            Mapping of field name to ``1`` (ascending) or ``-1`` (descending).
        """
        return {order.field_name: 1 if order.is_ascending else -1 for order in self._orders}

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def __bool__(self) -> bool:
        return self.is_sorted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sort):
            return False
        return self._orders == other.orders

    def __hash__(self) -> int:
        return hash(self._orders)

    def __repr__(self) -> str:
        return f"Sort({', '.join(repr(order) for order in self._orders)})"


class Pageable:
    """Page request: a zero-based page number, a page size and an optional sort.

    An *unpaged* instance carries no page information and reports ``is_paged``
    as False.
    """

    __slots__ = ("_paged", "page", "size", "sort")

    page: int
    size: int
    sort: Sort

    def __init__(self, page: int, size: int, sort: Optional[Sort] = None) -> None:
        """Initialize the page request.

        Args:
            page: Zero-based page index.
            size: Number of items per page.
            sort: Optional sort to apply.

        Raises:
            ImproperConfigurationError: If page is negative or size is smaller than one.
        """
        if page < 0:
            msg = f"Page index must not be less than zero, got {page}"
            raise ImproperConfigurationError(msg)
        if size < 1:
            msg = f"Page size must not be less than one, got {size}"
            raise ImproperConfigurationError(msg)
        self.page = page
        self.size = size
        self.sort = sort if sort is not None else Sort.unsorted()
        self._paged = True

    @classmethod
    def of(cls, page: int, size: int, *field_names: str, direction: Direction = Direction.ASC) -> "Pageable":
        return cls(page, size, Sort.by(*field_names, direction=direction) if field_names else None)

    @classmethod
    def unpaged(cls) -> "Pageable":
        instance = cls(0, 1)
        instance._paged = False
        return instance

    @property
    def is_paged(self) -> bool:
        return self._paged

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def next(self) -> "Pageable":
        if not self._paged:
            return self
        return Pageable(self.page + 1, self.size, self.sort)

    def previous_or_first(self) -> "Pageable":
        if not self._paged:
            return self
        return Pageable(self.page - 1, self.size, self.sort) if self.has_previous else self.first()

    def first(self) -> "Pageable":
        if not self._paged:
            return self
        return Pageable(0, self.size, self.sort)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pageable):
            return False
        if not (self._paged or other.is_paged):
            return True
        return (self._paged, self.page, self.size, self.sort) == (other.is_paged, other.page, other.size, other.sort)

    def __hash__(self) -> int:
        if not self._paged:
            return hash("unpaged")
        return hash((self.page, self.size, self.sort))

    def __repr__(self) -> str:
        if not self._paged:
            return "Pageable.unpaged()"
        return f"Pageable(page={self.page}, size={self.size}, sort={self.sort!r})"


class Metric:
    """Unit of a :class:`Distance`, expressed by its multiplier relative to radians."""

    __slots__ = ("abbreviation", "multiplier")

    def __init__(self, multiplier: float, abbreviation: str = "") -> None:
        self.multiplier = multiplier
        self.abbreviation = abbreviation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metric):
            return False
        return self.multiplier == other.multiplier and self.abbreviation == other.abbreviation

    def __hash__(self) -> int:
        return hash((self.multiplier, self.abbreviation))

    def __repr__(self) -> str:
        return f"Metric({self.multiplier!r}, {self.abbreviation!r})"


class Metrics:
    """Built-in metrics. The multipliers are the earth radius in the given unit."""

    KILOMETERS: Final[Metric] = Metric(6378.137, "km")
    MILES: Final[Metric] = Metric(3963.191, "mi")
    NEUTRAL: Final[Metric] = Metric(1.0, "")


class Distance:
    """Distance value with a metric, used for geo-near queries.

    Distances compare and hash by their normalized value, so the same distance
    in different metrics is equal.
    """

    __slots__ = ("metric", "value")

    value: float
    metric: Metric

    def __init__(self, value: float, metric: Optional[Metric] = None) -> None:
        self.value = float(value)
        self.metric = metric if metric is not None else Metrics.NEUTRAL

    @property
    def normalized_value(self) -> float:
        """The distance in radians."""
        return self.value / self.metric.multiplier

    def in_metric(self, metric: Metric) -> "Distance":
        return Distance(self.normalized_value * metric.multiplier, metric)

    def __add__(self, other: Any) -> "Distance":
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.value + other.in_metric(self.metric).value, self.metric)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.normalized_value < other.normalized_value

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.normalized_value <= other.normalized_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return False
        return self.normalized_value == other.normalized_value

    def __hash__(self) -> int:
        return hash(self.normalized_value)

    def __repr__(self) -> str:
        unit = f" {self.metric.abbreviation}" if self.metric.abbreviation else ""
        return f"Distance({self.value!r}{unit})"
