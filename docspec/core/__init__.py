"""Core conversion machinery: value objects, type mapping, writers and type stripping."""

from docspec.core.config import ConversionConfig
from docspec.core.paging import Direction, Distance, Metric, Metrics, Order, Pageable, Sort
from docspec.core.type_mapper import DEFAULT_TYPE_KEY, DefaultTypeMapper, TypeMapper, TypeMapperProvider
from docspec.core.type_stripping import TypeStrippingConverter, strip_type_info
from docspec.core.writer import DocumentWriter, MappingDocumentWriter

__all__ = (
    "DEFAULT_TYPE_KEY",
    "ConversionConfig",
    "DefaultTypeMapper",
    "Direction",
    "Distance",
    "DocumentWriter",
    "MappingDocumentWriter",
    "Metric",
    "Metrics",
    "Order",
    "Pageable",
    "Sort",
    "TypeMapper",
    "TypeMapperProvider",
    "TypeStrippingConverter",
    "strip_type_info",
)
