"""docspec: converting parameter access for document stores."""

from docspec import core, exceptions, parameters, typing, utils
from docspec.__metadata__ import __version__
from docspec.core import (
    ConversionConfig,
    DefaultTypeMapper,
    Direction,
    Distance,
    DocumentWriter,
    MappingDocumentWriter,
    Metrics,
    Order,
    Pageable,
    Sort,
    TypeMapper,
    TypeMapperProvider,
    TypeStrippingConverter,
    strip_type_info,
)
from docspec.exceptions import (
    DocSpecError,
    DocumentConversionError,
    ParameterError,
    ParameterIndexError,
    UnsupportedOperationError,
)
from docspec.parameters import ConvertingIterator, ConvertingParameterAccessor, ParametersParameterAccessor

__all__ = (
    "ConversionConfig",
    "ConvertingIterator",
    "ConvertingParameterAccessor",
    "DefaultTypeMapper",
    "Direction",
    "Distance",
    "DocSpecError",
    "DocumentConversionError",
    "DocumentWriter",
    "MappingDocumentWriter",
    "Metrics",
    "Order",
    "Pageable",
    "ParameterError",
    "ParameterIndexError",
    "ParametersParameterAccessor",
    "Sort",
    "TypeMapper",
    "TypeMapperProvider",
    "TypeStrippingConverter",
    "UnsupportedOperationError",
    "__version__",
    "core",
    "exceptions",
    "parameters",
    "strip_type_info",
    "typing",
    "utils",
)
