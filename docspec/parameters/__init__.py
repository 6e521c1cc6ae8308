"""Parameter access for query method invocations."""

from docspec.parameters.accessor import (
    BindableParameterIterator,
    ParameterKind,
    ParametersParameterAccessor,
    QueryMethodParameter,
    QueryMethodParameters,
)
from docspec.parameters.converting import ConvertingIterator, ConvertingParameterAccessor

__all__ = (
    "BindableParameterIterator",
    "ConvertingIterator",
    "ConvertingParameterAccessor",
    "ParameterKind",
    "ParametersParameterAccessor",
    "QueryMethodParameter",
    "QueryMethodParameters",
)
