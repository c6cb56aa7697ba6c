"""himodel: value types for health-data interchange.

himodel provides the primitive and compound values of a FHIR-flavoured
information model, with precision-aware temporal values, scale-preserving
decimals and the two comparison levels the model defines: strict
``equal`` and tolerant ``equivalent``.

Value Types:
    DateType: Date with year, month or day precision
    DateTimeType: Date-time with year to nanosecond precision and UTC offset
    TimeType: Time of day with hour to nanosecond precision
    DecimalType: Fixed-point decimal
    StringType, CodeType, IDType, MarkdownType: String-like values
    URIType: URI value
    QuantityType: Measured amount with unit
    CollectionType: Append-only sequence of one item type

Type Specifications:
    FQTypeName: Namespaced type name
    TypeSpecification: Node of the single-inheritance type forest
    common_base_type: Nearest common ancestor of two type specifications
    BUILTIN_TYPES: Registry of the built-in type specifications

Units:
    Precision: Ordered temporal precision scale
    Timezone: Fixed UTC offset
    DataType: Data-type tags

Exceptions:
    HiModelError: Base exception
    ValidationError: Invalid input to a validating constructor
    ParseError: Literal does not match its grammar
    TimezoneError: Invalid UTC offset

Example:
    >>> from himodel import TimeType
    >>> TimeType.parse("17:22:00.00").equivalent(TimeType.parse_fluent("17:22"))
    True
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Value types
from himodel.core.collection import CollectionType
from himodel.core.date import DateType
from himodel.core.datetime import DateTimeType
from himodel.core.decimal import DecimalType
from himodel.core.quantity import QuantityType
from himodel.core.string import CodeType, IDType, MarkdownType, StringType
from himodel.core.time import TimeType
from himodel.core.uri import URIType

# Type specifications
from himodel.core.registry import BUILTIN_TYPES, TypeRegistry, build_builtin_registry
from himodel.core.typespec import FQTypeName, TypeSpecification, common_base_type

# Resources
from himodel.resource.dynamic import DynamicResource

# Units
from himodel.units.datatype import DataType
from himodel.units.precision import Precision
from himodel.units.timezone import Timezone

# Exceptions
from himodel.errors import (
    HiModelError,
    ParseError,
    TimezoneError,
    ValidationError,
)

# Comparison functions
from himodel.comparison import equal, equivalent

__all__: list[str] = [
    "__version__",
    # Value types
    "CollectionType",
    "DateType",
    "DateTimeType",
    "DecimalType",
    "QuantityType",
    "StringType",
    "CodeType",
    "IDType",
    "MarkdownType",
    "TimeType",
    "URIType",
    # Type specifications
    "BUILTIN_TYPES",
    "TypeRegistry",
    "build_builtin_registry",
    "FQTypeName",
    "TypeSpecification",
    "common_base_type",
    # Resources
    "DynamicResource",
    # Units
    "DataType",
    "Precision",
    "Timezone",
    # Exceptions
    "HiModelError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    # Comparison functions
    "equal",
    "equivalent",
]
