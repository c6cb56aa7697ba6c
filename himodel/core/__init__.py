"""Core value types.

This module provides the himodel value types and type specifications:
    - DateType, DateTimeType, TimeType: Precision-aware temporal values
    - DecimalType: Fixed-point decimal value
    - StringType, CodeType, IDType, MarkdownType, URIType: String-like values
    - QuantityType: Measured amount with unit
    - CollectionType: Append-only sequence of one item type
    - TypeSpecification, FQTypeName: Nodes of the type forest
"""

from __future__ import annotations

from himodel.core.base import Accessor, Element, PrimitiveType
from himodel.core.collection import CollectionType
from himodel.core.date import DateType
from himodel.core.datetime import DateTimeType
from himodel.core.decimal import DecimalType
from himodel.core.quantity import (
    GREATER_OR_EQUAL_COMPARATOR,
    GREATER_THAN_COMPARATOR,
    LESS_OR_EQUAL_COMPARATOR,
    LESS_THAN_COMPARATOR,
    UCUM_SYSTEM_URI,
    QuantityType,
)
from himodel.core.registry import BUILTIN_TYPES, TypeRegistry, build_builtin_registry
from himodel.core.string import CodeType, IDType, MarkdownType, StringType, is_string
from himodel.core.temporal import TemporalType
from himodel.core.time import TimeType
from himodel.core.typespec import (
    FQTypeName,
    TypeSpecification,
    common_base_type,
    fq_type_name_equal,
)
from himodel.core.uri import URIType, is_uri

__all__: list[str] = [
    "Accessor",
    "Element",
    "PrimitiveType",
    "TemporalType",
    "DateType",
    "DateTimeType",
    "TimeType",
    "DecimalType",
    "StringType",
    "CodeType",
    "IDType",
    "MarkdownType",
    "URIType",
    "QuantityType",
    "CollectionType",
    "is_string",
    "is_uri",
    "LESS_THAN_COMPARATOR",
    "LESS_OR_EQUAL_COMPARATOR",
    "GREATER_THAN_COMPARATOR",
    "GREATER_OR_EQUAL_COMPARATOR",
    "UCUM_SYSTEM_URI",
    "FQTypeName",
    "TypeSpecification",
    "common_base_type",
    "fq_type_name_equal",
    "TypeRegistry",
    "build_builtin_registry",
    "BUILTIN_TYPES",
]
