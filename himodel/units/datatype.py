"""Data-type tags for himodel values.

Every value reports one of these tags through its ``data_type`` property.
"""

from __future__ import annotations

from enum import Enum


class DataType(Enum):
    """Tag identifying the dynamic kind of a value.

    Examples:
        >>> DataType.DATE_TIME.value
        'dateTime'

        >>> DataType.CODE.is_primitive
        True
    """

    UNDEFINED = "undefined"
    COLLECTION = "Collection"
    RESOURCE = "Resource"

    STRING = "string"
    CODE = "code"
    ID = "id"
    MARKDOWN = "markdown"
    URI = "uri"
    DECIMAL = "decimal"
    DATE = "date"
    DATE_TIME = "dateTime"
    TIME = "time"

    QUANTITY = "Quantity"

    @property
    def is_primitive(self) -> bool:
        """Return True for primitive element types."""
        return self in _PRIMITIVES

    @property
    def is_temporal(self) -> bool:
        """Return True for date, dateTime and time."""
        return self in (DataType.DATE, DataType.DATE_TIME, DataType.TIME)


_PRIMITIVES = frozenset(
    {
        DataType.STRING,
        DataType.CODE,
        DataType.ID,
        DataType.MARKDOWN,
        DataType.URI,
        DataType.DECIMAL,
        DataType.DATE,
        DataType.DATE_TIME,
        DataType.TIME,
    }
)


__all__ = ["DataType"]
