"""Shared capabilities of himodel values.

Every value, the collection container and the dynamic resource implement
the Accessor protocol: they report a data-type tag, a type specification
and whether they are semantically empty. Value types additionally derive
from Element, which wires ``==`` to the strict ``equal`` comparison.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from himodel._internal.constants import ELEMENT_TYPE_NAME
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.typespec import TypeSpecification
from himodel.units.datatype import DataType

if TYPE_CHECKING:
    from himodel.core.collection import CollectionType


@runtime_checkable
class Accessor(Protocol):
    """Anything that reports its kind, its type and whether it is empty."""

    @property
    def data_type(self) -> DataType: ...

    @property
    def type_spec(self) -> TypeSpecification: ...

    def is_empty(self) -> bool: ...


class Element:
    """Base class of all himodel value types.

    Subclasses set the DATA_TYPE and TYPE_SPEC class attributes and
    implement ``equal``, ``equivalent`` and ``is_empty``. Comparing a value
    with ``==`` is the same as calling ``equal``.
    """

    __slots__ = ()

    DATA_TYPE: ClassVar[DataType] = DataType.UNDEFINED
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES[ELEMENT_TYPE_NAME]

    @property
    def data_type(self) -> DataType:
        """Return the data-type tag of this value."""
        return self.DATA_TYPE

    @property
    def type_spec(self) -> TypeSpecification:
        """Return the shared type specification of this value."""
        return self.TYPE_SPEC

    def is_empty(self) -> bool:
        raise NotImplementedError

    def equal(self, other: object) -> bool:
        """Return True if other has the same kind and the same value."""
        raise NotImplementedError

    def equivalent(self, other: object) -> bool:
        """Return True if other denotes the same value at a tolerant level."""
        raise NotImplementedError

    def _same_kind(self, other: object) -> bool:
        return isinstance(other, Element) and other.data_type is self.data_type

    def __eq__(self, other: object) -> bool:
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        return not self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def new_collection(cls) -> CollectionType:
        """Create an empty collection typed for this class.

        Examples:
            >>> from himodel.core.date import DateType
            >>> DateType.new_collection().is_empty()
            True
        """
        from himodel.core.collection import CollectionType

        return CollectionType(cls.TYPE_SPEC)


class PrimitiveType(Element):
    """Base class of primitive values, which may be absent (nil).

    A nil value keeps its type and, for temporal values, its precision,
    but carries no data: it renders as the empty string and is empty.
    """

    __slots__ = ("_nil",)

    @property
    def is_nil(self) -> bool:
        """Return True if this is the absent value."""
        return self._nil

    def is_empty(self) -> bool:
        return self._nil

    def _nil_state_matches(self, other: PrimitiveType) -> bool | None:
        """Resolve a comparison by absence alone, if possible.

        Returns True when both values are nil, False when exactly one is,
        and None when both are present and the values must be compared.
        """
        if self._nil or other._nil:
            return self._nil and other._nil
        return None


__all__ = [
    "Accessor",
    "Element",
    "PrimitiveType",
]
