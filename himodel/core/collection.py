"""Append-only collection of values of one item type."""

from __future__ import annotations

import logging
from typing import ClassVar, Iterator

from himodel._internal.constants import COLLECTION_TYPE_NAME
from himodel.core.base import Accessor
from himodel.core.registry import BUILTIN_TYPES
from himodel.core.typespec import TypeSpecification
from himodel.errors import ValidationError
from himodel.units.datatype import DataType

logger = logging.getLogger(__name__)


class CollectionType:
    """An ordered, append-only sequence of values.

    The item type is fixed when the collection is created. Every added
    item must derive from it, so a collection of ``string`` accepts codes
    and ids as well.

    Examples:
        >>> from himodel.core.string import CodeType, StringType
        >>> strings = StringType.new_collection()
        >>> strings.add(StringType("a"))
        >>> strings.add(CodeType("b"))
        >>> len(strings), str(strings[1])
        (2, 'b')
    """

    __slots__ = ("_item_type_spec", "_items")

    DATA_TYPE: ClassVar[DataType] = DataType.COLLECTION
    TYPE_SPEC: ClassVar[TypeSpecification] = BUILTIN_TYPES[COLLECTION_TYPE_NAME]

    def __init__(self, item_type_spec: TypeSpecification) -> None:
        """Create an empty collection.

        Raises:
            ValidationError: If no item type is given.
        """
        if not isinstance(item_type_spec, TypeSpecification):
            raise ValidationError("no item type has been specified")
        self._item_type_spec = item_type_spec
        self._items: list[Accessor] = []

    @property
    def data_type(self) -> DataType:
        return self.DATA_TYPE

    @property
    def type_spec(self) -> TypeSpecification:
        return self.TYPE_SPEC

    @property
    def item_type_spec(self) -> TypeSpecification:
        """Return the type every item derives from."""
        return self._item_type_spec

    def is_empty(self) -> bool:
        return not self._items

    def count(self) -> int:
        return len(self._items)

    def add(self, item: Accessor) -> None:
        """Append an item.

        Raises:
            ValidationError: If the item does not derive from the item type.
        """
        item_spec = getattr(item, "type_spec", None)
        if not isinstance(item_spec, TypeSpecification) or not item_spec.is_derived_from(
            self._item_type_spec
        ):
            logger.debug("rejected %r for collection of %s", item, self._item_type_spec)
            raise ValidationError(
                f"item of type {item_spec} cannot be added to a collection of "
                f"{self._item_type_spec}"
            )
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Accessor:
        return self._items[index]

    def __iter__(self) -> Iterator[Accessor]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CollectionType({self._item_type_spec}, items={self._items!r})"


__all__ = ["CollectionType"]
