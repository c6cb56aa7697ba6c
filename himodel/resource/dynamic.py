"""Untyped resource backed by a plain mapping.

A DynamicResource holds resource content as nested dictionaries, the way
it arrives from a document, without a generated class per resource type.
Its type is derived from the ``resourceType`` entry.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, ClassVar

from himodel.core.typespec import FQTypeName, TypeSpecification
from himodel.units.datatype import DataType

RESOURCE_TYPE_KEY = "resourceType"


@functools.lru_cache(maxsize=None)
def _resource_type_spec(resource_type: str) -> TypeSpecification:
    """Return the shared type specification node for a resource type."""
    return TypeSpecification(FQTypeName(resource_type))


class DynamicResource(Mapping[str, Any]):
    """A resource whose content is an untyped mapping.

    All resources of one type share a single type specification node. It
    has no namespace and no base, so it only relates to resources of the
    same type.

    Examples:
        >>> patient = DynamicResource("Patient")
        >>> patient.resource_type
        'Patient'
        >>> str(patient.type_spec)
        'Patient'
        >>> patient.is_empty()
        True
    """

    __slots__ = ("_model",)

    DATA_TYPE: ClassVar[DataType] = DataType.RESOURCE

    def __init__(self, resource_type: str) -> None:
        self._model: MutableMapping[str, Any] = {RESOURCE_TYPE_KEY: resource_type}

    @classmethod
    def from_model(cls, model: MutableMapping[str, Any]) -> DynamicResource:
        """Wrap an existing mapping without copying it."""
        instance = object.__new__(cls)
        instance._model = model
        return instance

    @property
    def model(self) -> MutableMapping[str, Any]:
        """Return the wrapped mapping."""
        return self._model

    @property
    def resource_type(self) -> str:
        """Return the resource type, or an empty string if there is none."""
        value = self._model.get(RESOURCE_TYPE_KEY)
        return value if isinstance(value, str) else ""

    @property
    def data_type(self) -> DataType:
        return self.DATA_TYPE

    @property
    def type_spec(self) -> TypeSpecification:
        return _resource_type_spec(self.resource_type)

    def is_empty(self) -> bool:
        """Return True if the resource has no content besides its type."""
        return all(key == RESOURCE_TYPE_KEY for key in self._model)

    def __getitem__(self, key: str) -> Any:
        return self._model[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._model)

    def __len__(self) -> int:
        return len(self._model)

    def __repr__(self) -> str:
        return f"DynamicResource.from_model({self._model!r})"


__all__ = ["DynamicResource", "RESOURCE_TYPE_KEY"]
