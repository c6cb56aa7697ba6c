"""Registry of the built-in type specifications.

The registry is assembled once by build_builtin_registry() and never
changes afterwards. Value classes reference their node from the shared
BUILTIN_TYPES instance, so every value of a type points at the same node
and common_base_type() can compare nodes by identity.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from himodel._internal.constants import (
    COLLECTION_TYPE_NAME,
    ELEMENT_TYPE_NAME,
    NAMESPACE_NAME,
)
from himodel.core.typespec import FQTypeName, TypeSpecification

logger = logging.getLogger(__name__)

# Primitive and compound types deriving directly from Element
_ELEMENT_TYPES = ("string", "uri", "decimal", "date", "dateTime", "time", "Quantity")

# String-like types deriving from string
_STRING_TYPES = ("code", "id", "markdown")


class TypeRegistry(Mapping[str, TypeSpecification]):
    """An immutable mapping from local type name to its specification.

    Examples:
        >>> registry = build_builtin_registry()
        >>> str(registry["code"].fq_base_name)
        'FHIR.string'
        >>> "Patient" in registry
        False
    """

    __slots__ = ("_namespace", "_specs")

    def __init__(self, namespace: str, specs: Mapping[str, TypeSpecification]) -> None:
        self._namespace = namespace
        self._specs = dict(specs)

    @property
    def namespace(self) -> str:
        """Return the namespace of the registered element types."""
        return self._namespace

    def __getitem__(self, name: str) -> TypeSpecification:
        return self._specs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"TypeRegistry(namespace={self._namespace!r}, types={sorted(self._specs)!r})"


def build_builtin_registry(namespace: str = NAMESPACE_NAME) -> TypeRegistry:
    """Assemble the built-in type forest.

    Args:
        namespace: Namespace of the element types. The collection type is
            always created without a namespace.

    Returns:
        A new registry. Calling this twice yields two unrelated forests.
    """
    specs: dict[str, TypeSpecification] = {}

    element = TypeSpecification(FQTypeName(ELEMENT_TYPE_NAME, namespace))
    specs[ELEMENT_TYPE_NAME] = element

    for name in _ELEMENT_TYPES:
        specs[name] = TypeSpecification(FQTypeName(name, namespace), element)

    for name in _STRING_TYPES:
        specs[name] = TypeSpecification(FQTypeName(name, namespace), specs["string"])

    specs[COLLECTION_TYPE_NAME] = TypeSpecification(FQTypeName(COLLECTION_TYPE_NAME))

    logger.debug("built %d type specifications in namespace %r", len(specs), namespace)
    return TypeRegistry(namespace, specs)


BUILTIN_TYPES: TypeRegistry = build_builtin_registry()


__all__ = [
    "TypeRegistry",
    "build_builtin_registry",
    "BUILTIN_TYPES",
]
