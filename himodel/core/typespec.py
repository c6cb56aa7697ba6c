"""Type specifications and the single-inheritance type forest.

A TypeSpecification names a type and optionally points at its base. The
nodes form a forest of single-parent chains that polymorphic queries walk,
most importantly common_base_type().
"""

from __future__ import annotations

from typing import Iterator


class FQTypeName:
    """A fully qualified type name: a local name inside an optional namespace.

    Examples:
        >>> str(FQTypeName("Patient", "FHIR"))
        'FHIR.Patient'

        >>> str(FQTypeName("Other"))
        'Other'

        >>> FQTypeName("code", "FHIR") == FQTypeName("code", "FHIR")
        True
    """

    __slots__ = ("_namespace", "_name", "_fq_name")

    def __init__(self, name: str, namespace: str = "") -> None:
        self._namespace = namespace
        self._name = name
        self._fq_name = f"{namespace}.{name}" if namespace else name

    @property
    def namespace(self) -> str:
        """Return the namespace, empty if there is none."""
        return self._namespace

    @property
    def name(self) -> str:
        """Return the local name."""
        return self._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FQTypeName):
            return NotImplemented
        return self._fq_name == other._fq_name

    def __hash__(self) -> int:
        return hash(self._fq_name)

    def __repr__(self) -> str:
        return f"FQTypeName({self._name!r}, {self._namespace!r})"

    def __str__(self) -> str:
        return self._fq_name


def fq_type_name_equal(left: FQTypeName | None, right: FQTypeName | None) -> bool:
    """Compare two optional names; two missing names are equal."""
    if left is None or right is None:
        return left is None and right is None
    return left == right


class TypeSpecification:
    """An immutable node in the type forest.

    Built-in nodes are created once, when the registry is assembled, and
    shared by reference from every value of that type. Because each node
    has at most one base and a base must exist before the node that points
    at it, the chains are finite and acyclic.

    Attributes:
        fq_name: The fully qualified name of the type.
        base: The base type node, or None at a forest root.

    Examples:
        >>> resource = TypeSpecification(FQTypeName("Resource", "FHIR"))
        >>> patient = TypeSpecification(FQTypeName("Patient", "FHIR"), resource)
        >>> str(patient.fq_base_name)
        'FHIR.Resource'
        >>> patient.is_derived_from(resource)
        True
    """

    __slots__ = ("_fq_name", "_base")

    def __init__(
        self,
        fq_name: FQTypeName | None,
        base: TypeSpecification | None = None,
    ) -> None:
        self._fq_name = fq_name
        self._base = base

    @property
    def fq_name(self) -> FQTypeName | None:
        return self._fq_name

    @property
    def base(self) -> TypeSpecification | None:
        return self._base

    @property
    def fq_base_name(self) -> FQTypeName | None:
        """Return the name of the base type, or None at a root."""
        if self._base is None:
            return None
        return self._base.fq_name

    def ancestors(self) -> Iterator[TypeSpecification]:
        """Yield this node, then each base up to the forest root."""
        node: TypeSpecification | None = self
        while node is not None:
            yield node
            node = node._base

    def is_derived_from(self, other: TypeSpecification) -> bool:
        """Return True if other is reachable by following base links.

        Zero links count, so every node derives from itself. Nodes are
        compared by identity.
        """
        return any(node is other for node in self.ancestors())

    def equal(self, other: object) -> bool:
        """Compare by value: same name and same base name."""
        if not isinstance(other, TypeSpecification):
            return False
        return fq_type_name_equal(self._fq_name, other._fq_name) and fq_type_name_equal(
            self.fq_base_name, other.fq_base_name
        )

    def __repr__(self) -> str:
        return f"TypeSpecification({self._fq_name!r}, base={self.fq_base_name!r})"

    def __str__(self) -> str:
        if self._fq_name is None:
            return ""
        return str(self._fq_name)


def common_base_type(
    left: TypeSpecification, right: TypeSpecification
) -> TypeSpecification | None:
    """Return the nearest type both specifications derive from.

    The chain of ``left`` is collected as an identity set, then the chain
    of ``right`` is walked from its start towards its root; the first node
    found in the set is the answer. With single inheritance that node is
    unique.

    Args:
        left: First type specification.
        right: Second type specification.

    Returns:
        The common base node, or None if the chains never meet.

    Examples:
        >>> resource = TypeSpecification(FQTypeName("Resource", "FHIR"))
        >>> domain = TypeSpecification(FQTypeName("DomainResource", "FHIR"), resource)
        >>> patient = TypeSpecification(FQTypeName("Patient", "FHIR"), domain)
        >>> person = TypeSpecification(FQTypeName("Person", "FHIR"), domain)
        >>> common_base_type(patient, person) is domain
        True
        >>> common_base_type(patient, TypeSpecification(FQTypeName("Other"))) is None
        True
    """
    seen = {id(node) for node in left.ancestors()}
    for node in right.ancestors():
        if id(node) in seen:
            return node
    return None


__all__ = [
    "FQTypeName",
    "TypeSpecification",
    "common_base_type",
    "fq_type_name_equal",
]
