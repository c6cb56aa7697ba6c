"""Tests for type specifications, common base resolution and the registry."""

from __future__ import annotations

import pytest

from himodel.core.registry import BUILTIN_TYPES, TypeRegistry, build_builtin_registry
from himodel.core.typespec import (
    FQTypeName,
    TypeSpecification,
    common_base_type,
    fq_type_name_equal,
)


@pytest.fixture
def resources() -> dict[str, TypeSpecification]:
    """A small resource forest plus one unrelated type."""
    resource = TypeSpecification(FQTypeName("Resource", "FHIR"))
    domain = TypeSpecification(FQTypeName("DomainResource", "FHIR"), resource)
    return {
        "Resource": resource,
        "DomainResource": domain,
        "Patient": TypeSpecification(FQTypeName("Patient", "FHIR"), domain),
        "Person": TypeSpecification(FQTypeName("Person", "FHIR"), domain),
        "Medication": TypeSpecification(FQTypeName("Medication", "FHIR"), domain),
        "Other": TypeSpecification(FQTypeName("Other", "")),
    }


class TestFQTypeName:
    """Tests for FQTypeName."""

    def test_with_namespace(self) -> None:
        """A namespaced name renders as namespace.name."""
        name = FQTypeName("Patient", "FHIR")
        assert name.namespace == "FHIR"
        assert name.name == "Patient"
        assert str(name) == "FHIR.Patient"

    def test_without_namespace(self) -> None:
        """Without a namespace only the local name is rendered."""
        assert str(FQTypeName("Other")) == "Other"

    def test_equality(self) -> None:
        """Names compare by value."""
        assert FQTypeName("code", "FHIR") == FQTypeName("code", "FHIR")
        assert FQTypeName("code", "FHIR") != FQTypeName("code")
        assert hash(FQTypeName("code", "FHIR")) == hash(FQTypeName("code", "FHIR"))

    def test_optional_equality(self) -> None:
        """fq_type_name_equal treats two missing names as equal."""
        assert fq_type_name_equal(None, None)
        assert not fq_type_name_equal(FQTypeName("a"), None)
        assert fq_type_name_equal(FQTypeName("a"), FQTypeName("a"))


class TestTypeSpecification:
    """Tests for TypeSpecification nodes."""

    def test_base_name(self, resources: dict[str, TypeSpecification]) -> None:
        """fq_base_name is the name of the base node."""
        patient = resources["Patient"]
        assert patient.base is resources["DomainResource"]
        assert str(patient.fq_base_name) == "FHIR.DomainResource"
        assert resources["Resource"].fq_base_name is None

    def test_ancestors(self, resources: dict[str, TypeSpecification]) -> None:
        """ancestors yields the node itself up to the root."""
        names = [str(node) for node in resources["Patient"].ancestors()]
        assert names == ["FHIR.Patient", "FHIR.DomainResource", "FHIR.Resource"]

    def test_is_derived_from(self, resources: dict[str, TypeSpecification]) -> None:
        """Derivation follows base links, zero or more times."""
        patient = resources["Patient"]
        assert patient.is_derived_from(patient)
        assert patient.is_derived_from(resources["Resource"])
        assert not resources["Resource"].is_derived_from(patient)
        assert not patient.is_derived_from(resources["Person"])

    def test_value_equality(self, resources: dict[str, TypeSpecification]) -> None:
        """equal compares the name and the base name."""
        copy = TypeSpecification(FQTypeName("Patient", "FHIR"), resources["DomainResource"])
        assert copy.equal(resources["Patient"])
        assert not copy.equal(TypeSpecification(FQTypeName("Patient", "FHIR")))
        assert not copy.equal("FHIR.Patient")

    def test_str_without_name(self) -> None:
        """A node without a name renders empty."""
        assert str(TypeSpecification(None)) == ""


class TestCommonBaseType:
    """Tests for common_base_type."""

    def test_siblings(self, resources: dict[str, TypeSpecification]) -> None:
        """Patient and Person share DomainResource."""
        result = common_base_type(resources["Patient"], resources["Person"])
        assert result is resources["DomainResource"]

    def test_same_node(self, resources: dict[str, TypeSpecification]) -> None:
        """A node is its own common base."""
        assert common_base_type(resources["Patient"], resources["Patient"]) is resources["Patient"]

    def test_ancestor(self, resources: dict[str, TypeSpecification]) -> None:
        """The ancestor is the common base of a node and its ancestor."""
        assert common_base_type(resources["Patient"], resources["Resource"]) is resources["Resource"]
        assert common_base_type(resources["Resource"], resources["Patient"]) is resources["Resource"]

    def test_symmetric(self, resources: dict[str, TypeSpecification]) -> None:
        """The argument order does not matter."""
        a, b = resources["Medication"], resources["Person"]
        assert common_base_type(a, b) is common_base_type(b, a)

    def test_unrelated(self, resources: dict[str, TypeSpecification]) -> None:
        """Unrelated chains have no common base."""
        assert common_base_type(resources["Patient"], resources["Other"]) is None
        assert common_base_type(resources["Other"], resources["Patient"]) is None

    def test_identity_not_value(self, resources: dict[str, TypeSpecification]) -> None:
        """Nodes with equal names in separate forests are not related."""
        lookalike = TypeSpecification(FQTypeName("Resource", "FHIR"))
        assert common_base_type(resources["Patient"], lookalike) is None


class TestBuiltinRegistry:
    """Tests for the built-in type registry."""

    def test_element_root(self) -> None:
        """Element is the namespaced root."""
        element = BUILTIN_TYPES["Element"]
        assert str(element) == "FHIR.Element"
        assert element.base is None

    @pytest.mark.parametrize(
        "name", ["string", "uri", "decimal", "date", "dateTime", "time", "Quantity"]
    )
    def test_element_types(self, name: str) -> None:
        """Primitive and compound types derive directly from Element."""
        spec = BUILTIN_TYPES[name]
        assert str(spec) == f"FHIR.{name}"
        assert spec.base is BUILTIN_TYPES["Element"]

    @pytest.mark.parametrize("name", ["code", "id", "markdown"])
    def test_string_types(self, name: str) -> None:
        """String-like types derive from string."""
        assert BUILTIN_TYPES[name].base is BUILTIN_TYPES["string"]

    def test_collection(self) -> None:
        """Collection has neither namespace nor base."""
        collection = BUILTIN_TYPES["Collection"]
        assert str(collection) == "Collection"
        assert collection.base is None

    def test_common_base_of_builtins(self) -> None:
        """Builtin nodes resolve common bases by identity."""
        assert common_base_type(BUILTIN_TYPES["code"], BUILTIN_TYPES["id"]) is BUILTIN_TYPES["string"]
        assert common_base_type(BUILTIN_TYPES["code"], BUILTIN_TYPES["date"]) is BUILTIN_TYPES["Element"]
        assert common_base_type(BUILTIN_TYPES["code"], BUILTIN_TYPES["Collection"]) is None

    def test_mapping_interface(self) -> None:
        """The registry is a read-only mapping."""
        assert isinstance(BUILTIN_TYPES, TypeRegistry)
        assert len(BUILTIN_TYPES) == 12
        assert "Patient" not in BUILTIN_TYPES
        assert BUILTIN_TYPES.namespace == "FHIR"
        with pytest.raises(TypeError):
            BUILTIN_TYPES["Patient"] = TypeSpecification(FQTypeName("Patient"))  # type: ignore[index]

    def test_custom_namespace(self) -> None:
        """A separately built registry is an unrelated forest."""
        registry = build_builtin_registry(namespace="Test")
        assert str(registry["code"]) == "Test.code"
        assert str(registry["Collection"]) == "Collection"
        assert registry["string"] is not BUILTIN_TYPES["string"]
        assert registry["string"].equal(TypeSpecification(FQTypeName("string", "Test"), registry["Element"]))

    def test_registry_build_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Building a registry logs at debug level."""
        with caplog.at_level("DEBUG", logger="himodel.core.registry"):
            build_builtin_registry()
        assert "built 12 type specifications" in caplog.text
