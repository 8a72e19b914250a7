# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the AST node models."""

import pytest
from pydantic import ValidationError

from gqlast.model import (
    Argument,
    Directive,
    DirectiveDefinition,
    DirectiveLocation,
    Field,
    FloatValue,
    IntValue,
    ListType,
    ListValue,
    NamedType,
    NonNullType,
    ObjectField,
    ObjectTypeExtensionWithFields,
    ObjectValue,
    OperationType,
    ScalarTypeExtension,
    SchemaDefinition,
    SchemaExtensionWithOperationTypes,
    SelectionSet,
    StringValue,
    Variable,
    extract_name,
)
from gqlast.model.values import INT64_MAX, INT64_MIN

# ###############
# Names
# ###############


class TestNames:
    def test_valid_names_accepted(self) -> None:
        for name in ("a", "_", "__typename", "Post2", "camelCase_x"):
            assert NamedType(name=name).name == name

    def test_leading_digit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NamedType(name="2fast")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NamedType(name="")

    def test_punctuation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Variable(name="$id")


# ###############
# Type References
# ###############


class TestTypeReferences:
    def test_non_null_of_named(self) -> None:
        t = NonNullType(of_type=NamedType(name="String"))
        assert t.of_type == NamedType(name="String")

    def test_non_null_of_list(self) -> None:
        t = NonNullType(of_type=ListType(of_type=NamedType(name="Int")))
        assert isinstance(t.of_type, ListType)

    def test_double_non_null_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot wrap another non-null type"):
            NonNullType(of_type=NonNullType(of_type=NamedType(name="String")))

    def test_list_of_non_null_allowed(self) -> None:
        t = ListType(of_type=NonNullType(of_type=NamedType(name="Post")))
        assert isinstance(t.of_type, NonNullType)

    def test_structural_equality(self) -> None:
        a = ListType(of_type=NamedType(name="Post"))
        b = ListType(of_type=NamedType(name="Post"))
        assert a == b
        assert a != ListType(of_type=NamedType(name="Comment"))


class TestExtractName:
    def test_named_type_is_returned_unchanged(self) -> None:
        t = NamedType(name="Post")
        assert extract_name(t) == t

    def test_single_wrapper(self) -> None:
        assert extract_name(NonNullType(of_type=NamedType(name="Post"))).name == "Post"

    def test_list_of_non_null_non_null(self) -> None:
        t = NonNullType(of_type=ListType(of_type=NonNullType(of_type=NamedType(name="Post"))))
        assert extract_name(t) == NamedType(name="Post")

    def test_five_wrappers(self) -> None:
        t = NamedType(name="Deep")
        for _ in range(5):
            t = ListType(of_type=t)
        assert extract_name(t).name == "Deep"

    def test_very_deep_nesting(self) -> None:
        t = NamedType(name="Deep")
        for _ in range(500):
            t = NonNullType(of_type=ListType(of_type=t))
        assert extract_name(t).name == "Deep"


# ###############
# Values
# ###############


class TestValues:
    def test_int_bounds_accepted(self) -> None:
        assert IntValue(value=INT64_MAX).value == 2**63 - 1
        assert IntValue(value=INT64_MIN).value == -(2**63)

    def test_int_above_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IntValue(value=INT64_MAX + 1)

    def test_int_below_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IntValue(value=INT64_MIN - 1)

    def test_float_must_be_finite(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            FloatValue(value=float("inf"))
        with pytest.raises(ValidationError, match="finite"):
            FloatValue(value=float("nan"))

    def test_string_defaults_to_non_block(self) -> None:
        assert StringValue(value="x").block is False

    def test_object_fields_keep_order_and_duplicates(self) -> None:
        value = ObjectValue(
            fields=(
                ObjectField(name="b", value=IntValue(value=1)),
                ObjectField(name="a", value=IntValue(value=2)),
                ObjectField(name="b", value=IntValue(value=3)),
            )
        )
        assert [f.name for f in value.fields] == ["b", "a", "b"]

    def test_nested_list_value(self) -> None:
        value = ListValue(values=(ListValue(values=(IntValue(value=1),)), Variable(name="v")))
        assert isinstance(value.values[0], ListValue)
        assert value.values[1] == Variable(name="v")

    def test_directive_arguments_keep_duplicates(self) -> None:
        directive = Directive(
            name="d",
            arguments=(
                Argument(name="x", value=IntValue(value=1)),
                Argument(name="x", value=IntValue(value=2)),
            ),
        )
        assert len(directive.arguments) == 2


# ###############
# Immutability
# ###############


class TestImmutability:
    def test_nodes_are_frozen(self) -> None:
        t = NamedType(name="Post")
        with pytest.raises(ValidationError):
            t.name = "Comment"  # type: ignore[misc]

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NamedType(name="Post", nullable=True)  # type: ignore[call-arg]

    def test_nodes_are_hashable(self) -> None:
        assert hash(NamedType(name="Post")) == hash(NamedType(name="Post"))


# ###############
# Executable Nodes
# ###############


class TestField:
    def test_response_key_without_alias(self) -> None:
        assert Field(name="profilePic").response_key == "profilePic"

    def test_response_key_with_alias(self) -> None:
        assert Field(alias="smallPic", name="profilePic").response_key == "smallPic"

    def test_leaf_field_has_no_selection_set(self) -> None:
        assert Field(name="id").selection_set is None

    def test_nested_selection_set(self) -> None:
        f = Field(name="me", selection_set=SelectionSet(selections=(Field(name="id"),)))
        assert f.selection_set is not None
        assert f.selection_set.selections[0] == Field(name="id")


# ###############
# Type System Nodes
# ###############


class TestSchemaDefinition:
    def test_root_type_lookup(self) -> None:
        schema = SchemaDefinition(query=NamedType(name="Q"), mutation=NamedType(name="M"))
        assert schema.root_type(OperationType.QUERY) == NamedType(name="Q")
        assert schema.root_type(OperationType.MUTATION) == NamedType(name="M")
        assert schema.root_type(OperationType.SUBSCRIPTION) is None


class TestDirectiveDefinition:
    def test_requires_at_least_one_location(self) -> None:
        with pytest.raises(ValidationError):
            DirectiveDefinition(name="d", locations=())

    def test_defaults(self) -> None:
        d = DirectiveDefinition(name="d", locations=(DirectiveLocation.FIELD,))
        assert d.repeatable is False
        assert d.arguments == ()
        assert d.description is None


class TestExtensions:
    def test_fields_variant_requires_fields(self) -> None:
        with pytest.raises(ValidationError):
            ObjectTypeExtensionWithFields(name="Story", fields=())

    def test_scalar_extension_requires_directives(self) -> None:
        with pytest.raises(ValidationError):
            ScalarTypeExtension(name="Time", directives=())

    def test_schema_extension_requires_a_root(self) -> None:
        with pytest.raises(ValidationError, match="at least one root operation type"):
            SchemaExtensionWithOperationTypes()

    def test_schema_extension_with_single_root(self) -> None:
        ext = SchemaExtensionWithOperationTypes(subscription=NamedType(name="S"))
        assert ext.query is None
        assert ext.subscription == NamedType(name="S")
