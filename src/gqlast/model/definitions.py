# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-system definitions and extensions: schemas, types, directives."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field as _Field
from pydantic import model_validator

from gqlast.model.types import GraphQLType, Name, NamedType, Node
from gqlast.model.values import Directive, Value

# ###############
# Public Interface
# ###############


class OperationType(Enum):
    """The three root operation kinds."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


class DirectiveLocation(Enum):
    """Places where a directive may be applied."""

    # Executable locations
    QUERY = "QUERY"
    MUTATION = "MUTATION"
    SUBSCRIPTION = "SUBSCRIPTION"
    FIELD = "FIELD"
    FRAGMENT_DEFINITION = "FRAGMENT_DEFINITION"
    FRAGMENT_SPREAD = "FRAGMENT_SPREAD"
    INLINE_FRAGMENT = "INLINE_FRAGMENT"
    VARIABLE_DEFINITION = "VARIABLE_DEFINITION"

    # Type-system locations
    SCHEMA = "SCHEMA"
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    FIELD_DEFINITION = "FIELD_DEFINITION"
    ARGUMENT_DEFINITION = "ARGUMENT_DEFINITION"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    ENUM_VALUE = "ENUM_VALUE"
    INPUT_OBJECT = "INPUT_OBJECT"
    INPUT_FIELD_DEFINITION = "INPUT_FIELD_DEFINITION"


class InputValueDefinition(Node):
    """An argument of a field or directive, or a field of an input object."""

    description: str | None = None
    name: Name
    type: GraphQLType
    default_value: Value | None = None
    directives: tuple[Directive, ...] = ()


class FieldDefinition(Node):
    """A field of an object or interface type."""

    description: str | None = None
    name: Name
    arguments: tuple[InputValueDefinition, ...] = ()
    type: GraphQLType
    directives: tuple[Directive, ...] = ()


class EnumValueDefinition(Node):
    description: str | None = None
    name: Name
    directives: tuple[Directive, ...] = ()


class SchemaDefinition(Node):
    """A ``schema { ... }`` block naming the root operation types.

    Each root operation kind appears at most once; the parser rejects a
    block that names the same kind twice.
    """

    kind: Literal["schema"] = "schema"
    description: str | None = None
    directives: tuple[Directive, ...] = ()
    query: NamedType | None = None
    mutation: NamedType | None = None
    subscription: NamedType | None = None

    def root_type(self, operation_type: OperationType) -> NamedType | None:
        """Return the root type declared for *operation_type*, if any."""
        return getattr(self, operation_type.value)


class ScalarTypeDefinition(Node):
    kind: Literal["scalar"] = "scalar"
    description: str | None = None
    name: Name
    directives: tuple[Directive, ...] = ()


class ObjectTypeDefinition(Node):
    kind: Literal["object"] = "object"
    description: str | None = None
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()


class InterfaceTypeDefinition(Node):
    kind: Literal["interface"] = "interface"
    description: str | None = None
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()


class UnionTypeDefinition(Node):
    kind: Literal["union"] = "union"
    description: str | None = None
    name: Name
    directives: tuple[Directive, ...] = ()
    types: tuple[NamedType, ...] = ()


class EnumTypeDefinition(Node):
    kind: Literal["enum"] = "enum"
    description: str | None = None
    name: Name
    directives: tuple[Directive, ...] = ()
    values: tuple[EnumValueDefinition, ...] = ()


class InputObjectTypeDefinition(Node):
    kind: Literal["input_object"] = "input_object"
    description: str | None = None
    name: Name
    directives: tuple[Directive, ...] = ()
    fields: tuple[InputValueDefinition, ...] = ()


class DirectiveDefinition(Node):
    """A ``directive @name(...) repeatable on LOCATION | ...`` definition."""

    kind: Literal["directive"] = "directive"
    description: str | None = None
    name: Name
    arguments: tuple[InputValueDefinition, ...] = ()
    repeatable: bool = False
    locations: Annotated[tuple[DirectiveLocation, ...], _Field(min_length=1)]


# ---------------------------------------------------------------------------
# Extensions
#
# The shape of an extension depends on which trailing clauses are present.
# Each variant makes its distinguishing clause required and non-empty.
# ---------------------------------------------------------------------------


class SchemaExtensionWithOperationTypes(Node):
    """``extend schema [@directives] { query: Q ... }``"""

    kind: Literal["schema_extension_with_operation_types"] = "schema_extension_with_operation_types"
    directives: tuple[Directive, ...] = ()
    query: NamedType | None = None
    mutation: NamedType | None = None
    subscription: NamedType | None = None

    @model_validator(mode="after")
    def _require_operation_type(self) -> SchemaExtensionWithOperationTypes:
        if self.query is None and self.mutation is None and self.subscription is None:
            raise ValueError("a schema extension body must name at least one root operation type")
        return self


class SchemaExtensionWithDirectives(Node):
    """``extend schema @directives``"""

    kind: Literal["schema_extension_with_directives"] = "schema_extension_with_directives"
    directives: Annotated[tuple[Directive, ...], _Field(min_length=1)]


class ScalarTypeExtension(Node):
    kind: Literal["scalar_extension"] = "scalar_extension"
    name: Name
    directives: Annotated[tuple[Directive, ...], _Field(min_length=1)]


class ObjectTypeExtensionWithFields(Node):
    """``extend type T [implements ...] [@directives] { fields }``"""

    kind: Literal["object_extension_with_fields"] = "object_extension_with_fields"
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: Annotated[tuple[FieldDefinition, ...], _Field(min_length=1)]


class ObjectTypeExtensionWithDirectives(Node):
    """``extend type T [implements ...] @directives``"""

    kind: Literal["object_extension_with_directives"] = "object_extension_with_directives"
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: Annotated[tuple[Directive, ...], _Field(min_length=1)]


class ObjectTypeExtensionWithInterfaces(Node):
    """``extend type T implements ...``"""

    kind: Literal["object_extension_with_interfaces"] = "object_extension_with_interfaces"
    name: Name
    interfaces: Annotated[tuple[NamedType, ...], _Field(min_length=1)]


class InterfaceTypeExtensionWithFields(Node):
    kind: Literal["interface_extension_with_fields"] = "interface_extension_with_fields"
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: Annotated[tuple[FieldDefinition, ...], _Field(min_length=1)]


class InterfaceTypeExtensionWithDirectives(Node):
    kind: Literal["interface_extension_with_directives"] = "interface_extension_with_directives"
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: Annotated[tuple[Directive, ...], _Field(min_length=1)]


class InterfaceTypeExtensionWithInterfaces(Node):
    kind: Literal["interface_extension_with_interfaces"] = "interface_extension_with_interfaces"
    name: Name
    interfaces: Annotated[tuple[NamedType, ...], _Field(min_length=1)]


class UnionTypeExtensionWithMembers(Node):
    """``extend union U [@directives] = A | B``"""

    kind: Literal["union_extension_with_members"] = "union_extension_with_members"
    name: Name
    directives: tuple[Directive, ...] = ()
    types: Annotated[tuple[NamedType, ...], _Field(min_length=1)]


class UnionTypeExtensionWithDirectives(Node):
    kind: Literal["union_extension_with_directives"] = "union_extension_with_directives"
    name: Name
    directives: Annotated[tuple[Directive, ...], _Field(min_length=1)]


class EnumTypeExtensionWithValues(Node):
    kind: Literal["enum_extension_with_values"] = "enum_extension_with_values"
    name: Name
    directives: tuple[Directive, ...] = ()
    values: Annotated[tuple[EnumValueDefinition, ...], _Field(min_length=1)]


class EnumTypeExtensionWithDirectives(Node):
    kind: Literal["enum_extension_with_directives"] = "enum_extension_with_directives"
    name: Name
    directives: Annotated[tuple[Directive, ...], _Field(min_length=1)]


class InputObjectTypeExtensionWithFields(Node):
    kind: Literal["input_object_extension_with_fields"] = "input_object_extension_with_fields"
    name: Name
    directives: tuple[Directive, ...] = ()
    fields: Annotated[tuple[InputValueDefinition, ...], _Field(min_length=1)]


class InputObjectTypeExtensionWithDirectives(Node):
    kind: Literal["input_object_extension_with_directives"] = "input_object_extension_with_directives"
    name: Name
    directives: Annotated[tuple[Directive, ...], _Field(min_length=1)]


# Closed variant groups. The tuples serve isinstance() checks; the annotated
# unions serve validation and deserialization.
TYPE_DEFINITION_TYPES = (
    ScalarTypeDefinition,
    ObjectTypeDefinition,
    InterfaceTypeDefinition,
    UnionTypeDefinition,
    EnumTypeDefinition,
    InputObjectTypeDefinition,
)

SCHEMA_EXTENSION_TYPES = (SchemaExtensionWithOperationTypes, SchemaExtensionWithDirectives)

TYPE_EXTENSION_TYPES = (
    ScalarTypeExtension,
    ObjectTypeExtensionWithFields,
    ObjectTypeExtensionWithDirectives,
    ObjectTypeExtensionWithInterfaces,
    InterfaceTypeExtensionWithFields,
    InterfaceTypeExtensionWithDirectives,
    InterfaceTypeExtensionWithInterfaces,
    UnionTypeExtensionWithMembers,
    UnionTypeExtensionWithDirectives,
    EnumTypeExtensionWithValues,
    EnumTypeExtensionWithDirectives,
    InputObjectTypeExtensionWithFields,
    InputObjectTypeExtensionWithDirectives,
)

TypeDefinition = Annotated[
    ScalarTypeDefinition
    | ObjectTypeDefinition
    | InterfaceTypeDefinition
    | UnionTypeDefinition
    | EnumTypeDefinition
    | InputObjectTypeDefinition,
    _Field(discriminator="kind"),
]

TypeExtension = Annotated[
    ScalarTypeExtension
    | ObjectTypeExtensionWithFields
    | ObjectTypeExtensionWithDirectives
    | ObjectTypeExtensionWithInterfaces
    | InterfaceTypeExtensionWithFields
    | InterfaceTypeExtensionWithDirectives
    | InterfaceTypeExtensionWithInterfaces
    | UnionTypeExtensionWithMembers
    | UnionTypeExtensionWithDirectives
    | EnumTypeExtensionWithValues
    | EnumTypeExtensionWithDirectives
    | InputObjectTypeExtensionWithFields
    | InputObjectTypeExtensionWithDirectives,
    _Field(discriminator="kind"),
]

SchemaExtension = Annotated[
    SchemaExtensionWithOperationTypes | SchemaExtensionWithDirectives,
    _Field(discriminator="kind"),
]
