# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed, immutable AST for GraphQL schema and query documents."""

from gqlast.model.definitions import (
    SCHEMA_EXTENSION_TYPES,
    TYPE_DEFINITION_TYPES,
    TYPE_EXTENSION_TYPES,
    DirectiveDefinition,
    DirectiveLocation,
    EnumTypeDefinition,
    EnumTypeExtensionWithDirectives,
    EnumTypeExtensionWithValues,
    EnumValueDefinition,
    FieldDefinition,
    InputObjectTypeDefinition,
    InputObjectTypeExtensionWithDirectives,
    InputObjectTypeExtensionWithFields,
    InputValueDefinition,
    InterfaceTypeDefinition,
    InterfaceTypeExtensionWithDirectives,
    InterfaceTypeExtensionWithFields,
    InterfaceTypeExtensionWithInterfaces,
    ObjectTypeDefinition,
    ObjectTypeExtensionWithDirectives,
    ObjectTypeExtensionWithFields,
    ObjectTypeExtensionWithInterfaces,
    OperationType,
    ScalarTypeDefinition,
    ScalarTypeExtension,
    SchemaDefinition,
    SchemaExtension,
    SchemaExtensionWithDirectives,
    SchemaExtensionWithOperationTypes,
    TypeDefinition,
    TypeExtension,
    UnionTypeDefinition,
    UnionTypeExtensionWithDirectives,
    UnionTypeExtensionWithMembers,
)
from gqlast.model.document import Definition, Document
from gqlast.model.executable import (
    EXECUTABLE_DEFINITION_TYPES,
    ExecutableDefinition,
    Field,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    OperationDefinition,
    Selection,
    SelectionSet,
    VariableDefinition,
)
from gqlast.model.types import GraphQLType, ListType, Name, NamedType, Node, NonNullType, extract_name
from gqlast.model.values import (
    Argument,
    BooleanValue,
    Directive,
    EnumValue,
    FloatValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectField,
    ObjectValue,
    StringValue,
    Value,
    Variable,
)

__all__ = [
    # Names and types
    "Node",
    "Name",
    "NamedType",
    "ListType",
    "NonNullType",
    "GraphQLType",
    "extract_name",
    # Values
    "Value",
    "IntValue",
    "FloatValue",
    "StringValue",
    "BooleanValue",
    "NullValue",
    "EnumValue",
    "Variable",
    "ListValue",
    "ObjectValue",
    "ObjectField",
    "Argument",
    "Directive",
    # Type system
    "OperationType",
    "DirectiveLocation",
    "SchemaDefinition",
    "TypeDefinition",
    "TYPE_DEFINITION_TYPES",
    "ScalarTypeDefinition",
    "ObjectTypeDefinition",
    "InterfaceTypeDefinition",
    "UnionTypeDefinition",
    "EnumTypeDefinition",
    "InputObjectTypeDefinition",
    "FieldDefinition",
    "InputValueDefinition",
    "EnumValueDefinition",
    "DirectiveDefinition",
    # Extensions
    "SchemaExtension",
    "SCHEMA_EXTENSION_TYPES",
    "SchemaExtensionWithOperationTypes",
    "SchemaExtensionWithDirectives",
    "TypeExtension",
    "TYPE_EXTENSION_TYPES",
    "ScalarTypeExtension",
    "ObjectTypeExtensionWithFields",
    "ObjectTypeExtensionWithDirectives",
    "ObjectTypeExtensionWithInterfaces",
    "InterfaceTypeExtensionWithFields",
    "InterfaceTypeExtensionWithDirectives",
    "InterfaceTypeExtensionWithInterfaces",
    "UnionTypeExtensionWithMembers",
    "UnionTypeExtensionWithDirectives",
    "EnumTypeExtensionWithValues",
    "EnumTypeExtensionWithDirectives",
    "InputObjectTypeExtensionWithFields",
    "InputObjectTypeExtensionWithDirectives",
    # Executable
    "ExecutableDefinition",
    "EXECUTABLE_DEFINITION_TYPES",
    "OperationDefinition",
    "FragmentDefinition",
    "VariableDefinition",
    "SelectionSet",
    "Selection",
    "Field",
    "FragmentSpread",
    "InlineFragment",
    # Document
    "Definition",
    "Document",
]
