# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""The top-level Document node and its read-only navigation queries."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field as _Field

from gqlast.model.definitions import (
    TYPE_DEFINITION_TYPES,
    DirectiveDefinition,
    EnumTypeDefinition,
    EnumTypeExtensionWithDirectives,
    EnumTypeExtensionWithValues,
    InputObjectTypeDefinition,
    InputObjectTypeExtensionWithDirectives,
    InputObjectTypeExtensionWithFields,
    InterfaceTypeDefinition,
    InterfaceTypeExtensionWithDirectives,
    InterfaceTypeExtensionWithFields,
    InterfaceTypeExtensionWithInterfaces,
    ObjectTypeDefinition,
    ObjectTypeExtensionWithDirectives,
    ObjectTypeExtensionWithFields,
    ObjectTypeExtensionWithInterfaces,
    ScalarTypeDefinition,
    ScalarTypeExtension,
    SchemaDefinition,
    SchemaExtensionWithDirectives,
    SchemaExtensionWithOperationTypes,
    TypeDefinition,
    UnionTypeDefinition,
    UnionTypeExtensionWithDirectives,
    UnionTypeExtensionWithMembers,
)
from gqlast.model.executable import FragmentDefinition, OperationDefinition
from gqlast.model.types import Node

# ###############
# Public Interface
# ###############

# Any top-level definition: executable, type-system definition or extension.
Definition = Annotated[
    OperationDefinition
    | FragmentDefinition
    | SchemaDefinition
    | ScalarTypeDefinition
    | ObjectTypeDefinition
    | InterfaceTypeDefinition
    | UnionTypeDefinition
    | EnumTypeDefinition
    | InputObjectTypeDefinition
    | DirectiveDefinition
    | SchemaExtensionWithOperationTypes
    | SchemaExtensionWithDirectives
    | ScalarTypeExtension
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


class Document(Node):
    """A parsed GraphQL document: its definitions in source order.

    The navigation methods are pure scans over ``definitions``. They never
    modify the document; a caller that needs a different document builds a
    new one.
    """

    definitions: tuple[Definition, ...] = ()

    def check_type_exists(self, name: str) -> bool:
        """Return True if a type definition named *name* exists in the document."""
        return self.get_type(name) is not None

    def get_type(self, name: str) -> TypeDefinition | None:
        """Return the first type definition named *name*, in source order.

        Only scalar, object, interface, union, enum and input object
        definitions are considered. Extensions and directive definitions never
        match.
        """
        for definition in self.definitions:
            if isinstance(definition, TYPE_DEFINITION_TYPES) and definition.name == name:
                return definition
        return None

    def get_schema_definition(self) -> SchemaDefinition | None:
        """Return the first ``schema { ... }`` definition, or None.

        Documents with several schema definitions are not rejected here; see
        :func:`gqlast.validation.validate` for that check.
        """
        for definition in self.definitions:
            if isinstance(definition, SchemaDefinition):
                return definition
        return None
