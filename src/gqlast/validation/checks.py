# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for parsed GraphQL documents.

These checks flag problems that the grammar cannot express, such as
references to types that are never defined. They run on a single document
(:func:`validate`) or on the documents of a whole workspace
(:func:`validate_workspace`), where a schema may be split across files.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from itertools import chain

from gqlast.model.definitions import (
    TYPE_DEFINITION_TYPES,
    TYPE_EXTENSION_TYPES,
    DirectiveDefinition,
    EnumTypeDefinition,
    EnumTypeExtensionWithDirectives,
    EnumTypeExtensionWithValues,
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
    ScalarTypeDefinition,
    ScalarTypeExtension,
    SchemaDefinition,
    SchemaExtensionWithDirectives,
    SchemaExtensionWithOperationTypes,
    UnionTypeDefinition,
    UnionTypeExtensionWithDirectives,
    UnionTypeExtensionWithMembers,
)
from gqlast.model.document import Definition, Document
from gqlast.model.executable import FragmentDefinition, OperationDefinition
from gqlast.model.types import NamedType, NonNullType, extract_name

# ###############
# Public Interface
# ###############

BUILTIN_SCALARS: frozenset[str] = frozenset({"Int", "Float", "String", "Boolean", "ID"})


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue detected during validation.

    The document remains usable, but the issue indicates an incomplete or
    potentially unintentional schema.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal inconsistency detected during validation.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running validation checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that indicate an inconsistent document.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(document: Document) -> ValidationResult:
    """Run all validation checks on a parsed document.

    Checks performed:

    1. **Duplicate types** (error): two type definitions share a name.

    2. **Multiple schemas** (error): more than one ``schema { ... }``
       definition.

    3. **Undefined types** (error): a field, argument, input field,
       implemented interface, union member or schema root refers to a type
       that is not defined in the document. Built-in scalars and
       introspection types (``__Type``, ...) are always known.

    4. **Node interface** (error): an interface named ``Node`` must declare
       exactly one field, ``id: ID!``.

    5. **Dangling extensions** (warning): an extension of a type that the
       document does not define.

    6. **Empty types** (warning): an object or interface type without fields.

    Executable definitions are not checked.

    Args:
        document: The document to validate.

    Returns:
        A :class:`ValidationResult` containing any warnings and errors found.
    """
    definitions = document.definitions
    return _validate(document, _defined_type_names(definitions), set(), _schema_count(definitions), "Document")


def validate_workspace(documents: Mapping[str, Document]) -> dict[str, ValidationResult]:
    """Validate the documents of a workspace as one schema.

    A type defined in any document is known to all of them, so references
    and extensions may cross file boundaries. A type defined again in a later
    document is reported as a duplicate there, and every document holding a
    schema definition reports it when the workspace has more than one.

    Args:
        documents: Parsed documents keyed by workspace-relative name, in the
            order their definitions should be considered.

    Returns:
        One :class:`ValidationResult` per key of *documents*.
    """
    merged = list(chain.from_iterable(document.definitions for document in documents.values()))
    defined = _defined_type_names(merged)
    schema_count = _schema_count(merged)
    seen: set[str] = set()
    return {
        key: _validate(document, defined, seen, schema_count, "Workspace") for key, document in documents.items()
    }


# ################
# Implementation
# ################

_REFERENCE_FREE_DEFINITIONS = (
    ScalarTypeDefinition,
    EnumTypeDefinition,
    ScalarTypeExtension,
    UnionTypeExtensionWithDirectives,
    EnumTypeExtensionWithValues,
    EnumTypeExtensionWithDirectives,
    InputObjectTypeExtensionWithDirectives,
    SchemaExtensionWithDirectives,
    OperationDefinition,
    FragmentDefinition,
)


def _validate(
    document: Document,
    defined: set[str],
    seen: set[str],
    schema_count: int,
    scope: str,
) -> ValidationResult:
    """Check *document* against the type names *defined* in its scope.

    *seen* collects the type names defined so far and is updated in place,
    so a type already defined by an earlier document counts as a duplicate.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    errors.extend(_check_duplicate_types(document, seen))
    errors.extend(_check_schema_count(document, schema_count, scope))
    errors.extend(_check_undefined_types(document, defined))
    errors.extend(_check_node_interface(document))
    warnings.extend(_check_dangling_extensions(document, defined))
    warnings.extend(_check_empty_types(document))

    return ValidationResult(warnings=warnings, errors=errors)


def _defined_type_names(definitions: Iterable[Definition]) -> set[str]:
    return {d.name for d in definitions if isinstance(d, TYPE_DEFINITION_TYPES)}


def _schema_count(definitions: Iterable[Definition]) -> int:
    return sum(1 for d in definitions if isinstance(d, SchemaDefinition))


def _is_known(name: str, defined: set[str]) -> bool:
    return name in defined or name in BUILTIN_SCALARS or name.startswith("__")


def _check_duplicate_types(document: Document, seen: set[str]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for definition in document.definitions:
        if not isinstance(definition, TYPE_DEFINITION_TYPES):
            continue
        if definition.name in seen:
            errors.append(ValidationError(message=f"Type '{definition.name}' is defined more than once"))
        seen.add(definition.name)
    return errors


def _check_schema_count(document: Document, schema_count: int, scope: str) -> list[ValidationError]:
    if schema_count > 1 and _schema_count(document.definitions) > 0:
        return [ValidationError(message=f"{scope} defines {schema_count} schemas; at most one is allowed")]
    return []


def _field_references(owner: str, fields: tuple[FieldDefinition, ...]) -> Iterator[tuple[str, NamedType]]:
    for f in fields:
        yield f"Field '{owner}.{f.name}'", extract_name(f.type)
        yield from _input_references(f"{owner}.{f.name}", f.arguments, "Argument")


def _input_references(
    owner: str, values: tuple[InputValueDefinition, ...], label: str
) -> Iterator[tuple[str, NamedType]]:
    for value in values:
        yield f"{label} '{owner}.{value.name}'", extract_name(value.type)


def _root_references(
    definition: SchemaDefinition | SchemaExtensionWithOperationTypes,
) -> Iterator[tuple[str, NamedType]]:
    roots = (("query", definition.query), ("mutation", definition.mutation), ("subscription", definition.subscription))
    for operation, root in roots:
        if root is not None:
            yield f"Schema root '{operation}'", root


def _interface_references(name: str, interfaces: tuple[NamedType, ...]) -> Iterator[tuple[str, NamedType]]:
    for interface in interfaces:
        yield f"Type '{name}' implements", interface


def _type_references(document: Document) -> Iterator[tuple[str, NamedType]]:
    """Yield ``(context, named type)`` for every type reference in the type system."""
    for definition in document.definitions:
        if isinstance(definition, (SchemaDefinition, SchemaExtensionWithOperationTypes)):
            yield from _root_references(definition)
        elif isinstance(definition, DirectiveDefinition):
            yield from _input_references(f"@{definition.name}", definition.arguments, "Argument")
        elif isinstance(
            definition,
            (
                ObjectTypeDefinition,
                InterfaceTypeDefinition,
                ObjectTypeExtensionWithFields,
                InterfaceTypeExtensionWithFields,
            ),
        ):
            yield from _interface_references(definition.name, definition.interfaces)
            yield from _field_references(definition.name, definition.fields)
        elif isinstance(
            definition,
            (
                ObjectTypeExtensionWithDirectives,
                ObjectTypeExtensionWithInterfaces,
                InterfaceTypeExtensionWithDirectives,
                InterfaceTypeExtensionWithInterfaces,
            ),
        ):
            yield from _interface_references(definition.name, definition.interfaces)
        elif isinstance(definition, (UnionTypeDefinition, UnionTypeExtensionWithMembers)):
            for member in definition.types:
                yield f"Union '{definition.name}' member", member
        elif isinstance(definition, (InputObjectTypeDefinition, InputObjectTypeExtensionWithFields)):
            yield from _input_references(definition.name, definition.fields, "Input field")
        elif not isinstance(definition, _REFERENCE_FREE_DEFINITIONS):
            raise TypeError(f"Unhandled definition kind '{definition.kind}'")


def _check_undefined_types(document: Document, defined: set[str]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for context, named_type in _type_references(document):
        if not _is_known(named_type.name, defined):
            errors.append(ValidationError(message=f"{context} refers to undefined type '{named_type.name}'"))
    return errors


def _check_node_interface(document: Document) -> list[ValidationError]:
    node = document.get_type("Node")
    if not isinstance(node, InterfaceTypeDefinition):
        return []
    if len(node.fields) != 1:
        return [ValidationError(message="Interface 'Node' must declare exactly one field, 'id: ID!'")]
    id_field = node.fields[0]
    if id_field.name != "id" or id_field.type != NonNullType(of_type=NamedType(name="ID")):
        return [ValidationError(message="Interface 'Node' must declare its field as 'id: ID!'")]
    return []


def _check_dangling_extensions(document: Document, defined: set[str]) -> list[ValidationWarning]:
    return [
        ValidationWarning(message=f"Extension of undefined type '{d.name}'")
        for d in document.definitions
        if isinstance(d, TYPE_EXTENSION_TYPES) and d.name not in defined
    ]


def _check_empty_types(document: Document) -> list[ValidationWarning]:
    return [
        ValidationWarning(message=f"Type '{d.name}' has no fields")
        for d in document.definitions
        if isinstance(d, (ObjectTypeDefinition, InterfaceTypeDefinition)) and not d.fields
    ]
