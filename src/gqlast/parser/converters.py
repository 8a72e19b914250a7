# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of Lark parse trees into AST nodes.

There is one converter per grammar rule. Each converter walks the children of
its node with a :class:`_Cursor` that looks one child ahead: optional clauses
are consumed only when the next child has the expected tag, where a tag is the
rule name of a subtree or the terminal name of a token. A converter that finds
a required child missing or a child left over raises
:class:`~gqlast.parser.errors.InternalParserError`.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from lark import Token, Tree

from gqlast.model.definitions import (
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
    SchemaExtensionWithDirectives,
    SchemaExtensionWithOperationTypes,
    UnionTypeDefinition,
    UnionTypeExtensionWithDirectives,
    UnionTypeExtensionWithMembers,
)
from gqlast.model.document import Definition, Document
from gqlast.model.executable import (
    Field,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    OperationDefinition,
    Selection,
    SelectionSet,
    VariableDefinition,
)
from gqlast.model.types import GraphQLType, ListType, NamedType, NonNullType
from gqlast.model.values import (
    INT64_MAX,
    INT64_MIN,
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
from gqlast.parser.engine import token_span, tree_span
from gqlast.parser.errors import ConversionError, InternalParserError, SourceSpan
from gqlast.parser.strings import decode_block_string, decode_string

# ###############
# Public Interface
# ###############


def convert_document(tree: Tree) -> Document:
    """Convert a ``document`` parse tree into a :class:`Document`.

    Raises:
        ConversionError: If a literal or clause is semantically invalid.
        InternalParserError: If the tree has an unexpected shape.
    """
    cursor = _Cursor(tree, "document")
    definitions: list[Definition] = []
    while cursor.peek() is not None:
        node = cursor.next(*_DEFINITION_CONVERTERS)
        definitions.append(_DEFINITION_CONVERTERS[_tag(node)](node))
    return Document(definitions=tuple(definitions))


def convert_value(tree: Tree) -> Value:
    """Convert any value subtree (``int_value``, ``list_value``, ...) into a Value."""
    converter = _VALUE_CONVERTERS.get(_tag(tree))
    if converter is None:
        raise InternalParserError(f"Expected a value, found '{_tag(tree)}'", _span(tree))
    return converter(tree)


def convert_type(tree: Tree) -> GraphQLType:
    """Convert a ``named_type``, ``list_type`` or ``non_null_type`` subtree.

    The conversion is iterative, so arbitrarily deep nesting such as
    ``[[[[Int!]!]!]!]`` does not consume Python stack.
    """
    wrappers: list[str] = []
    node = tree
    while _tag(node) != "named_type":
        if _tag(node) not in ("list_type", "non_null_type"):
            raise InternalParserError(f"Expected a type, found '{_tag(node)}'", _span(node))
        wrappers.append(_tag(node))
        cursor = _Cursor(node, _tag(node))
        node = cursor.next(*_TYPE_TAGS)
        cursor.finish()

    result: GraphQLType = _convert_named_type(node)
    for wrapper in reversed(wrappers):
        if wrapper == "list_type":
            result = ListType(of_type=result)
        else:
            result = NonNullType(of_type=result)
    return result


def convert_value_literal(tree: Tree) -> Value:
    """Convert the ``value_literal`` start rule produced by :func:`gqlast.parse_value`."""
    cursor = _Cursor(tree, "value_literal")
    value = convert_value(cursor.next(*_VALUE_CONVERTERS))
    cursor.finish()
    return value


def convert_type_reference(tree: Tree) -> GraphQLType:
    """Convert the ``type_reference`` start rule produced by :func:`gqlast.parse_type`."""
    cursor = _Cursor(tree, "type_reference")
    graphql_type = convert_type(cursor.next(*_TYPE_TAGS))
    cursor.finish()
    return graphql_type


# ################
# Implementation
# ################

_TYPE_TAGS = ("named_type", "list_type", "non_null_type")

_RESERVED_ENUM_VALUES = frozenset({"true", "false", "null"})


def _tag(child: Tree | Token) -> str:
    if isinstance(child, Token):
        return child.type
    return str(child.data)


def _span(child: Tree | Token) -> SourceSpan | None:
    if isinstance(child, Token):
        return token_span(child)
    return tree_span(child)


class _Cursor:
    """Sequential reader over the children of one parse tree node."""

    def __init__(self, tree: Tree, rule: str) -> None:
        self._tree = tree
        self._rule = rule
        self._children = tree.children
        self._pos = 0
        if _tag(tree) != rule:
            raise InternalParserError(f"Expected '{rule}', found '{_tag(tree)}'", _span(tree))

    def peek(self) -> str | None:
        """Return the tag of the next child, or None past the last child."""
        if self._pos >= len(self._children):
            return None
        return _tag(self._children[self._pos])

    def next(self, *tags: str) -> Tree | Token:
        """Consume the next child, which must carry one of *tags*."""
        found = self.peek()
        if found not in tags:
            expected = " or ".join(f"'{t}'" for t in tags)
            actual = "nothing" if found is None else f"'{found}'"
            raise InternalParserError(f"Expected {expected} in '{self._rule}', found {actual}", _span(self._tree))
        child = self._children[self._pos]
        self._pos += 1
        return child

    def optional(self, tag: str) -> Tree | Token | None:
        """Consume the next child if it carries *tag*; otherwise return None."""
        if self.peek() != tag:
            return None
        return self.next(tag)

    def repeated(self, *tags: str) -> list[Tree | Token]:
        """Consume every consecutive child carrying one of *tags*."""
        children: list[Tree | Token] = []
        while self.peek() in tags:
            children.append(self.next(*tags))
        return children

    def finish(self) -> None:
        """Check that every child has been consumed."""
        found = self.peek()
        if found is not None:
            raise InternalParserError(f"Unexpected '{found}' in '{self._rule}'", _span(self._tree))


# ---------------------------------------------------------------------------
# Shared clauses
# ---------------------------------------------------------------------------


def _name_token(tree: Tree | Token, rule: str) -> Token:
    """Return the single token of a `name`, `enum_name` or `fragment_name` node."""
    if not isinstance(tree, Tree) or len(tree.children) != 1 or not isinstance(tree.children[0], Token):
        raise InternalParserError(f"Expected a single name token in '{rule}'", _span(tree))
    return tree.children[0]


def _name(cursor: _Cursor, rule: str = "name") -> str:
    return str(_name_token(cursor.next(rule), rule))


def _string(token: Token) -> tuple[str, bool]:
    """Decode a STRING or BLOCK_STRING token into its value and block flag."""
    try:
        if token.type == "BLOCK_STRING":
            return decode_block_string(str(token)), True
        return decode_string(str(token)), False
    except ValueError as exc:
        raise ConversionError(f"Couldn't decode string literal: {exc}", token_span(token)) from exc


def _description(cursor: _Cursor) -> str | None:
    node = cursor.optional("description")
    if node is None:
        return None
    inner = _Cursor(node, "description")
    token = inner.next("STRING", "BLOCK_STRING")
    inner.finish()
    return _string(token)[0]


def _directives(cursor: _Cursor) -> tuple[Directive, ...]:
    node = cursor.optional("directives")
    if node is None:
        return ()
    inner = _Cursor(node, "directives")
    directives = tuple(_convert_directive(child) for child in inner.repeated("directive"))
    inner.finish()
    return directives


def _arguments(cursor: _Cursor) -> tuple[Argument, ...]:
    node = cursor.optional("arguments")
    if node is None:
        return ()
    inner = _Cursor(node, "arguments")
    arguments = tuple(_convert_argument(child) for child in inner.repeated("argument"))
    inner.finish()
    return arguments


def _default_value(cursor: _Cursor) -> Value | None:
    node = cursor.optional("default_value")
    if node is None:
        return None
    inner = _Cursor(node, "default_value")
    value = convert_value(inner.next(*_VALUE_CONVERTERS))
    inner.finish()
    return value


def _type(cursor: _Cursor) -> GraphQLType:
    return convert_type(cursor.next(*_TYPE_TAGS))


def _interfaces(cursor: _Cursor) -> tuple[NamedType, ...]:
    node = cursor.optional("implements_interfaces")
    if node is None:
        return ()
    inner = _Cursor(node, "implements_interfaces")
    interfaces = tuple(_convert_named_type(child) for child in inner.repeated("named_type"))
    inner.finish()
    return interfaces


def _list_clause(cursor: _Cursor, rule: str, item_rule: str, convert: Callable) -> tuple | None:
    """Convert an optional ``{ item+ }`` style clause; None if it is absent."""
    node = cursor.optional(rule)
    if node is None:
        return None
    inner = _Cursor(node, rule)
    items = tuple(convert(child) for child in inner.repeated(item_rule))
    inner.finish()
    return items


def _fields(cursor: _Cursor) -> tuple[FieldDefinition, ...] | None:
    return _list_clause(cursor, "fields_definition", "field_definition", _convert_field_definition)


def _arguments_definition(cursor: _Cursor) -> tuple[InputValueDefinition, ...]:
    return _list_clause(cursor, "arguments_definition", "input_value_definition", _convert_input_value_definition) or ()


def _input_fields(cursor: _Cursor) -> tuple[InputValueDefinition, ...] | None:
    return _list_clause(cursor, "input_fields_definition", "input_value_definition", _convert_input_value_definition)


def _union_members(cursor: _Cursor) -> tuple[NamedType, ...] | None:
    return _list_clause(cursor, "union_member_types", "named_type", _convert_named_type)


def _enum_values(cursor: _Cursor) -> tuple[EnumValueDefinition, ...] | None:
    return _list_clause(cursor, "enum_values_definition", "enum_value_definition", _convert_enum_value_definition)


def _root_operation_types(cursor: _Cursor) -> dict[str, NamedType]:
    """Collect ``query: Q`` entries; naming an operation twice is an error."""
    roots: dict[OperationType, NamedType] = {}
    for node in cursor.repeated("root_operation_type_definition"):
        inner = _Cursor(node, "root_operation_type_definition")
        operation_type = _convert_operation_type(inner.next("operation_type"))
        named_type = _convert_named_type(inner.next("named_type"))
        inner.finish()
        if operation_type in roots:
            raise ConversionError(f"The `{operation_type.value}` field has been defined twice.", _span(node))
        roots[operation_type] = named_type
    return {operation_type.value: named_type for operation_type, named_type in roots.items()}


def _empty_extension(tree: Tree) -> InternalParserError:
    return InternalParserError(f"Extension '{_tag(tree)}' has no clauses", _span(tree))


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


def _convert_int_value(tree: Tree) -> IntValue:
    cursor = _Cursor(tree, "int_value")
    token = cursor.next("INT")
    cursor.finish()
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ConversionError(f"Couldn't parse {token} as a 64-bit integer.", token_span(token))
    return IntValue(value=value)


def _convert_float_value(tree: Tree) -> FloatValue:
    cursor = _Cursor(tree, "float_value")
    token = cursor.next("FLOAT")
    cursor.finish()
    value = float(token)
    if not math.isfinite(value):
        raise ConversionError(f"Couldn't parse {token} as a 64-bit float.", token_span(token))
    return FloatValue(value=value)


def _convert_string_value(tree: Tree) -> StringValue:
    cursor = _Cursor(tree, "string_value")
    value, block = _string(cursor.next("STRING", "BLOCK_STRING"))
    cursor.finish()
    return StringValue(value=value, block=block)


def _convert_boolean_value(tree: Tree) -> BooleanValue:
    cursor = _Cursor(tree, "boolean_value")
    token = cursor.next("TRUE", "FALSE")
    cursor.finish()
    return BooleanValue(value=token.value == "true")


def _convert_null_value(tree: Tree) -> NullValue:
    _Cursor(tree, "null_value").finish()
    return NullValue()


def _convert_enum_value(tree: Tree) -> EnumValue:
    cursor = _Cursor(tree, "enum_value")
    value = _name(cursor, "enum_name")
    cursor.finish()
    return EnumValue(value=value)


def _convert_variable(tree: Tree) -> Variable:
    cursor = _Cursor(tree, "variable")
    name = _name(cursor)
    cursor.finish()
    return Variable(name=name)


def _convert_list_value(tree: Tree) -> ListValue:
    cursor = _Cursor(tree, "list_value")
    values = tuple(convert_value(child) for child in cursor.repeated(*_VALUE_CONVERTERS))
    cursor.finish()
    return ListValue(values=values)


def _convert_object_value(tree: Tree) -> ObjectValue:
    cursor = _Cursor(tree, "object_value")
    fields = tuple(_convert_object_field(child) for child in cursor.repeated("object_field"))
    cursor.finish()
    return ObjectValue(fields=fields)


def _convert_object_field(tree: Tree) -> ObjectField:
    cursor = _Cursor(tree, "object_field")
    name = _name(cursor)
    value = convert_value(cursor.next(*_VALUE_CONVERTERS))
    cursor.finish()
    return ObjectField(name=name, value=value)


def _convert_argument(tree: Tree) -> Argument:
    cursor = _Cursor(tree, "argument")
    name = _name(cursor)
    value = convert_value(cursor.next(*_VALUE_CONVERTERS))
    cursor.finish()
    return Argument(name=name, value=value)


def _convert_directive(tree: Tree) -> Directive:
    cursor = _Cursor(tree, "directive")
    name = _name(cursor)
    arguments = _arguments(cursor)
    cursor.finish()
    return Directive(name=name, arguments=arguments)


def _convert_named_type(tree: Tree) -> NamedType:
    cursor = _Cursor(tree, "named_type")
    name = _name(cursor)
    cursor.finish()
    return NamedType(name=name)


# ---------------------------------------------------------------------------
# Executable definitions
# ---------------------------------------------------------------------------


def _convert_operation_type(tree: Tree) -> OperationType:
    cursor = _Cursor(tree, "operation_type")
    token = cursor.next("QUERY", "MUTATION", "SUBSCRIPTION")
    cursor.finish()
    return OperationType(token.value)


def _convert_operation_definition(tree: Tree) -> OperationDefinition:
    cursor = _Cursor(tree, "operation_definition")
    if cursor.peek() == "selection_set":
        # Query shorthand: `{ ... }`
        selection_set = _convert_selection_set(cursor.next("selection_set"))
        cursor.finish()
        return OperationDefinition(operation_type=OperationType.QUERY, selection_set=selection_set)

    operation_type = _convert_operation_type(cursor.next("operation_type"))
    name_node = cursor.optional("name")
    name = None if name_node is None else str(_name_token(name_node, "name"))
    variable_definitions = _list_clause(
        cursor, "variable_definitions", "variable_definition", _convert_variable_definition
    )
    directives = _directives(cursor)
    selection_set = _convert_selection_set(cursor.next("selection_set"))
    cursor.finish()
    return OperationDefinition(
        operation_type=operation_type,
        name=name,
        variable_definitions=variable_definitions or (),
        directives=directives,
        selection_set=selection_set,
    )


def _convert_variable_definition(tree: Tree) -> VariableDefinition:
    cursor = _Cursor(tree, "variable_definition")
    variable = _convert_variable(cursor.next("variable"))
    graphql_type = _type(cursor)
    default_value = _default_value(cursor)
    directives = _directives(cursor)
    cursor.finish()
    return VariableDefinition(
        variable=variable.name,
        type=graphql_type,
        default_value=default_value,
        directives=directives,
    )


def _convert_selection_set(tree: Tree) -> SelectionSet:
    cursor = _Cursor(tree, "selection_set")
    selections: list[Selection] = []
    for child in cursor.repeated(*_SELECTION_CONVERTERS):
        selections.append(_SELECTION_CONVERTERS[_tag(child)](child))
    cursor.finish()
    return SelectionSet(selections=tuple(selections))


def _convert_field(tree: Tree) -> Field:
    cursor = _Cursor(tree, "field")
    alias_node = cursor.optional("alias")
    alias = None
    if alias_node is not None:
        alias_cursor = _Cursor(alias_node, "alias")
        alias = _name(alias_cursor)
        alias_cursor.finish()
    name = _name(cursor)
    arguments = _arguments(cursor)
    directives = _directives(cursor)
    selection_set_node = cursor.optional("selection_set")
    cursor.finish()
    return Field(
        alias=alias,
        name=name,
        arguments=arguments,
        directives=directives,
        selection_set=_convert_selection_set(selection_set_node) if selection_set_node is not None else None,
    )


def _convert_fragment_spread(tree: Tree) -> FragmentSpread:
    cursor = _Cursor(tree, "fragment_spread")
    name = _name(cursor, "fragment_name")
    directives = _directives(cursor)
    cursor.finish()
    return FragmentSpread(name=name, directives=directives)


def _type_condition(cursor: _Cursor) -> NamedType | None:
    node = cursor.optional("type_condition")
    if node is None:
        return None
    inner = _Cursor(node, "type_condition")
    named_type = _convert_named_type(inner.next("named_type"))
    inner.finish()
    return named_type


def _convert_inline_fragment(tree: Tree) -> InlineFragment:
    cursor = _Cursor(tree, "inline_fragment")
    type_condition = _type_condition(cursor)
    directives = _directives(cursor)
    selection_set = _convert_selection_set(cursor.next("selection_set"))
    cursor.finish()
    return InlineFragment(type_condition=type_condition, directives=directives, selection_set=selection_set)


def _convert_fragment_definition(tree: Tree) -> FragmentDefinition:
    cursor = _Cursor(tree, "fragment_definition")
    token = _name_token(cursor.next("fragment_name"), "fragment_name")
    name = str(token)
    if name == "on":
        raise ConversionError("Fragments cannot be named 'on'.", token_span(token))
    type_condition = _type_condition(cursor)
    if type_condition is None:
        raise InternalParserError(f"Fragment '{name}' has no type condition", _span(tree))
    directives = _directives(cursor)
    selection_set = _convert_selection_set(cursor.next("selection_set"))
    cursor.finish()
    return FragmentDefinition(
        name=name,
        type_condition=type_condition,
        directives=directives,
        selection_set=selection_set,
    )


# ---------------------------------------------------------------------------
# Type system definitions
# ---------------------------------------------------------------------------


def _convert_schema_definition(tree: Tree) -> SchemaDefinition:
    cursor = _Cursor(tree, "schema_definition")
    description = _description(cursor)
    directives = _directives(cursor)
    roots = _root_operation_types(cursor)
    cursor.finish()
    return SchemaDefinition(description=description, directives=directives, **roots)


def _convert_scalar_type_definition(tree: Tree) -> ScalarTypeDefinition:
    cursor = _Cursor(tree, "scalar_type_definition")
    description = _description(cursor)
    name = _name(cursor)
    directives = _directives(cursor)
    cursor.finish()
    return ScalarTypeDefinition(description=description, name=name, directives=directives)


def _convert_object_type_definition(tree: Tree) -> ObjectTypeDefinition:
    cursor = _Cursor(tree, "object_type_definition")
    description = _description(cursor)
    name = _name(cursor)
    interfaces = _interfaces(cursor)
    directives = _directives(cursor)
    fields = _fields(cursor)
    cursor.finish()
    return ObjectTypeDefinition(
        description=description,
        name=name,
        interfaces=interfaces,
        directives=directives,
        fields=fields or (),
    )


def _convert_interface_type_definition(tree: Tree) -> InterfaceTypeDefinition:
    cursor = _Cursor(tree, "interface_type_definition")
    description = _description(cursor)
    name = _name(cursor)
    interfaces = _interfaces(cursor)
    directives = _directives(cursor)
    fields = _fields(cursor)
    cursor.finish()
    return InterfaceTypeDefinition(
        description=description,
        name=name,
        interfaces=interfaces,
        directives=directives,
        fields=fields or (),
    )


def _convert_union_type_definition(tree: Tree) -> UnionTypeDefinition:
    cursor = _Cursor(tree, "union_type_definition")
    description = _description(cursor)
    name = _name(cursor)
    directives = _directives(cursor)
    types = _union_members(cursor)
    cursor.finish()
    return UnionTypeDefinition(description=description, name=name, directives=directives, types=types or ())


def _convert_enum_type_definition(tree: Tree) -> EnumTypeDefinition:
    cursor = _Cursor(tree, "enum_type_definition")
    description = _description(cursor)
    name = _name(cursor)
    directives = _directives(cursor)
    values = _enum_values(cursor)
    cursor.finish()
    return EnumTypeDefinition(description=description, name=name, directives=directives, values=values or ())


def _convert_input_object_type_definition(tree: Tree) -> InputObjectTypeDefinition:
    cursor = _Cursor(tree, "input_object_type_definition")
    description = _description(cursor)
    name = _name(cursor)
    directives = _directives(cursor)
    fields = _input_fields(cursor)
    cursor.finish()
    return InputObjectTypeDefinition(description=description, name=name, directives=directives, fields=fields or ())


def _convert_field_definition(tree: Tree) -> FieldDefinition:
    cursor = _Cursor(tree, "field_definition")
    description = _description(cursor)
    name = _name(cursor)
    arguments = _arguments_definition(cursor)
    graphql_type = _type(cursor)
    directives = _directives(cursor)
    cursor.finish()
    return FieldDefinition(
        description=description,
        name=name,
        arguments=arguments,
        type=graphql_type,
        directives=directives,
    )


def _convert_input_value_definition(tree: Tree) -> InputValueDefinition:
    cursor = _Cursor(tree, "input_value_definition")
    description = _description(cursor)
    name = _name(cursor)
    graphql_type = _type(cursor)
    default_value = _default_value(cursor)
    directives = _directives(cursor)
    cursor.finish()
    return InputValueDefinition(
        description=description,
        name=name,
        type=graphql_type,
        default_value=default_value,
        directives=directives,
    )


def _convert_enum_value_definition(tree: Tree) -> EnumValueDefinition:
    cursor = _Cursor(tree, "enum_value_definition")
    description = _description(cursor)
    token = _name_token(cursor.next("name"), "name")
    directives = _directives(cursor)
    cursor.finish()
    name = str(token)
    if name in _RESERVED_ENUM_VALUES:
        raise ConversionError(f"Enum values cannot be named '{name}'.", token_span(token))
    return EnumValueDefinition(description=description, name=name, directives=directives)


def _convert_directive_definition(tree: Tree) -> DirectiveDefinition:
    cursor = _Cursor(tree, "directive_definition")
    description = _description(cursor)
    name = _name(cursor)
    arguments = _arguments_definition(cursor)
    repeatable = cursor.optional("repeatable") is not None
    locations = _list_clause(cursor, "directive_locations", "directive_location", _convert_directive_location)
    cursor.finish()
    if not locations:
        raise InternalParserError(f"Directive '@{name}' has no locations", _span(tree))
    return DirectiveDefinition(
        description=description,
        name=name,
        arguments=arguments,
        repeatable=repeatable,
        locations=locations,
    )


def _convert_directive_location(tree: Tree) -> DirectiveLocation:
    cursor = _Cursor(tree, "directive_location")
    token = cursor.next("NAME")
    cursor.finish()
    try:
        return DirectiveLocation(str(token))
    except ValueError:
        raise ConversionError(f"Unknown directive location '{token}'.", token_span(token)) from None


# ---------------------------------------------------------------------------
# Type system extensions
# ---------------------------------------------------------------------------


def _convert_schema_extension(
    tree: Tree,
) -> SchemaExtensionWithOperationTypes | SchemaExtensionWithDirectives:
    cursor = _Cursor(tree, "schema_extension")
    directives = _directives(cursor)
    roots = _root_operation_types(cursor)
    cursor.finish()
    if roots:
        return SchemaExtensionWithOperationTypes(directives=directives, **roots)
    if directives:
        return SchemaExtensionWithDirectives(directives=directives)
    raise _empty_extension(tree)


def _convert_scalar_type_extension(tree: Tree) -> ScalarTypeExtension:
    cursor = _Cursor(tree, "scalar_type_extension")
    name = _name(cursor)
    directives = _directives(cursor)
    cursor.finish()
    if not directives:
        raise _empty_extension(tree)
    return ScalarTypeExtension(name=name, directives=directives)


def _convert_object_type_extension(
    tree: Tree,
) -> ObjectTypeExtensionWithFields | ObjectTypeExtensionWithDirectives | ObjectTypeExtensionWithInterfaces:
    cursor = _Cursor(tree, "object_type_extension")
    name = _name(cursor)
    interfaces = _interfaces(cursor)
    directives = _directives(cursor)
    fields = _fields(cursor)
    cursor.finish()
    if fields:
        return ObjectTypeExtensionWithFields(name=name, interfaces=interfaces, directives=directives, fields=fields)
    if directives:
        return ObjectTypeExtensionWithDirectives(name=name, interfaces=interfaces, directives=directives)
    if interfaces:
        return ObjectTypeExtensionWithInterfaces(name=name, interfaces=interfaces)
    raise _empty_extension(tree)


def _convert_interface_type_extension(
    tree: Tree,
) -> InterfaceTypeExtensionWithFields | InterfaceTypeExtensionWithDirectives | InterfaceTypeExtensionWithInterfaces:
    cursor = _Cursor(tree, "interface_type_extension")
    name = _name(cursor)
    interfaces = _interfaces(cursor)
    directives = _directives(cursor)
    fields = _fields(cursor)
    cursor.finish()
    if fields:
        return InterfaceTypeExtensionWithFields(name=name, interfaces=interfaces, directives=directives, fields=fields)
    if directives:
        return InterfaceTypeExtensionWithDirectives(name=name, interfaces=interfaces, directives=directives)
    if interfaces:
        return InterfaceTypeExtensionWithInterfaces(name=name, interfaces=interfaces)
    raise _empty_extension(tree)


def _convert_union_type_extension(
    tree: Tree,
) -> UnionTypeExtensionWithMembers | UnionTypeExtensionWithDirectives:
    cursor = _Cursor(tree, "union_type_extension")
    name = _name(cursor)
    directives = _directives(cursor)
    types = _union_members(cursor)
    cursor.finish()
    if types:
        return UnionTypeExtensionWithMembers(name=name, directives=directives, types=types)
    if directives:
        return UnionTypeExtensionWithDirectives(name=name, directives=directives)
    raise _empty_extension(tree)


def _convert_enum_type_extension(
    tree: Tree,
) -> EnumTypeExtensionWithValues | EnumTypeExtensionWithDirectives:
    cursor = _Cursor(tree, "enum_type_extension")
    name = _name(cursor)
    directives = _directives(cursor)
    values = _enum_values(cursor)
    cursor.finish()
    if values:
        return EnumTypeExtensionWithValues(name=name, directives=directives, values=values)
    if directives:
        return EnumTypeExtensionWithDirectives(name=name, directives=directives)
    raise _empty_extension(tree)


def _convert_input_object_type_extension(
    tree: Tree,
) -> InputObjectTypeExtensionWithFields | InputObjectTypeExtensionWithDirectives:
    cursor = _Cursor(tree, "input_object_type_extension")
    name = _name(cursor)
    directives = _directives(cursor)
    fields = _input_fields(cursor)
    cursor.finish()
    if fields:
        return InputObjectTypeExtensionWithFields(name=name, directives=directives, fields=fields)
    if directives:
        return InputObjectTypeExtensionWithDirectives(name=name, directives=directives)
    raise _empty_extension(tree)


# ---------------------------------------------------------------------------
# Dispatch tables, keyed by rule name
# ---------------------------------------------------------------------------

_VALUE_CONVERTERS: dict[str, Callable[[Tree], Value]] = {
    "variable": _convert_variable,
    "int_value": _convert_int_value,
    "float_value": _convert_float_value,
    "string_value": _convert_string_value,
    "boolean_value": _convert_boolean_value,
    "null_value": _convert_null_value,
    "enum_value": _convert_enum_value,
    "list_value": _convert_list_value,
    "object_value": _convert_object_value,
}

_SELECTION_CONVERTERS: dict[str, Callable[[Tree], Selection]] = {
    "field": _convert_field,
    "fragment_spread": _convert_fragment_spread,
    "inline_fragment": _convert_inline_fragment,
}

_DEFINITION_CONVERTERS: dict[str, Callable[[Tree], Definition]] = {
    "operation_definition": _convert_operation_definition,
    "fragment_definition": _convert_fragment_definition,
    "schema_definition": _convert_schema_definition,
    "scalar_type_definition": _convert_scalar_type_definition,
    "object_type_definition": _convert_object_type_definition,
    "interface_type_definition": _convert_interface_type_definition,
    "union_type_definition": _convert_union_type_definition,
    "enum_type_definition": _convert_enum_type_definition,
    "input_object_type_definition": _convert_input_object_type_definition,
    "directive_definition": _convert_directive_definition,
    "schema_extension": _convert_schema_extension,
    "scalar_type_extension": _convert_scalar_type_extension,
    "object_type_extension": _convert_object_type_extension,
    "interface_type_extension": _convert_interface_type_extension,
    "union_type_extension": _convert_union_type_extension,
    "enum_type_extension": _convert_enum_type_extension,
    "input_object_type_extension": _convert_input_object_type_extension,
}
