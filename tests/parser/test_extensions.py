# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for type-system extensions and the shape of their variants."""

import pytest
from lark import Token, Tree

from gqlast import parse_string
from gqlast.model import (
    Directive,
    EnumTypeExtensionWithDirectives,
    EnumTypeExtensionWithValues,
    FieldDefinition,
    InputObjectTypeExtensionWithDirectives,
    InputObjectTypeExtensionWithFields,
    InterfaceTypeExtensionWithDirectives,
    InterfaceTypeExtensionWithFields,
    InterfaceTypeExtensionWithInterfaces,
    NamedType,
    ObjectTypeExtensionWithDirectives,
    ObjectTypeExtensionWithFields,
    ObjectTypeExtensionWithInterfaces,
    ScalarTypeExtension,
    SchemaExtensionWithDirectives,
    SchemaExtensionWithOperationTypes,
    UnionTypeExtensionWithDirectives,
    UnionTypeExtensionWithMembers,
)
from gqlast.parser import ConversionError, GraphQLSyntaxError, InternalParserError
from gqlast.parser.converters import convert_document, convert_type

# ###############
# Test Helpers
# ###############


def _extension(source: str) -> object:
    """Parse a document holding one extension and return it."""
    doc = parse_string(source)
    assert len(doc.definitions) == 1
    return doc.definitions[0]


# ###############
# Variant Selection
# ###############


class TestVariantSelection:
    @pytest.mark.parametrize(
        "source,expected_type",
        [
            ("extend schema @a", SchemaExtensionWithDirectives),
            ("extend schema { mutation: M }", SchemaExtensionWithOperationTypes),
            ("extend schema @a { query: Q }", SchemaExtensionWithOperationTypes),
            ("extend scalar Time @a", ScalarTypeExtension),
            ("extend type Story { isHiddenLocally: Boolean }", ObjectTypeExtensionWithFields),
            ("extend type Story @addedDirective", ObjectTypeExtensionWithDirectives),
            ("extend type Story implements Node", ObjectTypeExtensionWithInterfaces),
            ("extend type Story implements Node @a", ObjectTypeExtensionWithDirectives),
            ("extend type Story implements Node @a { x: Int }", ObjectTypeExtensionWithFields),
            ("extend interface Named { nickname: String }", InterfaceTypeExtensionWithFields),
            ("extend interface Named @addedDirective", InterfaceTypeExtensionWithDirectives),
            ("extend interface Named implements Node", InterfaceTypeExtensionWithInterfaces),
            ("extend union SearchResult = Photo | Person", UnionTypeExtensionWithMembers),
            ("extend union SearchResult @a = Photo", UnionTypeExtensionWithMembers),
            ("extend union SearchResult @a", UnionTypeExtensionWithDirectives),
            ("extend enum Direction { UP }", EnumTypeExtensionWithValues),
            ("extend enum Direction @a", EnumTypeExtensionWithDirectives),
            ("extend input Point { z: Float }", InputObjectTypeExtensionWithFields),
            ("extend input Point @a", InputObjectTypeExtensionWithDirectives),
        ],
    )
    def test_variant(self, source: str, expected_type: type) -> None:
        assert isinstance(_extension(source), expected_type)


# ###############
# Extension Contents
# ###############


class TestExtensionContents:
    def test_extend_story_with_field(self) -> None:
        ext = _extension("extend type Story {\n  isHiddenLocally: Boolean\n}")
        assert ext == ObjectTypeExtensionWithFields(
            name="Story",
            fields=(FieldDefinition(name="isHiddenLocally", type=NamedType(name="Boolean")),),
        )

    def test_extend_story_with_everything(self) -> None:
        ext = _extension("extend type Story implements Node & Likeable @key { id: ID! }")
        assert isinstance(ext, ObjectTypeExtensionWithFields)
        assert ext.interfaces == (NamedType(name="Node"), NamedType(name="Likeable"))
        assert ext.directives == (Directive(name="key"),)
        assert [f.name for f in ext.fields] == ["id"]

    def test_directives_variant_keeps_interfaces(self) -> None:
        ext = _extension("extend interface Named implements Node @a @b")
        assert isinstance(ext, InterfaceTypeExtensionWithDirectives)
        assert ext.interfaces == (NamedType(name="Node"),)
        assert [d.name for d in ext.directives] == ["a", "b"]

    def test_schema_extension_roots(self) -> None:
        ext = _extension("extend schema { subscription: S }")
        assert ext.query is None
        assert ext.mutation is None
        assert ext.subscription == NamedType(name="S")

    def test_schema_extension_duplicate_root(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            parse_string("extend schema { query: Q query: R }")
        assert exc_info.value.message == "The `query` field has been defined twice."

    def test_union_members(self) -> None:
        ext = _extension("extend union SearchResult = | Photo | Person")
        assert ext.types == (NamedType(name="Photo"), NamedType(name="Person"))

    def test_enum_reserved_value(self) -> None:
        with pytest.raises(ConversionError):
            parse_string("extend enum Flag { null }")

    def test_extension_followed_by_definition(self) -> None:
        doc = parse_string("extend type Book @delegateField(name: \"index\")\ntype Query { a: Int }")
        assert isinstance(doc.definitions[0], ObjectTypeExtensionWithDirectives)
        assert doc.check_type_exists("Query")


# ###############
# Empty Extensions
# ###############


class TestEmptyExtensions:
    @pytest.mark.parametrize(
        "source",
        [
            "extend schema",
            "extend scalar Time",
            "extend type Story",
            "extend interface Named",
            "extend union SearchResult",
            "extend enum Direction",
            "extend input Point",
            "extend type Story {}",
            "extend enum Direction {}",
            "extend union SearchResult =",
        ],
    )
    def test_extension_without_clauses_is_syntax_error(self, source: str) -> None:
        with pytest.raises(GraphQLSyntaxError):
            parse_string(source)


# ###############
# Malformed Parse Trees
# ###############


class TestMalformedTrees:
    def test_extension_without_clauses(self) -> None:
        tree = Tree("document", [Tree("object_type_extension", [Tree("name", [Token("NAME", "Story")])])])
        with pytest.raises(InternalParserError) as exc_info:
            convert_document(tree)
        assert exc_info.value.message == "Extension 'object_type_extension' has no clauses"
        assert exc_info.value.span is None

    def test_scalar_extension_without_directives(self) -> None:
        tree = Tree("document", [Tree("scalar_type_extension", [Tree("name", [Token("NAME", "Time")])])])
        with pytest.raises(InternalParserError, match="has no clauses"):
            convert_document(tree)

    def test_unexpected_child(self) -> None:
        tree = Tree("document", [Token("NAME", "stray")])
        with pytest.raises(InternalParserError, match="in 'document', found 'NAME'"):
            convert_document(tree)

    def test_leftover_child(self) -> None:
        named = Tree("named_type", [Tree("name", [Token("NAME", "Post")]), Token("NAME", "Extra")])
        with pytest.raises(InternalParserError, match="Unexpected 'NAME' in 'named_type'"):
            convert_type(named)

    def test_name_without_token(self) -> None:
        named = Tree("named_type", [Tree("name", [])])
        with pytest.raises(InternalParserError, match="Expected a single name token in 'name'"):
            convert_type(named)

    def test_not_a_type(self) -> None:
        with pytest.raises(InternalParserError, match="Expected a type, found 'int_value'"):
            convert_type(Tree("int_value", [Token("INT", "1")]))
