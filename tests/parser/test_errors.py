# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for parser error reporting: positions, messages and the error hierarchy."""

from pathlib import Path

import pytest

from gqlast import parse_file, parse_string, parse_value
from gqlast.parser import (
    ConversionError,
    DocumentError,
    FileOpenError,
    GraphQLSyntaxError,
    InternalParserError,
    ParseError,
    SourceSpan,
)

# ###############
# Error Hierarchy
# ###############


class TestHierarchy:
    def test_all_errors_are_document_errors(self) -> None:
        for error_type in (FileOpenError, ParseError, GraphQLSyntaxError, ConversionError, InternalParserError):
            assert issubclass(error_type, DocumentError)

    def test_parse_error_subclasses(self) -> None:
        for error_type in (GraphQLSyntaxError, ConversionError, InternalParserError):
            assert issubclass(error_type, ParseError)
        assert not issubclass(FileOpenError, ParseError)

    def test_single_except_clause_catches_everything(self, tmp_path: Path) -> None:
        failures = 0
        for action in (
            lambda: parse_string("type {"),
            lambda: parse_string("schema { query: A query: B }"),
            lambda: parse_file(tmp_path / "missing.graphql"),
        ):
            try:
                action()
            except DocumentError:
                failures += 1
        assert failures == 3


# ###############
# Error Messages
# ###############


class TestParseErrorFormatting:
    def test_message_with_span(self) -> None:
        span = SourceSpan(start=4, end=5, line=2, column=3, end_line=2, end_column=4)
        error = ParseError("Something is off", span)
        assert str(error) == "Line 2, column 3: Something is off"
        assert error.message == "Something is off"
        assert error.line == 2
        assert error.column == 3

    def test_message_without_span(self) -> None:
        error = ParseError("Something is off")
        assert str(error) == "Something is off"
        assert error.line is None
        assert error.column is None

    def test_syntax_error_defaults(self) -> None:
        error = GraphQLSyntaxError("Unexpected 'x'")
        assert error.expected == ()
        assert error.context == ""


# ###############
# Syntax Errors
# ###############


class TestSyntaxErrors:
    def test_unexpected_token(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("{ a( }")
        error = exc_info.value
        assert str(error) == "Line 1, column 6: Unexpected '}', expected one of: NAME"
        assert error.message == "Unexpected '}', expected one of: NAME"
        assert error.expected == ("NAME",)
        assert error.line == 1
        assert error.column == 6
        assert error.span is not None
        assert error.span.start == 5
        assert error.span.end == 6

    def test_keywords_fold_into_name(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("type Query { a: }")
        expected = exc_info.value.expected
        assert "NAME" in expected
        assert "'query'" not in expected
        assert "'type'" not in expected

    def test_keywords_listed_where_no_name_is_accepted(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("type Query { a: Int } 42")
        expected = exc_info.value.expected
        assert "NAME" not in expected
        assert "'type'" in expected
        assert "'query'" in expected

    def test_context_points_at_error(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("{ a( }")
        assert exc_info.value.context == "{ a( }\n     ^"

    def test_error_on_later_line(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("type Query {\n  a: Int\n  b: \n}\n")
        error = exc_info.value
        assert error.line == 4
        assert error.column == 1
        assert error.context == "}\n^"

    def test_unexpected_end_of_input(self) -> None:
        source = "type Query {"
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string(source)
        error = exc_info.value
        assert error.message.startswith("Unexpected end of input, expected one of:")
        assert "NAME" in error.expected
        assert error.line == 1
        assert error.column == len(source) + 1
        assert error.span is not None
        assert error.span.start == error.span.end == len(source)

    def test_unexpected_character(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("type Query { a: Int % }")
        error = exc_info.value
        assert error.message.startswith("Unexpected character '%'")
        assert error.column == 21
        assert "WHITESPACE" not in error.expected
        assert "COMMENT" not in error.expected

    def test_expected_punctuation_is_quoted(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("type Query { a Int }")
        assert "':'" in exc_info.value.expected

    def test_expected_is_sorted(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_string("type Query {")
        expected = exc_info.value.expected
        assert list(expected) == sorted(expected)

    def test_value_syntax_error(self) -> None:
        with pytest.raises(GraphQLSyntaxError) as exc_info:
            parse_value("[1, 2")
        assert "end of input" in exc_info.value.message


# ###############
# Conversion Errors
# ###############


class TestConversionErrors:
    def test_span_of_duplicate_root(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            parse_string("schema {\n  query: Q\n  query: R\n}")
        error = exc_info.value
        assert error.line == 3
        assert error.column == 3
        assert str(error) == "Line 3, column 3: The `query` field has been defined twice."

    def test_span_of_int_overflow(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            parse_string("{ f(a: 1, b: 99999999999999999999) }")
        assert exc_info.value.column == 14

    def test_unpaired_surrogate(self) -> None:
        with pytest.raises(ConversionError, match="Couldn't decode string literal"):
            parse_value(r'"\ud800"')


# ###############
# File Errors
# ###############


class TestFileOpenError:
    def test_attributes(self, tmp_path: Path) -> None:
        path = tmp_path / "nope.graphql"
        with pytest.raises(FileOpenError) as exc_info:
            parse_file(path)
        error = exc_info.value
        assert error.path == path
        assert isinstance(error.os_error, OSError)
        assert str(error).startswith(f"Cannot open '{path}'")
        assert isinstance(error.__cause__, FileNotFoundError)
