# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing of GraphQL source text into the typed AST."""

from __future__ import annotations

from pathlib import Path

from gqlast.model.document import Document
from gqlast.model.types import GraphQLType
from gqlast.model.values import Value
from gqlast.parser.converters import convert_document, convert_type_reference, convert_value_literal
from gqlast.parser.engine import DOCUMENT_START, TYPE_START, VALUE_START, parse_tree
from gqlast.parser.errors import (
    ConversionError,
    DocumentError,
    FileOpenError,
    GraphQLSyntaxError,
    InternalParserError,
    ParseError,
    SourceSpan,
)

__all__ = [
    "parse_string",
    "parse_file",
    "parse_value",
    "parse_type",
    "SourceSpan",
    "DocumentError",
    "FileOpenError",
    "ParseError",
    "GraphQLSyntaxError",
    "ConversionError",
    "InternalParserError",
]


def parse_string(text: str) -> Document:
    """Parse GraphQL source text into a :class:`~gqlast.model.Document`.

    Schema definitions, type extensions, operations and fragments may be mixed
    freely; the definitions keep their source order.

    Args:
        text: The full GraphQL document.

    Returns:
        The parsed document.

    Raises:
        GraphQLSyntaxError: If *text* does not match the GraphQL grammar.
        ConversionError: If *text* is syntactically valid but contains an
            invalid literal or clause, e.g. an integer that does not fit in
            64 bits.
        InternalParserError: If the grammar and the converters disagree.
    """
    return convert_document(parse_tree(text, DOCUMENT_START))


def parse_file(path: Path | str) -> Document:
    """Read a UTF-8 encoded GraphQL file and parse it.

    Raises:
        FileOpenError: If the file cannot be read. The original
            :class:`OSError` is available as ``os_error``.
        ParseError: If the file is not valid UTF-8, or see
            :func:`parse_string`.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileOpenError(path, exc) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Cannot decode '{path}' as UTF-8: {exc.reason}") from exc
    return parse_string(text)


def parse_value(text: str) -> Value:
    """Parse a single value literal such as ``[1, 2.5, "x", {a: $b}]``."""
    return convert_value_literal(parse_tree(text, VALUE_START))


def parse_type(text: str) -> GraphQLType:
    """Parse a single type reference such as ``[Post!]!``."""
    return convert_type_reference(parse_tree(text, TYPE_START))
