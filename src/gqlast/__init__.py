# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""gqlast: a typed, immutable AST for GraphQL schema and query documents.

Typical use::

    from gqlast import parse_string

    document = parse_string("type Query { hello: String }")
    query_type = document.get_type("Query")
"""

from gqlast.model import Document, extract_name
from gqlast.parser import (
    ConversionError,
    DocumentError,
    FileOpenError,
    GraphQLSyntaxError,
    InternalParserError,
    ParseError,
    SourceSpan,
    parse_file,
    parse_string,
    parse_type,
    parse_value,
)

__all__ = [
    "parse_string",
    "parse_file",
    "parse_value",
    "parse_type",
    "Document",
    "extract_name",
    "SourceSpan",
    "DocumentError",
    "FileOpenError",
    "ParseError",
    "GraphQLSyntaxError",
    "ConversionError",
    "InternalParserError",
]
