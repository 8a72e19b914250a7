# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Source positions and the error hierarchy of the GraphQL parser.

Every error raised by :func:`gqlast.parse_string` and :func:`gqlast.parse_file`
derives from :class:`DocumentError`, so callers can catch a single type.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SourceSpan:
    """A region of the source text.

    Attributes:
        start: 0-based offset of the first character.
        end: 0-based offset one past the last character.
        line: 1-based line of the first character.
        column: 1-based column of the first character.
        end_line: 1-based line of the last character.
        end_column: 1-based column one past the last character.
    """

    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int


class DocumentError(Exception):
    """Base class of all errors raised while loading a GraphQL document."""


class FileOpenError(DocumentError):
    """Raised when a source file cannot be read.

    Attributes:
        path: The file that could not be read.
        os_error: The underlying operating system error.
    """

    def __init__(self, path: Path, os_error: OSError) -> None:
        reason = os_error.strerror or str(os_error)
        super().__init__(f"Cannot open '{path}': {reason}")
        self.path = path
        self.os_error = os_error


class ParseError(DocumentError):
    """Raised when source text cannot be turned into a document.

    Attributes:
        message: The error message without position prefix.
        span: Where in the source the problem was found, if known.
    """

    def __init__(self, message: str, span: SourceSpan | None = None) -> None:
        if span is None:
            super().__init__(message)
        else:
            super().__init__(f"Line {span.line}, column {span.column}: {message}")
        self.message = message
        self.span = span

    @property
    def line(self) -> int | None:
        """1-based line number of the error, if known."""
        return self.span.line if self.span is not None else None

    @property
    def column(self) -> int | None:
        """1-based column number of the error, if known."""
        return self.span.column if self.span is not None else None


class GraphQLSyntaxError(ParseError):
    """Raised when the source text does not match the GraphQL grammar.

    Attributes:
        expected: Human-readable descriptions of the tokens the parser would
            have accepted at the error position, sorted.
        context: A snippet of the offending source line with a caret under
            the error position, or an empty string if unavailable.
    """

    def __init__(
        self,
        message: str,
        span: SourceSpan | None = None,
        expected: tuple[str, ...] = (),
        context: str = "",
    ) -> None:
        super().__init__(message, span)
        self.expected = expected
        self.context = context


class ConversionError(ParseError):
    """Raised when syntactically valid input is semantically unacceptable.

    Examples are integer literals outside the 64-bit range or a schema block
    that names the same root operation twice.
    """


class InternalParserError(ParseError):
    """Raised when a parse tree does not have the shape the converters expect.

    This indicates that the grammar and the converters have drifted apart and
    never results from user input alone.
    """
