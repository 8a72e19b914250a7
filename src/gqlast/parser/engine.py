# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Binding to the Lark parsing engine.

The grammar in ``graphql.lark`` is compiled once per process into an LALR(1)
parser. The parser keeps no state between calls, so it is shared by all
threads. Lark's syntax errors are translated into
:class:`~gqlast.parser.errors.GraphQLSyntaxError`.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Iterable

from lark import Lark, Token, Tree, UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from gqlast.parser.errors import GraphQLSyntaxError, SourceSpan

# ###############
# Public Interface
# ###############

DOCUMENT_START = "document"
VALUE_START = "value_literal"
TYPE_START = "type_reference"


def parse_tree(text: str, start: str = DOCUMENT_START) -> Tree:
    """Parse *text* into a Lark parse tree rooted at the *start* rule.

    Args:
        text: GraphQL source text.
        start: One of :data:`DOCUMENT_START`, :data:`VALUE_START` or
            :data:`TYPE_START`.

    Returns:
        The parse tree. Punctuation and keyword tokens are dropped, except
        for keywords used as names. Every node carries source positions in
        ``meta``.

    Raises:
        GraphQLSyntaxError: If *text* does not match the grammar.
    """
    parser = _get_parser()
    try:
        return parser.parse(text, start=start)
    except UnexpectedInput as exc:
        raise _to_syntax_error(parser, exc, text) from None


def token_span(token: Token) -> SourceSpan:
    """Return the source span covered by a lexer token."""
    return SourceSpan(
        start=token.start_pos,
        end=token.end_pos,
        line=token.line,
        column=token.column,
        end_line=token.end_line,
        end_column=token.end_column,
    )


def tree_span(tree: Tree) -> SourceSpan | None:
    """Return the source span covered by a parse tree node, if it has one."""
    meta = tree.meta
    if meta.empty:
        return None
    return SourceSpan(
        start=meta.start_pos,
        end=meta.end_pos,
        line=meta.line,
        column=meta.column,
        end_line=meta.end_line,
        end_column=meta.end_column,
    )


# ################
# Implementation
# ################

_END_OF_INPUT = "$END"
_NAME = "NAME"
_NAME_PATTERN = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")

_parser: Lark | None = None
_parser_lock = threading.Lock()


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        with _parser_lock:
            if _parser is None:
                _parser = Lark.open(
                    "graphql.lark",
                    rel_to=__file__,
                    parser="lalr",
                    lexer="contextual",
                    start=[DOCUMENT_START, VALUE_START, TYPE_START],
                    propagate_positions=True,
                    maybe_placeholders=False,
                )
    return _parser


def _to_syntax_error(parser: Lark, exc: UnexpectedInput, text: str) -> GraphQLSyntaxError:
    """Translate a Lark error into a GraphQLSyntaxError with a readable message."""
    if isinstance(exc, UnexpectedToken) and exc.token.type != _END_OF_INPUT:
        found = f"'{exc.token.value}'"
        expected_names = exc.accepts or exc.expected
        span = token_span(exc.token)
    elif isinstance(exc, UnexpectedCharacters):
        found = f"character {exc.char!r}"
        expected_names = exc.allowed
        span = _point_span(text, exc.pos_in_stream)
    else:
        # Unexpected end of input, from either UnexpectedToken or UnexpectedEOF.
        found = "end of input"
        expected_names = getattr(exc, "accepts", None) or getattr(exc, "expected", None)
        span = _point_span(text, len(text))

    expected = tuple(sorted({_describe_terminal(parser, name) for name in _significant(parser, expected_names or ())}))
    message = f"Unexpected {found}"
    if expected:
        message += f", expected one of: {', '.join(expected)}"
    return GraphQLSyntaxError(message, span, expected=expected, context=_context(text, span))


def _significant(parser: Lark, names: Iterable[str]) -> set[str]:
    """Drop ignored terminals, and keywords wherever a plain name is also accepted."""
    significant = {name for name in names if name not in parser.ignore_tokens}
    if _NAME in significant:
        significant = {name for name in significant if not _is_keyword(parser, name)}
    return significant


def _is_keyword(parser: Lark, name: str) -> bool:
    try:
        terminal = parser.get_terminal(name)
    except KeyError:
        return False
    return terminal.pattern.type == "str" and _NAME_PATTERN.fullmatch(terminal.pattern.value) is not None


def _describe_terminal(parser: Lark, name: str) -> str:
    if name == _END_OF_INPUT:
        return "end of input"
    try:
        terminal = parser.get_terminal(name)
    except KeyError:
        return name
    if terminal.pattern.type == "str":
        return f"'{terminal.pattern.value}'"
    return name


def _point_span(text: str, offset: int) -> SourceSpan:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return SourceSpan(start=offset, end=offset, line=line, column=column, end_line=line, end_column=column)


def _context(text: str, span: SourceSpan) -> str:
    line_start = text.rfind("\n", 0, span.start) + 1
    line_end = text.find("\n", span.start)
    if line_end == -1:
        line_end = len(text)
    source_line = text[line_start:line_end].rstrip("\r")
    return f"{source_line}\n{' ' * (span.column - 1)}^"
