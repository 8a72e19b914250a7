# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoding of GraphQL string literals."""

from __future__ import annotations

import json
import re

# ###############
# Public Interface
# ###############


def decode_string(literal: str) -> str:
    """Decode a quoted string literal, including its surrounding quotes.

    GraphQL string escapes (``\\"``, ``\\\\``, ``\\/``, ``\\b``, ``\\f``,
    ``\\n``, ``\\r``, ``\\t`` and ``\\uXXXX``) are exactly those of JSON, so
    the JSON decoder does the work. Surrogate pairs written as two ``\\u``
    escapes combine into one character.

    Raises:
        ValueError: If the literal is malformed or encodes an unpaired
            surrogate.
    """
    value = json.loads(literal, strict=False)
    _require_encodable(value)
    return value


def decode_block_string(literal: str) -> str:
    """Decode a ``\"\"\"block string\"\"\"`` literal, including its quotes.

    Only the escaped triple quote is interpreted; everything else is raw. The
    result has its common indentation removed and leading and trailing blank
    lines dropped.

    Example::

        \"\"\"
            Hello,
              World!
        \"\"\"

    decodes to ``"Hello,\\n  World!"``.
    """
    raw = literal[3:-3].replace('\\"""', '"""')
    return dedent_block_string(raw)


def dedent_block_string(raw: str) -> str:
    """Apply the GraphQL ``BlockStringValue`` algorithm to the raw contents."""
    lines = _LINE_BREAK.split(raw)

    common_indent: int | None = None
    for line in lines[1:]:
        indent = _leading_whitespace(line)
        if indent < len(line) and (common_indent is None or indent < common_indent):
            common_indent = indent

    if common_indent:
        lines = lines[:1] + [line[common_indent:] for line in lines[1:]]

    while lines and _is_blank(lines[0]):
        lines.pop(0)
    while lines and _is_blank(lines[-1]):
        lines.pop()

    return "\n".join(lines)


# ################
# Implementation
# ################

_LINE_BREAK = re.compile(r"\r\n|[\n\r]")


def _leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _is_blank(line: str) -> bool:
    return _leading_whitespace(line) == len(line)


def _require_encodable(value: str) -> None:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("string contains an unpaired surrogate escape") from exc
