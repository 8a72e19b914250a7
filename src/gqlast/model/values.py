# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input values, arguments and directives."""

from __future__ import annotations

import math
from typing import Annotated, Literal

from pydantic import Field as _Field
from pydantic import field_validator

from gqlast.model.types import Name, Node

# ###############
# Public Interface
# ###############

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class IntValue(Node):
    """An integer literal. Always fits in a signed 64-bit integer."""

    kind: Literal["int"] = "int"
    value: Annotated[int, _Field(ge=INT64_MIN, le=INT64_MAX)]


class FloatValue(Node):
    """A floating-point literal. Always finite."""

    kind: Literal["float"] = "float"
    value: float

    @field_validator("value")
    @classmethod
    def _require_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("float values must be finite")
        return value


class StringValue(Node):
    """A string literal, already decoded.

    Attributes:
        value: The decoded string contents.
        block: True if the literal was written as a ``\"\"\"block string\"\"\"``.
    """

    kind: Literal["string"] = "string"
    value: str
    block: bool = False


class BooleanValue(Node):
    kind: Literal["boolean"] = "boolean"
    value: bool


class NullValue(Node):
    kind: Literal["null"] = "null"


class EnumValue(Node):
    """An unquoted enum symbol, e.g. ``SIT`` in ``doesKnowCommand(dogCommand: SIT)``."""

    kind: Literal["enum"] = "enum"
    value: Name


class Variable(Node):
    """A variable reference such as ``$id``. The name excludes the ``$``."""

    kind: Literal["variable"] = "variable"
    name: Name


class ListValue(Node):
    kind: Literal["list"] = "list"
    values: tuple[Value, ...] = ()


class ObjectField(Node):
    """One ``name: value`` entry of an object literal."""

    name: Name
    value: Value


class ObjectValue(Node):
    """An object literal. Fields keep their source order and are not deduplicated."""

    kind: Literal["object"] = "object"
    fields: tuple[ObjectField, ...] = ()


# A value literal. The `kind` discriminator keeps deserialization unambiguous.
Value = Annotated[
    IntValue
    | FloatValue
    | StringValue
    | BooleanValue
    | NullValue
    | EnumValue
    | Variable
    | ListValue
    | ObjectValue,
    _Field(discriminator="kind"),
]


class Argument(Node):
    """A ``name: value`` pair passed to a field or directive."""

    name: Name
    value: Value


class Directive(Node):
    """A directive application such as ``@deprecated(reason: "old")``.

    Arguments keep their source order; duplicate names are preserved.
    """

    name: Name
    arguments: tuple[Argument, ...] = ()


# Resolve forward references in the recursive value models.
ListValue.model_rebuild()
ObjectField.model_rebuild()
ObjectValue.model_rebuild()
Argument.model_rebuild()
