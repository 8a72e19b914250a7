# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Names and type references for the GraphQL AST."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

NAME_PATTERN = r"^[_A-Za-z][_0-9A-Za-z]*$"

# An identifier copied verbatim from the source text.
Name = Annotated[str, StringConstraints(pattern=NAME_PATTERN)]


class Node(BaseModel):
    """Base class of every AST node. Nodes are immutable once constructed."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class NamedType(Node):
    """Reference to a type by name, e.g. ``Post``."""

    kind: Literal["named"] = "named"
    name: Name


class ListType(Node):
    """A list wrapper around another type, e.g. ``[Post]``."""

    kind: Literal["list"] = "list"
    of_type: GraphQLType


class NonNullType(Node):
    """A non-null wrapper around a named or list type, e.g. ``Post!``."""

    kind: Literal["non_null"] = "non_null"
    of_type: GraphQLType

    @field_validator("of_type")
    @classmethod
    def _reject_double_non_null(cls, value: GraphQLType) -> GraphQLType:
        if isinstance(value, NonNullType):
            raise ValueError("a non-null type cannot wrap another non-null type")
        return value


# A type reference: a named type, possibly wrapped in list / non-null layers.
GraphQLType = Annotated[NamedType | ListType | NonNullType, _Field(discriminator="kind")]


def extract_name(graphql_type: GraphQLType) -> NamedType:
    """Return the innermost named type of *graphql_type*.

    ``[Post!]!``, ``[Post]`` and ``Post`` all yield ``NamedType(name="Post")``.
    Every type reference ends in exactly one named type, so this never fails.
    """
    while not isinstance(graphql_type, NamedType):
        graphql_type = graphql_type.of_type
    return graphql_type


# Resolve forward references for the self-referential wrappers.
ListType.model_rebuild()
NonNullType.model_rebuild()
