# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Executable definitions: operations, fragments and selection sets."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field as _Field

from gqlast.model.definitions import OperationType
from gqlast.model.types import GraphQLType, Name, NamedType, Node
from gqlast.model.values import Argument, Directive, Value

# ###############
# Public Interface
# ###############


class Field(Node):
    """A field selection, e.g. ``smallPic: profilePic(size: 64) @include(if: $x)``."""

    kind: Literal["field"] = "field"
    alias: Name | None = None
    name: Name
    arguments: tuple[Argument, ...] = ()
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet | None = None

    @property
    def response_key(self) -> str:
        """The key under which this field appears in a response: the alias if given."""
        return self.alias if self.alias is not None else self.name


class FragmentSpread(Node):
    """``...fragmentName @directives``"""

    kind: Literal["fragment_spread"] = "fragment_spread"
    name: Name
    directives: tuple[Directive, ...] = ()


class InlineFragment(Node):
    """``... on Type @directives { ... }``; the type condition is optional."""

    kind: Literal["inline_fragment"] = "inline_fragment"
    type_condition: NamedType | None = None
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet


Selection = Annotated[Field | FragmentSpread | InlineFragment, _Field(discriminator="kind")]


class SelectionSet(Node):
    """An ordered list of selections inside ``{ }``."""

    selections: tuple[Selection, ...] = ()


class VariableDefinition(Node):
    """``$name: Type = default @directives``. The variable name excludes the ``$``."""

    variable: Name
    type: GraphQLType
    default_value: Value | None = None
    directives: tuple[Directive, ...] = ()


class OperationDefinition(Node):
    """A query, mutation or subscription.

    The query shorthand ``{ ... }`` produces an unnamed ``query`` operation
    without variables or directives.
    """

    kind: Literal["operation"] = "operation"
    operation_type: OperationType
    name: Name | None = None
    variable_definitions: tuple[VariableDefinition, ...] = ()
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet


class FragmentDefinition(Node):
    kind: Literal["fragment"] = "fragment"
    name: Name
    type_condition: NamedType
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet


EXECUTABLE_DEFINITION_TYPES = (OperationDefinition, FragmentDefinition)

ExecutableDefinition = Annotated[OperationDefinition | FragmentDefinition, _Field(discriminator="kind")]


# Resolve forward references between selections and selection sets.
Field.model_rebuild()
InlineFragment.model_rebuild()
SelectionSet.model_rebuild()
OperationDefinition.model_rebuild()
FragmentDefinition.model_rebuild()
