# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for GraphQL documents (undefined types, duplicates, etc.)."""

from gqlast.validation.checks import (
    BUILTIN_SCALARS,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
    validate_workspace,
)

__all__ = [
    "BUILTIN_SCALARS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
    "validate_workspace",
]
