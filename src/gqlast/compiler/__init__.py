# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compilation of .graphql files into cached JSON artifacts."""

from gqlast.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from gqlast.compiler.build import CompilerError, compile_files

__all__ = [
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "compile_files",
    "CompilerError",
]
