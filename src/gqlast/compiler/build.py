# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental compilation of .graphql files.

Implements a CMake-style cache: an artifact is reused when it already exists
and is strictly newer than the corresponding source file. Otherwise the source
is parsed again and the artifact is rewritten.
"""

from __future__ import annotations

from pathlib import Path

from gqlast.compiler.artifact import ARTIFACT_SUFFIX, read_artifact, write_artifact
from gqlast.model.document import Document
from gqlast.parser import parse_file
from gqlast.parser.errors import DocumentError

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a source file cannot be compiled.

    Covers unreadable files, syntax errors, invalid literals and files that
    lie outside the workspace root.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def compile_files(files: list[Path], build_dir: Path, root: Path) -> dict[str, Document]:
    """Compile a list of .graphql source files.

    For each file, the compiler:
    1. Computes its key, the path relative to *root* without suffix.
    2. Reuses the artifact in *build_dir* if it is newer than the source.
    3. Otherwise parses the source and writes a fresh artifact.

    Args:
        files: Paths to the .graphql source files to compile.
        build_dir: Root directory for compiled artifacts. The layout below it
            mirrors the source layout below *root*.
        root: The workspace root every source file must live under.

    Returns:
        A mapping from keys (e.g. ``"schema/users"``) to parsed documents, in
        the order of *files*.

    Raises:
        CompilerError: If a file lies outside *root* or cannot be parsed.
    """
    compiled: dict[str, Document] = {}
    for source_file in files:
        key = _rel_key(source_file, root)
        if key in compiled:
            continue
        compiled[key] = _compile_file(source_file, _artifact_path(key, build_dir))
    return compiled


# ################
# Implementation
# ################


def _rel_key(source_file: Path, root: Path) -> str:
    """Return the canonical key for a source file (path without extension)."""
    try:
        rel = source_file.resolve().relative_to(root.resolve())
    except ValueError:
        raise CompilerError(f"Source file '{source_file}' is not under the workspace root '{root}'") from None
    return str(rel.with_suffix("")).replace("\\", "/")


def _artifact_path(key: str, build_dir: Path) -> Path:
    """Return the artifact path for a given key.

    The key segments map to subdirectories under *build_dir*
    (e.g. ``"schema/users"`` becomes ``build_dir/schema/users.graphql.json``).
    """
    parts = key.split("/")
    artifact_dir = build_dir
    for part in parts[:-1]:
        artifact_dir = artifact_dir / part
    return artifact_dir / (parts[-1] + ARTIFACT_SUFFIX)


def _is_up_to_date(source_file: Path, artifact: Path) -> bool:
    """Return True if *artifact* exists and is strictly newer than *source_file*."""
    if not artifact.exists() or not source_file.exists():
        return False
    return artifact.stat().st_mtime > source_file.stat().st_mtime


def _compile_file(source_file: Path, artifact: Path) -> Document:
    if _is_up_to_date(source_file, artifact):
        try:
            return read_artifact(artifact)
        except (OSError, ValueError):
            # Unreadable or outdated artifact format; rebuild it below.
            pass

    try:
        document = parse_file(source_file)
    except DocumentError as exc:
        raise CompilerError(f"Error in '{source_file}': {exc}") from exc

    write_artifact(document, artifact)
    return document
