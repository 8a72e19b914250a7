# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed GraphQL documents.

Artifacts are stored as compact JSON files so that a compiled document can be
reloaded without parsing the source again. The format is versioned so future
schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from gqlast.model.document import Document

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"

ARTIFACT_SUFFIX = ".graphql.json"


def serialize(document: Document) -> str:
    """Serialize a Document to a compact JSON string."""
    payload = {"v": ARTIFACT_FORMAT_VERSION, "document": document.model_dump(mode="json")}
    return json.dumps(payload, separators=(",", ":"))


def deserialize(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Document`.

    Raises:
        ValueError: If the data is not valid JSON, the artifact format version
            is not recognised, or the payload does not describe a document.
    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError("Artifact must be a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    if "document" not in obj:
        raise ValueError("Artifact has no 'document' entry")
    return Document.model_validate(obj["document"])


def write_artifact(document: Document, path: Path) -> None:
    """Write a compiled artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(document), encoding="utf-8")


def read_artifact(path: Path) -> Document:
    """Read and deserialize a compiled artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))
