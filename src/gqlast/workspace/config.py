# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the gqlast workspace configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

WORKSPACE_CONFIG_FILENAME = ".gqlast.yaml"

DEFAULT_SOURCES = ("**/*.graphql",)


class WorkspaceConfigError(Exception):
    """Raised when a workspace configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """The parsed configuration for a gqlast workspace.

    Attributes:
        build_directory: Relative path (from the workspace root) for compiled
            artifacts.
        sources: Glob patterns, relative to the workspace root, selecting the
            .graphql files of the workspace.
    """

    build_directory: str
    sources: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))

    def source_files(self, root: Path) -> list[Path]:
        """Return the sorted, de-duplicated source files below *root*.

        Files inside the build directory are never considered sources.
        """
        build_dir = (root / self.build_directory).resolve()
        found: set[Path] = set()
        for pattern in self.sources:
            for path in root.glob(pattern):
                resolved = path.resolve()
                if path.is_file() and not resolved.is_relative_to(build_dir):
                    found.add(path)
        return sorted(found)


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a gqlast workspace configuration file.

    Args:
        path: Path to the `.gqlast.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Workspace config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read workspace config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def render_default_config() -> str:
    """Return the text of a fresh `.gqlast.yaml` with default settings."""
    data = {"build-directory": ".gqlast-build", "sources": list(DEFAULT_SOURCES)}
    return yaml.safe_dump(data, sort_keys=False)


# ################
# Implementation
# ################


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse workspace config YAML text into a WorkspaceConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        A WorkspaceConfig instance.

    Raises:
        WorkspaceConfigError: If the YAML is invalid or required fields are missing.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: workspace config must be a YAML mapping")

    build_directory = _require_string(data, "build-directory", source_label)

    sources = list(DEFAULT_SOURCES)
    if "sources" in data:
        raw_sources = data["sources"]
        if not isinstance(raw_sources, list) or not all(isinstance(s, str) for s in raw_sources):
            raise WorkspaceConfigError(f"{source_label}: 'sources' must be a list of strings")
        if not raw_sources:
            raise WorkspaceConfigError(f"{source_label}: 'sources' must not be empty")
        sources = raw_sources

    return WorkspaceConfig(build_directory=build_directory, sources=sources)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising WorkspaceConfigError if missing."""
    if key not in mapping:
        raise WorkspaceConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value
