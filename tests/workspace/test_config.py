# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the workspace configuration module."""

from pathlib import Path

import pytest
import yaml

from gqlast.workspace import (
    DEFAULT_SOURCES,
    WORKSPACE_CONFIG_FILENAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    render_default_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a workspace config file and return its path."""
    config_file = tmp_path / WORKSPACE_CONFIG_FILENAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("scalar X", encoding="utf-8")


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only build-directory uses the default source patterns."""
    config = load_workspace_config(_write_config(tmp_path, "build-directory: .gqlast-build\n"))

    assert isinstance(config, WorkspaceConfig)
    assert config.build_directory == ".gqlast-build"
    assert config.sources == list(DEFAULT_SOURCES)


def test_config_with_sources(tmp_path: Path) -> None:
    content = """\
build-directory: out
sources:
  - schema/**/*.graphql
  - queries/*.graphql
"""
    config = load_workspace_config(_write_config(tmp_path, content))
    assert config.build_directory == "out"
    assert config.sources == ["schema/**/*.graphql", "queries/*.graphql"]


def test_rendered_default_config_loads(tmp_path: Path) -> None:
    """The text written by `gqlast init` is itself a valid configuration."""
    config = load_workspace_config(_write_config(tmp_path, render_default_config()))
    assert config.build_directory == ".gqlast-build"
    assert config.sources == list(DEFAULT_SOURCES)


def test_rendered_default_config_is_yaml_mapping() -> None:
    data = yaml.safe_load(render_default_config())
    assert data == {"build-directory": ".gqlast-build", "sources": ["**/*.graphql"]}


# ###############
# Source Discovery
# ###############


def test_source_files_sorted_and_recursive(tmp_path: Path) -> None:
    _touch(tmp_path / "b.graphql")
    _touch(tmp_path / "a" / "z.graphql")
    _touch(tmp_path / "a" / "notes.txt")
    config = WorkspaceConfig(build_directory="build")
    assert config.source_files(tmp_path) == [tmp_path / "a" / "z.graphql", tmp_path / "b.graphql"]


def test_source_files_skip_build_directory(tmp_path: Path) -> None:
    _touch(tmp_path / "schema.graphql")
    _touch(tmp_path / "build" / "copy.graphql")
    config = WorkspaceConfig(build_directory="build")
    assert config.source_files(tmp_path) == [tmp_path / "schema.graphql"]


def test_source_files_deduplicate_overlapping_patterns(tmp_path: Path) -> None:
    _touch(tmp_path / "schema" / "users.graphql")
    config = WorkspaceConfig(build_directory="build", sources=["schema/*.graphql", "**/*.graphql"])
    assert config.source_files(tmp_path) == [tmp_path / "schema" / "users.graphql"]


def test_source_files_empty_workspace(tmp_path: Path) -> None:
    assert WorkspaceConfig(build_directory="build").source_files(tmp_path) == []


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="Workspace config file not found"):
        load_workspace_config(tmp_path / WORKSPACE_CONFIG_FILENAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="Invalid YAML"):
        load_workspace_config(_write_config(tmp_path, "build-directory: [unclosed\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="must be a YAML mapping"):
        load_workspace_config(_write_config(tmp_path, "- just\n- a list\n"))


def test_empty_file(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="must be a YAML mapping"):
        load_workspace_config(_write_config(tmp_path, ""))


def test_missing_build_directory(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="missing required field 'build-directory'"):
        load_workspace_config(_write_config(tmp_path, "sources: ['*.graphql']\n"))


def test_build_directory_not_a_string(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="'build-directory' must be a string"):
        load_workspace_config(_write_config(tmp_path, "build-directory: 42\n"))


def test_sources_not_a_list(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="'sources' must be a list of strings"):
        load_workspace_config(_write_config(tmp_path, "build-directory: out\nsources: '*.graphql'\n"))


def test_sources_with_non_string_entry(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="'sources' must be a list of strings"):
        load_workspace_config(_write_config(tmp_path, "build-directory: out\nsources: [1, 2]\n"))


def test_sources_empty(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="'sources' must not be empty"):
        load_workspace_config(_write_config(tmp_path, "build-directory: out\nsources: []\n"))
