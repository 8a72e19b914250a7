# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration for gqlast."""

from gqlast.workspace.config import (
    DEFAULT_SOURCES,
    WORKSPACE_CONFIG_FILENAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    render_default_config,
)

__all__ = [
    "DEFAULT_SOURCES",
    "WORKSPACE_CONFIG_FILENAME",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "load_workspace_config",
    "render_default_config",
]
