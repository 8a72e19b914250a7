# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the gqlast documentation."""

project = "gqlast"
author = "gqlast Contributors"
release = "0.1.0"

# API pages are generated from the Google-style docstrings.
extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

autodoc_member_order = "bysource"

html_theme = "alabaster"
