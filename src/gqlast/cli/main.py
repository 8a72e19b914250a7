# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the gqlast command-line interface."""

import argparse
import json
import sys
from pathlib import Path

from gqlast.compiler.build import CompilerError, compile_files
from gqlast.parser import DocumentError, GraphQLSyntaxError, parse_file
from gqlast.validation.checks import validate_workspace
from gqlast.workspace.config import (
    WORKSPACE_CONFIG_FILENAME,
    WorkspaceConfigError,
    load_workspace_config,
    render_default_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the gqlast CLI."""
    parser = argparse.ArgumentParser(
        prog="gqlast",
        description="gqlast: parse GraphQL schemas and queries into a typed AST",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new gqlast workspace",
        description=f"Create a default {WORKSPACE_CONFIG_FILENAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the workspace in (default: current directory)",
    )

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a GraphQL file and print its AST as JSON",
        description="Parse a single .graphql file and print the resulting document as JSON.",
    )
    parse_parser.add_argument("file", help="The .graphql file to parse")
    parse_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the JSON output by this many spaces (default: compact)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the consistency of the workspace schemas",
        description="Compile every source file of the workspace and validate it.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the gqlast workspace (default: current directory)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "parse":
        return _cmd_parse(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _existing_directory(raw: str) -> Path | None:
    """Resolve *raw* to an absolute directory, reporting it when it is missing."""
    directory = Path(raw).resolve()
    if not directory.is_dir():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None
    return directory


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = _existing_directory(args.directory)
    if directory is None:
        return 1

    config_file = directory / WORKSPACE_CONFIG_FILENAME
    if config_file.exists():
        print(f"Error: workspace already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(render_default_config(), encoding="utf-8")
    print(f"Initialized gqlast workspace at '{config_file}'.")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    path = Path(args.file)
    try:
        document = parse_file(path)
    except GraphQLSyntaxError as exc:
        print(f"Error: {path}: {exc}", file=sys.stderr)
        if exc.context:
            print(exc.context, file=sys.stderr)
        return 1
    except DocumentError as exc:
        print(f"Error: {path}: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(document.model_dump(mode="json"), indent=args.indent))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    directory = _existing_directory(args.directory)
    if directory is None:
        return 1

    config_file = directory / WORKSPACE_CONFIG_FILENAME
    if not config_file.exists():
        print(
            f"Error: no gqlast workspace found at '{directory}'. Run 'gqlast init' to create one.",
            file=sys.stderr,
        )
        return 1

    try:
        config = load_workspace_config(config_file)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    build_dir = directory / config.build_directory
    source_files = config.source_files(directory)
    if not source_files:
        print("No .graphql files found in the workspace.")
        return 0

    print(f"Checking {len(source_files)} GraphQL file(s)...")
    try:
        compiled = compile_files(source_files, build_dir, directory)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    has_errors = False
    for key, result in validate_workspace(compiled).items():
        for warning in result.warnings:
            print(f"Warning: {key}: {warning.message}")
        for error in result.errors:
            print(f"Error: {key}: {error.message}", file=sys.stderr)
            has_errors = True

    if has_errors:
        return 1

    print("No issues found.")
    return 0
