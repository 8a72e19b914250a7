#!/usr/bin/env python3
# Copyright 2026 gqlast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build.

Pass step keys (e.g. ``tests lint``) to run a subset.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, str, list[str]]] = [
    ("format", "Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("lint", "Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("types", "Type check", ["uv", "run", "ty", "check", "src/"]),
    ("tests", "Tests", ["uv", "run", "pytest", "--cov=gqlast", "--cov-report=term-missing"]),
    ("build", "Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps (all by default) and report results."""
    selected = argv if argv is not None else sys.argv[1:]
    unknown = [key for key in selected if key not in {k for k, _, _ in STEPS}]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}"), file=sys.stderr)
        return 2

    results: list[tuple[str, bool, float]] = []
    for key, name, cmd in STEPS:
        if selected and key not in selected:
            continue
        sep = chalk.blue("=" * 60)
        print(f"\n{sep}")
        print(chalk.blue(name))
        print(sep)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        elapsed = time.monotonic() - start
        results.append((name, proc.returncode == 0, elapsed))

    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    for name, passed, elapsed in results:
        if passed:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
