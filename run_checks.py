#!/usr/bin/env python3
"""Convenience script to run formatting, linting, and tests in sequence."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
SRC_DIR = ROOT_DIR / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from cargo_ci import cli  # noqa: E402
from cargo_ci.application import ChainRunner, MissingToolError  # noqa: E402
from cargo_ci.models import Step  # noqa: E402

CHECKS = (
    Step("black", ("--check", "."), description="Formatting (black)"),
    Step("ruff", ("check", "."), description="Linting (ruff)"),
    Step("pytest", (), description="Testing (pytest)"),
)


def main() -> int:
    cli.configure_logging("INFO")
    runner = ChainRunner("run_checks")
    try:
        runner.require_tools(step.program for step in CHECKS)
        code = runner.run_chain(CHECKS)
    except MissingToolError as exc:
        cli.print_error(str(exc))
        return 1
    if code == 0:
        print("\nAll checks passed! ✨")
    return code


if __name__ == "__main__":
    raise SystemExit(main())
