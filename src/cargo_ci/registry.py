"""Fixed tool set and command chain run by ``cargo ci``."""

from __future__ import annotations

from typing import Tuple

from .models import Step

HELP_FLAG = "--help"
USAGE = "run fmt, clippy and test"

# Checked in this order; only the first missing tool is reported.
REQUIRED_TOOLS: Tuple[str, ...] = ("cargo", "rustfmt", "cargo-clippy")

DEFAULT_CHAIN: Tuple[Step, ...] = (
    Step("cargo", ("fmt", "--all", "--", "--check"), description="formatting"),
    Step("cargo", ("clippy", "--workspace", "--all-targets"), description="linting"),
    Step("cargo", ("test", "--workspace"), description="testing"),
)


def required_tools() -> Tuple[str, ...]:
    """Return the executables that must be on the search path before running."""

    return REQUIRED_TOOLS


def default_chain() -> Tuple[Step, ...]:
    """Return the formatter, linter and test steps in execution order."""

    return DEFAULT_CHAIN
