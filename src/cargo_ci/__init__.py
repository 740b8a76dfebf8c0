"""Fail-fast fmt, clippy and test runner for Cargo workspaces."""

__all__ = [
    "application",
    "cli",
    "locator",
    "models",
    "process",
    "registry",
]
