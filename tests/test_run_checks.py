from __future__ import annotations

import pytest

import run_checks
from cargo_ci import application

from conftest import FakeLocator, FakeProcessRunner


def test_missing_tool_uses_cli_error_format(
    monkeypatch: pytest.MonkeyPatch, capfd: pytest.CaptureFixture[str]
) -> None:
    processes = FakeProcessRunner()
    monkeypatch.setattr(application, "PathToolLocator", lambda: FakeLocator(["black"]))
    monkeypatch.setattr(application, "ProcessRunner", lambda: processes)

    assert run_checks.main() == 1
    assert capfd.readouterr().err == (
        "error: 'ruff' is required for run_checks to run\n"
    )
    assert processes.calls == []


def test_all_checks_pass(
    monkeypatch: pytest.MonkeyPatch, capfd: pytest.CaptureFixture[str]
) -> None:
    processes = FakeProcessRunner()
    monkeypatch.setattr(
        application, "PathToolLocator", lambda: FakeLocator(["black", "ruff", "pytest"])
    )
    monkeypatch.setattr(application, "ProcessRunner", lambda: processes)

    assert run_checks.main() == 0
    assert [program for program, _ in processes.calls] == ["black", "ruff", "pytest"]
    assert "All checks passed!" in capfd.readouterr().out
