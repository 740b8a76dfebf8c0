"""Application wiring for the cargo-ci task chain."""

from __future__ import annotations

import logging
import sys
from pathlib import PurePath
from typing import Iterable, List, Optional, Sequence

from . import registry
from .locator import PathToolLocator
from .models import Step
from .process import ProcessRunner

_LOGGER = logging.getLogger(__name__)

_INVOCATION_PREFIX = "cargo-"


class MissingToolError(RuntimeError):
    """Raised when a required executable is not on the search path."""

    def __init__(self, tool: str, invocation_name: str) -> None:
        super().__init__(f"'{tool}' is required for {invocation_name} to run")
        self.tool = tool
        self.invocation_name = invocation_name


def resolve_invocation_name(argv0: str) -> str:
    """Return the Cargo sub-command name encoded in the executable's file name.

    ``/home/me/.cargo/bin/cargo-ci`` becomes ``ci``. Anything without the
    ``cargo-`` prefix, or consisting only of it, is returned as the basename.
    """

    basename = PurePath(argv0).name if argv0 else ""
    if basename.startswith(_INVOCATION_PREFIX) and len(basename) > len(
        _INVOCATION_PREFIX
    ):
        return basename[len(_INVOCATION_PREFIX) :]
    return basename


def show_help_if_requested(args: Sequence[str]) -> None:
    """Print the usage line and exit 0 when ``args[2]`` is ``--help``.

    Cargo passes the sub-command name as ``args[1]``, so the flag is only
    recognised immediately after it.
    """

    if len(args) > 2 and args[2] == registry.HELP_FLAG:
        print(registry.USAGE)
        sys.exit(0)


class ChainRunner:
    """Check required tools and run steps until one of them fails."""

    def __init__(
        self,
        invocation_name: str,
        *,
        locator: Optional[PathToolLocator] = None,
        process_runner: Optional[ProcessRunner] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._invocation_name = invocation_name
        self._locator = locator or PathToolLocator()
        self._process_runner = process_runner or ProcessRunner()
        self._logger = logger or _LOGGER

    @property
    def invocation_name(self) -> str:
        return self._invocation_name

    def require_tools(self, names: Iterable[str]) -> None:
        """Raise ``MissingToolError`` for the first name that does not resolve."""

        for name in names:
            if self._locator.resolve(name) is None:
                self._logger.debug("Required tool %s not found", name)
                raise MissingToolError(name, self._invocation_name)

    def run_chain(self, steps: Iterable[Step]) -> int:
        """Run ``steps`` in order and return the exit code of the last one run."""

        chain: List[Step] = list(steps)
        code = 0
        for index, step in enumerate(chain, start=1):
            self._logger.info(
                "Running step %d/%d (%s): %s",
                index,
                len(chain),
                step.description or step.program,
                step.label(),
            )
            try:
                code = self._process_runner.run(step.program, step.args)
            except FileNotFoundError as exc:
                raise MissingToolError(step.program, self._invocation_name) from exc
            if code != 0:
                self._logger.info(
                    "Step %d/%d failed with exit code %d: %s",
                    index,
                    len(chain),
                    code,
                    step.label(),
                )
                return code
        if chain:
            self._logger.info("All %d steps passed", len(chain))
        return code


def run_application(
    argv: Sequence[str],
    *,
    locator: Optional[PathToolLocator] = None,
    process_runner: Optional[ProcessRunner] = None,
    required: Optional[Iterable[str]] = None,
    steps: Optional[Iterable[Step]] = None,
) -> int:
    """Run the help check, the preflight and the chain for ``argv``.

    Returns the chain's exit code. ``MissingToolError`` propagates to the
    caller, which decides how to report it.
    """

    show_help_if_requested(argv)
    invocation_name = resolve_invocation_name(argv[0] if argv else "")
    runner = ChainRunner(
        invocation_name, locator=locator, process_runner=process_runner
    )
    runner.require_tools(registry.required_tools() if required is None else required)
    return runner.run_chain(registry.default_chain() if steps is None else steps)
