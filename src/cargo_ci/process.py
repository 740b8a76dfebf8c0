"""Child process execution for chain steps."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Optional, Sequence

Spawn = Callable[..., "subprocess.CompletedProcess[bytes]"]


def normalize_returncode(returncode: int) -> int:
    """Map a signal termination (negative code) to the shell's ``128 + n``."""

    if returncode < 0:
        return 128 + -returncode
    return returncode


class ProcessRunner:
    """Run a program to completion with inherited standard streams."""

    def __init__(
        self,
        spawn: Optional[Spawn] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._spawn = spawn or subprocess.run
        self._logger = logger or logging.getLogger(__name__)

    def run(self, program: str, args: Sequence[str] = ()) -> int:
        """Block until ``program`` exits and return its exit code.

        Raises ``FileNotFoundError`` when the program cannot be started.
        """

        command = [program, *args]
        result = self._spawn(command, check=False)
        code = normalize_returncode(result.returncode)
        if code != result.returncode:
            self._logger.debug(
                "%s terminated by signal %d", program, -result.returncode
            )
        return code
