"""Resolution of external executables on the execution search path."""

from __future__ import annotations

import logging
import shutil
from typing import Callable, Optional

Which = Callable[..., Optional[str]]


class PathToolLocator:
    """Resolve program names to executables using ``shutil.which``.

    ``search_path`` overrides ``PATH`` for the lookup, and ``which`` can be
    replaced to keep tests away from the real filesystem.
    """

    def __init__(
        self,
        search_path: Optional[str] = None,
        *,
        which: Optional[Which] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._search_path = search_path
        self._which = which or shutil.which
        self._logger = logger or logging.getLogger(__name__)

    def resolve(self, name: str) -> Optional[str]:
        """Return the full path for ``name`` or ``None`` when it is not found."""

        resolved = self._which(name, path=self._search_path)
        if resolved is None:
            self._logger.debug("Could not resolve %s on the search path", name)
        else:
            self._logger.debug("Resolved %s -> %s", name, resolved)
        return resolved
