"""Command-line entry point for ``cargo ci``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from . import application


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    # --help is handled positionally by show_help_if_requested, not argparse.
    parser = argparse.ArgumentParser(description=__doc__, add_help=False)
    parser.add_argument(
        "--log-level",
        nargs="?",
        default="WARNING",
        const="INFO",
        help="Python logging level (default: WARNING, bare flag: INFO)",
    )
    args, _ = parser.parse_known_args(list(argv))
    return args


def configure_logging(level: str) -> None:
    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def print_error(message: str, console: Optional[Console] = None) -> None:
    """Write ``error: message`` to stderr, with a bold red prefix on terminals."""

    console = console or Console(stderr=True)
    console.print(
        f"[bold red]error:[/bold red] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    args = parse_args(argv[1:])
    configure_logging(args.log_level)

    try:
        return application.run_application(argv)
    except application.MissingToolError as exc:
        print_error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
