from __future__ import annotations

import pathlib
import sys
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

for path in (PROJECT_ROOT, SRC_ROOT):
    as_str = str(path)
    if as_str not in sys.path:
        sys.path.insert(0, as_str)


class FakeLocator:
    def __init__(self, available: Iterable[str] = ()) -> None:
        self.available = set(available)
        self.queries: List[str] = []

    def resolve(self, name: str) -> Optional[str]:
        self.queries.append(name)
        if name in self.available:
            return f"/fake/bin/{name}"
        return None


class FakeProcessRunner:
    def __init__(self, codes: Optional[Dict[str, int]] = None) -> None:
        # Keyed by the first argument, e.g. "fmt" or "clippy".
        self.codes = codes or {}
        self.calls: List[Tuple[str, Tuple[str, ...]]] = []

    def run(self, program: str, args: Sequence[str] = ()) -> int:
        self.calls.append((program, tuple(args)))
        key = args[0] if args else program
        return self.codes.get(key, 0)


@pytest.fixture()
def all_tools() -> FakeLocator:
    return FakeLocator(["cargo", "rustfmt", "cargo-clippy"])
