"""Core data models for the cargo-ci task chain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Step:
    """A single external command in the chain."""

    program: str
    args: Tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def command(self) -> List[str]:
        return [self.program, *self.args]

    def label(self) -> str:
        return " ".join(self.command())
