# santa_draw/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class ExcludePair:
    """`a` and `b` must not draw each other."""
    a: str
    b: str


@dataclass(frozen=True)
class Exclude:
    """`giver` must not draw `recipient` (the reverse stays allowed)."""
    giver: str
    recipient: str


@dataclass(frozen=True)
class Assignment:
    """
    Result of a successful draw.

    `pairs` keeps the (giver, recipient) tuples in the order they were
    drawn; `attempt` is the 1-based attempt that produced them.
    """
    pairs: Tuple[Tuple[str, str], ...]
    attempt: int = 1

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def as_dict(self) -> Dict[str, str]:
        return dict(self.pairs)

    def recipient_of(self, giver: str) -> str:
        for g, r in self.pairs:
            if g == giver:
                return r
        raise KeyError(giver)


# Trace event kinds emitted by the resolver
ATTEMPT_STARTED = "attempt_started"
DRAWING = "drawing"
PICKED = "picked"
ATTEMPT_FAILED = "attempt_failed"
RESOLVED = "resolved"
GAVE_UP = "gave_up"


@dataclass(frozen=True)
class DrawEvent:
    kind: str
    attempt: int
    giver: Optional[str] = None
    candidates: Tuple[str, ...] = field(default_factory=tuple)
    recipient: Optional[str] = None
