# santa_draw/resolution/trace.py
from __future__ import annotations

import logging
from typing import Callable, List

from ..models import (
    DrawEvent,
    ATTEMPT_STARTED,
    DRAWING,
    PICKED,
    ATTEMPT_FAILED,
    RESOLVED,
    GAVE_UP,
)

log = logging.getLogger(__name__)

TraceSink = Callable[[DrawEvent], None]


def describe_event(event: DrawEvent) -> str:
    """One human-readable line per draw step."""
    if event.kind == ATTEMPT_STARTED:
        return f"Attempt {event.attempt}: shuffling the basket"
    if event.kind == DRAWING:
        options = ", ".join(event.candidates) or "-"
        return f"Drawing recipient for {event.giver} (options: {options})"
    if event.kind == PICKED:
        return f"{event.giver} picked {event.recipient}!"
    if event.kind == ATTEMPT_FAILED:
        return f"Nobody left for {event.giver}. Attempt {event.attempt} failed, retrying..."
    if event.kind == RESOLVED:
        return f"All names drawn in attempt {event.attempt}."
    if event.kind == GAVE_UP:
        return f"Giving up after {event.attempt} attempts."
    return f"{event.kind} (attempt {event.attempt})"


def log_event(event: DrawEvent) -> None:
    """Default sink: every step goes to the module logger at DEBUG."""
    if log.isEnabledFor(logging.DEBUG):
        log.debug(describe_event(event))


def null_sink(event: DrawEvent) -> None:
    pass


class EventRecorder:
    """Sink that keeps every event, for tests and narrated front-ends."""

    def __init__(self):
        self.events: List[DrawEvent] = []

    def __call__(self, event: DrawEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[str]:
        return [e.kind for e in self.events]

    def for_attempt(self, attempt: int) -> List[DrawEvent]:
        return [e for e in self.events if e.attempt == attempt]

    def lines(self) -> List[str]:
        return [describe_event(e) for e in self.events]
