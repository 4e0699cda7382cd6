# santa_draw/resolution/draw.py
from __future__ import annotations

import random
from typing import Dict, List, Optional

from ..config import MAX_ATTEMPTS, MIN_PARTICIPANTS
from ..errors import InsufficientParticipants, ResolutionFailed
from ..models import (
    Assignment,
    DrawEvent,
    ATTEMPT_STARTED,
    DRAWING,
    PICKED,
    ATTEMPT_FAILED,
    RESOLVED,
    GAVE_UP,
)
from .possibilities import GroupSnapshot, build_allowed_recipients
from .trace import TraceSink, log_event


def draw_once(
    snapshot: GroupSnapshot,
    allowed: Dict[str, List[str]],
    rng: random.Random,
    attempt: int = 1,
    trace: TraceSink = log_event,
) -> Optional[Assignment]:
    """
    One pass of the basket draw.

    Givers come up in a freshly shuffled order. Each one draws uniformly
    from the names still in the basket that they are allowed to get.
    Returns None as soon as someone finds nothing they may draw.
    """
    trace(DrawEvent(ATTEMPT_STARTED, attempt))

    givers = list(snapshot.participants)
    rng.shuffle(givers)

    basket = set(snapshot.participants)
    pairs = []

    for giver in givers:
        candidates = [r for r in allowed[giver] if r in basket]
        trace(DrawEvent(DRAWING, attempt, giver=giver, candidates=tuple(candidates)))

        if not candidates:
            trace(DrawEvent(ATTEMPT_FAILED, attempt, giver=giver))
            return None

        choice = rng.choice(candidates)
        trace(DrawEvent(PICKED, attempt, giver=giver, recipient=choice))

        basket.remove(choice)
        pairs.append((giver, choice))

    trace(DrawEvent(RESOLVED, attempt))
    return Assignment(pairs=tuple(pairs), attempt=attempt)


def resolve_assignment(
    snapshot: GroupSnapshot,
    rng: random.Random | None = None,
    trace: TraceSink | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Assignment:
    """
    Run the basket draw up to `max_attempts` times and return the first
    complete assignment.

    Raises:
        InsufficientParticipants: fewer than two participants.
        ResolutionFailed: every attempt hit a dead end.
    """
    count = len(snapshot.participants)
    if count < MIN_PARTICIPANTS:
        raise InsufficientParticipants(count, MIN_PARTICIPANTS)

    if rng is None:
        rng = random.Random()
    if trace is None:
        trace = log_event

    # Exclusions don't change between attempts, only the basket does
    allowed = build_allowed_recipients(snapshot)

    for attempt in range(1, max_attempts + 1):
        assignment = draw_once(snapshot, allowed, rng, attempt=attempt, trace=trace)
        if assignment is not None:
            return assignment

    trace(DrawEvent(GAVE_UP, max_attempts))
    raise ResolutionFailed(max_attempts)
