# santa_draw/data/sample_groups.py
from __future__ import annotations

import random
from typing import List

from ..config import (
    DEFAULT_SEED,
    MAX_ATTEMPTS,
    NUM_PARTICIPANTS_DEFAULT,
    NUM_PAIR_EXCLUSIONS_DEFAULT,
    NUM_DIRECTED_EXCLUSIONS_DEFAULT,
)
from ..group import Group

SAMPLE_NAMES = ["Sheldon", "Amy", "Leonard", "Penny", "Rajesh"]

SAMPLE_PAIR_EXCLUSIONS = [
    ("Sheldon", "Amy"),
    ("Sheldon", "Leonard"),
    ("Leonard", "Penny"),
]


def make_sample_group(max_attempts: int = MAX_ATTEMPTS) -> Group:
    """Five friends, two couples and one pair of flatmates who skip each other."""
    group = Group(max_attempts=max_attempts)
    for name in SAMPLE_NAMES:
        group.add(name)
    for a, b in SAMPLE_PAIR_EXCLUSIONS:
        group.exclude_pair(a, b)
    return group


def _participant_names(num_participants: int) -> List[str]:
    return [f"P{i:02d}" for i in range(1, num_participants + 1)]


def make_random_group(
    num_participants: int = NUM_PARTICIPANTS_DEFAULT,
    num_pair_exclusions: int = NUM_PAIR_EXCLUSIONS_DEFAULT,
    num_directed_exclusions: int = NUM_DIRECTED_EXCLUSIONS_DEFAULT,
    seed: int | None = DEFAULT_SEED,
    max_attempts: int = MAX_ATTEMPTS,
) -> Group:
    """
    Random group P01..Pnn with the requested number of distinct exclusions.

    Pairs are drawn without replacement from all possible pairs, so
    asking for more exclusions than there are pairs is an error.
    """
    if num_participants < 0:
        raise ValueError(f"num_participants must be >= 0, got {num_participants}.")

    rng = random.Random(seed)
    names = _participant_names(num_participants)

    group = Group(max_attempts=max_attempts)
    for name in names:
        group.add(name)

    unordered = [(a, b) for i, a in enumerate(names) for b in names[i + 1:]]
    if num_pair_exclusions > len(unordered):
        raise ValueError(
            f"Cannot draw {num_pair_exclusions} pair exclusions from "
            f"{num_participants} participants (max {len(unordered)})."
        )
    pairs = rng.sample(unordered, num_pair_exclusions)
    for a, b in pairs:
        group.exclude_pair(a, b)

    # Directed exclusions only on pairs not already mutually excluded
    paired = {frozenset(p) for p in pairs}
    ordered = [
        (a, b) for a in names for b in names
        if a != b and frozenset((a, b)) not in paired
    ]
    if num_directed_exclusions > len(ordered):
        raise ValueError(
            f"Cannot draw {num_directed_exclusions} directed exclusions, "
            f"only {len(ordered)} ordered pairs remain."
        )
    for giver, recipient in rng.sample(ordered, num_directed_exclusions):
        group.exclude(giver, recipient)

    return group
