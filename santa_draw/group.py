# santa_draw/group.py
from __future__ import annotations

import random
from typing import FrozenSet, List, Tuple

from .config import MAX_ATTEMPTS
from .errors import DuplicateParticipant, InvalidConstraint, UnknownParticipant
from .models import Assignment, Exclude, ExcludePair
from .resolution.draw import resolve_assignment
from .resolution.possibilities import GroupSnapshot, build_snapshot
from .resolution.trace import TraceSink


class Group:
    """
    A group of people that wants to draw names.

    Names are compared exactly (case-sensitive). Constraints are checked
    when they are declared, so `assign()` only ever sees valid input.
    """

    def __init__(self, max_attempts: int = MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}.")
        self.max_attempts = max_attempts
        self._participants: List[str] = []
        self._constraints: List[ExcludePair | Exclude] = []

    def __contains__(self, name: str) -> bool:
        return self.contains_name(name)

    def __len__(self) -> int:
        return len(self._participants)

    def __repr__(self) -> str:
        return (
            f"Group(participants={self._participants!r}, "
            f"constraints={len(self._constraints)})"
        )

    # ---------- Building the group ----------

    def add(self, name: str) -> None:
        """Add a name to the group."""
        if name in self._participants:
            raise DuplicateParticipant(name)
        self._participants.append(name)

    def exclude_pair(self, a: str, b: str) -> None:
        """Make sure that `a` and `b` don't have to give each other gifts."""
        self._check_constraint(a, b)
        if self._has_pair(a, b):
            return
        self._constraints.append(ExcludePair(a, b))

    def exclude(self, giver: str, recipient: str) -> None:
        """Make sure that `giver` does not have to give `recipient` a gift."""
        self._check_constraint(giver, recipient)
        constraint = Exclude(giver, recipient)
        if constraint in self._constraints:
            return
        self._constraints.append(constraint)

    def contains_name(self, name: str) -> bool:
        """Return whether the specified name is already in the group."""
        return name in self._participants

    def _check_constraint(self, a: str, b: str) -> None:
        if a == b:
            raise InvalidConstraint(
                f"Cannot exclude \"{a}\" from themselves; nobody draws their own name anyway."
            )
        for name in (a, b):
            if not self.contains_name(name):
                raise UnknownParticipant(name)

    def _has_pair(self, a: str, b: str) -> bool:
        return ExcludePair(a, b) in self._constraints or ExcludePair(b, a) in self._constraints

    # ---------- Read-only views ----------

    @property
    def participants(self) -> Tuple[str, ...]:
        return tuple(self._participants)

    @property
    def constraints(self) -> Tuple[ExcludePair | Exclude, ...]:
        """Declared constraints, in declaration order."""
        return tuple(self._constraints)

    @property
    def mutual_exclusions(self) -> FrozenSet[FrozenSet[str]]:
        return self.snapshot().mutual

    @property
    def directed_exclusions(self) -> FrozenSet[Tuple[str, str]]:
        return self.snapshot().directed

    def snapshot(self) -> GroupSnapshot:
        return build_snapshot(self._participants, self._constraints)

    # ---------- Drawing ----------

    def assign(
        self,
        rng: random.Random | None = None,
        trace: TraceSink | None = None,
    ) -> Assignment:
        """
        Run the name assignment!

        Draws names like from a basket, retrying the whole draw up to
        `max_attempts` times when someone ends up with nobody left to draw.

        Raises:
            InsufficientParticipants: fewer than two people in the group.
            ResolutionFailed: no attempt succeeded.
        """
        return resolve_assignment(
            self.snapshot(),
            rng=rng,
            trace=trace,
            max_attempts=self.max_attempts,
        )
