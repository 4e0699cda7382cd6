# santa_draw/errors.py
from __future__ import annotations


class SantaError(Exception):
    """Base class for everything the group and the resolver raise."""
    pass


# --- Group building ---

class DuplicateParticipant(SantaError):
    """A participant with the same name is already in the group."""

    def __init__(self, name: str):
        super().__init__(f"Participant \"{name}\" is already in the group.")
        self.name = name


class UnknownParticipant(SantaError):
    """A constraint references someone who was never added."""

    def __init__(self, name: str):
        super().__init__(f"Unknown participant \"{name}\".")
        self.name = name


class InvalidConstraint(SantaError):
    """A constraint with the same participant on both sides."""
    pass


# --- Resolution ---

class InsufficientParticipants(SantaError):
    """Fewer than two participants, no assignment is possible."""

    def __init__(self, count: int, minimum: int = 2):
        super().__init__(
            f"Need at least {minimum} participants to draw names, got {count}."
        )
        self.count = count
        self.minimum = minimum


class ResolutionFailed(SantaError):
    """
    Every attempt of the basket draw ran into a dead end.

    This does NOT mean that no valid assignment exists, only that the
    bounded randomized search did not find one.
    """

    def __init__(self, attempts: int):
        super().__init__(
            f"Even after {attempts} attempts, no assignment satisfying all "
            f"constraints was found."
        )
        self.attempts = attempts


# --- CSV input ---

class GroupFileError(SantaError):
    """Errors related to reading group or assignment CSV files."""
    pass
