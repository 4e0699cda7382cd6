# santa_draw/resolution/possibilities.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Tuple

from ..models import Exclude, ExcludePair


@dataclass(frozen=True)
class GroupSnapshot:
    """
    Frozen copy of a group's participants and exclusions.

    The resolver only ever works on a snapshot, so the group itself is
    never touched while names are drawn.
    """
    participants: Tuple[str, ...]
    mutual: FrozenSet[FrozenSet[str]]
    directed: FrozenSet[Tuple[str, str]]

    def is_allowed(self, giver: str, recipient: str) -> bool:
        if giver == recipient:
            return False
        if frozenset((giver, recipient)) in self.mutual:
            return False
        return (giver, recipient) not in self.directed


def build_snapshot(
    participants: Iterable[str],
    constraints: Iterable[ExcludePair | Exclude],
) -> GroupSnapshot:
    """
    Build:
      participants: tuple in insertion order
      mutual: {frozenset({a, b}), ...}
      directed: {(giver, recipient), ...}
    """
    mutual = set()
    directed = set()
    for constraint in constraints:
        if isinstance(constraint, ExcludePair):
            mutual.add(frozenset((constraint.a, constraint.b)))
        elif isinstance(constraint, Exclude):
            directed.add((constraint.giver, constraint.recipient))
        else:
            raise TypeError(f"Unsupported constraint: {constraint!r}")

    return GroupSnapshot(
        participants=tuple(participants),
        mutual=frozenset(mutual),
        directed=frozenset(directed),
    )


def build_allowed_recipients(snapshot: GroupSnapshot) -> Dict[str, List[str]]:
    """
    giver -> recipients that giver may draw, ignoring who is already taken.

    Lists follow the participants' insertion order.
    """
    return {
        giver: [r for r in snapshot.participants if snapshot.is_allowed(giver, r)]
        for giver in snapshot.participants
    }


def build_allowed_givers(snapshot: GroupSnapshot) -> Dict[str, List[str]]:
    """recipient -> givers that may draw that recipient."""
    return {
        recipient: [g for g in snapshot.participants if snapshot.is_allowed(g, recipient)]
        for recipient in snapshot.participants
    }
