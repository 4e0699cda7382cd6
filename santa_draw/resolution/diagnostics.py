# santa_draw/resolution/diagnostics.py
from __future__ import annotations

from typing import Any, Dict, List

from ..config import MIN_PARTICIPANTS
from ..group import Group
from .possibilities import build_allowed_givers, build_allowed_recipients


def analyze_group_feasibility(group: Group) -> Dict[str, Any]:
    """
    Analyze if the current group can *possibly* be resolved under its
    exclusions (before running the draw).

    Returns a dict with:
      - 'ok': bool
      - 'messages': list[str] (human-readable diagnostics)
      - 'suggestion': str (summary)

      - 'num_participants': int
      - 'allowed_recipients': Dict[str, List[str]]
      - 'allowed_givers': Dict[str, List[str]]
      - 'stuck_givers': List[str]            (nobody they may draw)
      - 'unreachable_recipients': List[str]  (nobody may draw them)
      - 'forced_conflicts': List[str]        (recipients several givers can only draw)

    'ok' is a necessary condition only: a group can pass every check here
    and still have no valid assignment, when exclusions interlock in ways
    only a full search (see exact.py) detects.
    """
    messages: List[str] = []

    snapshot = group.snapshot()
    num_participants = len(snapshot.participants)

    # ---------- 1. Group size ----------
    if num_participants < MIN_PARTICIPANTS:
        messages.append(
            f"Only {num_participants} participant(s) in the group. "
            f"At least {MIN_PARTICIPANTS} are needed to draw names."
        )

    allowed_recipients = build_allowed_recipients(snapshot)
    allowed_givers = build_allowed_givers(snapshot)

    # ---------- 2. Givers with an empty row ----------
    stuck_givers: List[str] = []
    unreachable_recipients: List[str] = []
    if num_participants >= MIN_PARTICIPANTS:
        stuck_givers = [g for g, rs in allowed_recipients.items() if not rs]
    for g in stuck_givers:
        messages.append(
            f"{g} is excluded from giving to everyone else in the group."
        )

    # ---------- 3. Recipients with an empty column ----------
    if num_participants >= MIN_PARTICIPANTS:
        unreachable_recipients = [r for r, gs in allowed_givers.items() if not gs]
    for r in unreachable_recipients:
        messages.append(
            f"Nobody is allowed to give a gift to {r}."
        )

    # ---------- 4. Several givers forced onto the same recipient ----------
    forced_conflicts: List[str] = []
    if num_participants >= MIN_PARTICIPANTS and not stuck_givers and not unreachable_recipients:
        single_option = {g: rs[0] for g, rs in allowed_recipients.items() if len(rs) == 1}
        forced_targets: Dict[str, List[str]] = {}
        for g, r in single_option.items():
            forced_targets.setdefault(r, []).append(g)
        for r, gs in forced_targets.items():
            if len(gs) > 1:
                forced_conflicts.append(r)
                messages.append(
                    f"{', '.join(gs)} can only give to {r}, "
                    f"but {r} can receive only one gift."
                )

    ok = len(messages) == 0

    if ok:
        suggestion = (
            "No obvious structural issues detected. "
            "A failed draw (if any) would come from finer combinations of exclusions."
        )
    else:
        suggestion = "Group cannot be resolved as is. "
        if num_participants < MIN_PARTICIPANTS:
            suggestion += "Add more participants. "
        if stuck_givers or unreachable_recipients or forced_conflicts:
            suggestion += "Consider removing some exclusions for the people listed above."

    return {
        "ok": ok,
        "messages": messages,
        "suggestion": suggestion.strip(),
        "num_participants": num_participants,
        "allowed_recipients": allowed_recipients,
        "allowed_givers": allowed_givers,
        "stuck_givers": stuck_givers,
        "unreachable_recipients": unreachable_recipients,
        "forced_conflicts": forced_conflicts,
    }
