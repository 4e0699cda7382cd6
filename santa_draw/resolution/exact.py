# santa_draw/resolution/exact.py
from __future__ import annotations

from typing import Dict, Tuple

import pulp

from ..config import MIN_PARTICIPANTS
from ..group import Group
from .milp_model import build_exact_assignment_model
from .possibilities import build_allowed_givers, build_allowed_recipients


def solve_exact_assignment(group: Group) -> Tuple[str, Dict[str, str]]:
    """
    Decide exactly whether the group has any valid assignment.

    Returns (status, mapping) where status is the pulp status string
    ("Optimal" when an assignment exists, "Infeasible" when none does)
    and mapping is giver -> recipient for the solution found.

    The basket draw never uses this; it only explains a failed draw.
    """
    snapshot = group.snapshot()
    if len(snapshot.participants) < MIN_PARTICIPANTS:
        return "Infeasible", {}

    # An empty row or column makes the model trivially infeasible
    if not all(build_allowed_recipients(snapshot).values()):
        return "Infeasible", {}
    if not all(build_allowed_givers(snapshot).values()):
        return "Infeasible", {}

    prob, x = build_exact_assignment_model(snapshot)

    solver = pulp.PULP_CBC_CMD(msg=False)
    prob.solve(solver)

    status = pulp.LpStatus[prob.status]

    mapping: Dict[str, str] = {}
    if status in ("Optimal", "Feasible"):
        for (g, r), var in x.items():
            val = var.varValue
            if val is not None and val > 0.5:
                mapping[g] = r

    return status, mapping


def has_valid_assignment(group: Group) -> bool:
    status, _ = solve_exact_assignment(group)
    return status in ("Optimal", "Feasible")
