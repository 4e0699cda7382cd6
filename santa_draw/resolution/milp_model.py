# santa_draw/resolution/milp_model.py
from __future__ import annotations

from typing import Dict, Tuple
import pulp

from .possibilities import GroupSnapshot


def build_exact_assignment_model(
    snapshot: GroupSnapshot,
) -> Tuple[pulp.LpProblem, Dict[Tuple[str, str], pulp.LpVariable]]:
    """
    MILP for the exact gift assignment problem.

    Variables:
        x[g, r] = 1 if giver g gives to recipient r.
        Only created for pairs the exclusions allow (r != g, no mutual
        pair, no directed exclusion g -> r).

    Rules encoded:

      1) Each giver gives exactly one gift:
           ∀g: sum_r x[g,r] = 1

      2) Each recipient receives exactly one gift:
           ∀r: sum_g x[g,r] = 1

    No objective: any feasible point is a valid assignment.
    """

    people = list(snapshot.participants)
    index = {name: i for i, name in enumerate(people)}

    # ---------- Problem ----------
    prob = pulp.LpProblem("SecretSanta_Assignment", pulp.LpMinimize)

    # ---------- Decision variables ----------
    # Names can contain anything, so variables are named by position.
    x: Dict[Tuple[str, str], pulp.LpVariable] = {}
    for g in people:
        for r in people:
            if snapshot.is_allowed(g, r):
                x[(g, r)] = pulp.LpVariable(
                    f"x_{index[g]}_{index[r]}", lowBound=0, upBound=1, cat="Binary"
                )

    # ---------- Objective ----------
    prob += 0, "DummyObjective"

    # ---------- Constraints ----------

    # (1) Exactly one recipient per giver
    for g in people:
        prob += (
            pulp.lpSum(var for (gg, _), var in x.items() if gg == g) == 1,
            f"GivesOnce_{index[g]}",
        )

    # (2) Exactly one giver per recipient
    for r in people:
        prob += (
            pulp.lpSum(var for (_, rr), var in x.items() if rr == r) == 1,
            f"ReceivesOnce_{index[r]}",
        )

    return prob, x
