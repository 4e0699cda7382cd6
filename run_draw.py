# run_draw.py

from __future__ import annotations

import argparse
import logging
import random
import sys

from santa_draw.config import LOG_FORMAT, MAX_ATTEMPTS
from santa_draw.data.group_loader import load_group_from_csv, save_assignment_csv
from santa_draw.data.sample_groups import make_sample_group
from santa_draw.errors import ResolutionFailed, SantaError
from santa_draw.resolution.diagnostics import analyze_group_feasibility
from santa_draw.resolution.exact import solve_exact_assignment

log = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw Secret Santa names from a basket, honouring exclusions."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--participants", help="CSV file with a 'name' column")
    source.add_argument("--sample", action="store_true", help="Use the built-in five-person demo group")
    parser.add_argument("--exclusions", help="CSV file with 'from', 'to', 'kind' columns (kind: pair|directed)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible draw")
    parser.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, help="Attempts before giving up")
    parser.add_argument("--output", help="Write the assignment to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Trace every draw step")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    # ---- Group ----
    try:
        if args.sample:
            group = make_sample_group(max_attempts=args.max_attempts)
        else:
            group = load_group_from_csv(
                args.participants,
                args.exclusions,
                max_attempts=args.max_attempts,
            )
    except (SantaError, ValueError) as e:
        log.error("Could not build the group: %s", e)
        return 1

    log.info("Loaded %d participants and %d exclusions.", len(group), len(group.constraints))

    # ---- Structural check before drawing ----
    diag = analyze_group_feasibility(group)
    if diag["messages"]:
        print("\n=== DIAGNOSTICS ===")
        for msg in diag["messages"]:
            print("-", msg)
    print("Suggestion:", diag["suggestion"])

    if not diag["ok"]:
        print("\nResult: Group is structurally impossible, not drawing.")
        return 1

    # ---- Draw ----
    rng = random.Random(args.seed)
    try:
        assignment = group.assign(rng=rng)
    except ResolutionFailed as e:
        log.error("%s", e)
        status, _ = solve_exact_assignment(group)
        print(f"\nExact check: {status}")
        if status in ("Optimal", "Feasible"):
            print("A valid assignment exists; try again or raise --max-attempts.")
        else:
            print("No valid assignment exists for these exclusions.")
        return 1

    print(f"\n=== ASSIGNMENT (attempt {assignment.attempt}) ===")
    for giver, recipient in assignment:
        print(f"{giver} => {recipient}")

    if args.output:
        try:
            save_assignment_csv(assignment, args.output)
        except SantaError as e:
            log.error("%s", e)
            return 1
        log.info("Saved assignment to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
