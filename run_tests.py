# run_tests.py
from santa_draw.data.sample_groups import make_random_group, make_sample_group
from santa_draw.errors import ResolutionFailed
from santa_draw.resolution.diagnostics import analyze_group_feasibility
from santa_draw.resolution.exact import solve_exact_assignment


def run_test_case(name, group, draws=100):
    print(f"\n{'='*20}\nRUNNING TEST: {name}\n{'='*20}")
    print(f"Group has {len(group)} participants and {len(group.constraints)} exclusions.")

    # 1. Check Feasibility
    diag = analyze_group_feasibility(group)
    if not diag["ok"]:
        print(f"\n[FAIL] Structurally Infeasible: {diag['messages']}")
        return

    # 2. Exact answer
    status, _ = solve_exact_assignment(group)
    print(f"[EXACT] Solver Status: {status}")

    # 3. Draw a few times and count how often the basket gives up
    failures = 0
    attempts_used = []
    for _ in range(draws):
        try:
            assignment = group.assign()
        except ResolutionFailed:
            failures += 1
            continue
        attempts_used.append(assignment.attempt)

    print(f"\n[RESULT] {draws - failures}/{draws} draws succeeded.")
    if attempts_used:
        avg = sum(attempts_used) / len(attempts_used)
        print(f"Average attempts per successful draw: {avg:.1f}")


def main():
    # Test Case 1: the demo group, three pair exclusions among five people
    run_test_case(
        name="Sample group, 5 people, 3 pairs",
        group=make_sample_group(),
    )

    # Test Case 2: denser random group
    # Many exclusions relative to size, the basket needs more retries here.
    run_test_case(
        name="Random group, 6 people, 4 pairs + 4 directed",
        group=make_random_group(
            num_participants=6,
            num_pair_exclusions=4,
            num_directed_exclusions=4,
            seed=7,
        ),
    )

if __name__ == "__main__":
    main()
