# tests/test_feasibility.py
import unittest
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from santa_draw.group import Group
from santa_draw.resolution.diagnostics import analyze_group_feasibility
from santa_draw.resolution.exact import solve_exact_assignment, has_valid_assignment
from santa_draw.data.sample_groups import make_sample_group


class TestFeasibility(unittest.TestCase):

    def make_group(self, *names):
        group = Group()
        for name in names:
            group.add(name)
        return group

    def make_hall_violation(self):
        """
        A, B and C can only give to C or D between them:
        every row and column is non-empty, yet no assignment exists.
        """
        group = self.make_group("A", "B", "C", "D")
        group.exclude_pair("A", "B")
        group.exclude("C", "A")
        group.exclude("C", "B")
        return group

    def verify_mapping(self, group, mapping):
        self.assertEqual(sorted(mapping), sorted(group.participants))
        self.assertEqual(sorted(mapping.values()), sorted(group.participants))
        snapshot = group.snapshot()
        for giver, recipient in mapping.items():
            self.assertTrue(snapshot.is_allowed(giver, recipient))

    # ---------- Diagnostics ----------

    def test_sample_group_is_ok(self):
        diag = analyze_group_feasibility(make_sample_group())
        self.assertTrue(diag["ok"])
        self.assertEqual(diag["messages"], [])
        self.assertEqual(diag["num_participants"], 5)
        self.assertEqual(diag["allowed_recipients"]["Sheldon"], ["Penny", "Rajesh"])

    def test_too_few_participants(self):
        diag = analyze_group_feasibility(self.make_group("A"))
        self.assertFalse(diag["ok"])
        self.assertEqual(len(diag["messages"]), 1)
        self.assertIn("Add more participants", diag["suggestion"])

    def test_stuck_giver_and_unreachable_recipient(self):
        group = self.make_group("A", "B")
        group.exclude("A", "B")
        diag = analyze_group_feasibility(group)
        self.assertFalse(diag["ok"])
        self.assertEqual(diag["stuck_givers"], ["A"])
        self.assertEqual(diag["unreachable_recipients"], ["B"])

    def test_two_givers_forced_onto_one_recipient(self):
        group = self.make_group("A", "B", "C")
        group.exclude_pair("A", "B")
        diag = analyze_group_feasibility(group)
        self.assertFalse(diag["ok"])
        self.assertEqual(diag["forced_conflicts"], ["C"])

    def test_diagnostics_miss_interlocked_exclusions(self):
        diag = analyze_group_feasibility(self.make_hall_violation())
        self.assertTrue(diag["ok"])

    # ---------- Exact check ----------

    def test_exact_sample_group(self):
        group = make_sample_group()
        status, mapping = solve_exact_assignment(group)
        self.assertEqual(status, "Optimal")
        self.verify_mapping(group, mapping)

    def test_exact_two_people(self):
        status, mapping = solve_exact_assignment(self.make_group("A", "B"))
        self.assertEqual(status, "Optimal")
        self.assertEqual(mapping, {"A": "B", "B": "A"})

    def test_exact_two_people_excluded(self):
        group = self.make_group("A", "B")
        group.exclude_pair("A", "B")
        status, mapping = solve_exact_assignment(group)
        self.assertEqual(status, "Infeasible")
        self.assertEqual(mapping, {})

    def test_exact_interlocked_exclusions(self):
        group = self.make_hall_violation()
        status, mapping = solve_exact_assignment(group)
        self.assertEqual(status, "Infeasible")
        self.assertFalse(has_valid_assignment(group))

    def test_exact_forced_route(self):
        group = self.make_group("A", "B", "C", "D")
        group.exclude_pair("A", "B")
        group.exclude("A", "C")
        status, mapping = solve_exact_assignment(group)
        self.assertEqual(status, "Optimal")
        self.assertEqual(mapping["A"], "D")
        self.verify_mapping(group, mapping)

    def test_exact_odd_names(self):
        group = self.make_group("Anne-Marie", "Jo [cousin]", "Li Wei", "O'Neil")
        group.exclude_pair("Anne-Marie", "Li Wei")
        self.assertTrue(has_valid_assignment(group))

    def test_exact_single_participant(self):
        self.assertEqual(solve_exact_assignment(self.make_group("A")), ("Infeasible", {}))


if __name__ == '__main__':
    unittest.main()
