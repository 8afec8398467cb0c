"""
Test the in-memory scenario collection.
"""

import unittest
from dataclasses import FrozenInstanceError

from contradiction_engine.scenarios.scenario_store import (
    Scenario,
    ScenarioStore,
    default_period,
)
from contradiction_engine.scenarios.seed_scenarios import seed_scenarios
from contradiction_engine.scoring.inputs import Triple, Health


class TestScenarioStore(unittest.TestCase):
    """Test scenario creation, immutable edits and replacement."""

    def setUp(self):
        """Set up test fixtures."""
        self.store = ScenarioStore(seed_scenarios())

    def test_seed_order(self):
        self.assertEqual(self.store.ids(), ["haiti", "sudan", "ecuador"])
        self.assertEqual(len(self.store), 3)
        self.assertEqual(self.store.get("sudan").name, "Sudan (Q3 2025)")

    def test_new_case_defaults(self):
        scenario = self.store.add_scenario()

        self.assertEqual(scenario.name, "New Case")
        self.assertTrue(scenario.id.startswith("case_"))
        self.assertEqual(self.store.ids()[-1], scenario.id)
        self.assertEqual(scenario.period.baseline_debt, 1.5)
        self.assertEqual(scenario.period.violations.narrative_gap, Triple(0.5, 0.5, 0.5))
        self.assertEqual(scenario.period.repair.reform, 0.4)
        self.assertEqual(
            scenario.period.health,
            Health(
                legitimacy=0.6, elite_cohesion=0.6, capacity=0.6,
                cost_strain=0.2, backfire=0.3, trust=0.6, protest=0.3,
            ),
        )
        self.assertIsNone(scenario.note)

    def test_generated_ids_are_unique(self):
        ids = {self.store.add_scenario().id for _ in range(5)}
        self.assertEqual(len(ids), 5)
        self.assertEqual(len(self.store), 8)

    def test_update_period_rebuilds_records(self):
        original = self.store.get("haiti")
        updated = self.store.update_period("haiti", baseline_debt=9.0)

        self.assertEqual(updated.period.baseline_debt, 9.0)
        self.assertEqual(original.period.baseline_debt, 2.5)
        self.assertEqual(updated.period.violations, original.period.violations)
        self.assertIs(self.store.get("haiti"), updated)

    def test_update_keeps_position(self):
        self.store.update_scenario("sudan", name="Sudan (Q4 2025)")
        self.assertEqual(self.store.ids(), ["haiti", "sudan", "ecuador"])
        self.assertEqual(self.store.get("sudan").name, "Sudan (Q4 2025)")

    def test_records_are_immutable(self):
        scenario = self.store.get("haiti")
        with self.assertRaises(FrozenInstanceError):
            scenario.name = "changed"
        with self.assertRaises(FrozenInstanceError):
            scenario.period.health.legitimacy = 1.0

    def test_replace_unknown_scenario(self):
        with self.assertRaises(KeyError):
            self.store.replace_scenario(Scenario(id="missing", name="Missing"))
        with self.assertRaises(KeyError):
            self.store.get("missing")

    def test_replace_all(self):
        replacement = [Scenario(id="only", name="Only", period=default_period())]
        self.store.replace_all(replacement)

        self.assertEqual(self.store.ids(), ["only"])
        self.assertIn("only", self.store)
        self.assertNotIn("haiti", self.store)

    def test_seed_scenarios_are_fresh_copies(self):
        self.assertEqual(seed_scenarios(), seed_scenarios())
        self.assertIsNot(seed_scenarios()[0], seed_scenarios()[0])


if __name__ == "__main__":
    unittest.main()
