"""
Test JSON import/export of the scenario list.
Validates the exchanged shape, round trips and rejection of malformed payloads.
"""

import json
import unittest
from dataclasses import replace

from contradiction_engine.scenarios.serialization import (
    ScenarioImportError,
    scenario_to_dict,
    scenarios_to_json,
    scenarios_from_json,
)
from contradiction_engine.scenarios.scenario_store import ScenarioStore, default_health
from contradiction_engine.scenarios.seed_scenarios import seed_scenarios
from contradiction_engine.scoring.inputs import Triple


class TestScenarioExport(unittest.TestCase):
    """Test the exported JSON shape."""

    def setUp(self):
        """Set up test fixtures."""
        self.seeds = seed_scenarios()

    def test_camel_case_shape(self):
        data = scenario_to_dict(self.seeds[0])

        self.assertEqual(data["id"], "haiti")
        self.assertEqual(data["period"]["baselineD"], 2.5)
        self.assertEqual(
            set(data["period"]["violations"].keys()),
            {"security", "ruleOfLaw", "centerLocal", "narrativeGap", "humanitarian"},
        )
        self.assertEqual(
            data["period"]["violations"]["ruleOfLaw"],
            {"scope": 0.8, "severity": 0.7, "salience": 0.7},
        )
        self.assertEqual(
            data["period"]["health"],
            {"L": 0.4, "E": 0.45, "K": 0.3, "C": 0.4, "B": 0.55, "T": 0.3, "P": 0.6},
        )
        self.assertEqual(data["eventDate"], "2026-01-15")
        self.assertEqual(data["cdFlagDate"], "2025-07-15")
        self.assertEqual(data["altModelName"], "FSI/PITF (illustrative)")
        self.assertEqual(data["altFlagDate"], "2025-11-01")

    def test_unset_optional_fields_are_omitted(self):
        data = scenario_to_dict(self.seeds[1])
        for key in ["note", "eventDate", "cdFlagDate", "altModelName", "altFlagDate"]:
            self.assertNotIn(key, data)

    def test_export_is_pretty_printed_array(self):
        text = scenarios_to_json(self.seeds)
        self.assertTrue(text.startswith("[\n  {"))
        self.assertEqual(len(json.loads(text)), 3)

    def test_empty_collection(self):
        self.assertEqual(scenarios_to_json([]), "[]")


class TestScenarioRoundTrip(unittest.TestCase):
    """Test export followed by import."""

    def test_seed_round_trip(self):
        seeds = seed_scenarios()
        self.assertEqual(scenarios_from_json(scenarios_to_json(seeds)), seeds)

    def test_edited_collection_round_trip(self):
        store = ScenarioStore(seed_scenarios())
        added = store.add_scenario()
        store.update_scenario(added.id, note="", event_date="2025-03-01")
        # Stored values are kept verbatim, clamping only happens in formulas
        store.update_period(
            "ecuador",
            baseline_debt=-4.25,
            violations=replace(store.get("ecuador").period.violations, security=Triple(1.7, -0.3, 0.5)),
        )

        restored = scenarios_from_json(scenarios_to_json(store.to_list()))
        self.assertEqual(restored, store.to_list())

    def test_bytes_input(self):
        seeds = seed_scenarios()
        self.assertEqual(scenarios_from_json(scenarios_to_json(seeds).encode("utf-8")), seeds)


class TestScenarioImportErrors(unittest.TestCase):
    """Test rejection of malformed payloads."""

    def assertImportError(self, content, error_type):
        with self.assertRaises(ScenarioImportError) as ctx:
            scenarios_from_json(content)
        self.assertEqual(ctx.exception.error_type, error_type)

    def test_malformed_json(self):
        self.assertImportError("{not json", "JSON_PARSE_ERROR")
        self.assertImportError(b"\xff\xfe", "JSON_PARSE_ERROR")

    def test_top_level_must_be_array(self):
        self.assertImportError('{"id": "haiti"}', "INVALID_JSON_STRUCTURE")
        self.assertImportError('"scenarios"', "INVALID_JSON_STRUCTURE")
        self.assertImportError("null", "INVALID_JSON_STRUCTURE")

    def test_elements_must_be_objects(self):
        self.assertImportError("[1, 2]", "INVALID_JSON_STRUCTURE")
        self.assertImportError('[{"id": "a", "period": []}]', "INVALID_JSON_STRUCTURE")

    def test_non_numeric_value(self):
        self.assertImportError('[{"id": "a", "period": {"baselineD": "abc"}}]', "DATA_VALIDATION_ERROR")
        self.assertImportError(
            '[{"id": "a", "period": {"health": {"L": "high"}}}]',
            "DATA_VALIDATION_ERROR",
        )
        self.assertImportError(
            '[{"id": "a", "period": {"repair": {"ack": true}}}]',
            "DATA_VALIDATION_ERROR",
        )

    def test_integer_beyond_float_range(self):
        huge = "1" + "0" * 400
        self.assertImportError(
            '[{"id": "a", "period": {"baselineD": ' + huge + '}}]',
            "DATA_VALIDATION_ERROR",
        )
        self.assertImportError(
            '[{"id": "a", "period": {"health": {"L": -' + huge + '}}}]',
            "DATA_VALIDATION_ERROR",
        )

    def test_integer_literal_too_long_to_parse(self):
        """Interpreters with an int digit limit fail in the parser, others on conversion."""
        huge = "9" * 5000
        with self.assertRaises(ScenarioImportError) as ctx:
            scenarios_from_json('[{"id": "a", "period": {"baselineD": ' + huge + '}}]')
        self.assertIn(ctx.exception.error_type, ("JSON_PARSE_ERROR", "DATA_VALIDATION_ERROR"))

    def test_deeply_nested_payload(self):
        self.assertImportError("[" * 100000 + "]" * 100000, "JSON_PARSE_ERROR")
        self.assertImportError("[" * 100000, "JSON_PARSE_ERROR")

    def test_non_string_name(self):
        self.assertImportError('[{"id": "a", "name": 5}]', "DATA_VALIDATION_ERROR")
        self.assertImportError('[{"id": "a", "name": {"en": "A"}}]', "DATA_VALIDATION_ERROR")

    def test_non_string_date(self):
        self.assertImportError('[{"id": "a", "eventDate": 20260115}]', "DATA_VALIDATION_ERROR")

    def test_duplicate_ids(self):
        self.assertImportError('[{"id": "a"}, {"id": "a"}]', "DATA_VALIDATION_ERROR")

    def test_failed_import_leaves_store_unchanged(self):
        """Import is all-or-nothing."""
        store = ScenarioStore(seed_scenarios())
        before = store.to_list()
        payload = '[{"id": "ok"}, {"id": "bad", "period": {"baselineD": "x"}}]'

        try:
            store.replace_all(scenarios_from_json(payload))
        except ScenarioImportError:
            pass

        self.assertEqual(store.to_list(), before)


class TestScenarioImportDefaults(unittest.TestCase):
    """Test defaults applied to sparse payloads."""

    def test_missing_baseline_debt_defaults_to_zero(self):
        scenarios = scenarios_from_json('[{"id": "a", "name": "A", "period": {}}]')
        self.assertEqual(scenarios[0].period.baseline_debt, 0.0)

    def test_missing_nested_values_use_new_case_defaults(self):
        scenarios = scenarios_from_json(
            '[{"id": "a", "name": "A", "period": {"violations": {"security": {"scope": 0.9}}}}]'
        )
        period = scenarios[0].period

        self.assertEqual(period.violations.security, Triple(0.9, 0.5, 0.5))
        self.assertEqual(period.violations.humanitarian, Triple(0.5, 0.5, 0.5))
        self.assertEqual(period.repair.fidelity, 0.4)
        self.assertEqual(period.health, default_health())

    def test_missing_id_and_name(self):
        scenarios = scenarios_from_json("[{}, {}]")

        self.assertEqual(len(scenarios), 2)
        self.assertTrue(scenarios[0].id.startswith("case_"))
        self.assertNotEqual(scenarios[0].id, scenarios[1].id)
        self.assertEqual(scenarios[0].name, "New Case")

    def test_null_name_counts_as_missing(self):
        scenarios = scenarios_from_json('[{"id": "a", "name": null, "note": null}]')

        self.assertEqual(scenarios[0].name, "New Case")
        self.assertIsNone(scenarios[0].note)

    def test_integer_values_are_read_as_numbers(self):
        scenarios = scenarios_from_json('[{"id": "a", "period": {"baselineD": 3, "repair": {"ack": 1}}}]')
        self.assertEqual(scenarios[0].period.baseline_debt, 3.0)
        self.assertEqual(scenarios[0].period.repair.ack, 1.0)

    def test_empty_array(self):
        self.assertEqual(scenarios_from_json("[]"), [])


if __name__ == "__main__":
    unittest.main()
