"""
Scenario Module for Contradiction Debt.

Contains scenario records, the in-memory collection, seed cases,
JSON import/export, lead-time comparison and the summary table.
"""

from .scenario_store import (
    Scenario,
    ScenarioStore,
    default_period,
)

from .seed_scenarios import seed_scenarios

from .serialization import (
    ScenarioImportError,
    scenario_to_dict,
    scenario_from_dict,
    scenarios_to_json,
    scenarios_from_json,
)

from .lead_time import (
    LeadTimeComparison,
    days_between,
    lead_time_comparison,
)

from .summary import scenarios_to_dataframe

__all__ = [
    "Scenario",
    "ScenarioStore",
    "default_period",
    "seed_scenarios",
    "ScenarioImportError",
    "scenario_to_dict",
    "scenario_from_dict",
    "scenarios_to_json",
    "scenarios_from_json",
    "LeadTimeComparison",
    "days_between",
    "lead_time_comparison",
    "scenarios_to_dataframe",
]
