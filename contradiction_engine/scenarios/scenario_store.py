"""
Scenario records and the in-memory scenario collection.
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional

from ..config.model_config import PLAYGROUND_CONFIG
from ..scoring.inputs import (
    Triple,
    ViolationDomains,
    RepairDims,
    Health,
    PeriodInput,
    DOMAIN_NAMES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    """A named, user-editable case."""
    id: str
    name: str
    period: PeriodInput = field(default_factory=PeriodInput)
    note: Optional[str] = None
    event_date: Optional[str] = None  # YYYY-MM-DD
    cd_flag_date: Optional[str] = None  # first CD rupture window flag
    alt_model_name: Optional[str] = None
    alt_flag_date: Optional[str] = None  # comparison model flag


def default_triple() -> Triple:
    return Triple(**PLAYGROUND_CONFIG["new_case"]["triple"])


def default_violations() -> ViolationDomains:
    return ViolationDomains(**{name: default_triple() for name in DOMAIN_NAMES})


def default_repair() -> RepairDims:
    return RepairDims(**PLAYGROUND_CONFIG["new_case"]["repair"])


def default_health() -> Health:
    h = PLAYGROUND_CONFIG["new_case"]["health"]
    return Health(
        legitimacy=h["L"],
        elite_cohesion=h["E"],
        capacity=h["K"],
        cost_strain=h["C"],
        backfire=h["B"],
        trust=h["T"],
        protest=h["P"],
    )


def default_period() -> PeriodInput:
    """Mid-range period a new case starts with."""
    return PeriodInput(
        baseline_debt=PLAYGROUND_CONFIG["new_case"]["baseline_debt"],
        violations=default_violations(),
        repair=default_repair(),
        health=default_health(),
    )


class ScenarioStore:
    """
    Ordered collection of scenarios keyed by id.

    Scenarios are immutable; edits go through replace_scenario()
    with a rebuilt record.
    """

    def __init__(self, scenarios: Optional[List[Scenario]] = None):
        self._scenarios: Dict[str, Scenario] = {}
        for scenario in scenarios or []:
            self._scenarios[scenario.id] = scenario

    def __len__(self) -> int:
        return len(self._scenarios)

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._scenarios.values()))

    def __contains__(self, scenario_id: str) -> bool:
        return scenario_id in self._scenarios

    def ids(self) -> List[str]:
        return list(self._scenarios.keys())

    def get(self, scenario_id: str) -> Scenario:
        """
        Raises:
            KeyError: If no scenario has this id
        """
        return self._scenarios[scenario_id]

    def to_list(self) -> List[Scenario]:
        return list(self._scenarios.values())

    def generate_id(self) -> str:
        """Timestamp-based id, unique within this collection."""
        base = f"{PLAYGROUND_CONFIG['new_case']['id_prefix']}{int(time.time() * 1000)}"
        candidate = base
        suffix = 1
        while candidate in self._scenarios:
            candidate = f"{base}_{suffix}"
            suffix += 1
        return candidate

    def add_scenario(self, name: Optional[str] = None) -> Scenario:
        """Append a new case with default values and return it."""
        scenario = Scenario(
            id=self.generate_id(),
            name=name or PLAYGROUND_CONFIG["new_case"]["name"],
            period=default_period(),
        )
        self._scenarios[scenario.id] = scenario
        logger.info(f"Added scenario {scenario.id}")
        return scenario

    def replace_scenario(self, scenario: Scenario) -> Scenario:
        """
        Swap in an edited scenario, keeping its position.

        Raises:
            KeyError: If the scenario id is not in the collection
        """
        if scenario.id not in self._scenarios:
            raise KeyError(scenario.id)
        self._scenarios[scenario.id] = scenario
        return scenario

    def update_scenario(self, scenario_id: str, **changes) -> Scenario:
        """Rebuild one scenario with some top-level fields changed."""
        return self.replace_scenario(replace(self.get(scenario_id), **changes))

    def update_period(self, scenario_id: str, **changes) -> Scenario:
        """Rebuild one scenario's period with some fields changed."""
        scenario = self.get(scenario_id)
        return self.replace_scenario(replace(scenario, period=replace(scenario.period, **changes)))

    def replace_all(self, scenarios: List[Scenario]):
        """Replace the whole collection (used by import)."""
        self._scenarios = {s.id: s for s in scenarios}
        logger.info(f"Scenario collection replaced: {len(self._scenarios)} scenarios")
