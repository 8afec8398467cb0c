"""
Seed scenarios for the playground.
Illustrative values only; replace with sourced data.
"""

from typing import List

from ..scoring.inputs import Triple, ViolationDomains, RepairDims, Health, PeriodInput
from .scenario_store import Scenario


def seed_scenarios() -> List[Scenario]:
    """Return fresh copies of the three illustrative cases."""
    return [
        Scenario(
            id="haiti",
            name="Haiti (Q3 2025)",
            note="Illustrative values based on public reporting; adjust as needed.",
            period=PeriodInput(
                baseline_debt=2.5,
                violations=ViolationDomains(
                    security=Triple(0.9, 0.9, 0.9),
                    rule_of_law=Triple(0.8, 0.7, 0.7),
                    center_local=Triple(0.8, 0.6, 0.6),
                    narrative_gap=Triple(0.7, 0.6, 0.6),
                    humanitarian=Triple(0.9, 0.8, 0.8),
                ),
                repair=RepairDims(ack=0.7, reform=0.4, comp=0.5, inclusive=0.5, fidelity=0.3),
                health=Health(
                    legitimacy=0.4, elite_cohesion=0.45, capacity=0.3,
                    cost_strain=0.4, backfire=0.55, trust=0.3, protest=0.6,
                ),
            ),
            event_date="2026-01-15",
            cd_flag_date="2025-07-15",
            alt_model_name="FSI/PITF (illustrative)",
            alt_flag_date="2025-11-01",
        ),
        Scenario(
            id="sudan",
            name="Sudan (Q3 2025)",
            period=PeriodInput(
                baseline_debt=3.0,
                violations=ViolationDomains(
                    security=Triple(0.95, 0.9, 0.9),
                    rule_of_law=Triple(0.85, 0.85, 0.8),
                    center_local=Triple(0.8, 0.7, 0.7),
                    narrative_gap=Triple(0.7, 0.6, 0.7),
                    humanitarian=Triple(0.9, 0.85, 0.8),
                ),
                repair=RepairDims(ack=0.5, reform=0.3, comp=0.3, inclusive=0.3, fidelity=0.2),
                health=Health(
                    legitimacy=0.35, elite_cohesion=0.3, capacity=0.3,
                    cost_strain=0.4, backfire=0.6, trust=0.25, protest=0.7,
                ),
            ),
        ),
        Scenario(
            id="ecuador",
            name="Ecuador (Q3 2025)",
            period=PeriodInput(
                baseline_debt=1.2,
                violations=ViolationDomains(
                    security=Triple(0.6, 0.6, 0.7),
                    rule_of_law=Triple(0.5, 0.5, 0.5),
                    center_local=Triple(0.5, 0.4, 0.4),
                    narrative_gap=Triple(0.4, 0.4, 0.4),
                    humanitarian=Triple(0.4, 0.4, 0.4),
                ),
                repair=RepairDims(ack=0.6, reform=0.6, comp=0.6, inclusive=0.6, fidelity=0.6),
                health=Health(
                    legitimacy=0.6, elite_cohesion=0.7, capacity=0.6,
                    cost_strain=0.25, backfire=0.4, trust=0.55, protest=0.45,
                ),
            ),
        ),
    ]
