"""
Cross-scenario summary table.
"""

import logging
from typing import List, Optional

from ..scoring.scoring_engine import ScoringEngine
from .lead_time import lead_time_comparison
from .scenario_store import Scenario

logger = logging.getLogger(__name__)


def scenarios_to_dataframe(scenarios: List[Scenario], engine: Optional[ScoringEngine] = None):
    """
    Evaluate every scenario and tabulate the composites.

    Args:
        scenarios: Scenarios to evaluate
        engine: Scoring engine to use (default configuration if omitted)

    Returns:
        pandas DataFrame, one row per scenario
    """
    import pandas as pd

    engine = engine or ScoringEngine()

    rows = []
    for scenario in scenarios:
        result = engine.evaluate(scenario.period)
        lead = lead_time_comparison(scenario)

        rows.append({
            "Scenario": scenario.name,
            "Baseline D": round(scenario.period.baseline_debt, 2),
            "V": round(result.violation, 2),
            "Repair Avg": round(result.repair_average, 2),
            "Capacity Factor": round(result.capacity_factor, 2),
            "R": round(result.repair, 2),
            "D(t)": round(result.debt, 2),
            "R/V": round(result.repair_ratio, 2),
            "Flags": result.flags.count,
            "Rupture Window": result.flags.in_window,
            "Breached Rules": "; ".join(engine.breached_rules(result.flags)),
            "CD Lead (days)": lead.cd_lead,
            "Alt Lead (days)": lead.alt_lead,
        })

    logger.debug(f"Summarised {len(rows)} scenarios")
    return pd.DataFrame(rows)
