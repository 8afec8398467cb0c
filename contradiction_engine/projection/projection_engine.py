"""
Debt trajectory projection.
Iterates the debt recurrence over a horizon of periods.
"""

import logging
from dataclasses import dataclass
from itertools import repeat
from typing import Dict, Iterable, List, Optional, Tuple

from ..config.model_config import PLAYGROUND_CONFIG
from ..scoring.inputs import PeriodInput, parse_number
from ..scoring.scoring_engine import ScoringEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionPoint:
    """Debt snapshot for one projected period."""
    period: int
    debt: float  # D
    violation: float  # V
    repair: float  # R
    ratio: float  # R/V, 0 when V == 0


class ProjectionEngine:
    """N-period debt projection."""

    def __init__(self, scoring_engine: Optional[ScoringEngine] = None):
        self.scoring_engine = scoring_engine or ScoringEngine()

    def project_series(
        self,
        initial_debt: float,
        increments: Iterable[Tuple[float, float]]
    ) -> List[ProjectionPoint]:
        """
        Apply D_t = D_{t-1} + V_t - R_t over an explicit sequence of (V, R) pairs.

        Args:
            initial_debt: Debt level before the first projected period
            increments: Per-period (violation, repair) pairs

        Returns:
            One ProjectionPoint per pair, periods numbered from 1
        """
        points = []
        debt = initial_debt
        for period, (violation, repair) in enumerate(increments, start=1):
            debt = self.scoring_engine.next_debt(debt, violation, repair)
            points.append(ProjectionPoint(
                period=period,
                debt=debt,
                violation=violation,
                repair=repair,
                ratio=self.scoring_engine.repair_ratio(repair, violation),
            ))
        return points

    def project(
        self,
        initial_debt: float,
        violation: float,
        repair: float,
        horizon: int
    ) -> List[ProjectionPoint]:
        """
        Project debt with V and R held constant.

        Raises:
            ValueError: If horizon is not a positive integer
        """
        if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon < 1:
            raise ValueError(f"Horizon must be a positive integer, got {horizon!r}")

        points = self.project_series(initial_debt, repeat((violation, repair), horizon))
        logger.debug(
            "Projected %d periods from D0=%.3f: D_end=%.3f",
            horizon, initial_debt, points[-1].debt,
        )
        return points

    def project_period(self, period: PeriodInput, horizon: int) -> List[ProjectionPoint]:
        """Score a period and project it with its V and R held constant."""
        result = self.scoring_engine.evaluate(period)
        return self.project(period.baseline_debt, result.violation, result.repair, horizon)


def clamp_horizon(raw, last_good: int = PLAYGROUND_CONFIG["horizon"]["default"]) -> int:
    """
    Turn a user-entered horizon into a usable one.

    Non-numeric input falls back to last_good; the result is clamped
    into the configured horizon range.
    """
    bounds = PLAYGROUND_CONFIG["horizon"]
    try:
        horizon = int(parse_number(raw))
    except ValueError:
        logger.warning("Ignoring non-numeric horizon %r, keeping %d", raw, last_good)
        horizon = last_good
    return max(bounds["min"], min(bounds["max"], horizon))


def points_to_dataframe(points: List[ProjectionPoint]):
    """
    Convert projection points to a pandas DataFrame for charting.

    Values are rounded to 2 decimals for display only.
    """
    import pandas as pd

    rows: List[Dict] = []
    for point in points:
        rows.append({
            "Period": point.period,
            "D": round(point.debt, 2),
            "V": round(point.violation, 2),
            "R": round(point.repair, 2),
            "R/V": round(point.ratio, 2),
        })
    return pd.DataFrame(rows, columns=["Period", "D", "V", "R", "R/V"])
