"""
Contradiction Debt Scoring Engine.
Implements the violation, repair and debt composites plus the tipping rules.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config.model_config import MODEL_CONFIG
from .inputs import (
    clamp01,
    Triple,
    ViolationDomains,
    RepairDims,
    Health,
    PeriodInput,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TippingFlags:
    """Result of the five tipping rules."""
    legitimacy_low: bool = False  # L
    elite_cohesion_low: bool = False  # E
    backfire_high: bool = False  # B
    cost_strain_high: bool = False  # C
    repair_ratio_low: bool = False  # R/V
    min_flags: int = 2

    @property
    def count(self) -> int:
        """Number of rules breached."""
        return sum([
            self.legitimacy_low,
            self.elite_cohesion_low,
            self.backfire_high,
            self.cost_strain_high,
            self.repair_ratio_low,
        ])

    @property
    def in_window(self) -> bool:
        """True when enough rules breach together to signal a rupture window."""
        return self.count >= self.min_flags

    def as_dict(self) -> Dict[str, bool]:
        return {
            "L": self.legitimacy_low,
            "E": self.elite_cohesion_low,
            "B": self.backfire_high,
            "C": self.cost_strain_high,
            "Rv": self.repair_ratio_low,
        }


@dataclass(frozen=True)
class PeriodResult:
    """Composite record for one evaluated period."""
    violation: float = 0.0  # V
    repair_average: float = 0.0
    capacity_factor: float = 0.0
    repair: float = 0.0  # R
    debt: float = 0.0  # D(t)
    repair_ratio: float = 0.0  # R/V, 0 when V == 0
    domain_scores: Dict[str, float] = field(default_factory=dict)
    flags: TippingFlags = field(default_factory=TippingFlags)


class ScoringEngine:
    """Pure scoring of a PeriodInput."""

    def __init__(self, config: Optional[Dict] = None):
        """
        Initialize the scoring engine with configuration.

        Args:
            config: Optional overrides merged over MODEL_CONFIG section by section
        """
        self.model_config = copy.deepcopy(MODEL_CONFIG)
        for section, values in (config or {}).items():
            self.model_config.setdefault(section, {}).update(values)

        self.violation_cap = self.model_config["violation"]["cap"]
        self.thresholds = self.model_config["tipping_thresholds"]
        self.min_flags = self.model_config["rupture_window"]["min_flags"]

    def triple_score(self, triple: Triple) -> float:
        """Product of clamped scope, severity and salience; zero on any axis zeroes the domain."""
        return clamp01(triple.scope) * clamp01(triple.severity) * clamp01(triple.salience)

    def domain_scores(self, domains: ViolationDomains) -> Dict[str, float]:
        return {name: self.triple_score(triple) for name, triple in domains.items()}

    def violation_total(self, domains: ViolationDomains) -> float:
        """Sum of the five domain scores, capped."""
        raw = sum(self.domain_scores(domains).values())
        return min(self.violation_cap, raw)

    def repair_average(self, repair: RepairDims) -> float:
        values = [repair.ack, repair.reform, repair.comp, repair.inclusive, repair.fidelity]
        return sum(clamp01(v) for v in values) / len(values)

    def capacity_factor(self, health: Health) -> float:
        """Mean of legitimacy, elite cohesion and capacity."""
        values = [health.legitimacy, health.elite_cohesion, health.capacity]
        return sum(clamp01(v) for v in values) / len(values)

    def repair_total(self, repair: RepairDims, health: Health) -> float:
        """Repair effort discounted by institutional capacity."""
        return self.repair_average(repair) * self.capacity_factor(health)

    @staticmethod
    def next_debt(previous_debt: float, violation: float, repair: float) -> float:
        """One step of D(t) = D(t-1) + V - R. Debt is never clamped."""
        return previous_debt + violation - repair

    @staticmethod
    def repair_ratio(repair: float, violation: float) -> float:
        return repair / violation if violation > 0 else 0.0

    def tipping_flags(self, health: Health, repair: float, violation: float) -> TippingFlags:
        """Evaluate the five independent tipping rules."""
        t = self.thresholds
        return TippingFlags(
            legitimacy_low=clamp01(health.legitimacy) < t["legitimacy_below"],
            elite_cohesion_low=clamp01(health.elite_cohesion) < t["elite_cohesion_below"],
            backfire_high=clamp01(health.backfire) > t["backfire_above"],
            cost_strain_high=clamp01(health.cost_strain) > t["cost_strain_above"],
            # Vacuously false with nothing to repair against
            repair_ratio_low=(repair / violation < t["repair_ratio_below"]) if violation > 0 else False,
            min_flags=self.min_flags,
        )

    def evaluate(self, period: PeriodInput) -> PeriodResult:
        """
        Evaluate one period.

        Args:
            period: Baseline debt plus violation, repair and health inputs

        Returns:
            PeriodResult with V, R, D, R/V and tipping flags
        """
        scores = self.domain_scores(period.violations)
        violation = min(self.violation_cap, sum(scores.values()))
        repair_avg = self.repair_average(period.repair)
        capacity = self.capacity_factor(period.health)
        repair = repair_avg * capacity
        flags = self.tipping_flags(period.health, repair, violation)

        result = PeriodResult(
            violation=violation,
            repair_average=repair_avg,
            capacity_factor=capacity,
            repair=repair,
            debt=self.next_debt(period.baseline_debt, violation, repair),
            repair_ratio=self.repair_ratio(repair, violation),
            domain_scores=scores,
            flags=flags,
        )
        logger.debug(
            "Evaluated period: V=%.3f R=%.3f D=%.3f flags=%d%s",
            result.violation, result.repair, result.debt, flags.count,
            " (rupture window)" if flags.in_window else "",
        )
        return result

    def breached_rules(self, flags: TippingFlags) -> List[str]:
        """Human-readable descriptions of the breached rules."""
        t = self.thresholds
        descriptions = [
            (flags.legitimacy_low, f"L < {t['legitimacy_below']:.2f}"),
            (flags.elite_cohesion_low, f"E < {t['elite_cohesion_below']:.2f}"),
            (flags.backfire_high, f"B > {t['backfire_above']:.2f}"),
            (flags.cost_strain_high, f"C > {t['cost_strain_above']:.2f}"),
            (flags.repair_ratio_low, f"R/V < {t['repair_ratio_below']}"),
        ]
        return [text for breached, text in descriptions if breached]
