"""
Period inputs for Contradiction Debt scoring.
Violation triples, repair dimensions and health indicators for one evaluation.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple


def clamp01(value: float) -> float:
    """Clamp a scalar into [0, 1]."""
    return max(0.0, min(1.0, value))


def resolve_ratio_edit(widget_value: float, stored: float) -> float:
    """
    Value to keep after a 0-1 widget rendered a stored scalar.

    The widget can only show clamp01(stored), so a widget still sitting on
    that position means no edit and the stored value (possibly out of range)
    is kept as is.
    """
    if widget_value == clamp01(stored):
        return stored
    return widget_value


def parse_number(raw) -> float:
    """
    Parse a finite real number from an external value.

    Raises:
        ValueError: If the value is not numeric or not finite.
    """
    if isinstance(raw, bool):
        raise ValueError(f"Expected a number, got boolean {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a number, got {raw!r}")
    except OverflowError:
        # Integers beyond float range
        raise ValueError("Expected a finite number, got a value beyond float range")
    if not math.isfinite(value):
        raise ValueError(f"Expected a finite number, got {raw!r}")
    return value


@dataclass(frozen=True)
class Triple:
    """Severity profile of one violation domain."""
    scope: float = 0.0
    severity: float = 0.0
    salience: float = 0.0


@dataclass(frozen=True)
class ViolationDomains:
    """The five fixed violation domains."""
    security: Triple = field(default_factory=Triple)
    rule_of_law: Triple = field(default_factory=Triple)
    center_local: Triple = field(default_factory=Triple)
    narrative_gap: Triple = field(default_factory=Triple)
    humanitarian: Triple = field(default_factory=Triple)

    def items(self) -> Iterator[Tuple[str, Triple]]:
        """Iterate (domain name, triple) in fixed order."""
        for name in DOMAIN_NAMES:
            yield name, getattr(self, name)


DOMAIN_NAMES = (
    "security",
    "rule_of_law",
    "center_local",
    "narrative_gap",
    "humanitarian",
)

DOMAIN_LABELS: Dict[str, str] = {
    "security": "Security / rights",
    "rule_of_law": "Rule of law / elections",
    "center_local": "Center–local contradictions",
    "narrative_gap": "Narrative / facts gap",
    "humanitarian": "Humanitarian stewardship",
}


@dataclass(frozen=True)
class RepairDims:
    """Remediation effort dimensions (0-1)."""
    ack: float = 0.0  # Acknowledgment
    reform: float = 0.0
    comp: float = 0.0  # Compensation
    inclusive: float = 0.0  # Inclusivity
    fidelity: float = 0.0  # Implementation fidelity


@dataclass(frozen=True)
class Health:
    """Regime health indicators (0-1)."""
    legitimacy: float = 0.0  # L
    elite_cohesion: float = 0.0  # E
    capacity: float = 0.0  # K
    cost_strain: float = 0.0  # C
    backfire: float = 0.0  # B
    trust: float = 0.0  # T (not read by any formula)
    protest: float = 0.0  # P (not read by any formula)


@dataclass(frozen=True)
class PeriodInput:
    """Everything needed to evaluate one period."""
    baseline_debt: float = 0.0  # D(t-1), never clamped
    violations: ViolationDomains = field(default_factory=ViolationDomains)
    repair: RepairDims = field(default_factory=RepairDims)
    health: Health = field(default_factory=Health)
