"""
Scoring Module for Contradiction Debt.

Contains the period input records and the pure scoring engine.
"""

from .inputs import (
    clamp01,
    parse_number,
    resolve_ratio_edit,
    Triple,
    ViolationDomains,
    RepairDims,
    Health,
    PeriodInput,
    DOMAIN_NAMES,
    DOMAIN_LABELS,
)

from .scoring_engine import (
    TippingFlags,
    PeriodResult,
    ScoringEngine,
)

__all__ = [
    # Inputs
    "clamp01",
    "parse_number",
    "resolve_ratio_edit",
    "Triple",
    "ViolationDomains",
    "RepairDims",
    "Health",
    "PeriodInput",
    "DOMAIN_NAMES",
    "DOMAIN_LABELS",
    # Scoring engine
    "TippingFlags",
    "PeriodResult",
    "ScoringEngine",
]
