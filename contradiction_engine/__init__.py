"""
Contradiction Engine - GoG Contradiction Debt model.

Scores violation, repair and regime-health inputs into a contradiction
debt composite, evaluates tipping rules and projects the debt trajectory.

Main Components:
    - config: Model thresholds and playground parameters
    - scoring: Period inputs and the scoring engine
    - projection: N-period debt projection
    - scenarios: Scenario collection, JSON import/export and lead times
"""

from .scoring.inputs import (
    Triple,
    ViolationDomains,
    RepairDims,
    Health,
    PeriodInput,
)

from .scoring.scoring_engine import (
    ScoringEngine,
    TippingFlags,
    PeriodResult,
)

from .projection.projection_engine import (
    ProjectionEngine,
    ProjectionPoint,
    clamp_horizon,
)

from .scenarios import (
    Scenario,
    ScenarioStore,
    ScenarioImportError,
    seed_scenarios,
    scenarios_to_json,
    scenarios_from_json,
    days_between,
    lead_time_comparison,
)

from .config.model_config import (
    MODEL_CONFIG,
    PLAYGROUND_CONFIG,
)


__version__ = "1.0.0"
__all__ = [
    # Inputs
    "Triple",
    "ViolationDomains",
    "RepairDims",
    "Health",
    "PeriodInput",
    # Scoring
    "ScoringEngine",
    "TippingFlags",
    "PeriodResult",
    # Projection
    "ProjectionEngine",
    "ProjectionPoint",
    "clamp_horizon",
    # Scenarios
    "Scenario",
    "ScenarioStore",
    "ScenarioImportError",
    "seed_scenarios",
    "scenarios_to_json",
    "scenarios_from_json",
    "days_between",
    "lead_time_comparison",
    # Configuration
    "MODEL_CONFIG",
    "PLAYGROUND_CONFIG",
]
