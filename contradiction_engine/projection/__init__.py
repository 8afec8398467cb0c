"""
Projection Module for Contradiction Debt.

Contains the iterative debt trajectory projection.
"""

from .projection_engine import (
    ProjectionPoint,
    ProjectionEngine,
    clamp_horizon,
    points_to_dataframe,
)

__all__ = [
    "ProjectionPoint",
    "ProjectionEngine",
    "clamp_horizon",
    "points_to_dataframe",
]
