"""
Configuration module for the Contradiction Debt engine.

This module contains all configuration dictionaries for the model and the playground.
"""

from .model_config import MODEL_CONFIG, PLAYGROUND_CONFIG

__all__ = [
    "MODEL_CONFIG",
    "PLAYGROUND_CONFIG",
]
