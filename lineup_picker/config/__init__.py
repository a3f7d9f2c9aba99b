"""
Lineup Picker Configuration Module

Provides centralized configuration management for the entire application.
Import the global config instance to access all configuration values.

Usage:
    from lineup_picker.config import config

    # Access game parameters
    innings = config.game.innings

    # Access annealing configuration
    iterations = config.annealing.iterations

    # Access penalty weights
    skill_factor = config.cost.skill_factor
"""

from .settings import (
    LineupConfig,
    GameConfig,
    AnnealingConfig,
    CostConfig,
    config,
    load_config,
)

__all__ = [
    "LineupConfig",
    "GameConfig",
    "AnnealingConfig",
    "CostConfig",
    "config",
    "load_config",
]
