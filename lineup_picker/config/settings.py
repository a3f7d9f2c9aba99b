"""
Global Configuration System for Lineup Picker

Centralized configuration for game parameters, annealing tuning and penalty weights.
Provides type-safe configuration with validation and environment variable support.
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator


class GameConfig(BaseModel):
    """Game Parameters"""

    innings: int = Field(
        default=6, description="Innings to schedule (usually 4-7)", ge=1, le=12
    )
    max_men_on_field: int = Field(
        default=7,
        description="Maximum male fielders allowed in any inning; extra men sit",
        ge=0,
        le=10,
    )
    game_type: str = Field(
        default="regular",
        description="'regular' gives lower-skill players reps in key spots, 'playoff' puts the best players there",
    )
    max_primary_in_a_row: int = Field(
        default=3,
        description="Most male batters allowed between two non-male batting slots",
        ge=1,
        le=10,
    )

    @field_validator("game_type")
    @classmethod
    def validate_game_type(cls, v):
        if v not in ["regular", "playoff"]:
            raise ValueError("game_type must be either 'regular' or 'playoff'")
        return v

    @property
    def is_playoff(self) -> bool:
        return self.game_type == "playoff"


class AnnealingConfig(BaseModel):
    """Simulated Annealing Configuration"""

    initial_temperature: float = Field(
        default=1000.0, description="Starting temperature", gt=0.0
    )
    cooling_rate: float = Field(
        default=0.99,
        description="Geometric cooling factor applied after every iteration",
        gt=0.0,
        lt=1.0,
    )
    iterations: int = Field(
        default=100, description="Number of SA iterations", ge=0, le=1_000_000
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducibility (None = different results each run)",
    )
    fielding_move_probability: float = Field(
        default=0.7,
        description="Chance a neighbour changes fielding instead of the batting order",
        ge=0.0,
        le=1.0,
    )
    bench_move_probability: float = Field(
        default=0.5,
        description=(
            "Chance a fielding move swaps a benched player in "
            "(only when the roster has more players than field positions)"
        ),
        ge=0.0,
        le=1.0,
    )


class CostConfig(BaseModel):
    """Penalty Constants & Batting Order Preferences"""

    invalid_assignment_penalty: float = Field(
        default=1000.0,
        description="Penalty for a player fielding a position they did not sign up for",
        ge=0.0,
    )
    imbalanced_sitting_penalty: float = Field(
        default=1000.0,
        description="Penalty per unit of bench spread once it exceeds one inning",
        ge=0.0,
    )
    skill_factor: float = Field(
        default=20.0, description="Multiplier for skill placement cost", ge=0.0
    )
    three_outfielder_outfield_importance: float = Field(
        default=8.0,
        description="Importance of each filled outfield spot when two positions are empty",
        ge=0.0,
    )

    # Batting order preferences
    order_top_weight: float = Field(
        default=5.0, description="Weight for high-skill batters near the top", ge=0.0
    )
    high_threshold: int = Field(
        default=4, description="Skill at or above which a batter is 'high'", ge=1, le=5
    )
    low_threshold: int = Field(
        default=2, description="Skill at or below which a batter is 'low'", ge=1, le=5
    )
    high_to_low_bonus: float = Field(
        default=20.0,
        description="Bonus when a high-skill batter is followed by a low-skill one",
        ge=0.0,
    )
    consecutive_low_penalty: float = Field(
        default=50.0,
        description="Penalty for each extra low-skill batter in a run",
        ge=0.0,
    )
    sawtooth_penalty: float = Field(
        default=50.0,
        description="Penalty weight when consecutive skill deltas do not alternate",
        ge=0.0,
    )

    # Position diversity (regular season)
    diversity_penalty_enabled: bool = Field(
        default=False,
        description="Penalise players fielding the same position in several innings",
    )
    diversity_penalty_factor: float = Field(
        default=50.0, description="Penalty per repeated position", ge=0.0
    )

    @model_validator(mode="after")
    def validate_thresholds(self):
        if self.low_threshold >= self.high_threshold:
            raise ValueError("low_threshold must be below high_threshold")
        return self


class LineupConfig(BaseModel):
    """Master Lineup Picker Configuration Container"""

    game: GameConfig = Field(
        default_factory=GameConfig, description="Game Parameters"
    )
    annealing: AnnealingConfig = Field(
        default_factory=AnnealingConfig,
        description="Simulated Annealing Configuration",
    )
    cost: CostConfig = Field(
        default_factory=CostConfig, description="Penalty Configuration"
    )


def _coerce_env_value(value: str):
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.lower() in ("none", "null"):
        return None
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def load_config(
    config_path: Optional[Path] = None, config_data: Optional[Dict] = None
) -> LineupConfig:
    """
    Load configuration with environment variable overrides and optional config file

    Args:
        config_path: Optional path to a JSON configuration file
        config_data: Optional dictionary of configuration data

    Environment variables can override any config value using the pattern:
    LINEUP_{SECTION}_{FIELD} = value

    Example: LINEUP_ANNEALING_ITERATIONS=5000
    """
    config_dict: Dict = {}

    if config_path and config_path.exists():
        try:
            with open(config_path, "r") as f:
                if config_path.suffix.lower() == ".json":
                    config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"⚠️ Failed to load config file {config_path}: {e}")

    if config_data:
        for section, fields in config_data.items():
            if isinstance(fields, dict):
                config_dict.setdefault(section, {}).update(fields)
            else:
                config_dict[section] = fields

    env_overrides: Dict[str, Dict] = {}
    for env_var, value in os.environ.items():
        if env_var.startswith("LINEUP_"):
            # LINEUP_SECTION_FIELD
            parts = env_var.split("_")[1:]
            if len(parts) >= 2:
                section = parts[0].lower()
                field = "_".join(parts[1:]).lower()
                env_overrides.setdefault(section, {})[field] = _coerce_env_value(value)

    for section, fields in env_overrides.items():
        config_dict.setdefault(section, {}).update(fields)

    try:
        return LineupConfig(**config_dict)
    except ValidationError as e:
        logger.warning(f"⚠️ Configuration validation failed: {e}")
        logger.warning("Using default configuration...")
        return LineupConfig()


# Global configuration instance
config = load_config()
