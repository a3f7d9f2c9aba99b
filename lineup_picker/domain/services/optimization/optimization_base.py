"""Base utilities and data contracts for lineup optimization.

This module contains shared functionality used across all optimization modules:
- Annealing input contract (Pydantic model)
- Access to the roster, configuration and random source
- Batting order rendering with the configured spacing
"""

import random
from typing import List, Optional, Sequence, TypeVar

from pydantic import BaseModel, Field

from lineup_picker.config import AnnealingConfig, LineupConfig
from lineup_picker.domain.models import CandidateSolution, Player, Roster

from .batting_order import render_batting_order

T = TypeVar("T")


class AnnealingOptions(BaseModel):
    """Data contract for simulated annealing tuning parameters."""

    initial_temperature: float = Field(gt=0, description="Starting temperature")
    cooling_rate: float = Field(gt=0, lt=1, description="Geometric cooling factor")
    iterations: int = Field(ge=0, description="SA iterations")

    @classmethod
    def from_config(cls, annealing: AnnealingConfig) -> "AnnealingOptions":
        return cls(
            initial_temperature=annealing.initial_temperature,
            cooling_rate=annealing.cooling_rate,
            iterations=annealing.iterations,
        )


class OptimizationBaseMixin:
    """Mixin providing shared optimization state and helpers.

    Concrete services set ``roster``, ``lineup_config`` and ``rng`` in their
    constructor; every mixin reads them from ``self`` instead of module globals.
    """

    roster: Roster
    lineup_config: LineupConfig
    rng: random.Random

    def _shuffled(self, items: Sequence[T]) -> List[T]:
        """Uniform random permutation of ``items`` (Fisher-Yates via the injected RNG)."""
        result = list(items)
        self.rng.shuffle(result)
        return result

    def _pick(self, items: Sequence[T]) -> Optional[T]:
        if not items:
            return None
        return self.rng.choice(items)

    def render_batting_order(
        self, primary: Sequence[Player], secondary: Sequence[Player]
    ) -> List[Player]:
        """Render a batting order using the configured male-batter spacing."""
        return render_batting_order(
            primary, secondary, self.lineup_config.game.max_primary_in_a_row
        )

    def refresh_batting_order(self, solution: CandidateSolution) -> List[Player]:
        """Re-render ``solution``'s batting order and store it on the solution."""
        return solution.render_batting_order(self.render_batting_order)
