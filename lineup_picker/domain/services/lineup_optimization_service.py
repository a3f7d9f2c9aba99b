"""Lineup optimization service.

Builds a fielding schedule and batting order for one game:
- Random starting lineup that honours the on-field male cap
- Simulated annealing over fielding swaps and batting order swaps
- Cost breakdown for the chosen lineup

This is a thin facade that composes all optimization mixins.
"""

import random
from typing import Optional

from loguru import logger

from lineup_picker.config import LineupConfig, config
from lineup_picker.domain.models import Roster

from .optimization import (
    AnnealingMixin,
    AnnealingOptions,
    AnnealingResult,
    LineupCostMixin,
    NeighborMixin,
    SolutionGenerationMixin,
)


class LineupOptimizationService(
    SolutionGenerationMixin,
    NeighborMixin,
    LineupCostMixin,
    AnnealingMixin,
):
    """Service for softball lineup optimization.

    This class composes all optimization functionality through mixins:
    - OptimizationBaseMixin: Shared state and batting order rendering (inherited)
    - SolutionGenerationMixin: Random innings and batting components
    - NeighborMixin: Local moves used by the search
    - LineupCostMixin: Penalty model
    - AnnealingMixin: Simulated annealing loop
    """

    def __init__(
        self,
        roster: Roster,
        lineup_config: Optional[LineupConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize optimization service.

        Args:
            roster: Players available for the game
            lineup_config: Optional configuration override (defaults to global config)
            rng: Optional random source; seeded from ``annealing.random_seed`` if omitted
        """
        self.roster = roster
        self.lineup_config = lineup_config or config
        self.rng = rng or random.Random(self.lineup_config.annealing.random_seed)

    def optimize_lineup(
        self, options: Optional[AnnealingOptions] = None
    ) -> AnnealingResult:
        """Generate a random lineup and improve it with simulated annealing.

        Args:
            options: Optional annealing parameters (defaults to configuration)

        Returns:
            AnnealingResult with the best lineup; its batting order is rendered
        """
        game = self.lineup_config.game
        logger.info(
            f"⚾ Optimizing {game.game_type} lineup: {self.roster.size} players, "
            f"{game.innings} innings, max {game.max_men_on_field} men on field"
        )
        initial_solution = self.random_solution()
        return self.simulated_annealing(initial_solution, options)
