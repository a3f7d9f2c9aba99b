"""Simulated Annealing search over candidate lineups.

Starts from a candidate, proposes one neighbour per iteration and accepts it by
the Metropolis rule: improvements always, regressions with probability
exp(-delta / T). The temperature decays geometrically after every iteration.
There are no restarts or early stopping; the best candidate seen is returned.
"""

import math
from typing import Callable, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from lineup_picker.domain.models import CandidateSolution

from .optimization_base import AnnealingOptions, OptimizationBaseMixin

CostFunc = Callable[[CandidateSolution], float]
NeighborFunc = Callable[[CandidateSolution], CandidateSolution]


class AnnealingResult(BaseModel):
    """Outcome of one annealing run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    best_solution: CandidateSolution
    best_cost: float
    initial_cost: float
    final_cost: float = Field(description="Cost of the last accepted candidate")
    final_temperature: float
    total_iterations: int = Field(ge=0)
    accepted_moves: int = Field(ge=0)
    improvements: int = Field(ge=0, description="Times a new best was found")


class AnnealingMixin(OptimizationBaseMixin):
    """Mixin providing the simulated annealing control loop."""

    def _accept(self, delta: float, temperature: float) -> bool:
        """Metropolis criterion."""
        if delta < 0:
            return True
        if temperature <= 0:
            return False
        return self.rng.random() < math.exp(-delta / temperature)

    def simulated_annealing(
        self,
        initial_solution: CandidateSolution,
        options: Optional[AnnealingOptions] = None,
        cost_func: Optional[CostFunc] = None,
        neighbor_func: Optional[NeighborFunc] = None,
    ) -> AnnealingResult:
        """Run simulated annealing from ``initial_solution``.

        Args:
            initial_solution: Starting candidate (not modified)
            options: Temperature, cooling rate and iteration count; defaults to
                the service configuration
            cost_func: Scoring function, defaults to ``self.cost``
            neighbor_func: Move generator, defaults to ``self.neighbor``

        Returns:
            AnnealingResult holding a copy of the best candidate found
        """
        options = options or AnnealingOptions.from_config(self.lineup_config.annealing)
        cost_func = cost_func or self.cost
        neighbor_func = neighbor_func or self.neighbor

        current = initial_solution
        current_cost = cost_func(current)
        best = current.clone()
        best_cost = current_cost
        self.refresh_batting_order(best)
        initial_cost = current_cost
        temperature = options.initial_temperature

        accepted = 0
        improvements = 0

        logger.info(
            f"🧠 Simulated Annealing: {options.iterations} iterations, "
            f"T0={options.initial_temperature}, cooling={options.cooling_rate}"
        )
        logger.debug(f"Initial lineup cost: {current_cost:.1f}")

        for iteration in range(options.iterations):
            candidate = neighbor_func(current)
            self.refresh_batting_order(candidate)
            candidate_cost = cost_func(candidate)
            delta = candidate_cost - current_cost

            if self._accept(delta, temperature):
                logger.debug(f"Accepting candidate with cost {candidate_cost:.1f}")
                current = candidate
                current_cost = candidate_cost
                accepted += 1

                if current_cost < best_cost:
                    best = current.clone()
                    self.refresh_batting_order(best)
                    best_cost = current_cost
                    improvements += 1

            temperature *= options.cooling_rate
            logger.debug(
                f"Iteration {iteration + 1}: T={temperature:.4f}, cost={current_cost:.1f}"
            )

        logger.info(
            f"✅ Best lineup cost: {best_cost:.1f} "
            f"(started at {initial_cost:.1f}, {improvements} improvements)"
        )

        return AnnealingResult(
            best_solution=best,
            best_cost=best_cost,
            initial_cost=initial_cost,
            final_cost=current_cost,
            final_temperature=temperature,
            total_iterations=options.iterations,
            accepted_moves=accepted,
            improvements=improvements,
        )
