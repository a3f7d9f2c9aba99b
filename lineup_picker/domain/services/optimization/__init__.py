"""Optimization module for coed softball lineups.

This module provides:
- Position eligibility rules
- Random candidate generation
- Batting order rendering with male-batter spacing
- Neighbour moves, the lineup cost model and the simulated annealing loop

Usage:
    from lineup_picker.domain.services import LineupOptimizationService

    service = LineupOptimizationService(roster)
    result = service.optimize_lineup()
"""

from .optimization_base import AnnealingOptions, OptimizationBaseMixin
from .eligibility import can_play
from .batting_order import (
    pad_secondary_order,
    render_batting_order,
    required_secondary_slots,
)
from .solution_generation import SolutionGenerationMixin
from .neighbor import NeighborMixin
from .cost import CostBreakdown, LineupCostMixin
from .annealing import AnnealingMixin, AnnealingResult

__all__ = [
    "AnnealingOptions",
    "OptimizationBaseMixin",
    "can_play",
    "pad_secondary_order",
    "render_batting_order",
    "required_secondary_slots",
    "SolutionGenerationMixin",
    "NeighborMixin",
    "CostBreakdown",
    "LineupCostMixin",
    "AnnealingMixin",
    "AnnealingResult",
]
