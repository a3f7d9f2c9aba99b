"""Domain services for business logic."""

from .lineup_optimization_service import LineupOptimizationService
from .roster_service import RosterService

__all__ = [
    "LineupOptimizationService",
    "RosterService",
]
