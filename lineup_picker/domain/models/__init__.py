"""Domain models for players, rosters and candidate lineups."""

from .lineup import (
    Assignment,
    AssignmentLookupError,
    CandidateSolution,
    InningAssignment,
)
from .player import (
    FIELD_POSITIONS,
    FILLER_PLAYER,
    INFIELD_POSITIONS,
    OUTFIELD_POSITIONS,
    POSITION_IMPORTANCE,
    Gender,
    Player,
    Position,
)
from .roster import Roster

__all__ = [
    "Assignment",
    "AssignmentLookupError",
    "CandidateSolution",
    "InningAssignment",
    "FIELD_POSITIONS",
    "FILLER_PLAYER",
    "INFIELD_POSITIONS",
    "OUTFIELD_POSITIONS",
    "POSITION_IMPORTANCE",
    "Gender",
    "Player",
    "Position",
    "Roster",
]
