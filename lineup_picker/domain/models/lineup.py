"""Candidate lineup models: per-inning fielding assignments and batting order."""

from typing import Callable, Dict, List, Optional, Set

from pydantic import BaseModel, Field, PrivateAttr

from .player import FIELD_POSITIONS, Gender, Player, Position


class AssignmentLookupError(LookupError):
    """Raised when a player has no assignment in an inning.

    Every roster player is assigned exactly once per inning, so a failed lookup
    means the schedule is corrupt and rendering must stop.
    """

    def __init__(self, player: Player, inning_number: Optional[int] = None):
        self.player = player
        self.inning_number = inning_number
        where = f" in inning {inning_number}" if inning_number is not None else ""
        super().__init__(f"Player {player.name} (#{player.player_id}) not found{where}")


class Assignment(BaseModel):
    """A player's position for one inning."""

    player: Player
    position: Position

    @property
    def is_bench(self) -> bool:
        return self.position == Position.BENCH


class InningAssignment(BaseModel):
    """Fielding assignments for a single inning."""

    assignments: List[Assignment] = Field(default_factory=list)

    def clone(self) -> "InningAssignment":
        return InningAssignment(assignments=[a.model_copy() for a in self.assignments])

    def bench_assignments(self) -> List[Assignment]:
        return [a for a in self.assignments if a.is_bench]

    def field_assignments(self) -> List[Assignment]:
        return [a for a in self.assignments if not a.is_bench]

    def filled_positions(self) -> Set[Position]:
        return {a.position for a in self.assignments if not a.is_bench}

    def missing_positions(self) -> Set[Position]:
        return set(FIELD_POSITIONS) - self.filled_positions()

    def find(self, player: Player) -> Optional[Assignment]:
        for assignment in self.assignments:
            if assignment.player.player_id == player.player_id:
                return assignment
        return None

    def position_of(self, player: Player, inning_number: Optional[int] = None) -> Position:
        """Position played by ``player``; raises AssignmentLookupError when missing."""
        assignment = self.find(player)
        if assignment is None:
            raise AssignmentLookupError(player, inning_number)
        return assignment.position


BattingRenderer = Callable[[List[Player], List[Player]], List[Player]]


class CandidateSolution(BaseModel):
    """
    One full schedule: fielding for every inning plus two batting components.

    ``batting_order`` is derived from the male and other components. It is
    cached after rendering and the cache is dropped whenever a component is
    changed through :meth:`swap_batting_slots` or :meth:`invalidate_batting_order`.
    """

    innings: List[InningAssignment] = Field(default_factory=list)
    male_batting_order: List[Player] = Field(default_factory=list)
    other_batting_order: List[Player] = Field(default_factory=list)

    _batting_order: Optional[List[Player]] = PrivateAttr(default=None)

    def clone(self) -> "CandidateSolution":
        """Deep copy of the mutable parts; players are immutable and shared."""
        return CandidateSolution(
            innings=[inning.clone() for inning in self.innings],
            male_batting_order=list(self.male_batting_order),
            other_batting_order=list(self.other_batting_order),
        )

    def component(self, gender: Gender) -> List[Player]:
        if gender == Gender.MALE:
            return self.male_batting_order
        return self.other_batting_order

    def swap_batting_slots(self, gender: Gender, i: int, j: int) -> None:
        order = self.component(gender)
        order[i], order[j] = order[j], order[i]
        self.invalidate_batting_order()

    def invalidate_batting_order(self) -> None:
        self._batting_order = None

    def render_batting_order(self, renderer: BattingRenderer) -> List[Player]:
        """Re-render the batting order from both components and cache it."""
        self._batting_order = renderer(self.male_batting_order, self.other_batting_order)
        return self._batting_order

    @property
    def cached_batting_order(self) -> Optional[List[Player]]:
        return self._batting_order

    @property
    def batting_order(self) -> List[Player]:
        """Last rendered batting order.

        Raises:
            RuntimeError: If nothing is cached; render with the game's spacing
                first (``refresh_batting_order`` on the optimization service)
        """
        if self._batting_order is None:
            raise RuntimeError("Batting order has not been rendered")
        return self._batting_order

    def bench_counts(self) -> Dict[int, int]:
        """Innings on the bench per player id."""
        counts: Dict[int, int] = {}
        for inning in self.innings:
            for assignment in inning.assignments:
                counts.setdefault(assignment.player.player_id, 0)
                if assignment.is_bench:
                    counts[assignment.player.player_id] += 1
        return counts
