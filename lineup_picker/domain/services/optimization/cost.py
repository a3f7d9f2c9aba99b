"""Lineup cost model.

Scores a candidate lineup; lower is better. Terms are additive and not
normalised, the relative weights come from ``CostConfig``:

- Sitting distribution: running bench tally, penalised after every inning in
  which the most- and least-benched players differ by more than one inning.
- Fielding: ineligible assignments plus skill placement by position importance.
  Playoff games want strong players in important spots; regular games give
  newer players reps there.
- Position diversity (optional, regular games): repeated positions per player.
- Batting order: strong hitters near the top, high -> low hand-offs, no long
  runs of low-skill hitters and a sawtooth skill profile.
"""

from typing import Dict, List, Set, Tuple

from pydantic import BaseModel, Field

from lineup_picker.domain.models import (
    OUTFIELD_POSITIONS,
    POSITION_IMPORTANCE,
    CandidateSolution,
    InningAssignment,
    Player,
    Position,
)
from lineup_picker.domain.models.player import MAX_SKILL, MIN_SKILL

from .eligibility import can_play
from .optimization_base import OptimizationBaseMixin

THREE_OUTFIELDER_MISSING_COUNT = 2


class CostBreakdown(BaseModel):
    """Per-term penalty totals for one candidate."""

    sitting_imbalance: float = Field(default=0.0)
    invalid_assignments: float = Field(default=0.0)
    skill_placement: float = Field(default=0.0)
    position_diversity: float = Field(default=0.0)
    order_top: float = Field(default=0.0)
    high_to_low_bonus: float = Field(default=0.0, description="Zero or negative")
    consecutive_low: float = Field(default=0.0)
    sawtooth: float = Field(default=0.0)

    @property
    def fielding(self) -> float:
        return self.invalid_assignments + self.skill_placement

    @property
    def batting(self) -> float:
        return self.order_top + self.high_to_low_bonus + self.consecutive_low + self.sawtooth

    @property
    def total(self) -> float:
        return (
            self.sitting_imbalance
            + self.fielding
            + self.position_diversity
            + self.batting
        )


class LineupCostMixin(OptimizationBaseMixin):
    """Mixin providing the lineup cost function."""

    def cost(self, solution: CandidateSolution) -> float:
        """Total penalty for ``solution``. Re-renders its batting order."""
        return self.cost_breakdown(solution).total

    def cost_breakdown(self, solution: CandidateSolution) -> CostBreakdown:
        breakdown = CostBreakdown()

        breakdown.sitting_imbalance = self._sitting_penalty(solution)
        for inning in solution.innings:
            invalid, skill = self._fielding_penalty(inning)
            breakdown.invalid_assignments += invalid
            breakdown.skill_placement += skill
        breakdown.position_diversity = self._diversity_penalty(solution)

        batting_order = self.refresh_batting_order(solution)
        breakdown.order_top = self._order_top_penalty(batting_order)
        breakdown.high_to_low_bonus = self._high_to_low_bonus(batting_order)
        breakdown.consecutive_low = self._consecutive_low_penalty(batting_order)
        breakdown.sawtooth = self._sawtooth_penalty(batting_order)
        return breakdown

    # ----- Sitting Out Distribution -----

    def _sitting_penalty(self, solution: CandidateSolution) -> float:
        """Checked after each inning against the tally so far, not only at the end."""
        weight = self.lineup_config.cost.imbalanced_sitting_penalty
        sit_counts: Dict[int, int] = {pid: 0 for pid in self.roster.player_ids}
        penalty = 0.0

        for inning in solution.innings:
            for assignment in inning.assignments:
                if assignment.is_bench:
                    pid = assignment.player.player_id
                    sit_counts[pid] = sit_counts.get(pid, 0) + 1

            if not sit_counts:
                continue
            spread = max(sit_counts.values()) - min(sit_counts.values())
            if spread > 1:
                penalty += spread * weight
        return penalty

    # ----- Fielding Cost (per inning) -----

    def position_importance(
        self, position: Position, missing_positions: Set[Position]
    ) -> float:
        """Importance of ``position`` in this inning.

        With exactly two positions empty the remaining outfielders cover more
        ground, so each filled outfield spot gets the three-outfielder weight.
        """
        if (
            len(missing_positions) == THREE_OUTFIELDER_MISSING_COUNT
            and position in OUTFIELD_POSITIONS
            and position not in missing_positions
        ):
            return self.lineup_config.cost.three_outfielder_outfield_importance
        return POSITION_IMPORTANCE[position]

    def _fielding_penalty(self, inning: InningAssignment) -> Tuple[float, float]:
        cost_config = self.lineup_config.cost
        playoff = self.lineup_config.game.is_playoff
        invalid_penalty = 0.0
        skill_penalty = 0.0
        missing_positions = inning.missing_positions()

        for assignment in inning.field_assignments():
            importance = self.position_importance(assignment.position, missing_positions)
            if not can_play(assignment.player, assignment.position):
                invalid_penalty += cost_config.invalid_assignment_penalty

            skill = assignment.player.skill
            if playoff:
                skill_penalty += importance * (MAX_SKILL - skill) * cost_config.skill_factor
            else:
                skill_penalty += importance * (skill - MIN_SKILL) * cost_config.skill_factor
        return invalid_penalty, skill_penalty

    # ----- Diversity in Fielding Assignments (Regular Season Only) -----

    def _diversity_penalty(self, solution: CandidateSolution) -> float:
        cost_config = self.lineup_config.cost
        if not cost_config.diversity_penalty_enabled or self.lineup_config.game.is_playoff:
            return 0.0

        positions_played: Dict[int, set] = {}
        innings_played: Dict[int, int] = {}
        for inning in solution.innings:
            for assignment in inning.field_assignments():
                pid = assignment.player.player_id
                positions_played.setdefault(pid, set()).add(assignment.position)
                innings_played[pid] = innings_played.get(pid, 0) + 1

        penalty = 0.0
        for pid, played in innings_played.items():
            if played > 1:
                repeats = played - len(positions_played[pid])
                penalty += repeats * cost_config.diversity_penalty_factor
        return penalty

    # ----- Batting Order Costs -----

    def _order_top_penalty(self, batting_order: List[Player]) -> float:
        n = len(batting_order)
        weight = self.lineup_config.cost.order_top_weight
        return sum(
            (n - i) * (MAX_SKILL - player.skill) * weight
            for i, player in enumerate(batting_order)
        )

    def _high_to_low_bonus(self, batting_order: List[Player]) -> float:
        cost_config = self.lineup_config.cost
        bonus = 0.0
        for current, following in zip(batting_order, batting_order[1:]):
            if (
                current.skill >= cost_config.high_threshold
                and following.skill <= cost_config.low_threshold
            ):
                bonus -= cost_config.high_to_low_bonus
        return bonus

    def _consecutive_low_penalty(self, batting_order: List[Player]) -> float:
        cost_config = self.lineup_config.cost
        penalty = 0.0
        run_length = 0
        for player in batting_order:
            if player.skill <= cost_config.low_threshold:
                run_length += 1
                continue
            if run_length > 1:
                penalty += (run_length - 1) * cost_config.consecutive_low_penalty
            run_length = 0
        if run_length > 1:
            penalty += (run_length - 1) * cost_config.consecutive_low_penalty
        return penalty

    def _sawtooth_penalty(self, batting_order: List[Player]) -> float:
        weight = self.lineup_config.cost.sawtooth_penalty
        penalty = 0.0
        for i in range(1, len(batting_order) - 1):
            diff_in = batting_order[i].skill - batting_order[i - 1].skill
            diff_out = batting_order[i + 1].skill - batting_order[i].skill
            if (diff_in > 0 and diff_out > 0) or (diff_in < 0 and diff_out < 0):
                penalty += weight * (abs(diff_in) + abs(diff_out))
        return penalty
