"""Random candidate generation.

Builds the starting point for annealing: a random fielding assignment for every
inning plus shuffled male and non-male batting components. Eligibility is not
checked here; bad pairings are left for the cost function to penalise.
"""

from typing import List, Sequence

from loguru import logger

from lineup_picker.domain.models import (
    FIELD_POSITIONS,
    POSITION_IMPORTANCE,
    Assignment,
    CandidateSolution,
    Gender,
    InningAssignment,
    Player,
    Position,
)

from .batting_order import pad_secondary_order
from .optimization_base import OptimizationBaseMixin


class SolutionGenerationMixin(OptimizationBaseMixin):
    """Mixin providing random inning assignments and batting components."""

    def random_inning_assignment(self, players: Sequence[Player]) -> InningAssignment:
        """Generate a random fielding assignment for one inning.

        With fewer players than positions the least important positions are left
        empty. Men beyond ``max_men_on_field`` and anyone beyond the ten field
        positions sit.
        """
        max_men = self.lineup_config.game.max_men_on_field

        male_players = self._shuffled([p for p in players if p.gender == Gender.MALE])
        other_players = self._shuffled([p for p in players if p.gender != Gender.MALE])
        allowable_male_players = male_players[:max_men]
        remaining_male_players = male_players[max_men:]
        assignable_players = allowable_male_players + other_players

        # Least important first
        available_positions: List[Position] = sorted(
            FIELD_POSITIONS, key=lambda pos: POSITION_IMPORTANCE[pos]
        )

        if len(assignable_players) < len(available_positions):
            missing_count = len(available_positions) - len(assignable_players)
            del available_positions[:missing_count]

        if len(players) > len(available_positions):
            empty_count = len(players) - len(available_positions)
            available_positions.extend([Position.BENCH] * empty_count)

        assignments = [
            Assignment(player=player, position=position)
            for player, position in zip(
                assignable_players + remaining_male_players, available_positions
            )
        ]
        return InningAssignment(assignments=assignments)

    def random_batting_order(self, gender: Gender) -> List[Player]:
        """Random permutation of the roster players in ``gender``."""
        return self._shuffled(self.roster.by_gender(gender))

    def random_solution(self) -> CandidateSolution:
        """A full random candidate for the configured number of innings."""
        innings = [
            self.random_inning_assignment(self.roster.players)
            for _ in range(self.lineup_config.game.innings)
        ]
        male_batting_order = self.random_batting_order(Gender.MALE)
        other_batting_order = pad_secondary_order(
            male_batting_order,
            self.random_batting_order(Gender.OTHER),
            self.lineup_config.game.max_primary_in_a_row,
        )

        logger.debug(
            f"🎲 Random lineup: {len(innings)} innings, "
            f"{len(male_batting_order)} male / {len(other_batting_order)} other batting slots"
        )
        return CandidateSolution(
            innings=innings,
            male_batting_order=male_batting_order,
            other_batting_order=other_batting_order,
        )
