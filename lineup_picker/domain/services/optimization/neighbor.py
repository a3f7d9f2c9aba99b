"""Neighbour moves for simulated annealing.

A neighbour is a clone of the current lineup with one local change:
- a bench <-> field swap within one inning (same gender, so caps hold)
- a field <-> field swap within one inning
- a swap of two slots in one batting component

When no legal partner exists the untouched clone is returned; the annealing
loop treats that as a wasted iteration rather than an error.
"""

from loguru import logger

from lineup_picker.domain.models import (
    FIELD_POSITIONS,
    Assignment,
    CandidateSolution,
    Gender,
)

from .eligibility import can_play
from .optimization_base import OptimizationBaseMixin


class NeighborMixin(OptimizationBaseMixin):
    """Mixin providing the neighbour operator."""

    def neighbor(self, solution: CandidateSolution) -> CandidateSolution:
        """Return a mutated copy of ``solution``; the input is never changed."""
        new_solution = solution.clone()
        annealing = self.lineup_config.annealing

        if self.rng.random() < annealing.fielding_move_probability:
            self._swap_fielding(new_solution)
        else:
            self._swap_batting(new_solution)
        return new_solution

    def _swap_fielding(self, solution: CandidateSolution) -> None:
        if not solution.innings:
            return
        inning_index = self.rng.randrange(len(solution.innings))
        inning = solution.innings[inning_index]
        inning_number = inning_index + 1

        move_type = self.rng.random()
        roster_exceeds_field = self.roster.size > len(FIELD_POSITIONS)

        if (
            move_type <= self.lineup_config.annealing.bench_move_probability
            and roster_exceeds_field
        ):
            first = self._pick(inning.bench_assignments())
            if first is None:
                logger.debug(f"Nobody sits in inning {inning_number}")
                return
            candidates = [
                a
                for a in inning.field_assignments()
                if a.player.player_id != first.player.player_id
                and a.player.gender == first.player.gender
                and can_play(first.player, a.position)
            ]
        else:
            playing = inning.field_assignments()
            first = self._pick(playing)
            if first is None:
                logger.debug(f"Nobody fields in inning {inning_number}")
                return
            candidates = [
                a
                for a in playing
                if a.position != first.position and can_play(first.player, a.position)
            ]

        second = self._pick(candidates)
        if second is None:
            logger.debug(f"No allowable swaps for {first.player.name}")
            return

        logger.debug(
            f"Swapping {first.player.name} ({first.position.value}) and "
            f"{second.player.name} ({second.position.value}) in inning {inning_number}"
        )
        self._exchange_positions(first, second)

    @staticmethod
    def _exchange_positions(first: Assignment, second: Assignment) -> None:
        first.position, second.position = second.position, first.position

    def _swap_batting(self, solution: CandidateSolution) -> None:
        male_count = len(solution.male_batting_order)
        total = male_count + len(solution.other_batting_order)
        if total == 0:
            return

        ratio = male_count / total
        gender = Gender.MALE if self.rng.random() < ratio else Gender.OTHER
        order = solution.component(gender)

        if len(order) > 1:
            i = self.rng.randrange(len(order))
            j = self.rng.randrange(len(order))
            logger.debug(
                f"Swapping {order[i].name} ({i + 1}) and {order[j].name} ({j + 1}) "
                "in the batting order"
            )
            solution.swap_batting_slots(gender, i, j)
