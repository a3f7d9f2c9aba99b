"""Tests for the lineup cost model."""

import pytest

from lineup_picker.config import LineupConfig
from lineup_picker.domain.models import (
    FIELD_POSITIONS,
    Assignment,
    CandidateSolution,
    Gender,
    InningAssignment,
    Position,
    Roster,
)

PLAYOFF = LineupConfig(game={"game_type": "playoff"})
REGULAR = LineupConfig(game={"game_type": "regular"})


def solution_from(rows, male_order=(), other_order=()):
    """Build a candidate from per-inning lists of (player, position)."""
    return CandidateSolution(
        innings=[
            InningAssignment(
                assignments=[Assignment(player=p, position=pos) for p, pos in inning]
            )
            for inning in rows
        ],
        male_batting_order=list(male_order),
        other_batting_order=list(other_order),
    )


@pytest.fixture
def full_field(player_factory):
    """Ten same-skill players, five of each category, everyone can pitch."""
    players = [
        player_factory(i, Gender.MALE if i <= 5 else Gender.OTHER, skill=3)
        for i in range(1, 11)
    ]
    return Roster(players=tuple(players))


def assign_in_order(roster):
    return [list(zip(roster.players, FIELD_POSITIONS))]


class TestFieldingCost:
    """Test eligibility and skill placement terms."""

    def test_single_inning_all_eligible(self, full_field, service_factory):
        """Ten eligible players in one inning: no eligibility penalty and nobody sits."""
        config = LineupConfig(game={"innings": 1})
        service = service_factory(full_field, config)
        solution = service.random_solution()

        breakdown = service.cost_breakdown(solution)

        assert breakdown.invalid_assignments == 0
        assert breakdown.sitting_imbalance == 0
        assert all(count == 0 for count in solution.bench_counts().values())

    def test_ineligible_assignment_adds_penalty(self, player_factory, service_factory):
        """Swapping a non-pitcher onto the mound costs exactly the eligibility penalty."""
        pitcher = player_factory(1, Gender.MALE, positions=("*", "P"))
        fielder = player_factory(2, Gender.MALE, positions=("*",))
        others = [
            player_factory(i, Gender.OTHER, positions=("*",)) for i in range(3, 11)
        ]
        roster = Roster(players=(pitcher, fielder, *others))
        service = service_factory(roster)

        rest = list(zip(others, FIELD_POSITIONS[2:]))
        good = solution_from(
            [[(pitcher, Position.PITCHER), (fielder, Position.SHORTSTOP)] + rest]
        )
        bad = solution_from(
            [[(pitcher, Position.SHORTSTOP), (fielder, Position.PITCHER)] + rest]
        )

        assert service.cost_breakdown(good).invalid_assignments == 0
        assert service.cost_breakdown(bad).invalid_assignments == 1000
        assert service.cost(bad) == service.cost(good) + 1000

    def test_playoff_rewards_strong_player_in_key_spot(
        self, player_factory, service_factory
    ):
        """Skill 5 at pitcher costs nothing in playoffs and the most in regular games."""
        ace = player_factory(1, skill=5)
        roster = Roster(players=(ace,))
        solution = solution_from([[(ace, Position.PITCHER)]])

        playoff = service_factory(roster, PLAYOFF).cost_breakdown(solution)
        regular = service_factory(roster, REGULAR).cost_breakdown(solution)

        assert playoff.skill_placement == 0
        assert regular.skill_placement == 10 * (5 - 1) * 20
        assert playoff.skill_placement < regular.skill_placement

    def test_regular_rewards_new_player_in_key_spot(self, player_factory, service_factory):
        rookie = player_factory(1, skill=1)
        roster = Roster(players=(rookie,))
        solution = solution_from([[(rookie, Position.SHORTSTOP)]])

        assert service_factory(roster, REGULAR).cost_breakdown(solution).skill_placement == 0
        assert (
            service_factory(roster, PLAYOFF).cost_breakdown(solution).skill_placement
            == 9 * 4 * 20
        )

    def test_three_outfielder_importance(self, full_field, service_factory):
        service = service_factory(full_field)
        two_missing = {Position.CATCHER, Position.RIGHT_FIELD}

        assert service.position_importance(Position.RIGHT_CENTER_FIELD, two_missing) == 8
        assert service.position_importance(Position.LEFT_FIELD, two_missing) == 8
        assert service.position_importance(Position.SHORTSTOP, two_missing) == 9
        assert (
            service.position_importance(Position.RIGHT_CENTER_FIELD, {Position.CATCHER})
            == 7
        )
        assert service.position_importance(Position.RIGHT_CENTER_FIELD, set()) == 7


class TestSittingCost:
    """Test the running bench balance term."""

    def test_penalised_after_each_unbalanced_inning(self, player_factory, service_factory):
        a, b, c = (player_factory(i) for i in (1, 2, 3))
        roster = Roster(players=(a, b, c))
        solution = solution_from(
            [
                [(a, Position.BENCH), (b, Position.BENCH), (c, Position.PITCHER)],
                [(a, Position.BENCH), (b, Position.CATCHER), (c, Position.PITCHER)],
                [(a, Position.BENCH), (b, Position.CATCHER), (c, Position.PITCHER)],
            ]
        )

        breakdown = service_factory(roster).cost_breakdown(solution)

        # spread 1, then 2, then 3
        assert breakdown.sitting_imbalance == 2 * 1000 + 3 * 1000

    def test_balanced_bench(self, player_factory, service_factory):
        a, b = player_factory(1), player_factory(2)
        roster = Roster(players=(a, b))
        solution = solution_from(
            [
                [(a, Position.BENCH), (b, Position.PITCHER)],
                [(a, Position.PITCHER), (b, Position.BENCH)],
            ]
        )

        assert service_factory(roster).cost_breakdown(solution).sitting_imbalance == 0


class TestDiversityCost:
    """Test the optional repeated-position term."""

    @pytest.fixture
    def repeated(self, player_factory):
        a = player_factory(1)
        roster = Roster(players=(a,))
        solution = solution_from([[(a, Position.PITCHER)]] * 3)
        return roster, solution

    def test_disabled_by_default(self, repeated, service_factory):
        roster, solution = repeated
        assert service_factory(roster).cost_breakdown(solution).position_diversity == 0

    def test_enabled_regular_game(self, repeated, service_factory):
        roster, solution = repeated
        config = LineupConfig(cost={"diversity_penalty_enabled": True})

        breakdown = service_factory(roster, config).cost_breakdown(solution)

        assert breakdown.position_diversity == 2 * 50

    def test_ignored_in_playoffs(self, repeated, service_factory):
        roster, solution = repeated
        config = LineupConfig(
            game={"game_type": "playoff"}, cost={"diversity_penalty_enabled": True}
        )
        assert service_factory(roster, config).cost_breakdown(solution).position_diversity == 0


class TestBattingCost:
    """Test batting order terms."""

    @pytest.fixture
    def service(self, full_field, service_factory):
        return service_factory(full_field)

    @pytest.fixture
    def batters(self, player_factory):
        def _make(*skills):
            return [
                player_factory(i, skill=skill) for i, skill in enumerate(skills, start=1)
            ]

        return _make

    def test_order_top_penalty(self, service, batters):
        assert service._order_top_penalty(batters(5, 3)) == 2 * 0 * 5 + 1 * 2 * 5

    def test_strong_hitters_first_is_cheaper(self, service, batters):
        assert service._order_top_penalty(batters(5, 4, 1)) < service._order_top_penalty(
            batters(1, 4, 5)
        )

    def test_high_to_low_bonus(self, service, batters):
        assert service._high_to_low_bonus(batters(5, 2, 4, 1)) == -40
        assert service._high_to_low_bonus(batters(3, 1)) == 0

    def test_consecutive_low_penalty(self, service, batters):
        assert service._consecutive_low_penalty(batters(1, 2, 5, 2, 1, 1)) == 50 + 100
        assert service._consecutive_low_penalty(batters(1, 5, 1)) == 0

    def test_sawtooth_penalty(self, service, batters):
        assert service._sawtooth_penalty(batters(1, 3, 5)) == 50 * (2 + 2)
        assert service._sawtooth_penalty(batters(1, 3, 2)) == 0
        assert service._sawtooth_penalty(batters(5, 3, 3)) == 0

    def test_cost_renders_and_caches_batting_order(self, full_field, service_factory):
        service = service_factory(full_field)
        solution = service.random_solution()
        solution.invalidate_batting_order()

        service.cost(solution)

        assert solution.cached_batting_order == service.render_batting_order(
            solution.male_batting_order, solution.other_batting_order
        )


class TestTotalCost:
    """Test the combined score."""

    @pytest.mark.parametrize("seed", range(10))
    def test_sample_roster_cost_is_positive(self, sample_roster, service_factory, seed):
        service = service_factory(sample_roster, seed=seed)
        solution = service.random_solution()
        breakdown = service.cost_breakdown(solution)

        assert breakdown.sitting_imbalance >= 0
        assert breakdown.fielding >= 0
        assert breakdown.high_to_low_bonus <= 0
        assert service.cost(solution) == pytest.approx(breakdown.total)
        assert breakdown.total > 0

    def test_high_to_low_bonus_can_make_total_negative(
        self, player_factory, service_factory
    ):
        """An all-eligible lineup can score below zero once the bonus outweighs the rest."""
        ace = player_factory(1, Gender.MALE, skill=5)
        reserve = player_factory(2, Gender.OTHER, skill=2)
        roster = Roster(players=(ace, reserve))
        solution = solution_from(
            [[(ace, Position.PITCHER), (reserve, Position.BENCH)]],
            male_order=[ace],
            other_order=[reserve],
        )

        breakdown = service_factory(roster, PLAYOFF).cost_breakdown(solution)

        assert breakdown.invalid_assignments == 0
        assert breakdown.skill_placement == 0
        assert breakdown.order_top == 1 * 3 * 5
        assert breakdown.high_to_low_bonus == -20
        assert breakdown.total == -5

    @pytest.mark.parametrize("game_config", [PLAYOFF, REGULAR])
    def test_ineligible_swap_always_raises_total(
        self, player_factory, service_factory, game_config
    ):
        """Same skills, same batting order: only the eligibility term moves."""
        pitcher = player_factory(1, Gender.MALE, positions=("P",), skill=4)
        catcher = player_factory(2, Gender.OTHER, positions=("C",), skill=4)
        roster = Roster(players=(pitcher, catcher))
        service = service_factory(roster, game_config)

        def lineup(pitcher_position, catcher_position):
            return solution_from(
                [[(pitcher, pitcher_position), (catcher, catcher_position)]],
                male_order=[pitcher],
                other_order=[catcher],
            )

        eligible = lineup(Position.PITCHER, Position.CATCHER)
        one_swapped = lineup(Position.CATCHER, Position.PITCHER)

        assert service.cost_breakdown(eligible).invalid_assignments == 0
        assert service.cost(one_swapped) == service.cost(eligible) + 2 * 1000
