"""Tests for inning assignments and candidate lineups."""

import pytest

from lineup_picker.domain.models import (
    FIELD_POSITIONS,
    FILLER_PLAYER,
    Assignment,
    AssignmentLookupError,
    CandidateSolution,
    Gender,
    InningAssignment,
    Position,
)
from lineup_picker.domain.services.optimization.batting_order import render_batting_order


@pytest.fixture
def players(player_factory):
    return [
        player_factory(1, Gender.MALE, name="Alpha"),
        player_factory(2, Gender.MALE, name="Bravo"),
        player_factory(3, Gender.OTHER, name="Charlie"),
    ]


@pytest.fixture
def inning(players):
    return InningAssignment(
        assignments=[
            Assignment(player=players[0], position=Position.PITCHER),
            Assignment(player=players[1], position=Position.BENCH),
            Assignment(player=players[2], position=Position.CATCHER),
        ]
    )


@pytest.fixture
def solution(players, inning):
    return CandidateSolution(
        innings=[inning, inning.clone()],
        male_batting_order=[players[0], players[1]],
        other_batting_order=[players[2]],
    )


class TestInningAssignment:
    """Test per-inning queries."""

    def test_bench_and_field_split(self, inning, players):
        assert [a.player for a in inning.bench_assignments()] == [players[1]]
        assert [a.player for a in inning.field_assignments()] == [players[0], players[2]]

    def test_missing_positions(self, inning):
        missing = inning.missing_positions()
        assert len(missing) == len(FIELD_POSITIONS) - 2
        assert Position.PITCHER not in missing
        assert Position.BENCH not in missing

    def test_position_of(self, inning, players):
        assert inning.position_of(players[0]) == Position.PITCHER
        assert inning.position_of(players[1]) == Position.BENCH

    def test_position_of_missing_player_raises(self, inning, player_factory):
        stranger = player_factory(99, name="Stranger")
        with pytest.raises(AssignmentLookupError, match="Stranger.*inning 3"):
            inning.position_of(stranger, inning_number=3)

    def test_lookup_by_id(self, inning, player_factory):
        """Test a distinct object with the same id resolves to the same assignment."""
        lookalike = player_factory(1, Gender.MALE, name="Alpha")
        assert inning.position_of(lookalike) == Position.PITCHER

    def test_clone_is_independent(self, inning):
        copy = inning.clone()
        copy.assignments[0].position = Position.SHORTSTOP

        assert inning.assignments[0].position == Position.PITCHER


class TestCandidateSolution:
    """Test cloning and batting order caching."""

    def test_clone_deep_copies_assignments(self, solution):
        copy = solution.clone()
        copy.innings[1].assignments[0].position = Position.FIRST_BASE
        copy.male_batting_order.reverse()

        assert solution.innings[1].assignments[0].position == Position.PITCHER
        assert solution.innings[0].assignments[0].position == Position.PITCHER
        assert [p.player_id for p in solution.male_batting_order] == [1, 2]

    def test_batting_order_requires_render(self, solution):
        assert solution.cached_batting_order is None
        with pytest.raises(RuntimeError, match="not been rendered"):
            _ = solution.batting_order

        solution.render_batting_order(render_batting_order)
        assert [p.player_id for p in solution.batting_order] == [1, 2, 3]

    def test_swap_invalidates_cached_order(self, solution):
        solution.render_batting_order(render_batting_order)
        solution.swap_batting_slots(Gender.MALE, 0, 1)

        assert solution.cached_batting_order is None
        with pytest.raises(RuntimeError):
            _ = solution.batting_order
        solution.render_batting_order(render_batting_order)
        assert [p.player_id for p in solution.batting_order] == [2, 1, 3]

    def test_render_with_custom_renderer(self, solution):
        order = solution.render_batting_order(lambda primary, secondary: secondary + primary)
        assert [p.player_id for p in order] == [3, 1, 2]
        assert solution.cached_batting_order == order

    def test_component(self, solution):
        assert solution.component(Gender.MALE) is solution.male_batting_order
        assert solution.component(Gender.OTHER) is solution.other_batting_order

    def test_bench_counts(self, solution):
        assert solution.bench_counts() == {1: 0, 2: 2, 3: 0}

    def test_filler_in_other_component(self, players):
        solution = CandidateSolution(
            male_batting_order=players[:2],
            other_batting_order=[players[2], FILLER_PLAYER],
        )
        assert FILLER_PLAYER in solution.clone().other_batting_order
