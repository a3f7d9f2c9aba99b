"""Shared fixtures for lineup picker tests."""

import random
from typing import Iterable, Optional

import pytest

from lineup_picker.config import LineupConfig
from lineup_picker.domain.models import Gender, Player, Roster
from lineup_picker.domain.services import LineupOptimizationService, RosterService


@pytest.fixture
def player_factory():
    """Build players with sensible defaults."""

    def _make(
        player_id: int,
        gender: Gender = Gender.MALE,
        positions: Iterable[str] = ("*", "P"),
        skill: int = 3,
        name: Optional[str] = None,
    ) -> Player:
        return Player(
            player_id=player_id,
            name=name or f"Player {player_id}",
            gender=gender,
            positions=frozenset(positions),
            skill=skill,
        )

    return _make


@pytest.fixture
def roster_factory(player_factory):
    """Roster of ``men`` male and ``others`` non-male players, all eligible everywhere."""

    def _make(men: int, others: int, skill: int = 3) -> Roster:
        players = [player_factory(i, Gender.MALE, skill=skill) for i in range(1, men + 1)]
        players += [
            player_factory(men + i, Gender.OTHER, skill=skill)
            for i in range(1, others + 1)
        ]
        return Roster(players=tuple(players))

    return _make


@pytest.fixture
def sample_roster() -> Roster:
    return RosterService().sample_roster()


@pytest.fixture
def lineup_config() -> LineupConfig:
    return LineupConfig()


@pytest.fixture
def service_factory():
    """Optimization service with a seeded random source."""

    def _make(
        roster: Roster,
        lineup_config: Optional[LineupConfig] = None,
        seed: int = 7,
    ) -> LineupOptimizationService:
        return LineupOptimizationService(
            roster, lineup_config or LineupConfig(), rng=random.Random(seed)
        )

    return _make
