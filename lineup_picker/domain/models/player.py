"""Player and position domain models for coed softball lineups."""

from enum import Enum
from typing import Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    """Batting/fielding category used for on-field caps and lineup spacing."""

    MALE = "M"
    OTHER = "O"


class Position(str, Enum):
    """Field positions plus the bench marker."""

    PITCHER = "P"
    SHORTSTOP = "SS"
    FIRST_BASE = "1B"
    LEFT_FIELD = "LF"
    LEFT_CENTER_FIELD = "LCF"
    THIRD_BASE = "3B"
    SECOND_BASE = "2B"
    RIGHT_CENTER_FIELD = "RCF"
    RIGHT_FIELD = "RF"
    CATCHER = "C"
    BENCH = "SIT"

    @property
    def is_bench(self) -> bool:
        return self is Position.BENCH


# Field positions, highest importance first
FIELD_POSITIONS: List[Position] = [
    Position.PITCHER,
    Position.SHORTSTOP,
    Position.FIRST_BASE,
    Position.LEFT_FIELD,
    Position.LEFT_CENTER_FIELD,
    Position.THIRD_BASE,
    Position.SECOND_BASE,
    Position.RIGHT_CENTER_FIELD,
    Position.RIGHT_FIELD,
    Position.CATCHER,
]

POSITION_IMPORTANCE: Dict[Position, int] = {
    Position.PITCHER: 10,
    Position.SHORTSTOP: 9,
    Position.FIRST_BASE: 9,
    Position.LEFT_FIELD: 8,
    Position.LEFT_CENTER_FIELD: 8,
    Position.THIRD_BASE: 7,
    Position.RIGHT_CENTER_FIELD: 7,
    Position.SECOND_BASE: 6,
    Position.RIGHT_FIELD: 3,
    Position.CATCHER: 1,
}

INFIELD_POSITIONS: FrozenSet[Position] = frozenset(
    {
        Position.CATCHER,
        Position.FIRST_BASE,
        Position.SECOND_BASE,
        Position.THIRD_BASE,
        Position.SHORTSTOP,
    }
)
OUTFIELD_POSITIONS: FrozenSet[Position] = frozenset(
    {
        Position.LEFT_FIELD,
        Position.LEFT_CENTER_FIELD,
        Position.RIGHT_CENTER_FIELD,
        Position.RIGHT_FIELD,
    }
)

# Eligibility tokens
WILDCARD_TOKEN = "*"
INFIELD_TOKEN = "IF"
OUTFIELD_TOKEN = "OF"

VALID_TOKENS: FrozenSet[str] = frozenset(
    {p.value for p in FIELD_POSITIONS} | {WILDCARD_TOKEN, INFIELD_TOKEN, OUTFIELD_TOKEN}
)

MIN_SKILL = 1
MAX_SKILL = 5


class Player(BaseModel):
    """
    Domain model for a roster player.

    Players are immutable. ``player_id`` is the stable handle used for every
    lookup; two players with otherwise identical fields are still different
    players when their ids differ.
    """

    model_config = ConfigDict(frozen=True)

    player_id: int = Field(..., ge=0, description="Stable player handle")
    name: str = Field(..., min_length=1, max_length=50, description="Display name")
    gender: Gender = Field(..., description="Lineup category")
    positions: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Eligibility tokens: position codes, '*' (all but P), 'IF', 'OF'",
    )
    skill: int = Field(..., ge=MIN_SKILL, le=MAX_SKILL, description="1 = newest, 5 = best")
    is_filler: bool = Field(
        default=False, description="Synthetic lineup slot, never a roster member"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        trimmed = v.strip()
        if not trimmed:
            raise ValueError("name must not be blank")
        return trimmed

    @field_validator("positions", mode="before")
    @classmethod
    def normalize_positions(cls, v):
        if isinstance(v, str):
            v = v.replace(",", " ").replace(";", " ").replace("|", " ").split()
        tokens = frozenset(str(token).strip().upper() for token in v if str(token).strip())
        unknown = tokens - VALID_TOKENS
        if unknown:
            raise ValueError(f"Unknown position tokens: {sorted(unknown)}")
        return tokens

    @property
    def is_male(self) -> bool:
        return self.gender == Gender.MALE

    def __str__(self) -> str:
        return f"{self.name} ({self.gender.value}, {self.skill})"


# Placeholder batting slot used when there are too few non-male batters
FILLER_PLAYER = Player(
    player_id=0,
    name="SLOT",
    gender=Gender.OTHER,
    positions=frozenset({WILDCARD_TOKEN}),
    skill=2,
    is_filler=True,
)
