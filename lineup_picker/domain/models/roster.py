"""Roster domain model."""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .player import Gender, Player


def number_missing_ids(records: List[Dict]) -> List[Dict]:
    """Copy ``records``, giving rows without a ``player_id`` an unused id.

    New ids count up from the highest explicit id, so they never collide with
    ids given on other rows. Explicit ids that are not integers are left for
    ``Player`` validation to report.
    """
    taken = {0}
    for record in records:
        try:
            taken.add(int(record.get("player_id")))
        except (TypeError, ValueError):
            continue

    next_id = max(taken) + 1
    numbered = []
    for record in records:
        data = dict(record)
        if data.get("player_id") is None:
            data["player_id"] = next_id
            next_id += 1
        numbered.append(data)
    return numbered


class Roster(BaseModel):
    """
    Immutable, ordered collection of the players available for a game.

    Keeps an id -> player index so lookups never depend on object identity.
    """

    model_config = ConfigDict(frozen=True)

    players: Tuple[Player, ...] = Field(..., description="Players in roster order")

    _by_id: Dict[int, Player] = PrivateAttr(default_factory=dict)

    @field_validator("players")
    @classmethod
    def validate_players(cls, v: Tuple[Player, ...]) -> Tuple[Player, ...]:
        """Ids and names must be unique; fillers are not roster members."""
        ids = [p.player_id for p in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate player IDs found in roster")
        names = [p.name for p in v]
        if len(names) != len(set(names)):
            raise ValueError("Duplicate player names found in roster")
        if any(p.is_filler or p.player_id == 0 for p in v):
            raise ValueError("Roster players need a positive id and cannot be fillers")
        return v

    def model_post_init(self, __context) -> None:
        self._by_id = {p.player_id: p for p in self.players}

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def player_ids(self) -> List[int]:
        return [p.player_id for p in self.players]

    def get(self, player_id: int) -> Player:
        """Return the player with ``player_id``; raises KeyError if absent."""
        return self._by_id[player_id]

    def by_gender(self, gender: Gender) -> List[Player]:
        return [p for p in self.players if p.gender == gender]

    @classmethod
    def from_records(cls, records: List[Dict]) -> "Roster":
        """Build a roster from plain dicts, numbering players without an id."""
        players = [Player(**data) for data in number_missing_ids(records)]
        return cls(players=tuple(players))
