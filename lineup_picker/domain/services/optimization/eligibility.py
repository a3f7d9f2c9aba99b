"""Position eligibility rules."""

from typing import Union

from lineup_picker.domain.models.player import (
    INFIELD_POSITIONS,
    INFIELD_TOKEN,
    OUTFIELD_POSITIONS,
    OUTFIELD_TOKEN,
    WILDCARD_TOKEN,
    Player,
    Position,
)


def _as_position(position: Union[Position, str]):
    if isinstance(position, Position):
        return position
    try:
        return Position(str(position).strip().upper())
    except ValueError:
        return None


def can_play(player: Player, position: Union[Position, str]) -> bool:
    """True if ``player`` signed up to play ``position``.

    The bench is open to everyone. ``*`` covers every field position except
    pitcher, ``IF`` the infield and ``OF`` the outfield. Unknown positions are
    never playable.
    """
    pos = _as_position(position)
    if pos is None:
        return False
    if pos == Position.BENCH:
        return True

    allowed = player.positions
    if pos.value in allowed:
        return True
    if WILDCARD_TOKEN in allowed and pos != Position.PITCHER:
        return True
    if INFIELD_TOKEN in allowed and pos in INFIELD_POSITIONS:
        return True
    if OUTFIELD_TOKEN in allowed and pos in OUTFIELD_POSITIONS:
        return True
    return False
