"""Batting order rendering.

The lineup is built from two components: male batters and everyone else. Non-male
batters are spread at regular intervals so no more than ``max_primary_in_a_row``
male batters hit back to back. When there are too few non-male batters the gaps
are filled with the synthetic ``SLOT`` entry (an automatic out).
"""

import math
from typing import List, Sequence

from lineup_picker.domain.models.player import FILLER_PLAYER, Player

DEFAULT_MAX_PRIMARY_IN_A_ROW = 3


def _has_real_players(order: Sequence[Player]) -> bool:
    return any(not p.is_filler for p in order)


def required_secondary_slots(
    primary_count: int, max_primary_in_a_row: int = DEFAULT_MAX_PRIMARY_IN_A_ROW
) -> int:
    """Minimum number of secondary slots for ``primary_count`` primary batters."""
    return math.ceil(primary_count / max_primary_in_a_row)


def pad_secondary_order(
    primary: Sequence[Player],
    secondary: Sequence[Player],
    max_primary_in_a_row: int = DEFAULT_MAX_PRIMARY_IN_A_ROW,
) -> List[Player]:
    """Copy of ``secondary`` padded with filler slots up to the required count.

    A secondary order without any real players is returned as-is: there is
    nobody to space out, so the lineup is just the primary order.
    """
    padded = list(secondary)
    if not _has_real_players(padded):
        return padded
    required = required_secondary_slots(len(primary), max_primary_in_a_row)
    while len(padded) < required:
        padded.append(FILLER_PLAYER)
    return padded


def render_batting_order(
    primary: Sequence[Player],
    secondary: Sequence[Player],
    max_primary_in_a_row: int = DEFAULT_MAX_PRIMARY_IN_A_ROW,
) -> List[Player]:
    """Interleave the two components into a single batting order.

    Primary batters are split as evenly as possible across the secondary slots,
    earlier slots taking the remainder. Each group is followed by one secondary
    batter. A trailing filler slot is dropped. Inputs are not modified.
    """
    padded = pad_secondary_order(primary, secondary, max_primary_in_a_row)

    if not _has_real_players(padded):
        return list(primary)

    gap_count = len(padded)
    base, extra = divmod(len(primary), gap_count)

    batting_order: List[Player] = []
    primary_index = 0
    for slot in range(gap_count):
        count = base + (1 if slot < extra else 0)
        batting_order.extend(primary[primary_index : primary_index + count])
        primary_index += count
        batting_order.append(padded[slot])

    if batting_order and batting_order[-1].is_filler:
        batting_order.pop()

    return batting_order
