"""
Display utilities for the presentation layer.

Helper functions for turning an optimized lineup into tables for the console
and for spreadsheets.
"""

from typing import List, Tuple

import pandas as pd

from lineup_picker.domain.models import CandidateSolution
from lineup_picker.domain.services.optimization import CostBreakdown

PLAYER_COLUMN = "Player"
OUT_CELL = "OUT"


def inning_columns(inning_count: int) -> List[str]:
    return [f"Inning {i}" for i in range(1, inning_count + 1)]


def build_lineup_dataframe(solution: CandidateSolution) -> pd.DataFrame:
    """
    Build the lineup card for ``solution``.

    Rows follow the batting order; each inning column holds the position code
    the player fields that inning (``SIT`` on the bench). Filler batting slots
    are shown as automatic outs.

    Args:
        solution: Lineup whose batting order has been rendered

    Returns:
        DataFrame indexed by batting position (1-based)

    Raises:
        AssignmentLookupError: If a batter has no assignment in some inning
    """
    columns = inning_columns(len(solution.innings))
    rows = []
    for player in solution.batting_order:
        row = {PLAYER_COLUMN: player.name}
        for inning_number, (column, inning) in enumerate(
            zip(columns, solution.innings), start=1
        ):
            if player.is_filler:
                row[column] = OUT_CELL
            else:
                row[column] = inning.position_of(player, inning_number).value
        rows.append(row)

    df = pd.DataFrame(rows, columns=[PLAYER_COLUMN] + columns)
    df.index = pd.RangeIndex(start=1, stop=len(df) + 1, name="Order")
    return df


def lineup_to_csv(solution: CandidateSolution) -> str:
    """CSV text of the lineup card, ready to paste into a spreadsheet."""
    return build_lineup_dataframe(solution).to_csv(index=False)


def cost_breakdown_rows(breakdown: CostBreakdown) -> List[Tuple[str, float]]:
    """Ordered (label, value) rows for displaying a cost breakdown."""
    return [
        ("Sitting imbalance", breakdown.sitting_imbalance),
        ("Invalid assignments", breakdown.invalid_assignments),
        ("Skill placement", breakdown.skill_placement),
        ("Position diversity", breakdown.position_diversity),
        ("Top of order", breakdown.order_top),
        ("High -> low bonus", breakdown.high_to_low_bonus),
        ("Consecutive low", breakdown.consecutive_low),
        ("Sawtooth", breakdown.sawtooth),
        ("Total", breakdown.total),
    ]
