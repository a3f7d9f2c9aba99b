"""
Lineup Picker Interfaces

Presentation helpers shared by the command line tools:
- Lineup card tables (players in batting order, one column per inning)
- CSV export for spreadsheets
- Cost breakdown rows
"""

from .display_utils import build_lineup_dataframe, cost_breakdown_rows, lineup_to_csv

__all__ = ["build_lineup_dataframe", "cost_breakdown_rows", "lineup_to_csv"]
