"""Roster service for loading game rosters.

Rosters come from CSV (one player per row) or JSON (a list of player objects,
optionally wrapped as ``{"players": [...]}``). Every row is validated through
the ``Player`` model; failures are collected and returned as a single
``DomainError`` instead of raising.
"""

import json
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd
from loguru import logger
from pydantic import ValidationError

from lineup_picker.domain.common.result import DomainError, Result
from lineup_picker.domain.models import Player, Roster
from lineup_picker.domain.models.roster import number_missing_ids

REQUIRED_COLUMNS = ["name", "gender", "positions", "skill"]

SAMPLE_ROSTER: List[Dict] = [
    {"name": "Paul M", "gender": "M", "positions": ["*", "P"], "skill": 5},
    {"name": "Alex B", "gender": "M", "positions": ["OF", "P"], "skill": 4},
    {"name": "David D", "gender": "M", "positions": ["*"], "skill": 5},
    {"name": "Mason K", "gender": "M", "positions": ["*", "P"], "skill": 4},
    {"name": "Bailey B", "gender": "O", "positions": ["3B", "2B", "1B"], "skill": 4},
    {"name": "David G", "gender": "M", "positions": ["OF"], "skill": 5},
    {"name": "Leia C", "gender": "O", "positions": ["RF", "C", "2B"], "skill": 2},
    {"name": "Nicolle C", "gender": "O", "positions": ["RF", "C"], "skill": 1},
    {"name": "Rudy G", "gender": "M", "positions": ["OF", "1B"], "skill": 3},
    {"name": "Ryan A", "gender": "M", "positions": ["IF"], "skill": 5},
    {"name": "Skylar V", "gender": "O", "positions": ["RF", "2B", "C", "SS"], "skill": 3},
    {"name": "Thomas N", "gender": "M", "positions": ["OF", "2B", "P", "C"], "skill": 3},
]


class RosterService:
    """Service for building and loading rosters."""

    def sample_roster(self) -> Roster:
        """Twelve-player demo roster (8 men, 4 women)."""
        return Roster.from_records(SAMPLE_ROSTER)

    def load_roster(self, path: Union[str, Path]) -> Result[Roster]:
        """Load a roster from a ``.csv`` or ``.json`` file.

        Args:
            path: Roster file

        Returns:
            Result containing the validated Roster, or a DomainError
        """
        path = Path(path)
        if not path.exists():
            return Result.failure(
                DomainError.data_not_found(
                    f"Roster file not found: {path}", details={"path": str(path)}
                )
            )

        suffix = path.suffix.lower()
        try:
            if suffix == ".csv":
                records = self._read_csv(path)
            elif suffix == ".json":
                records = self._read_json(path)
            else:
                return Result.failure(
                    DomainError.validation_error(
                        f"Unsupported roster format '{suffix}' (expected .csv or .json)"
                    )
                )
        except (OSError, ValueError, pd.errors.ParserError) as e:
            # json.JSONDecodeError and pandas EmptyDataError are ValueErrors
            return Result.failure(
                DomainError.data_access_error(
                    f"Failed to read roster file {path}: {e}",
                    details={"path": str(path)},
                )
            )

        if isinstance(records, Result):
            return records
        return self.build_roster(records)

    def build_roster(self, records: List[Dict]) -> Result[Roster]:
        """Validate raw player records and assemble a Roster."""
        if not records:
            return Result.failure(DomainError.data_not_found("Roster has no players"))

        players = []
        field_errors: Dict[str, str] = {}
        for index, data in enumerate(number_missing_ids(records), start=1):
            try:
                players.append(Player(**data))
            except ValidationError as e:
                label = f"row {index}"
                if data.get("name"):
                    label = f"{label} ({data['name']})"
                field_errors[label] = "; ".join(err["msg"] for err in e.errors())

        if field_errors:
            logger.warning(f"⚠️ {len(field_errors)} roster rows failed validation")
            return Result.failure(
                DomainError.validation_error(
                    f"Invalid roster rows: {len(field_errors)} of {len(records)}",
                    field_errors=field_errors,
                )
            )

        try:
            roster = Roster(players=tuple(players))
        except ValidationError as e:
            return Result.failure(
                DomainError.validation_error(
                    "; ".join(err["msg"] for err in e.errors())
                )
            )

        logger.info(f"✅ Loaded roster with {roster.size} players")
        return Result.success(roster)

    def _read_csv(self, path: Path) -> Union[List[Dict], Result]:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        df.columns = [str(c).strip().lower() for c in df.columns]

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            return Result.failure(
                DomainError.validation_error(
                    f"Roster CSV is missing columns: {', '.join(missing)}",
                    field_errors={c: "missing column" for c in missing},
                )
            )

        records = []
        for _, row in df.iterrows():
            record = {c: row[c].strip() for c in REQUIRED_COLUMNS}
            player_id = row.get("player_id", "")
            record["player_id"] = player_id.strip() or None
            records.append(record)
        return records

    def _read_json(self, path: Path) -> Union[List[Dict], Result]:
        with open(path, "r") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("players", [])
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            return Result.failure(
                DomainError.validation_error(
                    "Roster JSON must be a list of player objects"
                )
            )
        return data
