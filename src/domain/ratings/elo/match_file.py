"""Read a single match snapshot from a TOML file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import read_toml
from domain.ratings.common import ChemistryRecord, PlayerMatchRecord


@dataclass(frozen=True)
class MatchSnapshot:
    home_players: tuple[PlayerMatchRecord, ...]
    away_players: tuple[PlayerMatchRecord, ...]
    home_goalkeeper_id: int | None = None
    away_goalkeeper_id: int | None = None


def load_match_file(file_path: Path) -> MatchSnapshot:
    if not file_path.is_file():
        raise FileNotFoundError(f"Match file not found: {file_path}")

    raw = read_toml(file_path)

    home_players, home_goalkeeper_id = _parse_side(raw, "home", file_path)
    away_players, away_goalkeeper_id = _parse_side(raw, "away", file_path)
    return MatchSnapshot(
        home_players=home_players,
        away_players=away_players,
        home_goalkeeper_id=home_goalkeeper_id,
        away_goalkeeper_id=away_goalkeeper_id,
    )


def _parse_side(
    raw: dict[str, Any],
    label: str,
    file_path: Path,
) -> tuple[tuple[PlayerMatchRecord, ...], int | None]:
    side_raw = raw.get(label)
    if not isinstance(side_raw, dict):
        raise ValueError(f"{file_path}: [{label}] table is required")

    players_raw = side_raw.get("players", [])
    if not players_raw:
        raise ValueError(f"{file_path}: [[{label}.players]] entries are required")

    goalkeeper_value = side_raw.get("goalkeeper_id")
    goalkeeper_id = None if goalkeeper_value is None else int(goalkeeper_value)
    players = tuple(_parse_player(entry, label, file_path) for entry in players_raw)
    return players, goalkeeper_id


def _parse_player(entry: dict[str, Any], label: str, file_path: Path) -> PlayerMatchRecord:
    if "player_id" not in entry or "rating" not in entry:
        raise ValueError(f"{file_path}: [[{label}.players]] entries need player_id and rating")

    chemistry_raw = entry.get("chemistry")
    chemistry = None
    if chemistry_raw is not None:
        chemistry = tuple(
            ChemistryRecord(
                teammate_id=int(item["teammate_id"]),
                wins=int(item.get("wins", 0)),
                losses=int(item.get("losses", 0)),
                draws=int(item.get("draws", 0)),
            )
            for item in chemistry_raw
        )

    name_value = entry.get("name")
    return PlayerMatchRecord(
        player_id=int(entry["player_id"]),
        name=None if name_value is None else str(name_value),
        rating=float(entry["rating"]),
        goals=int(entry.get("goals", 0)),
        games_played=int(entry.get("games_played", 0)),
        fatigue_minutes=float(entry.get("fatigue_minutes", 0.0)),
        is_goalkeeper=bool(entry.get("is_goalkeeper", False)),
        chemistry=chemistry,
    )


__all__ = ["MatchSnapshot", "load_match_file"]
