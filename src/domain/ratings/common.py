"""Shared input payloads for rating calculators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChemistryRecord:
    """Historical results of one player alongside one current teammate."""

    teammate_id: int
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.draws


@dataclass(frozen=True)
class PlayerMatchRecord:
    """Raw per-player snapshot supplied by the settlement workflow for one match."""

    player_id: int
    rating: float
    goals: int = 0
    games_played: int = 0
    fatigue_minutes: float = 0.0
    name: str | None = None
    is_goalkeeper: bool = False
    chemistry: tuple[ChemistryRecord, ...] | None = None
