"""Undirected teammate history keyed by the unordered pair of player ids."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from domain.ratings.common import ChemistryRecord
from domain.ratings.protocol import Outcome


@dataclass(frozen=True)
class PairHistory:
    wins: int = 0
    losses: int = 0
    draws: int = 0


def pair_key(player_id: int, teammate_id: int) -> tuple[int, int]:
    if player_id == teammate_id:
        raise ValueError(f"player_id={player_id} cannot be paired with itself")
    return (player_id, teammate_id) if player_id < teammate_id else (teammate_id, player_id)


class ChemistryLedger:
    """In-memory snapshot of how often two players have won, lost or drawn together."""

    def __init__(self, history: dict[tuple[int, int], PairHistory] | None = None) -> None:
        self._history: dict[tuple[int, int], PairHistory] = {}
        for (first, second), pair in (history or {}).items():
            self._history[pair_key(first, second)] = pair

    def get(self, player_id: int, teammate_id: int) -> PairHistory:
        return self._history.get(pair_key(player_id, teammate_id), PairHistory())

    def record(self, player_id: int, teammate_id: int, outcome: Outcome) -> None:
        """Add one shared result; teammates share the outcome so direction is irrelevant."""
        key = pair_key(player_id, teammate_id)
        pair = self._history.get(key, PairHistory())
        if outcome is Outcome.WIN:
            pair = PairHistory(wins=pair.wins + 1, losses=pair.losses, draws=pair.draws)
        elif outcome is Outcome.LOSS:
            pair = PairHistory(wins=pair.wins, losses=pair.losses + 1, draws=pair.draws)
        else:
            pair = PairHistory(wins=pair.wins, losses=pair.losses, draws=pair.draws + 1)
        self._history[key] = pair

    def record_side(self, player_ids: Iterable[int], outcome: Outcome) -> None:
        ids = list(player_ids)
        for index, player_id in enumerate(ids):
            for teammate_id in ids[index + 1 :]:
                self.record(player_id, teammate_id, outcome)

    def records_for(self, player_id: int, teammate_ids: Iterable[int]) -> tuple[ChemistryRecord, ...]:
        records: list[ChemistryRecord] = []
        for teammate_id in teammate_ids:
            if teammate_id == player_id:
                continue
            pair = self.get(player_id, teammate_id)
            records.append(
                ChemistryRecord(
                    teammate_id=teammate_id,
                    wins=pair.wins,
                    losses=pair.losses,
                    draws=pair.draws,
                )
            )
        return tuple(records)

    def tracked_pair_count(self) -> int:
        return len(self._history)


__all__ = ["ChemistryLedger", "PairHistory", "pair_key"]
