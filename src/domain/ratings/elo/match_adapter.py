"""Build engine inputs from raw per-player match records."""

from __future__ import annotations

from collections.abc import Sequence

from domain.ratings.common import ChemistryRecord, PlayerMatchRecord
from domain.ratings.elo.calculator import MatchEloCalculator
from domain.ratings.elo.chemistry import ChemistryLedger
from domain.ratings.elo.match import Match
from domain.ratings.elo.parameters import NO_GOALKEEPER, EloParameters
from domain.ratings.elo.participant import Participant
from domain.ratings.elo.side import Side


def _validate_record(record: PlayerMatchRecord) -> None:
    if record.goals < 0:
        raise ValueError(f"player_id={record.player_id} has negative goals ({record.goals})")
    if record.games_played < 0:
        raise ValueError(
            f"player_id={record.player_id} has negative games_played ({record.games_played})"
        )
    if record.fatigue_minutes < 0.0:
        raise ValueError(
            f"player_id={record.player_id} has negative fatigue_minutes ({record.fatigue_minutes})"
        )
    for chemistry in record.chemistry or ():
        if min(chemistry.wins, chemistry.losses, chemistry.draws) < 0:
            raise ValueError(
                f"player_id={record.player_id} has negative chemistry counts "
                f"with teammate_id={chemistry.teammate_id}"
            )


def resolve_goalkeeper_id(
    players: Sequence[PlayerMatchRecord],
    goalkeeper_id: int | None = None,
) -> int:
    """Explicit id first, then the first ``is_goalkeeper`` flag, else ``NO_GOALKEEPER``."""
    if goalkeeper_id is not None and goalkeeper_id != NO_GOALKEEPER:
        if goalkeeper_id not in {player.player_id for player in players}:
            raise ValueError(f"goalkeeper_id={goalkeeper_id} is not on this side")
        return goalkeeper_id

    for player in players:
        if player.is_goalkeeper:
            return player.player_id
    return NO_GOALKEEPER


def _chemistry_for(
    record: PlayerMatchRecord,
    teammate_ids: Sequence[int],
    ledger: ChemistryLedger | None,
) -> tuple[ChemistryRecord, ...]:
    if record.chemistry is None and ledger is not None:
        return ledger.records_for(record.player_id, teammate_ids)

    supplied = {entry.teammate_id: entry for entry in record.chemistry or ()}
    return tuple(
        supplied.get(teammate_id, ChemistryRecord(teammate_id=teammate_id))
        for teammate_id in teammate_ids
        if teammate_id != record.player_id
    )


def build_side(
    players: Sequence[PlayerMatchRecord],
    *,
    params: EloParameters,
    goalkeeper_id: int | None = None,
    ledger: ChemistryLedger | None = None,
) -> Side:
    for player in players:
        _validate_record(player)

    player_ids = [player.player_id for player in players]
    participants = [
        Participant(
            player.player_id,
            player.rating,
            params=params,
            fatigue_minutes=player.fatigue_minutes,
            games_played=player.games_played,
            chemistry=_chemistry_for(player, player_ids, ledger),
            name=player.name,
        )
        for player in players
    ]
    return Side(
        participants,
        goalkeeper_id=resolve_goalkeeper_id(players, goalkeeper_id),
    )


def build_match(
    home_players: Sequence[PlayerMatchRecord],
    away_players: Sequence[PlayerMatchRecord],
    *,
    params: EloParameters | None = None,
    home_goalkeeper_id: int | None = None,
    away_goalkeeper_id: int | None = None,
    ledger: ChemistryLedger | None = None,
) -> Match:
    params = params or EloParameters()
    home = build_side(home_players, params=params, goalkeeper_id=home_goalkeeper_id, ledger=ledger)
    away = build_side(away_players, params=params, goalkeeper_id=away_goalkeeper_id, ledger=ledger)
    goals = {player.player_id: player.goals for player in (*home_players, *away_players)}
    return Match(home, away, goals)


def calculate_match_deltas(
    home_players: Sequence[PlayerMatchRecord],
    away_players: Sequence[PlayerMatchRecord],
    *,
    params: EloParameters | None = None,
    home_goalkeeper_id: int | None = None,
    away_goalkeeper_id: int | None = None,
    ledger: ChemistryLedger | None = None,
) -> dict[int, float]:
    """Rating delta per player id for one settled match."""
    params = params or EloParameters()
    match = build_match(
        home_players,
        away_players,
        params=params,
        home_goalkeeper_id=home_goalkeeper_id,
        away_goalkeeper_id=away_goalkeeper_id,
        ledger=ledger,
    )
    return MatchEloCalculator(params).compute_deltas(match)


__all__ = [
    "build_match",
    "build_side",
    "calculate_match_deltas",
    "resolve_goalkeeper_id",
]
