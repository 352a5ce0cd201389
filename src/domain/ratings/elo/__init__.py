"""Match Elo modules for 5v5 league games."""

from domain.ratings.elo.calculator import (
    MatchEloCalculator,
    PlayerRatingEvent,
    calculate_expected_score,
    normalize_weights,
)
from domain.ratings.elo.chemistry import ChemistryLedger, PairHistory, pair_key
from domain.ratings.elo.config import EloSystemConfig, load_elo_system_configs
from domain.ratings.elo.match import Match
from domain.ratings.elo.match_adapter import build_match, build_side, calculate_match_deltas
from domain.ratings.elo.match_file import MatchSnapshot, load_match_file
from domain.ratings.elo.parameters import NO_GOALKEEPER, TEAM_SIZE, EloParameters
from domain.ratings.elo.participant import Participant
from domain.ratings.elo.side import Side

__all__ = [
    "NO_GOALKEEPER",
    "TEAM_SIZE",
    "ChemistryLedger",
    "EloParameters",
    "EloSystemConfig",
    "Match",
    "MatchEloCalculator",
    "MatchSnapshot",
    "PairHistory",
    "Participant",
    "PlayerRatingEvent",
    "Side",
    "build_match",
    "build_side",
    "calculate_match_deltas",
    "calculate_expected_score",
    "load_elo_system_configs",
    "load_match_file",
    "normalize_weights",
    "pair_key",
]
