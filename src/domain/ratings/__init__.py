"""Rating-system domain modules."""

from domain.ratings.common import ChemistryRecord, PlayerMatchRecord
from domain.ratings.protocol import MatchLevelCalculator, Outcome

__all__ = [
    "ChemistryRecord",
    "MatchLevelCalculator",
    "Outcome",
    "PlayerMatchRecord",
]
