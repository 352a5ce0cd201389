"""Rating-system domain modules."""

from domain.ratings.common import ChemistryRecord, PlayerMatchRecord
from domain.ratings.protocol import Outcome

__all__ = ["ChemistryRecord", "Outcome", "PlayerMatchRecord"]
