"""Five-player side with an optional goalkeeper."""

from __future__ import annotations

from collections.abc import Sequence

from domain.ratings.elo.participant import Participant
from domain.ratings.elo.parameters import NO_GOALKEEPER, TEAM_SIZE


class Side:
    """Exactly five participants plus a goalkeeper id (or ``NO_GOALKEEPER``)."""

    def __init__(
        self,
        participants: Sequence[Participant],
        *,
        goalkeeper_id: int = NO_GOALKEEPER,
    ) -> None:
        if len(participants) != TEAM_SIZE:
            raise ValueError(f"side needs exactly {TEAM_SIZE} players, got {len(participants)}")

        player_ids = [participant.player_id for participant in participants]
        if len(set(player_ids)) != len(player_ids):
            raise ValueError(f"side has duplicate player ids: {player_ids}")

        self.participants: tuple[Participant, ...] = tuple(participants)
        self.goalkeeper_id = goalkeeper_id
        self.working_rating = sum(participant.working_rating for participant in self.participants)

    @property
    def player_ids(self) -> tuple[int, ...]:
        return tuple(participant.player_id for participant in self.participants)

    def is_goalkeeper(self, player_id: int) -> bool:
        return self.goalkeeper_id != NO_GOALKEEPER and player_id == self.goalkeeper_id

    def __contains__(self, player_id: object) -> bool:
        return player_id in self.player_ids

    def __repr__(self) -> str:
        return (
            f"Side(player_ids={list(self.player_ids)}, goalkeeper_id={self.goalkeeper_id}, "
            f"working_rating={self.working_rating:.1f})"
        )
