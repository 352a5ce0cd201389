"""Two sides and the goals scored in one match."""

from __future__ import annotations

from collections.abc import Mapping

from domain.ratings.elo.side import Side
from domain.ratings.protocol import Outcome, outcome_from_goal_difference


class Match:
    """Scoreline and per-side outcome for a home/away pairing."""

    def __init__(self, home: Side, away: Side, goals: Mapping[int, int] | None = None) -> None:
        shared = set(home.player_ids) & set(away.player_ids)
        if shared:
            raise ValueError(f"players {sorted(shared)} appear on both sides")

        self.home = home
        self.away = away
        self.goals: dict[int, int] = dict(goals or {})
        self.home_goals = self.side_goals(home)
        self.away_goals = self.side_goals(away)

    def goals_for(self, player_id: int) -> int:
        return self.goals.get(player_id, 0)

    def side_goals(self, side: Side) -> int:
        return sum(self.goals_for(player_id) for player_id in side.player_ids)

    def opponent_of(self, side: Side) -> Side:
        if side is self.home:
            return self.away
        if side is self.away:
            return self.home
        raise ValueError(f"{side!r} does not play in this match")

    def goals_of(self, side: Side) -> int:
        if side is self.home:
            return self.home_goals
        if side is self.away:
            return self.away_goals
        raise ValueError(f"{side!r} does not play in this match")

    def outcome_for(self, side: Side) -> Outcome:
        opponent = self.opponent_of(side)
        return outcome_from_goal_difference(self.goals_of(side) - self.goals_of(opponent))

    def is_winner(self, side: Side) -> bool:
        return self.outcome_for(side) is Outcome.WIN

    def is_loser(self, side: Side) -> bool:
        return self.outcome_for(side) is Outcome.LOSS

    @property
    def is_draw(self) -> bool:
        return self.home_goals == self.away_goals

    def __repr__(self) -> str:
        return (
            f"Match(score={self.home_goals}-{self.away_goals}, "
            f"home_working_rating={self.home.working_rating:.1f}, "
            f"away_working_rating={self.away.working_rating:.1f})"
        )
