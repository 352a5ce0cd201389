"""Player-level Elo settlement for one 5v5 match."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from domain.ratings.elo.match import Match
from domain.ratings.elo.parameters import EloParameters
from domain.ratings.elo.side import Side
from domain.ratings.protocol import Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerRatingEvent:
    player_id: int
    name: str
    side: str
    outcome: Outcome
    goals: int
    is_goalkeeper: bool
    pre_rating: float
    working_rating: float
    expected_score: float
    actual_score: float
    pot: float
    performance_score: float
    team_share: float
    performance_share: float
    blended_share: float
    q_factor: float
    k_factor: float
    balance_factor: float
    rating_delta: float


def calculate_expected_score(rating: float, opponent_rating: float, scale_factor: float) -> float:
    """Compute the Elo expected score for one side."""
    return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / scale_factor))


def normalize_weights(weights: Sequence[float]) -> list[float]:
    """Scale weights to sum to 1, or split evenly when there is nothing to scale."""
    total = sum(weights)
    if total <= 0.0:
        return [1.0 / len(weights)] * len(weights)
    return [weight / total for weight in weights]


class MatchEloCalculator:
    """Stateless match-by-match player Elo calculator.

    Each side's pot (actual minus expected score, dampened on draws) is split
    across its players with a blend of a rating-proportional share and a
    performance share. The blend leans on performance for newer players (q)
    and each player's slice is scaled by their volatility (k).
    """

    def __init__(self, params: EloParameters | None = None) -> None:
        self.params = params or EloParameters()

    def compute_deltas(self, match: Match) -> dict[int, float]:
        return {event.player_id: event.rating_delta for event in self.process_match(match)}

    def process_match(self, match: Match) -> list[PlayerRatingEvent]:
        home_expected = calculate_expected_score(
            rating=match.home.working_rating,
            opponent_rating=match.away.working_rating,
            scale_factor=self.params.elo_diff_divisor,
        )
        away_expected = 1.0 - home_expected

        home_actual = self._actual_score(match.outcome_for(match.home))
        away_actual = self._actual_score(match.outcome_for(match.away))

        home_events = self._settle_side(
            match,
            match.home,
            label="home",
            expected_score=home_expected,
            actual_score=home_actual,
        )
        away_events = self._settle_side(
            match,
            match.away,
            label="away",
            expected_score=away_expected,
            actual_score=away_actual,
        )

        if self.params.zero_sum_balancing:
            home_events, away_events = self._balance_pools(home_events, away_events)

        events = home_events + away_events
        for event in events:
            logger.debug(
                "player_id=%s name=%s side=%s blended_share=%.4f k=%.1f delta=%.4f",
                event.player_id,
                event.name,
                event.side,
                event.blended_share,
                event.k_factor,
                event.rating_delta,
            )
        return events

    def _actual_score(self, outcome: Outcome) -> float:
        if outcome is Outcome.WIN:
            return 1.0
        if outcome is Outcome.LOSS:
            return 0.0
        return self.params.draw_score

    def _pot(self, *, actual_score: float, expected_score: float, is_draw: bool) -> float:
        pot = actual_score - expected_score
        if is_draw:
            pot *= self.params.draw_dampening
        return pot

    def _team_weights(self, side: Side, *, is_win: bool) -> list[float]:
        if side.working_rating <= 0.0:
            return [1.0 / len(side.participants)] * len(side.participants)

        ratios = [participant.working_rating / side.working_rating for participant in side.participants]
        if is_win:
            # lower-rated players take more of a gain
            return normalize_weights([1.0 - ratio for ratio in ratios])
        return normalize_weights(ratios)

    def _performance_scores(self, match: Match, side: Side) -> list[float]:
        opponent_goals = match.goals_of(match.opponent_of(side))
        side_goals = match.goals_of(side)
        scores: list[float] = []
        for participant in side.participants:
            goals = match.goals_for(participant.player_id)
            scores.append(
                participant.performance_score(
                    goals=goals,
                    teammate_goals=side_goals - goals,
                    opponent_goals=opponent_goals,
                    is_goalkeeper=side.is_goalkeeper(participant.player_id),
                )
            )
        return scores

    def _settle_side(
        self,
        match: Match,
        side: Side,
        *,
        label: str,
        expected_score: float,
        actual_score: float,
    ) -> list[PlayerRatingEvent]:
        outcome = match.outcome_for(side)
        is_win = outcome is Outcome.WIN
        is_loss = outcome is Outcome.LOSS

        pot = self._pot(
            actual_score=actual_score,
            expected_score=expected_score,
            is_draw=outcome is Outcome.DRAW,
        )
        logger.debug(
            "side=%s outcome=%s working_rating=%.1f expected=%.4f actual=%.2f pot=%.4f",
            label,
            outcome.value,
            side.working_rating,
            expected_score,
            actual_score,
            pot,
        )

        team_shares = self._team_weights(side, is_win=is_win)
        scores = self._performance_scores(match, side)
        if is_loss:
            # decisive players lose proportionally less
            performance_shares = normalize_weights([1.0 / (score**2) for score in scores])
        else:
            performance_shares = normalize_weights(scores)

        team_size = float(len(side.participants))
        events: list[PlayerRatingEvent] = []
        for index, participant in enumerate(side.participants):
            q = participant.q_factor
            blended_share = ((1.0 - q) * team_shares[index]) + (q * performance_shares[index])
            delta = participant.k_factor * pot * blended_share * team_size
            events.append(
                PlayerRatingEvent(
                    player_id=participant.player_id,
                    name=participant.name,
                    side=label,
                    outcome=outcome,
                    goals=match.goals_for(participant.player_id),
                    is_goalkeeper=side.is_goalkeeper(participant.player_id),
                    pre_rating=participant.rating,
                    working_rating=participant.working_rating,
                    expected_score=expected_score,
                    actual_score=actual_score,
                    pot=pot,
                    performance_score=scores[index],
                    team_share=team_shares[index],
                    performance_share=performance_shares[index],
                    blended_share=blended_share,
                    q_factor=q,
                    k_factor=participant.k_factor,
                    balance_factor=1.0,
                    rating_delta=delta,
                )
            )
        return events

    @staticmethod
    def _balance_pools(
        home_events: list[PlayerRatingEvent],
        away_events: list[PlayerRatingEvent],
    ) -> tuple[list[PlayerRatingEvent], list[PlayerRatingEvent]]:
        """Rescale both sides to a common pool size so the match sums to zero.

        Pots are antisymmetric, so the pools only differ in magnitude when q or
        k vary between players. Equal q and k give a factor of exactly 1.
        """
        home_pool = sum(event.rating_delta for event in home_events)
        away_pool = sum(event.rating_delta for event in away_events)
        if home_pool == 0.0 or away_pool == 0.0:
            return home_events, away_events

        target = (abs(home_pool) + abs(away_pool)) / 2.0
        home_factor = target / abs(home_pool)
        away_factor = target / abs(away_pool)
        return (
            [
                replace(event, balance_factor=home_factor, rating_delta=event.rating_delta * home_factor)
                for event in home_events
            ],
            [
                replace(event, balance_factor=away_factor, rating_delta=event.rating_delta * away_factor)
                for event in away_events
            ],
        )


__all__ = [
    "MatchEloCalculator",
    "PlayerRatingEvent",
    "calculate_expected_score",
    "normalize_weights",
]
