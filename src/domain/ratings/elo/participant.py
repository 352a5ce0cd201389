"""Per-player state for a single 5v5 match."""

from __future__ import annotations

from collections.abc import Iterable

from domain.ratings.common import ChemistryRecord
from domain.ratings.elo.parameters import EloParameters
from domain.ratings.protocol import Outcome, outcome_from_goal_difference


def fatigue_coefficient(fatigue_minutes: float, params: EloParameters) -> float:
    """Scale applied to base rating from recent playing time.

    Rested players sit at 0 and the coefficient climbs quadratically to 1 at the
    reference minutes.
    """
    return min(1.0, (fatigue_minutes / params.fatigue_reference_minutes) ** 2)


def teammate_chemistry_score(record: ChemistryRecord, params: EloParameters) -> float:
    games = record.games
    if games == 0:
        return params.chemistry_neutral_score

    win_rate = (record.wins + 0.5 * record.draws) / games
    confidence = min(1.0, games / float(params.chemistry_full_confidence_games))
    return (confidence * win_rate) + ((1.0 - confidence) * params.chemistry_neutral_score)


def chemistry_coefficient(records: Iterable[ChemistryRecord], params: EloParameters) -> float:
    """Average teammate chemistry mapped onto [min_coefficient, max_coefficient]."""
    scores = [teammate_chemistry_score(record, params) for record in records]
    average = sum(scores) / len(scores) if scores else params.chemistry_neutral_score
    span = params.chemistry_max_coefficient - params.chemistry_min_coefficient
    return params.chemistry_min_coefficient + (average * span)


def q_factor(games_played: int, params: EloParameters) -> float:
    return max(params.min_q_factor, 1.0 - (games_played * params.experience_weight))


def k_factor(rating: float, params: EloParameters) -> float:
    if rating >= params.k_factor_high_threshold:
        return params.k_factor_high
    if rating >= params.k_factor_mid_threshold:
        return params.k_factor_mid
    return params.k_factor_low


class Participant:
    """One player's rating inputs, frozen for the duration of a match."""

    def __init__(
        self,
        player_id: int,
        rating: float,
        *,
        params: EloParameters,
        fatigue_minutes: float = 0.0,
        games_played: int = 0,
        chemistry: Iterable[ChemistryRecord] = (),
        name: str | None = None,
    ) -> None:
        self.player_id = player_id
        self.name = name if name is not None else f"Player {player_id}"
        self.rating = rating
        self.fatigue_minutes = fatigue_minutes
        self.games_played = games_played
        self.chemistry = tuple(chemistry)
        self.params = params

        self.fatigue_coefficient = fatigue_coefficient(fatigue_minutes, params)
        self.chemistry_coefficient = chemistry_coefficient(self.chemistry, params)
        self.working_rating = rating * self.fatigue_coefficient * self.chemistry_coefficient
        self.q_factor = q_factor(games_played, params)
        self.k_factor = k_factor(rating, params)

    def performance_score(
        self,
        *,
        goals: int,
        teammate_goals: int,
        opponent_goals: int,
        is_goalkeeper: bool,
    ) -> float:
        """Match-specific decisiveness of this player; always positive."""
        params = self.params
        score = 1.0
        goal_multiplier = 1.0

        if is_goalkeeper:
            score += self._goalkeeper_bonus(opponent_goals)
            goal_multiplier = params.goalkeeper_goal_multiplier

        outcome_without = outcome_from_goal_difference(teammate_goals - opponent_goals)
        outcome_with = outcome_from_goal_difference(teammate_goals + goals - opponent_goals)
        score += self._clutch_bonus(outcome_without, outcome_with)

        if outcome_with is Outcome.LOSS:
            goal_multiplier *= params.loss_goal_multiplier
        score += self._goal_bonus(goals) * goal_multiplier

        return score

    def _goalkeeper_bonus(self, opponent_goals: int) -> float:
        if opponent_goals == 0:
            return self.params.clean_sheet_bonus
        if opponent_goals == 1:
            return self.params.one_conceded_bonus
        if opponent_goals == 2:
            return self.params.two_conceded_bonus
        return 0.0

    def _clutch_bonus(self, outcome_without: Outcome, outcome_with: Outcome) -> float:
        if outcome_without is Outcome.LOSS and outcome_with is Outcome.WIN:
            return self.params.clutch_loss_to_win_bonus
        if outcome_without is Outcome.DRAW and outcome_with is Outcome.WIN:
            return self.params.clutch_draw_to_win_bonus
        if outcome_without is Outcome.LOSS and outcome_with is Outcome.DRAW:
            return self.params.clutch_loss_to_draw_bonus
        return 0.0

    def _goal_bonus(self, goals: int) -> float:
        if goals <= 0:
            return 0.0
        if goals == 1:
            return self.params.one_goal_bonus
        if goals == 2:
            return self.params.two_goal_bonus
        # diminishing returns past a brace
        return self.params.two_goal_bonus * (goals / 2.0) ** (1.0 / 3.0)

    def __repr__(self) -> str:
        return (
            f"Participant(player_id={self.player_id}, name={self.name!r}, rating={self.rating}, "
            f"working_rating={self.working_rating:.1f}, games_played={self.games_played}, "
            f"q_factor={self.q_factor:.2f}, k_factor={self.k_factor})"
        )
