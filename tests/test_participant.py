"""Unit tests for per-player match state."""

from __future__ import annotations

import pytest

from domain.ratings.common import ChemistryRecord
from domain.ratings.elo.parameters import TEAM_SIZE, EloParameters
from domain.ratings.elo.participant import (
    Participant,
    chemistry_coefficient,
    fatigue_coefficient,
    k_factor,
    q_factor,
    teammate_chemistry_score,
)

PARAMS = EloParameters()


def _participant(**kwargs) -> Participant:
    defaults = {"player_id": 1, "rating": 1500.0, "fatigue_minutes": 20.0, "games_played": 3}
    defaults.update(kwargs)
    player_id = defaults.pop("player_id")
    rating = defaults.pop("rating")
    return Participant(player_id, rating, params=PARAMS, **defaults)


def test_elo_parameters_defaults_are_expected_constants() -> None:
    params = EloParameters()
    assert TEAM_SIZE == 5
    assert params.elo_diff_divisor == pytest.approx(400.0)
    assert params.draw_score == pytest.approx(0.5)
    assert params.draw_dampening < 1.0
    assert params.min_q_factor == pytest.approx(0.5)
    assert params.k_factor_high < params.k_factor_mid < params.k_factor_low
    assert (
        params.clutch_loss_to_draw_bonus
        < params.clutch_draw_to_win_bonus
        < params.clutch_loss_to_win_bonus
    )
    assert params.goalkeeper_goal_multiplier > 1.0
    assert params.zero_sum_balancing is True


def test_fatigue_coefficient_rises_from_zero_to_one() -> None:
    assert fatigue_coefficient(0.0, PARAMS) == pytest.approx(0.0)
    assert fatigue_coefficient(10.0, PARAMS) == pytest.approx(0.25)
    assert fatigue_coefficient(20.0, PARAMS) == pytest.approx(1.0)
    assert fatigue_coefficient(45.0, PARAMS) == pytest.approx(1.0)


def test_working_rating_strictly_increases_with_fatigue_minutes() -> None:
    working = [_participant(fatigue_minutes=minutes).working_rating for minutes in (0.0, 5.0, 10.0, 15.0, 20.0)]
    assert working == sorted(working)
    assert len(set(working)) == len(working)
    assert working[0] == pytest.approx(0.0)
    assert working[-1] == pytest.approx(1500.0)


def test_chemistry_without_history_is_neutral_midpoint() -> None:
    records = [ChemistryRecord(teammate_id=teammate_id) for teammate_id in (2, 3, 4, 5)]
    midpoint = (PARAMS.chemistry_min_coefficient + PARAMS.chemistry_max_coefficient) / 2.0
    assert chemistry_coefficient(records, PARAMS) == pytest.approx(midpoint)
    assert chemistry_coefficient([], PARAMS) == pytest.approx(1.0)


def test_teammate_chemistry_blends_win_rate_by_confidence() -> None:
    full = ChemistryRecord(teammate_id=2, wins=10)
    half = ChemistryRecord(teammate_id=2, wins=5)
    drawn = ChemistryRecord(teammate_id=2, wins=4, draws=4, losses=2)

    assert teammate_chemistry_score(full, PARAMS) == pytest.approx(1.0)
    assert teammate_chemistry_score(half, PARAMS) == pytest.approx(0.75)
    assert teammate_chemistry_score(drawn, PARAMS) == pytest.approx(0.6)


def test_chemistry_coefficient_stays_within_bounds() -> None:
    perfect = [ChemistryRecord(teammate_id=teammate_id, wins=40) for teammate_id in (2, 3, 4, 5)]
    hopeless = [ChemistryRecord(teammate_id=teammate_id, losses=40) for teammate_id in (2, 3, 4, 5)]

    assert chemistry_coefficient(perfect, PARAMS) == pytest.approx(PARAMS.chemistry_max_coefficient)
    assert chemistry_coefficient(hopeless, PARAMS) == pytest.approx(PARAMS.chemistry_min_coefficient)


def test_chemistry_scales_working_rating() -> None:
    records = [ChemistryRecord(teammate_id=teammate_id, wins=10) for teammate_id in (2, 3, 4, 5)]
    participant = _participant(chemistry=records)
    assert participant.working_rating == pytest.approx(1500.0 * 1.1)


def test_q_factor_decreases_with_experience_and_is_floored() -> None:
    assert q_factor(0, PARAMS) == pytest.approx(1.0)
    assert q_factor(3, PARAMS) == pytest.approx(0.97)
    assert q_factor(50, PARAMS) == pytest.approx(0.5)
    assert q_factor(400, PARAMS) == pytest.approx(0.5)


def test_k_factor_tiers_by_base_rating() -> None:
    assert k_factor(2000.0, PARAMS) == pytest.approx(PARAMS.k_factor_high)
    assert k_factor(1999.0, PARAMS) == pytest.approx(PARAMS.k_factor_mid)
    assert k_factor(1800.0, PARAMS) == pytest.approx(PARAMS.k_factor_mid)
    assert k_factor(1500.0, PARAMS) == pytest.approx(PARAMS.k_factor_low)


def test_k_factor_uses_base_rating_not_working_rating() -> None:
    participant = _participant(rating=2100.0, fatigue_minutes=0.0)
    assert participant.working_rating == pytest.approx(0.0)
    assert participant.k_factor == pytest.approx(PARAMS.k_factor_high)


def test_performance_score_without_goals_is_baseline() -> None:
    participant = _participant()
    score = participant.performance_score(goals=0, teammate_goals=2, opponent_goals=1, is_goalkeeper=False)
    assert score == pytest.approx(1.0)


def test_performance_score_clutch_bonuses() -> None:
    participant = _participant()

    loss_to_win = participant.performance_score(goals=2, teammate_goals=0, opponent_goals=1, is_goalkeeper=False)
    loss_to_draw = participant.performance_score(goals=1, teammate_goals=0, opponent_goals=1, is_goalkeeper=False)
    draw_to_win = participant.performance_score(goals=1, teammate_goals=1, opponent_goals=1, is_goalkeeper=False)
    padding = participant.performance_score(goals=1, teammate_goals=3, opponent_goals=1, is_goalkeeper=False)

    assert loss_to_win == pytest.approx(1.0 + 0.5 + 0.35)
    assert loss_to_draw == pytest.approx(1.0 + 0.25 + 0.2)
    assert draw_to_win == pytest.approx(1.0 + 0.35 + 0.2)
    assert padding == pytest.approx(1.0 + 0.2)


def test_goals_in_a_loss_are_tripled() -> None:
    participant = _participant()
    score = participant.performance_score(goals=1, teammate_goals=0, opponent_goals=3, is_goalkeeper=False)
    assert score == pytest.approx(1.0 + 0.2 * 3.0)


def test_goalkeeper_clean_sheet_bonuses() -> None:
    participant = _participant()
    conceded = [
        participant.performance_score(goals=0, teammate_goals=4, opponent_goals=opponent_goals, is_goalkeeper=True)
        for opponent_goals in (0, 1, 2, 3)
    ]
    assert conceded == pytest.approx([1.5, 1.3, 1.1, 1.0])


def test_goalkeeper_goals_use_goalkeeper_multiplier() -> None:
    participant = _participant()
    score = participant.performance_score(goals=1, teammate_goals=0, opponent_goals=0, is_goalkeeper=True)
    assert score == pytest.approx(1.0 + 0.5 + 0.35 + 0.2 * 1.5)


def test_goal_bonus_is_non_decreasing_in_goals_for_fixed_outcome() -> None:
    participant = _participant()
    winning = [
        participant.performance_score(goals=goals, teammate_goals=3, opponent_goals=0, is_goalkeeper=False)
        for goals in (1, 2, 3, 4, 6)
    ]
    losing = [
        participant.performance_score(goals=goals, teammate_goals=0, opponent_goals=9, is_goalkeeper=False)
        for goals in (1, 2, 3, 4, 6)
    ]
    assert winning == sorted(winning)
    assert losing == sorted(losing)
    assert winning[2] == pytest.approx(1.0 + 0.35 * 1.5 ** (1.0 / 3.0))


def test_performance_score_is_always_positive() -> None:
    participant = _participant()
    for goals in range(0, 5):
        for teammate_goals in range(0, 4):
            for opponent_goals in range(0, 6):
                for is_goalkeeper in (False, True):
                    score = participant.performance_score(
                        goals=goals,
                        teammate_goals=teammate_goals,
                        opponent_goals=opponent_goals,
                        is_goalkeeper=is_goalkeeper,
                    )
                    assert score > 0.0
