"""Coefficients for the 5v5 match Elo engine."""

from __future__ import annotations

from dataclasses import dataclass

NO_GOALKEEPER = -1
TEAM_SIZE = 5


@dataclass(frozen=True)
class EloParameters:
    elo_diff_divisor: float = 400.0

    # Result scores
    draw_score: float = 0.5
    draw_dampening: float = 0.5

    # Experience blend (q)
    experience_weight: float = 0.01
    min_q_factor: float = 0.5

    # Volatility (k)
    k_factor_high: float = 32.0
    k_factor_mid: float = 48.0
    k_factor_low: float = 64.0
    k_factor_high_threshold: float = 2000.0
    k_factor_mid_threshold: float = 1800.0

    # Fatigue
    fatigue_reference_minutes: float = 20.0

    # Chemistry
    chemistry_neutral_score: float = 0.5
    chemistry_full_confidence_games: int = 10
    chemistry_min_coefficient: float = 0.9
    chemistry_max_coefficient: float = 1.1

    # Goalkeeper
    clean_sheet_bonus: float = 0.5
    one_conceded_bonus: float = 0.3
    two_conceded_bonus: float = 0.1
    goalkeeper_goal_multiplier: float = 1.5

    # Clutch goals
    clutch_loss_to_draw_bonus: float = 0.25
    clutch_draw_to_win_bonus: float = 0.35
    clutch_loss_to_win_bonus: float = 0.5

    # Goal counts
    one_goal_bonus: float = 0.2
    two_goal_bonus: float = 0.35
    loss_goal_multiplier: float = 3.0

    zero_sum_balancing: bool = True
