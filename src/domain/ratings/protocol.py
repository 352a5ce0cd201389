"""Shared protocols and enums for rating systems."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable


class Outcome(str, Enum):
    """Categorical result of a match from one side's point of view."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


def outcome_from_goal_difference(goal_difference: int) -> Outcome:
    if goal_difference > 0:
        return Outcome.WIN
    if goal_difference < 0:
        return Outcome.LOSS
    return Outcome.DRAW


E = TypeVar("E")


@runtime_checkable
class MatchLevelCalculator(Protocol[E]):
    """Contract for calculators that settle one match at a time."""

    def process_match(self, match: object) -> list[E]: ...

    def compute_deltas(self, match: object) -> dict[int, float]: ...


__all__ = [
    "MatchLevelCalculator",
    "Outcome",
    "outcome_from_goal_difference",
]
