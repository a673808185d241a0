"""Strength/cardio split calculation.

Decides how many of the week's workout days are strength days and how many
are cardio days from the preferred workout style and the selected goals.
Deterministic, no randomness.
"""

import math
from collections.abc import Collection
from typing import NamedTuple

from fitquest.domains.fitness.enums import FitnessGoal, WorkoutStyle

# Share of strength days by workout style; unset / not sure / balanced use the default
STYLE_STRENGTH_RATIOS: dict[WorkoutStyle, float] = {
    WorkoutStyle.WEIGHTS: 0.8,
    WorkoutStyle.CARDIO: 0.2,
}
DEFAULT_STRENGTH_RATIO = 0.5


class SplitResult(NamedTuple):
    strength_days: int
    cardio_days: int


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_split(
    weekly_goal: int,
    style: WorkoutStyle | None,
    goals: Collection[FitnessGoal],
) -> SplitResult:
    """Split the weekly goal into strength and cardio days.

    Algorithm:
    1. strength = round(goal * ratio) with the ratio chosen by style
    2. build_muscle moves one day cardio -> strength (if any cardio day)
    3. improve_cardio / train_for_event moves one day strength -> cardio (if any strength day)
    4. lose_weight moves one day strength -> cardio (if more than one strength day)
    5. Clamp strength to [0, goal]; cardio is the remainder

    Args:
        weekly_goal: Workout days per week, already clamped to 1-7
        style: Preferred workout style
        goals: Selected fitness goals

    Returns:
        SplitResult whose fields sum to ``weekly_goal``
    """
    ratio = STYLE_STRENGTH_RATIOS.get(style, DEFAULT_STRENGTH_RATIO) if style else DEFAULT_STRENGTH_RATIO

    strength_days = _round_half_up(weekly_goal * ratio)
    cardio_days = weekly_goal - strength_days

    if FitnessGoal.BUILD_MUSCLE in goals and cardio_days > 0:
        strength_days += 1
        cardio_days -= 1
    if (FitnessGoal.IMPROVE_CARDIO in goals or FitnessGoal.TRAIN_FOR_EVENT in goals) and strength_days > 0:
        cardio_days += 1
        strength_days -= 1
    if FitnessGoal.LOSE_WEIGHT in goals and strength_days > 1:
        cardio_days += 1
        strength_days -= 1

    strength_days = max(0, min(weekly_goal, strength_days))
    return SplitResult(strength_days=strength_days, cardio_days=weekly_goal - strength_days)
