"""Tests for the strength/cardio split calculator.

Tests verify that:
- Style ratios set the starting split
- Goal adjustments apply in a fixed order
- Strength and cardio days always sum to the weekly goal
"""

import itertools

import pytest

from fitquest.domains.fitness.enums import FitnessGoal, WorkoutStyle
from fitquest.plans.split import SplitResult, calculate_split


def test_weights_style_three_days():
    assert calculate_split(3, WorkoutStyle.WEIGHTS, []) == SplitResult(strength_days=2, cardio_days=1)


def test_cardio_style_with_improve_cardio_clamps_to_zero_strength():
    result = calculate_split(4, WorkoutStyle.CARDIO, [FitnessGoal.IMPROVE_CARDIO])
    assert result == SplitResult(strength_days=0, cardio_days=4)


@pytest.mark.parametrize("style", [None, WorkoutStyle.BALANCED, WorkoutStyle.NOT_SURE])
def test_unset_and_balanced_styles_use_even_ratio(style):
    assert calculate_split(4, style, []) == SplitResult(2, 2)


def test_half_days_round_up():
    """5 * 0.5 = 2.5 rounds away from zero."""
    assert calculate_split(5, WorkoutStyle.BALANCED, []) == SplitResult(3, 2)
    assert calculate_split(1, None, []) == SplitResult(1, 0)


def test_build_muscle_moves_cardio_day_to_strength():
    assert calculate_split(5, WorkoutStyle.WEIGHTS, [FitnessGoal.BUILD_MUSCLE]) == SplitResult(5, 0)


def test_build_muscle_without_cardio_days_is_noop():
    assert calculate_split(7, WorkoutStyle.WEIGHTS, [FitnessGoal.BUILD_MUSCLE, FitnessGoal.BUILD_MUSCLE]) == SplitResult(7, 0)
    assert calculate_split(1, None, [FitnessGoal.BUILD_MUSCLE]) == SplitResult(1, 0)


def test_train_for_event_moves_strength_day_to_cardio():
    assert calculate_split(4, WorkoutStyle.BALANCED, [FitnessGoal.TRAIN_FOR_EVENT]) == SplitResult(1, 3)


def test_lose_weight_keeps_at_least_one_strength_day():
    assert calculate_split(4, WorkoutStyle.BALANCED, [FitnessGoal.LOSE_WEIGHT]) == SplitResult(1, 3)
    # Only one strength day: lose_weight leaves it alone
    assert calculate_split(2, WorkoutStyle.CARDIO, [FitnessGoal.LOSE_WEIGHT]) == SplitResult(0, 2)
    assert calculate_split(3, WorkoutStyle.CARDIO, [FitnessGoal.LOSE_WEIGHT]) == SplitResult(1, 2)


def test_adjustments_apply_in_order():
    """build_muscle (+1 strength), then improve_cardio (-1), then lose_weight (-1 if >1 left)."""
    goals = [FitnessGoal.LOSE_WEIGHT, FitnessGoal.IMPROVE_CARDIO, FitnessGoal.BUILD_MUSCLE]
    # 6 * 0.8 = 4.8 -> 5; build -> 6; cardio -> 5; lose_weight -> 4
    assert calculate_split(6, WorkoutStyle.WEIGHTS, goals) == SplitResult(4, 2)


def test_goals_without_split_effect_are_ignored():
    goals = [FitnessGoal.BUILD_HABIT, FitnessGoal.INCREASE_ENERGY]
    assert calculate_split(4, WorkoutStyle.BALANCED, goals) == calculate_split(4, WorkoutStyle.BALANCED, [])


def test_split_always_sums_to_goal():
    styles = [None, *WorkoutStyle]
    goal_sets = [
        list(combo)
        for size in range(len(FitnessGoal) + 1)
        for combo in itertools.combinations(FitnessGoal, size)
    ]
    for weekly_goal in range(1, 8):
        for style in styles:
            for goals in goal_sets:
                result = calculate_split(weekly_goal, style, goals)
                assert result.strength_days + result.cardio_days == weekly_goal
                assert 0 <= result.strength_days <= weekly_goal
