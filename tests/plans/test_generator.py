"""Tests for weekly plan generation.

Tests verify that:
- Every plan has seven days and exactly the clamped number of workout days
- No day repeats an exercise
- Plans are reproducible per (week, regeneration count) and change when either changes
- Equipment restrictions are honored
- Level-based muscle splits show up in day themes
"""

from datetime import date

import pytest

from fitquest.core.calendar import start_of_week
from fitquest.domains.fitness.enums import (
    EquipmentAccess,
    FitnessGoal,
    FitnessLevel,
    FocusArea,
    MuscleGroup,
    WorkoutStyle,
    WorkoutType,
)
from fitquest.domains.fitness.models import ExerciseTemplate, PlayerProfile
from fitquest.plans.exercise_selector import PLAN_CARDIO_NAMES
from fitquest.plans.generator import DAY_LABELS, clamp_weekly_goal, generate_plan, strength_theme
from fitquest.plans.muscle_schedule import LEGS, PULL, PUSH


def _profiles() -> list[PlayerProfile]:
    profiles = []
    for weekly_goal in range(1, 8):
        for level in [None, *FitnessLevel]:
            for style in [None, *WorkoutStyle]:
                profiles.append(PlayerProfile(weekly_workout_goal=weekly_goal, workout_style=style, fitness_level=level))
        profiles.append(
            PlayerProfile(
                weekly_workout_goal=weekly_goal,
                fitness_goals=(FitnessGoal.BUILD_MUSCLE,),
                focus_areas=(FocusArea.ARMS, FocusArea.LEGS),
                fitness_level=FitnessLevel.ADVANCED,
            )
        )
    return profiles


@pytest.mark.parametrize("weekly_goal", range(1, 8))
def test_plan_has_seven_days_and_goal_workout_days(weekly_goal, templates, requirements, week_start):
    plan = generate_plan(PlayerProfile(weekly_workout_goal=weekly_goal), templates, week_start, requirements)
    assert len(plan.days) == 7
    assert plan.workout_day_count == weekly_goal
    assert len(plan.workout_days) == weekly_goal


@pytest.mark.parametrize(("weekly_goal", "expected"), [(0, 1), (-3, 1), (9, 7)])
def test_out_of_range_goal_is_clamped(weekly_goal, expected, templates, requirements, week_start):
    plan = generate_plan(PlayerProfile(weekly_workout_goal=weekly_goal), templates, week_start, requirements)
    assert plan.workout_day_count == expected
    assert len(plan.workout_days) == expected
    assert clamp_weekly_goal(weekly_goal) == expected


def test_days_are_ordered_sunday_to_saturday(default_profile, templates, requirements, week_start):
    plan = generate_plan(default_profile, templates, week_start, requirements)
    assert [day.day_of_week for day in plan.days] == list(range(1, 8))
    assert [day.label for day in plan.days] == list(DAY_LABELS)


def test_rest_and_workout_day_shapes(templates, requirements, week_start):
    for profile in _profiles():
        plan = generate_plan(profile, templates, week_start, requirements)
        for day in plan.days:
            if day.is_rest_day:
                assert day.exercises == ()
                assert day.theme == "REST"
            else:
                assert len(day.exercises) >= 1
                assert day.theme != "REST"


def test_no_duplicate_exercises_within_a_day(templates, requirements, week_start):
    for profile in _profiles():
        plan = generate_plan(profile, templates, week_start, requirements)
        for day in plan.days:
            names = [exercise.template_name for exercise in day.exercises]
            assert len(names) == len(set(names))


def test_same_week_and_count_give_identical_plan(templates, requirements, week_start):
    profile = PlayerProfile(weekly_workout_goal=5, fitness_level=FitnessLevel.INTERMEDIATE, plan_regeneration_count=2)
    assert generate_plan(profile, templates, week_start, requirements) == generate_plan(
        profile, templates, week_start, requirements
    )


def test_regeneration_changes_the_plan(templates, requirements, week_start):
    plans = [
        generate_plan(
            PlayerProfile(weekly_workout_goal=5, fitness_level=FitnessLevel.INTERMEDIATE, plan_regeneration_count=count),
            templates,
            week_start,
            requirements,
        )
        for count in range(5)
    ]
    assert any(plan != plans[0] for plan in plans[1:])


def test_new_week_changes_the_plan(templates, requirements):
    profile = PlayerProfile(weekly_workout_goal=5, fitness_level=FitnessLevel.ADVANCED)
    weeks = [date(2026, 10, 4), date(2026, 10, 11), date(2026, 10, 18), date(2026, 10, 25)]
    plans = [generate_plan(profile, templates, week, requirements) for week in weeks]
    assert any(plan != plans[0] for plan in plans[1:])


def test_equipment_restrictions_are_honored(templates, requirements, week_start):
    for equipment in EquipmentAccess:
        for count in range(5):
            profile = PlayerProfile(
                weekly_workout_goal=6,
                equipment_access=(equipment,),
                fitness_level=FitnessLevel.ADVANCED,
                plan_regeneration_count=count,
            )
            plan = generate_plan(profile, templates, week_start, requirements)
            for day in plan.workout_days:
                for exercise in day.exercises:
                    required = requirements.get(exercise.template_name)
                    assert not required or equipment in required


def test_beginner_strength_days_share_full_body_theme(templates, requirements, week_start):
    profile = PlayerProfile(
        weekly_workout_goal=3,
        workout_style=WorkoutStyle.WEIGHTS,
        fitness_goals=(FitnessGoal.BUILD_MUSCLE,),
        fitness_level=FitnessLevel.BEGINNER,
    )
    plan = generate_plan(profile, templates, week_start, requirements)
    themes = [day.theme for day in plan.workout_days]
    assert len(themes) == 3
    assert themes == ["CHEST + BACK + SHOULDERS + BICEPS + TRICEPS + CORE + LEGS + FULL BODY"] * 3


def test_advanced_six_day_week_cycles_push_pull_legs(templates, requirements, week_start):
    profile = PlayerProfile(
        weekly_workout_goal=6,
        workout_style=WorkoutStyle.WEIGHTS,
        fitness_goals=(FitnessGoal.BUILD_MUSCLE,),
        fitness_level=FitnessLevel.ADVANCED,
    )
    plan = generate_plan(profile, templates, week_start, requirements)
    themes = [day.theme for day in plan.workout_days]
    expected = [strength_theme(PUSH), strength_theme(PULL), strength_theme(LEGS)] * 2
    assert themes == expected
    assert themes[0] == "CHEST + SHOULDERS + TRICEPS"


def test_default_three_day_layout(default_profile, templates, requirements, week_start):
    """Unset style, 3 days: strength Mon, cardio Wed, strength Fri."""
    plan = generate_plan(default_profile, templates, week_start, requirements)
    by_label = {day.label: day for day in plan.days}

    assert [label for label, day in by_label.items() if day.is_rest_day] == ["SUN", "TUE", "THU", "SAT"]
    assert by_label["WED"].theme == "CARDIO"
    assert len(by_label["WED"].exercises) == 1
    assert by_label["WED"].exercises[0].template_name in PLAN_CARDIO_NAMES
    for label in ("MON", "FRI"):
        assert all(e.workout_type == WorkoutType.STRENGTH for e in by_label[label].exercises)
        assert len(by_label[label].exercises) == 3


def test_empty_catalog_degrades_to_empty_workout_days(default_profile, week_start):
    plan = generate_plan(default_profile, [], week_start, {})
    assert len(plan.workout_days) == 3
    assert all(day.exercises == () for day in plan.days)


def test_cardio_unavailable_leaves_day_empty(templates, requirements, week_start):
    """A catalog without cardio templates still schedules cardio days, just without exercises."""
    strength_only = [t for t in templates if t.workout_type == WorkoutType.STRENGTH]
    profile = PlayerProfile(weekly_workout_goal=4, workout_style=WorkoutStyle.CARDIO)
    plan = generate_plan(profile, strength_only, week_start, requirements)
    cardio_days = [day for day in plan.days if day.theme == "CARDIO"]
    assert cardio_days
    assert all(day.exercises == () and not day.is_rest_day for day in cardio_days)


def test_custom_templates_never_planned(templates, requirements, week_start):
    with_custom = [
        *templates,
        ExerciseTemplate(name="My Curl", workout_type=WorkoutType.STRENGTH, muscle_group=MuscleGroup.BICEPS, is_custom=True),
    ]
    for count in range(5):
        profile = PlayerProfile(weekly_workout_goal=7, fitness_level=FitnessLevel.ADVANCED, plan_regeneration_count=count)
        plan = generate_plan(profile, with_custom, week_start, requirements)
        assert all(e.template_name != "My Curl" for day in plan.days for e in day.exercises)


def test_generator_uses_catalog_requirements_by_default(templates, week_start):
    profile = PlayerProfile(weekly_workout_goal=4, equipment_access=(EquipmentAccess.BODYWEIGHT,))
    plan = generate_plan(profile, templates, week_start)
    names = {e.template_name for day in plan.days for e in day.exercises}
    assert "Leg Press" not in names
    assert "Barbell Bench Press" not in names


def test_any_day_of_the_week_seeds_the_same_plan(default_profile, templates, requirements):
    plans = {
        generate_plan(default_profile, templates, start_of_week(date(2026, 10, d), "sunday"), requirements)
        for d in range(18, 25)
    }
    assert len(plans) == 1
