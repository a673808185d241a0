"""Weekly workout plan generator.

Pipeline:
1. Clamp the weekly goal and seed the generator from (week start, regeneration count)
2. Split workout days into strength and cardio days
3. Lay the days out across the week
4. Filter the template catalog by equipment
5. Schedule muscle groups for strength days
6. Select exercises for every workout day

The generator is a pure function of its inputs. It never reads the clock
and never raises for sparse data; days the catalog cannot fill simply get
fewer exercises.
"""

from collections.abc import Collection, Mapping, Sequence
from datetime import date

from loguru import logger

from fitquest.domains.fitness.enums import EquipmentAccess, MuscleGroup, WorkoutType
from fitquest.domains.fitness.models import ExerciseTemplate, PlannedDay, PlayerProfile, WeeklyPlan
from fitquest.plans.distribution import DaySlot, distribute_days
from fitquest.plans.equipment import filter_templates
from fitquest.plans.exercise_selector import (
    PLAN_CARDIO_NAMES,
    select_cardio_exercise,
    select_strength_exercises,
)
from fitquest.plans.muscle_schedule import build_muscle_group_schedule
from fitquest.plans.observability import PlannerStage, log_event, log_stage_event, timing
from fitquest.core.rng import SeededRNG, seed_for_week
from fitquest.plans.split import calculate_split

DAY_LABELS: tuple[str, ...] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")

REST_THEME = "REST"
CARDIO_THEME = "CARDIO"

# Used only if the schedule is shorter than the number of strength days
FALLBACK_MUSCLE_GROUPS: tuple[tuple[MuscleGroup, ...], ...] = (
    (MuscleGroup.CHEST,),
    (MuscleGroup.BACK,),
    (MuscleGroup.LEGS,),
)

MIN_WEEKLY_GOAL = 1
MAX_WEEKLY_GOAL = 7


def clamp_weekly_goal(weekly_goal: int) -> int:
    return max(MIN_WEEKLY_GOAL, min(MAX_WEEKLY_GOAL, weekly_goal))


def strength_theme(muscle_groups: Sequence[MuscleGroup]) -> str:
    """Display theme for a strength day, e.g. "CHEST + BACK"."""
    return " + ".join(group.display_name.upper() for group in muscle_groups)


def generate_plan(
    profile: PlayerProfile,
    templates: Sequence[ExerciseTemplate],
    week_start: date,
    requirements: Mapping[str, Collection[EquipmentAccess]] | None = None,
) -> WeeklyPlan:
    """Generate the weekly plan for a player.

    Args:
        profile: Player preference snapshot
        templates: Exercise template catalog (custom templates are ignored)
        week_start: First day of the week being planned; seeds the plan
        requirements: Template name -> allowed equipment; defaults to the catalog table

    Returns:
        WeeklyPlan with seven days ordered Sunday to Saturday
    """
    with timing("planner.generate"):
        weekly_goal = clamp_weekly_goal(profile.weekly_workout_goal)
        if weekly_goal != profile.weekly_workout_goal:
            logger.debug(f"Weekly goal {profile.weekly_workout_goal} clamped to {weekly_goal}")

        rng = SeededRNG(seed_for_week(week_start, profile.plan_regeneration_count))

        split = calculate_split(weekly_goal, profile.workout_style, profile.fitness_goals)
        log_stage_event(
            PlannerStage.SPLIT,
            "success",
            meta={"strength_days": split.strength_days, "cardio_days": split.cardio_days},
        )

        day_slots = distribute_days(weekly_goal, split.strength_days, split.cardio_days, rng)
        log_stage_event(PlannerStage.DISTRIBUTE, "success", meta={"layout": ",".join(slot.value for slot in day_slots)})

        available = filter_templates(templates, profile.equipment_access, requirements)
        strength_templates = [t for t in available if t.workout_type == WorkoutType.STRENGTH]
        cardio_templates = [
            t for t in available if t.workout_type == WorkoutType.CARDIO and t.name in PLAN_CARDIO_NAMES
        ]
        log_stage_event(
            PlannerStage.FILTER,
            "success",
            meta={"strength_templates": len(strength_templates), "cardio_templates": len(cardio_templates)},
        )

        schedule = build_muscle_group_schedule(
            strength_day_count=split.strength_days,
            focus_areas=profile.focus_areas,
            fitness_level=profile.fitness_level,
            has_build_muscle_goal=profile.has_build_muscle_goal,
            rng=rng,
        )
        log_stage_event(PlannerStage.SCHEDULE, "success", meta={"strength_days": len(schedule)})

        days: list[PlannedDay] = []
        strength_index = 0
        cardio_index = 0

        for day_index, slot in enumerate(day_slots):
            label = DAY_LABELS[day_index]

            if slot is DaySlot.REST:
                days.append(
                    PlannedDay(
                        day_of_week=day_index + 1,
                        label=label,
                        exercises=(),
                        is_rest_day=True,
                        theme=REST_THEME,
                    )
                )
                continue

            if slot is DaySlot.STRENGTH:
                if strength_index < len(schedule):
                    groups = schedule[strength_index]
                else:
                    groups = list(FALLBACK_MUSCLE_GROUPS[strength_index % len(FALLBACK_MUSCLE_GROUPS)])
                strength_index += 1

                exercises = select_strength_exercises(groups, strength_templates, profile.fitness_level, rng)
                days.append(
                    PlannedDay(
                        day_of_week=day_index + 1,
                        label=label,
                        exercises=tuple(exercises),
                        is_rest_day=False,
                        theme=strength_theme(groups),
                    )
                )
                continue

            exercise = select_cardio_exercise(cardio_templates, cardio_index, rng)
            cardio_index += 1
            if exercise is None:
                logger.warning(f"No cardio template available for {label}; equipment={[e.value for e in profile.equipment_access]}")

            days.append(
                PlannedDay(
                    day_of_week=day_index + 1,
                    label=label,
                    exercises=(exercise,) if exercise else (),
                    is_rest_day=False,
                    theme=CARDIO_THEME,
                )
            )

        log_stage_event(
            PlannerStage.SELECT,
            "success",
            meta={"exercises": sum(len(day.exercises) for day in days)},
        )

        plan = WeeklyPlan(days=tuple(days), workout_day_count=weekly_goal)

    log_event(
        "plan_generated",
        week_start=week_start.isoformat(),
        regeneration_count=profile.plan_regeneration_count,
        workout_days=len(plan.workout_days),
    )
    return plan
