"""Muscle-group scheduling for strength days.

Two strategies:
- Focus areas: used when the player wants to build muscle and picked focus
  areas; the targeted groups are dealt round-robin over the strength days.
- Default split by level: full body (beginner), upper/lower (intermediate),
  push/pull/legs (advanced).
"""

from collections.abc import Sequence

from fitquest.domains.fitness.enums import FitnessLevel, FocusArea, MuscleGroup
from fitquest.core.rng import SeededRNG

UPPER_BODY: tuple[MuscleGroup, ...] = (
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.SHOULDERS,
    MuscleGroup.BICEPS,
    MuscleGroup.TRICEPS,
)
LOWER_BODY: tuple[MuscleGroup, ...] = (MuscleGroup.LEGS, MuscleGroup.CORE)

PUSH: tuple[MuscleGroup, ...] = (MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS)
PULL: tuple[MuscleGroup, ...] = (MuscleGroup.BACK, MuscleGroup.BICEPS)
LEGS: tuple[MuscleGroup, ...] = (MuscleGroup.LEGS, MuscleGroup.CORE)

# Groups for a day the focus areas could not fill
EMPTY_DAY_FALLBACK: tuple[MuscleGroup, ...] = (MuscleGroup.CORE,)


def build_muscle_group_schedule(
    strength_day_count: int,
    focus_areas: Sequence[FocusArea],
    fitness_level: FitnessLevel | None,
    has_build_muscle_goal: bool,
    rng: SeededRNG,
) -> list[list[MuscleGroup]]:
    """Build the muscle groups for each strength day, in strength-day order.

    Args:
        strength_day_count: Number of strength days in the week
        focus_areas: Selected focus areas, in selection order
        fitness_level: Player level (None is treated as beginner)
        has_build_muscle_goal: Whether build_muscle is among the goals
        rng: Plan generator

    Returns:
        One list of muscle groups per strength day
    """
    if strength_day_count <= 0:
        return []

    level = fitness_level or FitnessLevel.BEGINNER

    if has_build_muscle_goal and focus_areas:
        return build_focus_area_schedule(strength_day_count, focus_areas, level, rng)

    return build_default_schedule(strength_day_count, level, rng)


def build_focus_area_schedule(
    strength_day_count: int,
    focus_areas: Sequence[FocusArea],
    level: FitnessLevel,  # noqa: ARG001
    rng: SeededRNG,  # noqa: ARG001
) -> list[list[MuscleGroup]]:
    """Deal the focus-area muscle groups round-robin across strength days."""
    if FocusArea.FULL_BODY in focus_areas:
        groups = list(MuscleGroup)
    else:
        # First-seen order, no duplicates (arms and glutes share groups with others)
        groups = list(dict.fromkeys(group for area in focus_areas for group in area.muscle_groups))

    schedule: list[list[MuscleGroup]] = [[] for _ in range(strength_day_count)]
    for i, group in enumerate(groups):
        schedule[i % strength_day_count].append(group)

    return [day if day else list(EMPTY_DAY_FALLBACK) for day in schedule]


def build_default_schedule(
    strength_day_count: int,
    level: FitnessLevel,
    rng: SeededRNG,  # noqa: ARG001
) -> list[list[MuscleGroup]]:
    """Level-based split used when no focus areas apply."""
    if level == FitnessLevel.BEGINNER:
        return [list(MuscleGroup) for _ in range(strength_day_count)]

    if level == FitnessLevel.INTERMEDIATE:
        return [list(UPPER_BODY if i % 2 == 0 else LOWER_BODY) for i in range(strength_day_count)]

    rotation = (PUSH, PULL, LEGS)
    return [list(rotation[i % len(rotation)]) for i in range(strength_day_count)]
