"""Concrete exercise selection for strength and cardio days."""

from collections.abc import Sequence

from loguru import logger

from fitquest.domains.fitness.enums import FitnessLevel, MuscleGroup
from fitquest.domains.fitness.models import ExerciseTemplate, PlannedExercise
from fitquest.core.rng import SeededRNG

# Cardio templates that make sense as a planned session on their own
PLAN_CARDIO_NAMES: frozenset[str] = frozenset({"Run", "Walk", "Stair Climber"})

TARGET_EXERCISE_COUNTS: dict[FitnessLevel, int] = {
    FitnessLevel.BEGINNER: 3,
    FitnessLevel.INTERMEDIATE: 4,
    FitnessLevel.ADVANCED: 5,
}


def target_exercise_count(fitness_level: FitnessLevel | None) -> int:
    """Exercises per strength day for a level (None counts as beginner)."""
    return TARGET_EXERCISE_COUNTS[fitness_level or FitnessLevel.BEGINNER]


def select_strength_exercises(
    muscle_groups: Sequence[MuscleGroup],
    templates: Sequence[ExerciseTemplate],
    fitness_level: FitnessLevel | None,
    rng: SeededRNG,
) -> list[PlannedExercise]:
    """Pick the exercises for one strength day.

    Each muscle group contributes up to ``target // len(groups)`` (at least one)
    shuffled templates. If the groups cannot fill the day, the remainder comes
    from any other unused template. Names never repeat within the day and the
    result never exceeds the level target.

    Args:
        muscle_groups: Groups scheduled for the day
        templates: Equipment-filtered strength templates
        fitness_level: Player level
        rng: Plan generator

    Returns:
        Planned exercises, possibly fewer than the target if the catalog runs out
    """
    target = target_exercise_count(fitness_level)
    exercises: list[PlannedExercise] = []
    used_names: set[str] = set()

    per_group = max(1, target // max(1, len(muscle_groups)))

    for group in muscle_groups:
        candidates = rng.shuffle([t for t in templates if t.muscle_group == group])
        for template in candidates[:per_group]:
            if template.name in used_names:
                continue
            used_names.add(template.name)
            exercises.append(PlannedExercise.from_template(template))

        if len(exercises) >= target:
            break

    if len(exercises) < target:
        remaining = rng.shuffle([t for t in templates if t.name not in used_names])
        for template in remaining:
            if len(exercises) >= target:
                break
            if template.name in used_names:
                continue
            used_names.add(template.name)
            exercises.append(PlannedExercise.from_template(template))

    if len(exercises) < target:
        logger.debug(
            f"Strength day short of target: groups={[g.value for g in muscle_groups]}, "
            f"selected={len(exercises)}, target={target}"
        )

    return exercises


def select_cardio_exercise(
    templates: Sequence[ExerciseTemplate],
    index: int,
    rng: SeededRNG,
) -> PlannedExercise | None:
    """Pick the session for the ``index``-th cardio day of the week (0-based).

    Returns:
        Planned cardio exercise, or None when no cardio template is available
    """
    if not templates:
        return None
    shuffled = rng.shuffle(templates)
    return PlannedExercise.from_template(shuffled[index % len(shuffled)], include_muscle_group=False)
