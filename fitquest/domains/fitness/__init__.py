"""Fitness domain - enums and immutable models shared by planner and progression."""

from fitquest.domains.fitness.enums import (
    EquipmentAccess,
    FitnessGoal,
    FitnessLevel,
    FocusArea,
    MuscleGroup,
    WorkoutStyle,
    WorkoutType,
)
from fitquest.domains.fitness.models import (
    ExerciseTemplate,
    PlannedDay,
    PlannedExercise,
    PlayerProfile,
    WeeklyPlan,
)

__all__ = [
    "EquipmentAccess",
    "ExerciseTemplate",
    "FitnessGoal",
    "FitnessLevel",
    "FocusArea",
    "MuscleGroup",
    "PlannedDay",
    "PlannedExercise",
    "PlayerProfile",
    "WeeklyPlan",
    "WorkoutStyle",
    "WorkoutType",
]
