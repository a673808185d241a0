"""Core immutable data models for weekly plan generation.

This module defines:
- The player preference snapshot the generator reads
- Exercise templates from the catalog
- The planned output (exercises, days, week)

All models are frozen (immutable) so a generated plan can be shared and
rendered without defensive copies.
"""

from dataclasses import dataclass

from fitquest.domains.fitness.enums import (
    EquipmentAccess,
    FitnessGoal,
    FitnessLevel,
    FocusArea,
    MuscleGroup,
    WorkoutStyle,
    WorkoutType,
)


# -----------------------------
# Inputs
# -----------------------------
@dataclass(frozen=True)
class PlayerProfile:
    """Read-only snapshot of the player preferences used for planning.

    Attributes:
        weekly_workout_goal: Target workout days per week (clamped to 1-7 by the generator)
        workout_style: Preferred strength/cardio mix, None if never answered
        fitness_goals: Selected goals
        equipment_access: Available equipment (empty means no restriction)
        focus_areas: Selected focus areas, in selection order
        fitness_level: Experience level, None if never answered
        plan_regeneration_count: Bumped by the host app to force a new plan
    """

    weekly_workout_goal: int = 3
    workout_style: WorkoutStyle | None = None
    fitness_goals: tuple[FitnessGoal, ...] = ()
    equipment_access: tuple[EquipmentAccess, ...] = ()
    focus_areas: tuple[FocusArea, ...] = ()
    fitness_level: FitnessLevel | None = None
    plan_regeneration_count: int = 0

    @property
    def has_build_muscle_goal(self) -> bool:
        return FitnessGoal.BUILD_MUSCLE in self.fitness_goals


@dataclass(frozen=True)
class ExerciseTemplate:
    """Named, reusable exercise definition from the catalog.

    Attributes:
        name: Unique template name (also the equipment lookup key)
        workout_type: Strength or cardio
        muscle_group: Targeted muscle group (strength templates only)
        icon_name: Icon reference for rendering
        base_xp: Base XP awarded for the exercise
        is_custom: User-created template, never used for planning
    """

    name: str
    workout_type: WorkoutType
    muscle_group: MuscleGroup | None = None
    icon_name: str = "figure.walk"
    base_xp: int = 50
    is_custom: bool = False


# -----------------------------
# Planned Output
# -----------------------------
@dataclass(frozen=True)
class PlannedExercise:
    """Exercise chosen for a planned day."""

    template_name: str
    workout_type: WorkoutType
    muscle_group: MuscleGroup | None
    icon_name: str
    base_xp: int

    @classmethod
    def from_template(cls, template: ExerciseTemplate, include_muscle_group: bool = True) -> "PlannedExercise":
        return cls(
            template_name=template.name,
            workout_type=template.workout_type,
            muscle_group=template.muscle_group if include_muscle_group else None,
            icon_name=template.icon_name,
            base_xp=template.base_xp,
        )


@dataclass(frozen=True)
class PlannedDay:
    """One day of the weekly plan.

    Attributes:
        day_of_week: 1 = Sunday ... 7 = Saturday
        label: Three-letter day code ("SUN", "MON", ...)
        exercises: Ordered exercises, empty on rest days
        is_rest_day: Whether the day is a rest day
        theme: Display theme ("CHEST + BACK", "CARDIO", "REST")
    """

    day_of_week: int
    label: str
    exercises: tuple[PlannedExercise, ...]
    is_rest_day: bool
    theme: str


@dataclass(frozen=True)
class WeeklyPlan:
    """Complete week, always seven days ordered Sunday to Saturday."""

    days: tuple[PlannedDay, ...]
    workout_day_count: int

    @property
    def workout_days(self) -> list[PlannedDay]:
        return [day for day in self.days if not day.is_rest_day]
