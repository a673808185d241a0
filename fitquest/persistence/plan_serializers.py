"""Serializers for WeeklyPlan - JSON serialization utilities."""

from pydantic import BaseModel, ConfigDict, Field

from fitquest.domains.fitness.enums import MuscleGroup, WorkoutType
from fitquest.domains.fitness.models import PlannedDay, PlannedExercise, WeeklyPlan


class PlannedExerciseSchema(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    template_name: str
    workout_type: WorkoutType
    muscle_group: MuscleGroup | None = None
    icon_name: str
    base_xp: int


class PlannedDaySchema(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    day_of_week: int = Field(ge=1, le=7)
    label: str
    exercises: list[PlannedExerciseSchema]
    is_rest_day: bool
    theme: str


class WeeklyPlanSchema(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    days: list[PlannedDaySchema] = Field(min_length=7, max_length=7)
    workout_day_count: int = Field(ge=1, le=7)


def serialize_plan(plan: WeeklyPlan) -> dict:
    """Serialize WeeklyPlan to JSON-serializable dict.

    Args:
        plan: WeeklyPlan to serialize

    Returns:
        JSON-serializable dictionary
    """
    schema = WeeklyPlanSchema.model_validate(plan, from_attributes=True)
    return schema.model_dump(mode="json")


def deserialize_plan(data: dict) -> WeeklyPlan:
    """Deserialize dict to WeeklyPlan.

    Args:
        data: Dictionary containing plan data

    Returns:
        WeeklyPlan object
    """
    schema = WeeklyPlanSchema.model_validate(data)
    return WeeklyPlan(
        days=tuple(
            PlannedDay(
                day_of_week=day.day_of_week,
                label=day.label,
                exercises=tuple(
                    PlannedExercise(
                        template_name=exercise.template_name,
                        workout_type=exercise.workout_type,
                        muscle_group=exercise.muscle_group,
                        icon_name=exercise.icon_name,
                        base_xp=exercise.base_xp,
                    )
                    for exercise in day.exercises
                ),
                is_rest_day=day.is_rest_day,
                theme=day.theme,
            )
            for day in schema.days
        ),
        workout_day_count=schema.workout_day_count,
    )
