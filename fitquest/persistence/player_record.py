"""Stored player record <-> PlayerProfile conversion.

The host app persists enum selections as raw strings, multi-select fields
joined with commas (e.g. ``"full_gym,bodyweight"``). This module is the only
place that knows about that format; planner code only sees enums.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fitquest.domains.fitness.enums import (
    EquipmentAccess,
    FitnessGoal,
    FitnessLevel,
    FocusArea,
    WorkoutStyle,
)
from fitquest.domains.fitness.models import PlayerProfile
from fitquest.errors import PlayerRecordError

E = TypeVar("E", bound=StrEnum)

RAW_SEPARATOR = ","


class PlayerRecord(BaseModel):
    """Player preference fields as stored by the host app."""

    model_config = ConfigDict(extra="ignore")

    weekly_workout_goal: int = 3
    workout_style_raw: str | None = None
    fitness_level_raw: str | None = None
    fitness_goals_raw: str = ""
    equipment_access_raw: str = ""
    focus_areas_raw: str = ""
    plan_regeneration_count: int = Field(default=0, ge=0)


def _parse_one(enum_cls: type[E], raw: str | None, field: str) -> E | None:
    if not raw:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        logger.warning(f"Ignoring unknown {field} value: {raw!r}")
        return None


def _parse_many(enum_cls: type[E], raw: str, field: str) -> tuple[E, ...]:
    """Split a comma-joined raw field, dropping unknown and duplicate values."""
    values: list[E] = []
    for part in raw.split(RAW_SEPARATOR):
        value = _parse_one(enum_cls, part.strip(), field)
        if value is not None and value not in values:
            values.append(value)
    return tuple(values)


def _join(values: Iterable[StrEnum]) -> str:
    return RAW_SEPARATOR.join(value.value for value in values)


def record_to_profile(record: PlayerRecord) -> PlayerProfile:
    """Decode a stored record into a planner profile.

    Unknown raw values are logged and dropped; the weekly goal is passed through
    unclamped (the generator clamps it).
    """
    return PlayerProfile(
        weekly_workout_goal=record.weekly_workout_goal,
        workout_style=_parse_one(WorkoutStyle, record.workout_style_raw, "workout_style"),
        fitness_goals=_parse_many(FitnessGoal, record.fitness_goals_raw, "fitness_goal"),
        equipment_access=_parse_many(EquipmentAccess, record.equipment_access_raw, "equipment_access"),
        focus_areas=_parse_many(FocusArea, record.focus_areas_raw, "focus_area"),
        fitness_level=_parse_one(FitnessLevel, record.fitness_level_raw, "fitness_level"),
        plan_regeneration_count=record.plan_regeneration_count,
    )


def profile_to_record(profile: PlayerProfile) -> PlayerRecord:
    """Encode a profile back into its stored form."""
    return PlayerRecord(
        weekly_workout_goal=profile.weekly_workout_goal,
        workout_style_raw=profile.workout_style.value if profile.workout_style else None,
        fitness_level_raw=profile.fitness_level.value if profile.fitness_level else None,
        fitness_goals_raw=_join(profile.fitness_goals),
        equipment_access_raw=_join(profile.equipment_access),
        focus_areas_raw=_join(profile.focus_areas),
        plan_regeneration_count=profile.plan_regeneration_count,
    )


def load_player_record(data: dict) -> PlayerRecord:
    """Validate raw stored data.

    Raises:
        PlayerRecordError: If required fields have the wrong type
    """
    try:
        return PlayerRecord.model_validate(data)
    except ValidationError as e:
        raise PlayerRecordError(f"Invalid player record: {e}") from e
