"""Canonical enums for player preferences and exercise templates.

All enums are string-based. Member values are the raw strings the host app
persists, so converting between stored records and domain objects is a plain
``Enum(value)`` lookup done at the persistence boundary.
"""

from enum import StrEnum


# -----------------------------
# Workout Type
# -----------------------------
class WorkoutType(StrEnum):
    """Kind of workout a template represents."""

    CARDIO = "cardio"
    STRENGTH = "strength"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# -----------------------------
# Muscle Groups
# -----------------------------
class MuscleGroup(StrEnum):
    """Muscle group targeted by a strength template.

    Declaration order matters: iterating the enum yields the "all muscle groups"
    list used by full-body days.
    """

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CORE = "core"
    LEGS = "legs"
    FULL_BODY = "fullBody"

    @property
    def display_name(self) -> str:
        if self is MuscleGroup.FULL_BODY:
            return "Full Body"
        return self.value.capitalize()


# -----------------------------
# Equipment
# -----------------------------
class EquipmentAccess(StrEnum):
    """Equipment the player has access to."""

    FULL_GYM = "full_gym"
    HOME_GYM = "home_gym"
    BODYWEIGHT = "bodyweight"
    CARDIO_EQUIPMENT = "cardio_equipment"

    @property
    def display_name(self) -> str:
        return _EQUIPMENT_DISPLAY_NAMES[self]


_EQUIPMENT_DISPLAY_NAMES: dict[EquipmentAccess, str] = {
    EquipmentAccess.FULL_GYM: "Full Gym",
    EquipmentAccess.HOME_GYM: "Home Gym",
    EquipmentAccess.BODYWEIGHT: "Bodyweight Only",
    EquipmentAccess.CARDIO_EQUIPMENT: "Cardio Equipment",
}


# -----------------------------
# Focus Areas
# -----------------------------
class FocusArea(StrEnum):
    """Body region the player asked to focus on."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    LEGS = "legs"
    GLUTES = "glutes"
    FULL_BODY = "full_body"

    @property
    def display_name(self) -> str:
        if self is FocusArea.FULL_BODY:
            return "Full Body"
        return self.value.capitalize()

    @property
    def muscle_groups(self) -> list[MuscleGroup]:
        """Muscle groups used by templates for this focus area."""
        if self is FocusArea.FULL_BODY:
            return list(MuscleGroup)
        return list(_FOCUS_AREA_MUSCLE_GROUPS[self])


_FOCUS_AREA_MUSCLE_GROUPS: dict[FocusArea, tuple[MuscleGroup, ...]] = {
    FocusArea.CHEST: (MuscleGroup.CHEST,),
    FocusArea.BACK: (MuscleGroup.BACK,),
    FocusArea.SHOULDERS: (MuscleGroup.SHOULDERS,),
    FocusArea.ARMS: (MuscleGroup.BICEPS, MuscleGroup.TRICEPS),
    FocusArea.CORE: (MuscleGroup.CORE,),
    FocusArea.LEGS: (MuscleGroup.LEGS,),
    FocusArea.GLUTES: (MuscleGroup.LEGS,),
}


# -----------------------------
# Fitness Level
# -----------------------------
class FitnessLevel(StrEnum):
    """Self-reported training experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# -----------------------------
# Workout Style
# -----------------------------
class WorkoutStyle(StrEnum):
    """Preferred mix of strength and cardio training."""

    WEIGHTS = "weights"
    CARDIO = "cardio"
    BALANCED = "balanced"
    NOT_SURE = "not_sure"

    @property
    def display_name(self) -> str:
        return _STYLE_DISPLAY_NAMES[self]


_STYLE_DISPLAY_NAMES: dict[WorkoutStyle, str] = {
    WorkoutStyle.WEIGHTS: "Weights & Strength",
    WorkoutStyle.CARDIO: "Cardio & Endurance",
    WorkoutStyle.BALANCED: "Balanced Mix",
    WorkoutStyle.NOT_SURE: "Not sure yet",
}


# -----------------------------
# Fitness Goals
# -----------------------------
class FitnessGoal(StrEnum):
    """Goals selected during onboarding."""

    BUILD_MUSCLE = "build_muscle"
    LOSE_WEIGHT = "lose_weight"
    IMPROVE_CARDIO = "improve_cardio"
    BUILD_HABIT = "build_habit"
    INCREASE_ENERGY = "increase_energy"
    TRAIN_FOR_EVENT = "train_for_event"

    @property
    def display_name(self) -> str:
        return _GOAL_DISPLAY_NAMES[self]


_GOAL_DISPLAY_NAMES: dict[FitnessGoal, str] = {
    FitnessGoal.BUILD_MUSCLE: "Build muscle & strength",
    FitnessGoal.LOSE_WEIGHT: "Lose weight",
    FitnessGoal.IMPROVE_CARDIO: "Improve cardio",
    FitnessGoal.BUILD_HABIT: "Build a workout habit",
    FitnessGoal.INCREASE_ENERGY: "Increase energy",
    FitnessGoal.TRAIN_FOR_EVENT: "Train for an event",
}
