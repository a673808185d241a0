"""XP awarded for logged workouts.

Cardio templates represent a full session (120-225 base XP); strength
templates a single exercise (30-50 base XP). Strength XP scales with lifted
volume, cardio XP with duration and calories, and both are multiplied by
the daily streak bonus.
"""

from collections.abc import Iterable

from fitquest.domains.fitness.enums import WorkoutType
from fitquest.domains.fitness.models import ExerciseTemplate

BASE_XP_VALUES: dict[str, int] = {
    # Cardio
    "Run": 200,
    "Walk": 120,
    "Cycling": 175,
    "Swimming": 225,
    "Stair Climber": 200,
    # Chest
    "Barbell Bench Press": 45,
    "Dumbbell Bench Press": 40,
    "Incline Bench Press": 40,
    "Chest Fly": 35,
    # Back
    "Lat Pulldown": 40,
    "Seated Row": 40,
    "Pull-ups": 45,
    # Shoulders
    "Shoulder Press": 40,
    "Lateral Raises": 30,
    # Biceps
    "Barbell Curl": 30,
    "Dumbbell Curl": 30,
    # Triceps
    "Triceps Pushdown": 30,
    "Overhead Triceps Extension": 30,
    # Legs
    "Squats": 50,
    "Leg Press": 45,
    "Leg Extensions": 35,
    "Leg Curls": 35,
    "Lunges": 40,
    "Deadlift": 50,
    # Core
    "Plank": 30,
    "Cable Crunch": 30,
    "Russian Twists": 30,
}

DEFAULT_BASE_XP = 35  # custom workouts
DAILY_BONUS_XP = 25  # first workout of the day

MAX_VOLUME_BONUS = 2.0
MAX_CARDIO_MULTIPLE = 5

# (minimum streak, multiplier), highest threshold first
STREAK_MULTIPLIERS: tuple[tuple[int, float], ...] = (
    (30, 2.0),
    (14, 1.5),
    (7, 1.25),
    (3, 1.1),
)


def base_xp_for(workout_name: str, templates: Iterable[ExerciseTemplate] | None = None) -> int:
    """Base XP for a template name.

    A matching entry in ``templates`` (usually the loaded catalog) wins over the
    built-in table; unknown names get the custom workout XP.
    """
    if templates is not None:
        for template in templates:
            if template.name == workout_name:
                return template.base_xp
    return BASE_XP_VALUES.get(workout_name, DEFAULT_BASE_XP)


def calculate_strength_xp(base_xp: int, weight: float, reps: int, sets: int) -> int:
    """Strength XP: base scaled by lifted volume (weight x reps x sets / 1000), bonus capped at +200%."""
    volume_score = (weight * (reps * sets)) / 1000.0
    volume_multiplier = 1.0 + min(volume_score, MAX_VOLUME_BONUS)
    return int(base_xp * volume_multiplier)


def calculate_cardio_xp(
    base_xp: int,
    duration_minutes: int,
    steps: int | None = None,  # noqa: ARG001
    calories: int | None = None,
) -> int:
    """Cardio XP: base scaled by hours of activity plus calories / 200, capped at 5x base."""
    duration_multiplier = 1.0 + (duration_minutes / 60.0)
    intensity_bonus = calories / 200.0 if calories is not None else 0.0
    total = base_xp * duration_multiplier + intensity_bonus
    return int(min(total, float(base_xp * MAX_CARDIO_MULTIPLE)))


def streak_multiplier(streak: int) -> float:
    for minimum, multiplier in STREAK_MULTIPLIERS:
        if streak >= minimum:
            return multiplier
    return 1.0


def streak_bonus_description(streak: int) -> str | None:
    """Display text for the streak bonus, e.g. "+25% streak bonus"; None without a bonus."""
    multiplier = streak_multiplier(streak)
    if multiplier <= 1.0:
        return None
    percentage = round((multiplier - 1.0) * 100)
    return f"+{percentage}% streak bonus"


def calculate_total_xp(
    base_xp: int,
    workout_type: WorkoutType,
    streak: int,
    is_first_workout_of_day: bool,
    weight: float | None = None,
    reps: int | None = None,
    sets: int | None = None,
    duration_minutes: int | None = None,
    steps: int | None = None,
    calories: int | None = None,
) -> int:
    """Total XP for a logged workout with streak and daily bonuses.

    Args:
        base_xp: Template base XP
        workout_type: Strength or cardio
        streak: Current daily streak
        is_first_workout_of_day: Adds the daily bonus after the streak multiplier
        weight: Strength weight
        reps: Strength reps per set
        sets: Strength sets
        duration_minutes: Cardio duration
        steps: Cardio steps
        calories: Cardio calories

    Returns:
        XP to award
    """
    if workout_type == WorkoutType.STRENGTH:
        xp = calculate_strength_xp(base_xp, weight or 0.0, reps or 0, sets or 0)
    else:
        xp = calculate_cardio_xp(base_xp, duration_minutes or 0, steps=steps, calories=calories)

    xp = int(xp * streak_multiplier(streak))

    if is_first_workout_of_day:
        xp += DAILY_BONUS_XP

    return xp
