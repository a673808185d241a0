"""Plans module - deterministic weekly workout plan generation.

This module provides:
- Seeded xorshift64 generator for reproducible plans
- Strength/cardio split and weekly day layout
- Muscle-group scheduling and exercise selection
- Equipment filtering of the template catalog
"""

from fitquest.plans.distribution import DaySlot, distribute_days
from fitquest.plans.equipment import filter_templates
from fitquest.plans.exercise_selector import select_cardio_exercise, select_strength_exercises
from fitquest.plans.generator import generate_plan
from fitquest.plans.muscle_schedule import build_muscle_group_schedule
from fitquest.core.rng import SeededRNG, seed_for_week
from fitquest.plans.split import SplitResult, calculate_split

__all__ = [
    "DaySlot",
    "SeededRNG",
    "SplitResult",
    "build_muscle_group_schedule",
    "calculate_split",
    "distribute_days",
    "filter_templates",
    "generate_plan",
    "seed_for_week",
    "select_cardio_exercise",
    "select_strength_exercises",
]
