"""Day distribution across the calendar week.

Spreads the workout days evenly over a Monday-first preference order and
alternates strength and cardio days so that the same type does not repeat
back to back while the other type is still available.
"""

from enum import StrEnum

from fitquest.core.rng import SeededRNG

DAYS_PER_WEEK = 7

# Slot indices are 0 = Sunday ... 6 = Saturday; Monday is preferred first, Sunday last
PREFERRED_DAY_ORDER: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 0)


class DaySlot(StrEnum):
    """Type of a day in the weekly layout."""

    REST = "rest"
    STRENGTH = "strength"
    CARDIO = "cardio"


def select_workout_indices(weekly_goal: int) -> list[int]:
    """Pick evenly spaced slot indices for ``weekly_goal`` workout days.

    Args:
        weekly_goal: Workout days per week (1-7)

    Returns:
        Slot indices in assignment order
    """
    if weekly_goal >= DAYS_PER_WEEK:
        return list(range(DAYS_PER_WEEK))
    return [PREFERRED_DAY_ORDER[(i * DAYS_PER_WEEK) // weekly_goal] for i in range(weekly_goal)]


def interleave_day_types(strength_days: int, cardio_days: int) -> list[DaySlot]:
    """Alternate strength and cardio days, leading with the more common type.

    Ties lead with strength. Once one type runs out the rest are filled with
    the other type.
    """
    remaining = {DaySlot.STRENGTH: strength_days, DaySlot.CARDIO: cardio_days}
    lead = DaySlot.STRENGTH if strength_days >= cardio_days else DaySlot.CARDIO
    other = DaySlot.CARDIO if lead is DaySlot.STRENGTH else DaySlot.STRENGTH

    types: list[DaySlot] = []
    last: DaySlot | None = None
    for _ in range(strength_days + cardio_days):
        if remaining[lead] > 0 and remaining[other] > 0:
            pick = other if last is lead else lead
        elif remaining[lead] > 0:
            pick = lead
        else:
            pick = other
        types.append(pick)
        remaining[pick] -= 1
        last = pick
    return types


def distribute_days(
    weekly_goal: int,
    strength_days: int,
    cardio_days: int,
    rng: SeededRNG,  # noqa: ARG001
) -> list[DaySlot]:
    """Lay out the week as seven slots (0 = Sunday ... 6 = Saturday).

    Args:
        weekly_goal: Workout days per week (1-7)
        strength_days: Number of strength days
        cardio_days: Number of cardio days
        rng: Plan generator (currently unused; layouts are fixed per goal)

    Returns:
        Seven DaySlot values; unselected days are REST
    """
    slots = [DaySlot.REST] * DAYS_PER_WEEK
    workout_indices = select_workout_indices(weekly_goal)
    types = interleave_day_types(strength_days, cardio_days)

    for day_index, day_type in zip(workout_indices, types, strict=False):
        slots[day_index] = day_type

    return slots
