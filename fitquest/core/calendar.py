"""Calendar week helpers shared by the planner and streak tracking."""

from datetime import date, timedelta

from fitquest.config.settings import settings

DAYS_IN_WEEK = 7

FIRST_WEEKDAYS: frozenset[str] = frozenset({"sunday", "monday"})


def start_of_week(day: date, first_weekday: str | None = None) -> date:
    """First day of the calendar week containing ``day``.

    Args:
        day: Any date in the week
        first_weekday: "sunday" or "monday"; defaults to the configured calendar

    Returns:
        Date of the week start

    Raises:
        ValueError: If ``first_weekday`` is not sunday or monday
    """
    weekday = (first_weekday or settings.first_weekday).lower()
    if weekday not in FIRST_WEEKDAYS:
        raise ValueError(f"first_weekday must be one of {sorted(FIRST_WEEKDAYS)}, got {first_weekday!r}")

    if weekday == "monday":
        days_back = day.weekday()
    else:
        days_back = (day.weekday() + 1) % DAYS_IN_WEEK
    return day - timedelta(days=days_back)
