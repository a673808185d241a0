"""Daily and weekly streak helpers.

All functions take the reference date explicitly; nothing here reads the
clock. Weeks follow the configured calendar (see ``start_of_week``).
"""

from datetime import date, timedelta

from fitquest.core.calendar import start_of_week


def is_yesterday(day: date, reference: date) -> bool:
    return day == reference - timedelta(days=1)


def is_first_workout_of_day(last_workout_date: date | None, today: date) -> bool:
    return last_workout_date is None or last_workout_date != today


def calculate_streak(current_streak: int, last_workout_date: date | None, today: date) -> int:
    """Daily streak after logging a workout on ``today``.

    - First workout ever: 1
    - Already worked out today: unchanged
    - Worked out yesterday: +1
    - Otherwise the streak restarts at 1
    """
    if last_workout_date is None:
        return 1
    if last_workout_date == today:
        return current_streak
    if is_yesterday(last_workout_date, today):
        return current_streak + 1
    return 1


def is_streak_at_risk(last_workout_date: date | None, today: date) -> bool:
    """A running streak breaks unless the player works out today."""
    if last_workout_date is None:
        return False
    return last_workout_date != today


def is_same_week(first: date, second: date, first_weekday: str | None = None) -> bool:
    return start_of_week(first, first_weekday) == start_of_week(second, first_weekday)


def is_previous_week(day: date, reference: date, first_weekday: str | None = None) -> bool:
    return is_same_week(day, reference - timedelta(weeks=1), first_weekday)


def format_streak(streak: int) -> str:
    return "1 day" if streak == 1 else f"{streak} days"


def format_weekly_streak(streak: int) -> str:
    return "1 week" if streak == 1 else f"{streak} weeks"


def weekly_progress_text(completed: int, goal: int) -> str:
    """Encouragement line for the weekly goal card."""
    if completed == 0:
        return "Start your week strong!"
    if completed < goal:
        remaining = goal - completed
        if remaining == 1:
            return "Just 1 more day to hit your goal!"
        return f"{remaining} more days to hit your goal"
    return "Weekly goal achieved!"
