"""Daily streak computation.

Pure function of the last logged date, today's date and the current
streak. The caller decides whether to store the result.
"""

from datetime import date

from gympulse.workouts.types import WorkoutLog


def days_between(earlier: str, later: str) -> int:
    """Whole calendar days between two YYYY-MM-DD dates (absolute value).

    Dates carry no time of day, so there is no partial-day noise to round.
    """
    return abs((date.fromisoformat(later) - date.fromisoformat(earlier)).days)


def next_streak(history: tuple[WorkoutLog, ...] | list[WorkoutLog], today: str, current_streak: int) -> int:
    """Compute the streak after logging a session on `today`.

    Rules (only the most recent entry is consulted):
    - No history → 1 (first session ever)
    - Last session today → unchanged (same-day re-logging)
    - Last session yesterday → current + 1
    - Larger gap → 1 (the new session starts a fresh streak)

    Args:
        history: Workout history, most recent first
        today: Local calendar date of the new session (YYYY-MM-DD)
        current_streak: Streak before the new session

    Returns:
        New streak value
    """
    last_date = history[0].date if history else None

    if last_date == today:
        return current_streak
    if last_date is None:
        return 1

    diff_days = days_between(last_date, today)
    if diff_days == 1:
        return current_streak + 1
    if diff_days > 1:
        return 1
    return current_streak
