"""Local calendar clock.

"Today" is always the date on the user's local wall clock, never the UTC
date, so a session logged at 1am local time belongs to that local day.
"""

from datetime import date, datetime


class LocalClock:
    """Wall-clock source resolved in the machine's local timezone."""

    def now(self) -> datetime:
        """Current instant as a timezone-aware datetime in local time."""
        return datetime.now().astimezone()

    def today(self) -> str:
        """Current local calendar date as YYYY-MM-DD."""
        return local_date(self.now()).isoformat()


class FixedClock(LocalClock):
    """Clock pinned to a single instant.

    Used for replaying sessions and in tests.
    """

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.astimezone()
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


def local_date(instant: datetime) -> date:
    """Calendar date of an instant on the local wall clock.

    Aware datetimes are converted to the local offset first; naive ones are
    taken as local wall-clock time already.
    """
    if instant.tzinfo is None:
        return instant.date()
    return instant.astimezone().date()
