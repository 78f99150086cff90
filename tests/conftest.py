"""Root conftest for all tests.

Shared fixtures: an isolated snapshot path, a pinned clock and a recorder
wired to both.
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from gympulse.utils.clock import FixedClock
from gympulse.workouts.recorder import SessionRecorder
from gympulse.workouts.store import WorkoutLogStore
from gympulse.workouts.types import WorkoutLog, WorkoutSet


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Snapshot location inside a per-test temporary directory."""
    return tmp_path / "gympulse" / "data.json"


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to local noon on 2024-01-01 (same date in any timezone)."""
    return FixedClock(datetime(2024, 1, 1, 12, 0))


@pytest.fixture
def store(data_file: Path) -> WorkoutLogStore:
    return WorkoutLogStore(data_file)


@pytest.fixture
def recorder(store: WorkoutLogStore, fixed_clock: FixedClock) -> SessionRecorder:
    return SessionRecorder(store, fixed_clock)


@pytest.fixture
def make_log():
    """Factory for stored workout logs on a given date."""

    def _make_log(log_date: str, exercise_id: str = "Squats", reps: int = 5, weight: int = 225) -> WorkoutLog:
        return WorkoutLog(
            date=log_date,
            timestamp=datetime.fromisoformat(f"{log_date}T18:00:00").replace(tzinfo=timezone.utc),
            exercise_id=exercise_id,
            sets=(WorkoutSet(reps=reps, weight=weight),),
        )

    return _make_log
