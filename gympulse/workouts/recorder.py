"""Session recorder - commits workouts and keeps the streak current.

Flow for a commit:
1. Validate raw sets (all-or-nothing)
2. Build the WorkoutLog for today's local date
3. Compute the next streak from the current history
4. Prepend the log and store the streak in one snapshot write

Failures are returned as result values; nothing raises across this API.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Literal

from loguru import logger

from gympulse.utils.clock import LocalClock
from gympulse.workouts.errors import GymPulseError, InvalidDateError, PersistenceError
from gympulse.workouts.store import LoadResult, WorkoutLogStore
from gympulse.workouts.streak import next_streak
from gympulse.workouts.types import WorkoutLog
from gympulse.workouts.validation import RawSet, validate_sets

CommitStatus = Literal["committed", "invalid", "persist_failed"]


@dataclass(frozen=True)
class CommitResult:
    """Outcome of committing a workout.

    Attributes:
        status: committed, invalid (validation failed) or persist_failed
        streak: Streak after the call (unchanged unless committed)
        log: The stored WorkoutLog when committed
        error: MissingRepsError, InvalidDateError or PersistenceError when not committed
    """

    status: CommitStatus
    streak: int
    log: WorkoutLog | None = None
    error: GymPulseError | None = None

    @property
    def ok(self) -> bool:
        return self.status == "committed"


@dataclass(frozen=True)
class CustomExerciseResult:
    """Outcome of registering a custom exercise.

    Attributes:
        status: committed, invalid (blank name) or persist_failed
        exercises: Custom exercises of the category after the call
        error: PersistenceError when the write failed
    """

    status: CommitStatus
    exercises: tuple[str, ...]
    error: PersistenceError | None = None


class SessionRecorder:
    """Single owner of the workout history and streak.

    The renderer reads through get_history/get_streak and writes only
    through commit/add_custom_exercise.
    """

    def __init__(self, store: WorkoutLogStore, clock: LocalClock | None = None) -> None:
        self.store = store
        self.clock = clock or LocalClock()

    @classmethod
    def open(cls, path: Path, clock: LocalClock | None = None) -> tuple["SessionRecorder", LoadResult]:
        """Create a recorder with state loaded from the snapshot at path."""
        store = WorkoutLogStore(path)
        result = store.load()
        if result.status == "corrupt":
            logger.bind(path=str(path)).warning("Starting with empty history because stored data was unreadable")
        return cls(store, clock), result

    def get_streak(self) -> int:
        return self.store.streak

    def get_history(self) -> tuple[WorkoutLog, ...]:
        return self.store.all()

    def get_custom_exercises(self) -> dict[str, tuple[str, ...]]:
        return self.store.custom_exercises

    def commit(self, exercise_id: str, raw_sets: Sequence[RawSet], today: str | None = None) -> CommitResult:
        """Validate and store a workout, updating the streak.

        Args:
            exercise_id: Exercise the sets were performed for
            raw_sets: Raw set entries ({"reps": ..., "weight": ...})
            today: Local calendar date override, YYYY-MM-DD (defaults to the clock's today)

        Returns:
            CommitResult describing what happened
        """
        current_streak = self.store.streak

        validation = validate_sets(raw_sets)
        if not validation.ok or validation.sets is None:
            return CommitResult(status="invalid", streak=current_streak, error=validation.error)

        if today is None:
            session_date = self.clock.today()
        else:
            try:
                session_date = date.fromisoformat(today).isoformat()
            except ValueError:
                return CommitResult(status="invalid", streak=current_streak, error=InvalidDateError(today))

        log = WorkoutLog(
            date=session_date,
            timestamp=self.clock.now(),
            exercise_id=exercise_id,
            sets=validation.sets,
        )
        new_streak = next_streak(self.store.all(), session_date, current_streak)

        try:
            self.store.append(log, streak=new_streak)
        except PersistenceError as e:
            return CommitResult(status="persist_failed", streak=current_streak, error=e)

        logger.bind(
            exercise=exercise_id,
            date=session_date,
            sets=len(log.sets),
            streak=new_streak,
        ).info("Workout committed")
        return CommitResult(status="committed", streak=new_streak, log=log)

    def add_custom_exercise(self, category_id: str, name: str) -> CustomExerciseResult:
        """Register a user-defined exercise under a category.

        Blank names are ignored. Duplicates are allowed.
        """
        current = self.store.custom_exercises.get(category_id, ())
        clean_name = name.strip()
        if not clean_name:
            return CustomExerciseResult(status="invalid", exercises=current)

        try:
            snapshot = self.store.add_custom_exercise(category_id, clean_name)
        except PersistenceError as e:
            return CustomExerciseResult(status="persist_failed", exercises=current, error=e)

        logger.bind(category=category_id, exercise=clean_name).info("Custom exercise added")
        return CustomExerciseResult(status="committed", exercises=snapshot.custom_exercises[category_id])
