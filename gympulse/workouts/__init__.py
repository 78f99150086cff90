"""Workouts module - session logging and streak continuity.

This module provides:
- Set validation (all-or-nothing)
- Daily streak computation
- Snapshot-backed workout log store
- Session recorder orchestrating commits
"""

from gympulse.workouts.errors import (
    GymPulseError,
    InvalidDateError,
    MissingRepsError,
    PersistenceError,
    SnapshotCorruptError,
)
from gympulse.workouts.recorder import CommitResult, CustomExerciseResult, SessionRecorder
from gympulse.workouts.store import LoadResult, WorkoutLogStore, load_snapshot, write_snapshot
from gympulse.workouts.streak import next_streak
from gympulse.workouts.types import Snapshot, WorkoutLog, WorkoutSet
from gympulse.workouts.validation import SetValidationResult, validate_sets

__all__ = [
    "CommitResult",
    "CustomExerciseResult",
    "GymPulseError",
    "InvalidDateError",
    "LoadResult",
    "MissingRepsError",
    "PersistenceError",
    "SessionRecorder",
    "SetValidationResult",
    "Snapshot",
    "SnapshotCorruptError",
    "WorkoutLog",
    "WorkoutLogStore",
    "WorkoutSet",
    "load_snapshot",
    "next_streak",
    "validate_sets",
    "write_snapshot",
]
