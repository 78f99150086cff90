"""Workout log data model.

A WorkoutLog is created once by the session recorder and never mutated.
Snapshot is the whole persisted application state: the history
(newest-first), the streak counter and the custom exercise registry.
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SNAPSHOT_VERSION = 1

LoadStatus = Literal["loaded", "not_found", "corrupt"]


class WorkoutSet(BaseModel):
    """One performed block of repetitions.

    Attributes:
        reps: Repetitions performed (always >= 1)
        weight: Load in pounds (0 for bodyweight or unspecified)
    """

    model_config = ConfigDict(frozen=True)

    reps: int = Field(ge=1)
    weight: int = Field(default=0, ge=0)


class WorkoutLog(BaseModel):
    """One completed workout for a single exercise.

    Attributes:
        date: Local calendar date of the session (YYYY-MM-DD)
        timestamp: Absolute instant the session was committed
        exercise_id: Exercise name the sets belong to
        sets: Ordered, non-empty sequence of sets
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    timestamp: datetime
    exercise_id: str = Field(alias="exerciseId")
    sets: tuple[WorkoutSet, ...] = Field(min_length=1)

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        return date.fromisoformat(value).isoformat()


class Snapshot(BaseModel):
    """Full application state as persisted in the single storage slot.

    Attributes:
        version: Snapshot schema version
        streak: Consecutive local days with at least one logged workout
        logs: Workout history, most recent first
        custom_exercises: User-added exercise names keyed by category id
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: int = SNAPSHOT_VERSION
    streak: int = Field(default=0, ge=0)
    logs: tuple[WorkoutLog, ...] = ()
    custom_exercises: dict[str, tuple[str, ...]] = Field(default_factory=dict, alias="customExercises")
