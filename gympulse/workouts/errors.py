"""Error types for workout logging.

Standard error codes:
- MISSING_REPS: A submitted set has no usable reps value
- PERSISTENCE_FAILED: The snapshot could not be written to storage
- CORRUPT_DATA: A stored snapshot exists but cannot be read
- INVALID_DATE: A session date override is not a calendar date
"""

from pathlib import Path


class GymPulseError(Exception):
    """Base exception for workout logging errors.

    Attributes:
        code: Stable error code
        message: Human-readable description
    """

    code = "GYMPULSE_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.code}: {message}")


class MissingRepsError(GymPulseError):
    """Raised when a set is submitted without a positive numeric reps value."""

    code = "MISSING_REPS"

    def __init__(self, set_index: int, raw_value: object = None):
        self.set_index = set_index
        self.raw_value = raw_value
        super().__init__(f"Set {set_index + 1} is missing a valid reps value (got {raw_value!r})")


class PersistenceError(GymPulseError):
    """Raised when the snapshot cannot be written to durable storage."""

    code = "PERSISTENCE_FAILED"

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write snapshot to {path}: {reason}")


class SnapshotCorruptError(GymPulseError):
    """Raised while loading when stored data is present but unreadable.

    Never leaves the store: loading converts it into a "corrupt" load status.
    """

    code = "CORRUPT_DATA"

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Snapshot at {path} is unreadable: {reason}")


class InvalidDateError(GymPulseError):
    """Raised when a session date is not a YYYY-MM-DD calendar date."""

    code = "INVALID_DATE"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Session date {value!r} is not a YYYY-MM-DD calendar date")
