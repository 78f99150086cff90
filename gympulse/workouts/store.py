"""Workout log store backed by a single JSON snapshot.

Every mutation writes the whole state (history, streak, custom exercises)
as one snapshot and only then replaces the in-memory state, so memory and
disk never disagree after a failed write.

Snapshot layout (version 1):
    {"version": 1, "streak": 3, "logs": [...newest first...],
     "customExercises": {"chest": ["Dips"]}}

Snapshots without a version field use the legacy layout (same fields, no
version) and are upgraded in memory on load.
"""

import contextlib
import json
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from gympulse.workouts.errors import PersistenceError, SnapshotCorruptError
from gympulse.workouts.types import SNAPSHOT_VERSION, LoadStatus, Snapshot, WorkoutLog
from gympulse.workouts.validation import coerce_int

LEGACY_VERSION = 0
CORRUPT_SUFFIX = ".corrupt"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of reading the snapshot slot.

    Both not_found and corrupt carry an empty default snapshot.
    """

    status: LoadStatus
    snapshot: Snapshot
    error: SnapshotCorruptError | None = None


def _repair_legacy_log(entry: dict) -> dict:
    """Drop sets the legacy layout stored with unusable reps.

    Legacy writes accepted "0" or negative reps text and stored the parsed
    number. Such sets, and sets that are not objects, are dropped; negative
    weights become 0. A log whose "sets" is not a list is returned as is
    for schema validation to reject.
    """
    if not isinstance(entry.get("sets"), list):
        return entry

    sets = []
    for raw_set in entry["sets"]:
        if not isinstance(raw_set, dict):
            continue
        reps = coerce_int(raw_set.get("reps"))
        if reps is None or reps < 1:
            continue
        weight = coerce_int(raw_set.get("weight"))
        sets.append({"reps": reps, "weight": weight if weight is not None and weight > 0 else 0})

    return {**entry, "sets": sets}


def _migrate(data: dict, path: Path) -> dict:
    """Upgrade raw snapshot data to the current schema version.

    Raises:
        SnapshotCorruptError: If the version is unknown or newer than supported
    """
    version = data.get("version", LEGACY_VERSION)
    if not isinstance(version, int) or isinstance(version, bool):
        raise SnapshotCorruptError(path, f"invalid version field {version!r}")
    if version > SNAPSHOT_VERSION:
        raise SnapshotCorruptError(path, f"snapshot version {version} is newer than supported {SNAPSHOT_VERSION}")

    if version == LEGACY_VERSION:
        # Legacy layout used falsy placeholders for empty state
        logger.bind(path=str(path)).info("Migrating legacy snapshot to version 1")
        logs = data.get("logs") or []
        if isinstance(logs, list):
            repaired = [_repair_legacy_log(entry) if isinstance(entry, dict) else entry for entry in logs]
            # Logs left without sets are dropped; other shapes fail validation
            kept = [entry for entry in repaired if not (isinstance(entry, dict) and entry.get("sets") == [])]
            if len(kept) != len(logs):
                logger.bind(path=str(path), dropped=len(logs) - len(kept)).warning("Dropped legacy logs without valid sets")
            logs = kept
        data = {
            "version": SNAPSHOT_VERSION,
            "streak": data.get("streak") or 0,
            "logs": logs,
            "customExercises": data.get("customExercises") or {},
        }
    return data


def _parse_snapshot(raw: bytes, path: Path) -> Snapshot:
    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise SnapshotCorruptError(path, f"invalid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotCorruptError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotCorruptError(path, f"expected an object, got {type(data).__name__}")

    data = _migrate(data, path)
    try:
        return Snapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotCorruptError(path, f"schema mismatch: {e.error_count()} error(s)") from e


def _quarantine_target(path: Path) -> Path:
    """First free name for a moved-aside snapshot.

    data.json.corrupt when unused, otherwise data.json.corrupt-<timestamp>.
    """
    target = path.with_name(path.name + CORRUPT_SUFFIX)
    if not target.exists():
        return target
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
    candidate = path.with_name(f"{target.name}-{stamp}")
    counter = 1
    while candidate.exists():
        candidate = path.with_name(f"{target.name}-{stamp}-{counter}")
        counter += 1
    return candidate


def _quarantine(path: Path) -> None:
    """Move an unreadable snapshot aside so the next write does not erase it."""
    target = _quarantine_target(path)
    try:
        path.replace(target)
        logger.bind(path=str(path), moved_to=str(target)).warning("Moved unreadable snapshot aside")
    except OSError as e:
        logger.bind(path=str(path), error=str(e)).warning("Could not move unreadable snapshot aside")


def load_snapshot(path: Path) -> LoadResult:
    """Read the snapshot slot.

    Never raises: a missing file is a fresh install and an unreadable one is
    reported as corrupt, both with empty defaults. A file whose content is
    unreadable is moved aside before anything else is written.

    Args:
        path: Snapshot file location

    Returns:
        LoadResult with status loaded, not_found or corrupt
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.bind(path=str(path)).debug("No snapshot found, starting fresh")
        return LoadResult(status="not_found", snapshot=Snapshot())
    except OSError as e:
        error = SnapshotCorruptError(path, str(e))
        logger.bind(path=str(path), error=str(e)).warning("Snapshot unreadable, starting from empty state")
        return LoadResult(status="corrupt", snapshot=Snapshot(), error=error)

    try:
        snapshot = _parse_snapshot(raw, path)
    except SnapshotCorruptError as e:
        logger.bind(path=str(path), reason=e.reason).warning("Snapshot corrupt, starting from empty state")
        _quarantine(path)
        return LoadResult(status="corrupt", snapshot=Snapshot(), error=e)

    logger.bind(path=str(path), logs=len(snapshot.logs), streak=snapshot.streak).debug("Snapshot loaded")
    return LoadResult(status="loaded", snapshot=snapshot)


def write_snapshot(path: Path, snapshot: Snapshot) -> None:
    """Write the full snapshot atomically (temp file + rename).

    Args:
        path: Snapshot file location
        snapshot: State to persist

    Raises:
        PersistenceError: If the directory or file cannot be written
    """
    tmp_path = path.with_name(path.name + ".tmp")
    payload = snapshot.model_dump_json(by_alias=True, indent=2)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as e:
        logger.bind(path=str(path), error=str(e)).error("Failed to write snapshot")
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise PersistenceError(path, str(e)) from e

    logger.bind(path=str(path), logs=len(snapshot.logs), streak=snapshot.streak).debug("Snapshot written")


class WorkoutLogStore:
    """In-memory application state with snapshot persistence.

    The held Snapshot is immutable; mutations build a new one, persist it,
    and swap it in only after the write succeeds.
    """

    def __init__(self, path: Path, snapshot: Snapshot | None = None) -> None:
        self.path = path
        self._snapshot = snapshot or Snapshot()

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def streak(self) -> int:
        return self._snapshot.streak

    @property
    def custom_exercises(self) -> dict[str, tuple[str, ...]]:
        return dict(self._snapshot.custom_exercises)

    def all(self) -> tuple[WorkoutLog, ...]:
        """Workout history, most recent first."""
        return self._snapshot.logs

    def load(self) -> LoadResult:
        """Replace in-memory state with what is stored on disk."""
        result = load_snapshot(self.path)
        self._snapshot = result.snapshot
        return result

    def persist(self, snapshot: Snapshot) -> None:
        """Write snapshot and make it the current state.

        Raises:
            PersistenceError: If the write fails; in-memory state is unchanged
        """
        write_snapshot(self.path, snapshot)
        self._snapshot = snapshot

    def append(self, entry: WorkoutLog, streak: int | None = None) -> Snapshot:
        """Prepend a log entry, optionally with a new streak, in one write.

        Raises:
            PersistenceError: If the write fails
        """
        update: dict[str, object] = {"logs": (entry, *self._snapshot.logs)}
        if streak is not None:
            update["streak"] = streak
        next_snapshot = self._snapshot.model_copy(update=update)
        self.persist(next_snapshot)
        return next_snapshot

    def add_custom_exercise(self, category_id: str, name: str) -> Snapshot:
        """Append an exercise name to a category's custom list and persist.

        Raises:
            PersistenceError: If the write fails
        """
        registry = dict(self._snapshot.custom_exercises)
        registry[category_id] = (*registry.get(category_id, ()), name)
        next_snapshot = self._snapshot.model_copy(update={"custom_exercises": registry})
        self.persist(next_snapshot)
        return next_snapshot
