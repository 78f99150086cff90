"""Set validation for workout submissions.

A workout is accepted or rejected as a whole: one set without a usable
reps value rejects every set in the submission. Weight never fails
validation; anything unusable becomes 0.

Numeric text means plain decimal notation: an optional sign, at least one
digit, and an optional fractional part that is truncated ("8.5" is 8).
Exponent forms ("1e3") and a bare fraction (".5") are not numeric, so
reps must be written the way a reps field shows them.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from loguru import logger

from gympulse.workouts.errors import MissingRepsError
from gympulse.workouts.types import WorkoutSet

RawSet = Mapping[str, object]

_INTEGER_TEXT = re.compile(r"^\s*([+-]?\d+)(?:\.\d*)?\s*$")


@dataclass(frozen=True)
class SetValidationResult:
    """Outcome of validating a submission.

    Exactly one of sets or error is set.
    """

    sets: tuple[WorkoutSet, ...] | None = None
    error: MissingRepsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def coerce_int(value: object) -> int | None:
    """Coerce a form value to an integer, or None when it is not numeric.

    Ints pass through, finite floats truncate, strings must be plain decimal
    text. Booleans are not numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _INTEGER_TEXT.match(value)
        if match is None:
            return None
        return int(match.group(1))
    return None


def coerce_set(raw: RawSet, index: int) -> WorkoutSet:
    """Convert one raw entry into a WorkoutSet.

    Args:
        raw: Raw entry with "reps" and optional "weight"
        index: Position of the entry in the submission

    Returns:
        Validated WorkoutSet

    Raises:
        MissingRepsError: If reps is absent, empty, non-numeric or below 1
    """
    raw_reps = raw.get("reps")
    reps = coerce_int(raw_reps)
    if reps is None or reps < 1:
        raise MissingRepsError(index, raw_reps)

    weight = coerce_int(raw.get("weight"))
    if weight is None or weight < 0:
        weight = 0

    return WorkoutSet(reps=reps, weight=weight)


def validate_sets(raw_sets: Sequence[RawSet]) -> SetValidationResult:
    """Validate a full submission of raw sets.

    Order and count are preserved on success. The first invalid entry
    fails the whole submission.

    Args:
        raw_sets: Raw set entries as collected from the input form

    Returns:
        SetValidationResult with either the coerced sets or a MissingRepsError
    """
    if not raw_sets:
        return SetValidationResult(error=MissingRepsError(0, None))

    try:
        sets = tuple(coerce_set(raw, index) for index, raw in enumerate(raw_sets))
    except MissingRepsError as e:
        logger.bind(set_index=e.set_index).info("Rejected workout submission: missing reps")
        return SetValidationResult(error=e)

    return SetValidationResult(sets=sets)
