"""Tests for all-or-nothing set validation."""

import pytest

from gympulse.workouts.errors import MissingRepsError
from gympulse.workouts.types import WorkoutSet
from gympulse.workouts.validation import validate_sets


def test_valid_sets_are_coerced_in_order():
    result = validate_sets([{"reps": "10", "weight": "135"}, {"reps": "8", "weight": "145"}])

    assert result.ok
    assert result.error is None
    assert result.sets == (WorkoutSet(reps=10, weight=135), WorkoutSet(reps=8, weight=145))


def test_numeric_values_are_accepted():
    result = validate_sets([{"reps": 12, "weight": 20}, {"reps": 6.0, "weight": 42.9}])

    assert result.sets == (WorkoutSet(reps=12, weight=20), WorkoutSet(reps=6, weight=42))


def test_set_count_and_order_preserved():
    raw = [{"reps": str(n), "weight": str(n * 10)} for n in range(1, 11)]

    result = validate_sets(raw)

    assert result.sets is not None
    assert [s.reps for s in result.sets] == list(range(1, 11))


@pytest.mark.parametrize("weight", [None, "", "heavy", "-20", float("nan")])
def test_unusable_weight_defaults_to_zero(weight):
    result = validate_sets([{"reps": "5", "weight": weight}])

    assert result.ok
    assert result.sets == (WorkoutSet(reps=5, weight=0),)


def test_absent_weight_defaults_to_zero():
    result = validate_sets([{"reps": "15"}])

    assert result.sets == (WorkoutSet(reps=15, weight=0),)


@pytest.mark.parametrize("reps", [None, "", "   ", "abc", "0", 0, -3, "-1", True, float("inf")])
def test_missing_or_invalid_reps_rejected(reps):
    result = validate_sets([{"reps": reps, "weight": "100"}])

    assert not result.ok
    assert result.sets is None
    assert isinstance(result.error, MissingRepsError)
    assert result.error.code == "MISSING_REPS"


def test_absent_reps_key_rejected():
    result = validate_sets([{"weight": "100"}])

    assert isinstance(result.error, MissingRepsError)


def test_one_invalid_set_rejects_whole_submission():
    result = validate_sets(
        [
            {"reps": "10", "weight": "135"},
            {"reps": "", "weight": "145"},
            {"reps": "6", "weight": "155"},
        ]
    )

    assert result.sets is None
    assert result.error is not None
    assert result.error.set_index == 1


def test_empty_submission_rejected():
    result = validate_sets([])

    assert isinstance(result.error, MissingRepsError)


@pytest.mark.parametrize("reps", ["1e3", ".5", "1_000", "0x10", "5 reps"])
def test_non_decimal_reps_text_rejected(reps):
    result = validate_sets([{"reps": reps}])

    assert isinstance(result.error, MissingRepsError)


@pytest.mark.parametrize(("reps", "expected"), [("8.5", 8), (" 12 ", 12), ("+3", 3), ("07", 7)])
def test_decimal_reps_text_truncates(reps, expected):
    result = validate_sets([{"reps": reps}])

    assert result.sets == (WorkoutSet(reps=expected, weight=0),)
