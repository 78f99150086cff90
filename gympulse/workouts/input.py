"""Input-level handling of raw set entries.

This module only shapes what the user typed before submission (clamping
the reps field, splitting set notation). Deciding whether a set is valid
belongs to the validator.
"""

from __future__ import annotations

import re

MAX_REPS_DIGITS = 2

_SET_NOTATION = re.compile(r"^\s*(?P<reps>[^xX@]*?)\s*(?:[xX@]\s*(?P<weight>.*?))?\s*$")


def clamp_reps_input(text: str, max_reps: int = 99) -> str:
    """Clamp a reps field the way the input control does while typing.

    Keeps at most two characters and caps numeric values above max_reps.
    Non-numeric text is passed through for the validator to reject.

    Args:
        text: Raw reps field content
        max_reps: Upper bound for the value

    Returns:
        Clamped field content
    """
    clamped = text[:MAX_REPS_DIGITS]
    if clamped.isdigit() and int(clamped) > max_reps:
        return str(max_reps)
    return clamped


def parse_set_notation(entry: str, max_reps: int = 99) -> dict[str, str]:
    """Split "10x135" style notation into a raw set entry.

    "10x135" and "10@135" give reps "10" and weight "135"; a bare "10"
    leaves weight empty. Reps are clamped as typed input.

    Args:
        entry: Set notation as typed by the user
        max_reps: Upper bound passed to reps clamping

    Returns:
        Raw set mapping with "reps" and "weight" strings
    """
    match = _SET_NOTATION.match(entry)
    reps = match.group("reps") if match else entry
    weight = (match.group("weight") if match else None) or ""
    return {"reps": clamp_reps_input(reps.strip(), max_reps), "weight": weight.strip()}
