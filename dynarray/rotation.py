"""
dynarray: rotation.py
---------------------
Cyclic rotations of the live prefix of a DynamicArray.

    rotate_right    last element moves to index 0
    rotate_left     first element moves to the end

The n-step variants normalise `count` with euclidean_division, so any
signed count (including huge or negative ones) lands in [0, size).
Rotating an empty array raises EmptyArrayError.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Optional

import numpy as np

from .array import DynamicArray
from .errors import PreconditionViolation
from .invariants import guard_invariants

if TYPE_CHECKING:
    from .audit import AuditLog

# Rotation counts are 32-bit signed integers.
INT_MIN = int(np.iinfo(np.int32).min)


# -------------------------------------------------------------------
# Count normalisation
# -------------------------------------------------------------------

def euclidean_division(a: int, b: int) -> int:
    """
    Non-negative remainder of a / b, always in [0, |b|).

    A zero divisor yields 0 (no rotation), as does INT_MIN / -1.
    """
    if b == 0:
        return 0
    if a == INT_MIN and b == -1:
        return 0
    # truncated remainder, sign follows a
    r = abs(a) % abs(b)
    if a < 0:
        r = -r
    if r < 0:
        r += abs(b)
    return r


def _count(operation: str, count) -> int:
    try:
        return operator.index(count)
    except TypeError as exc:
        raise PreconditionViolation(
            f"{operation}: count must be an integer, got {type(count).__name__}"
        ) from exc


def _shift(arr: DynamicArray, steps: int) -> None:
    """Cyclically shift the live prefix `steps` places to the right."""
    if steps:
        live = arr.buffer[: arr.length]
        live[:] = np.roll(live, steps)


# -------------------------------------------------------------------
# Single-step rotations
# -------------------------------------------------------------------

@guard_invariants("rotate_right")
def rotate_right(arr: DynamicArray) -> None:
    arr._require_nonempty("rotate_right")
    _shift(arr, 1)


@guard_invariants("rotate_left")
def rotate_left(arr: DynamicArray) -> None:
    arr._require_nonempty("rotate_left")
    _shift(arr, -1)


# -------------------------------------------------------------------
# Multi-step rotations
# -------------------------------------------------------------------

@guard_invariants("rotate_right_n")
def rotate_right_n(arr: DynamicArray, count: int) -> None:
    """Rotate right euclidean_division(count, size) times."""
    arr._require_nonempty("rotate_right_n")
    rotations = euclidean_division(_count("rotate_right_n", count), arr.length)
    _shift(arr, rotations)


@guard_invariants("rotate_left_n")
def rotate_left_n(arr: DynamicArray, count: int) -> None:
    """Rotate left euclidean_division(count, size) times."""
    arr._require_nonempty("rotate_left_n")
    rotations = euclidean_division(_count("rotate_left_n", count), arr.length)
    _shift(arr, -rotations)


# -------------------------------------------------------------------
# Audited wrapper
# -------------------------------------------------------------------

def audited_rotate(
    arr: DynamicArray,
    direction: str,
    count: int = 1,
    log: Optional["AuditLog"] = None,
    note: str = ""
) -> "AuditLog":
    """
    Rotate `count` steps in `direction` ("right" or "left") and record
    the rotation into `log` (a new AuditLog if none is given). When
    `log` is the array's own audit log the rotation is recorded once,
    under the rotate_*_n operation name.

    Example:
        log = audited_rotate(arr, "right", -3, note="realign")
    """
    from .audit import audit_cycle

    direction = direction.lower()
    if direction == "right":
        rotate_right_n(arr, count)
    elif direction == "left":
        rotate_left_n(arr, count)
    else:
        raise ValueError("Invalid direction: must be 'right' or 'left'")

    if log is not None and log is arr.audit:
        # the guard on rotate_*_n already recorded into the array's own log
        return log

    op = f"rotate_{direction}({_count('audited_rotate', count):+d})"
    return audit_cycle(arr, op, log=log, note=note)


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    arr = DynamicArray.from_iterable([1, 2, 3, 4, 5])
    rotate_right_n(arr, -3)
    assert arr.to_list() == [4, 5, 1, 2, 3], arr.to_list()
    rotate_left_n(arr, 2)
    assert arr.to_list() == [1, 2, 3, 4, 5], arr.to_list()
    print("rotation.py self-check passed ✓")
