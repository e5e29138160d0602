# dynarray: invariants.py
# -------------------------------------------------------------------
# Structural invariants of a DynamicArray.
#
# Every live array must satisfy:
#     0 <= length <= allocated
#     len(buffer) == allocated, buffer.dtype == dtype
#     allocated == DEFAULT_CAPACITY * 2**k
#
# A destroyed array holds no region and has length == allocated == 0.
# -------------------------------------------------------------------

from __future__ import annotations

import functools
import logging
from typing import Callable, List

from .config import CONFIG
from .errors import InvariantViolation

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Verification utilities
# -------------------------------------------------------------------

def is_valid_capacity(capacity: int) -> bool:
    """True if `capacity` is the default capacity times a power of two."""
    base = CONFIG["default_capacity"]
    if capacity < base or capacity % base:
        return False
    q = capacity // base
    return q & (q - 1) == 0


def invariant_failures(arr) -> List[str]:
    """Return a description of every invariant `arr` currently breaks."""
    failures = []

    if arr.destroyed:
        if arr.buffer is not None:
            failures.append("destroyed array still holds a region")
        if arr.length or arr.allocated:
            failures.append(f"destroyed array reports size={arr.length} capacity={arr.allocated}")
        return failures

    if arr.buffer is None:
        failures.append("live array has no region")
        return failures
    if arr.buffer.shape != (arr.allocated,):
        failures.append(f"region holds {arr.buffer.size} slots, capacity says {arr.allocated}")
    if arr.buffer.dtype != arr.dtype:
        failures.append(f"region dtype {arr.buffer.dtype} != {arr.dtype}")
    if not 0 <= arr.length <= arr.allocated:
        failures.append(f"size {arr.length} outside [0, {arr.allocated}]")
    if not is_valid_capacity(arr.allocated):
        failures.append(f"capacity {arr.allocated} is not {CONFIG['default_capacity']} * 2**k")
    return failures


def verify_invariants(arr) -> bool:
    return not invariant_failures(arr)


def check_invariants(arr, operation: str = "check") -> None:
    """Raise InvariantViolation if `arr` is inconsistent."""
    failures = invariant_failures(arr)
    if failures:
        raise InvariantViolation(operation, failures)


# -------------------------------------------------------------------
# Mutation guard decorator
# -------------------------------------------------------------------

def guard_invariants(operation: str) -> Callable:
    """
    Decorator for operations that may mutate an array (first argument).

    After a successful call the array's invariants are checked (when
    CONFIG["check_invariants"] is set) and the call is appended to the
    array's audit log, if one is attached. A call that raises is neither
    checked nor recorded.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(arr, *args, **kwargs):
            result = func(arr, *args, **kwargs)

            if CONFIG["check_invariants"]:
                check_invariants(arr, operation)
            if arr.audit is not None:
                arr.audit.record(arr, operation)

            logger.debug("%s: size=%d capacity=%d", operation, arr.length, arr.allocated)
            return result

        return wrapper

    return decorator
