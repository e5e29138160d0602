"""
dynarray: errors.py
-------------------
Failure taxonomy for the dynamic array.

    PreconditionViolation  caller broke an operation's contract
                           (bad index, empty array, unrepresentable value,
                           use after destroy)
    ResourceExhausted      the region could not be (re)allocated
    InvariantViolation     internal bookkeeping no longer consistent

Not finding a value is not an error; `find` returns NOT_FOUND instead.
"""

from __future__ import annotations


class DynamicArrayError(Exception):
    """Base class for every error raised by the dynamic array."""


# -------------------------------------------------------------------
# Contract violations
# -------------------------------------------------------------------

class PreconditionViolation(DynamicArrayError):
    """An operation was called in a state its contract forbids."""


class IndexOutOfRange(PreconditionViolation, IndexError):
    def __init__(self, operation: str, index: int, bound: int):
        self.operation = operation
        self.index = index
        self.bound = bound
        super().__init__(f"{operation}: index {index} out of range [0, {bound})")


class EmptyArrayError(PreconditionViolation, IndexError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: array is empty")


class ValueOutOfRange(PreconditionViolation, ValueError):
    """Value cannot be stored in the array's element type."""


class UseAfterDestroy(PreconditionViolation):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: array has been destroyed")


# -------------------------------------------------------------------
# Resource and consistency failures
# -------------------------------------------------------------------

class ResourceExhausted(DynamicArrayError, MemoryError):
    """Allocation or reallocation of the element region failed."""


class InvariantViolation(DynamicArrayError):
    def __init__(self, operation: str, failures: list[str]):
        self.operation = operation
        self.failures = list(failures)
        super().__init__(f"{operation}: invariants violated: " + "; ".join(failures))
