"""
dynarray: growable contiguous arrays
====================================

Defines the canonical import interface for the package.

    - DynamicArray: contiguous NumPy-backed sequence with doubling growth
    - Self-organizing search (find_transposition)
    - Whole-buffer rotation with Euclidean normalisation of counts
    - Invariant guard on every mutating operation
    - Optional audit log of operations
"""

from __future__ import annotations

# -------------------------------------------------------------------
# Core imports
# -------------------------------------------------------------------

from .array import (
    DynamicArray,
    DEFAULT_CAPACITY,
    DEFAULT_DTYPE,
    NOT_FOUND,
)

from .rotation import (
    euclidean_division,
    rotate_right,
    rotate_left,
    rotate_right_n,
    rotate_left_n,
    audited_rotate,
)

from .invariants import (
    check_invariants,
    verify_invariants,
    is_valid_capacity,
)

from .audit import (
    AuditEntry,
    AuditLog,
    audit_cycle,
)

from .errors import (
    DynamicArrayError,
    PreconditionViolation,
    IndexOutOfRange,
    EmptyArrayError,
    ValueOutOfRange,
    UseAfterDestroy,
    ResourceExhausted,
    InvariantViolation,
)

from .config import CONFIG, configure_logging

# -------------------------------------------------------------------
# Module Metadata
# -------------------------------------------------------------------

__version__ = "1.0.0"
__summary__ = "Growable contiguous integer arrays with self-organizing search and rotation."

__all__ = [
    # array
    "DynamicArray",
    "DEFAULT_CAPACITY",
    "DEFAULT_DTYPE",
    "NOT_FOUND",

    # rotation
    "euclidean_division",
    "rotate_right",
    "rotate_left",
    "rotate_right_n",
    "rotate_left_n",
    "audited_rotate",

    # invariants
    "check_invariants",
    "verify_invariants",
    "is_valid_capacity",

    # auditing
    "AuditEntry",
    "AuditLog",
    "audit_cycle",

    # errors
    "DynamicArrayError",
    "PreconditionViolation",
    "IndexOutOfRange",
    "EmptyArrayError",
    "ValueOutOfRange",
    "UseAfterDestroy",
    "ResourceExhausted",
    "InvariantViolation",

    # config
    "CONFIG",
    "configure_logging",
]
