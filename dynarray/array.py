"""
dynarray: array.py
------------------
The growable buffer: one contiguous, zero-initialised NumPy region of
`allocated` slots, of which the first `length` are live.

Growth doubles the region whenever a size-increasing operation finds
`length + 1 >= allocated`, so at least one free slot remains after every
push or insert. The region never shrinks except through `clear()`, which
returns it to DEFAULT_CAPACITY.
"""

from __future__ import annotations

import logging
import operator
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional, TextIO

import numpy as np

from .config import CONFIG
from .errors import (
    EmptyArrayError,
    IndexOutOfRange,
    PreconditionViolation,
    ResourceExhausted,
    UseAfterDestroy,
    ValueOutOfRange,
)
from .invariants import guard_invariants

if TYPE_CHECKING:
    from .audit import AuditLog

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Canonical Constants
# -------------------------------------------------------------------

DEFAULT_CAPACITY = CONFIG["default_capacity"]
DEFAULT_DTYPE = np.dtype(CONFIG["dtype"])
NOT_FOUND = -1

# Largest region (in bytes) a reallocation may request.
MAX_REGION_BYTES = sys.maxsize

# integer (signed/unsigned) and floating kinds only
SUPPORTED_KINDS = "iuf"


# -------------------------------------------------------------------
# Dynamic Array
# -------------------------------------------------------------------

@dataclass(eq=False)
class DynamicArray:
    """
    Growable contiguous sequence of fixed-width numbers.

    Every instance is monomorphic over `dtype` (int32 unless told
    otherwise). Indices are non-negative; there is no wrap-around for
    negative positions. Once `destroy()` has run every further call
    raises UseAfterDestroy.
    """
    dtype: Any = DEFAULT_DTYPE
    audit: Optional["AuditLog"] = None
    buffer: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    length: int = field(default=0, init=False)
    allocated: int = field(default=0, init=False)
    destroyed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        try:
            self.dtype = np.dtype(self.dtype)
        except TypeError as exc:
            raise PreconditionViolation(f"init: unknown element type {self.dtype!r}") from exc
        if self.dtype.kind not in SUPPORTED_KINDS:
            raise PreconditionViolation(f"init: unsupported element type {self.dtype}")
        if self.audit is None and CONFIG["audit_by_default"]:
            from .audit import AuditLog
            self.audit = AuditLog()
        self._allocate(DEFAULT_CAPACITY)

    # ---------------------------------------------------------------
    # Construction helpers
    # ---------------------------------------------------------------

    @classmethod
    def create(cls, dtype: Any = DEFAULT_DTYPE) -> "DynamicArray":
        return cls(dtype=dtype)

    @classmethod
    def from_iterable(cls, values: Iterable[Any], dtype: Any = DEFAULT_DTYPE) -> "DynamicArray":
        """Build an array by pushing `values` in order."""
        arr = cls(dtype=dtype)
        for value in values:
            arr.push(value)
        return arr

    # ---------------------------------------------------------------
    # Region management
    # ---------------------------------------------------------------

    def _allocate(self, capacity: int) -> None:
        """Replace the region with a fresh zeroed one; live data is dropped."""
        try:
            region = np.zeros(capacity, dtype=self.dtype)
        except MemoryError as exc:
            raise ResourceExhausted(f"could not allocate {capacity} slots of {self.dtype}") from exc
        self.buffer = region
        self.length = 0
        self.allocated = capacity

    def _reallocate(self, capacity: int) -> None:
        """Move the live prefix into a region of `capacity` slots."""
        nbytes = capacity * self.dtype.itemsize
        if nbytes > MAX_REGION_BYTES:
            raise ResourceExhausted(
                f"growing to {capacity} slots needs {nbytes} bytes, limit is {MAX_REGION_BYTES}"
            )
        try:
            region = np.zeros(capacity, dtype=self.dtype)
        except MemoryError as exc:
            raise ResourceExhausted(f"could not grow to {capacity} slots of {self.dtype}") from exc

        region[: self.length] = self.buffer[: self.length]
        logger.debug("reallocated %d -> %d slots (%d live)", self.allocated, capacity, self.length)
        self.buffer = region
        self.allocated = capacity

    def _grow_if_needed(self) -> None:
        if self.length + 1 >= self.allocated:
            self.expand()

    # ---------------------------------------------------------------
    # Precondition checks
    # ---------------------------------------------------------------

    def _require_live(self, operation: str) -> None:
        if self.destroyed:
            raise UseAfterDestroy(operation)

    def _require_nonempty(self, operation: str) -> None:
        self._require_live(operation)
        if self.length == 0:
            raise EmptyArrayError(operation)

    def _index(self, operation: str, index: Any, bound: int) -> int:
        try:
            position = operator.index(index)
        except TypeError as exc:
            raise PreconditionViolation(
                f"{operation}: index must be an integer, got {type(index).__name__}"
            ) from exc
        if not 0 <= position < bound:
            raise IndexOutOfRange(operation, position, bound)
        return position

    def _coerce(self, operation: str, value: Any) -> Any:
        """Validate that `value` fits the element type and return it as a Python scalar."""
        if self.dtype.kind in "iu":
            try:
                number = operator.index(value)
            except TypeError as exc:
                raise ValueOutOfRange(f"{operation}: {value!r} is not an integer") from exc
            info = np.iinfo(self.dtype)
            if not info.min <= number <= info.max:
                raise ValueOutOfRange(
                    f"{operation}: {number} outside [{info.min}, {info.max}] for {self.dtype}"
                )
            return number
        try:
            number = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueOutOfRange(f"{operation}: {value!r} is not a number") from exc
        except OverflowError as exc:
            raise ValueOutOfRange(f"{operation}: {value!r} does not fit {self.dtype}") from exc
        # inf and nan are storable as-is; finite values must not overflow to inf
        limit = float(np.finfo(self.dtype).max)
        if np.isfinite(number) and abs(number) > limit:
            raise ValueOutOfRange(f"{operation}: {number} outside [-{limit}, {limit}] for {self.dtype}")
        return number

    # ---------------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------------

    @guard_invariants("clear")
    def clear(self) -> None:
        """Drop every element and return to the default capacity."""
        self._require_live("clear")
        previous = self.allocated
        self._allocate(DEFAULT_CAPACITY)
        logger.info("cleared array (capacity %d -> %d)", previous, DEFAULT_CAPACITY)

    @guard_invariants("destroy")
    def destroy(self) -> None:
        """Release the region. The array is unusable afterwards."""
        self._require_live("destroy")
        self.buffer = None
        self.length = 0
        self.allocated = 0
        self.destroyed = True
        logger.info("destroyed array")

    def __enter__(self) -> "DynamicArray":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.destroyed:
            self.destroy()

    # ---------------------------------------------------------------
    # Capacity growth
    # ---------------------------------------------------------------

    @guard_invariants("expand")
    def expand(self) -> None:
        """Double the capacity. Size and contents are unchanged."""
        self._require_live("expand")
        self._reallocate(self.allocated << 1)

    # ---------------------------------------------------------------
    # Mutating operations
    # ---------------------------------------------------------------

    @guard_invariants("push")
    def push(self, value: Any) -> None:
        self._require_live("push")
        item = self._coerce("push", value)
        self._grow_if_needed()
        self.buffer[self.length] = item
        self.length += 1

    @guard_invariants("pop")
    def pop(self) -> Any:
        self._require_nonempty("pop")
        self.length -= 1
        return self.buffer[self.length].item()

    @guard_invariants("insert")
    def insert(self, index: int, value: Any) -> None:
        """Insert `value` before position `index` (0 <= index <= size)."""
        self._require_live("insert")
        position = self._index("insert", index, self.length + 1)
        item = self._coerce("insert", value)
        self._grow_if_needed()
        n = self.length
        self.buffer[position + 1 : n + 1] = self.buffer[position:n]
        self.buffer[position] = item
        self.length += 1

    @guard_invariants("remove")
    def remove(self, index: int) -> Any:
        """Remove and return the element at `index`, closing the gap."""
        self._require_nonempty("remove")
        position = self._index("remove", index, self.length)
        n = self.length
        value = self.buffer[position].item()
        self.buffer[position : n - 1] = self.buffer[position + 1 : n]
        self.length -= 1
        return value

    @guard_invariants("set")
    def set(self, index: int, value: Any) -> None:
        self._require_live("set")
        position = self._index("set", index, self.length)
        self.buffer[position] = self._coerce("set", value)

    @guard_invariants("fill")
    def fill(self, value: Any) -> None:
        """Overwrite every live element with `value`."""
        self._require_nonempty("fill")
        self.buffer[: self.length] = self._coerce("fill", value)

    # ---------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------

    def size(self) -> int:
        self._require_live("size")
        return self.length

    def capacity(self) -> int:
        self._require_live("capacity")
        return self.allocated

    def empty(self) -> bool:
        self._require_live("empty")
        return self.length == 0

    def get(self, index: int) -> Any:
        self._require_live("get")
        position = self._index("get", index, self.length)
        return self.buffer[position].item()

    def front(self) -> Any:
        self._require_nonempty("front")
        return self.buffer[0].item()

    def back(self) -> Any:
        self._require_nonempty("back")
        return self.buffer[self.length - 1].item()

    def find(self, value: Any) -> int:
        """Return the lowest index holding `value`, or NOT_FOUND."""
        self._require_live("find")
        try:
            item = self._coerce("find", value)
        except ValueOutOfRange:
            # an unrepresentable value cannot be stored, so it is never present
            return NOT_FOUND
        hits = np.flatnonzero(self.buffer[: self.length] == item)
        return int(hits[0]) if hits.size else NOT_FOUND

    @guard_invariants("find_transposition")
    def find_transposition(self, value: Any) -> int:
        """
        Self-organizing lookup: a hit at position p > 0 is swapped with
        its predecessor and p - 1 is returned. Hits at 0 and misses are
        reported unchanged.
        """
        position = self.find(value)
        if position > 0:
            b = self.buffer
            b[position - 1], b[position] = b[position], b[position - 1]
            return position - 1
        return position

    # ---------------------------------------------------------------
    # Rotation (see rotation.py)
    # ---------------------------------------------------------------

    def rotate_right(self) -> None:
        # Import inside the method to break the array <-> rotation cycle
        from .rotation import rotate_right
        rotate_right(self)

    def rotate_left(self) -> None:
        from .rotation import rotate_left
        rotate_left(self)

    def rotate_right_n(self, count: int) -> None:
        from .rotation import rotate_right_n
        rotate_right_n(self, count)

    def rotate_left_n(self, count: int) -> None:
        from .rotation import rotate_left_n
        rotate_left_n(self, count)

    # ---------------------------------------------------------------
    # Export and representation
    # ---------------------------------------------------------------

    def to_list(self) -> list:
        """Independent copy of the live elements as Python scalars."""
        self._require_live("to_list")
        return self.buffer[: self.length].tolist()

    def view(self) -> np.ndarray:
        """Read-only view of the live prefix; stale after the next mutation."""
        self._require_live("view")
        live = self.buffer[: self.length].view()
        live.flags.writeable = False
        return live

    def dump(self, stream: Optional[TextIO] = None) -> None:
        """Write the live elements space-separated, then a newline."""
        stream = stream if stream is not None else sys.stdout
        stream.write(str(self) + "\n")

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __contains__(self, value: Any) -> bool:
        return self.find(value) != NOT_FOUND

    def __str__(self) -> str:
        return " ".join(str(v) for v in self.to_list())

    def __repr__(self) -> str:
        if self.destroyed:
            return "<DynamicArray destroyed>"
        return (
            f"<DynamicArray dtype={self.dtype} size={self.length} "
            f"capacity={self.allocated}> [{self}]"
        )


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    arr = DynamicArray.from_iterable(range(10))
    assert arr.size() == 10 and arr.capacity() == 16, repr(arr)
    arr.insert(2, 99)
    assert arr.remove(2) == 99
    print(repr(arr))
    arr.destroy()
    print("array.py self-check passed ✓")
