"""
Tests for the error taxonomy and failure atomicity.
"""

import numpy as np
import pytest

import dynarray.array as array_module
from dynarray import (
    DynamicArray,
    DynamicArrayError,
    EmptyArrayError,
    IndexOutOfRange,
    PreconditionViolation,
    ResourceExhausted,
    UseAfterDestroy,
    ValueOutOfRange,
)


def test_hierarchy():
    """Every failure is a DynamicArrayError and maps onto a builtin category."""
    assert issubclass(IndexOutOfRange, PreconditionViolation)
    assert issubclass(IndexOutOfRange, IndexError)
    assert issubclass(EmptyArrayError, IndexError)
    assert issubclass(ValueOutOfRange, ValueError)
    assert issubclass(UseAfterDestroy, PreconditionViolation)
    assert issubclass(ResourceExhausted, MemoryError)
    for cls in (PreconditionViolation, ResourceExhausted):
        assert issubclass(cls, DynamicArrayError)


def test_index_error_details():
    arr = DynamicArray.from_iterable([1, 2])
    with pytest.raises(IndexOutOfRange) as excinfo:
        arr.set(5, 0)
    err = excinfo.value
    assert err.operation == "set"
    assert err.index == 5
    assert err.bound == 2


def test_growth_refused_past_size_limit(monkeypatch):
    """Doubling past the byte limit fails and leaves the array untouched."""
    arr = DynamicArray.from_iterable(range(7))
    monkeypatch.setattr(array_module, "MAX_REGION_BYTES", 8 * np.dtype(np.int32).itemsize)

    with pytest.raises(ResourceExhausted):
        arr.push(7)

    assert arr.size() == 7
    assert arr.capacity() == 8
    assert arr.to_list() == list(range(7))


def test_allocation_failure_is_resource_exhausted(monkeypatch):
    arr = DynamicArray.from_iterable([1, 2, 3])
    region = arr.buffer

    def failing_zeros(*args, **kwargs):
        raise MemoryError("simulated")

    monkeypatch.setattr(array_module.np, "zeros", failing_zeros)

    with pytest.raises(ResourceExhausted) as excinfo:
        arr.expand()
    assert isinstance(excinfo.value.__cause__, MemoryError)
    assert arr.buffer is region
    assert arr.capacity() == 8
    assert arr.to_list() == [1, 2, 3]

    with pytest.raises(ResourceExhausted):
        arr.clear()
    assert arr.to_list() == [1, 2, 3]


def test_failed_operations_leave_state_unchanged():
    arr = DynamicArray.from_iterable([10, 20, 30])
    for call in (
        lambda: arr.insert(4, 1),
        lambda: arr.remove(3),
        lambda: arr.set(3, 1),
        lambda: arr.push(2 ** 32),
        lambda: arr.insert(0, "x"),
    ):
        with pytest.raises(PreconditionViolation):
            call()
        assert arr.to_list() == [10, 20, 30]


def test_not_found_is_not_an_error():
    assert DynamicArray.from_iterable([1]).find(2) == -1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
