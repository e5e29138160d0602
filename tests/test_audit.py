"""
Tests for the operation audit log.
"""

import json

import pytest

from dynarray import AuditLog, DynamicArray, audit_cycle, audited_rotate


def test_no_log_by_default():
    assert DynamicArray().audit is None


def test_pushes_are_recorded_with_growth():
    log = AuditLog()
    arr = DynamicArray(audit=log)
    for i in range(10):
        arr.push(i)

    s = log.summary()
    assert s["count"] == 11
    assert s["operations"] == {"push": 10, "expand": 1}
    assert s["growth_events"] == 1
    assert s["peak_capacity"] == 16

    # the reallocation is recorded before the push that needed it
    ops = [e.operation for e in log.entries]
    assert ops[7:9] == ["expand", "push"]
    assert log.entries[-1].size == 10


def test_failed_operation_not_recorded():
    log = AuditLog()
    arr = DynamicArray(audit=log)
    with pytest.raises(IndexError):
        arr.pop()
    assert log.entries == []


def test_audited_rotate_creates_log():
    arr = DynamicArray.from_iterable([1, 2, 3, 4, 5])
    log = audited_rotate(arr, "right", -3, note="realign")
    assert arr.to_list() == [4, 5, 1, 2, 3]
    assert len(log.entries) == 1
    entry = log.entries[0]
    assert entry.operation == "rotate_right(-3)"
    assert entry.note == "realign"
    assert entry.size == 5


def test_audited_rotate_bad_direction():
    arr = DynamicArray.from_iterable([1, 2])
    with pytest.raises(ValueError):
        audited_rotate(arr, "up")


def test_audited_rotate_into_own_log_records_once():
    log = AuditLog()
    arr = DynamicArray(audit=log)
    for i in range(3):
        arr.push(i)
    log.clear()

    same = audited_rotate(arr, "left", 1, log=arr.audit)
    assert same is log
    assert arr.to_list() == [1, 2, 0]
    assert [e.operation for e in log.entries] == ["rotate_left_n"]


def test_audit_cycle_appends_to_existing_log():
    arr = DynamicArray.from_iterable([1])
    log = audit_cycle(arr, "snapshot")
    same = audit_cycle(arr, "snapshot", log=log)
    assert same is log
    assert len(log.entries) == 2


def test_export_json(tmp_path):
    log = AuditLog()
    arr = DynamicArray(audit=log)
    arr.push(1)
    arr.clear()

    path = tmp_path / "audit.json"
    log.export_json(str(path))
    data = json.loads(path.read_text())
    assert [d["operation"] for d in data] == ["push", "clear"]
    assert data[1]["capacity"] == 8


def test_empty_summary_and_describe():
    log = AuditLog()
    assert log.summary()["count"] == 0
    assert log.describe().startswith("AuditLog(count=0")
    log.record(DynamicArray(), "noop")
    log.clear()
    assert log.entries == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
