"""
dynarray: audit.py
------------------
Optional operation history for a DynamicArray.

Attach an AuditLog to an array (`DynamicArray(audit=AuditLog())`) and
every successful mutating call appends an entry carrying the size and
capacity left behind. Reallocations show up as "expand" entries, which
makes the growth pattern of a workload easy to inspect.
"""

from __future__ import annotations

import json
import time
from collections import Counter
from dataclasses import dataclass, field

import numpy as np


# -------------------------------------------------------------------
# Audit Entry: one recorded operation
# -------------------------------------------------------------------

@dataclass
class AuditEntry:
    timestamp: float
    operation: str
    size: int
    capacity: int
    note: str = ""

    def to_dict(self) -> dict:
        """Convert the entry to a serializable dictionary."""
        return {
            "timestamp": self.timestamp,
            "operation": self.operation,
            "size": self.size,
            "capacity": self.capacity,
            "note": self.note,
        }


# -------------------------------------------------------------------
# Audit Log: chronological list of operations
# -------------------------------------------------------------------

@dataclass
class AuditLog:
    entries: list[AuditEntry] = field(default_factory=list)

    def record(self, arr, operation: str, note: str = "") -> None:
        """Append the state `arr` is in after `operation`."""
        self.entries.append(
            AuditEntry(
                timestamp=time.time(),
                operation=operation,
                size=arr.length,
                capacity=arr.allocated,
                note=note,
            )
        )

    def growth_events(self) -> list[AuditEntry]:
        return [e for e in self.entries if e.operation == "expand"]

    def summary(self) -> dict:
        """Return statistical summary of the recorded history."""
        if not self.entries:
            return {"count": 0, "operations": {}, "growth_events": 0}

        loads = np.array([e.size / e.capacity for e in self.entries if e.capacity])
        return {
            "count": len(self.entries),
            "operations": dict(Counter(e.operation for e in self.entries)),
            "growth_events": len(self.growth_events()),
            "peak_capacity": max(e.capacity for e in self.entries),
            "mean_load_factor": float(np.mean(loads)) if loads.size else 0.0,
        }

    # ---------------------------------------------------------------
    # Persistence
    # ---------------------------------------------------------------

    def export_json(self, path: str) -> None:
        """Export the full history to a JSON file."""
        with open(path, "w") as f:
            json.dump([e.to_dict() for e in self.entries], f, indent=2)

    def clear(self) -> None:
        self.entries.clear()

    def describe(self) -> str:
        s = self.summary()
        return (
            f"AuditLog(count={s['count']}, "
            f"growth_events={s['growth_events']}, "
            f"peak_capacity={s.get('peak_capacity', 0)}, "
            f"load={s.get('mean_load_factor', 0.0):.3f})"
        )


def audit_cycle(arr, operation: str, log: AuditLog | None = None, note: str = "") -> AuditLog:
    """
    Record one operation on `arr` and return the updated log.
    Creates a new log if none exists.
    """
    if log is None:
        log = AuditLog()
    log.record(arr, operation, note)
    return log
