from __future__ import annotations

from typing import Iterable, Sequence

from .model import AttendanceRecord


def upsert_many(
    existing: Sequence[AttendanceRecord],
    incoming: Iterable[AttendanceRecord],
) -> tuple[AttendanceRecord, ...]:
    """Merge incoming records into existing ones by (student, date, subject).

    A matching key is replaced in place; anything else is appended. The batch
    is applied in order, so a later entry with the same key wins. Returns a
    new tuple and leaves ``existing`` untouched.
    """
    merged = list(existing)
    position: dict[tuple[str, str, str], int] = {}
    for i, r in enumerate(merged):
        position.setdefault(r.key, i)
    for record in incoming:
        i = position.get(record.key)
        if i is None:
            position[record.key] = len(merged)
            merged.append(record)
        else:
            merged[i] = record
    return tuple(merged)
