from __future__ import annotations

from typing import Optional, Sequence

from .model import AttendanceRecord


def build_index(records: Sequence[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
    """Group raw records by student, keeping their original relative order."""
    index: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        index.setdefault(r.student_id, []).append(r)
    return index


class AttendanceIndex:
    """Memoized view of build_index().

    The cache is keyed by the identity of the raw sequence: stores hand out a
    new sequence object after every write, so a different object means the
    raw list changed and the index is rebuilt. It never holds state of its own.
    """

    def __init__(self):
        self._source: Optional[Sequence[AttendanceRecord]] = None
        self._index: dict[str, list[AttendanceRecord]] = {}

    def get(self, records: Sequence[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
        if records is not self._source:
            self._index = build_index(records)
            self._source = records
        return self._index

    def for_student(self, records: Sequence[AttendanceRecord], student_id: str) -> list[AttendanceRecord]:
        return list(self.get(records).get(student_id, []))
