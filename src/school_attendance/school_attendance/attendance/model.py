from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student, one date, one subject.

    There is no separate identifier; (student_id, date, subject_id) is the key.
    """

    student_id: str
    date: str
    subject_id: str
    status: AttendanceStatus

    @property
    def key(self) -> tuple[str, str, str]:
        return self.student_id, self.date, self.subject_id


@dataclass(frozen=True)
class AttendanceSummary:
    present_count: int
    total_days: int
    percentage: float


@dataclass(frozen=True)
class SubjectSummary:
    subject_id: str
    subject_name: str
    present_count: int
    total: int
    percentage: float


@dataclass(frozen=True)
class DailyStatusCount:
    """Read-model for the per-day class chart."""

    date: str
    present: int
    absent: int
    late: int
    total: int
