from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import AttendanceRecord, AttendanceSummary, SubjectSummary
from ..core.constants import DEFAULT_THRESHOLD_PCT
from ..roster.model import Student


@dataclass(frozen=True)
class StudentReport:
    """Read-model: one student's attendance over a report window."""

    student: Student
    summary: AttendanceSummary
    records: list[AttendanceRecord] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.student.name

    @property
    def grade(self) -> str:
        return self.student.grade

    @property
    def section(self) -> str:
        return self.student.section

    @property
    def percentage(self) -> float:
        return self.summary.percentage


@dataclass(frozen=True)
class ReportFilter:
    search: str = ""
    threshold_pct: float = DEFAULT_THRESHOLD_PCT
    grade: str = ""
    section: str = ""


@dataclass(frozen=True)
class StudentOverview:
    """What a student sees: overall, per assigned subject, and the daily log."""

    student: Student
    overall: AttendanceSummary
    subjects: list[SubjectSummary]
    daily_log: list[AttendanceRecord]


@dataclass(frozen=True)
class StudentReportCard:
    student: Student
    overall: AttendanceSummary
    subjects: list[SubjectSummary]
