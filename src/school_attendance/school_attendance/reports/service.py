from __future__ import annotations

from typing import Optional

from ..attendance.aggregator import compute_percentage, in_window, subject_breakdown, subject_summaries, summarize
from ..attendance.service import AttendanceService
from ..common.text import collation_key
from ..core.exceptions import ValidationError
from ..roster.service import RosterService
from .export import export_csv
from .filters import filter_reports
from .model import ReportFilter, StudentOverview, StudentReport, StudentReportCard


class ReportService:
    """Use cases: per-student reports for the admin, teacher and student views."""

    def __init__(self, roster: RosterService, attendance: AttendanceService):
        self._roster = roster
        self._attendance = attendance

    def build_student_reports(
        self,
        *,
        date_start: str,
        date_end: str,
        subject_id: Optional[str] = None,
    ) -> list[StudentReport]:
        index = self._attendance.index()
        reports = []
        for student in self._roster.list_students():
            in_range = in_window(index.get(student.id, []), date_start, date_end, subject_id)
            reports.append(StudentReport(student=student, summary=summarize(in_range), records=in_range))

        reports.sort(key=lambda r: collation_key(r.name))
        return reports

    def filtered_reports(
        self,
        *,
        date_start: str,
        date_end: str,
        subject_id: Optional[str] = None,
        filters: ReportFilter | None = None,
    ) -> list[StudentReport]:
        reports = self.build_student_reports(date_start=date_start, date_end=date_end, subject_id=subject_id)
        return filter_reports(reports, filters)

    def export(
        self,
        *,
        date_start: str,
        date_end: str,
        subject_id: Optional[str] = None,
        filters: ReportFilter | None = None,
    ) -> str:
        reports = self.filtered_reports(
            date_start=date_start, date_end=date_end, subject_id=subject_id, filters=filters
        )
        return export_csv(reports, self._roster.list_subjects(), self._roster.teacher_names_by_class_subject())

    def _require_student(self, student_id: str):
        student = self._roster.get_student(student_id)
        if not student:
            raise ValidationError(f"Student {student_id!r} does not exist")
        return student

    def student_overview(self, student_id: str, *, date_start: str, date_end: str) -> StudentOverview:
        student = self._require_student(student_id)
        records = self._attendance.records_for_student(student_id)
        in_range = in_window(records, date_start, date_end)
        class_subjects = self._roster.subjects_for_class(student.grade, student.section)
        return StudentOverview(
            student=student,
            overall=summarize(in_range),
            subjects=subject_summaries(in_range, date_start, date_end, class_subjects),
            daily_log=sorted(in_range, key=lambda r: r.date, reverse=True),
        )

    def student_report_card(self, student_id: str, *, date_start: str, date_end: str) -> StudentReportCard:
        student = self._require_student(student_id)
        records = self._attendance.records_for_student(student_id)
        return StudentReportCard(
            student=student,
            overall=compute_percentage(records, date_start, date_end),
            subjects=subject_breakdown(records, date_start, date_end, self._roster.list_subjects()),
        )
