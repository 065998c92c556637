from __future__ import annotations

from flask import Flask, request, session

from ..app_logger import get_logger
from ..common.datetime_utils import default_date_range, today_local, to_iso
from ..common.web import domain_error, fail, ok, roles_required, to_dict
from ..container import Container
from ..core.constants import CHART_DAYS
from ..core.enums import Role
from ..core.exceptions import DomainError
from .aggregator import attendance_band, daily_status_counts, format_percentage
from .model import AttendanceRecord
from .service import parse_status

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    roster = container.roster_service

    def _window() -> tuple[str, str]:
        start, end = default_date_range(container.report_window_days)
        return request.args.get("start") or start, request.args.get("end") or end

    def _teacher_may_mark(grade: str, section: str, subject_id: str) -> bool:
        if session.get("role") != Role.TEACHER.value:
            return True
        teacher_id = session.get("entity_id", "")
        return any(s.id == subject_id for s in roster.assigned_subjects(teacher_id, grade, section))

    @app.route("/attendance/bulk", methods=["POST"], endpoint="attendance_bulk")
    @roles_required(Role.ADMIN)
    def attendance_bulk():
        data = request.get_json(silent=True) or {}
        rows = data.get("records")
        if not isinstance(rows, list):
            return fail("Body must contain a list of records.")
        try:
            records = [
                AttendanceRecord(
                    student_id=str(r.get("student_id", "")),
                    date=str(r.get("date", "")),
                    subject_id=str(r.get("subject_id", "")),
                    status=parse_status(r.get("status", "")),
                )
                for r in rows
            ]
            written = attendance.record_bulk(records)
        except DomainError as e:
            return domain_error(e)
        return ok(message=f"Attendance for {written} record(s) saved.", written=written)

    @app.route("/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @roles_required(Role.TEACHER, Role.ADMIN)
    def attendance_mark():
        data = request.get_json(silent=True) or {}
        grade = data.get("grade", "")
        section = data.get("section", "")
        subject_id = data.get("subject_id", "")
        statuses = data.get("statuses") or {}
        if not isinstance(statuses, dict):
            return fail("statuses must map student ids to a status.")
        if not _teacher_may_mark(grade, section, subject_id):
            return fail("You are not assigned to this class/subject.", 403)
        enrolled = {s.id for s in roster.students_in_class(grade, section)}
        outsiders = sorted(sid for sid in statuses if sid not in enrolled)
        if outsiders:
            return fail(f"Students not in {grade} {section}: {', '.join(outsiders)}")

        try:
            written = attendance.mark_class(
                date=data.get("date") or to_iso(today_local()),
                subject_id=subject_id,
                statuses=statuses,
            )
        except DomainError as e:
            return domain_error(e)
        return ok(message=f"Attendance for {written} student(s) submitted successfully!", written=written)

    @app.route("/attendance/day", methods=["GET"], endpoint="attendance_day")
    @roles_required(Role.TEACHER, Role.ADMIN)
    def attendance_day():
        day = request.args.get("date") or to_iso(today_local())
        subject_id = request.args.get("subject_id", "")
        return ok(date=day, records=to_dict(attendance.records_for_day(day, subject_id)))

    @app.route(
        "/attendance/students/<student_id>/subjects/<subject_id>",
        methods=["GET"],
        endpoint="attendance_student_subject",
    )
    @roles_required(Role.TEACHER, Role.ADMIN)
    def attendance_student_subject(student_id: str, subject_id: str):
        report = attendance.student_subject_report(student_id, subject_id)
        return ok(
            summary=to_dict(report.summary),
            percentage=format_percentage(report.summary.percentage),
            band=attendance_band(report.summary.percentage).value,
            records=to_dict(report.records),
        )

    @app.route("/attendance/chart", methods=["GET"], endpoint="attendance_chart")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def attendance_chart():
        grade = request.args.get("grade", "")
        section = request.args.get("section", "")
        subject_id = request.args.get("subject_id", "")
        if not grade or not section or not subject_id:
            return ok(days=[])

        start, end = _window()
        records = attendance.class_records(
            student_ids=[s.id for s in roster.students_in_class(grade, section)],
            subject_id=subject_id,
            date_start=start,
            date_end=end,
        )
        return ok(days=to_dict(daily_status_counts(records, limit=CHART_DAYS)))
