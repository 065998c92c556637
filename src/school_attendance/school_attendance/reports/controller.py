from __future__ import annotations

from flask import Flask, request, session

from ..app_logger import get_logger
from ..attendance.aggregator import attendance_band, format_percentage
from ..common.datetime_utils import default_date_range, today_local
from ..common.web import domain_error, fail, ok, roles_required, to_dict
from ..container import Container
from ..core.constants import DEFAULT_THRESHOLD_PCT
from ..core.enums import Role
from ..core.exceptions import DomainError
from .export import export_filename
from .model import ReportFilter, StudentReport

logger = get_logger(__name__)


def _report_row(r: StudentReport) -> dict:
    return {
        **to_dict(r.student),
        "present_count": r.summary.present_count,
        "total_days": r.summary.total_days,
        "percentage": r.summary.percentage,
        "percentage_display": format_percentage(r.summary.percentage),
        "band": attendance_band(r.summary.percentage).value,
    }


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _window() -> tuple[str, str]:
        start, end = default_date_range(container.report_window_days)
        return request.args.get("start") or start, request.args.get("end") or end

    def _filters() -> ReportFilter:
        raw = request.args.get("threshold", "")
        threshold = float(raw) if raw else DEFAULT_THRESHOLD_PCT
        return ReportFilter(
            search=request.args.get("search", ""),
            threshold_pct=threshold,
            grade=request.args.get("grade", ""),
            section=request.args.get("section", ""),
        )

    @app.route("/reports", methods=["GET"], endpoint="reports")
    @roles_required(Role.ADMIN)
    def report_list():
        start, end = _window()
        try:
            filters = _filters()
        except ValueError:
            return fail("threshold must be a number.")
        rows = reports.filtered_reports(
            date_start=start,
            date_end=end,
            subject_id=request.args.get("subject_id") or None,
            filters=filters,
        )
        return ok(start=start, end=end, reports=[_report_row(r) for r in rows])

    @app.route("/reports.csv", methods=["GET"], endpoint="reports_csv")
    @roles_required(Role.ADMIN)
    def report_csv():
        start, end = _window()
        try:
            filters = _filters()
        except ValueError:
            return fail("threshold must be a number.")
        text = reports.export(
            date_start=start,
            date_end=end,
            subject_id=request.args.get("subject_id") or None,
            filters=filters,
        )
        filename = export_filename(today_local())
        logger.info("Exported %s", filename)
        return app.response_class(
            text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/reports/students/<student_id>", methods=["GET"], endpoint="student_report_card")
    @roles_required(Role.ADMIN)
    def student_report_card(student_id: str):
        start, end = _window()
        try:
            card = reports.student_report_card(student_id, date_start=start, date_end=end)
        except DomainError as e:
            return domain_error(e)
        return ok(start=start, end=end, report=to_dict(card))

    @app.route("/me/overview", methods=["GET"], endpoint="me_overview")
    @roles_required(Role.STUDENT)
    def me_overview():
        start, end = _window()
        try:
            overview = reports.student_overview(session.get("entity_id", ""), date_start=start, date_end=end)
        except DomainError as e:
            return domain_error(e)
        return ok(start=start, end=end, overview=to_dict(overview))
