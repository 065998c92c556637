from __future__ import annotations

from flask import Flask, request, session

from ..app_logger import get_logger
from ..common.datetime_utils import default_date_range
from ..common.web import domain_error, fail, login_required, ok, to_dict
from ..container import Container
from ..core.enums import Dashboard
from ..core.exceptions import AuthenticationError, ValidationError
from .dashboards import dashboard_for

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        try:
            profile = container.identity_service.authenticate(data.get("email", ""), data.get("password", ""))
        except AuthenticationError as e:
            return domain_error(e)

        session.clear()
        session["profile_id"] = profile.id
        session["name"] = profile.name
        session["role"] = profile.role.value
        session["entity_id"] = profile.entity_id
        return ok(profile=to_dict(profile), dashboard=dashboard_for(profile.role).value)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Logged out.")

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        kind = dashboard_for(session.get("role"))
        entity_id = session.get("entity_id", "")
        roster = container.roster_service

        if kind is Dashboard.TEACHER:
            teacher = roster.get_teacher(entity_id)
            if not teacher:
                return fail("Error: No teacher data found for the logged in user.", 404)
            return ok(dashboard=kind.value, teacher=to_dict(teacher), grades=roster.assigned_grades(teacher.id))

        if kind is Dashboard.ADMIN:
            return ok(
                dashboard=kind.value,
                grades=roster.grades(),
                students=len(roster.list_students()),
                teachers=len(roster.list_teachers()),
                subjects=to_dict(roster.list_subjects()),
            )

        if kind is Dashboard.STUDENT:
            start, end = default_date_range(container.report_window_days)
            try:
                overview = container.report_service.student_overview(entity_id, date_start=start, date_end=end)
            except ValidationError as e:
                return fail(str(e), 404)
            return ok(dashboard=kind.value, overview=to_dict(overview), start=start, end=end)

        logger.warning("Unrecognized role %r for profile %s", session.get("role"), session.get("profile_id"))
        return fail("Unrecognized user role.", 403)
