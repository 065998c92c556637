from __future__ import annotations

from flask import Flask, request, session

from ..app_logger import get_logger
from ..common.web import domain_error, fail, ok, roles_required, to_dict
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError
from .importer import import_students
from .model import TeacherAssignment
from .service import teacher_id_from_name

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    def _payload():
        return request.get_json(silent=True) or request.form

    @app.route("/students", methods=["GET"], endpoint="list_students")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def list_students():
        grade = request.args.get("grade", "")
        section = request.args.get("section", "")
        if grade and section:
            students = roster.students_in_class(grade, section)
        else:
            students = roster.list_students()
        return ok(students=to_dict(students))

    @app.route("/students", methods=["POST"], endpoint="add_student")
    @roles_required(Role.ADMIN)
    def add_student():
        data = _payload()
        try:
            result = roster.add_student(data.get("name", ""), data.get("grade", ""), data.get("section", ""))
        except DomainError as e:
            return domain_error(e)
        return ok(
            message=f'Student "{result.student.name}" added! Their credentials are shown below.',
            student=to_dict(result.student),
            credentials=[to_dict(result.credentials)],
        ), 201

    @app.route("/students/import", methods=["POST"], endpoint="import_students")
    @roles_required(Role.ADMIN)
    def import_students_csv():
        upload = request.files.get("file")
        if upload is not None:
            text = upload.read().decode("utf-8-sig")
        else:
            text = request.get_data(as_text=True)

        try:
            summary = import_students(text, roster)
        except DomainError as e:
            return domain_error(e)
        return ok(
            message=summary.message,
            success_count=summary.success_count,
            error_count=summary.error_count,
            errors=summary.errors,
            credentials=to_dict(summary.credentials),
        )

    @app.route("/teachers", methods=["POST"], endpoint="add_teacher")
    @roles_required(Role.ADMIN)
    def add_teacher():
        data = _payload()
        name = data.get("name", "")
        teacher_id = data.get("id") or teacher_id_from_name(name)
        try:
            result = roster.add_teacher(teacher_id, name)
        except DomainError as e:
            return domain_error(e)
        return ok(
            message=f'Teacher "{result.teacher.name}" added! Their credentials are shown below.',
            teacher=to_dict(result.teacher),
            credentials=[to_dict(result.credentials)],
        ), 201

    @app.route("/assignments", methods=["POST"], endpoint="add_assignment")
    @roles_required(Role.ADMIN)
    def add_assignment():
        data = _payload()
        try:
            assignment = roster.add_assignment(
                TeacherAssignment(
                    teacher_id=data.get("teacher_id", ""),
                    grade=data.get("grade", ""),
                    section=data.get("section", ""),
                    subject_id=data.get("subject_id", ""),
                )
            )
        except DomainError as e:
            return domain_error(e)
        return ok(message="Assignment added successfully!", assignment=to_dict(assignment)), 201

    @app.route("/classes", methods=["GET"], endpoint="classes")
    @roles_required(Role.ADMIN, Role.TEACHER)
    def classes():
        """Grade/section/subject pickers; teachers only see what they teach."""
        grade = request.args.get("grade", "")
        section = request.args.get("section", "")

        if session.get("role") == Role.TEACHER.value:
            teacher_id = session.get("entity_id", "")
            return ok(
                grades=roster.assigned_grades(teacher_id),
                sections=roster.assigned_sections(teacher_id, grade) if grade else [],
                subjects=to_dict(roster.assigned_subjects(teacher_id, grade, section)) if grade and section else [],
            )

        teacher = None
        subject_id = request.args.get("subject_id", "")
        if grade and section and subject_id:
            teacher = roster.teacher_for_class_subject(grade, section, subject_id)
        return ok(
            grades=roster.grades(),
            sections=roster.sections(grade),
            subjects=to_dict(roster.list_subjects()),
            assigned_teacher=to_dict(teacher),
        )
