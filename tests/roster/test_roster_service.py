from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.core.enums import Role
from src.school_attendance.school_attendance.core.exceptions import (
    ConflictingAssignmentError,
    DuplicateEmailError,
    DuplicateIdError,
    ValidationError,
)
from src.school_attendance.school_attendance.roster.model import TeacherAssignment
from src.school_attendance.school_attendance.roster.service import teacher_id_from_name


def test_add_student_normalizes_section_and_creates_login(container, store):
    result = container.roster_service.add_student("Jane Doe", "9", " c ")

    assert result.student.section == "C"
    assert result.student.grade == "9"
    assert result.student.id.startswith("stu_")
    assert result.credentials.email == "jane.doe@student.edu"
    assert result.credentials.password == "password"

    profile = store.list_profiles()[0]
    assert profile.role == Role.STUDENT
    assert profile.entity_id == result.student.id
    assert container.identity_service.authenticate("JANE.DOE@student.edu", "password") == profile


def test_add_student_requires_all_fields(container, store):
    with pytest.raises(ValidationError):
        container.roster_service.add_student("Jane", "", "A")
    assert store.list_students() == ()


def test_duplicate_email_stores_nothing(container, store):
    container.roster_service.add_student("Jane Doe", "9", "A")

    with pytest.raises(DuplicateEmailError) as exc:
        container.roster_service.add_student("Jane  Doe", "10", "B")

    assert "Failed to create user account" in str(exc.value)
    assert len(store.list_students()) == 1
    assert len(store.list_profiles()) == 1


def test_add_teacher_rejects_duplicate_id(container, store):
    result = container.roster_service.add_teacher("mr-smith", "Mr. Smith")
    assert result.credentials.email == "mr.smith@school.edu"
    assert result.credentials.password == "password123"

    with pytest.raises(DuplicateIdError):
        container.roster_service.add_teacher("mr-smith", "Another Smith")
    assert len(store.list_teachers()) == 1


def test_teacher_id_from_name():
    assert teacher_id_from_name("Ms. Mary  Jones") == "ms-mary-jones"


def test_assignment_conflict_even_with_other_teacher(container, store):
    roster = container.roster_service
    roster.add_teacher("mr-smith", "Mr. Smith")
    roster.add_teacher("ms-jones", "Ms. Jones")
    roster.add_assignment(TeacherAssignment(teacher_id="mr-smith", grade="10", section="a", subject_id="math"))

    with pytest.raises(ConflictingAssignmentError) as exc:
        roster.add_assignment(TeacherAssignment(teacher_id="ms-jones", grade="10", section="A", subject_id="math"))

    assert "Mr. Smith" in str(exc.value)
    assert len(store.list_assignments()) == 1
    assert store.list_assignments()[0].section == "A"


def test_class_lookups(container):
    roster = container.roster_service
    roster.add_teacher("mr-smith", "Mr. Smith")
    for name, grade, section in [("Ann", "10", "B"), ("Bo", "10", "A"), ("Cy", "9", "A")]:
        roster.add_student(name, grade, section)
    roster.add_assignment(TeacherAssignment(teacher_id="mr-smith", grade="10", section="A", subject_id="sci"))
    roster.add_assignment(TeacherAssignment(teacher_id="mr-smith", grade="10", section="A", subject_id="math"))

    assert roster.grades() == ["10", "9"]
    assert roster.sections("10") == ["A", "B"]
    assert roster.sections("") == []
    assert [s.name for s in roster.students_in_class("10", "A")] == ["Bo"]
    assert roster.assigned_grades("mr-smith") == ["10"]
    assert {s.id for s in roster.assigned_subjects("mr-smith", "10", "A")} == {"math", "sci"}
    assert [s.id for s in roster.subjects_for_class("10", "A")] == ["sci", "math"]
    assert roster.teacher_for_class_subject("10", "A", "math").name == "Mr. Smith"
    assert roster.teacher_for_class_subject("10", "B", "math") is None
    assert roster.teacher_names_by_class_subject() == {("10", "A", "sci"): "Mr. Smith", ("10", "A", "math"): "Mr. Smith"}
