from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..app_logger import get_logger
from ..common.text import collation_key, email_for, generate_id, slugify
from ..common.validators import require_non_empty
from ..core.constants import (
    STUDENT_DEFAULT_PASSWORD,
    STUDENT_EMAIL_DOMAIN,
    TEACHER_DEFAULT_PASSWORD,
    TEACHER_EMAIL_DOMAIN,
)
from ..core.enums import Role
from ..core.exceptions import ConflictingAssignmentError, DuplicateEmailError, DuplicateIdError
from ..identity.model import GeneratedCredentials, UserProfile
from ..identity.service import IdentityService
from ..store.repository import EntityStore
from .model import Student, Subject, Teacher, TeacherAssignment

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegisteredStudent:
    student: Student
    credentials: GeneratedCredentials


@dataclass(frozen=True)
class RegisteredTeacher:
    teacher: Teacher
    credentials: GeneratedCredentials


def normalize_section(section: str) -> str:
    """Section codes are canonical-uppercase everywhere."""
    return section.strip().upper()


def teacher_id_from_name(name: str) -> str:
    return slugify(name)


class RosterService:
    """Use cases: register students/teachers/assignments and look up classes."""

    def __init__(self, store: EntityStore, identity: IdentityService):
        self._store = store
        self._identity = identity

    def _register_login(
        self, *, name: str, role: Role, entity_id: str, domain: str, password: str
    ) -> tuple[UserProfile, GeneratedCredentials]:
        profile = UserProfile(id=generate_id("user"), name=name, role=role, entity_id=entity_id)
        email = email_for(name, domain)
        try:
            self._identity.register_identity(email, password, profile)
        except DuplicateEmailError as e:
            raise DuplicateEmailError(f"Failed to create user account: {e}") from e
        return profile, GeneratedCredentials(name=name, email=email, password=password)

    def add_student(self, name: str, grade: str, section: str) -> RegisteredStudent:
        name = require_non_empty(name, "Name")
        grade = require_non_empty(grade, "Grade")
        section = normalize_section(require_non_empty(section, "Section"))

        student = Student(id=generate_id("stu"), name=name, grade=grade, section=section)
        # The login is created first so a failed registration stores nothing.
        profile, creds = self._register_login(
            name=name,
            role=Role.STUDENT,
            entity_id=student.id,
            domain=STUDENT_EMAIL_DOMAIN,
            password=STUDENT_DEFAULT_PASSWORD,
        )
        self._store.replace_students([*self._store.list_students(), student])
        self._identity.add_profile(profile)
        logger.info("Added student %s (%s %s)", student.id, grade, section)
        return RegisteredStudent(student=student, credentials=creds)

    def add_teacher(self, teacher_id: str, name: str) -> RegisteredTeacher:
        teacher_id = require_non_empty(teacher_id, "Teacher ID")
        name = require_non_empty(name, "Name")

        if any(t.id == teacher_id for t in self._store.list_teachers()):
            raise DuplicateIdError(f'Error: Teacher with ID "{teacher_id}" already exists.')

        teacher = Teacher(id=teacher_id, name=name)
        profile, creds = self._register_login(
            name=name,
            role=Role.TEACHER,
            entity_id=teacher.id,
            domain=TEACHER_EMAIL_DOMAIN,
            password=TEACHER_DEFAULT_PASSWORD,
        )
        self._store.replace_teachers([*self._store.list_teachers(), teacher])
        self._identity.add_profile(profile)
        logger.info("Added teacher %s", teacher.id)
        return RegisteredTeacher(teacher=teacher, credentials=creds)

    def find_conflicting_assignment(self, grade: str, section: str, subject_id: str) -> Optional[TeacherAssignment]:
        key = (grade, normalize_section(section), subject_id)
        for a in self._store.list_assignments():
            if a.class_subject_key == key:
                return a
        return None

    def add_assignment(self, assignment: TeacherAssignment) -> TeacherAssignment:
        assignment = TeacherAssignment(
            teacher_id=require_non_empty(assignment.teacher_id, "Teacher"),
            grade=require_non_empty(assignment.grade, "Grade"),
            section=normalize_section(require_non_empty(assignment.section, "Section")),
            subject_id=require_non_empty(assignment.subject_id, "Subject"),
        )

        existing = self.find_conflicting_assignment(assignment.grade, assignment.section, assignment.subject_id)
        if existing:
            holder = self.get_teacher(existing.teacher_id)
            raise ConflictingAssignmentError(
                f"Error: This class/subject is already assigned to {holder.name if holder else 'another teacher'}."
            )

        self._store.replace_assignments([*self._store.list_assignments(), assignment])
        logger.info(
            "Assigned %s to %s %s / %s",
            assignment.teacher_id,
            assignment.grade,
            assignment.section,
            assignment.subject_id,
        )
        return assignment

    # -- lookups -----------------------------------------------------------

    def list_students(self) -> list[Student]:
        return list(self._store.list_students())

    def list_teachers(self) -> list[Teacher]:
        return list(self._store.list_teachers())

    def list_subjects(self) -> list[Subject]:
        return list(self._store.list_subjects())

    def list_assignments(self) -> list[TeacherAssignment]:
        return list(self._store.list_assignments())

    def get_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._store.list_students() if s.id == student_id), None)

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return next((t for t in self._store.list_teachers() if t.id == teacher_id), None)

    def subject_name(self, subject_id: str) -> Optional[str]:
        return next((s.name for s in self._store.list_subjects() if s.id == subject_id), None)

    def teacher_for_class_subject(self, grade: str, section: str, subject_id: str) -> Optional[Teacher]:
        for a in self._store.list_assignments():
            if a.grade == grade and a.section == section and a.subject_id == subject_id:
                return self.get_teacher(a.teacher_id)
        return None

    def teacher_names_by_class_subject(self) -> dict[tuple[str, str, str], str]:
        """One pass over assignments; unknown teacher ids are left out."""
        teachers = {t.id: t.name for t in self._store.list_teachers()}
        return {
            a.class_subject_key: teachers[a.teacher_id]
            for a in self._store.list_assignments()
            if a.teacher_id in teachers
        }

    def grades(self) -> list[str]:
        return sorted({s.grade for s in self._store.list_students()}, key=collation_key)

    def sections(self, grade: str) -> list[str]:
        if not grade:
            return []
        return sorted({s.section for s in self._store.list_students() if s.grade == grade})

    def students_in_class(self, grade: str, section: str) -> list[Student]:
        return [s for s in self._store.list_students() if s.grade == grade and s.section == section]

    def _assignments_of(self, teacher_id: str) -> list[TeacherAssignment]:
        return [a for a in self._store.list_assignments() if a.teacher_id == teacher_id]

    def assigned_grades(self, teacher_id: str) -> list[str]:
        return sorted({a.grade for a in self._assignments_of(teacher_id)}, key=collation_key)

    def assigned_sections(self, teacher_id: str, grade: str) -> list[str]:
        return sorted({a.section for a in self._assignments_of(teacher_id) if a.grade == grade})

    def assigned_subjects(self, teacher_id: str, grade: str, section: str) -> list[Subject]:
        ids = {a.subject_id for a in self._assignments_of(teacher_id) if a.grade == grade and a.section == section}
        return [s for s in self._store.list_subjects() if s.id in ids]

    def subjects_for_class(self, grade: str, section: str) -> list[Subject]:
        """Subjects any teacher is assigned to teach this class, in first-assigned order."""
        names = {s.id: s for s in self._store.list_subjects()}
        out: list[Subject] = []
        seen: set[str] = set()
        for a in self._store.list_assignments():
            if a.grade == grade and a.section == section and a.subject_id not in seen:
                seen.add(a.subject_id)
                if a.subject_id in names:
                    out.append(names[a.subject_id])
        return out
