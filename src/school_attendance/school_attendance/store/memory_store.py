from __future__ import annotations

from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..identity.model import Credential, UserProfile
from ..roster.model import Student, Subject, Teacher, TeacherAssignment
from .repository import EntityStore


class InMemoryStore(EntityStore):
    """Keeps every collection as an immutable tuple.

    Each replace_* swaps in a new tuple, so a snapshot handed out earlier is
    never changed underneath its reader.
    """

    def __init__(
        self,
        *,
        students: Sequence[Student] = (),
        teachers: Sequence[Teacher] = (),
        subjects: Sequence[Subject] = (),
        assignments: Sequence[TeacherAssignment] = (),
        attendance: Sequence[AttendanceRecord] = (),
        profiles: Sequence[UserProfile] = (),
        credentials: Sequence[Credential] = (),
    ):
        self._students = tuple(students)
        self._teachers = tuple(teachers)
        self._subjects = tuple(subjects)
        self._assignments = tuple(assignments)
        self._attendance = tuple(attendance)
        self._profiles = tuple(profiles)
        self._credentials = tuple(credentials)

    def list_students(self) -> Sequence[Student]:
        return self._students

    def replace_students(self, students: Sequence[Student]) -> None:
        self._students = tuple(students)

    def list_teachers(self) -> Sequence[Teacher]:
        return self._teachers

    def replace_teachers(self, teachers: Sequence[Teacher]) -> None:
        self._teachers = tuple(teachers)

    def list_subjects(self) -> Sequence[Subject]:
        return self._subjects

    def list_assignments(self) -> Sequence[TeacherAssignment]:
        return self._assignments

    def replace_assignments(self, assignments: Sequence[TeacherAssignment]) -> None:
        self._assignments = tuple(assignments)

    def list_attendance(self) -> Sequence[AttendanceRecord]:
        return self._attendance

    def replace_attendance(self, records: Sequence[AttendanceRecord]) -> None:
        self._attendance = tuple(records)

    def list_profiles(self) -> Sequence[UserProfile]:
        return self._profiles

    def replace_profiles(self, profiles: Sequence[UserProfile]) -> None:
        self._profiles = tuple(profiles)

    def list_credentials(self) -> Sequence[Credential]:
        return self._credentials

    def replace_credentials(self, credentials: Sequence[Credential]) -> None:
        self._credentials = tuple(credentials)
