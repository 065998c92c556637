from __future__ import annotations

from typing import Protocol, Sequence

from ..attendance.model import AttendanceRecord
from ..identity.model import Credential, UserProfile
from ..roster.model import Student, Subject, Teacher, TeacherAssignment


class EntityStore(Protocol):
    """Persistence contract for every collection the app owns.

    Writes replace a whole collection; there is no partial patch API. Services
    depend on this interface, never on a concrete backend.
    """

    def list_students(self) -> Sequence[Student]:
        raise NotImplementedError

    def replace_students(self, students: Sequence[Student]) -> None:
        raise NotImplementedError

    def list_teachers(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def replace_teachers(self, teachers: Sequence[Teacher]) -> None:
        raise NotImplementedError

    def list_subjects(self) -> Sequence[Subject]:
        raise NotImplementedError

    def list_assignments(self) -> Sequence[TeacherAssignment]:
        raise NotImplementedError

    def replace_assignments(self, assignments: Sequence[TeacherAssignment]) -> None:
        raise NotImplementedError

    def list_attendance(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def replace_attendance(self, records: Sequence[AttendanceRecord]) -> None:
        raise NotImplementedError

    def list_profiles(self) -> Sequence[UserProfile]:
        raise NotImplementedError

    def replace_profiles(self, profiles: Sequence[UserProfile]) -> None:
        raise NotImplementedError

    def list_credentials(self) -> Sequence[Credential]:
        raise NotImplementedError

    def replace_credentials(self, credentials: Sequence[Credential]) -> None:
        raise NotImplementedError
