from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Roles a user profile can carry."""

    TEACHER = "Teacher"
    ADMIN = "Admin"
    STUDENT = "Student"

    @classmethod
    def parse(cls, value) -> Optional["Role"]:
        try:
            return cls(value)
        except ValueError:
            return None


class AttendanceStatus(str, Enum):
    """Status stored on every attendance record."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"

    @property
    def counts_as_attended(self) -> bool:
        # Late still counts towards the attendance percentage.
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)


class AttendanceBand(str, Enum):
    """Colour band used by dashboards for a percentage."""

    LOW = "low"
    WARNING = "warning"
    GOOD = "good"


class Dashboard(str, Enum):
    TEACHER = "teacher"
    ADMIN = "admin"
    STUDENT = "student"
    UNRECOGNIZED = "unrecognized"
