from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Callable, Sequence, TypeVar

from ..app_logger import get_logger
from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, Role
from ..identity.model import Credential, UserProfile
from ..roster.model import Student, Subject, Teacher, TeacherAssignment
from .repository import EntityStore

T = TypeVar("T")

logger = get_logger(__name__)

# Document keys, one per collection.
STUDENTS = "students"
TEACHERS = "teachers"
SUBJECTS = "subjects"
ASSIGNMENTS = "teacherAssignments"
ATTENDANCE = "attendanceRecords"
PROFILES = "users"
CREDENTIALS = "userCredentials"


def _attendance_from_row(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        student_id=str(row["student_id"]),
        date=str(row["date"]),
        subject_id=str(row["subject_id"]),
        status=AttendanceStatus(row["status"]),
    )


def _profile_from_row(row: dict) -> UserProfile:
    return UserProfile(
        id=str(row["id"]),
        name=row["name"],
        role=Role(row["role"]),
        entity_id=str(row["entity_id"]),
    )


def _to_row(item) -> dict[str, Any]:
    row = asdict(item)
    for k, v in row.items():
        if isinstance(v, (AttendanceStatus, Role)):
            row[k] = v.value
    return row


class JsonFileStore(EntityStore):
    """Key/value document store backed by one JSON file.

    Every collection lives under its own key, the way the browser app kept
    them in local storage. A replace rewrites the whole document through a
    temp file so a crash never leaves half a file behind.
    """

    def __init__(self, path: str | Path, *, subjects: Sequence[Subject] = ()):
        self._path = Path(path)
        self._doc: dict[str, list[dict]] = self._load()
        self._cache: dict[str, tuple] = {}
        if subjects and not self._doc.get(SUBJECTS):
            self._doc[SUBJECTS] = [_to_row(s) for s in subjects]
            self._flush()

    def _load(self) -> dict[str, list[dict]]:
        if not self._path.exists():
            return {}
        with self._path.open("r", encoding="utf-8") as f:
            doc = json.load(f)
        if not isinstance(doc, dict):
            raise ValueError(f"Store file {self._path} must contain a JSON object")
        return doc

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(self._doc, f, ensure_ascii=False, indent=2)
        os.replace(tmp, self._path)

    def _read(self, key: str, factory: Callable[[dict], T]) -> tuple[T, ...]:
        # Same tuple until the next write, so identity-keyed caches stay valid.
        if key not in self._cache:
            self._cache[key] = tuple(factory(row) for row in self._doc.get(key, []))
        return self._cache[key]

    def _write(self, key: str, items: Sequence[Any]) -> None:
        self._doc[key] = [_to_row(i) for i in items]
        self._cache.pop(key, None)
        self._flush()
        logger.debug("Wrote %d item(s) to %s", len(items), key)

    def list_students(self) -> Sequence[Student]:
        return self._read(STUDENTS, lambda r: Student(**r))

    def replace_students(self, students: Sequence[Student]) -> None:
        self._write(STUDENTS, students)

    def list_teachers(self) -> Sequence[Teacher]:
        return self._read(TEACHERS, lambda r: Teacher(**r))

    def replace_teachers(self, teachers: Sequence[Teacher]) -> None:
        self._write(TEACHERS, teachers)

    def list_subjects(self) -> Sequence[Subject]:
        return self._read(SUBJECTS, lambda r: Subject(**r))

    def list_assignments(self) -> Sequence[TeacherAssignment]:
        return self._read(ASSIGNMENTS, lambda r: TeacherAssignment(**r))

    def replace_assignments(self, assignments: Sequence[TeacherAssignment]) -> None:
        self._write(ASSIGNMENTS, assignments)

    def list_attendance(self) -> Sequence[AttendanceRecord]:
        return self._read(ATTENDANCE, _attendance_from_row)

    def replace_attendance(self, records: Sequence[AttendanceRecord]) -> None:
        self._write(ATTENDANCE, records)

    def list_profiles(self) -> Sequence[UserProfile]:
        return self._read(PROFILES, _profile_from_row)

    def replace_profiles(self, profiles: Sequence[UserProfile]) -> None:
        self._write(PROFILES, profiles)

    def list_credentials(self) -> Sequence[Credential]:
        return self._read(CREDENTIALS, lambda r: Credential(**r))

    def replace_credentials(self, credentials: Sequence[Credential]) -> None:
        self._write(CREDENTIALS, credentials)
