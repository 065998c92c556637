from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student in one class (grade + section)."""

    id: str
    name: str
    grade: str
    section: str


@dataclass(frozen=True)
class Subject:
    id: str
    name: str


@dataclass(frozen=True)
class Teacher:
    id: str
    name: str


@dataclass(frozen=True)
class TeacherAssignment:
    """This teacher teaches this subject to this class/section."""

    teacher_id: str
    grade: str
    section: str
    subject_id: str

    @property
    def class_subject_key(self) -> tuple[str, str, str]:
        return self.grade, self.section, self.subject_id
