"""Demo dataset applied to an empty store."""

from __future__ import annotations

import random
from datetime import date, timedelta

from ..app_logger import get_logger
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import to_iso, today_local
from ..core.enums import AttendanceStatus, Role
from ..identity.model import UserProfile
from ..identity.service import IdentityService
from ..roster.model import Student, Subject, Teacher, TeacherAssignment
from .repository import EntityStore

logger = get_logger(__name__)

SUBJECTS = (
    Subject(id="subj_math", name="Mathematics"),
    Subject(id="subj_sci", name="Science"),
    Subject(id="subj_hist", name="History"),
    Subject(id="subj_eng", name="English"),
)

STUDENTS = (
    Student(id="stu_1", name="Alice Johnson", grade="10", section="A"),
    Student(id="stu_2", name="Bob Williams", grade="10", section="A"),
    Student(id="stu_3", name="Charlie Brown", grade="10", section="B"),
    Student(id="stu_4", name="Diana Miller", grade="11", section="A"),
    Student(id="stu_5", name="Ethan Davis", grade="11", section="A"),
    Student(id="stu_6", name="Fiona Garcia", grade="10", section="A"),
    Student(id="stu_7", name="George Harris", grade="10", section="B"),
    Student(id="stu_8", name="Hannah Clark", grade="11", section="A"),
)

TEACHERS = (
    Teacher(id="mr-smith", name="Mr. Smith"),
    Teacher(id="ms-jones", name="Ms. Jones"),
)

ASSIGNMENTS = (
    TeacherAssignment(teacher_id="mr-smith", grade="10", section="A", subject_id="subj_math"),
    TeacherAssignment(teacher_id="mr-smith", grade="10", section="B", subject_id="subj_math"),
    TeacherAssignment(teacher_id="ms-jones", grade="10", section="A", subject_id="subj_sci"),
    TeacherAssignment(teacher_id="ms-jones", grade="11", section="A", subject_id="subj_sci"),
    TeacherAssignment(teacher_id="mr-smith", grade="11", section="A", subject_id="subj_hist"),
    TeacherAssignment(teacher_id="ms-jones", grade="10", section="B", subject_id="subj_eng"),
)

# (email, password, profile)
DEMO_LOGINS = (
    ("admin@school.edu", "password", UserProfile(id="user_admin", name="Admin User", role=Role.ADMIN, entity_id="admin_1")),
    ("mr.smith@school.edu", "password", UserProfile(id="user_teach_1", name="Mr. Smith", role=Role.TEACHER, entity_id="mr-smith")),
    ("ms.jones@school.edu", "password", UserProfile(id="user_teach_2", name="Ms. Jones", role=Role.TEACHER, entity_id="ms-jones")),
    ("alice.johnson@student.edu", "password", UserProfile(id="user_stu_1", name="Alice Johnson", role=Role.STUDENT, entity_id="stu_1")),
)

# Weighted towards Present: 5 Present, 1 Absent, 1 Late.
_STATUS_POOL = (AttendanceStatus.PRESENT,) * 5 + (AttendanceStatus.ABSENT, AttendanceStatus.LATE)


def generate_attendance(
    *,
    days: int,
    today: date | None = None,
    seed: int = 42,
) -> list[AttendanceRecord]:
    """Roughly 90% coverage for every assigned class/subject over the past ``days``."""
    rng = random.Random(seed)
    today = today or today_local()
    assigned = {a.class_subject_key for a in ASSIGNMENTS}

    records: list[AttendanceRecord] = []
    for offset in range(1, days + 1):
        day = to_iso(today - timedelta(days=offset))
        for student in STUDENTS:
            for subject in SUBJECTS:
                if (student.grade, student.section, subject.id) not in assigned:
                    continue
                if rng.random() > 0.1:
                    records.append(
                        AttendanceRecord(
                            student_id=student.id,
                            date=day,
                            subject_id=subject.id,
                            status=rng.choice(_STATUS_POOL),
                        )
                    )
    return records


def is_empty(store: EntityStore) -> bool:
    return not (store.list_students() or store.list_teachers() or store.list_credentials())


def seed_demo_data(store: EntityStore, identity: IdentityService, *, days: int = 34, today: date | None = None) -> None:
    store.replace_students(STUDENTS)
    store.replace_teachers(TEACHERS)
    store.replace_assignments(ASSIGNMENTS)
    store.replace_attendance(generate_attendance(days=days, today=today))
    for email, password, profile in DEMO_LOGINS:
        identity.register_identity(email, password, profile)
        identity.add_profile(profile)
    logger.info("Seeded demo data (%d students, %d days)", len(STUDENTS), days)
