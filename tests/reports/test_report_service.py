from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.attendance.model import AttendanceRecord
from src.school_attendance.school_attendance.core.enums import AttendanceStatus
from src.school_attendance.school_attendance.core.exceptions import ValidationError
from src.school_attendance.school_attendance.reports.model import ReportFilter
from src.school_attendance.school_attendance.roster.model import TeacherAssignment

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE


@pytest.fixture
def school(container):
    roster = container.roster_service
    roster.add_teacher("mr-smith", "Mr. Smith")
    roster.add_assignment(TeacherAssignment(teacher_id="mr-smith", grade="10", section="A", subject_id="math"))
    roster.add_assignment(TeacherAssignment(teacher_id="mr-smith", grade="10", section="A", subject_id="sci"))
    zed = roster.add_student("Zed Young", "10", "A").student
    amy = roster.add_student("Amy Adams", "10", "A").student
    new = roster.add_student("Nell New", "11", "B").student

    def r(student, day, subject, status):
        return AttendanceRecord(student_id=student.id, date=day, subject_id=subject, status=status)

    container.attendance_service.record_bulk(
        [
            r(zed, "2024-01-01", "math", P),
            r(zed, "2024-01-02", "math", A),
            r(zed, "2024-01-03", "math", L),
            r(amy, "2024-01-01", "math", A),
            r(amy, "2024-01-01", "sci", P),
            r(amy, "2024-02-01", "sci", A),
        ]
    )
    return container, {"zed": zed, "amy": amy, "new": new}


def test_reports_sorted_by_name_and_default_100(school):
    container, s = school

    reports = container.report_service.build_student_reports(date_start="2024-01-01", date_end="2024-01-31")

    assert [r.name for r in reports] == ["Amy Adams", "Nell New", "Zed Young"]
    amy, nell, zed = reports
    assert (amy.summary.present_count, amy.summary.total_days, amy.percentage) == (1, 2, 50.0)
    assert nell.summary.total_days == 0 and nell.percentage == 100
    assert zed.percentage == pytest.approx(200 / 3)


def test_subject_filter_applies_to_percentage_and_records(school):
    container, s = school

    reports = container.report_service.build_student_reports(
        date_start="2024-01-01", date_end="2024-12-31", subject_id="sci"
    )

    amy = reports[0]
    assert [r.subject_id for r in amy.records] == ["sci", "sci"]
    assert amy.percentage == 50.0


def test_export_pipeline(school):
    container, s = school

    text = container.report_service.export(
        date_start="2024-01-01",
        date_end="2024-01-31",
        filters=ReportFilter(threshold_pct=75),
    )

    lines = text.split("\n")
    # Amy (50%) and Zed (66.7%) pass the threshold; Nell (100%) does not.
    assert len(lines) == 1 + 2 + 3
    assert lines[1] == '"Amy Adams",10,A,2024-01-01,Mathematics,Absent,"Mr. Smith"'
    assert lines[2] == '"Amy Adams",10,A,2024-01-01,Science,Present,"Mr. Smith"'
    assert lines[3].startswith('"Zed Young"')


def test_student_overview_uses_class_subjects(school):
    container, s = school

    overview = container.report_service.student_overview(s["zed"].id, date_start="2024-01-01", date_end="2024-01-31")

    assert overview.overall.total_days == 3
    assert [(x.subject_name, x.total) for x in overview.subjects] == [("Mathematics", 3), ("Science", 0)]
    assert overview.subjects[1].percentage == 100
    assert [r.date for r in overview.daily_log] == ["2024-01-03", "2024-01-02", "2024-01-01"]


def test_report_card_breakdown(school):
    container, s = school

    card = container.report_service.student_report_card(s["amy"].id, date_start="2024-01-01", date_end="2024-12-31")

    assert card.overall.total_days == 3
    assert [(x.subject_name, x.present_count, x.total) for x in card.subjects] == [
        ("Mathematics", 0, 1),
        ("Science", 1, 2),
    ]


def test_unknown_student_overview(container):
    with pytest.raises(ValidationError):
        container.report_service.student_overview("nope", date_start="2024-01-01", date_end="2024-01-31")


def test_reports_sort_case_insensitively(container):
    for name in ("Zed Young", "alice smith", "Bob Lee"):
        container.roster_service.add_student(name, "10", "A")

    reports = container.report_service.build_student_reports(date_start="2024-01-01", date_end="2024-01-31")

    assert [r.name for r in reports] == ["alice smith", "Bob Lee", "Zed Young"]
