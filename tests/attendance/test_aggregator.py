from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.attendance.aggregator import (
    attendance_band,
    compute_percentage,
    daily_status_counts,
    format_percentage,
    subject_breakdown,
    subject_summaries,
)
from src.school_attendance.school_attendance.attendance.model import AttendanceRecord
from src.school_attendance.school_attendance.core.enums import AttendanceBand, AttendanceStatus
from src.school_attendance.school_attendance.roster.model import Subject

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE

SUBJECTS = [Subject(id="math", name="Math"), Subject(id="sci", name="Science"), Subject(id="art", name="Art")]


def rec(day: str, status: AttendanceStatus, subject_id: str = "math", student_id: str = "s1") -> AttendanceRecord:
    return AttendanceRecord(student_id=student_id, date=day, subject_id=subject_id, status=status)


def test_present_absent_late_example():
    records = [rec("2024-01-01", P), rec("2024-01-02", A), rec("2024-01-03", L)]

    s = compute_percentage(records, "2024-01-01", "2024-01-03", "math")

    assert s.present_count == 2
    assert s.total_days == 3
    assert s.percentage == pytest.approx(66.6666, rel=1e-4)
    assert format_percentage(s.percentage) == "66.7"


def test_no_records_in_window_is_100_percent():
    records = [rec("2023-12-31", A), rec("2024-02-01", A)]

    s = compute_percentage(records, "2024-01-01", "2024-01-31")

    assert s.total_days == 0
    assert s.present_count == 0
    assert s.percentage == 100


def test_empty_input_is_100_percent():
    assert compute_percentage([], "2024-01-01", "2024-01-31").percentage == 100


def test_window_bounds_are_inclusive():
    records = [rec("2024-01-01", A), rec("2024-01-31", P), rec("2024-02-01", P)]

    s = compute_percentage(records, "2024-01-01", "2024-01-31")

    assert s.total_days == 2
    assert s.present_count == 1


def test_subject_filter_only_when_given():
    records = [rec("2024-01-01", P, "math"), rec("2024-01-01", A, "sci")]

    assert compute_percentage(records, "2024-01-01", "2024-01-01", "sci").percentage == 0
    assert compute_percentage(records, "2024-01-01", "2024-01-01", "").total_days == 2
    assert compute_percentage(records, "2024-01-01", "2024-01-01", None).total_days == 2


def test_absent_never_counts():
    records = [rec(f"2024-01-0{d}", A) for d in range(1, 6)]
    assert compute_percentage(records, "2024-01-01", "2024-01-09").present_count == 0


def test_subject_breakdown_sorted_by_name_with_unknown_subjects():
    records = [
        rec("2024-01-01", P, "sci"),
        rec("2024-01-01", A, "math"),
        rec("2024-01-02", P, "math"),
        rec("2024-01-01", L, "ghost"),
        rec("2023-01-01", A, "art"),
    ]

    out = subject_breakdown(records, "2024-01-01", "2024-01-31", SUBJECTS)

    assert [s.subject_name for s in out] == ["Math", "Science", "Unknown"]
    math = out[0]
    assert (math.present_count, math.total, math.percentage) == (1, 2, 50.0)


def test_subject_summaries_include_subjects_without_records():
    records = [rec("2024-01-01", A, "sci")]

    out = subject_summaries(records, "2024-01-01", "2024-01-31", SUBJECTS)

    by_id = {s.subject_id: s for s in out}
    assert [s.subject_name for s in out] == ["Art", "Math", "Science"]
    assert by_id["art"].percentage == 100
    assert by_id["sci"].percentage == 0


def test_daily_status_counts_sorted_and_limited():
    records = [
        rec("2024-01-03", P, student_id="a"),
        rec("2024-01-01", A, student_id="a"),
        rec("2024-01-01", L, student_id="b"),
        rec("2024-01-02", P, student_id="b"),
    ]

    days = daily_status_counts(records)
    assert [d.date for d in days] == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert (days[0].present, days[0].absent, days[0].late, days[0].total) == (0, 1, 1, 2)

    assert [d.date for d in daily_status_counts(records, limit=2)] == ["2024-01-02", "2024-01-03"]


@pytest.mark.parametrize(
    "value,band",
    [(74.9, AttendanceBand.LOW), (75, AttendanceBand.WARNING), (89.9, AttendanceBand.WARNING), (90, AttendanceBand.GOOD)],
)
def test_attendance_band(value, band):
    assert attendance_band(value) is band
