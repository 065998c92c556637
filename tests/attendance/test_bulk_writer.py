from src.school_attendance.school_attendance.attendance.bulk_writer import upsert_many
from src.school_attendance.school_attendance.attendance.model import AttendanceRecord
from src.school_attendance.school_attendance.core.enums import AttendanceStatus


def rec(student_id, day, subject_id, status=AttendanceStatus.PRESENT):
    return AttendanceRecord(student_id=student_id, date=day, subject_id=subject_id, status=status)


def test_matching_key_replaces_in_place_without_growing():
    existing = (rec("s1", "2024-01-01", "math"), rec("s2", "2024-01-01", "math"))

    out = upsert_many(existing, [rec("s1", "2024-01-01", "math", AttendanceStatus.ABSENT)])

    assert len(out) == 2
    assert out[0].status == AttendanceStatus.ABSENT
    assert out[1] == existing[1]


def test_new_key_is_appended():
    existing = (rec("s1", "2024-01-01", "math"),)

    out = upsert_many(existing, [rec("s1", "2024-01-01", "sci")])

    assert len(out) == 2
    assert out[-1].subject_id == "sci"


def test_later_entry_in_batch_wins():
    out = upsert_many(
        (),
        [
            rec("s1", "2024-01-01", "math", AttendanceStatus.ABSENT),
            rec("s1", "2024-01-01", "math", AttendanceStatus.LATE),
        ],
    )

    assert len(out) == 1
    assert out[0].status == AttendanceStatus.LATE


def test_existing_sequence_is_not_mutated():
    existing = [rec("s1", "2024-01-01", "math")]

    upsert_many(existing, [rec("s1", "2024-01-01", "math", AttendanceStatus.ABSENT), rec("s2", "2024-01-01", "math")])

    assert existing == [rec("s1", "2024-01-01", "math")]
