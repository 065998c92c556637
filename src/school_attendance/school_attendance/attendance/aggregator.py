"""Attendance percentage rules.

Every dashboard number goes through compute_percentage() or summarize():

* a record counts as attended when its status is Present or Late;
* the denominator is the number of recorded entries, not calendar days;
* a window with no entries reports 100%.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.text import collation_key
from ..core.constants import LOW_ATTENDANCE_PCT, UNKNOWN_SUBJECT, WARNING_ATTENDANCE_PCT
from ..core.enums import AttendanceBand, AttendanceStatus
from ..roster.model import Subject
from .model import AttendanceRecord, AttendanceSummary, DailyStatusCount, SubjectSummary


def in_window(
    records: Iterable[AttendanceRecord],
    date_start: str,
    date_end: str,
    subject_filter: Optional[str] = None,
) -> list[AttendanceRecord]:
    # ISO YYYY-MM-DD strings order the same way as the dates they name.
    return [
        r
        for r in records
        if date_start <= r.date <= date_end and (not subject_filter or r.subject_id == subject_filter)
    ]


def summarize(records: Sequence[AttendanceRecord]) -> AttendanceSummary:
    present = sum(1 for r in records if AttendanceStatus(r.status).counts_as_attended)
    total = len(records)
    percentage = (present / total) * 100 if total > 0 else 100.0
    return AttendanceSummary(present_count=present, total_days=total, percentage=percentage)


def compute_percentage(
    records: Iterable[AttendanceRecord],
    date_start: str,
    date_end: str,
    subject_filter: Optional[str] = None,
) -> AttendanceSummary:
    return summarize(in_window(records, date_start, date_end, subject_filter))


def _subject_names(subjects: Iterable[Subject]) -> dict[str, str]:
    return {s.id: s.name for s in subjects}


def _to_subject_summary(subject_id: str, name: str, records: Sequence[AttendanceRecord]) -> SubjectSummary:
    s = summarize(records)
    return SubjectSummary(
        subject_id=subject_id,
        subject_name=name,
        present_count=s.present_count,
        total=s.total_days,
        percentage=s.percentage,
    )


def subject_breakdown(
    records: Iterable[AttendanceRecord],
    date_start: str,
    date_end: str,
    subjects: Iterable[Subject],
) -> list[SubjectSummary]:
    """Per-subject percentages over the subjects that actually have records."""
    names = _subject_names(subjects)
    by_subject: dict[str, list[AttendanceRecord]] = {}
    for r in in_window(records, date_start, date_end):
        by_subject.setdefault(r.subject_id, []).append(r)

    out = [_to_subject_summary(sid, names.get(sid, UNKNOWN_SUBJECT), rs) for sid, rs in by_subject.items()]
    out.sort(key=lambda s: collation_key(s.subject_name))
    return out


def subject_summaries(
    records: Iterable[AttendanceRecord],
    date_start: str,
    date_end: str,
    subjects: Iterable[Subject],
) -> list[SubjectSummary]:
    """Per-subject percentages for a fixed subject list, including empty ones."""
    window = in_window(records, date_start, date_end)
    out = [
        _to_subject_summary(s.id, s.name, [r for r in window if r.subject_id == s.id])
        for s in subjects
    ]
    out.sort(key=lambda s: collation_key(s.subject_name))
    return out


def daily_status_counts(records: Iterable[AttendanceRecord], *, limit: Optional[int] = None) -> list[DailyStatusCount]:
    counts: dict[str, dict[AttendanceStatus, int]] = {}
    for r in records:
        day = counts.setdefault(r.date, {s: 0 for s in AttendanceStatus})
        day[AttendanceStatus(r.status)] += 1

    out = [
        DailyStatusCount(
            date=d,
            present=c[AttendanceStatus.PRESENT],
            absent=c[AttendanceStatus.ABSENT],
            late=c[AttendanceStatus.LATE],
            total=sum(c.values()),
        )
        for d, c in sorted(counts.items())
    ]
    if limit is not None:
        out = out[-limit:] if limit > 0 else []
    return out


def format_percentage(value: float) -> str:
    return f"{value:.1f}"


def attendance_band(value: float) -> AttendanceBand:
    if value < LOW_ATTENDANCE_PCT:
        return AttendanceBand.LOW
    if value < WARNING_ATTENDANCE_PCT:
        return AttendanceBand.WARNING
    return AttendanceBand.GOOD
