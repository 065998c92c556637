"""CSV log export: one row per attendance record of each filtered student."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping

from ..common.datetime_utils import to_iso
from ..core.constants import EXPORT_FILENAME_PATTERN, EXPORT_HEADERS, NOT_AVAILABLE
from ..core.enums import AttendanceStatus
from ..roster.model import Subject
from .model import StudentReport

# (grade, section, subject_id) -> teacher name
TeacherNames = Mapping[tuple[str, str, str], str]


def escape_cell(cell: str) -> str:
    return '"' + cell.replace('"', '""') + '"'


def export_rows(
    reports: Iterable[StudentReport],
    subjects: Iterable[Subject],
    teacher_names: TeacherNames,
) -> list[list[str]]:
    names = {s.id: s.name for s in subjects}
    rows: list[list[str]] = []
    for report in reports:
        for record in report.records:
            rows.append(
                [
                    escape_cell(report.name),
                    report.grade,
                    report.section,
                    record.date,
                    names.get(record.subject_id, NOT_AVAILABLE),
                    AttendanceStatus(record.status).value,
                    escape_cell(teacher_names.get((report.grade, report.section, record.subject_id), NOT_AVAILABLE)),
                ]
            )
    return rows


def export_csv(
    reports: Iterable[StudentReport],
    subjects: Iterable[Subject],
    teacher_names: TeacherNames,
) -> str:
    """Render the export text.

    Student Name and Teacher are always quoted; every other column is written
    as-is. Row order follows the reports, then each report's records.
    """
    lines = [",".join(EXPORT_HEADERS)]
    lines.extend(",".join(row) for row in export_rows(reports, subjects, teacher_names))
    return "\n".join(lines)


def export_filename(today: date) -> str:
    return EXPORT_FILENAME_PATTERN.format(day=to_iso(today))
