from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ..app_logger import get_logger
from ..common.validators import require_iso_date, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..store.repository import EntityStore
from .aggregator import in_window, summarize
from .bulk_writer import upsert_many
from .index import AttendanceIndex
from .model import AttendanceRecord, AttendanceSummary

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubjectReport:
    """One student's all-time record for one subject, newest first."""

    summary: AttendanceSummary
    records: list[AttendanceRecord]


def parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().capitalize())
    except ValueError:
        raise ValidationError(f"Unknown attendance status {value!r}")


def _validated(record: AttendanceRecord) -> AttendanceRecord:
    return AttendanceRecord(
        student_id=require_non_empty(record.student_id, "Student"),
        date=require_iso_date(record.date),
        subject_id=require_non_empty(record.subject_id, "Subject"),
        status=parse_status(record.status),
    )


class AttendanceService:
    def __init__(self, store: EntityStore, *, index: AttendanceIndex | None = None):
        self._store = store
        self._index = index or AttendanceIndex()

    def index(self) -> dict[str, list[AttendanceRecord]]:
        return self._index.get(self._store.list_attendance())

    def records_for_student(self, student_id: str) -> list[AttendanceRecord]:
        return self._index.for_student(self._store.list_attendance(), student_id)

    def record_bulk(self, records: Iterable[AttendanceRecord]) -> int:
        """Upsert a batch of records.

        The whole batch is validated first; one bad record rejects all of them.
        """
        batch = [_validated(r) for r in records]
        if not batch:
            return 0

        merged = upsert_many(self._store.list_attendance(), batch)
        self._store.replace_attendance(merged)
        logger.info("Recorded %d attendance entr%s", len(batch), "y" if len(batch) == 1 else "ies")
        return len(batch)

    def mark_class(self, *, date: str, subject_id: str, statuses: Mapping[str, object]) -> int:
        """Daily roll call: ``statuses`` maps student id to status."""
        records = [
            AttendanceRecord(student_id=sid, date=date, subject_id=subject_id, status=parse_status(status))
            for sid, status in statuses.items()
        ]
        return self.record_bulk(records)

    def records_for_day(self, date: str, subject_id: str) -> list[AttendanceRecord]:
        if not subject_id:
            return []
        return [r for r in self._store.list_attendance() if r.date == date and r.subject_id == subject_id]

    def status_for_day(self, student_id: str, date: str, subject_id: str) -> Optional[AttendanceStatus]:
        for r in self.records_for_day(date, subject_id):
            if r.student_id == student_id:
                return r.status
        return None

    def student_subject_report(self, student_id: str, subject_id: str) -> SubjectReport:
        records = [r for r in self.records_for_student(student_id) if r.subject_id == subject_id]
        return SubjectReport(
            summary=summarize(records),
            records=sorted(records, key=lambda r: r.date, reverse=True),
        )

    def class_records(
        self,
        *,
        student_ids: Iterable[str],
        subject_id: str,
        date_start: str,
        date_end: str,
    ) -> list[AttendanceRecord]:
        """Records feeding the per-class chart; empty unless a subject is chosen."""
        if not subject_id:
            return []
        wanted = set(student_ids)
        return [
            r
            for r in in_window(self._store.list_attendance(), date_start, date_end, subject_id)
            if r.student_id in wanted
        ]
