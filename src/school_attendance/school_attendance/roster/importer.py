from __future__ import annotations

import csv
import re
from dataclasses import dataclass, field

from ..app_logger import get_logger
from ..core.constants import IMPORT_REQUIRED_COLUMNS
from ..core.exceptions import DomainError, MalformedInputError
from ..identity.model import GeneratedCredentials
from .service import RosterService

logger = get_logger(__name__)


@dataclass
class ImportSummary:
    success_count: int = 0
    error_count: int = 0
    errors: list[str] = field(default_factory=list)
    credentials: list[GeneratedCredentials] = field(default_factory=list)

    @property
    def message(self) -> str:
        msg = f"Import complete. Added {self.success_count} new students."
        if self.error_count > 0:
            msg += f" Skipped {self.error_count} rows."
        return msg


def _cell(values: list[str], index: int) -> str:
    return values[index].strip() if index < len(values) else ""


def import_students(text: str, roster: RosterService) -> ImportSummary:
    """Create one student per CSV data row.

    The header needs name/grade/section (any case, any order). Structural
    problems raise MalformedInputError before any student is added; a bad row
    only produces an entry in ``errors``. Rows run strictly in order.
    """
    lines = [line for line in re.split(r"\r\n|\n", text or "") if line.strip() != ""]
    if len(lines) < 2:
        raise MalformedInputError("CSV file must contain a header row and at least one data row.")

    header = [h.strip().lower() for h in lines[0].strip().split(",")]
    if any(col not in header for col in IMPORT_REQUIRED_COLUMNS):
        raise MalformedInputError('CSV file header must contain "name", "grade", and "section" columns.')

    name_idx, grade_idx, section_idx = (header.index(col) for col in IMPORT_REQUIRED_COLUMNS)

    summary = ImportSummary()
    for index, line in enumerate(lines[1:]):
        row_no = index + 2
        # One reader per line: a stray quote must not swallow the rows after it.
        try:
            values = next(csv.reader([line]), [])
        except csv.Error:
            values = line.split(",")
        name = _cell(values, name_idx).replace('"', "")
        grade = _cell(values, grade_idx)
        section = _cell(values, section_idx).replace('"', "")

        if not name or not grade or not section:
            summary.error_count += 1
            summary.errors.append(f"Row {row_no}: Missing required data.")
            continue

        try:
            registered = roster.add_student(name, grade, section)
        except DomainError as e:
            summary.error_count += 1
            summary.errors.append(f"Row {row_no} ({name}): {e}")
            continue

        summary.success_count += 1
        summary.credentials.append(registered.credentials)

    if summary.errors:
        logger.warning("CSV import errors:\n%s", "\n".join(summary.errors))
    logger.info(summary.message)
    return summary
