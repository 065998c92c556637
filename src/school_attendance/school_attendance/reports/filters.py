from __future__ import annotations

from typing import Iterable

from .model import ReportFilter, StudentReport


def matches(report: StudentReport, f: ReportFilter) -> bool:
    return (
        f.search.lower() in report.name.lower()
        and report.percentage <= f.threshold_pct
        and (not f.grade or report.grade == f.grade)
        and (not f.section or report.section == f.section)
    )


def filter_reports(reports: Iterable[StudentReport], f: ReportFilter | None = None) -> list[StudentReport]:
    """Keep matching reports without changing their order."""
    f = f or ReportFilter()
    return [r for r in reports if matches(r, f)]
