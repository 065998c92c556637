"""Write the attendance log CSV for a date range without going through Flask.

Usage: python scripts/export_report.py [START END] [--grade G] [--section S] [--threshold PCT]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.common.datetime_utils import default_date_range, today_local
from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.reports.export import export_filename
from src.school_attendance.school_attendance.reports.model import ReportFilter


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    default_start, default_end = default_date_range(container.report_window_days)
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("start", nargs="?", default=default_start)
    parser.add_argument("end", nargs="?", default=default_end)
    parser.add_argument("--subject", default="")
    parser.add_argument("--search", default="")
    parser.add_argument("--grade", default="")
    parser.add_argument("--section", default="")
    parser.add_argument("--threshold", type=float, default=100.0)
    parser.add_argument("--out-dir", default=".")
    args = parser.parse_args()

    text = container.report_service.export(
        date_start=args.start,
        date_end=args.end,
        subject_id=args.subject or None,
        filters=ReportFilter(
            search=args.search,
            threshold_pct=args.threshold,
            grade=args.grade,
            section=args.section.upper(),
        ),
    )
    out_file = Path(args.out_dir) / export_filename(today_local())
    out_file.write_text(text, encoding="utf-8")
    print(f"OK: {out_file} ({text.count(chr(10))} rows)")


if __name__ == "__main__":
    main()
