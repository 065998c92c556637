"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the reporting rules live in the services.
"""

from src.school_attendance.school_attendance.attendance.aggregator import format_percentage
from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.core.enums import AttendanceStatus
from src.school_attendance.school_attendance.store.memory_store import InMemoryStore
from src.school_attendance.school_attendance.store.seed import SUBJECTS


def main():
    container = build_container(store=InMemoryStore(subjects=SUBJECTS))
    jane = container.roster_service.add_student("Jane Doe", "9", "c").student
    container.attendance_service.mark_class(
        date="2024-01-01", subject_id="subj_math", statuses={jane.id: AttendanceStatus.LATE}
    )
    for report in container.report_service.build_student_reports(date_start="2024-01-01", date_end="2024-01-31"):
        print(report.name, report.section, format_percentage(report.percentage))


if __name__ == "__main__":
    main()
