"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_REPORT_DAYS = 30
DEFAULT_THRESHOLD_PCT = 100.0
CHART_DAYS = 15

LOW_ATTENDANCE_PCT = 75
WARNING_ATTENDANCE_PCT = 90

STUDENT_EMAIL_DOMAIN = "student.edu"
TEACHER_EMAIL_DOMAIN = "school.edu"
STUDENT_DEFAULT_PASSWORD = "password"
TEACHER_DEFAULT_PASSWORD = "password123"

UNKNOWN_SUBJECT = "Unknown"
NOT_AVAILABLE = "N/A"

EXPORT_HEADERS = ("Student Name", "Grade", "Section", "Date", "Subject", "Status", "Teacher")
EXPORT_FILENAME_PATTERN = "attendance_report_{day}.csv"

IMPORT_REQUIRED_COLUMNS = ("name", "grade", "section")
