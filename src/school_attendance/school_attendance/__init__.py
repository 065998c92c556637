"""School Attendance package.

Organized by feature modules (attendance, roster, reports, identity, store)
with a thin Flask controller layer over plain service functions.
"""
