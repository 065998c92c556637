from __future__ import annotations

import io

import pytest

from src.school_attendance.school_attendance.main import create_app


@pytest.fixture
def client():
    app = create_app(settings_module="config.testing")
    return app.test_client()


def login(client, email, password="password"):
    return client.post("/login", json={"email": email, "password": password})


def test_login_and_dashboard_dispatch(client):
    assert client.get("/dashboard").status_code == 401
    assert login(client, "admin@school.edu", "nope").status_code == 401

    resp = login(client, "ADMIN@school.edu")
    assert resp.status_code == 200
    assert resp.get_json()["dashboard"] == "admin"

    body = client.get("/dashboard").get_json()
    assert body["students"] == 8
    assert body["grades"] == ["10", "11"]


def test_student_dashboard_has_overview(client):
    login(client, "alice.johnson@student.edu")

    body = client.get("/dashboard").get_json()

    assert body["dashboard"] == "student"
    assert body["overview"]["student"]["id"] == "stu_1"
    assert [s["subject_name"] for s in body["overview"]["subjects"]] == ["Mathematics", "Science"]


def test_reports_require_admin(client):
    assert client.get("/reports").status_code == 401
    login(client, "mr.smith@school.edu")
    assert client.get("/reports").status_code == 403


def test_csv_export(client):
    login(client, "admin@school.edu")

    resp = client.get("/reports.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.headers["Content-Disposition"].startswith("attachment; filename=attendance_report_")
    lines = resp.get_data(as_text=True).split("\n")
    assert lines[0] == "Student Name,Grade,Section,Date,Subject,Status,Teacher"
    assert lines[1].startswith('"Alice Johnson",10,A,')


def test_bad_threshold(client):
    login(client, "admin@school.edu")
    assert client.get("/reports?threshold=abc").status_code == 400


def test_csv_import_upload(client):
    login(client, "admin@school.edu")
    data = {"file": (io.BytesIO(b"Name,Grade,Section\nZoe Park,9,b\n,9,b\n"), "students.csv")}

    body = client.post("/students/import", data=data, content_type="multipart/form-data").get_json()

    assert body["success_count"] == 1
    assert body["error_count"] == 1
    assert body["credentials"][0]["email"] == "zoe.park@student.edu"
    assert body["message"] == "Import complete. Added 1 new students. Skipped 1 rows."


def test_import_without_data_rows_is_rejected(client):
    login(client, "admin@school.edu")
    resp = client.post("/students/import", data="name,grade,section\n", content_type="text/csv")
    assert resp.status_code == 400


def test_conflicting_assignment(client):
    login(client, "admin@school.edu")

    resp = client.post(
        "/assignments",
        json={"teacher_id": "ms-jones", "grade": "10", "section": "a", "subject_id": "subj_math"},
    )

    assert resp.status_code == 409
    assert resp.get_json()["message"] == "Error: This class/subject is already assigned to Mr. Smith."


def test_teacher_marks_only_assigned_classes(client):
    login(client, "mr.smith@school.edu")

    resp = client.post(
        "/attendance/mark",
        json={
            "grade": "10",
            "section": "A",
            "subject_id": "subj_sci",
            "date": "2024-01-01",
            "statuses": {"stu_1": "Present"},
        },
    )

    assert resp.status_code == 403


def test_roll_call_only_covers_students_in_the_class(client):
    login(client, "mr.smith@school.edu")
    payload = {"grade": "10", "section": "A", "subject_id": "subj_math", "date": "2024-01-01"}

    resp = client.post("/attendance/mark", json={**payload, "statuses": {"stu_1": "Present", "stu_4": "Absent"}})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Students not in 10 A: stu_4"

    resp = client.post("/attendance/mark", json={**payload, "statuses": {"stu_1": "present"}})

    assert resp.status_code == 200
    assert resp.get_json()["written"] == 1
