from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.roster.model import Subject
from src.school_attendance.school_attendance.store.memory_store import InMemoryStore

SUBJECTS = (
    Subject(id="math", name="Mathematics"),
    Subject(id="sci", name="Science"),
    Subject(id="eng", name="English"),
)


@pytest.fixture
def store():
    return InMemoryStore(subjects=SUBJECTS)


@pytest.fixture
def container(store):
    return build_container(store=store)
