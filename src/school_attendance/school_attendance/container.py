from __future__ import annotations

from dataclasses import dataclass

from .app_logger import get_logger
from .attendance.service import AttendanceService
from .identity.service import IdentityService
from .reports.service import ReportService
from .roster.service import RosterService
from .store.json_store import JsonFileStore
from .store.memory_store import InMemoryStore
from .store.repository import EntityStore
from .store.seed import SUBJECTS, is_empty, seed_demo_data

logger = get_logger(__name__)


@dataclass(frozen=True)
class Container:
    store: EntityStore

    identity_service: IdentityService
    roster_service: RosterService
    attendance_service: AttendanceService
    report_service: ReportService

    report_window_days: int = 30


def build_store(*, backend: str, data_file: str = "") -> EntityStore:
    backend = (backend or "memory").lower()
    if backend == "json":
        if not data_file:
            raise ValueError("DATA_FILE is required for the json store backend")
        return JsonFileStore(data_file, subjects=SUBJECTS)
    if backend == "memory":
        return InMemoryStore(subjects=SUBJECTS)
    raise ValueError(f"Unknown STORE_BACKEND {backend!r}")


def build_container(*, settings=None, store: EntityStore | None = None) -> Container:
    """Wire the store and services from a settings module (or any object with the same attributes)."""
    if store is None:
        store = build_store(
            backend=getattr(settings, "STORE_BACKEND", "memory"),
            data_file=getattr(settings, "DATA_FILE", ""),
        )

    identity_service = IdentityService(store)
    roster_service = RosterService(store, identity_service)
    attendance_service = AttendanceService(store)
    report_service = ReportService(roster_service, attendance_service)

    if bool(getattr(settings, "SEED_DEMO_DATA", False)) and is_empty(store):
        seed_demo_data(store, identity_service, days=int(getattr(settings, "SEED_DAYS", 34)))

    return Container(
        store=store,
        identity_service=identity_service,
        roster_service=roster_service,
        attendance_service=attendance_service,
        report_service=report_service,
        report_window_days=int(getattr(settings, "REPORT_WINDOW_DAYS", 30)),
    )
