"""Seed the configured store with the demo school (only when it is empty)."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.app_logger import setup_logging
from src.school_attendance.school_attendance.container import build_container, build_store
from src.school_attendance.school_attendance.store.seed import is_empty, seed_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", None))

    store = build_store(backend=settings.STORE_BACKEND, data_file=settings.DATA_FILE)
    # No settings passed: the container must not auto-seed, this script decides.
    container = build_container(store=store)
    if not is_empty(store):
        print("Store already has data; nothing to do.")
        return

    seed_demo_data(store, container.identity_service, days=int(getattr(settings, "SEED_DAYS", 34)))
    print(f"OK: Seeded {settings.STORE_BACKEND} store ({settings.DATA_FILE or 'in memory'})")


if __name__ == "__main__":
    main()
