"""Backup the JSON data file next to the repo under backups/."""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if settings.STORE_BACKEND != "json":
        raise SystemExit("Only the json store backend keeps a file to back up.")

    data_file = Path(settings.DATA_FILE)
    if not data_file.is_absolute():
        data_file = REPO_ROOT / data_file
    if not data_file.exists():
        raise SystemExit(f"Data file not found: {data_file}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"school_data_{ts}.json"
    shutil.copy2(data_file, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
