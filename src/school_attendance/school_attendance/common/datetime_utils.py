from __future__ import annotations

import re
from datetime import date, datetime, timedelta

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_iso(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def is_iso_date(value: str) -> bool:
    """True only for zero-padded YYYY-MM-DD strings naming a real day.

    Range filters compare dates as strings, which is only ordered correctly
    for this exact shape.
    """
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def default_date_range(days: int, *, today: date | None = None) -> tuple[str, str]:
    today = today or today_local()
    return to_iso(today - timedelta(days=days)), to_iso(today)
