from __future__ import annotations

from ..core.enums import Dashboard, Role

_DASHBOARDS: dict[Role, Dashboard] = {
    Role.TEACHER: Dashboard.TEACHER,
    Role.ADMIN: Dashboard.ADMIN,
    Role.STUDENT: Dashboard.STUDENT,
}


def dashboard_for(role) -> Dashboard:
    """Pick the dashboard for a role; unknown roles get UNRECOGNIZED."""
    parsed = role if isinstance(role, Role) else Role.parse(role)
    if parsed is None:
        return Dashboard.UNRECOGNIZED
    return _DASHBOARDS[parsed]
