from __future__ import annotations

from dataclasses import asdict, is_dataclass
from functools import wraps
from typing import Any

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    ConflictingAssignmentError,
    DomainError,
    DuplicateEmailError,
    DuplicateIdError,
)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (AuthenticationError, 401),
    (DuplicateIdError, 409),
    (DuplicateEmailError, 409),
    (ConflictingAssignmentError, 409),
)


def to_dict(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (list, tuple)):
        return [to_dict(o) for o in obj]
    return obj


def ok(**payload):
    return jsonify({"success": True, **payload})


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def domain_error(e: DomainError):
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(e, cls):
            return fail(str(e), status)
    return fail(str(e), 400)


def current_role() -> Role | None:
    return Role.parse(session.get("role"))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "profile_id" not in session:
            return fail("Please log in to continue.", 401)
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "profile_id" not in session:
                return fail("Please log in to continue.", 401)
            if current_role() not in roles:
                return fail("You do not have permission to do that.", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator
