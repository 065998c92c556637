from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class UserProfile:
    """Links a login identity to a Student or Teacher id."""

    id: str
    name: str
    role: Role
    entity_id: str


@dataclass(frozen=True)
class Credential:
    email: str
    password_hash: str
    profile_id: str


@dataclass(frozen=True)
class GeneratedCredentials:
    """Login details handed back once after registration."""

    name: str
    email: str
    password: str
