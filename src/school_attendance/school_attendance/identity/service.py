from __future__ import annotations

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..app_logger import get_logger
from ..core.exceptions import AuthenticationError, DuplicateEmailError
from ..store.repository import EntityStore
from .model import Credential, UserProfile

logger = get_logger(__name__)


class IdentityService:
    """Toy local credential list plus the user profiles it points at."""

    def __init__(self, store: EntityStore):
        self._store = store

    def _find_credential(self, email: str) -> Optional[Credential]:
        wanted = email.strip().lower()
        for c in self._store.list_credentials():
            if c.email.lower() == wanted:
                return c
        return None

    def register_identity(self, email: str, password: str, profile: UserProfile) -> Credential:
        if self._find_credential(email):
            raise DuplicateEmailError(f"User with email {email} already exists.")

        cred = Credential(email=email, password_hash=generate_password_hash(password), profile_id=profile.id)
        self._store.replace_credentials([*self._store.list_credentials(), cred])
        logger.info("Registered identity %s for profile %s", email, profile.id)
        return cred

    def add_profile(self, profile: UserProfile) -> None:
        self._store.replace_profiles([*self._store.list_profiles(), profile])

    def profile_for(self, profile_id: str) -> Optional[UserProfile]:
        for p in self._store.list_profiles():
            if p.id == profile_id:
                return p
        return None

    def list_profiles(self) -> list[UserProfile]:
        return list(self._store.list_profiles())

    def authenticate(self, email: str, password: str) -> UserProfile:
        cred = self._find_credential(email or "")
        if not cred or not check_password_hash(cred.password_hash, password or ""):
            raise AuthenticationError("Invalid email or password.")

        profile = self.profile_for(cred.profile_id)
        if not profile:
            raise AuthenticationError("User profile not found. Data inconsistency.")
        return profile
