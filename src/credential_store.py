"""
Abstract interface for credential storage backends.

Defines how admin identities are looked up at login. Implementations can
hold a single static identity, a JSON file on local disk, or an object in
distributed storage (Tigris/S3); the login path is the same for all of them.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from src.file_utils import get_utc_timestamp
from src.passwords import DEFAULT_ROUNDS, hash_password

logger = logging.getLogger(__name__)


def build_admin_record(username: str, password: str, role: str = "admin",
                       rounds: int = DEFAULT_ROUNDS, user_id: int = 1) -> Dict:
    """Build a credential record with a bcrypt-hashed password."""
    return {
        "id": user_id,
        "username": username,
        "password": hash_password(password, rounds=rounds),
        "role": role,
        "createdAt": get_utc_timestamp(),
    }


class CredentialStore(ABC):
    """Abstract base class for credential storage backends."""

    @abstractmethod
    def get_users(self) -> List[Dict]:
        """
        Get all stored credential records.

        Read failures are treated as an empty collection.

        Returns:
            List of user dicts with id, username, password (hash) and role keys.
        """

    def find_by_username(self, username: str) -> Optional[Dict]:
        """
        Find a credential record by username.

        Args:
            username: The exact username to look up.

        Returns:
            User dict, or None if no such user exists.
        """
        for user in self.get_users():
            if user.get("username") == username:
                return user
        return None


class SeededCredentialStore(CredentialStore):
    """
    Credential store whose backing storage is created on first startup.

    Concrete classes combine this with a storage base class that provides
    ``_lock`` and ``_storage_exists``.
    """

    @abstractmethod
    def _write_users(self, users: List[Dict]) -> None:
        """Replace the whole credential collection."""

    def ensure_default_admin(self, username: str, password: str, role: str = "admin",
                             rounds: int = DEFAULT_ROUNDS) -> bool:
        """
        Seed a single admin record if the backing storage does not exist yet.

        Returns:
            True if the admin was created, False if storage already existed.
        """
        with self._lock:
            if self._storage_exists():
                return False
            self._write_users([build_admin_record(username, password, role=role, rounds=rounds)])

        logger.info("Created default admin user %s", username)
        return True
