"""
In-process credential store holding one fixed admin identity.
"""
from typing import Dict, List

from src.credential_store import CredentialStore, build_admin_record
from src.passwords import DEFAULT_ROUNDS


class StaticCredentialStore(CredentialStore):
    """Credential store backed by a single username/password pair."""

    def __init__(self, username: str, password: str, role: str = "admin",
                 rounds: int = DEFAULT_ROUNDS):
        """
        Initialize the static store.

        Args:
            username: Admin username
            password: Admin password in plain text, hashed once here
            role: Role claim carried by issued tokens (default: "admin")
            rounds: bcrypt cost factor
        """
        self._user = build_admin_record(username, password, role=role, rounds=rounds)

    def get_users(self) -> List[Dict]:
        """Get the single static user."""
        return [dict(self._user)]
