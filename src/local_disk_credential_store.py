"""
Local disk implementation of credential storage.

Stores admin identities in a JSON file on the local filesystem.
Default location: data/users.json
"""
import logging
from typing import Dict, List

from src.base_json_store import BaseLocalDiskStore
from src.credential_store import SeededCredentialStore

logger = logging.getLogger(__name__)


class LocalDiskCredentialStore(BaseLocalDiskStore, SeededCredentialStore):
    """
    Local disk implementation of credential storage.

    Default location: data/users.json
    """

    def _get_filename(self) -> str:
        """Get the filename for credential storage."""
        return "users.json"

    def get_users(self) -> List[Dict]:
        """
        Get all users from local disk.

        Returns:
            List of user dicts, or an empty list if the file cannot be read.
        """
        try:
            data = self._load_data({"users": []})
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self._get_filepath(), exc)
            return []
        if isinstance(data, list):
            return data
        return data.get("users", [])

    def _write_users(self, users: List[Dict]) -> None:
        self._save_data({"users": users})
