"""
Tigris/S3-compatible storage implementation of credential storage.

Default object key: data/users.json
"""
import logging
from typing import Dict, List

from botocore.exceptions import BotoCoreError, ClientError

from src.base_json_store import BaseTigrisStore
from src.credential_store import SeededCredentialStore
from src.errors import StorageError

logger = logging.getLogger(__name__)


class TigrisCredentialStore(BaseTigrisStore, SeededCredentialStore):
    """Tigris/S3-compatible storage implementation of credential storage."""

    def __init__(self, key_prefix: str = "data", **kwargs):
        """
        Initialize the Tigris credential store.

        Args:
            key_prefix: Prefix for the object key (default: "data").
            **kwargs: Additional keyword arguments passed to BaseTigrisStore.
        """
        super().__init__(**kwargs)
        self.key_prefix = key_prefix

    def _get_object_key(self) -> str:
        """Get the S3 object key for credential storage."""
        return f"{self.key_prefix}/users.json"

    def get_users(self) -> List[Dict]:
        """
        Get all users from S3.

        Returns:
            List of user dicts, or an empty list if the object cannot be read.
        """
        try:
            data = self._load_from_s3()
        except (ClientError, BotoCoreError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self._get_object_key(), exc)
            return []
        if data is None:
            return []
        if isinstance(data, list):
            return data
        return data.get("users", [])

    def _write_users(self, users: List[Dict]) -> None:
        try:
            self._save_to_s3({"users": users})
        except (ClientError, BotoCoreError) as exc:
            raise StorageError("Failed to write users") from exc
