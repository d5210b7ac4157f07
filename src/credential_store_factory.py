"""
Factory function for creating credential stores.
"""
import os
from typing import Dict, Optional

from src.credential_store import CredentialStore
from src.local_disk_credential_store import LocalDiskCredentialStore
from src.passwords import DEFAULT_ROUNDS
from src.static_credential_store import StaticCredentialStore
from src.tigris_credential_store import TigrisCredentialStore


def create_credential_store(
    state_dir: str = "data",
    storage_type: Optional[str] = None,
    admin_username: str = "felister",
    admin_password: str = "admin123",
    rounds: int = DEFAULT_ROUNDS,
    tigris_settings: Optional[Dict[str, Optional[str]]] = None,
) -> CredentialStore:
    """
    Create a credential store for the configured backend.

    When storage_type is not given, the CREDENTIAL_STORAGE_TYPE environment
    variable decides:
    - 'local' or unset: LocalDiskCredentialStore (default)
    - 'static': StaticCredentialStore holding the admin pair
    - 'tigris': TigrisCredentialStore

    The admin pair is only used by the static store; persistent stores are
    seeded separately through ensure_default_admin.

    Args:
        state_dir: Directory for local disk storage (default: "data")
        storage_type: Backend name, overriding the environment
        admin_username: Username for the static store
        admin_password: Password for the static store
        rounds: bcrypt cost factor for the static store
        tigris_settings: Connection arguments for the Tigris store; the store
                         reads the AWS_* and TIGRIS_* variables when omitted

    Returns:
        CredentialStore: Configured credential store instance
    """
    storage_type = (storage_type or os.getenv('CREDENTIAL_STORAGE_TYPE', 'local')).lower()

    if storage_type == 'static':
        return StaticCredentialStore(admin_username, admin_password, rounds=rounds)
    if storage_type == 'tigris':
        return TigrisCredentialStore(**(tigris_settings or {}))
    return LocalDiskCredentialStore(state_dir=state_dir)
