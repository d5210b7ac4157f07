"""
Factory function for creating article stores.
"""
import os
from typing import Dict, Optional

from src.article_store import ArticleStore
from src.local_disk_article_store import LocalDiskArticleStore
from src.tigris_article_store import TigrisArticleStore


def create_article_store(
    state_dir: str = "data",
    storage_type: Optional[str] = None,
    tigris_settings: Optional[Dict[str, Optional[str]]] = None,
) -> ArticleStore:
    """
    Create an article store for the configured backend.

    When storage_type is not given, the ARTICLE_STORAGE_TYPE environment
    variable decides:
    - 'local' or unset: LocalDiskArticleStore (default)
    - 'tigris': TigrisArticleStore

    Args:
        state_dir: Directory for local disk storage (default: "data")
        storage_type: Backend name, overriding the environment
        tigris_settings: Connection arguments for the Tigris store; the store
                         reads the AWS_* and TIGRIS_* variables when omitted

    Returns:
        ArticleStore: Configured article store instance
    """
    storage_type = (storage_type or os.getenv('ARTICLE_STORAGE_TYPE', 'local')).lower()

    if storage_type == 'tigris':
        return TigrisArticleStore(**(tigris_settings or {}))
    return LocalDiskArticleStore(state_dir=state_dir)
