"""
Tigris/S3-compatible storage implementation of article storage.

Stores articles in an S3-compatible object storage service.
Default object key: data/articles.json
"""
from typing import Dict, List

from botocore.exceptions import BotoCoreError, ClientError

from src.article_store import ArticleStore
from src.base_json_store import BaseTigrisStore
from src.errors import StorageError


class TigrisArticleStore(BaseTigrisStore, ArticleStore):
    """Tigris/S3-compatible storage implementation of article storage."""

    def __init__(self, key_prefix: str = "data", **kwargs):
        """
        Initialize the Tigris article store.

        Args:
            key_prefix: Prefix for the object key (default: "data").
            **kwargs: Additional keyword arguments passed to BaseTigrisStore.
        """
        super().__init__(**kwargs)
        self.key_prefix = key_prefix

    def _get_object_key(self) -> str:
        """Get the S3 object key for article storage."""
        return f"{self.key_prefix}/articles.json"

    def _read_articles(self) -> List[Dict]:
        try:
            data = self._load_from_s3()
        except (ClientError, BotoCoreError, ValueError) as exc:
            raise StorageError("Failed to read articles") from exc
        if data is None:
            return []
        if isinstance(data, list):
            return data
        return data.get("articles", [])

    def _write_articles(self, articles: List[Dict]) -> None:
        try:
            self._save_to_s3({"articles": articles})
        except (ClientError, BotoCoreError) as exc:
            raise StorageError("Failed to write articles") from exc
