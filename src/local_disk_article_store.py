"""
Local disk implementation of article storage.

Stores articles as a JSON file on the local filesystem.
Default location: data/articles.json
"""
from typing import Dict, List

from src.article_store import ArticleStore
from src.base_json_store import BaseLocalDiskStore
from src.errors import StorageError


class LocalDiskArticleStore(BaseLocalDiskStore, ArticleStore):
    """
    Local disk implementation of article storage.

    Stores articles in a JSON file on the local filesystem.
    Default location: data/articles.json
    """

    def _get_filename(self) -> str:
        """Get the filename for article storage."""
        return "articles.json"

    def _read_articles(self) -> List[Dict]:
        try:
            data = self._load_data({"articles": []})
        except (OSError, ValueError) as exc:
            raise StorageError("Failed to read articles") from exc
        # Older files hold a bare list
        if isinstance(data, list):
            return data
        return data.get("articles", [])

    def _write_articles(self, articles: List[Dict]) -> None:
        try:
            self._save_data({"articles": articles})
        except OSError as exc:
            raise StorageError("Failed to write articles") from exc
