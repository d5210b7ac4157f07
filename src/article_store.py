"""
Abstract interface for article storage backends.

Backends only know how to read and write the whole article collection;
the CRUD operations, validation, id assignment and ordering live here so
every backend behaves the same. Each mutation is a read-modify-write cycle
under the backend's lock.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from src.errors import ValidationError
from src.file_utils import get_utc_date, get_utc_timestamp

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _validate_fields(title: Any, content: Any, date: Any) -> None:
    """Reject missing or whitespace-only title/content before any mutation."""
    if _is_blank(title) or _is_blank(content):
        raise ValidationError("Title and content are required")
    if date is not None and not isinstance(date, str):
        raise ValidationError("Date must be a string")


def _parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp; missing or unparseable values sort oldest."""
    if not isinstance(value, str):
        return _OLDEST
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return _OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _creation_sort_key(article: Dict) -> tuple:
    article_id = article.get("id")
    return (_parse_timestamp(article.get("createdAt")), article_id if isinstance(article_id, int) else 0)


class ArticleStore(ABC):
    """
    Abstract base class for article storage backends.

    Concrete classes combine this with a storage base class that provides
    ``_lock`` and ``_storage_exists``.
    """

    @abstractmethod
    def _read_articles(self) -> List[Dict]:
        """
        Read the whole article collection in file order.

        Raises:
            StorageError: If existing storage cannot be read
        """

    @abstractmethod
    def _write_articles(self, articles: List[Dict]) -> None:
        """
        Replace the whole article collection.

        Raises:
            StorageError: If the collection cannot be written
        """

    def list_articles(self) -> List[Dict]:
        """
        Get all articles, newest created first.

        Returns:
            List of article dicts.
        """
        with self._lock:
            articles = self._read_articles()
        return sorted(articles, key=_creation_sort_key, reverse=True)

    def get_article(self, article_id: int) -> Optional[Dict]:
        """
        Get a single article by ID.

        Args:
            article_id: The unique identifier of the article.

        Returns:
            Article dict, or None if not found.
        """
        with self._lock:
            articles = self._read_articles()
        for article in articles:
            if article.get("id") == article_id:
                return article
        return None

    def create_article(self, title: str, content: str, author: str, date: Optional[str] = None) -> Dict:
        """
        Create an article with a freshly assigned id.

        Args:
            title: Article title, stored trimmed.
            content: Article content, stored trimmed.
            author: Username of the authenticated caller.
            date: Display date; defaults to today's UTC date.

        Returns:
            The stored article dict.

        Raises:
            ValidationError: If title or content is missing or blank
        """
        _validate_fields(title, content, date)

        with self._lock:
            articles = self._read_articles()
            ids = [a["id"] for a in articles if isinstance(a.get("id"), int)]
            now = get_utc_timestamp()
            article = {
                "id": max(ids) + 1 if ids else 1,
                "title": title.strip(),
                "content": content.strip(),
                "date": date or get_utc_date(),
                "author": author,
                "createdAt": now,
                "updatedAt": now,
            }
            articles.append(article)
            self._write_articles(articles)

        logger.info("Created article %s", article["id"])
        return article

    def update_article(self, article_id: int, title: str, content: str,
                       date: Optional[str] = None) -> Optional[Dict]:
        """
        Update title, content and date of an existing article.

        The id, author and createdAt fields are never changed.

        Returns:
            The updated article dict, or None if not found.

        Raises:
            ValidationError: If title or content is missing or blank
        """
        _validate_fields(title, content, date)

        with self._lock:
            articles = self._read_articles()
            for i, existing in enumerate(articles):
                if existing.get("id") == article_id:
                    updated = dict(existing)
                    updated.update({
                        "title": title.strip(),
                        "content": content.strip(),
                        "date": date or existing.get("date"),
                        "updatedAt": get_utc_timestamp(),
                    })
                    articles[i] = updated
                    self._write_articles(articles)
                    logger.info("Updated article %s", article_id)
                    return updated
        return None

    def delete_article(self, article_id: int) -> bool:
        """
        Delete an article by ID.

        Returns:
            True if the article was deleted, False if it was not found.
        """
        with self._lock:
            articles = self._read_articles()
            remaining = [a for a in articles if a.get("id") != article_id]

            if len(remaining) == len(articles):
                return False

            self._write_articles(remaining)

        logger.info("Deleted article %s", article_id)
        return True

    def seed_default_articles(self, articles: List[Dict]) -> bool:
        """
        Write the given articles if the backing storage does not exist yet.

        Missing ``createdAt``/``updatedAt`` fields are filled with the current time.

        Returns:
            True if the articles were written, False if storage already existed.
        """
        with self._lock:
            if self._storage_exists():
                return False
            now = get_utc_timestamp()
            seeded = []
            for article in articles:
                record = dict(article)
                record.setdefault("createdAt", now)
                record.setdefault("updatedAt", record["createdAt"])
                seeded.append(record)
            self._write_articles(seeded)

        logger.info("Created %d default articles", len(seeded))
        return True
