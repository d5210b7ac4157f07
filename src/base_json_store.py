"""
Base classes for JSON-based stores (local disk and Tigris/S3).

Provides common functionality for storage backends that keep a whole
collection in a single JSON document. Each store owns a re-entrant lock so
that read-modify-write cycles never interleave inside one process.
"""
import copy
import json
import os
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.errors import StorageError
from src.file_utils import load_json_file, save_json_file


class BaseLocalDiskStore(ABC):
    """
    Base class for local disk stores.

    Keeps an in-memory copy of the last document read or written, so reads
    after the first one do not touch the filesystem.
    """

    def __init__(self, state_dir: str = "data"):
        """
        Initialize local disk store.

        Args:
            state_dir: Directory for storing state files (default: "data")

        Raises:
            OSError: If the state directory cannot be created
        """
        self.state_dir = state_dir
        os.makedirs(self.state_dir, exist_ok=True)
        self._lock = threading.RLock()
        self._cache: Optional[Any] = None

    @abstractmethod
    def _get_filename(self) -> str:
        """
        Get the filename for this store's storage.

        Returns:
            Filename (e.g., "articles.json", "users.json")
        """

    def _get_filepath(self) -> str:
        """Get the full file path for storage."""
        return os.path.join(self.state_dir, self._get_filename())

    def _storage_exists(self) -> bool:
        """Check whether the backing file has been created."""
        return os.path.exists(self._get_filepath())

    def _load_data(self, default_data: Any) -> Any:
        """
        Load JSON data from the cache, or from file on first access.

        Args:
            default_data: Default data structure if file doesn't exist

        Returns:
            A copy of the stored data that callers may mutate freely
        """
        with self._lock:
            if self._cache is None:
                if not self._storage_exists():
                    return copy.deepcopy(default_data)
                self._cache = load_json_file(self._get_filepath(), default_data)
            return copy.deepcopy(self._cache)

    def _save_data(self, data: Any, ensure_dir: bool = True) -> None:
        """
        Save JSON data to file and refresh the cache.

        Args:
            data: Data to save
            ensure_dir: Whether to create parent directory if it doesn't exist
        """
        with self._lock:
            save_json_file(self._get_filepath(), data, ensure_dir=ensure_dir)
            self._cache = copy.deepcopy(data)


class BaseTigrisStore(ABC):
    """
    Base class for Tigris/S3-compatible storage stores.

    Provides common functionality for S3-compatible object storage.
    """

    def __init__(
        self,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        bucket_name: Optional[str] = None,
        region: Optional[str] = None
    ):
        """
        Initialize Tigris store.

        Args:
            access_key_id: AWS access key ID (defaults to AWS_ACCESS_KEY_ID env var)
            secret_access_key: AWS secret access key (defaults to AWS_SECRET_ACCESS_KEY env var)
            endpoint_url: S3 endpoint URL (defaults to AWS_ENDPOINT_URL_S3 or
                         https://fly.storage.tigris.dev)
            bucket_name: S3 bucket name (defaults to TIGRIS_BUCKET_NAME env var)
            region: AWS region (defaults to AWS_REGION or 'auto')
        """
        self.access_key_id = access_key_id or os.getenv('AWS_ACCESS_KEY_ID')
        self.secret_access_key = secret_access_key or os.getenv('AWS_SECRET_ACCESS_KEY')
        self.endpoint_url = (
            endpoint_url or
            os.getenv('AWS_ENDPOINT_URL_S3', 'https://fly.storage.tigris.dev')
        )
        self.bucket_name = bucket_name or os.getenv('TIGRIS_BUCKET_NAME')
        self.region = region or os.getenv('AWS_REGION', 'auto')

        if access_key_id is not None or 'AWS_ACCESS_KEY_ID' in os.environ:
            if not self.access_key_id or not self.secret_access_key:
                raise ValueError(
                    "AWS credentials are required. Set AWS_ACCESS_KEY_ID and "
                    "AWS_SECRET_ACCESS_KEY environment variables or pass them as parameters."
                )

            if not self.bucket_name:
                raise ValueError(
                    "Bucket name is required. Set TIGRIS_BUCKET_NAME environment variable "
                    "or pass it as a parameter."
                )

        self._lock = threading.RLock()
        self.s3_client = boto3.client(
            's3',
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            endpoint_url=self.endpoint_url,
            region_name=self.region
        )

    @abstractmethod
    def _get_object_key(self) -> str:
        """
        Get the S3 object key for this store's storage.

        Returns:
            Object key (e.g., "data/articles.json", "data/users.json")
        """

    def _storage_exists(self) -> bool:
        """
        Check whether the backing object has been created.

        Raises:
            StorageError: If the existence check itself fails
        """
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=self._get_object_key())
            return True
        except ClientError as e:
            if e.response['Error']['Code'] in ('404', 'NoSuchKey', 'NotFound'):
                return False
            raise StorageError(f"Failed to check {self._get_object_key()}") from e
        except BotoCoreError as e:
            raise StorageError(f"Failed to check {self._get_object_key()}") from e

    def _load_from_s3(self) -> Optional[Dict[str, Any]]:
        """
        Load JSON data from S3 object.

        Returns:
            Parsed JSON data or None if object doesn't exist
        """
        try:
            response = self.s3_client.get_object(
                Bucket=self.bucket_name,
                Key=self._get_object_key()
            )
            content = response['Body'].read()
            return json.loads(content.decode('utf-8'))
        except ClientError as e:
            if e.response['Error']['Code'] == 'NoSuchKey':
                return None
            raise

    def _save_to_s3(self, data: Any) -> None:
        """
        Save JSON data to S3 object.

        Args:
            data: Data to save (will be JSON encoded)
        """
        json_content = json.dumps(data, indent=2, ensure_ascii=False)
        self.s3_client.put_object(
            Bucket=self.bucket_name,
            Key=self._get_object_key(),
            Body=json_content,
            ContentType='application/json',
            CacheControl='no-cache, no-store, must-revalidate'
        )
