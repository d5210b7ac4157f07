"""
Base test fixtures and helpers for store tests.

Provides common test patterns for both article and credential stores.
"""
import json
import os
import shutil
import tempfile
from unittest.mock import Mock, MagicMock

import pytest


class BaseLocalDiskStoreTests:
    """Base test class for local disk stores."""

    @pytest.fixture
    def temp_state_dir(self):
        """Create a temporary state directory."""
        temp_dir = tempfile.mkdtemp()
        state_dir = os.path.join(temp_dir, "data")
        os.makedirs(state_dir, exist_ok=True)
        yield state_dir
        shutil.rmtree(temp_dir)


class BaseTigrisStoreTests:
    """Base test class for Tigris stores."""

    @pytest.fixture
    def mock_s3_client(self):
        """Create a mock boto3 S3 client."""
        mock_client = MagicMock()
        return mock_client

    @pytest.fixture
    def tigris_env(self, monkeypatch):
        """Provide fake Tigris credentials through the environment."""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
        monkeypatch.setenv("TIGRIS_BUCKET_NAME", "test-bucket")

    def setup_mock_get_object(self, mock_s3_client, data):
        """
        Helper to setup mock get_object response.

        Args:
            mock_s3_client: Mock S3 client
            data: Data to return from get_object
        """
        mock_body = Mock()
        mock_body.read.return_value = json.dumps(data).encode('utf-8')
        mock_s3_client.get_object.return_value = {"Body": mock_body}

    def setup_mock_no_such_key(self, mock_s3_client):
        """
        Helper to setup mock NoSuchKey error for reads and existence checks.

        Args:
            mock_s3_client: Mock S3 client
        """
        from botocore.exceptions import ClientError
        mock_s3_client.get_object.side_effect = ClientError(
            {'Error': {'Code': 'NoSuchKey'}}, 'GetObject'
        )
        mock_s3_client.head_object.side_effect = ClientError(
            {'Error': {'Code': '404'}}, 'HeadObject'
        )

    def saved_body(self, mock_s3_client):
        """Decode the JSON body of the last put_object call."""
        call_kwargs = mock_s3_client.put_object.call_args[1]
        return json.loads(call_kwargs["Body"])
