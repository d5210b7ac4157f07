"""
Configuration management for the blog backend.
Loads environment variables and provides access to configuration settings.
"""
import logging
import os
from datetime import timedelta
from typing import Dict, List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "your-super-secret-key-change-this"


class Config:
    """Configuration settings loaded from environment variables."""

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key name
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return os.getenv(key, default)

    @property
    def host(self) -> str:
        """Get server bind address."""
        return os.getenv("HOST", "0.0.0.0")

    @property
    def port(self) -> int:
        """Get server port."""
        return int(os.getenv("PORT", "3000"))

    @property
    def jwt_secret(self) -> str:
        """Get the token signing secret."""
        secret = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
        if secret == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET is not set, using the built-in default secret")
        return secret

    @property
    def jwt_algorithm(self) -> str:
        """Get the token signing algorithm."""
        return os.getenv("JWT_ALGORITHM", "HS256")

    @property
    def token_expiry(self) -> timedelta:
        """Get token lifetime."""
        return timedelta(hours=float(os.getenv("TOKEN_EXPIRY_HOURS", "24")))

    @property
    def environment(self) -> str:
        """Get environment mode (development or production)."""
        return os.getenv("ENVIRONMENT", "production").lower()

    @property
    def is_development(self) -> bool:
        """Check if error details should be exposed in responses."""
        return self.environment == "development"

    @property
    def state_dir(self) -> str:
        """Get directory for local JSON storage."""
        return os.getenv("STATE_DIR", "data")

    @property
    def article_storage_type(self) -> str:
        """Get article storage backend name."""
        return os.getenv("ARTICLE_STORAGE_TYPE", "local").lower()

    @property
    def credential_storage_type(self) -> str:
        """Get credential storage backend name."""
        return os.getenv("CREDENTIAL_STORAGE_TYPE", "local").lower()

    @property
    def admin_username(self) -> str:
        """Get the username of the seeded admin."""
        return os.getenv("ADMIN_USERNAME", "felister")

    @property
    def admin_password(self) -> str:
        """Get the password of the seeded admin."""
        return os.getenv("ADMIN_PASSWORD", "admin123")

    @property
    def bcrypt_rounds(self) -> int:
        """Get bcrypt cost factor."""
        return int(os.getenv("BCRYPT_ROUNDS", "10"))

    @property
    def cors_origins(self) -> List[str]:
        """
        Get allowed CORS origins.

        Reads a comma-separated CORS_ORIGINS value; defaults to all origins.
        """
        value = os.getenv("CORS_ORIGINS", "*")
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    @property
    def tigris_settings(self) -> Dict[str, Optional[str]]:
        """
        Get connection settings for Tigris/S3-backed stores.

        Returns:
            Keyword arguments accepted by the Tigris store constructors
        """
        return {
            "access_key_id": os.getenv("AWS_ACCESS_KEY_ID"),
            "secret_access_key": os.getenv("AWS_SECRET_ACCESS_KEY"),
            "endpoint_url": os.getenv("AWS_ENDPOINT_URL_S3", "https://fly.storage.tigris.dev"),
            "bucket_name": os.getenv("TIGRIS_BUCKET_NAME"),
            "region": os.getenv("AWS_REGION", "auto"),
        }
