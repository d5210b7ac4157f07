"""
File utility functions for the blog backend.
Common file operations to avoid code duplication.
"""
import json
import os
from datetime import datetime, timezone
from typing import Any


def load_json_file(filepath: str, default: Any) -> Any:
    """
    Load a JSON file with a default fallback.

    Args:
        filepath: Path to the JSON file
        default: Default value if file doesn't exist

    Returns:
        Loaded JSON data or default value

    Raises:
        OSError: If the file exists but cannot be read
        ValueError: If the file does not contain valid JSON
    """
    if os.path.exists(filepath):
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
    return default


def save_json_file(filepath: str, data: Any, ensure_dir: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        filepath: Path to save the JSON file
        data: Data to save
        ensure_dir: Whether to create parent directory if it doesn't exist
    """
    if ensure_dir:
        os.makedirs(os.path.dirname(filepath), exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def get_utc_timestamp() -> str:
    """
    Get current UTC timestamp in ISO format.

    Returns:
        ISO formatted timestamp string with microsecond precision and a Z
        suffix instead of +00:00
    """
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def get_utc_date() -> str:
    """Get the current UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()
