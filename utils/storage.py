# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

"""
String key-value store persisted as a single JSON file.
Values are opaque strings; callers JSON-encode their own records.
"""

import json
import threading
import logging
from pathlib import Path
from typing import Dict, Optional

from core.config import SWITCHER_CONFIG
from core.exceptions import StorageError

logger = logging.getLogger("LocalStorage")


class LocalStorage:
    """Thread-safe get/set of string values keyed by name."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or SWITCHER_CONFIG["storage"]["path"])
        self._lock = threading.RLock()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Unexpected storage format in {self.path}")
        return data

    def _backup_unreadable(self) -> Path:
        """Move the current file aside so its other keys can still be recovered."""
        backup = self.path.with_suffix(".corrupt")
        try:
            self.path.replace(backup)
        except OSError as e:
            raise StorageError(f"Failed to back up {self.path}: {e}") from e
        return backup

    def get_item(self, key: str) -> Optional[str]:
        """Get the stored string for key, or None if absent."""
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str):
        """Store a string under key."""
        with self._lock:
            try:
                data = self._read_all()
            except StorageError as e:
                # Don't let one corrupt file block every future write
                backup = self._backup_unreadable()
                logger.error(f"Replacing unreadable storage (saved to {backup}): {e}")
                data = {}
            data[key] = value

            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                # Write to temporary file first, then rename to avoid corruption
                temp_file = self.path.with_suffix(".tmp")
                with open(temp_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, sort_keys=True)
                temp_file.replace(self.path)
            except OSError as e:
                raise StorageError(f"Failed to write {self.path}: {e}") from e

        logger.debug(f"Saved '{key}' to {self.path}")


# Global instance for app-wide use
_global_storage: Optional[LocalStorage] = None


def get_local_storage() -> LocalStorage:
    """Get the global storage instance."""
    global _global_storage
    if _global_storage is None:
        _global_storage = LocalStorage()
    return _global_storage
