# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

"""
Recently activated applications, most recent first.
Used for default ordering and as a search bonus.
"""

import json
import logging
from typing import List, Optional, Sequence

from core.config import SWITCHER_CONFIG, RECENT_APPS_STORAGE_KEY
from core.exceptions import StorageError
from .storage import LocalStorage, get_local_storage

logger = logging.getLogger("RecentApps")


def push_recent(
    app_name: str, recent: Sequence[str], limit: Optional[int] = None
) -> List[str]:
    """Move app_name to the front of recent, without duplicates, capped at limit."""
    limit = limit if limit is not None else SWITCHER_CONFIG["storage"]["max_recent_apps"]
    filtered = [name for name in recent if name != app_name]
    return [app_name, *filtered][:limit]


class RecentApps:
    """The persisted recency list."""

    def __init__(self, storage: Optional[LocalStorage] = None, limit: Optional[int] = None):
        self.storage = storage or get_local_storage()
        self.limit = limit if limit is not None else SWITCHER_CONFIG["storage"]["max_recent_apps"]
        self.names: List[str] = []

    def load(self) -> List[str]:
        """Load the list; any read problem gives an empty list."""
        try:
            stored = self.storage.get_item(RECENT_APPS_STORAGE_KEY)
            parsed = json.loads(stored) if stored else []
        except (StorageError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading recent apps: {e}")
            parsed = []

        if not isinstance(parsed, list):
            logger.warning("Ignoring malformed recent apps record")
            parsed = []

        self.names = [name for name in parsed if isinstance(name, str)][: self.limit]
        return list(self.names)

    def add(self, app_name: str) -> List[str]:
        """Record an activation. A failed save is logged and otherwise ignored."""
        self.names = push_recent(app_name, self.names, self.limit)
        try:
            self.storage.set_item(RECENT_APPS_STORAGE_KEY, json.dumps(self.names))
        except StorageError as e:
            logger.warning(f"Error saving recent apps: {e}")
        return list(self.names)
