# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

"""
Hotkey assignments: short typed sequences that switch straight to an app.

No hotkey may be a prefix of another one ("f" and "ff" can't coexist),
otherwise typing the longer one would always trigger the shorter one first.
"""

import json
import logging
from typing import Dict, Optional

from core.config import HOTKEY_STORAGE_KEY
from core.exceptions import HotkeyConflictError, HotkeyPersistenceError, StorageError
from .storage import LocalStorage, get_local_storage

logger = logging.getLogger("Hotkeys")


def normalize_hotkey(hotkey: str) -> str:
    return hotkey.strip().lower()


class HotkeyAssignments:
    """Hotkey -> app name table with an app name -> hotkey reverse index."""

    def __init__(self, storage: Optional[LocalStorage] = None):
        self.storage = storage or get_local_storage()
        self._assignments: Dict[str, str] = {}
        self._by_app: Dict[str, str] = {}
        self.loaded = False

    def _set_assignments(self, assignments: Dict[str, str]):
        self._assignments = assignments
        # Rebuilt only here so per-keystroke lookups stay O(1)
        self._by_app = {app_name: hotkey for hotkey, app_name in assignments.items()}

    def load(self) -> Dict[str, str]:
        """Load the table; any read problem gives an empty table."""
        try:
            stored = self.storage.get_item(HOTKEY_STORAGE_KEY)
            parsed = json.loads(stored) if stored else {}
        except (StorageError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading hotkey assignments: {e}")
            parsed = {}

        if not isinstance(parsed, dict):
            logger.warning("Ignoring malformed hotkey assignments record")
            parsed = {}

        self._set_assignments(
            {k: v for k, v in parsed.items() if isinstance(k, str) and isinstance(v, str)}
        )
        self.loaded = True
        logger.debug(f"Loaded {len(self._assignments)} hotkey assignments")
        return self.assignments

    def _save(self, assignments: Dict[str, str]):
        try:
            self.storage.set_item(HOTKEY_STORAGE_KEY, json.dumps(assignments))
        except StorageError as e:
            logger.error(f"Error saving hotkey assignments: {e}")
            raise HotkeyPersistenceError(str(e)) from e

    @property
    def assignments(self) -> Dict[str, str]:
        return dict(self._assignments)

    def find_conflict(self, hotkey: str) -> Optional[str]:
        """Get an existing hotkey that is a prefix of hotkey or has it as prefix."""
        for existing in self._assignments:
            if hotkey.startswith(existing) or existing.startswith(hotkey):
                return existing
        return None

    def assign(self, hotkey: str, app_name: str) -> str:
        """
        Assign a hotkey to an app and persist the table.

        Raises HotkeyConflictError before anything is written, and
        HotkeyPersistenceError (leaving the table unchanged) if saving fails.
        Returns the normalized hotkey.
        """
        hotkey = normalize_hotkey(hotkey)
        if not hotkey:
            raise ValueError("Hotkey must not be empty")

        existing = self.find_conflict(hotkey)
        if existing is not None:
            raise HotkeyConflictError(hotkey, existing)

        assignments = self.assignments
        assignments[hotkey] = app_name
        self._save(assignments)
        self._set_assignments(assignments)
        logger.info(f'Assigned hotkey "{hotkey}" to {app_name}')
        return hotkey

    def remove(self, hotkey: str) -> Optional[str]:
        """Remove a hotkey and persist; returns the app it pointed to."""
        hotkey = normalize_hotkey(hotkey)
        if hotkey not in self._assignments:
            return None

        assignments = self.assignments
        app_name = assignments.pop(hotkey)
        self._save(assignments)
        self._set_assignments(assignments)
        logger.info(f'Removed hotkey "{hotkey}" from {app_name}')
        return app_name

    def lookup(self, text: str) -> Optional[str]:
        """Get the app bound to exactly this typed text (case-insensitive)."""
        return self._assignments.get(text.lower())

    def hotkey_for(self, app_name: str) -> Optional[str]:
        """Get the hotkey assigned to an app, if any."""
        return self._by_app.get(app_name)
