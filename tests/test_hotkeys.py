"""Unit tests for hotkey assignments"""

import json
from unittest.mock import patch
import sys
import os

import pytest

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import HOTKEY_STORAGE_KEY
from core.exceptions import HotkeyConflictError, HotkeyPersistenceError, StorageError
from utils.hotkeys import HotkeyAssignments
from utils.storage import LocalStorage


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "storage.json")


@pytest.fixture
def hotkeys(storage):
    assignments = HotkeyAssignments(storage)
    assignments.load()
    return assignments


class TestHotkeyAssignments:
    """Test assigning, removing and looking up hotkeys"""

    def test_assign_persists(self, storage, hotkeys):
        assert hotkeys.assign("FF", "Firefox") == "ff"

        assert json.loads(storage.get_item(HOTKEY_STORAGE_KEY)) == {"ff": "Firefox"}
        reloaded = HotkeyAssignments(storage)
        assert reloaded.load() == {"ff": "Firefox"}

    def test_longer_key_conflicts_with_shorter(self, hotkeys):
        hotkeys.assign("f", "Finder")

        with pytest.raises(HotkeyConflictError) as exc_info:
            hotkeys.assign("ff", "Firefox")

        assert exc_info.value.existing == "f"
        assert hotkeys.assignments == {"f": "Finder"}

    def test_shorter_key_conflicts_with_longer(self, hotkeys):
        hotkeys.assign("ff", "Firefox")

        with pytest.raises(HotkeyConflictError):
            hotkeys.assign("f", "Finder")

        assert hotkeys.assignments == {"ff": "Firefox"}

    def test_same_key_conflicts(self, hotkeys):
        hotkeys.assign("m", "Mail")

        with pytest.raises(HotkeyConflictError):
            hotkeys.assign("M", "Music")

        assert hotkeys.lookup("m") == "Mail"

    def test_conflict_message(self):
        error = HotkeyConflictError("ff", "f")

        assert str(error) == '"ff" conflicts with existing hotkey "f"'

    def test_conflict_does_not_write(self, storage, hotkeys):
        hotkeys.assign("f", "Finder")

        with patch.object(storage, "set_item") as mock_set:
            with pytest.raises(HotkeyConflictError):
                hotkeys.assign("fx", "Firefox")

        mock_set.assert_not_called()

    def test_empty_hotkey_rejected(self, hotkeys):
        with pytest.raises(ValueError):
            hotkeys.assign("  ", "Finder")

    def test_persistence_failure_leaves_table_unchanged(self, storage, hotkeys):
        hotkeys.assign("s", "Safari")

        with patch.object(storage, "set_item", side_effect=StorageError("disk full")):
            with pytest.raises(HotkeyPersistenceError):
                hotkeys.assign("m", "Mail")

        assert hotkeys.assignments == {"s": "Safari"}
        assert hotkeys.hotkey_for("Mail") is None

    def test_lookup_is_case_insensitive(self, hotkeys):
        hotkeys.assign("vs", "Visual Studio Code")

        assert hotkeys.lookup("VS") == "Visual Studio Code"
        assert hotkeys.lookup("v") is None
        assert hotkeys.lookup("vsc") is None

    def test_reverse_index(self, hotkeys):
        hotkeys.assign("s", "Safari")
        hotkeys.assign("m", "Mail")

        assert hotkeys.hotkey_for("Safari") == "s"
        assert hotkeys.hotkey_for("Mail") == "m"
        assert hotkeys.hotkey_for("Notes") is None

    def test_remove(self, storage, hotkeys):
        hotkeys.assign("s", "Safari")

        assert hotkeys.remove("S") == "Safari"
        assert hotkeys.lookup("s") is None
        assert hotkeys.hotkey_for("Safari") is None
        assert json.loads(storage.get_item(HOTKEY_STORAGE_KEY)) == {}

    def test_remove_unknown(self, hotkeys):
        assert hotkeys.remove("zz") is None

    def test_malformed_record_loads_empty(self, storage):
        storage.set_item(HOTKEY_STORAGE_KEY, json.dumps(["not", "a", "table"]))
        hotkeys = HotkeyAssignments(storage)

        assert hotkeys.load() == {}
        assert hotkeys.loaded
