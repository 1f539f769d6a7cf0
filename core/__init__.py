"""Core switcher components."""

from .config import SWITCHER_CONFIG, APPNAME
from .exceptions import (
    SwitcherError,
    StorageError,
    HotkeyConflictError,
    HotkeyPersistenceError,
    ActivationError,
)
from .search_models import ApplicationEntity, HotkeyInput, QueryInput, parse_search_input
from .app_merger import build_alias_map, merge_applications, sort_by_default_order
from .app_ranker import search_apps, score_app, abbreviation
from .switcher_view import SwitcherView, ToastStyle

__all__ = [
    "SWITCHER_CONFIG",
    "APPNAME",
    "SwitcherError",
    "StorageError",
    "HotkeyConflictError",
    "HotkeyPersistenceError",
    "ActivationError",
    "ApplicationEntity",
    "HotkeyInput",
    "QueryInput",
    "parse_search_input",
    "build_alias_map",
    "merge_applications",
    "sort_by_default_order",
    "search_apps",
    "score_app",
    "abbreviation",
    "SwitcherView",
    "ToastStyle",
]
