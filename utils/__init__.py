"""Utility modules for appswitch: sources, persistence and notifications."""

from .running_apps import list_running_applications, parse_visible_process_list
from .bundle_scanner import (
    BundleScanner,
    InstalledAppsCache,
    list_installed_applications,
    scan_application_directories,
)
from .name_resolver import NameResolver, parse_app_list, resolve_canonical_name
from .storage import LocalStorage, get_local_storage
from .recent_apps import RecentApps, push_recent
from .hotkeys import HotkeyAssignments

__all__ = [
    "list_running_applications",
    "parse_visible_process_list",
    "BundleScanner",
    "InstalledAppsCache",
    "list_installed_applications",
    "scan_application_directories",
    "NameResolver",
    "parse_app_list",
    "resolve_canonical_name",
    "LocalStorage",
    "get_local_storage",
    "RecentApps",
    "push_recent",
    "HotkeyAssignments",
]
