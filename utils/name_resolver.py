# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

"""
Resolve running app display names to canonical bundle names.

`lsappinfo visibleProcessList` reports names like "Code" or "Visual_Studio_Code";
`lsappinfo list` also reports each process's bundle path, which gives the name
the app is installed under ("Visual Studio Code.app" -> "Visual Studio Code").
Spawning the listing is relatively expensive, so only call this for names that
need disambiguation.
"""

import re
import time
import threading
import subprocess
import logging
from typing import Callable, List, Optional, Tuple

from core.config import SWITCHER_CONFIG
from .running_apps import normalize_process_name

logger = logging.getLogger("NameResolver")

# Blocks look like:  12) "App_Name" ASN:0x0-0x1234:\n    bundle path="/Applications/App Name.app"
_BLOCK_SPLIT_RE = re.compile(r'(?:^|\n)\s*\d+\)\s+"')
_BLOCK_NAME_RE = re.compile(r'^([^"]+)"')
_BUNDLE_PATH_RE = re.compile(r'bundle path="([^"]+)"')


def parse_app_list(output: str) -> List[Tuple[str, str]]:
    """Parse `lsappinfo list` into (display name, bundle path) pairs."""
    entries = []
    if not output:
        return entries

    for block in _BLOCK_SPLIT_RE.split(output)[1:]:
        name_match = _BLOCK_NAME_RE.match(block)
        path_match = _BUNDLE_PATH_RE.search(block)
        if name_match and path_match:
            entries.append(
                (normalize_process_name(name_match.group(1)), path_match.group(1))
            )
    return entries


def bundle_name_from_path(bundle_path: str, suffix: Optional[str] = None) -> Optional[str]:
    """'/Applications/Visual Studio Code.app' -> 'Visual Studio Code'."""
    suffix = suffix or SWITCHER_CONFIG["bundles"]["suffix"]
    last_segment = bundle_path.rstrip("/").rsplit("/", 1)[-1]
    if not last_segment.endswith(suffix) or last_segment == suffix:
        return None
    return last_segment[: -len(suffix)]


class NameResolver:
    """Looks up canonical bundle names in the rich process listing."""

    def __init__(
        self,
        command: Optional[List[str]] = None,
        timeout: Optional[float] = None,
        listing_ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        sources = SWITCHER_CONFIG["sources"]
        self.command = command or sources["app_list_command"]
        self.timeout = timeout if timeout is not None else sources["command_timeout"]
        self.listing_ttl = (
            listing_ttl if listing_ttl is not None else sources["app_list_ttl"]
        )
        self._clock = clock

        # Last listing snapshot; replaced wholesale, never mutated
        self._listing: Optional[List[Tuple[str, str]]] = None
        self._listing_time = 0.0
        self._lock = threading.Lock()

    def _fetch_listing(self) -> List[Tuple[str, str]]:
        result = subprocess.run(
            self.command,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=self.timeout,
        )
        if result.returncode != 0:
            raise subprocess.CalledProcessError(
                result.returncode, self.command, result.stdout, result.stderr
            )
        return parse_app_list(result.stdout)

    def get_listing(self) -> List[Tuple[str, str]]:
        """Get the (display name, bundle path) listing, reusing a recent one."""
        # Concurrent callers wait for the first fetch instead of spawning their own
        with self._lock:
            now = self._clock()
            listing = self._listing
            if listing is not None and now - self._listing_time < self.listing_ttl:
                return listing

            listing = self._fetch_listing()
            self._listing = listing
            self._listing_time = now
            return listing

    def invalidate(self):
        """Drop the memoised listing."""
        with self._lock:
            self._listing = None
            self._listing_time = 0.0

    def resolve_canonical_name(self, display_name: str) -> str:
        """Return the bundle name for a display name, or the name unchanged."""
        wanted = normalize_process_name(display_name)
        try:
            listing = self.get_listing()
        except (subprocess.SubprocessError, OSError, ValueError) as e:
            logger.warning(f"Error resolving app name '{display_name}': {e}")
            return display_name

        for listed_name, bundle_path in listing:
            if listed_name == wanted:
                return bundle_name_from_path(bundle_path) or display_name

        return display_name


# Global instance for app-wide use
_global_resolver: Optional[NameResolver] = None


def get_name_resolver() -> NameResolver:
    """Get the global name resolver instance."""
    global _global_resolver
    if _global_resolver is None:
        _global_resolver = NameResolver()
    return _global_resolver


def resolve_canonical_name(display_name: str) -> str:
    """Resolve a display name using the global resolver."""
    return get_name_resolver().resolve_canonical_name(display_name)
