# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# ruff: ignore

"""
Installed application discovery.

Scans the well-known application directories for `.app` bundles. The whole
scan races a short deadline; when it loses, the last good snapshot is used
instead so that opening the switcher never waits on a slow disk.
"""

import os
import time
import threading
import logging
import concurrent.futures
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from core.config import SWITCHER_CONFIG
from core.search_models import ApplicationEntity

logger = logging.getLogger("BundleScanner")


@dataclass
class InstalledAppsCache:
    """Snapshot of the last successful scan, valid for `ttl` seconds."""

    value: Optional[List[ApplicationEntity]] = None
    timestamp: float = 0.0
    ttl: float = SWITCHER_CONFIG["bundles"]["cache_ttl"]
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def is_valid(self, now: float) -> bool:
        """True if a snapshot exists and is younger than the TTL."""
        return self.value is not None and now - self.timestamp < self.ttl

    def store(self, value: List[ApplicationEntity], timestamp: float) -> bool:
        """
        Replace the snapshot unless a newer one is already stored.

        `timestamp` is when the producing scan *started*, so a slow scan
        started before a fresher one can never overwrite it.
        """
        with self._lock:
            if self.value is not None and timestamp < self.timestamp:
                logger.debug("Discarding stale installed apps scan")
                return False
            self.value = list(value)
            self.timestamp = timestamp
            return True

    def clear(self):
        with self._lock:
            self.value = None
            self.timestamp = 0.0


def scan_application_directories(
    directories: List[str], suffix: Optional[str] = None
) -> List[ApplicationEntity]:
    """
    Scan directories in order for application bundles.

    The first valid bundle for a name wins, in directory order. Entries that
    are not directories or cannot be accessed are skipped and do not hide a
    bundle of the same name in a later directory.
    """
    suffix = suffix or SWITCHER_CONFIG["bundles"]["suffix"]
    apps = []
    seen_names = set()

    for directory in directories:
        directory = os.path.expanduser(directory)
        try:
            entries = sorted(os.listdir(directory))
        except OSError:
            # Skip directories we can't access
            continue

        for entry in entries:
            if not entry.endswith(suffix) or entry == suffix:
                continue

            app_name = entry[: -len(suffix)]
            if app_name in seen_names:
                continue

            full_path = os.path.join(directory, entry)
            try:
                if not os.path.isdir(full_path):
                    continue
            except OSError:
                continue

            seen_names.add(app_name)
            apps.append(
                ApplicationEntity(name=app_name, is_running=False, bundle_path=full_path)
            )

    return apps


class BundleScanner:
    """Lists installed applications with a deadline and a TTL cache."""

    def __init__(
        self,
        directories: Optional[List[str]] = None,
        cache: Optional[InstalledAppsCache] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        executor: Optional[concurrent.futures.Executor] = None,
    ):
        bundles = SWITCHER_CONFIG["bundles"]
        self.directories = directories or list(bundles["directories"])
        self.suffix = bundles["suffix"]
        self.cache = cache if cache is not None else get_installed_apps_cache()
        self.timeout = timeout if timeout is not None else bundles["scan_timeout"]
        self._clock = clock
        self._executor = executor

    def _get_executor(self) -> concurrent.futures.Executor:
        if self._executor is None:
            self._executor = _get_scan_executor()
        return self._executor

    def _scan(self) -> List[ApplicationEntity]:
        return scan_application_directories(self.directories, self.suffix)

    def list_installed_applications(self) -> List[ApplicationEntity]:
        """Get installed apps from the cache, or a fresh scan within the deadline."""
        started_at = self._clock()
        if self.cache.is_valid(started_at):
            return list(self.cache.value)

        future = self._get_executor().submit(self._scan)
        try:
            apps = future.result(timeout=self.timeout)
        except concurrent.futures.TimeoutError:
            # The scan keeps running but its result is never consumed
            logger.debug(
                f"Installed apps scan exceeded {self.timeout * 1000:.0f}ms, using cache"
            )
            return list(self.cache.value or [])
        except Exception as e:
            logger.warning(f"Failed to load installed apps: {e}")
            return list(self.cache.value or [])

        self.cache.store(apps, started_at)
        logger.debug(f"Scanned {len(apps)} installed apps")
        return apps


# Process-wide cache and scan pool
_installed_apps_cache = InstalledAppsCache()
_scan_executor: Optional[concurrent.futures.ThreadPoolExecutor] = None
_scan_executor_lock = threading.Lock()


def get_installed_apps_cache() -> InstalledAppsCache:
    """Get the global installed apps cache."""
    return _installed_apps_cache


def _get_scan_executor() -> concurrent.futures.ThreadPoolExecutor:
    global _scan_executor
    with _scan_executor_lock:
        if _scan_executor is None:
            _scan_executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=2, thread_name_prefix="bundle-scan"
            )
        return _scan_executor


def list_installed_applications() -> List[ApplicationEntity]:
    """List installed apps using a scanner over the global cache."""
    return BundleScanner().list_installed_applications()
