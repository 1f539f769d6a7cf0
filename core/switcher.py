# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# pyright: reportAttributeAccessIssue=false
# ruff: ignore

"""
One switcher session: loads the app list, reacts to typed text and the
view's "app chosen" / "hotkey chosen" events.
"""

import logging
import concurrent.futures
from typing import Callable, List, Optional

from typing_extensions import final

from .config import SWITCHER_CONFIG
from .app_merger import load_all_apps
from .app_ranker import search_apps
from .exceptions import ActivationError, HotkeyConflictError, HotkeyPersistenceError
from .search_models import ApplicationEntity, HotkeyInput, parse_search_input
from .switcher_view import SwitcherView, ToastStyle
from utils.bundle_scanner import BundleScanner
from utils.hotkeys import HotkeyAssignments
from utils.name_resolver import NameResolver, get_name_resolver
from utils.recent_apps import RecentApps
from utils.running_apps import list_running_applications
from utils.storage import LocalStorage, get_local_storage

logger = logging.getLogger("AppSwitcher")


@final
class AppSwitcher:
    def __init__(
        self,
        view: SwitcherView,
        storage: Optional[LocalStorage] = None,
        list_running: Callable[[], List[ApplicationEntity]] = list_running_applications,
        bundle_scanner: Optional[BundleScanner] = None,
        resolver: Optional[NameResolver] = None,
        activator=None,
        executor: Optional[concurrent.futures.Executor] = None,
    ):
        self.view = view
        storage = storage or get_local_storage()
        self.recent = RecentApps(storage)
        self.hotkeys = HotkeyAssignments(storage)
        self.list_running = list_running
        self.bundle_scanner = bundle_scanner or BundleScanner()
        self.resolver = resolver or get_name_resolver()

        if activator is None:
            from .process_launcher import AppActivator

            activator = AppActivator(resolve=self.resolver.resolve_canonical_name)
        self.activator = activator

        self._owns_executor = executor is None
        self.executor = executor or concurrent.futures.ThreadPoolExecutor(
            max_workers=SWITCHER_CONFIG["sources"]["max_workers"],
            thread_name_prefix="switcher",
        )

        self.apps: List[ApplicationEntity] = []
        self.loading = True
        self.error: Optional[str] = None
        self.search_text = ""

    def shutdown(self):
        """Release the worker threads (does not wait for stray scans)."""
        if self._owns_executor:
            self.executor.shutdown(wait=False)

    # --- Loading ---

    def load(self):
        """Load hotkeys and recent apps, then the app list."""
        hotkeys_future = self.executor.submit(self.hotkeys.load)
        recent_future = self.executor.submit(self.recent.load)
        hotkeys_future.result()
        recent_future.result()
        self.refresh()

    def refresh(self) -> List[ApplicationEntity]:
        """Rebuild the merged app list from fresh source snapshots."""
        self.loading = True
        self.error = None
        try:
            running_future = self.executor.submit(self.list_running)
            installed_future = self.executor.submit(
                self.bundle_scanner.list_installed_applications
            )
            running_apps = running_future.result()
            installed_apps = installed_future.result()

            apps = load_all_apps(
                running_apps,
                installed_apps,
                self.resolver.resolve_canonical_name,
                self.recent.names,
                self.executor,
            )
            if not apps:
                self.error = SWITCHER_CONFIG["ui"]["no_apps_text"]
            else:
                self.apps = apps
        except Exception as e:
            logger.exception("Failed to get applications")
            self.error = f"Failed to get applications: {e}"
        finally:
            self.loading = False

        self.update_view()
        return self.apps

    # --- Display ---

    def visible_apps(self) -> List[ApplicationEntity]:
        """The apps to display for the current search text."""
        if not self.search_text:
            return list(self.apps)
        return search_apps(self.apps, self.search_text, self.recent.names)

    def update_view(self):
        if self.error:
            self.view.show_error(self.error)
            return
        self.view.render(
            self.visible_apps(), self.loading, self.search_text, self.hotkeys.hotkey_for
        )

    def find_app(self, name: str) -> Optional[ApplicationEntity]:
        for app in self.apps:
            if app.name == name:
                return app
        return None

    # --- Input ---

    def handle_search_text(self, text: str) -> bool:
        """
        React to typed text. Returns True if it triggered a hotkey switch.

        Text without a leading space is first looked up as a hotkey; if none
        matches it is used as search text like the space-prefixed form.
        """
        parsed = parse_search_input(text)
        if isinstance(parsed, HotkeyInput) and self.hotkeys.loaded:
            app_name = self.hotkeys.lookup(parsed.text)
            if app_name:
                # Don't wait for the app list; fall back to opening by name
                app = self.find_app(app_name) or ApplicationEntity(name=app_name)
                self.switch_to_app(app)
                return True

        self.search_text = text
        self.update_view()
        return False

    # --- Events from the view ---

    def switch_to_app(self, app: ApplicationEntity) -> bool:
        """Record the activation, then switch. Failures become a toast."""
        # Recency tracks intent, so it's updated even if the launch fails
        self.recent.add(app.name)
        try:
            self.activator.activate(app)
        except ActivationError as e:
            logger.warning(f"Switch failed: {e}")
            self.view.show_toast(
                ToastStyle.FAILURE, "Failed to switch app", f"Could not switch to {app.name}"
            )
            return False

        self.view.close()
        return True

    def assign_hotkey(self, app: ApplicationEntity, hotkey: str) -> bool:
        try:
            hotkey = self.hotkeys.assign(hotkey, app.name)
        except HotkeyConflictError as e:
            self.view.show_toast(ToastStyle.FAILURE, "Hotkey Conflict", str(e))
            return False
        except (HotkeyPersistenceError, ValueError) as e:
            self.view.show_toast(ToastStyle.FAILURE, "Failed to assign hotkey", str(e))
            return False

        self.view.show_toast(
            ToastStyle.SUCCESS, "Hotkey Assigned", f'"{hotkey}" assigned to {app.name}'
        )
        self.update_view()
        return True

    def remove_hotkey(self, app: ApplicationEntity, hotkey: str) -> bool:
        try:
            removed = self.hotkeys.remove(hotkey)
        except HotkeyPersistenceError as e:
            self.view.show_toast(ToastStyle.FAILURE, "Failed to remove hotkey", str(e))
            return False

        if removed is None:
            self.view.show_toast(
                ToastStyle.FAILURE, "Failed to remove hotkey", f'"{hotkey}" is not assigned'
            )
            return False

        self.view.show_toast(
            ToastStyle.SUCCESS, "Hotkey Removed", f'"{hotkey}" removed from {app.name}'
        )
        self.update_view()
        return True
