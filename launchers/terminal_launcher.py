# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

"""
Terminal front end for the switcher.

Prints the ranked list to stdout, one app per line with a tab-separated
subtitle (or as JSON lines), so it can be piped into dmenu/fzf-style
pickers. Notifications go to stderr and the desktop notifier.
"""

import sys
import json
import logging
from typing import Callable, List, Optional, TextIO

from core.config import APPNAME, SWITCHER_CONFIG
from core.search_models import ApplicationEntity
from core.switcher_view import SwitcherView, ToastStyle
from utils.notification_utils import send_notification

logger = logging.getLogger("TerminalLauncher")


class TerminalView(SwitcherView):
    """Writes the switcher state to text streams."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        desktop_notifications: bool = True,
        quiet: bool = False,
        json_lines: bool = False,
    ):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.desktop_notifications = desktop_notifications
        self.quiet = quiet
        self.json_lines = json_lines
        self.closed = False
        self.last_rendered: List[ApplicationEntity] = []

    def format_line(self, app: ApplicationEntity, hotkey: Optional[str]) -> str:
        if self.json_lines:
            return json.dumps(
                {
                    "name": app.name,
                    "subtitle": app.subtitle(hotkey),
                    "running": app.is_running,
                    "hotkey": hotkey,
                    "bundle_path": app.bundle_path,
                    "icon": app.icon_path,
                }
            )

        line = app.name
        subtitle = app.subtitle(hotkey)
        if subtitle:
            line = f"{line}\t{subtitle}"
        return line

    def render(
        self,
        apps: List[ApplicationEntity],
        loading: bool,
        search_text: str,
        hotkey_for: Callable[[str], Optional[str]],
    ) -> None:
        self.last_rendered = list(apps)
        if self.quiet:
            return
        if loading and not apps:
            print(SWITCHER_CONFIG["ui"]["loading_text"], file=self.err)
            return

        for app in apps:
            print(self.format_line(app, hotkey_for(app.name)), file=self.out)

    def show_error(self, message: str) -> None:
        self.last_rendered = []
        print(f"Error: {message}", file=self.err)

    def show_toast(self, style: ToastStyle, title: str, message: str = "") -> None:
        marker = "✓" if style == ToastStyle.SUCCESS else "✗"
        text = f"{marker} {title}"
        if message:
            text += f": {message}"
        print(text, file=self.err)

        if self.desktop_notifications:
            urgency = "normal" if style == ToastStyle.SUCCESS else "critical"
            send_notification(APPNAME, title, message, urgency=urgency)

    def close(self) -> None:
        self.closed = True
        logger.debug("Switcher closed")
