"""Tests for the terminal view and the command line entry point"""

import io
import json
from unittest.mock import Mock, patch
import sys
import os

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.search_models import ApplicationEntity
from core.switcher_view import ToastStyle
from launchers.terminal_launcher import TerminalView
from utils.notification_utils import build_notification_command


def make_view(**kwargs):
    kwargs.setdefault("desktop_notifications", False)
    return TerminalView(out=io.StringIO(), err=io.StringIO(), **kwargs)


class TestTerminalView:
    """Test text rendering"""

    def test_plain_lines(self):
        view = make_view()
        apps = [
            ApplicationEntity("Safari", is_running=True),
            ApplicationEntity("Notes", bundle_path="/System/Applications/Notes.app"),
        ]

        view.render(apps, False, "", {"Safari": "s"}.get)

        assert view.out.getvalue() == "Safari\t[s] Running\nNotes\n"
        assert view.last_rendered == apps

    def test_json_lines(self):
        view = make_view(json_lines=True)

        view.render([ApplicationEntity("Mail", is_running=True)], False, "", lambda name: None)

        record = json.loads(view.out.getvalue())
        assert record == {
            "name": "Mail",
            "subtitle": "Running",
            "running": True,
            "hotkey": None,
            "bundle_path": None,
            "icon": "/Applications/Mail.app",
        }

    def test_loading_without_apps(self):
        view = make_view()

        view.render([], True, "", lambda name: None)

        assert view.out.getvalue() == ""
        assert "Loading applications" in view.err.getvalue()

    def test_quiet(self):
        view = make_view(quiet=True)

        view.render([ApplicationEntity("Mail")], False, "", lambda name: None)

        assert view.out.getvalue() == ""

    def test_error(self):
        view = make_view()

        view.show_error("No applications found")

        assert view.err.getvalue() == "Error: No applications found\n"

    def test_toasts(self):
        view = make_view()

        view.show_toast(ToastStyle.SUCCESS, "Hotkey Assigned", '"s" assigned to Safari')
        view.show_toast(ToastStyle.FAILURE, "Failed to switch app")

        assert view.err.getvalue().splitlines() == [
            '✓ Hotkey Assigned: "s" assigned to Safari',
            "✗ Failed to switch app",
        ]

    @patch("launchers.terminal_launcher.send_notification")
    def test_desktop_notification(self, mock_send):
        view = make_view(desktop_notifications=True)

        view.show_toast(ToastStyle.FAILURE, "Failed to switch app", "Could not switch to Nope")

        mock_send.assert_called_once_with(
            "appswitch", "Failed to switch app", "Could not switch to Nope", urgency="critical"
        )


class TestNotificationCommand:
    """Test notifier selection"""

    @patch("utils.notification_utils.check_osascript", return_value=True)
    def test_osascript(self, _):
        cmd = build_notification_command("appswitch", 'Say "hi"', "body")

        assert cmd[:2] == ["osascript", "-e"]
        assert 'with title "Say \\"hi\\""' in cmd[2]

    @patch("utils.notification_utils.check_notify_send", return_value=True)
    @patch("utils.notification_utils.check_osascript", return_value=False)
    def test_notify_send(self, _osascript, _notify_send):
        cmd = build_notification_command("appswitch", "Title", "Body", urgency="critical")

        assert cmd == ["notify-send", "-u", "critical", "-t", "5000", "-a", "appswitch", "Title", "Body"]

    @patch("utils.notification_utils.check_notify_send", return_value=False)
    @patch("utils.notification_utils.check_osascript", return_value=False)
    def test_no_notifier(self, _osascript, _notify_send):
        assert build_notification_command("appswitch", "Title") is None


class TestMain:
    """Test command dispatch"""

    def make_switcher(self, apps):
        from core.switcher import AppSwitcher
        from utils.storage import LocalStorage

        self.activator = Mock()
        scanner = Mock()
        scanner.list_installed_applications.return_value = apps
        resolver = Mock()
        resolver.resolve_canonical_name.side_effect = lambda name: name
        return AppSwitcher(
            self.view,
            storage=LocalStorage(self.storage_path),
            list_running=lambda: [],
            bundle_scanner=scanner,
            resolver=resolver,
            activator=self.activator,
        )

    def setup_method(self):
        self.view = make_view()

    def test_search(self, tmp_path):
        from main import run

        self.storage_path = tmp_path / "storage.json"
        switcher = self.make_switcher(
            [ApplicationEntity("Terminal"), ApplicationEntity("Safari")]
        )

        assert run(["search", "term"], view=self.view, switcher=switcher) == 0
        assert self.view.out.getvalue() == "Terminal\n"

    def test_open_picks_best_match(self, tmp_path):
        from main import run

        self.storage_path = tmp_path / "storage.json"
        switcher = self.make_switcher(
            [ApplicationEntity("Terminal", bundle_path="/Applications/Terminal.app")]
        )

        assert run(["open", "term"], view=self.view, switcher=switcher) == 0
        assert self.activator.activate.call_args[0][0].name == "Terminal"

    def test_no_apps_exit_code(self, tmp_path):
        from main import run

        self.storage_path = tmp_path / "storage.json"
        switcher = self.make_switcher([])

        assert run(["list"], view=self.view, switcher=switcher) == 1
        assert "No applications found" in self.view.err.getvalue()

    def test_hotkey_add_and_type(self, tmp_path):
        from main import run

        self.storage_path = tmp_path / "storage.json"
        switcher = self.make_switcher([ApplicationEntity("Safari")])
        assert run(["hotkey", "add", "s", "Safari"], view=self.view, switcher=switcher) == 0

        switcher = self.make_switcher([ApplicationEntity("Safari")])
        assert run(["type", "s"], view=self.view, switcher=switcher) == 0
        assert self.activator.activate.call_args[0][0].name == "Safari"

    def test_unknown_command(self, tmp_path):
        from main import run

        self.storage_path = tmp_path / "storage.json"
        switcher = self.make_switcher([])

        assert run(["bogus"], view=self.view, switcher=switcher) == 2
