#!/usr/bin/env python3
# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

import sys
import os
import logging
from typing import List, Optional

import setproctitle  # pyright: ignore

# Add current directory to path for absolute imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from core.config import APPNAME, SWITCHER_CONFIG  # noqa: E402
from core.search_models import ApplicationEntity  # noqa: E402
from core.app_ranker import search_apps  # noqa: E402
from core.switcher import AppSwitcher  # noqa: E402
from launchers.terminal_launcher import TerminalView  # noqa: E402
from utils.deps import check_switcher_utilities  # noqa: E402

USAGE = f"""usage: {APPNAME} [--debug] [--json] <command>

commands:
  list                      list apps (recent, running, then A-Z)
  search <text>             rank apps by name
  type <text>               hotkey if one matches, otherwise search
  open <name>               switch to an app
  hotkey ls                 show hotkey assignments
  hotkey add <key> <name>   assign a hotkey
  hotkey rm <key>           remove a hotkey
"""


def setup_logging(debug: bool):
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )


def pick_app(switcher: AppSwitcher, name: str) -> ApplicationEntity:
    """Find an app by exact name, then case-insensitively, then by search."""
    app = switcher.find_app(name)
    if app:
        return app
    for candidate in switcher.apps:
        if candidate.name.lower() == name.lower():
            return candidate
    matches = search_apps(switcher.apps, " " + name, switcher.recent.names)
    if matches:
        return matches[0]
    return ApplicationEntity(name=name)


def handle_hotkey(switcher: AppSwitcher, args: List[str]) -> int:
    switcher.hotkeys.load()
    action = args[0] if args else "ls"

    if action == "ls":
        for hotkey, app_name in sorted(switcher.hotkeys.assignments.items()):
            print(f"{hotkey}\t{app_name}")
        return 0
    if action == "add" and len(args) >= 3:
        app = ApplicationEntity(name=" ".join(args[2:]))
        return 0 if switcher.assign_hotkey(app, args[1]) else 1
    if action == "rm" and len(args) == 2:
        app_name = switcher.hotkeys.lookup(args[1]) or ""
        app = ApplicationEntity(name=app_name)
        return 0 if switcher.remove_hotkey(app, args[1]) else 1

    print(USAGE, file=sys.stderr)
    return 2


def run(argv: List[str], view: Optional[TerminalView] = None, switcher: Optional[AppSwitcher] = None) -> int:
    """Run one command; returns the process exit code."""
    debug = SWITCHER_CONFIG["advanced"]["debug"]
    json_lines = "--json" in argv
    if "--debug" in argv:
        debug = True
    argv = [arg for arg in argv if arg not in ("--debug", "--json")]
    setup_logging(debug)

    command = argv[0] if argv else "list"
    args = argv[1:]

    if command in ("-h", "--help", "help"):
        print(USAGE)
        return 0

    view = view or TerminalView(quiet=command in ("open", "hotkey"), json_lines=json_lines)
    switcher = switcher or AppSwitcher(view)
    try:
        if command == "hotkey":
            return handle_hotkey(switcher, args)

        if command not in ("list", "search", "type", "open"):
            print(USAGE, file=sys.stderr)
            return 2

        warning = check_switcher_utilities()
        if warning:
            logging.getLogger("Main").warning(warning)

        text = " ".join(args)
        if command == "open" and not text:
            print(USAGE, file=sys.stderr)
            return 2

        if command == "type":
            # A hotkey switches before the app list is loaded
            switcher.hotkeys.load()
            switcher.recent.load()
            if switcher.handle_search_text(text):
                return 0
        elif command == "search":
            switcher.search_text = " " + text

        switcher.load()
        if switcher.error:
            return 1

        if command == "open":
            app = pick_app(switcher, text)
            return 0 if switcher.switch_to_app(app) else 1
        return 0
    finally:
        switcher.shutdown()


def main():
    """Main entry point for the appswitch command."""
    setproctitle.setproctitle(APPNAME)
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
