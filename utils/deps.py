# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

import shutil
from typing import List, Optional


def check_command_exists(command: str) -> bool:
    """Check if a command is available on the system.

    Args:
        command: The command to check (e.g., "lsappinfo", "open")

    Returns:
        True if the command exists, False otherwise
    """
    return shutil.which(command) is not None


def get_missing_commands(commands: List[str]) -> List[str]:
    """Get list of missing commands from a list.

    Args:
        commands: List of commands to check

    Returns:
        List of commands that are not available
    """
    return [cmd for cmd in commands if not check_command_exists(cmd)]


def check_osascript() -> bool:
    return check_command_exists("osascript")


def check_notify_send() -> bool:
    return check_command_exists("notify-send")


def check_switcher_utilities() -> Optional[str]:
    """Check the commands the switcher shells out to.

    Returns:
        A warning message if any are missing, None otherwise
    """
    missing = get_missing_commands(["lsappinfo", "open"])
    if missing:
        return (
            f"Missing {', '.join(missing)} - running apps and switching "
            "need macOS; results will be limited"
        )
    return None
