# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

import subprocess
import logging
from typing import List, Optional

from .deps import check_osascript, check_notify_send

logger = logging.getLogger("Notifications")


def _applescript_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def build_notification_command(
    app_name: str,
    summary: str,
    body: str = "",
    urgency: str = "normal",
    expire_timeout: int = 5000,
) -> Optional[List[str]]:
    """Build the command for the first available notifier.

    Args:
        app_name: Application name
        summary: Notification title
        body: Notification body text
        urgency: Urgency level (low, normal, critical)
        expire_timeout: Timeout in milliseconds (notify-send only)

    Returns:
        The command, or None if no notifier is installed
    """
    if check_osascript():
        script = f"display notification {_applescript_string(body)} with title {_applescript_string(summary)}"
        script += f" subtitle {_applescript_string(app_name)}"
        return ["osascript", "-e", script]

    if check_notify_send():
        cmd = ["notify-send"]
        if urgency in ["low", "normal", "critical"]:
            cmd.extend(["-u", urgency])
        cmd.extend(["-t", str(expire_timeout)])
        cmd.extend(["-a", app_name])
        cmd.append(summary)
        if body:
            cmd.append(body)
        return cmd

    return None


def send_notification(
    app_name: str,
    summary: str,
    body: str = "",
    urgency: str = "normal",
    expire_timeout: int = 5000,
) -> bool:
    """Send a desktop notification. Returns False if it couldn't be shown."""
    cmd = build_notification_command(app_name, summary, body, urgency, expire_timeout)
    if cmd is None:
        logger.debug("No notifier available")
        return False

    try:
        subprocess.run(cmd, check=True, capture_output=True, timeout=5)
    except (subprocess.SubprocessError, OSError) as e:
        logger.warning(f"Error sending notification: {e}")
        return False
    return True
