# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

"""
Running application listing based on `lsappinfo visibleProcessList`.
Takes a few milliseconds, so it is called on every refresh.
"""

import re
import subprocess
import logging
from typing import List, Optional

from core.config import SWITCHER_CONFIG
from core.search_models import ApplicationEntity

logger = logging.getLogger("RunningApps")

# ASN:0x0-0x123-"App_Name": -> three opaque fields and a quoted name
_VISIBLE_PROCESS_RE = re.compile(r'ASN:[^-]+-[^-]+-"([^"]+)"')


def normalize_process_name(name: str) -> str:
    """lsappinfo reports spaces as underscores."""
    return name.replace("_", " ")


def parse_visible_process_list(output: str) -> List[ApplicationEntity]:
    """Parse `lsappinfo visibleProcessList` output into running apps."""
    apps = []
    if not output or not output.strip():
        return apps

    for raw_name in _VISIBLE_PROCESS_RE.findall(output):
        apps.append(
            ApplicationEntity(name=normalize_process_name(raw_name), is_running=True)
        )
    return apps


def list_running_applications(
    command: Optional[List[str]] = None, timeout: Optional[float] = None
) -> List[ApplicationEntity]:
    """Get the currently visible running applications, or [] on any failure."""
    sources = SWITCHER_CONFIG["sources"]
    command = command or sources["visible_process_command"]
    timeout = timeout if timeout is not None else sources["command_timeout"]

    try:
        result = subprocess.run(
            command, capture_output=True, text=True, errors="replace", timeout=timeout
        )
    except (subprocess.SubprocessError, OSError, ValueError) as e:
        logger.warning(f"Error getting running apps: {e}")
        return []

    if result.returncode != 0:
        logger.warning(
            f"{' '.join(command)} exited with {result.returncode}: {result.stderr.strip()}"
        )
        return []

    apps = parse_visible_process_list(result.stdout)
    logger.debug(f"Found {len(apps)} running apps")
    return apps
