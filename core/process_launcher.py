# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

import subprocess
import logging
from typing import Callable, List, Optional

from typing_extensions import final

from .config import SWITCHER_CONFIG
from .exceptions import ActivationError
from .search_models import ApplicationEntity

logger = logging.getLogger("ProcessLauncher")


def run_open_command(cmd: List[str], timeout: Optional[float] = None) -> None:
    """Run an open/foreground command; non-zero exit raises CalledProcessError."""
    timeout = timeout if timeout is not None else SWITCHER_CONFIG["launch"]["timeout"]
    result = subprocess.run(
        cmd, capture_output=True, text=True, errors="replace", timeout=timeout
    )
    if result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode, cmd, result.stdout, result.stderr
        )
    logger.info("Ran: %s", " ".join(cmd))


@final
class AppActivator:
    """Launches an app, or brings it to the front if it is already running."""

    def __init__(
        self,
        resolve: Optional[Callable[[str], str]] = None,
        open_command: Optional[List[str]] = None,
        runner: Callable[[List[str]], None] = run_open_command,
    ):
        if resolve is None:
            from utils.name_resolver import resolve_canonical_name

            resolve = resolve_canonical_name
        self.resolve = resolve
        self.open_command = open_command or list(SWITCHER_CONFIG["launch"]["open_command"])
        self.runner = runner

    def build_command(self, app: ApplicationEntity) -> List[str]:
        if app.is_running:
            # Foreground by the name the app is installed under
            target = self.resolve(app.name)
        else:
            target = app.bundle_path or app.name
        return [*self.open_command, target]

    def activate(self, app: ApplicationEntity) -> bool:
        """
        Switch to app. Raises ActivationError if the open command fails.
        """
        try:
            cmd = self.build_command(app)
            self.runner(cmd)
        except subprocess.CalledProcessError as e:
            reason = (e.stderr or "").strip() or f"exit status {e.returncode}"
            logger.error('Could not switch to "%s": %s', app.name, reason)
            raise ActivationError(app.name, reason) from e
        except (subprocess.SubprocessError, OSError, ValueError) as e:
            logger.exception('Could not switch to "%s": %s', app.name, e)
            raise ActivationError(app.name, str(e)) from e
        return True
