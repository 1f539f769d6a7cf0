# pyright: reportMissingTypeStubs=false
# ruff: ignore

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional

from .search_models import ApplicationEntity


class ToastStyle(Enum):
    """Kinds of transient notifications."""

    SUCCESS = "success"
    FAILURE = "failure"


class SwitcherView(ABC):
    """Base interface for whatever displays the switcher"""

    @abstractmethod
    def render(
        self,
        apps: List[ApplicationEntity],
        loading: bool,
        search_text: str,
        hotkey_for: Callable[[str], Optional[str]],
    ) -> None:
        """Show the current list. hotkey_for maps an app name to its hotkey."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Replace the list with an error state."""
        pass

    @abstractmethod
    def show_toast(self, style: ToastStyle, title: str, message: str = "") -> None:
        """Show a transient, dismissible notification."""
        pass

    def close(self) -> None:
        """Called after a successful switch."""
        pass
