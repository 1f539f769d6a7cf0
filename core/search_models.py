import os
from dataclasses import dataclass
from typing import Optional, Union

from .config import SWITCHER_CONFIG


@dataclass(frozen=True)
class ApplicationEntity:
    """One application in a merged list, running and/or installed."""

    name: str  # Canonical bundle name, unique within a merged list
    is_running: bool = False
    bundle_path: Optional[str] = None  # Only set for apps found on disk

    @property
    def icon_path(self) -> str:
        """Path the view should take the icon from."""
        if self.bundle_path:
            return self.bundle_path
        # Best guess; the view handles a missing bundle
        bundles = SWITCHER_CONFIG["bundles"]
        return os.path.join(
            bundles["default_icon_dir"], f"{self.name}{bundles['suffix']}"
        )

    def subtitle(self, hotkey: Optional[str] = None) -> str:
        """Compose the list subtitle, e.g. '[ff] Running'."""
        subtitle = ""
        if hotkey:
            subtitle += f"[{hotkey}] "
        if self.is_running:
            subtitle += "Running"
        return subtitle.strip()


@dataclass(frozen=True)
class HotkeyInput:
    """Typed text to look up verbatim in the hotkey table."""

    text: str


@dataclass(frozen=True)
class QueryInput:
    """Search text, with the leading-space marker already removed."""

    text: str


SearchInput = Union[HotkeyInput, QueryInput]


def parse_search_input(text: str) -> SearchInput:
    """
    Decide once what a piece of typed text means.

    A leading space selects name search; any other non-empty text is a
    hotkey candidate. Empty text is an empty query.
    """
    if not text:
        return QueryInput("")
    if text.startswith(" "):
        return QueryInput(text[1:])
    return HotkeyInput(text)
