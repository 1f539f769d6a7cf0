"""
appswitch - A keyboard-driven application switcher.

Merges running processes with installed application bundles and ranks
them for typed queries, with support for:
- Recency-aware ordering
- Abbreviation and prefix matching
- Hotkey aliases that switch instantly
"""

__version__ = "0.1.0"
__author__ = "appswitch contributors"
__description__ = "A keyboard-driven application switcher"

from core.search_models import ApplicationEntity
from core.switcher import AppSwitcher
from core.switcher_view import SwitcherView

__all__ = [
    "ApplicationEntity",
    "AppSwitcher",
    "SwitcherView",
]
