"""Front ends that display the switcher."""

from .terminal_launcher import TerminalView

__all__ = ["TerminalView"]
