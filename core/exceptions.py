"""Exceptions raised by the switcher core."""


class SwitcherError(Exception):
    """Base class for all switcher errors."""


class StorageError(SwitcherError):
    """Reading or writing the key-value store failed."""


class HotkeyConflictError(SwitcherError):
    """A hotkey overlaps (as prefix) with one that is already assigned."""

    def __init__(self, hotkey: str, existing: str):
        self.hotkey = hotkey
        self.existing = existing
        super().__init__(
            f'"{hotkey}" conflicts with existing hotkey "{existing}"'
        )


class HotkeyPersistenceError(SwitcherError):
    """The hotkey table could not be saved."""


class ActivationError(SwitcherError):
    """Launching or foregrounding an application failed."""

    def __init__(self, app_name: str, reason: str = ""):
        self.app_name = app_name
        self.reason = reason
        message = f"Could not switch to {app_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
