"""Error types shared by the core and its adapters."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path


class AnchorwinError(Exception):
    """Base class for anchorwin errors."""


class SettingsStoreError(AnchorwinError):
    """Saving the settings record failed."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not save settings to {path}: {cause}")


class ApplyErrorKind(Enum):
    NO_WINDOWS = auto()
    PROCESS_NOT_FOUND = auto()
    PERMISSION_DENIED = auto()
    OTHER = auto()


class WindowManagerError(AnchorwinError):
    """The window manager could not apply a rectangle."""

    def __init__(self, kind: ApplyErrorKind, process_name: str, detail: str = ""):
        self.kind = kind
        self.process_name = process_name
        self.detail = detail
        super().__init__(self.user_message())

    def user_message(self) -> str:
        if self.kind == ApplyErrorKind.NO_WINDOWS:
            return f"{self.process_name} has no open windows"
        if self.kind == ApplyErrorKind.PROCESS_NOT_FOUND:
            return f"No running process named {self.process_name}"
        if self.kind == ApplyErrorKind.PERMISSION_DENIED:
            return (
                f"Not allowed to control {self.process_name} windows "
                "(check accessibility/automation permissions)"
            )
        return f"Could not move {self.process_name} window: {self.detail or 'unknown error'}"
