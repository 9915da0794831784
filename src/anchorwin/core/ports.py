"""Core ports (interfaces) for anchorwin.

These protocols define the boundaries between the positioning core and
platform-specific adapters (display, window manager, persistence, prompts).
"""

from __future__ import annotations

from typing import Protocol, Sequence, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .geometry import Rectangle, ScreenSize
    from .settings_model import WindowSettings


@runtime_checkable
class SettingsStore(Protocol):
    """Persistence for the single saved WindowSettings record."""

    def exists(self) -> bool:
        """Return True when a saved record is present."""

    def read(self) -> "WindowSettings | None":
        """Return the saved record, or None if missing or invalid."""

    def load(self) -> "WindowSettings":
        """Return the saved record, or the default settings."""

    def save(self, settings: "WindowSettings") -> None:
        """Persist settings; raises SettingsStoreError on failure."""


@runtime_checkable
class DisplayService(Protocol):
    """Primary screen dimensions."""

    def get_screen_size(self) -> "ScreenSize | None":
        """Return the screen size, or None if it cannot be determined."""


@runtime_checkable
class WindowManager(Protocol):
    """Moves and resizes application windows."""

    def activate(self, target_app: str, process_name: str) -> bool:
        """Bring the application to the front; returns False on failure."""

    def apply_rectangle(self, process_name: str, rect: "Rectangle") -> None:
        """Apply rect to the first window of process_name.

        Raises WindowManagerError on failure.
        """


@runtime_checkable
class Prompter(Protocol):
    """Collects user input for the interactive flow."""

    def ask_reuse_saved(self, saved: "WindowSettings") -> bool:
        """Ask whether to reuse the saved settings."""

    def ask_text(self, label: str, default: str) -> str:
        """Ask for a non-empty string."""

    def ask_percent(self, label: str, default: int) -> int:
        """Ask for a valid percentage."""

    def ask_choice(self, label: str, choices: Sequence[str], default: str) -> str:
        """Ask to pick one of choices."""

    def ask_yes_no(self, label: str, default: bool) -> bool:
        """Ask a yes/no question."""


@runtime_checkable
class UIFeedback(Protocol):
    """User-visible notifications."""

    def notify(self, title: str, message: str) -> None:
        """Display a notification."""
