"""Core orchestration for anchorwin.

Keeps the settings -> screen -> resolve -> activate -> apply pipeline in one
place, decoupled from platform-specific implementations via ports.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from .errors import SettingsStoreError, WindowManagerError
from .geometry import FALLBACK_SCREEN, Rectangle, ScreenSize, resolve_settings
from .ports import DisplayService, Prompter, SettingsStore, UIFeedback, WindowManager
from .settings_model import DEFAULT_SETTINGS, HorizontalAnchor, VerticalAnchor, WindowSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsChoice:
    """Settings selected for this run, and how they were obtained."""

    settings: WindowSettings
    reused: bool = False
    save_requested: bool = False
    save_error: SettingsStoreError | None = None


@dataclass(frozen=True)
class PositioningOutcome:
    """Result of one positioning operation."""

    success: bool
    message: str
    rectangle: Rectangle | None = None
    screen: ScreenSize | None = None
    used_fallback_screen: bool = False


def obtain_settings(store: SettingsStore, prompter: Prompter) -> SettingsChoice:
    """Reuse the saved settings or collect new ones from the user.

    Questions are asked in a fixed order: target app, process name, width,
    height, horizontal anchor, vertical anchor, save.
    """
    saved = store.read() if store.exists() else None
    if saved is not None and prompter.ask_reuse_saved(saved):
        return SettingsChoice(settings=saved, reused=True)

    base = saved or DEFAULT_SETTINGS
    target_app = prompter.ask_text("Target application", base.target_app)
    process_name = prompter.ask_text("Process name", base.process_name)
    width = prompter.ask_percent("Width (% of screen)", base.width_percent)
    height = prompter.ask_percent("Height (% of screen)", base.height_percent)
    horizontal = prompter.ask_choice(
        "Horizontal position",
        [a.value for a in HorizontalAnchor],
        base.horizontal_anchor.value,
    )
    vertical = prompter.ask_choice(
        "Vertical position",
        [a.value for a in VerticalAnchor],
        base.vertical_anchor.value,
    )
    save = prompter.ask_yes_no("Save these settings", False)

    settings = WindowSettings(
        target_app=target_app,
        process_name=process_name,
        width_percent=width,
        height_percent=height,
        horizontal_anchor=HorizontalAnchor(horizontal),
        vertical_anchor=VerticalAnchor(vertical),
    )

    save_error = None
    if save:
        save_error = save_settings(store, settings)

    return SettingsChoice(settings=settings, save_requested=save, save_error=save_error)


def save_settings(store: SettingsStore, settings: WindowSettings) -> SettingsStoreError | None:
    """Persist settings, returning the error instead of raising it."""
    try:
        store.save(settings)
    except SettingsStoreError as e:
        logger.error("%s", e)
        return e
    print("✓ Settings saved")
    return None


class PositioningController:
    """Orchestrates a single positioning operation."""

    def __init__(
        self,
        display: DisplayService,
        window_manager: WindowManager,
        ui: UIFeedback,
        activation_delay: float = 0.5,
        fallback_screen: ScreenSize = FALLBACK_SCREEN,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._display = display
        self._window_manager = window_manager
        self._ui = ui
        self._activation_delay = activation_delay
        self._fallback_screen = fallback_screen
        self._sleep = sleep

    def screen_size(self) -> tuple[ScreenSize, bool]:
        """Return the current screen size and whether the fallback was used."""
        screen = self._display.get_screen_size()
        if screen is None or screen.width <= 0 or screen.height <= 0:
            logger.warning(
                "Screen size unavailable, using %dx%d",
                self._fallback_screen.width,
                self._fallback_screen.height,
            )
            return self._fallback_screen, True
        return screen, False

    def position(self, settings: WindowSettings, dry_run: bool = False) -> PositioningOutcome:
        """Run one positioning operation.

        Args:
            settings: Settings for this run; not modified.
            dry_run: Compute the rectangle without touching any window.
        """
        screen, used_fallback = self.screen_size()
        rect = resolve_settings(screen, settings)
        logger.debug("Resolved %s on %dx%d -> %s", settings, screen.width, screen.height, rect)

        if dry_run:
            return PositioningOutcome(
                success=True,
                message=_describe(rect),
                rectangle=rect,
                screen=screen,
                used_fallback_screen=used_fallback,
            )

        if not self._window_manager.activate(settings.target_app, settings.process_name):
            logger.warning("Could not activate %s", settings.target_app)
        elif self._activation_delay > 0:
            self._sleep(self._activation_delay)

        try:
            self._window_manager.apply_rectangle(settings.process_name, rect)
        except WindowManagerError as e:
            logger.debug("Apply failed: kind=%s detail=%s", e.kind, e.detail)
            message = e.user_message()
            self._ui.notify("⚠ Window not moved", message)
            return PositioningOutcome(
                success=False,
                message=message,
                rectangle=rect,
                screen=screen,
                used_fallback_screen=used_fallback,
            )

        message = f"{settings.target_app}: {_describe(rect)}"
        self._ui.notify("✓ Window positioned", message)
        return PositioningOutcome(
            success=True,
            message=message,
            rectangle=rect,
            screen=screen,
            used_fallback_screen=used_fallback,
        )


def _describe(rect: Rectangle) -> str:
    return f"{rect.width}x{rect.height} at ({rect.x}, {rect.y})"
