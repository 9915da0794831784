"""Desktop backends for anchorwin

Provides platform-aware access to the primary screen size and to the
windows of running applications.

Architecture: one backend per platform, each implementing both the display
service and window manager ports:
  X11:     python-xlib + psutil
  Windows: pywin32 + psutil
  macOS:   osascript (System Events)
  Null:    no screen size, every apply fails
"""

import logging
from abc import ABC, abstractmethod

from .core.errors import ApplyErrorKind, WindowManagerError
from .core.geometry import Rectangle, ScreenSize

logger = logging.getLogger(__name__)


class DesktopBackend(ABC):
    """Abstract base class for platform-specific window control.

    Failures to read the screen size are reported by returning None so the
    caller can substitute its fallback. Failures to move a window raise
    WindowManagerError with the matching ApplyErrorKind.
    """

    name = "abstract"

    @abstractmethod
    def get_screen_size(self) -> ScreenSize | None:
        """Get the primary screen size in pixels.

        Returns:
            ScreenSize, or None if the display cannot be queried.
        """
        pass

    @abstractmethod
    def activate(self, target_app: str, process_name: str) -> bool:
        """Bring the target application to the front.

        Returns:
            True if activation was requested successfully.
        """
        pass

    @abstractmethod
    def apply_rectangle(self, process_name: str, rect: Rectangle) -> None:
        """Move and resize the first window of process_name.

        Raises:
            WindowManagerError: NO_WINDOWS, PROCESS_NOT_FOUND,
                PERMISSION_DENIED or OTHER.
        """
        pass


class NullDesktopBackend(DesktopBackend):
    """Null implementation used on unsupported platforms."""

    name = "null"

    def get_screen_size(self) -> ScreenSize | None:
        return None

    def activate(self, target_app: str, process_name: str) -> bool:
        return False

    def apply_rectangle(self, process_name: str, rect: Rectangle) -> None:
        raise WindowManagerError(
            ApplyErrorKind.OTHER, process_name, "window control is not supported on this platform"
        )


def find_pids_by_name(process_name: str) -> set[int]:
    """Find the PIDs of running processes whose name matches process_name.

    Matching is case-insensitive and ignores a trailing ".exe".
    """
    import psutil

    wanted = _normalize_process_name(process_name)
    pids = set()
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name") or ""
        if _normalize_process_name(name) == wanted:
            pids.add(proc.pid)
    return pids


def _normalize_process_name(name: str) -> str:
    name = name.strip().lower()
    return name[:-4] if name.endswith(".exe") else name


# =============================================================================
# Factory Function
# =============================================================================

_cached_backend: DesktopBackend | None = None


def get_desktop_backend(force_type: str | None = None) -> DesktopBackend:
    """Get the appropriate desktop backend for the current platform.

    Uses lazy initialization and caches the backend instance.

    Args:
        force_type: Force a specific backend for testing.
                   Options: "x11", "windows", "macos", "null"
    """
    global _cached_backend

    if _cached_backend is not None and force_type is None:
        return _cached_backend

    if force_type == "null":
        return NullDesktopBackend()

    from .platform_utils import IS_LINUX, IS_MACOS, IS_WINDOWS, IS_X11

    backend: DesktopBackend

    if force_type == "x11" or (IS_LINUX and IS_X11 and force_type is None):
        try:
            from .desktop_x11 import X11DesktopBackend

            backend = X11DesktopBackend()
        except ImportError as e:
            logger.warning(f"X11 backend unavailable: {e}")
            backend = NullDesktopBackend()

    elif force_type == "windows" or (IS_WINDOWS and force_type is None):
        try:
            from .desktop_windows import WindowsDesktopBackend

            backend = WindowsDesktopBackend()
        except ImportError as e:
            logger.warning(f"Windows backend unavailable: {e}")
            backend = NullDesktopBackend()

    elif force_type == "macos" or (IS_MACOS and force_type is None):
        from .desktop_macos import MacDesktopBackend

        backend = MacDesktopBackend()

    else:
        # Wayland without XWayland, or an unknown platform
        backend = NullDesktopBackend()

    if force_type is None:
        _cached_backend = backend

    return backend


def clear_backend_cache():
    """Clear the cached backend instance."""
    global _cached_backend
    _cached_backend = None
