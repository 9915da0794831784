"""Windows desktop backend for anchorwin

Uses:
- pywin32 for screen metrics, window enumeration and MoveWindow
- psutil to map a process name to PIDs
"""

import logging

import pywintypes
import win32api
import win32con
import win32gui
import win32process

from .core.errors import ApplyErrorKind, WindowManagerError
from .core.geometry import Rectangle, ScreenSize
from .desktop import DesktopBackend, find_pids_by_name

logger = logging.getLogger(__name__)

ERROR_ACCESS_DENIED = 5


class WindowsDesktopBackend(DesktopBackend):
    """Desktop backend for Windows systems."""

    name = "windows"

    def get_screen_size(self) -> ScreenSize | None:
        try:
            width = win32api.GetSystemMetrics(win32con.SM_CXSCREEN)
            height = win32api.GetSystemMetrics(win32con.SM_CYSCREEN)
        except pywintypes.error as e:
            logger.warning(f"GetSystemMetrics failed: {e}")
            return None
        if width <= 0 or height <= 0:
            return None
        return ScreenSize(width, height)

    def activate(self, target_app: str, process_name: str) -> bool:
        try:
            windows = self._windows_for(process_name)
            if not windows:
                return False
            hwnd = windows[0]
            if win32gui.IsIconic(hwnd):
                win32gui.ShowWindow(hwnd, win32con.SW_RESTORE)
            win32gui.SetForegroundWindow(hwnd)
            return True
        except (WindowManagerError, pywintypes.error) as e:
            logger.debug(f"Windows activation of {target_app} failed: {e}")
            return False

    def apply_rectangle(self, process_name: str, rect: Rectangle) -> None:
        try:
            windows = self._windows_for(process_name)
        except pywintypes.error as e:
            raise _apply_error(process_name, e) from e
        if not windows:
            raise WindowManagerError(ApplyErrorKind.NO_WINDOWS, process_name)

        hwnd = windows[0]
        try:
            # A maximized window snaps back to full screen when moved
            placement = win32gui.GetWindowPlacement(hwnd)
            if placement[1] == win32con.SW_SHOWMAXIMIZED:
                win32gui.ShowWindow(hwnd, win32con.SW_RESTORE)
            win32gui.MoveWindow(hwnd, rect.x, rect.y, rect.width, rect.height, True)
        except pywintypes.error as e:
            raise _apply_error(process_name, e) from e
        logger.debug(f"Applied {rect} to hwnd {hwnd} of {process_name}")

    def _windows_for(self, process_name: str) -> list[int]:
        """Return visible top-level windows owned by process_name, in z-order."""
        pids = find_pids_by_name(process_name)
        if not pids:
            raise WindowManagerError(ApplyErrorKind.PROCESS_NOT_FOUND, process_name)

        windows: list[int] = []

        def _collect(hwnd, _):
            if not win32gui.IsWindowVisible(hwnd) or not win32gui.GetWindowText(hwnd):
                return True
            _, pid = win32process.GetWindowThreadProcessId(hwnd)
            if pid in pids:
                windows.append(hwnd)
            return True

        win32gui.EnumWindows(_collect, None)
        return windows


def _apply_error(process_name: str, err: "pywintypes.error") -> WindowManagerError:
    """Map a win32 error to the matching WindowManagerError."""
    if err.winerror == ERROR_ACCESS_DENIED:
        return WindowManagerError(ApplyErrorKind.PERMISSION_DENIED, process_name, err.strerror)
    return WindowManagerError(ApplyErrorKind.OTHER, process_name, err.strerror)
