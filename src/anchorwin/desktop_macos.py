"""macOS desktop backend for anchorwin

Drives Finder and System Events through osascript. Moving windows of other
applications requires the terminal (or Python) to be granted Accessibility
and Automation permissions in System Settings.
"""

import logging
import re
import subprocess

from .core.errors import ApplyErrorKind, WindowManagerError
from .core.geometry import Rectangle, ScreenSize
from .desktop import DesktopBackend

logger = logging.getLogger(__name__)

OSASCRIPT_TIMEOUT = 10

# Raised by our own script when the process has no windows
_NO_WINDOWS_ERROR = 9001

_ERROR_KINDS = {
    -1728: ApplyErrorKind.PROCESS_NOT_FOUND,  # Can't get process
    -1719: ApplyErrorKind.PERMISSION_DENIED,  # assistive access not enabled
    -25211: ApplyErrorKind.PERMISSION_DENIED,  # assistive access not allowed
    -1743: ApplyErrorKind.PERMISSION_DENIED,  # Apple events not authorized
    _NO_WINDOWS_ERROR: ApplyErrorKind.NO_WINDOWS,
}

_ERROR_CODE_RE = re.compile(r"\((-?\d+)\)\s*$")


def applescript_quote(value: str) -> str:
    """Quote a string as an AppleScript literal."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _run_osascript(script: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["osascript", "-e", script],
        capture_output=True,
        text=True,
        timeout=OSASCRIPT_TIMEOUT,
    )


def _error_code(stderr: str) -> int | None:
    match = _ERROR_CODE_RE.search(stderr.strip())
    return int(match.group(1)) if match else None


class MacDesktopBackend(DesktopBackend):
    """Desktop backend for macOS."""

    name = "macos"

    def get_screen_size(self) -> ScreenSize | None:
        try:
            result = _run_osascript(
                'tell application "Finder" to get bounds of window of desktop'
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"Screen size query failed: {e}")
            return None

        if result.returncode != 0:
            logger.warning(f"Screen size query failed: {result.stderr.strip()}")
            return None

        try:
            left, top, right, bottom = (int(v) for v in result.stdout.split(","))
        except ValueError:
            logger.warning(f"Unexpected desktop bounds: {result.stdout.strip()!r}")
            return None
        return ScreenSize(right - left, bottom - top)

    def activate(self, target_app: str, process_name: str) -> bool:
        try:
            script = f"tell application {applescript_quote(target_app)} to activate"
            result = _run_osascript(script)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"Activation of {target_app} failed: {e}")
            return False
        if result.returncode != 0:
            logger.debug(f"Activation of {target_app} failed: {result.stderr.strip()}")
            return False
        return True

    def apply_rectangle(self, process_name: str, rect: Rectangle) -> None:
        script = "\n".join(
            [
                'tell application "System Events"',
                f"    tell process {applescript_quote(process_name)}",
                "        if (count of windows) is 0 then "
                f'error "no windows" number {_NO_WINDOWS_ERROR}',
                f"        set position of window 1 to {{{rect.x}, {rect.y}}}",
                f"        set size of window 1 to {{{rect.width}, {rect.height}}}",
                "    end tell",
                "end tell",
            ]
        )
        try:
            result = _run_osascript(script)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise WindowManagerError(ApplyErrorKind.OTHER, process_name, str(e)) from e

        if result.returncode == 0:
            logger.debug(f"Applied {rect} to {process_name}")
            return

        stderr = result.stderr.strip()
        kind = _ERROR_KINDS.get(_error_code(stderr), ApplyErrorKind.OTHER)
        raise WindowManagerError(kind, process_name, stderr)
