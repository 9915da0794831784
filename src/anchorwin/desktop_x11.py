"""X11 desktop backend for anchorwin

Uses:
- python-xlib for screen size, EWMH window lookup and geometry changes
- psutil to map a process name to PIDs
"""

import logging

from Xlib import X, error as xerror
from Xlib.display import Display
from Xlib.protocol import event

from .core.errors import ApplyErrorKind, WindowManagerError
from .core.geometry import Rectangle, ScreenSize
from .desktop import DesktopBackend, find_pids_by_name

logger = logging.getLogger(__name__)

# _NET_WM_STATE actions
_NET_WM_STATE_REMOVE = 0


class X11DesktopBackend(DesktopBackend):
    """Desktop backend for X11 (and XWayland) sessions.

    Windows are found through the window manager's _NET_CLIENT_LIST and
    matched to processes by _NET_WM_PID.
    """

    name = "x11"

    def __init__(self):
        self._display: Display | None = None

    def _get_display(self) -> "Display":
        """Get or create X11 display connection (lazy init)."""
        if self._display is None:
            from Xlib import display

            self._display = display.Display()
        return self._display

    def get_screen_size(self) -> ScreenSize | None:
        try:
            screen = self._get_display().screen()
            return ScreenSize(screen.width_in_pixels, screen.height_in_pixels)
        except Exception as e:
            logger.warning(f"X11 screen size query failed: {e}")
            return None

    def activate(self, target_app: str, process_name: str) -> bool:
        try:
            windows = self._windows_for(process_name)
            if not windows:
                return False
            d = self._get_display()
            self._send_root_message(
                windows[0], "_NET_ACTIVE_WINDOW", [1, X.CurrentTime, 0, 0, 0]
            )
            d.flush()
            return True
        except Exception as e:
            logger.debug(f"X11 activation of {target_app} failed: {e}")
            return False

    def apply_rectangle(self, process_name: str, rect: Rectangle) -> None:
        try:
            windows = self._windows_for(process_name)
        except WindowManagerError:
            raise
        except Exception as e:
            raise WindowManagerError(ApplyErrorKind.OTHER, process_name, str(e)) from e

        if not windows:
            raise WindowManagerError(ApplyErrorKind.NO_WINDOWS, process_name)

        d = self._get_display()
        window = windows[0]
        catcher = xerror.CatchError()

        try:
            # A maximized window ignores configure requests on most window managers
            self._send_root_message(
                window,
                "_NET_WM_STATE",
                [
                    _NET_WM_STATE_REMOVE,
                    d.intern_atom("_NET_WM_STATE_MAXIMIZED_VERT"),
                    d.intern_atom("_NET_WM_STATE_MAXIMIZED_HORZ"),
                    1,
                    0,
                ],
            )
            # X11 rejects zero-sized windows
            window.configure(
                x=rect.x,
                y=rect.y,
                width=max(rect.width, 1),
                height=max(rect.height, 1),
                onerror=catcher,
            )
            d.sync()
        except (xerror.XError, xerror.ConnectionClosedError, OSError) as e:
            raise WindowManagerError(ApplyErrorKind.OTHER, process_name, str(e)) from e

        err = catcher.get_error()
        if err is None:
            logger.debug(f"Applied {rect} to window {window.id:#x} of {process_name}")
            return
        if isinstance(err, xerror.BadAccess):
            raise WindowManagerError(ApplyErrorKind.PERMISSION_DENIED, process_name, str(err))
        raise WindowManagerError(ApplyErrorKind.OTHER, process_name, str(err))

    def _windows_for(self, process_name: str) -> list:
        """Return the managed windows owned by process_name, in client-list order."""
        pids = find_pids_by_name(process_name)
        if not pids:
            raise WindowManagerError(ApplyErrorKind.PROCESS_NOT_FOUND, process_name)

        d = self._get_display()
        root = d.screen().root
        client_list = root.get_full_property(
            d.intern_atom("_NET_CLIENT_LIST"), X.AnyPropertyType
        )
        if not client_list or client_list.value is None:
            return []

        net_wm_pid = d.intern_atom("_NET_WM_PID")
        windows = []
        for window_id in client_list.value:
            window = d.create_resource_object("window", window_id)
            try:
                prop = window.get_full_property(net_wm_pid, X.AnyPropertyType)
            except xerror.XError:
                continue
            if prop and len(prop.value) and prop.value[0] in pids:
                windows.append(window)
        return windows

    def _send_root_message(self, window, message_type, data: list[int]) -> None:
        """Send an EWMH client message about window to the root window."""
        d = self._get_display()
        if isinstance(message_type, str):
            message_type = d.intern_atom(message_type)
        root = d.screen().root
        ev = event.ClientMessage(
            window=window,
            client_type=message_type,
            data=(32, data),
        )
        root.send_event(ev, event_mask=X.SubstructureRedirectMask | X.SubstructureNotifyMask)

    def close(self):
        """Close the X11 display connection."""
        if self._display:
            try:
                self._display.close()
            except Exception:
                pass
            self._display = None
