"""Desktop notifications for anchorwin"""

import logging
import subprocess

from .desktop_macos import applescript_quote
from .platform_utils import IS_LINUX, IS_MACOS

logger = logging.getLogger(__name__)


def notify(title: str, message: str, timeout: int = 2):
    """Show desktop notification"""
    if IS_LINUX:
        args = ["notify-send", "-t", str(timeout * 1000), title, message]
    elif IS_MACOS:
        script = (
            f"display notification {applescript_quote(message)} "
            f"with title {applescript_quote(title)}"
        )
        args = ["osascript", "-e", script]
    else:
        return

    try:
        subprocess.run(args, timeout=2, capture_output=True)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Notification failed: {e}")  # Notifications are optional

