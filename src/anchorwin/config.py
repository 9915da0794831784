"""Configuration for anchorwin"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .platform_utils import user_config_dir

load_dotenv()


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


class Config:
    """Environment-driven configuration"""

    # Saved settings location
    SETTINGS_PATH = Path(
        os.getenv(
            "ANCHORWIN_SETTINGS_PATH",
            str(user_config_dir() / "anchorwin" / "settings.json"),
        )
    ).expanduser()

    # Seconds to wait after activating the target app before moving it
    ACTIVATION_DELAY = _env_float("ANCHORWIN_ACTIVATION_DELAY", 0.5)

    # Used when the screen size cannot be determined
    FALLBACK_WIDTH = _env_int("ANCHORWIN_FALLBACK_WIDTH", 1920)
    FALLBACK_HEIGHT = _env_int("ANCHORWIN_FALLBACK_HEIGHT", 1080)

    NOTIFICATIONS_ENABLED = os.getenv("NOTIFICATIONS_ENABLED", "true").lower() == "true"

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()
