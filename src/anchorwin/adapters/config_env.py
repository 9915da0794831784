"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig
from ..core.geometry import FALLBACK_SCREEN, ScreenSize


def load_app_config() -> AppConfig:
    width = env_config.FALLBACK_WIDTH
    height = env_config.FALLBACK_HEIGHT
    fallback = ScreenSize(width, height) if width > 0 and height > 0 else FALLBACK_SCREEN
    return AppConfig(
        settings_path=env_config.SETTINGS_PATH,
        activation_delay=max(0.0, env_config.ACTIVATION_DELAY),
        fallback_screen=fallback,
        notifications_enabled=env_config.NOTIFICATIONS_ENABLED,
        debug=env_config.DEBUG,
    )
