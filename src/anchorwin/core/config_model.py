"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .geometry import ScreenSize


@dataclass(frozen=True)
class AppConfig:
    settings_path: Path
    activation_delay: float
    fallback_screen: ScreenSize
    notifications_enabled: bool
    debug: bool
