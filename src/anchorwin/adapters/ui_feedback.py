"""UI feedback adapter."""

from __future__ import annotations

from ..ui_feedback import notify


class UIFeedbackAdapter:
    def __init__(self, enabled: bool = True):
        self._enabled = enabled

    def notify(self, title: str, message: str) -> None:
        if self._enabled:
            notify(title, message)
