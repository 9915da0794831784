"""Geometry resolution: percentages + anchors -> absolute rectangle.

Pure integer arithmetic, no I/O. Inputs are assumed to be validated;
nothing here clamps or rejects values.
"""

from __future__ import annotations

from dataclasses import dataclass

from .settings_model import HorizontalAnchor, VerticalAnchor, WindowSettings


@dataclass(frozen=True)
class ScreenSize:
    width: int
    height: int


@dataclass(frozen=True)
class Rectangle:
    x: int
    y: int
    width: int
    height: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


FALLBACK_SCREEN = ScreenSize(width=1920, height=1080)


def _offset(available: int, size: int, position: str) -> int:
    if position == "start":
        return 0
    if position == "end":
        return available - size
    return (available - size) // 2


_HORIZONTAL_POSITIONS = {
    HorizontalAnchor.LEFT: "start",
    HorizontalAnchor.CENTER: "center",
    HorizontalAnchor.RIGHT: "end",
}

_VERTICAL_POSITIONS = {
    VerticalAnchor.TOP: "start",
    VerticalAnchor.CENTER: "center",
    VerticalAnchor.BOTTOM: "end",
}


def resolve(
    screen: ScreenSize,
    width_percent: int,
    height_percent: int,
    h_anchor: HorizontalAnchor,
    v_anchor: VerticalAnchor,
) -> Rectangle:
    """Compute the target rectangle for a window.

    Sizes and centered offsets use floor division, so
    60% x 90% of 1920x1080 centered gives (384, 54, 1152, 972).
    """
    width = screen.width * width_percent // 100
    height = screen.height * height_percent // 100
    x = _offset(screen.width, width, _HORIZONTAL_POSITIONS[h_anchor])
    y = _offset(screen.height, height, _VERTICAL_POSITIONS[v_anchor])
    return Rectangle(x=x, y=y, width=width, height=height)


def resolve_settings(screen: ScreenSize, settings: WindowSettings) -> Rectangle:
    return resolve(
        screen,
        settings.width_percent,
        settings.height_percent,
        settings.horizontal_anchor,
        settings.vertical_anchor,
    )
