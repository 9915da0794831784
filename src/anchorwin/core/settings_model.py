"""Window settings model (structured view).

A fixed-shape record holding the six values needed to place a window,
plus the helpers used to convert it to and from its persisted mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MIN_PERCENT = 1
MAX_PERCENT = 100


class HorizontalAnchor(Enum):
    """Horizontal alignment of the resized window."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAnchor(Enum):
    """Vertical alignment of the resized window."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class WindowSettings:
    """Configuration for one positioning operation.

    Attributes:
        target_app: Application name used for activation (e.g., "Visual Studio Code")
        process_name: OS process name used to locate windows (e.g., "Code")
        width_percent: Window width as a percentage of the screen width
        height_percent: Window height as a percentage of the screen height
        horizontal_anchor: Left, center or right alignment
        vertical_anchor: Top, center or bottom alignment
    """

    target_app: str
    process_name: str
    width_percent: int
    height_percent: int
    horizontal_anchor: HorizontalAnchor = HorizontalAnchor.CENTER
    vertical_anchor: VerticalAnchor = VerticalAnchor.CENTER

    def to_dict(self) -> dict:
        """Serialize to the persisted mapping (anchors by name)."""
        return {
            "target_app": self.target_app,
            "process_name": self.process_name,
            "width_percent": self.width_percent,
            "height_percent": self.height_percent,
            "horizontal_anchor": self.horizontal_anchor.value,
            "vertical_anchor": self.vertical_anchor.value,
        }

    @classmethod
    def from_dict(cls, data) -> "WindowSettings | None":
        """Build settings from a persisted mapping.

        Returns None when the mapping does not have exactly the expected
        keys, or any value has the wrong type or is out of range.
        """
        if not isinstance(data, dict) or set(data) != SETTINGS_FIELDS:
            return None

        target_app = data["target_app"]
        process_name = data["process_name"]
        if not _is_non_empty_str(target_app) or not _is_non_empty_str(process_name):
            return None

        width = data["width_percent"]
        height = data["height_percent"]
        if not is_valid_percent(width) or not is_valid_percent(height):
            return None

        horizontal = _anchor_or_none(HorizontalAnchor, data["horizontal_anchor"])
        vertical = _anchor_or_none(VerticalAnchor, data["vertical_anchor"])
        if horizontal is None or vertical is None:
            return None

        return cls(
            target_app=target_app,
            process_name=process_name,
            width_percent=width,
            height_percent=height,
            horizontal_anchor=horizontal,
            vertical_anchor=vertical,
        )

    def describe(self) -> str:
        """One-line human readable summary."""
        return (
            f"{self.target_app} ({self.process_name}): "
            f"{self.width_percent}% x {self.height_percent}%, "
            f"{self.horizontal_anchor.value}/{self.vertical_anchor.value}"
        )


SETTINGS_FIELDS = frozenset(
    {
        "target_app",
        "process_name",
        "width_percent",
        "height_percent",
        "horizontal_anchor",
        "vertical_anchor",
    }
)

DEFAULT_SETTINGS = WindowSettings(
    target_app="Visual Studio Code",
    process_name="Code",
    width_percent=60,
    height_percent=90,
    horizontal_anchor=HorizontalAnchor.CENTER,
    vertical_anchor=VerticalAnchor.CENTER,
)


def is_valid_percent(value) -> bool:
    """Check that value is an int (not bool) within MIN_PERCENT..MAX_PERCENT."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_PERCENT <= value <= MAX_PERCENT


def parse_percent(raw: str) -> int:
    """Convert user input such as "60" or " 60% " to an int percent.

    Raises:
        ValueError: if the input is not a whole number in range.
    """
    text = raw.strip().rstrip("%").strip()
    if not text or not text.isdecimal():
        raise ValueError(f"'{raw.strip()}' is not a whole number")
    value = int(text)
    if not is_valid_percent(value):
        raise ValueError(f"{value} is outside {MIN_PERCENT}-{MAX_PERCENT}")
    return value


def _anchor_or_none(enum_cls, value):
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _is_non_empty_str(value) -> bool:
    return isinstance(value, str) and bool(value.strip())
