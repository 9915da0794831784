import pytest

from anchorwin.core.settings_model import (
    DEFAULT_SETTINGS,
    HorizontalAnchor,
    VerticalAnchor,
    WindowSettings,
    parse_percent,
)


def test_default_settings_values():
    assert DEFAULT_SETTINGS == WindowSettings(
        target_app="Visual Studio Code",
        process_name="Code",
        width_percent=60,
        height_percent=90,
        horizontal_anchor=HorizontalAnchor.CENTER,
        vertical_anchor=VerticalAnchor.CENTER,
    )


def test_settings_are_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_SETTINGS.width_percent = 10


def test_to_dict_and_back():
    settings = WindowSettings("Firefox", "firefox", 50, 100, HorizontalAnchor.LEFT, VerticalAnchor.TOP)
    data = settings.to_dict()
    assert data["horizontal_anchor"] == "left"
    assert data["vertical_anchor"] == "top"
    assert WindowSettings.from_dict(data) == settings


@pytest.mark.parametrize(
    "change",
    [
        {"extra": 1},
        {"width_percent": "60"},
        {"width_percent": True},
        {"height_percent": 0},
        {"height_percent": 101},
        {"target_app": ""},
        {"process_name": None},
        {"horizontal_anchor": "middle"},
        {"vertical_anchor": "CENTER"},
    ],
)
def test_from_dict_rejects_bad_records(change):
    data = DEFAULT_SETTINGS.to_dict()
    data.update(change)
    assert WindowSettings.from_dict(data) is None


def test_from_dict_rejects_missing_key():
    data = DEFAULT_SETTINGS.to_dict()
    del data["vertical_anchor"]
    assert WindowSettings.from_dict(data) is None


def test_from_dict_rejects_non_mapping():
    assert WindowSettings.from_dict(["Code"]) is None


@pytest.mark.parametrize("raw, expected", [("60", 60), (" 1 ", 1), ("100%", 100), ("75 %", 75)])
def test_parse_percent_accepts(raw, expected):
    assert parse_percent(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "12.5", "-5", "0", "101", "1e2"])
def test_parse_percent_rejects(raw):
    with pytest.raises(ValueError):
        parse_percent(raw)