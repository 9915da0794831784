import json

import pytest

from anchorwin.adapters.settings_store import SETTINGS_KEY, JsonSettingsStore
from anchorwin.core.errors import SettingsStoreError
from anchorwin.core.settings_model import (
    DEFAULT_SETTINGS,
    HorizontalAnchor,
    VerticalAnchor,
    WindowSettings,
)


def _settings():
    return WindowSettings("Terminal", "gnome-terminal-server", 40, 50, HorizontalAnchor.RIGHT, VerticalAnchor.TOP)


def test_missing_store(tmp_path):
    store = JsonSettingsStore(tmp_path / "settings.json")
    assert store.exists() is False
    assert store.read() is None
    assert store.load() == DEFAULT_SETTINGS


def test_save_then_load_round_trip(tmp_path):
    store = JsonSettingsStore(tmp_path / "settings.json")
    store.save(_settings())
    assert store.exists() is True
    assert store.load() == _settings()


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "a" / "b" / "settings.json"
    JsonSettingsStore(path).save(_settings())
    assert path.is_file()


def test_save_overwrites_previous_record(tmp_path):
    store = JsonSettingsStore(tmp_path / "settings.json")
    store.save(DEFAULT_SETTINGS)
    store.save(_settings())
    document = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
    assert document == {SETTINGS_KEY: _settings().to_dict()}
    assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"other": {}}',
        '{"window_settings": {"target_app": "Code"}}',
        "",
        pytest.param(
            '{"window_settings": {"width_percent": ' + "9" * 5000 + "}}", id="huge-int"
        ),
        pytest.param("[" * 100000 + "]" * 100000, id="deep-nesting"),
    ],
)
def test_corrupt_store_falls_back_to_defaults(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    store = JsonSettingsStore(path)
    assert store.exists() is True
    assert store.read() is None
    assert store.load() == DEFAULT_SETTINGS


def test_invalid_bytes_fall_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert JsonSettingsStore(path).load() == DEFAULT_SETTINGS


def test_save_failure_is_raised(tmp_path):
    # Parent "directory" is a regular file, so it can't be created or written
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    store = JsonSettingsStore(blocker / "settings.json")

    with pytest.raises(SettingsStoreError) as excinfo:
        store.save(_settings())

    assert excinfo.value.path == blocker / "settings.json"
    assert isinstance(excinfo.value.cause, OSError)
