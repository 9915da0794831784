from pathlib import Path

from anchorwin.core.controller import PositioningController, obtain_settings
from anchorwin.core.errors import ApplyErrorKind, SettingsStoreError, WindowManagerError
from anchorwin.core.geometry import Rectangle, ScreenSize
from anchorwin.core.ports import DisplayService, Prompter, SettingsStore, UIFeedback, WindowManager
from anchorwin.core.settings_model import (
    DEFAULT_SETTINGS,
    HorizontalAnchor,
    VerticalAnchor,
    WindowSettings,
)


class _Display(DisplayService):
    def __init__(self, screen=ScreenSize(2560, 1440)):
        self.screen = screen

    def get_screen_size(self):
        return self.screen


class _WindowManager(WindowManager):
    def __init__(self, error=None, activates=True):
        self.error = error
        self.activates = activates
        self.activated = []
        self.applied = []

    def activate(self, target_app: str, process_name: str) -> bool:
        self.activated.append((target_app, process_name))
        return self.activates

    def apply_rectangle(self, process_name: str, rect: Rectangle) -> None:
        if self.error:
            raise self.error
        self.applied.append((process_name, rect))


class _UI(UIFeedback):
    def __init__(self):
        self.calls = []

    def notify(self, title: str, message: str) -> None:
        self.calls.append((title, message))


class _Store(SettingsStore):
    def __init__(self, saved=None, fail=False):
        self.saved = saved
        self.fail = fail
        self.path = Path("/fake/settings.json")

    def exists(self) -> bool:
        return self.saved is not None

    def read(self):
        return self.saved

    def load(self):
        return self.saved or DEFAULT_SETTINGS

    def save(self, settings) -> None:
        if self.fail:
            raise SettingsStoreError(self.path, PermissionError("denied"))
        self.saved = settings


class _Prompter(Prompter):
    def __init__(self, reuse=False, answers=None, save=False):
        self.reuse = reuse
        self.answers = answers or {}
        self.save = save
        self.asked = []

    def ask_reuse_saved(self, saved) -> bool:
        self.asked.append("reuse")
        return self.reuse

    def ask_text(self, label, default):
        self.asked.append(label)
        return self.answers.get(label, default)

    def ask_percent(self, label, default):
        self.asked.append(label)
        return self.answers.get(label, default)

    def ask_choice(self, label, choices, default):
        self.asked.append(label)
        return self.answers.get(label, default)

    def ask_yes_no(self, label, default):
        self.asked.append(label)
        return self.save


def _controller(display=None, wm=None, ui=None, sleeps=None):
    return PositioningController(
        display=display or _Display(),
        window_manager=wm or _WindowManager(),
        ui=ui or _UI(),
        activation_delay=0.5,
        sleep=(sleeps.append if sleeps is not None else lambda s: None),
    )


def test_position_happy_path():
    wm = _WindowManager()
    ui = _UI()
    sleeps = []
    outcome = _controller(wm=wm, ui=ui, sleeps=sleeps).position(DEFAULT_SETTINGS)

    expected = Rectangle(x=512, y=72, width=1536, height=1296)
    assert outcome.success is True
    assert outcome.rectangle == expected
    assert outcome.used_fallback_screen is False
    assert wm.activated == [("Visual Studio Code", "Code")]
    assert wm.applied == [("Code", expected)]
    assert sleeps == [0.5]
    assert ui.calls and ui.calls[0][0].endswith("Window positioned")


def test_display_failure_uses_fallback_screen():
    wm = _WindowManager()
    outcome = _controller(display=_Display(screen=None), wm=wm).position(DEFAULT_SETTINGS)

    assert outcome.success is True
    assert outcome.used_fallback_screen is True
    assert outcome.screen == ScreenSize(1920, 1080)
    assert wm.applied == [("Code", Rectangle(384, 54, 1152, 972))]


def test_window_manager_error_becomes_failed_outcome():
    wm = _WindowManager(error=WindowManagerError(ApplyErrorKind.NO_WINDOWS, "Code"))
    ui = _UI()
    outcome = _controller(wm=wm, ui=ui).position(DEFAULT_SETTINGS)

    assert outcome.success is False
    assert outcome.message == "Code has no open windows"
    assert ui.calls[-1][1] == "Code has no open windows"


def test_failed_activation_skips_delay_but_still_applies():
    wm = _WindowManager(activates=False)
    sleeps = []
    outcome = _controller(wm=wm, sleeps=sleeps).position(DEFAULT_SETTINGS)

    assert outcome.success is True
    assert sleeps == []
    assert len(wm.applied) == 1


def test_dry_run_does_not_touch_windows():
    wm = _WindowManager()
    outcome = _controller(wm=wm).position(DEFAULT_SETTINGS, dry_run=True)

    assert outcome.success is True
    assert outcome.rectangle == Rectangle(512, 72, 1536, 1296)
    assert wm.activated == []
    assert wm.applied == []


def test_obtain_settings_reuses_saved_record():
    saved = WindowSettings("Firefox", "firefox", 50, 50, HorizontalAnchor.LEFT, VerticalAnchor.TOP)
    prompter = _Prompter(reuse=True)
    choice = obtain_settings(_Store(saved=saved), prompter)

    assert choice.settings == saved
    assert choice.reused is True
    assert prompter.asked == ["reuse"]


def test_obtain_settings_asks_in_fixed_order_without_saved_record():
    prompter = _Prompter(
        answers={
            "Target application": "Firefox",
            "Process name": "firefox",
            "Width (% of screen)": 50,
            "Height (% of screen)": 100,
            "Horizontal position": "right",
            "Vertical position": "top",
        }
    )
    store = _Store()
    choice = obtain_settings(store, prompter)

    assert prompter.asked == [
        "Target application",
        "Process name",
        "Width (% of screen)",
        "Height (% of screen)",
        "Horizontal position",
        "Vertical position",
        "Save these settings",
    ]
    assert choice.settings == WindowSettings(
        "Firefox", "firefox", 50, 100, HorizontalAnchor.RIGHT, VerticalAnchor.TOP
    )
    assert choice.save_requested is False
    assert store.saved is None


def test_obtain_settings_saves_when_requested():
    store = _Store()
    choice = obtain_settings(store, _Prompter(save=True))

    assert choice.save_requested is True
    assert choice.save_error is None
    assert store.saved == DEFAULT_SETTINGS


def test_obtain_settings_reports_save_failure():
    store = _Store(fail=True)
    choice = obtain_settings(store, _Prompter(save=True))

    assert choice.settings == DEFAULT_SETTINGS
    assert isinstance(choice.save_error, SettingsStoreError)
