#!/usr/bin/env python3
"""anchorwin: resize an application window to a fraction of the screen and anchor it"""

import argparse
import logging
import sys

from .adapters.config_env import load_app_config
from .adapters.settings_store import JsonSettingsStore
from .adapters.ui_feedback import UIFeedbackAdapter
from .core.config_model import AppConfig
from .core.controller import (
    PositioningController,
    SettingsChoice,
    obtain_settings,
    save_settings,
)
from .core.settings_model import (
    DEFAULT_SETTINGS,
    HorizontalAnchor,
    VerticalAnchor,
    WindowSettings,
    parse_percent,
)
from .desktop import get_desktop_backend
from .platform_utils import print_platform_info
from .prompt import ConsolePrompter

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _percent_arg(value: str) -> int:
    try:
        return parse_percent(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _name_arg(value: str) -> str:
    name = value.strip()
    if not name:
        raise argparse.ArgumentTypeError("must not be blank")
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anchorwin",
        description=(
            "Resize the first window of an application to a percentage of the screen "
            "and anchor it to one of nine positions."
        ),
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--saved",
        action="store_true",
        help="Use the saved settings (or the defaults) without prompting",
    )
    mode.add_argument(
        "--show-settings",
        action="store_true",
        help="Print the saved settings and exit",
    )
    mode.add_argument(
        "--platform-info",
        action="store_true",
        help="Print platform diagnostics and exit",
    )

    configure = parser.add_argument_group(
        "non-interactive configuration",
        "Any of these skips the prompts; omitted values use the defaults "
        f"({DEFAULT_SETTINGS.describe()})",
    )
    configure.add_argument("--app", type=_name_arg, help="Application to activate")
    configure.add_argument("--process", type=_name_arg, help="Process name owning the window")
    configure.add_argument("--width", type=_percent_arg, help="Width in percent of the screen")
    configure.add_argument("--height", type=_percent_arg, help="Height in percent of the screen")
    configure.add_argument(
        "--horizontal",
        choices=[a.value for a in HorizontalAnchor],
        help="Horizontal anchor",
    )
    configure.add_argument(
        "--vertical",
        choices=[a.value for a in VerticalAnchor],
        help="Vertical anchor",
    )
    configure.add_argument("--save", action="store_true", help="Save these settings for reuse")

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the computed window rectangle without moving anything",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _has_configure_options(args: argparse.Namespace) -> bool:
    return any(
        value is not None
        for value in (args.app, args.process, args.width, args.height, args.horizontal, args.vertical)
    ) or args.save


def settings_from_args(args: argparse.Namespace) -> WindowSettings:
    """Build settings from command line options, defaulting omitted values."""
    base = DEFAULT_SETTINGS
    return WindowSettings(
        target_app=args.app or base.target_app,
        process_name=args.process or base.process_name,
        width_percent=args.width if args.width is not None else base.width_percent,
        height_percent=args.height if args.height is not None else base.height_percent,
        horizontal_anchor=(
            HorizontalAnchor(args.horizontal) if args.horizontal else base.horizontal_anchor
        ),
        vertical_anchor=VerticalAnchor(args.vertical) if args.vertical else base.vertical_anchor,
    )


class Anchorwin:
    """Main application - pick settings, then position the window once"""

    def __init__(self, app_config: AppConfig, store=None, backend=None, prompter=None):
        self.config = app_config
        self.store = store or JsonSettingsStore(app_config.settings_path)
        backend = backend or get_desktop_backend()
        self.controller = PositioningController(
            display=backend,
            window_manager=backend,
            ui=UIFeedbackAdapter(enabled=app_config.notifications_enabled),
            activation_delay=app_config.activation_delay,
            fallback_screen=app_config.fallback_screen,
        )
        self.prompter = prompter or ConsolePrompter()

    def choose_settings(self, args: argparse.Namespace) -> SettingsChoice:
        if args.saved:
            return SettingsChoice(settings=self.store.load(), reused=True)

        if _has_configure_options(args):
            settings = settings_from_args(args)
            save_error = save_settings(self.store, settings) if args.save else None
            return SettingsChoice(
                settings=settings, save_requested=args.save, save_error=save_error
            )

        return obtain_settings(self.store, self.prompter)

    def show_settings(self) -> int:
        print(f"Settings file: {self.store.path}")
        saved = self.store.read()
        if saved is None:
            print(f"No usable saved settings; defaults: {DEFAULT_SETTINGS.describe()}")
        else:
            print(f"Saved: {saved.describe()}")
        return EXIT_OK

    def run(self, args: argparse.Namespace) -> int:
        if args.show_settings:
            return self.show_settings()

        choice = self.choose_settings(args)
        if choice.save_error is not None:
            print(f"❌ {choice.save_error}")

        settings = choice.settings
        print(f"▶ {settings.describe()}")

        outcome = self.controller.position(settings, dry_run=args.dry_run)
        if outcome.used_fallback_screen:
            screen = outcome.screen
            print(f"⚠ Screen size unavailable, assumed {screen.width}x{screen.height}")

        if outcome.success:
            print(f"✓ {outcome.message}")
        else:
            print(f"❌ {outcome.message}")
            return EXIT_FAILURE

        return EXIT_FAILURE if choice.save_error is not None else EXIT_OK


def parse_args(argv=None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.saved and _has_configure_options(args):
        parser.error("--saved cannot be combined with configuration options")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    app_config = load_app_config()

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or app_config.debug) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.platform_info:
        print_platform_info()
        return EXIT_OK

    try:
        return Anchorwin(app_config).run(args)
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
