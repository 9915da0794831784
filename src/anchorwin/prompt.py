"""Console prompts for the interactive configuration flow"""

from __future__ import annotations

from typing import Callable, Sequence

from .core.settings_model import WindowSettings, parse_percent


class ConsolePrompter:
    """Ask questions on the terminal, re-asking until the answer is valid.

    An empty answer selects the default shown in brackets.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self._input = input_func
        self._output = output_func

    def ask_reuse_saved(self, saved: WindowSettings) -> bool:
        self._output(f"Saved settings: {saved.describe()}")
        choice = self.ask_choice("Use saved settings or configure new", ["saved", "new"], "saved")
        return choice == "saved"

    def ask_text(self, label: str, default: str) -> str:
        while True:
            answer = self._input(f"{label} [{default}]: ").strip()
            if answer:
                return answer
            if default.strip():
                return default
            self._output("  A value is required.")

    def ask_percent(self, label: str, default: int) -> int:
        while True:
            answer = self._input(f"{label} [{default}]: ").strip()
            if not answer:
                return default
            try:
                return parse_percent(answer)
            except ValueError as e:
                self._output(f"  {e}")

    def ask_choice(self, label: str, choices: Sequence[str], default: str) -> str:
        options = "/".join(choices)
        while True:
            answer = self._input(f"{label} ({options}) [{default}]: ").strip().lower()
            if not answer:
                return default
            # Accept unambiguous prefixes ("l" for "left")
            matches = [c for c in choices if c.lower() == answer]
            if not matches:
                matches = [c for c in choices if c.lower().startswith(answer)]
            if len(matches) == 1:
                return matches[0]
            self._output(f"  Please choose one of: {', '.join(choices)}")

    def ask_yes_no(self, label: str, default: bool) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self._input(f"{label}? [{hint}]: ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._output("  Please answer y or n.")
