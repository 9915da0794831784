"""JSON file adapter for the saved window settings."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from ..core.errors import SettingsStoreError
from ..core.settings_model import DEFAULT_SETTINGS, WindowSettings

logger = logging.getLogger(__name__)

# The single well-known key the record is stored under
SETTINGS_KEY = "window_settings"


class JsonSettingsStore:
    """Stores one WindowSettings record in a JSON file at a fixed path."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        try:
            return self._path.is_file()
        except OSError:
            return False

    def read(self) -> WindowSettings | None:
        """Read the saved record.

        Returns None when the file is missing, unreadable, not valid JSON,
        or does not hold a well-formed record.
        """
        if not self.exists():
            logger.debug(f"No saved settings at {self._path}")
            return None

        try:
            with open(self._path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Could not read settings from {self._path}: {e}")
            return None

        if not isinstance(document, dict) or SETTINGS_KEY not in document:
            logger.warning(f"Settings file {self._path} has no '{SETTINGS_KEY}' entry")
            return None

        settings = WindowSettings.from_dict(document[SETTINGS_KEY])
        if settings is None:
            logger.warning(f"Ignoring invalid settings record in {self._path}")
        return settings

    def load(self) -> WindowSettings:
        """Return the saved record, or DEFAULT_SETTINGS if there is none usable."""
        settings = self.read()
        return settings if settings is not None else DEFAULT_SETTINGS

    def save(self, settings: WindowSettings) -> None:
        """Write the record, replacing any previous one.

        The file is written to a temporary sibling and moved into place so a
        concurrent reader never sees a partial record.

        Raises:
            SettingsStoreError: if the directory or file cannot be written.
        """
        document = {SETTINGS_KEY: settings.to_dict()}
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.write("\n")
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise SettingsStoreError(self._path, e) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
        logger.debug(f"Saved settings to {self._path}")
