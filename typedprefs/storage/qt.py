"""
QSettings preference store.

Uses the platform's native settings backend through Qt (plist on macOS,
registry on Windows, INI files elsewhere).
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from PySide6.QtCore import QSettings

from ..config.defaults import QSETTINGS_APPLICATION, QSETTINGS_ORGANIZATION

logger = logging.getLogger(__name__)


class QSettingsPreferenceStore:
    """
    PreferenceStore backed by QSettings.

    Native backends do not keep Python types (INI files return every
    scalar as a string), so each value is stored as JSON text and
    decoded on read. Values written by other tools that are not valid
    JSON are returned as-is.
    """

    def __init__(
        self,
        settings: Optional[QSettings] = None,
        path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the store.

        Args:
            settings: Existing QSettings instance to wrap
            path: INI file to use instead of the native location
        """
        if settings is not None:
            self._settings = settings
        elif path is not None:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(QSETTINGS_ORGANIZATION, QSETTINGS_APPLICATION)

        logger.debug(f"Using QSettings at {self._settings.fileName()}")

    @property
    def settings(self) -> QSettings:
        return self._settings

    def value(self, key: str) -> Optional[Any]:
        raw = self._settings.value(key)
        if raw is None or not isinstance(raw, str):
            return raw

        try:
            return json.loads(raw)
        except (ValueError, RecursionError):
            return raw

    def set(self, key: str, value: Optional[Any]) -> None:
        if value is None:
            self._settings.remove(key)
        else:
            self._settings.setValue(key, json.dumps(value))

    def sync(self):
        """Flush pending writes to the native backend."""
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            logger.error(f"Failed to sync preferences to {self._settings.fileName()}")
