"""
JSON file preference store.

Keeps every preference in one flat JSON object on disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class JsonFilePreferenceStore:
    """
    PreferenceStore backed by a JSON file.

    The file is read once on construction and rewritten after each write
    when autosave is enabled. A missing or unreadable file starts the
    store empty; it is never treated as fatal.

    Path (see typedprefs.config.get_config_dir):
        Linux/macOS: ~/.config/typedprefs/preferences.json
        Windows: %APPDATA%\\typedprefs\\preferences.json
    """

    def __init__(self, path: Union[str, Path], autosave: bool = True):
        """
        Initialize the store and load existing values.

        Args:
            path: Location of the JSON file
            autosave: If True, persist after every write
        """
        self.path = Path(path)
        self.autosave = autosave
        self._values: Dict[str, Any] = {}
        self.load()

    def load(self):
        """
        Load values from file.

        If the file doesn't exist or is invalid, the store starts empty.
        """
        if not self.path.exists():
            logger.info(f"No preferences file at {self.path}, starting empty")
            self._values = {}
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (ValueError, OSError, RecursionError) as e:
            logger.error(f"Failed to load preferences from {self.path}: {e}, starting empty")
            self._values = {}
            return

        if not isinstance(loaded, dict):
            logger.error(f"Preferences file {self.path} is not a JSON object, starting empty")
            self._values = {}
            return

        self._values = loaded
        logger.info(f"Loaded {len(loaded)} preferences from {self.path}")

    def save(self):
        """
        Write current values to file.

        Creates parent directories if needed.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self._values, f, indent=2, sort_keys=True)

            logger.debug(f"Saved preferences to {self.path}")

        except (IOError, TypeError, ValueError) as e:
            logger.error(f"Failed to save preferences: {e}")

    def value(self, key: str) -> Optional[Any]:
        return self._values.get(key)

    def set(self, key: str, value: Optional[Any]) -> None:
        if value is None:
            if key not in self._values:
                return
            del self._values[key]
        else:
            self._values[key] = value

        if self.autosave:
            self.save()
