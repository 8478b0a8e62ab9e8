"""
In-memory preference store.
"""

from typing import Any, Dict, Optional


class InMemoryPreferenceStore:
    """Dict-backed PreferenceStore. Nothing is persisted."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def value(self, key: str) -> Optional[Any]:
        return self._values.get(key)

    def set(self, key: str, value: Optional[Any]) -> None:
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value

    def keys(self):
        return list(self._values.keys())

    def snapshot(self) -> Dict[str, Any]:
        """Return a copy of everything stored."""
        return dict(self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
