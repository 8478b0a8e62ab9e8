"""
Persistence port for preferences.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class PreferenceStore(Protocol):
    """
    An untyped, string-keyed preference store.

    The typed layer only ever talks to a store through these two calls.
    Storing ``None`` removes the key, so ``value()`` returning ``None``
    always means "nothing stored".
    """

    def value(self, key: str) -> Optional[Any]:
        """
        Return the raw value stored under key.

        Args:
            key: Preference key

        Returns:
            Stored value, or None if nothing is stored
        """
        ...

    def set(self, key: str, value: Optional[Any]) -> None:
        """
        Store a raw value under key, or remove the key if value is None.

        Args:
            key: Preference key
            value: Storable value (bool, int, float, str) or None
        """
        ...
