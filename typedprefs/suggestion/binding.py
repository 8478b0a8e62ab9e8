"""
Attribute binding for preference keys.
"""

from typing import Any, Generic, Optional, TypeVar

from ..preferences.keys import PreferenceKey

T = TypeVar("T")


class StoredPreference(Generic[T]):
    """
    Descriptor that maps an attribute to a preference key.

    The owning object must expose a TypedPreferenceStore as
    ``preferences``. Reading the attribute reads the key, assigning
    writes it and deleting resets it to the default.

    Example:
        class EditorSettings:
            tab_accepts = StoredPreference(PreferenceKeys.ACCEPT_SUGGESTION_WITH_TAB)

            def __init__(self, preferences):
                self.preferences = preferences
    """

    def __init__(self, key: PreferenceKey[T]):
        self.key = key
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str):
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None):
        if instance is None:
            return self
        return instance.preferences.get(self.key)

    def __set__(self, instance: Any, value: T):
        instance.preferences.set(self.key, value)

    def __delete__(self, instance: Any):
        instance.preferences.reset(self.key)

    def __repr__(self):
        return f"StoredPreference({self.key.key!r})"
