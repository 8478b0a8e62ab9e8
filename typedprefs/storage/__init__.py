"""
Key-value persistence for typedprefs.

This package provides the untyped, string-keyed store that typed
preferences are layered on:
- PreferenceStore: the protocol every backend implements
- InMemoryPreferenceStore: dict-backed store for tests and scratch use
- JsonFilePreferenceStore: flat JSON object in the user's config directory

The Qt-backed store lives in typedprefs.storage.qt so that importing
this package does not require PySide6.
"""

from .base import PreferenceStore
from .memory import InMemoryPreferenceStore
from .json_file import JsonFilePreferenceStore

__all__ = [
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
]
