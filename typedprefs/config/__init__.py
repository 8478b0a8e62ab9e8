"""
Configuration management for typedprefs.

This module decides which backend holds preferences and where it lives.
"""

from .defaults import APP_NAME, DEFAULT_BACKEND, STORE_FILE_NAME
from .settings import get_config_dir, open_shared_store, resolve_backend

__all__ = [
    "APP_NAME",
    "DEFAULT_BACKEND",
    "STORE_FILE_NAME",
    "get_config_dir",
    "open_shared_store",
    "resolve_backend",
]
