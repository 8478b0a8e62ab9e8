"""
Process configuration for typedprefs.

Resolves where preferences are stored and opens the shared store.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..preferences.store import TypedPreferenceStore
from ..storage import InMemoryPreferenceStore, JsonFilePreferenceStore
from .defaults import (
    APP_NAME,
    BACKENDS,
    DEFAULT_BACKEND,
    ENV_BACKEND,
    ENV_CONFIG_DIR,
    STORE_FILE_NAME,
)

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """
    Get platform-specific configuration directory.

    TYPEDPREFS_CONFIG_DIR overrides the platform default.

    Returns:
        Path to configuration directory (created if missing)
    """
    override = os.environ.get(ENV_CONFIG_DIR)
    if override:
        config_dir = Path(override)
    elif os.name == 'nt':  # Windows
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
        config_dir = Path(base) / APP_NAME
    else:  # Linux/macOS
        base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        config_dir = Path(base) / APP_NAME

    config_dir.mkdir(parents=True, exist_ok=True)

    return config_dir


def resolve_backend(backend: Optional[str] = None) -> str:
    """
    Pick the storage backend.

    Args:
        backend: Explicit backend name; TYPEDPREFS_BACKEND is used if None

    Returns:
        One of BACKENDS. Unknown names fall back to DEFAULT_BACKEND.
    """
    name = backend or os.environ.get(ENV_BACKEND) or DEFAULT_BACKEND
    name = name.strip().lower()

    if name not in BACKENDS:
        logger.warning(f"Unknown preference backend {name!r}, using {DEFAULT_BACKEND}")
        return DEFAULT_BACKEND

    return name


def open_shared_store(backend: Optional[str] = None) -> TypedPreferenceStore:
    """
    Open the application's preference store.

    The application opens this once at startup and passes it to whatever
    needs preferences; nothing here caches it.

    Args:
        backend: Backend name, see resolve_backend()

    Returns:
        TypedPreferenceStore over the chosen backend
    """
    name = resolve_backend(backend)

    if name == "memory":
        store = InMemoryPreferenceStore()
    elif name == "qsettings":
        from ..storage.qt import QSettingsPreferenceStore
        store = QSettingsPreferenceStore()
    else:
        store = JsonFilePreferenceStore(get_config_dir() / STORE_FILE_NAME)

    logger.info(f"Using {name} preference backend")
    return TypedPreferenceStore(store)
