"""
Default configuration for typedprefs.

These values decide where preferences live when nothing in the
environment overrides them.
"""

APP_NAME = "typedprefs"

# JSON backend
STORE_FILE_NAME = "preferences.json"

# QSettings backend
QSETTINGS_ORGANIZATION = "typedprefs"
QSETTINGS_APPLICATION = "shared"

# Backends: "json", "qsettings", "memory"
DEFAULT_BACKEND = "json"
BACKENDS = ("json", "qsettings", "memory")

# Environment overrides
ENV_BACKEND = "TYPEDPREFS_BACKEND"
ENV_CONFIG_DIR = "TYPEDPREFS_CONFIG_DIR"
ENV_LOG_DIR = "TYPEDPREFS_LOG_DIR"
