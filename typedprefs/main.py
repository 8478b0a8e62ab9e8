"""
typedprefs - startup entry point.

Opens the shared preference store and seeds first-run defaults.
"""

import logging
import sys
from typing import Optional

from . import __version__
from .config import open_shared_store
from .preferences import PreferenceKeys, setup_default_settings
from .utils import setup_logging


def main(backend: Optional[str] = None) -> int:
    """Seed default preferences in the shared store."""
    setup_logging(log_level="INFO", log_file=False)
    logger = logging.getLogger(__name__)

    logger.info(f"typedprefs v{__version__} starting...")

    prefs = open_shared_store(backend)
    setup_default_settings(prefs)

    provider = prefs.get(PreferenceKeys.SUGGESTION_FEATURE_PROVIDER)
    logger.info(f"Suggestion feature provider: {provider}")
    logger.info("Default preferences ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
