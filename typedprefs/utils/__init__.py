"""
Utility functions for typedprefs.
"""

from .logger import get_log_dir, setup_logging

__all__ = ["setup_logging", "get_log_dir"]
