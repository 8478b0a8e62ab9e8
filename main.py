#!/usr/bin/env python3
"""
typedprefs - Main entry point.

Seeds first-run defaults in the shared preference store.
"""

import sys

from typedprefs.main import main


if __name__ == "__main__":
    sys.exit(main())
