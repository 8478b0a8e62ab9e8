"""
typedprefs - typed preference storage for a code-suggestion host app.
"""

__version__ = "0.9.0"
