"""
Typed preferences for typedprefs.

This package provides strongly typed access to the preference store:
- PreferenceKey / DeprecatedPreferenceKey: named settings with defaults
- PreferenceKeys: every setting the application uses
- TypedPreferenceStore: get / set / initialize_default over a store
- setup_default_settings: first-run seeding
"""

from .codecs import JsonListCodec, PreferenceDecodeError, RawValueCodec, ScalarCodec
from .defaults import setup_default_settings
from .keys import KEY_REGISTRY, DeprecatedPreferenceKey, PreferenceKey, PreferenceKeys, lookup_key
from .models import (
    BuiltInSuggestionFeatureProvider,
    ChatModel,
    CodeFont,
    CustomCommand,
    EmbeddingModel,
    NodeRunner,
    PresentationMode,
    SuggestionFeatureProvider,
    WidgetColorScheme,
)
from .store import TypedPreferenceStore

__all__ = [
    "PreferenceKey",
    "DeprecatedPreferenceKey",
    "PreferenceKeys",
    "KEY_REGISTRY",
    "lookup_key",
    "TypedPreferenceStore",
    "setup_default_settings",
    "ScalarCodec",
    "RawValueCodec",
    "JsonListCodec",
    "PreferenceDecodeError",
    "PresentationMode",
    "WidgetColorScheme",
    "NodeRunner",
    "BuiltInSuggestionFeatureProvider",
    "SuggestionFeatureProvider",
    "CodeFont",
    "CustomCommand",
    "ChatModel",
    "EmbeddingModel",
]
