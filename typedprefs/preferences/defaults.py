"""
First-run seeding of default preferences.
"""

import logging

from .keys import PreferenceKeys
from .models import NodeRunner, SuggestionFeatureProvider
from .store import TypedPreferenceStore

logger = logging.getLogger(__name__)


def setup_default_settings(prefs: TypedPreferenceStore) -> None:
    """
    Write defaults for keys that have never been set.

    Safe to call on every launch: existing values are left alone. The
    suggestion feature provider is seeded from the deprecated provider
    key so users keep the provider they picked before the key changed.

    Args:
        prefs: Store to seed
    """
    prefs.initialize_default(PreferenceKeys.QUIT_XPC_SERVICE_ON_XCODE_AND_APP_QUIT)
    prefs.initialize_default(PreferenceKeys.REALTIME_SUGGESTION_TOGGLE)
    prefs.initialize_default(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE)
    prefs.initialize_default(PreferenceKeys.AUTOMATICALLY_CHECK_FOR_UPDATE)
    prefs.initialize_default(PreferenceKeys.SUGGESTION_PRESENTATION_MODE)
    prefs.initialize_default(PreferenceKeys.WIDGET_COLOR_SCHEME)
    prefs.initialize_default(PreferenceKeys.CUSTOM_COMMANDS)
    prefs.initialize_default(PreferenceKeys.RUN_NODE_WITH, override=NodeRunner.ENV)
    prefs.initialize_default(PreferenceKeys.CHAT_MODELS)
    prefs.initialize_default(PreferenceKeys.EMBEDDING_MODELS)
    prefs.migrate(
        PreferenceKeys.OLD_SUGGESTION_FEATURE_PROVIDER,
        PreferenceKeys.SUGGESTION_FEATURE_PROVIDER,
        convert=SuggestionFeatureProvider.builtin,
    )
    logger.debug("Default preferences seeded")
