"""
Suggestion settings for typedprefs.
"""

from .binding import StoredPreference
from .service import ExtensionServiceClient, ExtensionServiceError, ExtensionSuggestionService
from .settings import (
    BUILT_IN_PROVIDER_NAMES,
    DEBOUNCE_RANGE,
    DEBOUNCE_STEP,
    SuggestionFeatureProviderOption,
    SuggestionSettings,
)

__all__ = [
    "StoredPreference",
    "ExtensionServiceClient",
    "ExtensionServiceError",
    "ExtensionSuggestionService",
    "BUILT_IN_PROVIDER_NAMES",
    "DEBOUNCE_RANGE",
    "DEBOUNCE_STEP",
    "SuggestionFeatureProviderOption",
    "SuggestionSettings",
]
