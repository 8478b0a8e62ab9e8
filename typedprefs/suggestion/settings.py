"""
Suggestion settings.

View model behind the suggestion section of the host app's settings
screen. Each setting is bound straight to its preference key, so the
form reads and writes the preference store directly.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..preferences.keys import PreferenceKeys
from ..preferences.models import BuiltInSuggestionFeatureProvider, SuggestionFeatureProvider
from ..preferences.store import TypedPreferenceStore
from .binding import StoredPreference
from .service import ExtensionServiceClient, ExtensionServiceError

logger = logging.getLogger(__name__)

BUILT_IN_PROVIDER_NAMES = {
    BuiltInSuggestionFeatureProvider.GITHUB_COPILOT: "GitHub Copilot",
    BuiltInSuggestionFeatureProvider.CODEIUM: "Codeium",
}

# Slider bounds for the real-time suggestion debounce, in seconds
DEBOUNCE_RANGE: Tuple[float, float] = (0.1, 2.0)
DEBOUNCE_STEP = 0.1


@dataclass(eq=False)
class SuggestionFeatureProviderOption:
    """
    One entry in the feature provider picker.

    Options compare and hash by id only, so an option built from the
    stored provider matches the corresponding picker entry.
    """

    name: str
    built_in_provider: Optional[BuiltInSuggestionFeatureProvider] = None
    bundle_identifier: Optional[str] = None
    is_missing: bool = False

    @property
    def id(self) -> str:
        if self.built_in_provider is not None:
            return str(self.built_in_provider.value)
        if self.bundle_identifier is not None:
            return self.bundle_identifier
        return "n/A"

    @property
    def label(self) -> str:
        if self.built_in_provider is not None:
            return BUILT_IN_PROVIDER_NAMES[self.built_in_provider]
        if self.is_missing:
            return f"{self.name} (Not found)"
        return self.name

    def __eq__(self, other):
        if not isinstance(other, SuggestionFeatureProviderOption):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


class SuggestionSettings:
    """
    Suggestion settings bound to the preference store.

    Extension-provided suggestion services are fetched through the
    optional service client and cached in extension_provider_options
    until the next refresh.
    """

    realtime_suggestion_toggle = StoredPreference(PreferenceKeys.REALTIME_SUGGESTION_TOGGLE)
    realtime_suggestion_debounce = StoredPreference(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE)
    suggestion_presentation_mode = StoredPreference(PreferenceKeys.SUGGESTION_PRESENTATION_MODE)
    disable_suggestion_feature_globally = StoredPreference(
        PreferenceKeys.DISABLE_SUGGESTION_FEATURE_GLOBALLY
    )
    suggestion_feature_enabled_project_list = StoredPreference(
        PreferenceKeys.SUGGESTION_FEATURE_ENABLED_PROJECT_LIST
    )
    suggestion_feature_disabled_language_list = StoredPreference(
        PreferenceKeys.SUGGESTION_FEATURE_DISABLED_LANGUAGE_LIST
    )
    hide_common_preceding_spaces_in_suggestion = StoredPreference(
        PreferenceKeys.HIDE_COMMON_PRECEDING_SPACES_IN_SUGGESTION
    )
    font = StoredPreference(PreferenceKeys.SUGGESTION_CODE_FONT)
    suggestion_feature_provider = StoredPreference(PreferenceKeys.SUGGESTION_FEATURE_PROVIDER)
    suggestion_display_compact_mode = StoredPreference(
        PreferenceKeys.SUGGESTION_DISPLAY_COMPACT_MODE
    )
    accept_suggestion_with_tab = StoredPreference(PreferenceKeys.ACCEPT_SUGGESTION_WITH_TAB)
    dismiss_suggestion_with_esc = StoredPreference(PreferenceKeys.DISMISS_SUGGESTION_WITH_ESC)
    is_suggestion_sense_enabled = StoredPreference(PreferenceKeys.IS_SUGGESTION_SENSE_ENABLED)

    def __init__(
        self,
        preferences: TypedPreferenceStore,
        service_client: Optional[ExtensionServiceClient] = None,
    ):
        self.preferences = preferences
        self.service_client = service_client
        self.extension_provider_options: List[SuggestionFeatureProviderOption] = []

    def refresh_extension_providers(self) -> bool:
        """
        Reload the suggestion services offered by extensions.

        On failure the previous list is kept.

        Returns:
            True if the list was refreshed
        """
        if self.service_client is None:
            logger.debug("No extension service client, skipping provider refresh")
            return False

        try:
            services = self.service_client.get_extension_suggestion_services()
        except (ExtensionServiceError, OSError) as e:
            logger.warning(f"Failed to fetch extension suggestion services: {e}")
            return False

        self.extension_provider_options = [
            SuggestionFeatureProviderOption(
                name=service.name,
                bundle_identifier=service.bundle_identifier,
            )
            for service in services
        ]
        logger.debug(
            f"Extension suggestion services: {[s.bundle_identifier for s in services]}"
        )
        return True

    def provider_options(self) -> List[SuggestionFeatureProviderOption]:
        """
        Entries for the feature provider picker.

        Built-in providers come first, then extension providers. If the
        stored provider is an extension that is no longer installed, a
        "(Not found)" entry for it is appended so the selection stays
        visible.
        """
        options = [
            SuggestionFeatureProviderOption(name=name, built_in_provider=provider)
            for provider, name in BUILT_IN_PROVIDER_NAMES.items()
        ]
        options.extend(self.extension_provider_options)

        current = self.suggestion_feature_provider
        if current.is_extension:
            installed = {
                option.bundle_identifier for option in self.extension_provider_options
            }
            if current.bundle_identifier not in installed:
                options.append(SuggestionFeatureProviderOption(
                    name=current.name,
                    bundle_identifier=current.bundle_identifier,
                    is_missing=True,
                ))

        return options

    @property
    def selected_provider_option(self) -> SuggestionFeatureProviderOption:
        provider = self.suggestion_feature_provider
        if provider.built_in is not None:
            return SuggestionFeatureProviderOption(
                name=BUILT_IN_PROVIDER_NAMES[provider.built_in],
                built_in_provider=provider.built_in,
            )
        return SuggestionFeatureProviderOption(
            name=provider.name,
            bundle_identifier=provider.bundle_identifier,
        )

    @selected_provider_option.setter
    def selected_provider_option(self, option: SuggestionFeatureProviderOption):
        if option.built_in_provider is not None:
            provider = SuggestionFeatureProvider.builtin(option.built_in_provider)
        else:
            provider = SuggestionFeatureProvider.extension(
                name=option.name,
                bundle_identifier=option.bundle_identifier or "",
            )
        self.suggestion_feature_provider = provider

    @property
    def debounce_label(self) -> str:
        """Debounce as shown next to the slider, e.g. "0.30s"."""
        return f"{self.realtime_suggestion_debounce:.2f}s"
