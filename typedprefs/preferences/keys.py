"""
Preference keys and the key registry.

Every setting the application reads or writes is declared here as a
PreferenceKey constant on PreferenceKeys. Keys carry their stored name,
a default value and the codec that converts values for storage.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar

from .codecs import Codec, JsonListCodec, RawValueCodec, ScalarCodec
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

T = TypeVar("T")


@dataclass(frozen=True)
class PreferenceKey(Generic[T]):
    """
    A named, typed setting with a default.

    Two keys are equal when they share the same stored name.
    """

    key: str
    default: T = field(compare=False)
    codec: Codec = field(compare=False, repr=False)

    @classmethod
    def scalar(cls, key: str, default: T) -> "PreferenceKey[T]":
        """Key for a bool, int, float or str value, typed by its default."""
        return cls(key, default, ScalarCodec(type(default)))

    @classmethod
    def raw(cls, key: str, default: T, raw_type: Optional[type] = None) -> "PreferenceKey[T]":
        """Key for an Enum or raw_value type, typed by its default."""
        return cls(key, default, RawValueCodec(type(default), raw_type))

    @classmethod
    def json_list(cls, key: str, default: List, element_type: type) -> "PreferenceKey[List]":
        """Key for a list of scalars or dataclasses, stored as a JSON array."""
        return cls(key, default, JsonListCodec(element_type))


@dataclass(frozen=True)
class DeprecatedPreferenceKey(PreferenceKey[T]):
    """
    A key kept only so its old value can be read during migration.

    TypedPreferenceStore refuses to write these.
    """


DEFAULT_CUSTOM_COMMANDS = [
    CustomCommand(
        command_id="BuiltInCustomCommandExplainSelection",
        name="Explain Selection",
        kind="chat",
        prompt="Explain the selected code concisely, step-by-step.",
    ),
    CustomCommand(
        command_id="BuiltInCustomCommandAddDocumentationToSelection",
        name="Add Documentation to Selection",
        kind="promptToCode",
        prompt="Add documentation on top of the code. Use triple slash if the language supports it.",
    ),
    CustomCommand(
        command_id="BuiltInCustomCommandSendCodeToChat",
        name="Send Selected Code to Chat",
        kind="chat",
        prompt="",
    ),
]


class PreferenceKeys:
    """All preference keys used by the application."""

    QUIT_XPC_SERVICE_ON_XCODE_AND_APP_QUIT = PreferenceKey.scalar(
        "QuitXPCServiceOnXcodeAndAppQuit", False
    )
    AUTOMATICALLY_CHECK_FOR_UPDATE = PreferenceKey.scalar("AutomaticallyCheckForUpdate", False)
    RUN_NODE_WITH = PreferenceKey.raw("RunNodeWith", NodeRunner.ENV)
    WIDGET_COLOR_SCHEME = PreferenceKey.raw("WidgetColorScheme", WidgetColorScheme.DARK)

    # Suggestion
    REALTIME_SUGGESTION_TOGGLE = PreferenceKey.scalar("RealtimeSuggestionToggle", True)
    REALTIME_SUGGESTION_DEBOUNCE = PreferenceKey.scalar("RealtimeSuggestionDebounce", 0.3)
    SUGGESTION_PRESENTATION_MODE = PreferenceKey.raw(
        "SuggestionPresentationMode", PresentationMode.FLOATING_WIDGET
    )
    SUGGESTION_FEATURE_PROVIDER = PreferenceKey.raw(
        "NewSuggestionFeatureProvider",
        SuggestionFeatureProvider.builtin(BuiltInSuggestionFeatureProvider.GITHUB_COPILOT),
        raw_type=str,
    )
    DISABLE_SUGGESTION_FEATURE_GLOBALLY = PreferenceKey.scalar(
        "DisableSuggestionFeatureGlobally", False
    )
    SUGGESTION_FEATURE_ENABLED_PROJECT_LIST = PreferenceKey.json_list(
        "SuggestionFeatureEnabledProjectList", [], str
    )
    SUGGESTION_FEATURE_DISABLED_LANGUAGE_LIST = PreferenceKey.json_list(
        "SuggestionFeatureDisabledLanguageList", [], str
    )
    HIDE_COMMON_PRECEDING_SPACES_IN_SUGGESTION = PreferenceKey.scalar(
        "HideCommonPrecedingSpacesInSuggestion", False
    )
    SUGGESTION_CODE_FONT = PreferenceKey.raw(
        "SuggestionCodeFont", CodeFont(family="Menlo", size=11.0), raw_type=str
    )
    SUGGESTION_DISPLAY_COMPACT_MODE = PreferenceKey.scalar("SuggestionDisplayCompactMode", False)
    ACCEPT_SUGGESTION_WITH_TAB = PreferenceKey.scalar("AcceptSuggestionWithTab", True)
    DISMISS_SUGGESTION_WITH_ESC = PreferenceKey.scalar("DismissSuggestionWithEsc", True)
    IS_SUGGESTION_SENSE_ENABLED = PreferenceKey.scalar("IsSuggestionSenseEnabled", False)

    # Chat and custom commands
    CUSTOM_COMMANDS = PreferenceKey.json_list(
        "CustomCommands", DEFAULT_CUSTOM_COMMANDS, CustomCommand
    )
    CHAT_MODELS = PreferenceKey.json_list("ChatModels", [], ChatModel)
    EMBEDDING_MODELS = PreferenceKey.json_list("EmbeddingModels", [], EmbeddingModel)

    # Deprecated
    OLD_SUGGESTION_FEATURE_PROVIDER = DeprecatedPreferenceKey(
        "SuggestionFeatureProvider",
        BuiltInSuggestionFeatureProvider.GITHUB_COPILOT,
        RawValueCodec(BuiltInSuggestionFeatureProvider),
    )


def _collect_keys() -> Dict[str, PreferenceKey]:
    registry: Dict[str, PreferenceKey] = {}
    for attr, value in vars(PreferenceKeys).items():
        if not isinstance(value, PreferenceKey):
            continue
        if value.key in registry:
            raise ValueError(f"Duplicate preference key {value.key!r} ({attr})")
        registry[value.key] = value
    return registry


# Stored name -> key, for lookups by name (e.g. from a settings file).
KEY_REGISTRY: Dict[str, PreferenceKey] = _collect_keys()


def lookup_key(name: str) -> Optional[PreferenceKey]:
    """
    Find a key by its stored name.

    Args:
        name: Stored key name, e.g. "RealtimeSuggestionDebounce"

    Returns:
        The PreferenceKey, or None if no key has that name
    """
    return KEY_REGISTRY.get(name)
