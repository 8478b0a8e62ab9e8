"""
Value types stored in preferences.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class PresentationMode(Enum):
    """Where suggestions are shown."""
    NEARBY_TEXT_CURSOR = 0
    FLOATING_WIDGET = 1


class WidgetColorScheme(Enum):
    SYSTEM = 0
    LIGHT = 1
    DARK = 2


class NodeRunner(Enum):
    """How the Node.js based language servers are launched."""
    ENV = 0
    BASH = 1
    SHELL = 2


class BuiltInSuggestionFeatureProvider(Enum):
    GITHUB_COPILOT = 0
    CODEIUM = 1


def _load_json_object(raw: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


@dataclass(frozen=True)
class SuggestionFeatureProvider:
    """
    The service that produces code suggestions.

    Either a built-in provider or one supplied by an installed extension,
    identified by its bundle identifier. Exactly one of built_in and
    bundle_identifier is set.

    Raw value is a JSON object, e.g. ``{"builtIn": 0}`` or
    ``{"extension": {"name": "...", "bundleIdentifier": "..."}}``.
    """

    built_in: Optional[BuiltInSuggestionFeatureProvider] = None
    name: str = ""
    bundle_identifier: Optional[str] = None

    @classmethod
    def builtin(cls, provider: BuiltInSuggestionFeatureProvider) -> "SuggestionFeatureProvider":
        return cls(built_in=provider)

    @classmethod
    def extension(cls, name: str, bundle_identifier: str) -> "SuggestionFeatureProvider":
        return cls(name=name, bundle_identifier=bundle_identifier)

    @property
    def is_extension(self) -> bool:
        return self.built_in is None

    @property
    def raw_value(self) -> str:
        if self.built_in is not None:
            return json.dumps({"builtIn": self.built_in.value})
        return json.dumps({
            "extension": {"name": self.name, "bundleIdentifier": self.bundle_identifier or ""}
        })

    @classmethod
    def from_raw_value(cls, raw: str) -> Optional["SuggestionFeatureProvider"]:
        data = _load_json_object(raw)
        if data is None:
            return None

        if "builtIn" in data:
            value = data["builtIn"]
            if isinstance(value, bool) or not isinstance(value, int):
                return None
            try:
                return cls.builtin(BuiltInSuggestionFeatureProvider(value))
            except ValueError:
                return None

        extension = data.get("extension")
        if isinstance(extension, dict):
            name = extension.get("name")
            identifier = extension.get("bundleIdentifier")
            if isinstance(name, str) and isinstance(identifier, str):
                return cls.extension(name, identifier)

        return None


@dataclass(frozen=True)
class CodeFont:
    """Font used to render suggested code."""

    family: str
    size: float

    @property
    def raw_value(self) -> str:
        return json.dumps({"family": self.family, "size": self.size})

    @classmethod
    def from_raw_value(cls, raw: str) -> Optional["CodeFont"]:
        data = _load_json_object(raw)
        if data is None:
            return None

        family = data.get("family")
        size = data.get("size")
        if not isinstance(family, str) or not family:
            return None
        if isinstance(size, bool) or not isinstance(size, (int, float)) or size <= 0:
            return None
        try:
            size = float(size)
        except OverflowError:
            return None
        return cls(family=family, size=size)


@dataclass
class CustomCommand:
    """A user-defined command shown in the extension's menu."""
    command_id: str
    name: str
    kind: str = "chat"
    prompt: str = ""
    extra_system_prompt: Optional[str] = None


@dataclass
class ChatModel:
    """A configured chat completion model."""
    model_id: str
    name: str
    format: str = "openAI"
    base_url: str = ""
    model_name: str = ""
    max_tokens: int = 4000
    supports_function_calling: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class EmbeddingModel:
    """A configured embedding model."""
    model_id: str
    name: str
    format: str = "openAI"
    base_url: str = ""
    model_name: str = ""
    max_tokens: int = 8191
    dimensions: int = 1536
