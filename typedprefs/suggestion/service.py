"""
Extension suggestion services.

Extensions can provide their own suggestion service. The host app asks
the extension service for the installed ones; how that request travels
is up to the client implementation.
"""

from dataclasses import dataclass
from typing import List, Protocol


class ExtensionServiceError(Exception):
    """Raised by clients when the extension service cannot be reached."""
    pass


@dataclass(frozen=True)
class ExtensionSuggestionService:
    """A suggestion service offered by an installed extension."""
    name: str
    bundle_identifier: str


class ExtensionServiceClient(Protocol):
    """Client for the extension service."""

    def get_extension_suggestion_services(self) -> List[ExtensionSuggestionService]:
        """
        List the suggestion services offered by installed extensions.

        Raises:
            ExtensionServiceError: If the service is unavailable
        """
        ...
