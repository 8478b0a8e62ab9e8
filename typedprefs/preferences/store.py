"""
Typed access to a PreferenceStore.
"""

import copy
import logging
import warnings
from typing import Any, Callable, Optional, TypeVar

from ..storage.base import PreferenceStore
from .codecs import PreferenceDecodeError
from .keys import DeprecatedPreferenceKey, PreferenceKey

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class TypedPreferenceStore:
    """
    Strongly typed reads and writes over an untyped PreferenceStore.

    Reads never raise: a missing value, a value of the wrong type and a
    value that fails to decode all return the key's default. The three
    cases are indistinguishable to the caller and only show up in debug
    logging.

    Deprecated keys can be read (get_deprecated) but are never written.

    Examples:
        prefs = TypedPreferenceStore(InMemoryPreferenceStore())
        prefs.get(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE)       # 0.3
        prefs.set(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE, 1.2)
        prefs.get(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE)       # 1.2
    """

    def __init__(self, store: PreferenceStore):
        """
        Initialize with the backing store.

        Args:
            store: Untyped key-value store that holds the values
        """
        self.store = store

    def _decode(self, key: PreferenceKey[T]) -> T:
        raw = self.store.value(key.key)
        if raw is None:
            return copy.deepcopy(key.default)

        try:
            return key.codec.decode(raw)
        except PreferenceDecodeError as e:
            logger.debug(f"Using default for {key.key}: {e}")
            return copy.deepcopy(key.default)

    def _encode(self, key: PreferenceKey[T], value: T) -> Optional[Any]:
        """
        Encode value for key, or return None if it is not a valid value.

        The encoded value must decode again under the same key, so a
        value of the wrong type is never written.
        """
        try:
            raw = key.codec.encode(value)
            key.codec.decode(raw)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Not writing {key.key}: {value!r} is not a valid value ({e})")
            return None
        return raw

    def _refuse_deprecated_write(self, key: PreferenceKey) -> bool:
        if isinstance(key, DeprecatedPreferenceKey):
            warnings.warn(
                f"Preference key {key.key!r} is deprecated and cannot be written",
                DeprecationWarning,
                stacklevel=3,
            )
            return True
        return False

    def get(self, key: PreferenceKey[T]) -> T:
        """
        Read a preference.

        Args:
            key: Preference key

        Returns:
            The stored value, or the key's default if nothing usable is stored
        """
        if isinstance(key, DeprecatedPreferenceKey):
            warnings.warn(
                f"Preference key {key.key!r} is deprecated, use get_deprecated() for migration",
                DeprecationWarning,
                stacklevel=2,
            )
        return self._decode(key)

    def set(self, key: PreferenceKey[T], value: T) -> None:
        """
        Write a preference.

        Args:
            key: Preference key (must not be deprecated)
            value: New value; a value the key cannot hold is logged and
                not written
        """
        if self._refuse_deprecated_write(key):
            return
        raw = self._encode(key, value)
        if raw is not None:
            self.store.set(key.key, raw)

    def initialize_default(self, key: PreferenceKey[T], override: Optional[T] = None) -> None:
        """
        Seed a preference on first run.

        Writes override, or the key's default, only when nothing is stored
        under the key yet. An existing user value is never replaced.

        Args:
            key: Preference key (must not be deprecated)
            override: Value to seed instead of the key's default
        """
        if self._refuse_deprecated_write(key):
            return
        if self.has_value(key):
            return

        value = override if override is not None else key.default
        raw = self._encode(key, value)
        if raw is None:
            return
        logger.debug(f"Seeding default for {key.key}")
        self.store.set(key.key, raw)

    def get_deprecated(self, key: DeprecatedPreferenceKey[T]) -> T:
        """
        Read the value stored under a deprecated key, for migration only.

        Args:
            key: Deprecated preference key

        Returns:
            The stored value, or the key's default
        """
        return self._decode(key)

    def has_value(self, key: PreferenceKey) -> bool:
        """Whether anything is stored under the key, decodable or not."""
        return self.store.value(key.key) is not None

    def reset(self, key: PreferenceKey) -> None:
        """Remove the stored value so reads return the default again."""
        if self._refuse_deprecated_write(key):
            return
        self.store.set(key.key, None)

    def migrate(
        self,
        old_key: DeprecatedPreferenceKey[T],
        new_key: PreferenceKey[U],
        convert: Optional[Callable[[T], U]] = None,
    ) -> None:
        """
        Seed a replacement key from the value of a deprecated one.

        Reads old_key once and seeds new_key with the (converted) value
        if new_key has nothing stored yet. old_key is left untouched.

        Args:
            old_key: Deprecated key holding the previous value
            new_key: Replacement key
            convert: Maps the old value to the new key's type
        """
        old_value: Any = self.get_deprecated(old_key)
        new_value = convert(old_value) if convert is not None else old_value
        if not self.has_value(new_key):
            logger.info(f"Migrating preference {old_key.key} -> {new_key.key}")
        self.initialize_default(new_key, override=new_value)
