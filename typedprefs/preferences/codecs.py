"""
Conversion between typed preference values and storable primitives.

A codec turns an application value into something a PreferenceStore can
hold (bool, int, float, str) and back. Decoding raises
PreferenceDecodeError on any mismatch; TypedPreferenceStore turns that
into the key's default.
"""

import dataclasses
import json
import logging
from enum import Enum
from typing import (
    Any,
    Generic,
    List,
    Optional,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

STORABLE_TYPES = (bool, int, float, str)


class PreferenceDecodeError(ValueError):
    """Raised when a stored value cannot be converted to the key's type."""
    pass


def _is_instance_strict(raw: Any, expected: type) -> bool:
    """
    isinstance check that keeps bool and numbers apart.

    bool is a subclass of int in Python, but a stored flag is never a
    valid number and a stored number is never a valid flag. An int is
    accepted where a float is expected.
    """
    if expected is bool:
        return isinstance(raw, bool)
    if isinstance(raw, bool):
        return False
    if expected is float:
        return isinstance(raw, (int, float))
    return isinstance(raw, expected)


def _to_float(raw: Any) -> float:
    try:
        return float(raw)
    except OverflowError:
        raise PreferenceDecodeError(f"{raw!r} does not fit in a float") from None


def _matches_annotation(value: Any, annotation: Any) -> bool:
    """
    Check a decoded dataclass field against its annotation.

    Handles storable scalars, Optional[...], dict, list and Any. Other
    annotations are accepted as-is.
    """
    if annotation is Any:
        return True
    if annotation in STORABLE_TYPES:
        return _is_instance_strict(value, annotation)

    origin = get_origin(annotation)
    if origin is Union:
        return any(
            value is None if arg is type(None) else _matches_annotation(value, arg)
            for arg in get_args(annotation)
        )
    if origin in (dict, list):
        return isinstance(value, origin)
    if annotation in (dict, list):
        return isinstance(value, annotation)
    return True


class Codec(Generic[T]):
    """Base class for preference codecs."""

    def encode(self, value: T) -> Any:
        raise NotImplementedError

    def decode(self, raw: Any) -> T:
        raise NotImplementedError


class ScalarCodec(Codec[T]):
    """Codec for values the store holds natively: bool, int, float, str."""

    def __init__(self, value_type: Type[T]):
        if value_type not in STORABLE_TYPES:
            raise TypeError(f"{value_type!r} is not a storable scalar type")
        self.value_type = value_type

    def encode(self, value: T) -> Any:
        return value

    def decode(self, raw: Any) -> T:
        if not _is_instance_strict(raw, self.value_type):
            raise PreferenceDecodeError(
                f"expected {self.value_type.__name__}, got {type(raw).__name__}"
            )
        if self.value_type is float:
            return _to_float(raw)
        return raw

    def __repr__(self):
        return f"ScalarCodec({self.value_type.__name__})"


class RawValueCodec(Codec[T]):
    """
    Codec for raw-representable values.

    Supports two kinds of types:
    - Enum subclasses whose member values are all str or all int
    - Classes with a ``raw_value`` property and a ``from_raw_value``
      classmethod that returns None when the raw value is not valid
    """

    def __init__(self, value_type: Type[T], raw_type: Optional[type] = None):
        self.value_type = value_type
        self.raw_type = raw_type or self._infer_raw_type(value_type)
        if self.raw_type not in (str, int):
            raise TypeError(f"raw type of {value_type!r} must be str or int")

    @staticmethod
    def _infer_raw_type(value_type: type) -> type:
        if issubclass(value_type, Enum):
            raw_types = {type(member.value) for member in value_type}
            if len(raw_types) == 1:
                return raw_types.pop()
        raise TypeError(f"cannot infer raw type of {value_type!r}, pass raw_type")

    def encode(self, value: T) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value.raw_value

    def decode(self, raw: Any) -> T:
        if not _is_instance_strict(raw, self.raw_type):
            raise PreferenceDecodeError(
                f"expected raw {self.raw_type.__name__}, got {type(raw).__name__}"
            )

        if issubclass(self.value_type, Enum):
            try:
                return self.value_type(raw)
            except ValueError:
                raise PreferenceDecodeError(
                    f"{raw!r} is not a valid {self.value_type.__name__}"
                ) from None

        result = self.value_type.from_raw_value(raw)
        if result is None:
            raise PreferenceDecodeError(f"{raw!r} is not a valid {self.value_type.__name__}")
        return result

    def __repr__(self):
        return f"RawValueCodec({self.value_type.__name__})"


class JsonListCodec(Codec[List[T]]):
    """
    Codec for lists of codable elements, stored as a JSON array string.

    Elements are storable scalars or dataclasses. A dataclass element is
    written as a JSON object of its fields and rebuilt by keyword
    construction, so unknown or missing fields fail the whole decode.
    """

    EMPTY = "[]"

    def __init__(self, element_type: type):
        if element_type not in STORABLE_TYPES and not dataclasses.is_dataclass(element_type):
            raise TypeError(f"{element_type!r} is neither a storable scalar nor a dataclass")
        self.element_type = element_type

    def _encode_element(self, element: Any) -> Any:
        if dataclasses.is_dataclass(self.element_type):
            return dataclasses.asdict(element)
        return element

    def _decode_element(self, item: Any) -> Any:
        if dataclasses.is_dataclass(self.element_type):
            if not isinstance(item, dict):
                raise PreferenceDecodeError(f"expected JSON object, got {type(item).__name__}")
            try:
                element = self.element_type(**item)
            except TypeError as e:
                raise PreferenceDecodeError(str(e)) from None

            for f in dataclasses.fields(self.element_type):
                if not _matches_annotation(getattr(element, f.name), f.type):
                    raise PreferenceDecodeError(
                        f"field {f.name!r} of {self.element_type.__name__} has the wrong type"
                    )
            return element

        if not _is_instance_strict(item, self.element_type):
            raise PreferenceDecodeError(
                f"expected {self.element_type.__name__} element, got {type(item).__name__}"
            )
        if self.element_type is float:
            return _to_float(item)
        return item

    def encode(self, value: List[T]) -> str:
        try:
            return json.dumps([self._encode_element(element) for element in value])
        except (TypeError, ValueError) as e:
            logger.debug(f"Failed to encode list of {self.element_type.__name__}: {e}")
            return self.EMPTY

    def decode(self, raw: Any) -> List[T]:
        if not isinstance(raw, str):
            raise PreferenceDecodeError(f"expected JSON string, got {type(raw).__name__}")

        try:
            items = json.loads(raw)
        except (ValueError, RecursionError):
            raise PreferenceDecodeError("stored value is not valid JSON") from None

        if not isinstance(items, list):
            raise PreferenceDecodeError("stored JSON is not an array")

        return [self._decode_element(item) for item in items]

    def __repr__(self):
        return f"JsonListCodec({self.element_type.__name__})"
