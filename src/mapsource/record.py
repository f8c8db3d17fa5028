"""Read-only view over a loosely-typed source configuration record."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_number(value: Any) -> bool:
    """True for ints and floats; booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_float(value: Any) -> float | None:
    """Return ``value`` as a float, or None if it is not a representable number."""
    if not is_number(value):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def parse_url(raw: str) -> str | None:
    """Return ``raw`` unchanged if it is an absolute URL, else None."""
    try:
        _URL_ADAPTER.validate_python(raw)
    except ValidationError:
        return None
    return raw


class ConfigurationRecord(Mapping[str, Any]):
    """
    Mapping of style source properties with total, typed accessors.

    Every ``get_*`` accessor returns None both when the key is absent and when
    its value has the wrong type, so callers never need to tell the two apart.
    """

    def __init__(self, properties: Mapping[str, Any] | None = None) -> None:
        self._properties: Mapping[str, Any] = properties or {}

    @classmethod
    def wrap(
        cls, properties: "Mapping[str, Any] | ConfigurationRecord | None"
    ) -> "ConfigurationRecord":
        """Return ``properties`` as a record without re-wrapping records."""
        if isinstance(properties, ConfigurationRecord):
            return properties
        return cls(properties)

    # --- Mapping protocol ---

    def __getitem__(self, key: str) -> Any:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._properties)!r})"

    # --- Typed accessors ---

    def _typed(self, key: str, expected: str, ok: bool) -> bool:
        if not ok and key in self._properties:
            logger.debug(f"Ignoring '{key}': expected {expected}")
        return ok

    def get_number(self, key: str) -> float | None:
        number = _as_float(self._properties.get(key))
        if self._typed(key, "a number", number is not None):
            return number
        return None

    def get_bool(self, key: str) -> bool | None:
        value = self._properties.get(key)
        if self._typed(key, "a boolean", isinstance(value, bool)):
            return value
        return None

    def get_string(self, key: str) -> str | None:
        value = self._properties.get(key)
        if self._typed(key, "a string", isinstance(value, str)):
            return value
        return None

    def get_url(self, key: str) -> str | None:
        """Return the string value if it parses as an absolute URL."""
        raw = self.get_string(key)
        if raw is None:
            return None
        return parse_url(raw)

    def get_mapping(self, key: str) -> Mapping[str, Any] | None:
        value = self._properties.get(key)
        if self._typed(key, "an object", isinstance(value, Mapping)):
            return value
        return None

    def get_string_array(self, key: str) -> list[str] | None:
        value = self._properties.get(key)
        ok = _is_array(value) and all(isinstance(item, str) for item in value)
        if self._typed(key, "an array of strings", ok):
            return list(value)
        return None

    def get_number_array(
        self, key: str, length: int | None = None
    ) -> list[float] | None:
        """
        Return an array of numbers.

        Args:
            key: Record key
            length: If given, the exact number of elements required
        """
        value = self._properties.get(key)
        numbers = [_as_float(item) for item in value] if _is_array(value) else None
        ok = numbers is not None and None not in numbers
        if ok and length is not None:
            ok = len(numbers) == length
        if self._typed(key, "an array of numbers", ok):
            return numbers
        return None

    def get_coordinate_pairs(
        self, key: str, count: int | None = None
    ) -> list[list[float]] | None:
        """Return an array of ``[longitude, latitude]`` pairs."""
        value = self._properties.get(key)
        ok = _is_array(value) and all(
            _is_array(pair) and len(pair) == 2 for pair in value
        )
        pairs = [[_as_float(n) for n in pair] for pair in value] if ok else []
        ok = ok and all(None not in pair for pair in pairs)
        if ok and count is not None:
            ok = len(pairs) == count
        if self._typed(key, "an array of coordinate pairs", ok):
            return pairs
        return None
