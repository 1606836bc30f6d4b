# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Base configuration provider interface."""

import logging
import re
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1
U16_MAX = 2**16 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_unsigned(value: Any, maximum: int = U64_MAX) -> int | None:
    """Parse an unsigned integer literal, returning None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= maximum else None
    if not isinstance(value, str) or not _UNSIGNED_RE.fullmatch(value):
        return None
    digits = value.lstrip("+").lstrip("0")
    if len(digits) > len(str(maximum)):
        return None
    parsed = int(digits or "0")
    return parsed if parsed <= maximum else None


def parse_bool(value: Any) -> bool | None:
    """Parse the canonical boolean literals ``true`` and ``false``."""
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def parse_float(value: Any) -> float | None:
    """Parse a floating-point literal, returning None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str) or value != value.strip() or "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class ConfigProvider(ABC):
    """Abstract base class for configuration providers.

    Subclasses only implement the raw ``get`` lookup. The typed getters share
    one set of parsing rules: a value that is absent or cannot be parsed
    yields the caller's default and never raises.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw configuration value."""
        raise NotImplementedError

    def get_str(self, key: str, default: str = "") -> str:
        """Get a string configuration value."""
        value = self.get(key)
        if value is None:
            return default
        return str(value)

    def get_optional(self, key: str) -> str | None:
        """Get a string value, or None when the key is absent."""
        value = self.get(key)
        if value is None:
            return None
        return str(value)

    def get_int(self, key: str, default: int = 0, maximum: int = U64_MAX) -> int:
        """Get an unsigned integer configuration value."""
        value = self.get(key)
        if value is None:
            return default
        parsed = parse_unsigned(value, maximum)
        if parsed is None:
            self._log_fallback(key, value, default)
            return default
        return parsed

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a boolean configuration value."""
        value = self.get(key)
        if value is None:
            return default
        parsed = parse_bool(value)
        if parsed is None:
            self._log_fallback(key, value, default)
            return default
        return parsed

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get a floating-point configuration value."""
        value = self.get(key)
        if value is None:
            return default
        parsed = parse_float(value)
        if parsed is None:
            self._log_fallback(key, value, default)
            return default
        return parsed

    def get_duration(self, key: str, default: timedelta) -> timedelta:
        """Get a duration expressed in whole seconds."""
        value = self.get(key)
        if value is None:
            return default
        seconds = parse_unsigned(value)
        if seconds is None:
            self._log_fallback(key, value, default)
            return default
        try:
            return timedelta(seconds=seconds)
        except OverflowError:
            self._log_fallback(key, value, default)
            return default

    def _log_fallback(self, key: str, value: Any, default: Any) -> None:
        logger.warning(
            "%s: invalid value %r for %s, using default %r",
            type(self).__name__,
            value,
            key,
            default,
        )
