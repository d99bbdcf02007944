"""Configuration utilities for PennyWise.

Settings come from environment variables and are read on every call, so tests
(and long-running processes) see changes without re-importing anything.
"""

import logging
import os
import re

DEFAULT_CURRENCY_ENV = "PENNYWISE_DEFAULT_CURRENCY"  # pragma: no mutate
LOG_LEVEL_ENV = "PENNYWISE_LOG_LEVEL"  # pragma: no mutate
LOGGER_LEVELS_ENV = "PENNYWISE_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_CURRENCY = "BRL"
DEFAULT_LOG_LEVEL = logging.WARNING

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


class ConfigurationError(Exception):
    """Base class for invalid PennyWise settings."""


class InvalidDefaultCurrencyError(ConfigurationError):
    """Raised when PENNYWISE_DEFAULT_CURRENCY is not an ISO 4217 code."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{DEFAULT_CURRENCY_ENV} must be 3 uppercase letters, got {value!r}"
        )
        self.value = value


class InvalidLogLevelError(ConfigurationError):
    """Raised when a log level setting names no logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid log level: {value!r}")
        self.value = value


def get_default_currency() -> str:
    """Get the currency used when Money is built without one.

    Returns:
        The value of `PENNYWISE_DEFAULT_CURRENCY`, or ``"BRL"`` when unset.

    Raises:
        InvalidDefaultCurrencyError: If the variable is set to anything other
            than three uppercase letters.
    """
    if not (currency := os.environ.get(DEFAULT_CURRENCY_ENV, "").strip()):
        return DEFAULT_CURRENCY
    if not _CURRENCY_PATTERN.match(currency):
        raise InvalidDefaultCurrencyError(currency)
    return currency


def get_log_level() -> int:
    """Get the console log level.

    Accepts a level name (``"debug"``, ``"INFO"``...) or a number.

    Raises:
        InvalidLogLevelError: If the value is neither.
    """
    if not (raw := os.environ.get(LOG_LEVEL_ENV, "").strip()):
        return DEFAULT_LOG_LEVEL
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise InvalidLogLevelError(raw)
    return level


def get_logger_levels() -> dict[str, int]:
    """Get per-logger level overrides from `PENNYWISE_LOGGER_LEVELS`.

    The variable holds ``NAME=LEVEL`` items separated by commas or spaces,
    e.g. ``"pennywise.domain=DEBUG, rich=ERROR"``.

    Raises:
        InvalidLogLevelError: If an item is malformed or names no level.
    """
    # imported here: pennywise.logging imports this module
    from pennywise.logging import parse_logger_levels  # pylint: disable=import-outside-toplevel

    raw = os.environ.get(LOGGER_LEVELS_ENV, "")
    try:
        return parse_logger_levels(raw)
    except ValueError as e:
        raise InvalidLogLevelError(raw) from e
