"""Configuration utilities for STOREFRONT.

This module centralizes the environment variables STOREFRONT reads and turns
them into a frozen `Settings` object.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

OPENING_HOUR_KEY = "STOREFRONT_OPENING_HOUR"
CLOSING_HOUR_KEY = "STOREFRONT_CLOSING_HOUR"
EXCHANGE_RATES_KEY = "STOREFRONT_EXCHANGE_RATES"
DECLINED_INSTRUMENTS_KEY = "STOREFRONT_DECLINED_INSTRUMENTS"

DEFAULT_OPENING_HOUR = 8
DEFAULT_CLOSING_HOUR = 20
DEFAULT_EXCHANGE_RATES = {"PLN": 4.0, "EUR": 0.92, "GBP": 0.79}


class ConfigurationError(Exception):
    """Raised when an environment variable holds a malformed value."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {key}={value!r}: {reason}")
        self.key = key
        self.value = value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for STOREFRONT."""

    opening_hour: int = DEFAULT_OPENING_HOUR
    closing_hour: int = DEFAULT_CLOSING_HOUR
    exchange_rates: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_EXCHANGE_RATES)
    )
    declined_instruments: tuple[str, ...] = ()


def split_items(value: str) -> list[str]:
    """Split a comma/space separated list into its non-empty items."""
    return [s for s in re.split(r"[,\s]+", value) if s]


def _get_int(environ: Mapping[str, str], key: str, default: int) -> int:
    if not (raw := environ.get(key)):
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(key, raw, "expected an integer") from e


def _check_store_hours(opening: int, closing: int) -> None:
    if not 0 <= opening < 24:
        raise ConfigurationError(OPENING_HOUR_KEY, str(opening), "expected 0-23")
    if not 0 < closing <= 24:
        raise ConfigurationError(CLOSING_HOUR_KEY, str(closing), "expected 1-24")
    if opening >= closing:
        raise ConfigurationError(
            OPENING_HOUR_KEY, str(opening), f"must be before {CLOSING_HOUR_KEY}={closing}"
        )


def parse_exchange_rates(value: str) -> dict[str, float]:
    """Parse `CODE=RATE` pairs into a code->rate mapping.

    Raises:
        ConfigurationError: If an item is not CODE=RATE or RATE is not a
            positive number.
    """
    rates: dict[str, float] = {}
    for item in split_items(value):
        try:
            code, rate_str = item.split("=", 1)
            rate = float(rate_str)
        except ValueError as e:
            raise ConfigurationError(
                EXCHANGE_RATES_KEY, item, "expected CODE=RATE"
            ) from e
        if not code.strip():
            raise ConfigurationError(EXCHANGE_RATES_KEY, item, "expected CODE=RATE")
        if rate <= 0:
            raise ConfigurationError(EXCHANGE_RATES_KEY, item, "rate must be positive")
        rates[code.strip().upper()] = rate
    return rates


def get_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from the environment.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`.

    Returns:
        Settings with defaults applied for unset variables.

    Raises:
        ConfigurationError: If any variable is set to a malformed value, or
            the store hours are outside 0-24 or do not open before closing.
    """
    environ = os.environ if environ is None else environ
    rates = (
        parse_exchange_rates(raw)
        if (raw := environ.get(EXCHANGE_RATES_KEY))
        else dict(DEFAULT_EXCHANGE_RATES)
    )
    opening = _get_int(environ, OPENING_HOUR_KEY, DEFAULT_OPENING_HOUR)
    closing = _get_int(environ, CLOSING_HOUR_KEY, DEFAULT_CLOSING_HOUR)
    _check_store_hours(opening, closing)
    return Settings(
        opening_hour=opening,
        closing_hour=closing,
        exchange_rates=rates,
        declined_instruments=tuple(
            split_items(environ.get(DECLINED_INSTRUMENTS_KEY, ""))
        ),
    )
