"""Configuration utilities for COSTCALC.

This module centralizes small helpers and constants related to application
configuration. Currency display can be overridden through environment
variables; everything else is a constant.
"""

import os
from collections.abc import Mapping

from costcalc.domain.calculation import DEFAULT_TAX_RATE
from costcalc.domain.currency import DEFAULT_CURRENCY, CurrencyFormat

__all__ = [
    "CUSTOM_DISCOUNT_MAX_PERCENT",
    "CUSTOM_TAX_MAX_PERCENT",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TAX_RATE",
    "STANDARD_TAX_RATE",
    "InvalidCurrencyConfigError",
    "get_currency_format",
]

STANDARD_TAX_RATE = DEFAULT_TAX_RATE
CUSTOM_TAX_MAX_PERCENT = 25.0
CUSTOM_DISCOUNT_MAX_PERCENT = 50.0
DEFAULT_MAX_ATTEMPTS = 3

CURRENCY_SYMBOL_ENV = "COSTCALC_CURRENCY_SYMBOL"  # pragma: no mutate
CURRENCY_SEPARATOR_ENV = "COSTCALC_CURRENCY_SEPARATOR"  # pragma: no mutate
GROUPING_SEPARATOR_ENV = "COSTCALC_GROUPING_SEPARATOR"  # pragma: no mutate
DECIMAL_SEPARATOR_ENV = "COSTCALC_DECIMAL_SEPARATOR"  # pragma: no mutate
DECIMAL_PLACES_ENV = "COSTCALC_DECIMAL_PLACES"  # pragma: no mutate


class InvalidCurrencyConfigError(Exception):
    """Raised when a currency environment variable holds an unusable value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"{name} must be a non-negative integer, got {value!r}")
        self.name = name
        self.value = value


def _parse_decimal_places(raw: str) -> int:
    try:
        places = int(raw)
    except ValueError as e:
        raise InvalidCurrencyConfigError(DECIMAL_PLACES_ENV, raw) from e
    if places < 0:
        raise InvalidCurrencyConfigError(DECIMAL_PLACES_ENV, raw)
    return places


def get_currency_format(
    environ: Mapping[str, str] | None = None,
    symbol: str | None = None,
) -> CurrencyFormat:
    """Build the currency format from the environment.

    Unset variables fall back to `DEFAULT_CURRENCY` (``Rs 1,234.56``).
    Separators may legitimately be empty strings, so only a missing
    variable means "use the default".

    Args:
        environ: Mapping to read from. Defaults to `os.environ`.
        symbol: Explicit symbol, taking precedence over the environment
            (used by the CLI's ``--currency-symbol`` option).

    Returns:
        The resolved `CurrencyFormat`.

    Raises:
        InvalidCurrencyConfigError: If `COSTCALC_DECIMAL_PLACES` is not a
            non-negative integer.
    """
    env = os.environ if environ is None else environ
    places = DEFAULT_CURRENCY.decimal_places
    if (raw_places := env.get(DECIMAL_PLACES_ENV)) is not None:
        places = _parse_decimal_places(raw_places)
    return CurrencyFormat(
        symbol=(
            symbol
            if symbol is not None
            else env.get(CURRENCY_SYMBOL_ENV, DEFAULT_CURRENCY.symbol)
        ),
        symbol_separator=env.get(
            CURRENCY_SEPARATOR_ENV, DEFAULT_CURRENCY.symbol_separator
        ),
        grouping_separator=env.get(
            GROUPING_SEPARATOR_ENV, DEFAULT_CURRENCY.grouping_separator
        ),
        decimal_separator=env.get(
            DECIMAL_SEPARATOR_ENV, DEFAULT_CURRENCY.decimal_separator
        ),
        decimal_places=places,
    )
