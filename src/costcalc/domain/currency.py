"""Currency formatting for cost reports.

Money is rendered through an explicit `CurrencyFormat` rather than the process
locale, so the same amount always renders the same way. Rounding uses
banker's rounding (``ROUND_HALF_EVEN``) at the configured number of decimal
places.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal


@dataclass(frozen=True, slots=True)
class CurrencyFormat:
    """Immutable description of how money amounts are displayed.

    Conventions:
      - `symbol` is placed before the amount (e.g. ``"Rs"``, ``"$"``).
      - `symbol_separator` goes between the symbol and the digits.
      - `grouping_separator` splits thousands; `decimal_separator` precedes
        the fractional digits.
      - `decimal_places` must be a non-negative integer.
    """

    symbol: str = "Rs"
    symbol_separator: str = " "
    grouping_separator: str = ","
    decimal_separator: str = "."
    decimal_places: int = 2

    def __post_init__(self) -> None:
        if self.decimal_places < 0:
            raise ValueError("decimal_places must be a non-negative integer")


DEFAULT_CURRENCY = CurrencyFormat()


def round_money(amount: float, places: int = 2) -> Decimal:
    """Round ``amount`` to ``places`` decimals using ROUND_HALF_EVEN.

    The float is converted through its shortest ``repr`` so that values like
    ``23.04`` are treated as written rather than as their binary expansion.
    """
    quantum = Decimal(1).scaleb(-places)
    return Decimal(repr(float(amount))).quantize(quantum, rounding=ROUND_HALF_EVEN)


def format_currency(amount: float, fmt: CurrencyFormat = DEFAULT_CURRENCY) -> str:
    """Render ``amount`` as a currency string.

    Args:
        amount: The amount to render.
        fmt: Display rules; defaults to `DEFAULT_CURRENCY`.

    Returns:
        str: e.g. ``"Rs 1,234.50"``; negative amounts get a leading minus
        sign before the symbol (``"-Rs 5.00"``).

    Example:
        >>> format_currency(1234.5)
        'Rs 1,234.50'
    """
    rounded = round_money(amount, fmt.decimal_places)
    sign = "-" if rounded < 0 else ""
    digits = f"{abs(rounded):,.{fmt.decimal_places}f}"
    digits = digits.translate(
        str.maketrans({",": fmt.grouping_separator, ".": fmt.decimal_separator})
    )
    return f"{sign}{fmt.symbol}{fmt.symbol_separator}{digits}"
