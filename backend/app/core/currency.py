"""
Currency display helpers.

Amounts are kept as bare numbers everywhere else in the application; these
helpers only turn a number and a currency code into a display string.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Union

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "C$",
    "CHF": "CHF",
    "NOK": "NOK",
    "PLN": "PLN",
}

CENT = Decimal("0.01")


def is_supported_currency(code: str) -> bool:
    """Check whether a currency code can be selected for a split."""
    return bool(code) and code.upper() in CURRENCY_SYMBOLS


def get_currency_symbol(code: str) -> str:
    """Return the display symbol for a currency, or the code itself if unknown."""
    return CURRENCY_SYMBOLS.get(code.upper(), code)


def format_amount(amount: Union[Decimal, float, int], code: str) -> str:
    """Format an amount with its currency symbol and two decimals, e.g. ``$50.00``."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{get_currency_symbol(code)}{value:.2f}"
