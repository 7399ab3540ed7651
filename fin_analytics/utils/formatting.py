"""Display formatting for summary tiles."""

from typing import Any

from ..data.normalizer import normalize_amount, round_half_up

PLACEHOLDER = "—"

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def format_currency(value: Any,
                    currency: str = "USD",
                    placeholder: str = PLACEHOLDER,
                    max_fraction_digits: int = 0) -> str:
    """
    Format an amount as currency, e.g. ``$1,234,567``.

    Args:
        value: Raw or normalized amount
        currency: ISO currency code; codes without a symbol are used as prefix
        placeholder: Text returned when the value cannot be normalized
        max_fraction_digits: Decimal places shown

    Returns:
        Formatted amount or the placeholder
    """
    number = normalize_amount(value)
    if number is None:
        return placeholder

    rounded = round_half_up(number, max_fraction_digits)
    digits = f"{abs(rounded):,.{max_fraction_digits}f}"

    code = currency.upper()
    symbol = _CURRENCY_SYMBOLS.get(code)
    body = f"{symbol}{digits}" if symbol else f"{code} {digits}"

    return f"-{body}" if rounded < 0 else body


def format_percent(value: Any, precision: int = 2, placeholder: str = PLACEHOLDER) -> str:
    """Format a percentage such as a growth rate, e.g. ``15.50%``."""
    number = normalize_amount(value)
    if number is None:
        return placeholder
    return f"{round_half_up(number, precision):.{precision}f}%"
