"""BRL currency formatting and parsing."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from celidone.core.config import get_settings

Number = Union[Decimal, int, float]

# Precision for monetary values (2 decimal places)
PRECISION = Decimal("0.01")

_NON_AMOUNT_CHARS = re.compile(r"[^0-9,]")


def parse_currency(value: Union[str, Number, None]) -> Decimal:
    """Convert a formatted BRL string into a Decimal.

    Every character except digits and the decimal comma is dropped, then the
    comma becomes a decimal point. Unparseable text yields Decimal("0").
    Numbers are passed through as Decimal.

    Raises:
        ValueError: If value is not a string or a number

    Examples:
        >>> parse_currency("R$ 1.234,50")
        Decimal('1234.50')
        >>> parse_currency("abc")
        Decimal('0')
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")

    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if not isinstance(value, str):
        raise ValueError(f"Invalid amount type: {type(value).__name__}")

    cleaned = _NON_AMOUNT_CHARS.sub("", value).replace(",", ".", 1)
    if not cleaned:
        return Decimal("0")

    # Only the first comma is the decimal separator; "1,2,3" keeps "1.2"
    integer, _, rest = cleaned.partition(".")
    fraction = rest.split(",", 1)[0]
    candidate = f"{integer or '0'}.{fraction}" if fraction else (integer or "0")

    try:
        return Decimal(candidate)
    except InvalidOperation:
        return Decimal("0")


def format_number(value: Union[str, Number, None], decimals: int = 2) -> str:
    """Format a number with pt-BR separators ("1.234,50")."""
    if value is None:
        return ""

    amount = parse_currency(value) if isinstance(value, str) else Decimal(str(value))
    if not amount.is_finite():
        amount = Decimal("0")
    quantum = Decimal(1).scaleb(-decimals)
    amount = amount.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{amount:,.{decimals}f}".replace(",", "X").replace(".", ",").replace("X", ".")


def format_currency(value: Union[str, Number, None], symbol: Optional[str] = None) -> str:
    """Format value as Brazilian currency ("R$ 1.234,50").

    Strings are parsed with parse_currency first; None renders as zero.
    """
    symbol = symbol if symbol is not None else get_settings().currency_symbol
    if value is None:
        value = Decimal("0")

    formatted = format_number(value, decimals=2)
    if formatted.startswith("-"):
        return f"-{symbol} {formatted[1:]}"
    return f"{symbol} {formatted}"


def to_cents(value: Number) -> Decimal:
    """Round a monetary value to cents."""
    return Decimal(str(value)).quantize(PRECISION, rounding=ROUND_HALF_UP)
