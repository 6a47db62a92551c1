"""
Display formatting for ratios and money.

Every formatter is total: absent or unparseable input yields the
placeholder instead of raising.
"""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from auslastung.config.settings import CURRENCY_SUFFIX, MISSING_VALUE

ZERO_PERCENT = "0%"

# Leading decimal literal; surrounding whitespace and trailing text are ignored
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_CENTS = Decimal("0.01")

# Wide enough for every finite float with two decimals
_CURRENCY_CONTEXT = Context(prec=400)


def parse_number(value: Any) -> float | None:
    """
    Parse a number or numeric string.

    Strings are read by their leading decimal literal, so ``"0.5 "`` and
    ``"100.5 EUR"`` parse while ``"abc"`` does not. Booleans are not
    numbers.

    Args:
        value: Raw field value.

    Returns:
        Finite float, or None when the value is not a usable number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if match is None:
            return None
        number = float(match.group(1))
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def format_percent(value: Any) -> str:
    """
    Format a ratio as a whole percentage.

    Zero, absent and unparseable values all render as ``"0%"``. Halves
    round up, so 0.005 renders as ``"1%"``. Out-of-range ratios are
    rendered as they are.
    """
    number = parse_number(value)
    if not number:
        return ZERO_PERCENT
    try:
        percent = math.floor(number * 100 + 0.5)
    except OverflowError:
        return ZERO_PERCENT
    return f"{percent}%"


def format_currency(
    value: Any,
    suffix: str = CURRENCY_SUFFIX,
    missing: str = MISSING_VALUE,
) -> str:
    """
    Format an amount with exactly two decimals and a currency suffix.

    Halves round away from zero on the exact binary value, so 0.125
    renders as ``"0.13 EUR"``.

    Args:
        value: Amount as number or numeric string.
        suffix: Currency label appended after a space.
        missing: Placeholder for unparseable amounts.
    """
    number = parse_number(value)
    if number is None:
        return missing
    if number == 0:
        number = 0.0
    amount = Decimal(number).quantize(
        _CENTS, rounding=ROUND_HALF_UP, context=_CURRENCY_CONTEXT
    )
    return f"{amount} {suffix}"
