"""
Decimal helpers for revenue amounts.

Amounts travel as exact decimal text ("100.00") and are only turned into
numbers at calculation time. Anything that does not parse counts as zero,
and so does anything too large to be a real amount.
"""

import re
from decimal import Decimal, DecimalException, InvalidOperation, ROUND_HALF_UP

CENTS = Decimal("0.01")
ZERO = Decimal("0")

# Anything at or above this is not a revenue figure
MAX_AMOUNT = Decimal("1e15")


def _bounded(d: Decimal) -> Decimal:
    if not d.is_finite() or abs(d) >= MAX_AMOUNT:
        return ZERO
    return d


def to_decimal(value) -> Decimal:
    """Parse a user/DB value into a Decimal. Blank, invalid or huge -> 0."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return _bounded(value)
    if isinstance(value, bool):
        return ZERO
    if isinstance(value, int):
        return _bounded(Decimal(value))
    if isinstance(value, float):
        # str() first so 0.1 stays 0.1
        value = str(value)

    s = str(value).strip()
    s = re.sub(r"[$,\s]", "", s)
    if not s:
        return ZERO
    try:
        d = Decimal(s)
    except InvalidOperation:
        return ZERO
    return _bounded(d)


def money(value) -> Decimal:
    """Round to cents, half-up."""
    try:
        return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    except DecimalException:
        return ZERO.quantize(CENTS)


def format_currency(value) -> str:
    """Render an amount the way en-CA formats CAD: $1,234.50"""
    amount = money(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
