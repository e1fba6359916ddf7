"""Display formatting helpers for amounts and ratios"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

Number = Union[int, float]


def to_plain_number(value: Number) -> Number:
    """Drop the fractional part of integral floats (100000.0 -> 100000)"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_percent(ratio: float) -> str:
    """
    Render a ratio as a percentage with one decimal (0.553 -> '55.3%').

    Ties on the exact binary value round away from zero, as JavaScript's
    ``toFixed`` does (0.0025 -> '0.3%'); format specs would round to even.
    """
    value = ratio * 100
    if not math.isfinite(value):
        return f"{value:.1f}%"

    with localcontext() as ctx:
        ctx.prec = 400  # enough digits for any finite double at one decimal
        rounded = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

    if rounded == 0:
        rounded = Decimal("0.0")  # no '-0.0%'
    return f"{rounded}%"


def group_indian(digits: str) -> str:
    """Insert separators using Indian grouping: last three digits, then pairs"""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return ",".join(groups + [tail])


def format_amount(amount: Number) -> str:
    """
    Format an amount the way en-IN locales do.

    Examples:
        100000   -> '1,00,000'
        1234.5   -> '1,234.5'
        -2500000 -> '-25,00,000'
    """
    whole, _, fraction = f"{abs(amount):.2f}".partition(".")
    fraction = fraction.rstrip("0")

    formatted = group_indian(whole)
    if fraction:
        formatted = f"{formatted}.{fraction}"

    # Amounts that round to zero never carry a sign
    if amount < 0 and formatted != "0":
        return f"-{formatted}"
    return formatted


def format_inr(amount: Number, symbol: str = "INR ") -> str:
    """Amount with currency prefix, e.g. 'INR 1,00,000' or '₹1,00,000'"""
    return f"{symbol}{format_amount(amount)}"
